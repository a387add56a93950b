"""
texdsl — Scoped builder for LaTeX-style documents

Build a document tree through nested builder calls, then render it as
indented markup text.

Quick Start:
    >>> from texdsl import document
    >>> doc = document(lambda d: (
    ...     d.document_class("beamer"),
    ...     d.usepackage("babel", "russian"),
    ...     d.frame(lambda f: f.itemize(lambda it: it.item(lambda i: i.text("first"))),
    ...             ("arg1", "arg2"), frame_title="Title"),
    ... ))
    >>> print(doc, end="")
    \\begin{document}
      \\documentclass{beamer}
      \\usepackage[russian]{babel}
      \\begin{frame}[arg1=arg2]
        \\frametitle{Title}
        \\begin{itemize}
          \\item
            first
        \\end{itemize}
      \\end{frame}
    \\end{document}

Each init routine receives only the element it builds. Builder calls on
an enclosing container from inside a child's init routine raise
ScopeError, so children always land where the nesting says they do.

Text, parameters and attribute values are emitted verbatim: nothing is
escaped or validated.
"""

from texdsl.attributes import format_attributes, format_flags, format_options
from texdsl.builder import (
    BodyContainer,
    Center,
    CustomTag,
    DocumentClass,
    Enumerate,
    FlushLeft,
    FlushRight,
    Frame,
    FrameTitle,
    Item,
    Itemize,
    ListContainer,
    Math,
    UsePackage,
)
from texdsl.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from texdsl.document import Document, document
from texdsl.errors import AttachmentError, BuildError, ConfigError, ScopeError, TexDslError
from texdsl.nodes import Command, Container, Element, Text
from texdsl.protocols import TextSink
from texdsl.renderer import TreeRenderer, render, render_to_string
from texdsl.serialization import to_dict, to_json
from texdsl.visitor import BaseVisitor, walk

__version__ = "0.1.0"

__all__ = [
    # Entry point
    "document",
    "Document",
    # Elements
    "Element",
    "Text",
    "Command",
    "Container",
    "BodyContainer",
    "ListContainer",
    "Item",
    "DocumentClass",
    "UsePackage",
    "FrameTitle",
    "Frame",
    "Itemize",
    "Enumerate",
    "Math",
    "FlushLeft",
    "FlushRight",
    "Center",
    "CustomTag",
    # Rendering
    "TreeRenderer",
    "TextSink",
    "render",
    "render_to_string",
    "format_attributes",
    "format_flags",
    "format_options",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Inspection
    "BaseVisitor",
    "walk",
    "to_dict",
    "to_json",
    # Errors
    "TexDslError",
    "BuildError",
    "AttachmentError",
    "ScopeError",
    "ConfigError",
]
