"""Document root and the top-level ``document()`` builder.

Example:
    >>> from texdsl import document
    >>> doc = document(lambda d: d.center(lambda c: c.text("hi")))
    >>> print(doc.render_to_string(), end="")
    \\begin{document}
      \\begin{center}
        hi
      \\end{center}
    \\end{document}

"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from typing import BinaryIO

from texdsl.builder import BodyContainer
from texdsl.config import RenderConfig, get_render_config
from texdsl.protocols import TextSink
from texdsl.renderer import TreeRenderer
from texdsl.utils.logger import get_logger

logger = get_logger(__name__)


class Document(BodyContainer):
    """Root of a document tree.

    Owns the whole tree. Created once per document by :func:`document` and
    discarded after rendering.

    """

    __slots__ = ()

    default_name = "document"

    def render_to_stream(
        self,
        sink: TextSink | BinaryIO,
        *,
        config: RenderConfig | None = None,
    ) -> None:
        """Render the document to ``sink`` and flush it.

        Text sinks receive ``str`` chunks. Binary streams receive the whole
        document encoded with ``config.encoding``. Errors raised by the sink
        propagate unchanged.

        """
        config = config if config is not None else get_render_config()
        renderer = TreeRenderer(config)
        if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
            sink.write(renderer.render_to_string(self).encode(config.encoding))
        else:
            renderer.render(self, sink)
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()
        self._log_rendered()

    def render_to_string(self, *, config: RenderConfig | None = None) -> str:
        """Render the document into a new string."""
        text = TreeRenderer(config).render_to_string(self)
        self._log_rendered()
        return text

    def _log_rendered(self) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            from texdsl.visitor import walk

            logger.debug("Rendered document with %d elements", sum(1 for _ in walk(self)))

    def __str__(self) -> str:
        return self.render_to_string()


def document(init: Callable[[Document], object]) -> Document:
    """Build a document.

    ``init`` receives the new root as its only argument and populates it
    through the builder methods.

    """
    doc = Document()
    init(doc)
    return doc
