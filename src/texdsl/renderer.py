"""Indentation-aware tree renderer.

Walks the tree depth-first: each element writes its begin line, a
container's children follow one ``indent_unit`` deeper, then the element
writes its end line. Rendering reads the tree and writes the sink; it
never modifies either the tree or the renderer.

Example:
    >>> from texdsl.nodes import Container
    >>> center = Container("center")
    >>> _ = center.text("hi")
    >>> TreeRenderer().render_to_string(center)
    '\\\\begin{center}\\n  hi\\n\\\\end{center}\\n'

Thread Safety:
    A TreeRenderer holds only its immutable config; output state lives in
    the sink passed to each call.

"""

from texdsl.config import RenderConfig, get_render_config
from texdsl.nodes import Container, Element
from texdsl.protocols import TextSink
from texdsl.stringbuilder import StringBuilder


class TreeRenderer:
    """Render an element tree to a text sink."""

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config if config is not None else get_render_config()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, node: Element, sink: TextSink, indent: str = "") -> None:
        """Render ``node`` and its subtree at the given indentation."""
        node.render_begin(sink, indent)
        match node:
            case Container():
                child_indent = indent + self._config.indent_unit
                for child in node.children:
                    self.render(child, sink, child_indent)
        node.render_end(sink, indent)

    def render_to_string(self, node: Element, indent: str = "") -> str:
        """Render ``node`` into a new string."""
        sb = StringBuilder()
        self.render(node, sb, indent)
        return sb.build()


def render(node: Element, sink: TextSink, indent: str = "") -> None:
    """Render ``node`` to ``sink`` using the active RenderConfig."""
    TreeRenderer().render(node, sink, indent)


def render_to_string(node: Element, *, config: RenderConfig | None = None) -> str:
    """Render ``node`` to a string.

    Args:
        node: Root of the subtree to render (rendered at depth 0)
        config: Render settings; the active context config when None

    """
    return TreeRenderer(config).render_to_string(node)
