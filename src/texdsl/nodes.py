"""Document tree elements for texdsl.

Every element renders itself in two steps: ``render_begin`` writes the
opening line(s), ``render_end`` the closing line. The tree renderer calls
``render_begin``, recurses into a container's children one indentation
level deeper, then calls ``render_end``.

Element Hierarchy:
Element (base)
├── Text          literal line
├── Command       \\name[flags]{parameter}
└── Container     \\begin{name}[k=v] ... \\end{name}

Elements are mutable only while the tree is being built. A container's
children are append-only, and every element has at most one parent:
the tree never shares nodes and never contains cycles.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import ClassVar

from texdsl.attributes import Options, format_flags, format_options
from texdsl.errors import AttachmentError, ScopeError
from texdsl.protocols import TextSink
from texdsl.utils.logger import get_logger

logger = get_logger(__name__)


class Element:
    """Base class for all tree elements."""

    __slots__ = ("_parent",)

    def __init__(self) -> None:
        self._parent: Container | None = None

    @property
    def parent(self) -> Container | None:
        """Container this element is attached to, or None."""
        return self._parent

    @property
    def label(self) -> str:
        """Short human-readable name used in error messages."""
        return type(self).__name__

    def render_begin(self, sink: TextSink, indent: str) -> None:
        raise NotImplementedError

    def render_end(self, sink: TextSink, indent: str) -> None:
        pass


class Text(Element):
    """A literal line of text."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    @property
    def label(self) -> str:
        return "text"

    def render_begin(self, sink: TextSink, indent: str) -> None:
        sink.write(f"{indent}{self.text}\n")

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


class Command(Element):
    """A single-line command with one parameter and bare flags.

    Renders as ``\\name[flag1, flag2]{parameter}``. Subclasses fix the
    name through ``default_name``.

    """

    __slots__ = ("name", "parameter", "flags")

    default_name: ClassVar[str] = ""

    def __init__(
        self,
        parameter: str = "",
        flags: Iterable[str] = (),
        *,
        name: str | None = None,
    ) -> None:
        super().__init__()
        self.name = name if name is not None else self.default_name
        self.parameter = parameter
        self.flags: list[str] = list(flags)

    @property
    def label(self) -> str:
        return self.name

    def render_begin(self, sink: TextSink, indent: str) -> None:
        sink.write(f"{indent}\\{self.name}{format_flags(self.flags)}{{{self.parameter}}}\n")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, parameter={self.parameter!r})"


class Container(Element):
    """An environment owning an ordered sequence of children.

    ``attributes`` is a read-only view of an insertion-ordered dict:
    insertion order is output order, and writing a key twice keeps the
    last value. Write through ``set_attribute`` or by assigning a new
    mapping to ``attributes``.

    """

    __slots__ = ("name", "_attributes", "_children", "_active")

    default_name: ClassVar[str] = ""

    def __init__(self, name: str | None = None) -> None:
        super().__init__()
        self.name = name if name is not None else self.default_name
        self._attributes: dict[str, str] = {}
        self._children: list[Element] = []
        # Child whose init routine is running; set while this container is locked
        self._active: Element | None = None

    @property
    def label(self) -> str:
        return self.name

    @property
    def attributes(self) -> Mapping[str, str]:
        """Attributes in insertion order (read-only view)."""
        return MappingProxyType(self._attributes)

    @attributes.setter
    def attributes(self, value: Options) -> None:
        self._ensure_open()
        self._attributes = dict(value)

    def set_attribute(self, key: str, value: str) -> None:
        """Set one attribute; a repeated key keeps its position and takes the new value."""
        self._ensure_open()
        self._attributes[key] = value

    @property
    def children(self) -> tuple[Element, ...]:
        """Children in insertion order (read-only view)."""
        return tuple(self._children)

    def append(self, element: Element) -> Element:
        """Attach an element as the last child.

        Raises:
            ScopeError: This container, or one of its ancestors, is locked
                by an init routine building a different branch
            AttachmentError: The element already has a parent, is still
                building a child of its own, or attaching it would create
                a cycle

        """
        self._ensure_open()
        if element._parent is not None:
            logger.debug("Rejected re-attachment of %r to %r", element, self.name)
            raise AttachmentError(
                element.label, f"already a child of '{element._parent.label}'"
            )
        if isinstance(element, Container) and element._active is not None:
            # Only an enclosing builder can be mid-build while this call runs
            raise AttachmentError(
                element.label, f"still building '{element._active.label}'"
            )
        ancestor: Container | None = self
        while ancestor is not None:
            if ancestor is element:
                raise AttachmentError(element.label, "a container cannot contain itself")
            ancestor = ancestor._parent
        element._parent = self
        self._children.append(element)
        return element

    def text(self, text: str) -> Text:
        """Append a literal line of text."""
        node = Text(text)
        self.append(node)
        return node

    def _ensure_open(self) -> None:
        # The element being built is unattached until its init returns, so
        # any attached container whose chain reaches a locked ancestor lies
        # outside the branch under construction.
        node: Container | None = self
        while node is not None:
            if node._active is not None:
                logger.debug("Builder call on %r while %r is being built", self.name, node._active.label)
                raise ScopeError(self.label, node._active.label)
            node = node._parent

    def render_begin(self, sink: TextSink, indent: str) -> None:
        sink.write(f"{indent}\\begin{{{self.name}}}{format_options(self._attributes)}\n")

    def render_end(self, sink: TextSink, indent: str) -> None:
        sink.write(f"{indent}\\end{{{self.name}}}\n")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, children={len(self._children)})"
