"""Scoped builder protocol and the element vocabulary built on it.

Every construction function is a thin call to :meth:`BodyContainer.build`,
which runs in a fixed order:

1. the construction function instantiates the element and pre-populates
   any fixed children (for example a frame's title);
2. ``init(element)`` runs with the new element as its only argument;
3. a container element's attributes are replaced by the attribute pairs
   (emptied when none are given);
4. the element is appended to this container and returned.

While step 2 runs this container is locked, and so is everything already
attached below it. An init routine that reaches past the element it was
handed, say through a closure over an enclosing or sibling container,
gets a :class:`~texdsl.errors.ScopeError` instead of silently attaching
children to the wrong parent:

    >>> from texdsl import document
    >>> doc = document(lambda d: d.itemize(lambda it: d.text("oops")))  # doctest: +ELLIPSIS
    Traceback (most recent call last):
    ...
    texdsl.errors.ScopeError: Cannot add to 'document' while 'itemize' is being built; ...

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias, TypeVar

from texdsl.nodes import Command, Container, Element
from texdsl.protocols import TextSink

T = TypeVar("T")
E = TypeVar("E", bound="Element")

Init: TypeAlias = Callable[[T], object]


class BodyContainer(Container):
    """Container that can build the full body vocabulary."""

    __slots__ = ()

    def build(
        self,
        element: E,
        init: Init[E] | None = None,
        *attributes: tuple[str, str],
    ) -> E:
        """Initialize ``element``, attach it as the last child and return it.

        Args:
            element: Freshly constructed, unattached element
            init: Routine receiving ``element`` as its sole argument
            *attributes: ``(key, value)`` pairs assigned to a container element

        """
        self._ensure_open()
        if init is not None:
            self._active = element
            try:
                init(element)
            finally:
                self._active = None
        if isinstance(element, Container):
            element.attributes = dict(attributes)
        self.append(element)
        return element

    # -- Commands ----------------------------------------------------------

    def document_class(self, parameter: str, *flags: str) -> DocumentClass:
        return self.build(DocumentClass(parameter, flags))

    def usepackage(self, name: str, *flags: str) -> UsePackage:
        return self.build(UsePackage(name, flags))

    def command(self, name: str, parameter: str = "", *flags: str) -> Command:
        """Append an arbitrary ``\\name[flags]{parameter}`` command."""
        return self.build(Command(parameter, flags, name=name))

    # -- Environments ------------------------------------------------------

    def frame(
        self,
        init: Init[Frame],
        *attributes: tuple[str, str],
        frame_title: str | None = None,
    ) -> Frame:
        """Build a frame; ``frame_title`` becomes its first child."""
        frame = Frame()
        if frame_title is not None:
            frame.append(FrameTitle(frame_title))
        return self.build(frame, init, *attributes)

    def itemize(self, init: Init[Itemize], *attributes: tuple[str, str]) -> Itemize:
        return self.build(Itemize(), init, *attributes)

    def enumerate(self, init: Init[Enumerate], *attributes: tuple[str, str]) -> Enumerate:
        return self.build(Enumerate(), init, *attributes)

    def math(self, init: Init[Math]) -> Math:
        return self.build(Math(), init)

    def flushleft(self, init: Init[FlushLeft]) -> FlushLeft:
        return self.build(FlushLeft(), init)

    def flushright(self, init: Init[FlushRight]) -> FlushRight:
        return self.build(FlushRight(), init)

    def center(self, init: Init[Center]) -> Center:
        return self.build(Center(), init)

    def custom_tag(
        self,
        name: str,
        init: Init[CustomTag],
        *attributes: tuple[str, str],
    ) -> CustomTag:
        """Build an environment with a caller-chosen name."""
        return self.build(CustomTag(name), init, *attributes)


class ListContainer(BodyContainer):
    """List environment; the only place items can be built."""

    __slots__ = ()

    def item(self, init: Init[Item]) -> Item:
        return self.build(Item(), init)


class Item(BodyContainer):
    """List entry: a bare ``\\item`` line followed by its children, no end line."""

    __slots__ = ()

    default_name = "item"

    def render_begin(self, sink: TextSink, indent: str) -> None:
        sink.write(f"{indent}\\item\n")

    def render_end(self, sink: TextSink, indent: str) -> None:
        pass


# =============================================================================
# Vocabulary
# =============================================================================


class DocumentClass(Command):
    __slots__ = ()
    default_name = "documentclass"


class UsePackage(Command):
    __slots__ = ()
    default_name = "usepackage"


class FrameTitle(Command):
    __slots__ = ()
    default_name = "frametitle"


class Frame(BodyContainer):
    __slots__ = ()
    default_name = "frame"


class Itemize(ListContainer):
    __slots__ = ()
    default_name = "itemize"


class Enumerate(ListContainer):
    __slots__ = ()
    default_name = "enumerate"


class Math(BodyContainer):
    __slots__ = ()
    default_name = "gather*"


class FlushLeft(BodyContainer):
    __slots__ = ()
    default_name = "flushleft"


class FlushRight(BodyContainer):
    __slots__ = ()
    default_name = "flushright"


class Center(BodyContainer):
    __slots__ = ()
    default_name = "center"


class CustomTag(BodyContainer):
    __slots__ = ()

    def __init__(self, name: str) -> None:
        super().__init__(name)
