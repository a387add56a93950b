"""Tree walking and a base visitor for texdsl element trees.

Example — collect every package a document loads:

    class PackageCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.packages: list[str] = []

        def visit_command(self, node: Command) -> None:
            if node.name == "usepackage":
                self.packages.append(node.parameter)

    collector = PackageCollector()
    collector.visit(doc)

Visiting order matches rendering order: an element first, then its
children left to right.

"""

from collections.abc import Iterator
from typing import Generic, TypeVar

from texdsl.builder import Item
from texdsl.document import Document
from texdsl.nodes import Command, Container, Element, Text

T = TypeVar("T")


def walk(node: Element) -> Iterator[Element]:
    """Yield ``node`` and every element below it, in pre-order."""
    yield node
    match node:
        case Container():
            for child in node.children:
                yield from walk(child)


class BaseVisitor(Generic[T]):
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for element kinds you care
    about. Unhandled kinds fall through to the next more general method
    (``visit_item`` and ``visit_document`` to ``visit_container``, the rest
    to ``visit_default``). Children are walked automatically after the
    ``visit_*`` call.

    """

    def visit(self, node: Element) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        match node:
            case Container():
                for child in node.children:
                    self.visit(child)
        return result

    def visit_default(self, node: Element) -> T:
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_container(node)

    def visit_item(self, node: Item) -> T:
        return self.visit_container(node)

    def visit_container(self, node: Container) -> T:
        return self.visit_default(node)

    def visit_command(self, node: Command) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Element) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Item():
                return self.visit_item(node)
            case Container():
                return self.visit_container(node)
            case Command():
                return self.visit_command(node)
            case Text():
                return self.visit_text(node)
            case _:
                return self.visit_default(node)
