"""Tests for tree walking and the base visitor."""

from texdsl import Document, Item, document
from texdsl.nodes import Command, Container, Element, Text
from texdsl.visitor import BaseVisitor, walk


def sample() -> Document:
    return document(
        lambda d: (
            d.usepackage("babel"),
            d.itemize(lambda it: it.item(lambda i: i.text("one"))),
            d.text("tail"),
        )
    )


class KindCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.kinds: list[str] = []

    def visit_document(self, node: Document) -> None:
        self.kinds.append("document")

    def visit_item(self, node: Item) -> None:
        self.kinds.append("item")

    def visit_container(self, node: Container) -> None:
        self.kinds.append(f"container:{node.name}")

    def visit_command(self, node: Command) -> None:
        self.kinds.append(f"command:{node.name}")

    def visit_text(self, node: Text) -> None:
        self.kinds.append(f"text:{node.text}")


class TestWalk:
    def test_preorder(self) -> None:
        names = [getattr(n, "name", None) or getattr(n, "text", "") for n in walk(sample())]
        assert names == ["document", "usepackage", "itemize", "item", "one", "tail"]

    def test_leaf(self) -> None:
        leaf = Text("x")
        assert list(walk(leaf)) == [leaf]

    def test_walk_order_matches_render_order(self) -> None:
        doc = sample()
        rendered = doc.render_to_string()
        texts = [n.text for n in walk(doc) if isinstance(n, Text)]
        positions = [rendered.index(t) for t in texts]
        assert positions == sorted(positions)


class TestBaseVisitor:
    def test_dispatch(self) -> None:
        collector = KindCollector()
        collector.visit(sample())
        assert collector.kinds == [
            "document",
            "command:usepackage",
            "container:itemize",
            "item",
            "text:one",
            "text:tail",
        ]

    def test_fallbacks(self) -> None:
        class ContainerCounter(BaseVisitor[None]):
            def __init__(self) -> None:
                self.count = 0

            def visit_container(self, node: Container) -> None:
                self.count += 1

        counter = ContainerCounter()
        counter.visit(sample())
        # document, itemize and item all fall back to visit_container
        assert counter.count == 3

    def test_default_returns_none(self) -> None:
        assert BaseVisitor().visit(sample()) is None

    def test_return_value_from_root(self) -> None:
        class Namer(BaseVisitor[str]):
            def visit_default(self, node: Element) -> str:
                return type(node).__name__

        assert Namer().visit(sample()) == "Document"
