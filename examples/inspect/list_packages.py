"""Collect the packages a document loads and dump its tree as JSON."""

from texdsl import BaseVisitor, Command, document, to_json


class PackageCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.packages: list[str] = []

    def visit_command(self, node: Command) -> None:
        if node.name == "usepackage":
            self.packages.append(node.parameter)


doc = document(
    lambda d: (
        d.document_class("article"),
        d.usepackage("amsmath"),
        d.usepackage("babel", "english"),
        d.center(lambda c: c.text("Centered")),
    )
)

collector = PackageCollector()
collector.visit(doc)
print("packages:", ", ".join(collector.packages))
print(to_json(doc, indent=2))
