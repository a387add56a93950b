"""Build a beamer slide and print it, zero config and zero deps."""

from texdsl import document


def slide(frame):
    frame.itemize(
        lambda it: (
            it.item(lambda i: i.text("Scoped builders")),
            it.item(lambda i: i.text("Indented output")),
        )
    )
    frame.math(lambda m: m.text("e^{i\\pi} + 1 = 0"))


doc = document(
    lambda d: (
        d.document_class("beamer"),
        d.usepackage("babel", "russian"),
        d.frame(slide, ("fragile", "true"), frame_title="Hello"),
    )
)
print(doc.render_to_string(), end="")
