"""Tree serialization to JSON-compatible dicts, for debugging and inspection.

Example:
    from texdsl import document
    from texdsl.serialization import to_json

    doc = document(lambda d: d.usepackage("babel", "russian"))
    print(to_json(doc, indent=2))

Attribute dicts keep insertion order, so keys are never sorted: the same
tree always produces the same output, in the order it renders.

"""

import json
from typing import Any

from texdsl.nodes import Command, Container, Element, Text


def to_dict(node: Element) -> dict[str, Any]:
    """Convert an element and its subtree to a plain dict."""
    match node:
        case Text():
            return {"type": "Text", "text": node.text}
        case Command():
            return {
                "type": type(node).__name__,
                "name": node.name,
                "parameter": node.parameter,
                "flags": list(node.flags),
            }
        case Container():
            return {
                "type": type(node).__name__,
                "name": node.name,
                "attributes": dict(node.attributes),
                "children": [to_dict(child) for child in node.children],
            }
        case _:
            return {"type": type(node).__name__}


def to_json(node: Element, *, indent: int | None = None) -> str:
    """Serialize an element and its subtree to a JSON string."""
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)
