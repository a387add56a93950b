"""Tests for texdsl.serialization."""

import json

from texdsl import document
from texdsl.serialization import to_dict, to_json


def sample():
    return document(
        lambda d: (
            d.usepackage("babel", "russian"),
            d.frame(lambda f: f.text("body"), ("z", "1"), ("a", "2"), frame_title="T"),
        )
    )


class TestToDict:
    def test_structure(self) -> None:
        data = to_dict(sample())
        assert data["type"] == "Document"
        assert data["name"] == "document"
        assert data["attributes"] == {}
        package, frame = data["children"]
        assert package == {
            "type": "UsePackage",
            "name": "usepackage",
            "parameter": "babel",
            "flags": ["russian"],
        }
        assert frame["type"] == "Frame"
        assert frame["children"][0]["type"] == "FrameTitle"
        assert frame["children"][1] == {"type": "Text", "text": "body"}

    def test_attribute_order_kept(self) -> None:
        frame = to_dict(sample())["children"][1]
        assert list(frame["attributes"]) == ["z", "a"]


class TestToJson:
    def test_valid_json(self) -> None:
        assert json.loads(to_json(sample())) == to_dict(sample())

    def test_deterministic(self) -> None:
        assert to_json(sample()) == to_json(sample())

    def test_attribute_order_in_text(self) -> None:
        text = to_json(sample())
        assert text.index('"z"') < text.index('"a"')

    def test_non_ascii_kept(self) -> None:
        doc = document(lambda d: d.text("Привет"))
        assert "Привет" in to_json(doc, indent=2)
