# topmark:header:start
#
#   project      : ArtPaint
#   file         : test_decode.py
#   file_relpath : tests/document/test_decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for decoding parsed mappings into documents."""

from __future__ import annotations

from typing import Any

import pytest

from artpaint.core.errors import MalformedDocument
from artpaint.document.decode import decode_document
from artpaint.style.model import Attribute, FixedColor, NamedColor, RgbColor, StyleSpec
from tests.conftest import parametrize


def _doc(style_map: Any, **extra: Any) -> dict[str, Any]:
    return {"design": "A", "styles": "x", "style_map": style_map, **extra}


def test_minimal_document() -> None:
    doc = decode_document(_doc({"x": {}}), syntax="JSON")
    assert doc.design == "A"
    assert doc.styles == "x"
    assert doc.style_map == {"x": StyleSpec()}


def test_all_color_forms() -> None:
    doc = decode_document(
        _doc(
            {
                "n": {"foreground": "Purple"},
                "f": {"foreground": {"Fixed": 208}},
                "r": {"background": {"RGB": [10, 20, 30]}},
            }
        ),
        syntax="JSON",
    )
    assert doc.style_map["n"].foreground is NamedColor.PURPLE
    assert doc.style_map["f"].foreground == FixedColor(208)
    assert doc.style_map["r"].background == RgbColor(10, 20, 30)


def test_attributes_alias_is_concatenated() -> None:
    doc = decode_document(
        _doc({"x": {"styles": ["Bold"], "attributes": ["Italic", "Bold"]}}), syntax="TOML"
    )
    assert doc.style_map["x"].attributes == (Attribute.BOLD, Attribute.ITALIC, Attribute.BOLD)


def test_null_optionals_are_absent() -> None:
    doc = decode_document(
        _doc({"x": {"foreground": None, "background": None, "styles": None}}), syntax="JSON"
    )
    assert doc.style_map["x"] == StyleSpec()


def test_unknown_keys_are_ignored() -> None:
    doc = decode_document(
        _doc({"x": {"foreground": "Red", "comment": "hi"}}, title="art"), syntax="JSON"
    )
    assert doc.style_map["x"].foreground is NamedColor.RED


def test_integral_float_components_are_accepted() -> None:
    doc = decode_document(_doc({"x": {"foreground": {"Fixed": 7.0}}}), syntax="JSON")
    assert doc.style_map["x"].foreground == FixedColor(7)


def test_multibyte_tag() -> None:
    doc = decode_document(
        {"design": "A", "styles": "é", "style_map": {"é": {}}}, syntax="JSON"
    )
    assert "é" in doc.style_map


@parametrize(
    "data, fragment",
    [
        ([], "top level"),
        ({"styles": "x", "style_map": {}}, "missing field `design`"),
        ({"design": "A", "style_map": {}}, "missing field `styles`"),
        ({"design": "A", "styles": "x"}, "missing field `style_map`"),
        ({"design": 1, "styles": "x", "style_map": {}}, "design: expected a string"),
        (_doc([]), "style_map: expected a table"),
        (_doc({"xy": {}}), "single character"),
        (_doc({"": {}}), "single character"),
        (_doc({"x": None}), "style_map.x: expected a table"),
        (_doc({"x": {"foreground": "Orange"}}), "unknown variant `Orange`"),
        (_doc({"x": {"foreground": 3}}), "expected a color"),
        (_doc({"x": {"foreground": {}}}), "exactly one key"),
        (_doc({"x": {"foreground": {"Fixed": 1, "RGB": [1, 2, 3]}}}), "exactly one key"),
        (_doc({"x": {"foreground": {"Hex": "#fff"}}}), "unknown variant `Hex`"),
        (_doc({"x": {"foreground": {"Fixed": 256}}}), "256 is out of range"),
        (_doc({"x": {"foreground": {"Fixed": -1}}}), "-1 is out of range"),
        (_doc({"x": {"foreground": {"Fixed": True}}}), "found boolean"),
        (_doc({"x": {"foreground": {"Fixed": 1.5}}}), "expected an integer"),
        (_doc({"x": {"foreground": {"RGB": [1, 2]}}}), "expected 3 components"),
        (_doc({"x": {"foreground": {"RGB": "red"}}}), "expected an array"),
        (_doc({"x": {"background": {"RGB": [1, 2, 300]}}}), "background.RGB[2]"),
        (_doc({"x": {"styles": "Bold"}}), "expected an array"),
        (_doc({"x": {"styles": ["Shiny"]}}), "unknown variant `Shiny`"),
        (_doc({"x": {"attributes": [1]}}), "attributes[0]: expected a string"),
    ],
)
def test_invalid_documents(data: Any, fragment: str) -> None:
    with pytest.raises(MalformedDocument) as excinfo:
        decode_document(data, syntax="JSON")
    assert fragment in str(excinfo.value)
    assert str(excinfo.value).startswith("Invalid JSON: ")


@parametrize(
    "data, where",
    [
        ({"design": "\ud800", "styles": "x", "style_map": {"x": {}}}, "design"),
        ({"design": "A", "styles": "\udfff", "style_map": {}}, "styles"),
        ({"design": "A", "styles": "\ud800", "style_map": {"\ud800": {}}}, "styles"),
        ({"design": "A", "styles": "x", "style_map": {"\ud800": {}}}, "style_map"),
    ],
)
def test_lone_surrogates_are_rejected(data: dict[str, Any], where: str) -> None:
    with pytest.raises(MalformedDocument, match=f"^Invalid JSON: {where}: lone surrogate"):
        decode_document(data, syntax="JSON")
