# topmark:header:start
#
#   project      : ArtPaint
#   file         : test_enum_mixins.py
#   file_relpath : tests/core/test_enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for keyed enums and the input/output format vocabularies."""

from __future__ import annotations

from artpaint.core.formats import DEFAULT_INPUT_FORMAT, InputFormat, OutputFormat
from tests.conftest import parametrize


@parametrize(
    "token, expected",
    [
        ("toml", InputFormat.TOML),
        ("TOML", InputFormat.TOML),
        ("a", InputFormat.TOML),
        (" A ", InputFormat.TOML),
        ("json", InputFormat.JSON),
        ("b", InputFormat.JSON),
        ("B", InputFormat.JSON),
    ],
)
def test_parse_tokens(token: str, expected: InputFormat) -> None:
    assert InputFormat.parse(token) is expected


def test_parse_unknown_and_none() -> None:
    assert InputFormat.parse("yaml") is None
    assert InputFormat.parse(None) is None


def test_tokens_list_keys_then_aliases() -> None:
    assert InputFormat.tokens() == ["toml", "json", "a", "b"]


def test_member_metadata() -> None:
    assert InputFormat.JSON.key == "json"
    assert InputFormat.JSON.label == "JSON"
    assert InputFormat.JSON == "json"
    assert DEFAULT_INPUT_FORMAT is InputFormat.TOML


def test_output_formats() -> None:
    assert [f.value for f in OutputFormat] == ["text", "json"]
