# topmark:header:start
#
#   project      : ArtPaint
#   file         : test_compiler.py
#   file_relpath : tests/style/test_compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the style compiler."""

from __future__ import annotations

from artpaint.style.compiler import compile_style, compile_style_map
from artpaint.style.model import (
    EMPTY_STYLE,
    Attribute,
    FixedColor,
    NamedColor,
    Style,
    StyleSpec,
)


def test_empty_descriptor_compiles_to_empty_style() -> None:
    style = compile_style(StyleSpec())
    assert style is EMPTY_STYLE
    assert style.is_empty


def test_attributes_collapse_into_a_set() -> None:
    spec = StyleSpec(attributes=(Attribute.BOLD, Attribute.ITALIC, Attribute.BOLD))
    assert compile_style(spec).attributes == frozenset({Attribute.BOLD, Attribute.ITALIC})


def test_equal_descriptors_compile_to_equal_styles() -> None:
    a = StyleSpec(foreground=NamedColor.RED, attributes=(Attribute.BOLD, Attribute.ITALIC))
    b = StyleSpec(foreground=NamedColor.RED, attributes=(Attribute.ITALIC, Attribute.BOLD))
    assert compile_style(a) == compile_style(b)
    assert hash(compile_style(a)) == hash(compile_style(b))


def test_colors_are_copied() -> None:
    spec = StyleSpec(foreground=FixedColor(1), background=NamedColor.WHITE)
    assert compile_style(spec) == Style(foreground=FixedColor(1), background=NamedColor.WHITE)


def test_compile_style_map_keeps_tags() -> None:
    compiled = compile_style_map({"x": StyleSpec(foreground=NamedColor.RED), ".": StyleSpec()})
    assert set(compiled) == {"x", "."}
    assert compiled["."] is EMPTY_STYLE
