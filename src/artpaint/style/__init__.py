# topmark:header:start
#
#   project      : ArtPaint
#   file         : __init__.py
#   file_relpath : src/artpaint/style/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style model, style compiler and SGR encoding."""

from __future__ import annotations

from artpaint.style.compiler import compile_style, compile_style_map
from artpaint.style.model import (
    EMPTY_STYLE,
    Attribute,
    Color,
    FixedColor,
    NamedColor,
    RgbColor,
    Style,
    StyleSpec,
)
from artpaint.style.sgr import paint, sgr_params, sgr_prefix, strip_sgr

__all__: list[str] = [
    "EMPTY_STYLE",
    "Attribute",
    "Color",
    "FixedColor",
    "NamedColor",
    "RgbColor",
    "Style",
    "StyleSpec",
    "compile_style",
    "compile_style_map",
    "paint",
    "sgr_params",
    "sgr_prefix",
    "strip_sgr",
]
