# topmark:header:start
#
#   project      : ArtPaint
#   file         : encode.py
#   file_relpath : src/artpaint/document/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize a [`Document`][artpaint.document.model.Document] back to text.

The canonical form is the JSON object model described by the published schema:
absent colors and empty attribute lists are omitted, the attribute list is always
written under ``styles`` (never under the input-only ``attributes`` alias).
Decoding the output of `encode_json` or `encode_toml` yields a document equal to
the one that was encoded.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from artpaint.document.keys import DocKey
from artpaint.style.model import FixedColor, NamedColor, RgbColor

if TYPE_CHECKING:
    from collections.abc import Mapping

    from artpaint.document.model import Document
    from artpaint.style.model import Color, StyleSpec


def encode_color(color: Color) -> object:
    """Return the object-model form of ``color``.

    Raises:
        TypeError: If ``color`` is not one of the known color variants.
    """
    if isinstance(color, NamedColor):
        return color.value
    if isinstance(color, FixedColor):
        return {DocKey.FIXED: color.index}
    if isinstance(color, RgbColor):
        return {DocKey.RGB: [color.r, color.g, color.b]}
    raise TypeError(f"Unsupported color value: {color!r}")


def encode_style_spec(spec: StyleSpec) -> dict[str, Any]:
    """Return the object-model form of a style descriptor."""
    out: dict[str, Any] = {}
    if spec.foreground is not None:
        out[DocKey.FOREGROUND] = encode_color(spec.foreground)
    if spec.background is not None:
        out[DocKey.BACKGROUND] = encode_color(spec.background)
    if spec.attributes:
        out[DocKey.ATTRIBUTES] = [a.value for a in spec.attributes]
    return out


def to_mapping(document: Document) -> dict[str, Any]:
    """Return the canonical object-model form of ``document``."""
    return {
        DocKey.DESIGN: document.design,
        DocKey.STYLES: document.styles,
        DocKey.STYLE_MAP: {
            tag: encode_style_spec(spec) for tag, spec in document.style_map.items()
        },
    }


def encode_json(document: Document, *, indent: int | None = 2) -> str:
    """Serialize ``document`` as JSON (no trailing newline)."""
    return json.dumps(to_mapping(document), indent=indent, ensure_ascii=False)


def encode_toml(document: Document) -> str:
    """Serialize ``document`` as TOML."""
    # tomlkit is treated as untyped here.
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", to_mapping(document))))
