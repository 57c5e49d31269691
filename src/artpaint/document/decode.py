# topmark:header:start
#
#   project      : ArtPaint
#   file         : decode.py
#   file_relpath : src/artpaint/document/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode a parsed document mapping into a typed [`Document`][artpaint.document.model.Document].

The decoder accepts exactly the structures the published schema accepts
(see [`artpaint.document.schema`][]), so ``validate`` and ``render`` agree on
which documents are well-formed:

- ``design`` and ``styles`` are required strings, ``style_map`` a required table;
- style-map keys are single code points;
- colors are a named color string, ``{"Fixed": n}`` or ``{"RGB": [r, g, b]}``
  with every number an integer in [0, 255];
- ``foreground``, ``background`` and the attribute lists are optional and may be
  ``null``; the attribute list is read from ``styles`` and from its alias
  ``attributes`` (concatenated in that order);
- unknown keys are ignored.

Every failure raises [`MalformedDocument`][artpaint.core.errors.MalformedDocument]
whose message names the offending location.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from artpaint.core.errors import MalformedDocument
from artpaint.document.keys import DocKey
from artpaint.document.model import Document
from artpaint.style.model import (
    COMPONENT_MAX,
    COMPONENT_MIN,
    Attribute,
    FixedColor,
    NamedColor,
    RgbColor,
    StyleSpec,
)

if TYPE_CHECKING:
    from artpaint.style.model import Color


class _DecodeError(Exception):
    """Internal signal carrying a location-qualified message."""

    def __init__(self, where: str, message: str) -> None:
        self.where = where
        super().__init__(f"{where}: {message}" if where else message)


def _type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, Mapping):
        return "table"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _join(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def _require_unicode(value: str, where: str) -> str:
    if not value.isascii():
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise _DecodeError(where, f"lone surrogate at position {exc.start}") from exc
    return value


def _require_str(data: Mapping[str, object], key: str) -> str:
    if key not in data:
        raise _DecodeError("", f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise _DecodeError(key, f"expected a string, found {_type_name(value)}")
    return _require_unicode(value, key)


def _decode_component(value: object, where: str) -> int:
    """Decode one palette index or RGB component."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _DecodeError(where, f"expected an integer, found {_type_name(value)}")
    if isinstance(value, float):
        if not value.is_integer():
            raise _DecodeError(where, f"expected an integer, found {value!r}")
        value = int(value)
    if not COMPONENT_MIN <= value <= COMPONENT_MAX:
        raise _DecodeError(
            where, f"{value} is out of range, expected {COMPONENT_MIN}..={COMPONENT_MAX}"
        )
    return value


def _decode_color(value: object, where: str) -> Color:
    """Decode a color value.

    Args:
        value (object): The raw value (string or single-key table).
        where (str): Location used in error messages.

    Returns:
        Color: The decoded color.

    Raises:
        _DecodeError: If the value is not a valid color.
    """
    if isinstance(value, str):
        try:
            return NamedColor(value)
        except ValueError:
            expected = ", ".join(f"`{c.value}`" for c in NamedColor)
            raise _DecodeError(
                where,
                f"unknown variant `{value}`, expected one of {expected}, "
                f"`{DocKey.FIXED}`, `{DocKey.RGB}`",
            ) from None

    if not isinstance(value, Mapping):
        raise _DecodeError(where, f"expected a color, found {_type_name(value)}")

    table = cast("Mapping[str, object]", value)
    if len(table) != 1:
        raise _DecodeError(
            where, f"expected a table with exactly one key (`{DocKey.FIXED}` or `{DocKey.RGB}`)"
        )
    tag, payload = next(iter(table.items()))
    inner = _join(where, tag)
    if tag == DocKey.FIXED:
        return FixedColor(_decode_component(payload, inner))
    if tag == DocKey.RGB:
        if not isinstance(payload, list):
            raise _DecodeError(inner, f"expected an array, found {_type_name(payload)}")
        items = cast("list[object]", payload)
        if len(items) != 3:
            raise _DecodeError(inner, f"expected 3 components, found {len(items)}")
        r, g, b = (_decode_component(item, f"{inner}[{i}]") for i, item in enumerate(items))
        return RgbColor(r, g, b)
    raise _DecodeError(
        where, f"unknown variant `{tag}`, expected `{DocKey.FIXED}` or `{DocKey.RGB}`"
    )


def _decode_attributes(value: object, where: str) -> list[Attribute]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise _DecodeError(where, f"expected an array, found {_type_name(value)}")
    out: list[Attribute] = []
    for i, item in enumerate(cast("list[object]", value)):
        item_where = f"{where}[{i}]"
        if not isinstance(item, str):
            raise _DecodeError(item_where, f"expected a string, found {_type_name(item)}")
        try:
            out.append(Attribute(item))
        except ValueError:
            expected = ", ".join(f"`{a.value}`" for a in Attribute)
            raise _DecodeError(
                item_where, f"unknown variant `{item}`, expected one of {expected}"
            ) from None
    return out


def _decode_style_spec(value: object, where: str) -> StyleSpec:
    """Decode one style-map entry.

    Args:
        value (object): The raw descriptor (a table).
        where (str): Location used in error messages.

    Returns:
        StyleSpec: The decoded descriptor.

    Raises:
        _DecodeError: If the descriptor is invalid.
    """
    if not isinstance(value, Mapping):
        raise _DecodeError(where, f"expected a table, found {_type_name(value)}")
    table = cast("Mapping[str, object]", value)

    foreground: Color | None = None
    background: Color | None = None
    raw_fg = table.get(DocKey.FOREGROUND)
    if raw_fg is not None:
        foreground = _decode_color(raw_fg, _join(where, DocKey.FOREGROUND))
    raw_bg = table.get(DocKey.BACKGROUND)
    if raw_bg is not None:
        background = _decode_color(raw_bg, _join(where, DocKey.BACKGROUND))

    attributes = _decode_attributes(table.get(DocKey.ATTRIBUTES), _join(where, DocKey.ATTRIBUTES))
    attributes += _decode_attributes(
        table.get(DocKey.ATTRIBUTES_ALIAS), _join(where, DocKey.ATTRIBUTES_ALIAS)
    )
    return StyleSpec(
        foreground=foreground,
        background=background,
        attributes=tuple(attributes),
    )


def _decode_style_map(value: object) -> dict[str, StyleSpec]:
    where = DocKey.STYLE_MAP
    if not isinstance(value, Mapping):
        raise _DecodeError(where, f"expected a table, found {_type_name(value)}")
    out: dict[str, StyleSpec] = {}
    for tag, spec in cast("Mapping[object, object]", value).items():
        if not isinstance(tag, str) or len(tag) != 1:
            raise _DecodeError(where, f"invalid key {tag!r}, expected a single character")
        _require_unicode(tag, where)
        out[tag] = _decode_style_spec(spec, _join(where, tag))
    return out


def decode_document(data: object, *, syntax: str) -> Document:
    """Decode a parsed mapping into a [`Document`][artpaint.document.model.Document].

    Args:
        data (object): The parsed document (plain dicts, lists and scalars).
        syntax (str): Label of the source syntax, used in error messages.

    Returns:
        Document: The typed document.

    Raises:
        MalformedDocument: If the structure does not describe a valid document.
    """
    try:
        if not isinstance(data, Mapping):
            raise _DecodeError("", f"expected a table at the top level, found {_type_name(data)}")
        root = cast("Mapping[str, object]", data)
        design = _require_str(root, DocKey.DESIGN)
        styles = _require_str(root, DocKey.STYLES)
        if DocKey.STYLE_MAP not in root:
            raise _DecodeError("", f"missing field `{DocKey.STYLE_MAP}`")
        style_map = _decode_style_map(root[DocKey.STYLE_MAP])
    except _DecodeError as exc:
        raise MalformedDocument(syntax, str(exc)) from exc
    return Document(design=design, styles=styles, style_map=style_map)
