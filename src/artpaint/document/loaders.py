# topmark:header:start
#
#   project      : ArtPaint
#   file         : loaders.py
#   file_relpath : src/artpaint/document/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and parse ArtPaint documents.

This module provides I/O helpers for reading a document from:
- a filesystem path, or
- STDIN, when the source specifier is ``-``.

TOML parsing is done with `tomlkit`, JSON parsing with the standard `json`
module. Both are returned as plain `dict` structures in the JSON object model
(TOML dates and times become ISO 8601 strings) so the validator and the decoder
see the exact same data.

The syntax is chosen by the caller only. The file extension is never consulted.
"""

from __future__ import annotations

import datetime as dt
import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from artpaint.config.logging import get_logger
from artpaint.constants import STDIN_SOURCE
from artpaint.core.errors import (
    DocumentNotFoundError,
    DocumentPermissionError,
    DocumentReadError,
    MalformedDocument,
)
from artpaint.core.formats import DEFAULT_INPUT_FORMAT, InputFormat
from artpaint.document.decode import decode_document
from artpaint.document.keys import DocKey

if TYPE_CHECKING:
    from typing import TextIO

    from artpaint.config.logging import ArtpaintLogger
    from artpaint.document.model import Document

logger: ArtpaintLogger = get_logger(__name__)

_BOM = "\ufeff"


def read_source(source: str, *, stdin: TextIO | None = None) -> str:
    """Return the full text of a document source.

    Args:
        source (str): A filesystem path, or ``-`` to read STDIN until end of stream.
        stdin (TextIO | None): Stream used for ``-``; defaults to ``sys.stdin``.

    Returns:
        str: The document text, without a leading byte-order mark.

    Raises:
        DocumentNotFoundError: If the path does not exist or is a directory.
        DocumentPermissionError: If the path may not be read.
        DocumentReadError: For any other OS-level read failure.
        MalformedDocument: If the bytes are not valid UTF-8.
    """
    if source == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin
        try:
            text = stream.read()
        except OSError as exc:
            raise DocumentReadError(source, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise MalformedDocument("UTF-8", str(exc)) from exc
        logger.debug("Read %d character(s) from STDIN", len(text))
        return text.removeprefix(_BOM)

    path = Path(source)
    try:
        data: bytes = path.read_bytes()
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise DocumentNotFoundError(source, exc.strerror or str(exc)) from exc
    except PermissionError as exc:
        raise DocumentPermissionError(source, exc.strerror or str(exc)) from exc
    except OSError as exc:
        raise DocumentReadError(source, exc.strerror or str(exc)) from exc

    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedDocument("UTF-8", str(exc)) from exc
    logger.debug("Read %d byte(s) from %s", len(data), path)
    return text


def _check_text(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError(
            f"invalid string {value!r}: lone surrogate at position {exc.start}"
        ) from exc
    return value


def to_canonical(value: object) -> object:
    """Convert parsed TOML/JSON values into the JSON object model.

    Mappings become `dict` with string keys, sequences become `list`, and TOML
    date/time values become ISO 8601 strings. Other scalars are returned as-is.

    Raises:
        ValueError: If a key or string value holds a lone surrogate (not
            encodable as UTF-8).
    """
    if isinstance(value, Mapping):
        m = cast("Mapping[object, object]", value)
        return {_check_text(str(k)): to_canonical(v) for k, v in m.items()}
    if isinstance(value, (list, tuple)):
        return [to_canonical(v) for v in cast("list[object]", value)]
    if isinstance(value, str):
        return _check_text(value)
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    return value


def _reject_dated_text(data: object) -> None:
    # ``design`` and ``styles`` must be TOML strings, not dates rendered as text.
    if not isinstance(data, Mapping):
        return
    root = cast("Mapping[str, object]", data)
    for key in (DocKey.DESIGN, DocKey.STYLES):
        value = root.get(key)
        if isinstance(value, (dt.datetime, dt.date, dt.time)):
            raise ValueError(f"{key}: expected a string, found {type(value).__name__}")


def parse_mapping(text: str, fmt: InputFormat | None = None) -> Any:
    """Parse document text in the given syntax into the JSON object model.

    Args:
        text (str): The document text.
        fmt (InputFormat | None): The syntax to use; TOML when ``None``.

    Returns:
        Any: The parsed document (usually a `dict`).

    Raises:
        MalformedDocument: If the text is not valid in the selected syntax, holds
            an integer literal too long to convert, nests too deeply or holds a
            string that is not valid Unicode.
    """
    fmt = fmt or DEFAULT_INPUT_FORMAT
    try:
        if fmt is InputFormat.JSON:
            return to_canonical(json.loads(text))
        data: Any = tomlkit.parse(text).unwrap()
        _reject_dated_text(data)
        return to_canonical(data)
    except (TOMLKitError, ValueError, RecursionError) as exc:
        logger.debug("Cannot parse %s document: %s", fmt.label, type(exc).__name__)
        raise MalformedDocument(fmt.label, str(exc) or type(exc).__name__) from exc


def loads_document(text: str, fmt: InputFormat | None = None) -> Document:
    """Parse and decode document text.

    Args:
        text (str): The document text.
        fmt (InputFormat | None): The syntax to use; TOML when ``None``.

    Returns:
        Document: The decoded document.

    Raises:
        MalformedDocument: If parsing or decoding fails.
    """
    fmt = fmt or DEFAULT_INPUT_FORMAT
    data = parse_mapping(text, fmt)
    document = decode_document(data, syntax=fmt.label)
    logger.debug(
        "Decoded %s document with %d style tag(s)", fmt.label, len(document.style_map)
    )
    return document


def load_document(
    source: str,
    fmt: InputFormat | None = None,
    *,
    stdin: TextIO | None = None,
) -> Document:
    """Read, parse and decode a document from a path or STDIN.

    Args:
        source (str): A filesystem path, or ``-`` for STDIN.
        fmt (InputFormat | None): The syntax to use; TOML when ``None``.
        stdin (TextIO | None): Stream used for ``-``; defaults to ``sys.stdin``.

    Returns:
        Document: The decoded document.
    """
    return loads_document(read_source(source, stdin=stdin), fmt)
