# topmark:header:start
#
#   project      : ArtPaint
#   file         : formats.py
#   file_relpath : src/artpaint/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input syntaxes and output formats shared across ArtPaint frontends.

This module centralizes the format vocabulary so CLI commands and the public API
agree on it without introducing `Click` or console dependencies.
"""

from __future__ import annotations

from enum import Enum

from artpaint.core.enum_mixins import KeyedStrEnum


class InputFormat(KeyedStrEnum):
    """Textual syntax of an input document.

    Both syntaxes decode to the same document. TOML ("syntax A") is the default;
    JSON ("syntax B") is the canonical object form used by the schema and the
    validator. The file extension is never consulted.

    Attributes:
        TOML: Table-oriented configuration syntax (alias ``a``).
        JSON: Structured object/value syntax (alias ``b``).
    """

    TOML = ("toml", "TOML", ("a",))
    JSON = ("json", "JSON", ("b",))


DEFAULT_INPUT_FORMAT: InputFormat = InputFormat.TOML


class OutputFormat(str, Enum):
    """Output format for informational commands (e.g. ``version``).

    Attributes:
        TEXT: Human-friendly text output.
        JSON: A single JSON document (machine-readable, never colored).
    """

    TEXT = "text"
    JSON = "json"
