# topmark:header:start
#
#   project      : ArtPaint
#   file         : constants.py
#   file_relpath : src/artpaint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

ARTPAINT_VERSION: str = get_version("artpaint")

# Source specifier meaning "read the document from STDIN".
STDIN_SOURCE: Final[str] = "-"

ESC: Final[str] = "\x1b"
SGR_RESET: Final[str] = f"{ESC}[0m"

LINE_FEED: Final[str] = "\n"
CRLF: Final[str] = "\r\n"

# JSON Schema dialect used for the published document schema.
SCHEMA_DIALECT: Final[str] = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_TITLE: Final[str] = "Input"
