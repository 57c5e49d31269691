# topmark:header:start
#
#   project      : ArtPaint
#   file         : __init__.py
#   file_relpath : src/artpaint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run-time configuration helpers for ArtPaint.

ArtPaint has no configuration file: the document is its only input. This
package holds the logging setup shared by the CLI and the API.
"""

from __future__ import annotations

__all__: list[str] = []
