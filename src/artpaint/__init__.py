# topmark:header:start
#
#   project      : ArtPaint
#   file         : __init__.py
#   file_relpath : src/artpaint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint package.

ArtPaint renders ASCII art in color. A single TOML or JSON document carries the
design, a congruent overlay of style tags and a map from each tag to a terminal
style; ArtPaint emits the design with SGR escape sequences applied per glyph.
It exposes both a CLI and a small typed API for automation.
"""

from __future__ import annotations
