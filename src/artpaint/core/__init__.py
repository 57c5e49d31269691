# topmark:header:start
#
#   project      : ArtPaint
#   file         : __init__.py
#   file_relpath : src/artpaint/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, frontend-agnostic building blocks for ArtPaint.

This package holds the pieces shared by the loader, the renderer and the CLI
that must not depend on Click or on a console:

- ``artpaint.core.errors``: domain exceptions.
- ``artpaint.core.enum_mixins``: enum helpers (`KeyedStrEnum`).
- ``artpaint.core.formats``: input syntaxes and output formats.
"""

from __future__ import annotations

__all__: list[str] = []
