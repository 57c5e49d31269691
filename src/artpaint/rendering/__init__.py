# topmark:header:start
#
#   project      : ArtPaint
#   file         : __init__.py
#   file_relpath : src/artpaint/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styled rendering of designs.

See [`artpaint.rendering.renderer`][] for the rendering contract.
"""

from __future__ import annotations

from artpaint.rendering.renderer import (
    StyledRun,
    iter_runs,
    render,
    render_document,
    render_plain,
    split_lines,
)

__all__: list[str] = [
    "StyledRun",
    "iter_runs",
    "render",
    "render_document",
    "render_plain",
    "split_lines",
]
