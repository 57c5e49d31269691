# topmark:header:start
#
#   project      : ArtPaint
#   file         : model.py
#   file_relpath : src/artpaint/document/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory representation of an ArtPaint input document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artpaint.style.model import StyleSpec


@dataclass(frozen=True)
class Document:
    """A decoded input document.

    The loader builds it, the renderer consumes it once. Congruence of
    ``design`` and ``styles`` and coverage of the style map are *not*
    guaranteed here; the renderer enforces them.

    Attributes:
        design: The text to display, lines separated by LF.
        styles: The overlay of style tags, same shape as ``design``.
        style_map: Tag character (one code point) to style descriptor.
    """

    design: str
    styles: str
    style_map: dict[str, StyleSpec] = field(default_factory=dict)

