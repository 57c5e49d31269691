# topmark:header:start
#
#   project      : ArtPaint
#   file         : sgr.py
#   file_relpath : src/artpaint/style/sgr.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SGR (Select Graphic Rendition) encoding of compiled styles.

A non-empty style is written as ``ESC [ p1 ; p2 ; ... m``. Parameters are emitted
in a fixed order so output is byte-for-byte reproducible:

1. attribute codes, ascending (Bold=1 ... Strikethrough=9);
2. the foreground color (30-37, ``38;5;n`` or ``38;2;r;g;b``);
3. the background color (40-47, ``48;5;n`` or ``48;2;r;g;b``).

Example:
    ```python
    style = Style(foreground=NamedColor.GREEN, attributes=frozenset({Attribute.BOLD}))
    assert sgr_prefix(style) == "\\x1b[1;32m"
    ```
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from artpaint.constants import ESC, SGR_RESET
from artpaint.style.model import FixedColor, NamedColor, RgbColor

if TYPE_CHECKING:
    from artpaint.style.model import Color, Style

FOREGROUND_BASE: Final[int] = 30
BACKGROUND_BASE: Final[int] = 40
# Offset from the base code that introduces an extended (256/RGB) color.
EXTENDED_OFFSET: Final[int] = 8
PALETTE_SELECTOR: Final[int] = 5
RGB_SELECTOR: Final[int] = 2

# Matches any SGR sequence (parameters are digits and semicolons).
SGR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")


def color_params(color: Color, *, base: int) -> list[int]:
    """Return the SGR parameters selecting ``color``.

    Args:
        color (Color): The color to encode.
        base (int): `FOREGROUND_BASE` or `BACKGROUND_BASE`.

    Returns:
        list[int]: The numeric parameters, in emission order.

    Raises:
        TypeError: If ``color`` is not one of the known color variants.
    """
    if isinstance(color, NamedColor):
        return [base + color.index]
    if isinstance(color, FixedColor):
        return [base + EXTENDED_OFFSET, PALETTE_SELECTOR, color.index]
    if isinstance(color, RgbColor):
        return [base + EXTENDED_OFFSET, RGB_SELECTOR, color.r, color.g, color.b]
    raise TypeError(f"Unsupported color value: {color!r}")


def sgr_params(style: Style) -> list[int]:
    """Return the ordered SGR parameters for ``style`` (empty for the empty style)."""
    params: list[int] = sorted(attr.sgr_code for attr in style.attributes)
    if style.foreground is not None:
        params.extend(color_params(style.foreground, base=FOREGROUND_BASE))
    if style.background is not None:
        params.extend(color_params(style.background, base=BACKGROUND_BASE))
    return params


def sgr_prefix(style: Style) -> str:
    """Return the escape sequence that switches the terminal to ``style``.

    The empty style has no prefix.
    """
    params = sgr_params(style)
    if not params:
        return ""
    return f"{ESC}[{';'.join(str(p) for p in params)}m"


def paint(text: str, style: Style) -> str:
    """Wrap ``text`` in the SGR prefix for ``style`` and a trailing reset.

    Text painted with the empty style is returned unchanged.
    """
    if not text or style.is_empty:
        return text
    return f"{sgr_prefix(style)}{text}{SGR_RESET}"


def strip_sgr(text: str) -> str:
    """Remove every SGR escape sequence from ``text``."""
    return SGR_PATTERN.sub("", text)
