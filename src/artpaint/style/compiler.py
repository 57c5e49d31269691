# topmark:header:start
#
#   project      : ArtPaint
#   file         : compiler.py
#   file_relpath : src/artpaint/style/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compile style descriptors into concrete styles.

A compiled [`Style`][artpaint.style.model.Style] is a pure function of its
descriptor: attributes collapse into a set and colors are copied over. No
validation happens here; every value was checked when the document was decoded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from artpaint.config.logging import get_logger
from artpaint.style.model import EMPTY_STYLE, Style

if TYPE_CHECKING:
    from collections.abc import Mapping

    from artpaint.config.logging import ArtpaintLogger
    from artpaint.style.model import StyleSpec

logger: ArtpaintLogger = get_logger(__name__)


def compile_style(spec: StyleSpec) -> Style:
    """Return the concrete style described by ``spec``.

    Args:
        spec (StyleSpec): The style descriptor from the document.

    Returns:
        Style: The compiled style; `EMPTY_STYLE` when the descriptor sets nothing.
    """
    attributes = frozenset(spec.attributes)
    if spec.foreground is None and spec.background is None and not attributes:
        return EMPTY_STYLE
    return Style(
        foreground=spec.foreground,
        background=spec.background,
        attributes=attributes,
    )


def compile_style_map(style_map: Mapping[str, StyleSpec]) -> dict[str, Style]:
    """Compile every entry of a style map.

    Args:
        style_map (Mapping[str, StyleSpec]): Tag character to style descriptor.

    Returns:
        dict[str, Style]: Tag character to compiled style.
    """
    compiled: dict[str, Style] = {tag: compile_style(spec) for tag, spec in style_map.items()}
    logger.debug("Compiled %d style tag(s)", len(compiled))
    return compiled
