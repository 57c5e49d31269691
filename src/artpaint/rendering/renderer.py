# topmark:header:start
#
#   project      : ArtPaint
#   file         : renderer.py
#   file_relpath : src/artpaint/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a design with its styles overlay as SGR-styled text.

The renderer walks the design and the styles overlay in lockstep:

1. Both blocks are split into lines on LF (CR-LF is normalized to LF first).
   The line counts must match.
2. For each line pair the code-point counts must match.
3. Each tag is resolved through the compiled style map.
4. Adjacent glyphs sharing the same style are coalesced into a single run,
   emitted as ``ESC[<params>m<run>ESC[0m``; unstyled runs are emitted verbatim.
   Runs never cross a line break.
5. Lines are joined with LF; no trailing LF is added.

Rendering is pure and fully buffered: either the whole output string is
returned, or a [`RenderError`][artpaint.core.errors.RenderError] is raised and
nothing has been written anywhere.
"""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING, NamedTuple

from artpaint.config.logging import get_logger
from artpaint.constants import CRLF, LINE_FEED
from artpaint.core.errors import ShapeMismatch, UnknownStyleTag
from artpaint.style.compiler import compile_style_map
from artpaint.style.sgr import paint

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from artpaint.config.logging import ArtpaintLogger
    from artpaint.document.model import Document
    from artpaint.style.model import Style

logger: ArtpaintLogger = get_logger(__name__)


class StyledRun(NamedTuple):
    """A maximal run of adjacent glyphs on one line that share a style.

    Attributes:
        text: The glyphs of the run.
        style: The style applied to every glyph of the run.
    """

    text: str
    style: Style


def split_lines(text: str) -> list[str]:
    """Split a block into lines on LF after normalizing CR-LF to LF.

    A trailing LF yields a final empty line, so joining the result with LF
    restores the (normalized) input exactly.
    """
    return text.replace(CRLF, LINE_FEED).split(LINE_FEED)


def check_line_counts(design_lines: list[str], style_lines: list[str]) -> None:
    """Raise `ShapeMismatch` if the two blocks have a different number of lines."""
    expected = len(design_lines)
    actual = len(style_lines)
    if expected != actual:
        raise ShapeMismatch(
            expected=expected,
            actual=actual,
            line=min(expected, actual) + 1,
            lines=True,
        )


def resolve_line_styles(
    style_line: str,
    style_map: Mapping[str, Style],
    *,
    line_no: int,
) -> list[Style]:
    """Resolve every tag of one styles line.

    Args:
        style_line (str): The tags of the line.
        style_map (Mapping[str, Style]): Compiled tag lookup.
        line_no (int): 1-based line number, for error reporting.

    Returns:
        list[Style]: One style per tag.

    Raises:
        UnknownStyleTag: If a tag has no entry in ``style_map``.
    """
    styles: list[Style] = []
    for column, tag in enumerate(style_line, start=1):
        style = style_map.get(tag)
        if style is None:
            raise UnknownStyleTag(char=tag, line=line_no, column=column)
        styles.append(style)
    return styles


def iter_runs(
    design_line: str,
    style_line: str,
    style_map: Mapping[str, Style],
    *,
    line_no: int,
) -> Iterator[StyledRun]:
    """Yield the coalesced runs of one line pair.

    All tags of the line are resolved before the first run is yielded.

    Raises:
        ShapeMismatch: If the two lines differ in code-point count.
        UnknownStyleTag: If a tag has no entry in ``style_map``.
    """
    if len(design_line) != len(style_line):
        raise ShapeMismatch(expected=len(design_line), actual=len(style_line), line=line_no)
    styles = resolve_line_styles(style_line, style_map, line_no=line_no)
    for style, group in groupby(zip(design_line, styles), key=lambda pair: pair[1]):
        yield StyledRun("".join(glyph for glyph, _ in group), style)


def render(design: str, styles: str, style_map: Mapping[str, Style]) -> str:
    """Render ``design`` styled by the ``styles`` overlay.

    Args:
        design (str): The glyphs to display.
        styles (str): The overlay of style tags, congruent with ``design``.
        style_map (Mapping[str, Style]): Compiled tag lookup.

    Returns:
        str: The styled text, lines joined with LF, without a trailing LF.

    Raises:
        ShapeMismatch: If the overlays are not congruent.
        UnknownStyleTag: If a tag has no entry in ``style_map``.
    """
    design_lines = split_lines(design)
    style_lines = split_lines(styles)
    check_line_counts(design_lines, style_lines)

    rendered: list[str] = []
    for line_no, (design_line, style_line) in enumerate(zip(design_lines, style_lines), start=1):
        runs = list(iter_runs(design_line, style_line, style_map, line_no=line_no))
        logger.trace("Line %d: %d run(s)", line_no, len(runs))
        rendered.append("".join(paint(run.text, run.style) for run in runs))

    logger.debug("Rendered %d line(s)", len(rendered))
    return LINE_FEED.join(rendered)


def render_document(document: Document) -> str:
    """Compile the style map of ``document`` and render it."""
    return render(document.design, document.styles, compile_style_map(document.style_map))


def render_plain(document: Document) -> str:
    """Check ``document`` exactly like `render_document` but return the bare design.

    Useful to preview the glyphs without escape sequences while still reporting
    shape and tag errors.
    """
    style_map = compile_style_map(document.style_map)
    design_lines = split_lines(document.design)
    style_lines = split_lines(document.styles)
    check_line_counts(design_lines, style_lines)
    for line_no, (design_line, style_line) in enumerate(zip(design_lines, style_lines), start=1):
        # Exhaust the iterator for its checks only.
        for _ in iter_runs(design_line, style_line, style_map, line_no=line_no):
            pass
    return LINE_FEED.join(design_lines)
