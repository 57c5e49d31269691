# topmark:header:start
#
#   project      : ArtPaint
#   file         : test_render_properties.py
#   file_relpath : tests/rendering/test_render_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the renderer.

Generated documents are always renderable (see `tests.strategies_artpaint`).
The properties checked:

1) the number of line feeds is preserved;
2) stripping escapes yields the design;
3) rendering is deterministic;
4) a style map of empty styles renders the design verbatim;
5) per-glyph spans and coalesced spans strip to the same text;
6) re-encoding as JSON and decoding yields an equal document.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from artpaint.core.formats import InputFormat
from artpaint.document.encode import encode_json
from artpaint.document.loaders import loads_document
from artpaint.document.model import Document
from artpaint.rendering.renderer import render_document, split_lines
from artpaint.style.compiler import compile_style_map
from artpaint.style.sgr import paint, strip_sgr
from tests.strategies_artpaint import s_document, s_empty_style_document

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

PROPERTY_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=100,
)


@PROPERTY_SETTINGS
@given(document=s_document())
def test_line_feeds_are_preserved(document: Document) -> None:
    assert render_document(document).count("\n") == document.design.count("\n")


@PROPERTY_SETTINGS
@given(document=s_document())
def test_stripping_escapes_yields_the_design(document: Document) -> None:
    assert strip_sgr(render_document(document)) == document.design


@PROPERTY_SETTINGS
@given(document=s_document())
def test_rendering_is_deterministic(document: Document) -> None:
    assert render_document(document) == render_document(document)


@PROPERTY_SETTINGS
@given(document=s_empty_style_document())
def test_empty_styles_are_transparent(document: Document) -> None:
    assert render_document(document) == document.design


@PROPERTY_SETTINGS
@given(document=s_document())
def test_coalescing_does_not_change_the_text(document: Document) -> None:
    style_map = compile_style_map(document.style_map)
    per_glyph = "\n".join(
        "".join(paint(glyph, style_map[tag]) for glyph, tag in zip(d_line, s_line))
        for d_line, s_line in zip(split_lines(document.design), split_lines(document.styles))
    )
    assert strip_sgr(per_glyph) == strip_sgr(render_document(document))


@PROPERTY_SETTINGS
@given(document=s_document())
def test_json_round_trip(document: Document) -> None:
    assert loads_document(encode_json(document), InputFormat.JSON) == document

