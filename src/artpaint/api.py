# topmark:header:start
#
#   project      : ArtPaint
#   file         : api.py
#   file_relpath : src/artpaint/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for ArtPaint.

This module exposes a small, stable surface for integrating ArtPaint into
other tools without going through the CLI. All functions are Click-free and
never print; failures are reported by raising
[`ArtpaintError`][artpaint.core.errors.ArtpaintError] subclasses.

Examples:
    ```python
    from artpaint import api

    text = api.render_text('design = "AB"\\nstyles = "xx"\\n[style_map.x]\\nforeground = "Red"\\n')
    assert text == "\\x1b[31mAB\\x1b[0m"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from artpaint.document import loaders, schema
from artpaint.rendering import renderer

if TYPE_CHECKING:
    from typing import TextIO

    from artpaint.core.formats import InputFormat
    from artpaint.document.model import Document

__all__ = [
    "load",
    "loads",
    "render",
    "render_plain",
    "render_text",
    "schema_dict",
    "schema_text",
    "validate_source",
    "validate_text",
]


def load(source: str, fmt: InputFormat | None = None, *, stdin: TextIO | None = None) -> Document:
    """Load a document from a path, or from STDIN when ``source`` is ``-``.

    Raises:
        DocumentReadError: If the source cannot be read.
        MalformedDocument: If the text cannot be decoded in the selected syntax.
    """
    return loaders.load_document(source, fmt, stdin=stdin)


def loads(text: str, fmt: InputFormat | None = None) -> Document:
    """Decode a document from text (TOML unless ``fmt`` says otherwise)."""
    return loaders.loads_document(text, fmt)


def render(document: Document) -> str:
    """Render a decoded document to an SGR-styled string.

    Raises:
        ShapeMismatch: If design and styles are not congruent.
        UnknownStyleTag: If a tag has no entry in the style map.
    """
    return renderer.render_document(document)


def render_plain(document: Document) -> str:
    """Check a document like `render` does and return the unstyled design."""
    return renderer.render_plain(document)


def render_text(text: str, fmt: InputFormat | None = None) -> str:
    """Decode and render document text in one call."""
    return renderer.render_document(loaders.loads_document(text, fmt))


def validate_text(text: str, fmt: InputFormat | None = None) -> None:
    """Validate document text against the published schema.

    The text is parsed in the selected syntax and transcoded to the JSON object
    form before validation.

    Raises:
        MalformedDocument: If the text cannot be parsed.
        SchemaViolation: If the parsed document violates the schema.
    """
    schema.validate_mapping(loaders.parse_mapping(text, fmt))


def validate_source(
    source: str,
    fmt: InputFormat | None = None,
    *,
    stdin: TextIO | None = None,
) -> None:
    """Read a document from a path or STDIN and validate it (see `validate_text`)."""
    validate_text(loaders.read_source(source, stdin=stdin), fmt)


def schema_dict() -> dict[str, Any]:
    """Return the published JSON Schema of input documents."""
    return schema.build_schema()


def schema_text() -> str:
    """Return the published JSON Schema, pretty-printed."""
    return schema.schema_text()
