# topmark:header:start
#
#   project      : ArtPaint
#   file         : keys.py
#   file_relpath : src/artpaint/document/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical key names of the ArtPaint document format.

Both input syntaxes (TOML and JSON) share one object model. These constants are
used by the decoder, the encoder and the schema builder so the three never drift.
"""

from __future__ import annotations

from typing import Final


class DocKey:
    """Keys of the document object model.

    Notes:
        - ``ATTRIBUTES`` is the canonical key of a style descriptor's attribute
          list (spelled ``styles``, like the top-level overlay);
          ``ATTRIBUTES_ALIAS`` is accepted on input only.
        - ``FIXED`` and ``RGB`` tag the palette and direct colors
          (``{"Fixed": 208}``, ``{"RGB": [10, 20, 30]}``).
    """

    # Top-level fields
    DESIGN: Final[str] = "design"
    STYLES: Final[str] = "styles"
    STYLE_MAP: Final[str] = "style_map"

    # Style descriptor fields
    FOREGROUND: Final[str] = "foreground"
    BACKGROUND: Final[str] = "background"
    ATTRIBUTES: Final[str] = "styles"
    ATTRIBUTES_ALIAS: Final[str] = "attributes"

    # Color variant tags
    FIXED: Final[str] = "Fixed"
    RGB: Final[str] = "RGB"


class SchemaDef:
    """Names of the reusable definitions in the published schema (``$defs``)."""

    STYLE_SPEC: Final[str] = "InputStyles"
    COLOR: Final[str] = "InputColor"
    ATTRIBUTE: Final[str] = "InputStyle"
