# topmark:header:start
#
#   project      : ArtPaint
#   file         : __init__.py
#   file_relpath : src/artpaint/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input documents: model, loaders, decoder, encoder and schema.

Typical flow:

```python
from artpaint.core.formats import InputFormat
from artpaint.document import load_document

document = load_document("banner.toml")                  # TOML (default)
document = load_document("-", InputFormat.JSON)           # JSON from STDIN
```
"""

from __future__ import annotations

from artpaint.document.encode import encode_json, encode_toml, to_mapping
from artpaint.document.loaders import (
    load_document,
    loads_document,
    parse_mapping,
    read_source,
)
from artpaint.document.model import Document
from artpaint.document.schema import build_schema, schema_text, validate_mapping

__all__: list[str] = [
    "Document",
    "build_schema",
    "encode_json",
    "encode_toml",
    "load_document",
    "loads_document",
    "parse_mapping",
    "read_source",
    "schema_text",
    "to_mapping",
    "validate_mapping",
]
