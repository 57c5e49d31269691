# topmark:header:start
#
#   project      : ArtPaint
#   file         : schema.py
#   file_relpath : src/artpaint/document/schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Published JSON Schema of the ArtPaint document and schema validation.

The schema is the external contract of the document format: it describes the
three-field document, the closed enumerations of colors and attributes and the
numeric ranges of palette and RGB components. The ``validate`` command checks
documents (transcoded to their JSON object form) against it with `jsonschema`.

The schema covers *structure* only. Whether ``design`` and ``styles`` have the
same shape, and whether every tag has a style, depends on content and is checked
by the renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from artpaint.config.logging import get_logger
from artpaint.constants import SCHEMA_DIALECT, SCHEMA_TITLE
from artpaint.core.errors import SchemaViolation
from artpaint.document.keys import DocKey, SchemaDef
from artpaint.style.model import COMPONENT_MAX, COMPONENT_MIN, Attribute, NamedColor

if TYPE_CHECKING:
    from jsonschema.exceptions import ValidationError

    from artpaint.config.logging import ArtpaintLogger

logger: ArtpaintLogger = get_logger(__name__)


def _ref(name: str) -> dict[str, str]:
    return {"$ref": f"#/$defs/{name}"}


def _nullable(schema: dict[str, Any]) -> dict[str, Any]:
    return {"anyOf": [schema, {"type": "null"}]}


def _component() -> dict[str, Any]:
    return {"type": "integer", "minimum": COMPONENT_MIN, "maximum": COMPONENT_MAX}


def build_schema() -> dict[str, Any]:
    """Return the JSON Schema of an input document.

    Returns:
        dict[str, Any]: A fresh, JSON-serializable schema mapping.
    """
    color: dict[str, Any] = {
        "oneOf": [
            {"type": "string", "enum": [c.value for c in NamedColor]},
            {
                "type": "object",
                "properties": {DocKey.FIXED: _component()},
                "required": [DocKey.FIXED],
                "additionalProperties": False,
            },
            {
                "type": "object",
                "properties": {
                    DocKey.RGB: {
                        "type": "array",
                        "items": _component(),
                        "minItems": 3,
                        "maxItems": 3,
                    }
                },
                "required": [DocKey.RGB],
                "additionalProperties": False,
            },
        ]
    }
    attribute_list: dict[str, Any] = _nullable(
        {"type": "array", "items": _ref(SchemaDef.ATTRIBUTE)}
    )
    style_spec: dict[str, Any] = {
        "type": "object",
        "properties": {
            DocKey.FOREGROUND: _nullable(_ref(SchemaDef.COLOR)),
            DocKey.BACKGROUND: _nullable(_ref(SchemaDef.COLOR)),
            DocKey.ATTRIBUTES: attribute_list,
            DocKey.ATTRIBUTES_ALIAS: attribute_list,
        },
    }
    return {
        "$schema": SCHEMA_DIALECT,
        "title": SCHEMA_TITLE,
        "type": "object",
        "required": [DocKey.DESIGN, DocKey.STYLES, DocKey.STYLE_MAP],
        "properties": {
            DocKey.DESIGN: {"type": "string"},
            DocKey.STYLES: {"type": "string"},
            DocKey.STYLE_MAP: {
                "type": "object",
                "propertyNames": {"minLength": 1, "maxLength": 1},
                "additionalProperties": _ref(SchemaDef.STYLE_SPEC),
            },
        },
        "$defs": {
            SchemaDef.STYLE_SPEC: style_spec,
            SchemaDef.COLOR: color,
            SchemaDef.ATTRIBUTE: {"type": "string", "enum": [a.value for a in Attribute]},
        },
    }


def schema_text() -> str:
    """Return the schema as pretty-printed JSON (no trailing newline)."""
    return json.dumps(build_schema(), indent=2, ensure_ascii=False)


def _format_path(error: ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path)


def validate_mapping(data: object) -> None:
    """Check a canonical (JSON object form) document against the schema.

    Args:
        data (object): The document as plain dicts, lists and scalars.

    Raises:
        SchemaViolation: Describing the most relevant violation, if any.
    """
    schema = build_schema()
    Draft202012Validator.check_schema(schema)
    validator = Draft202012Validator(schema)
    errors: list[ValidationError] = list(validator.iter_errors(data))
    if not errors:
        logger.debug("Document satisfies the schema")
        return
    logger.debug("Document violates the schema in %d place(s)", len(errors))
    error = best_match(errors)
    raise SchemaViolation(error.message, _format_path(error))
