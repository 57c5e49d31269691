# topmark:header:start
#
#   project      : ArtPaint
#   file         : validate.py
#   file_relpath : src/artpaint/cli/commands/validate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint `validate` command.

Parses FILE in the selected syntax, transcodes it to the JSON object form and
checks it against the published schema. The outcome is reported on stderr:

- ``Validation succeeded`` (exit 0), or
- ``Validation failed: <message>`` (exit 1), also when the document does not parse.

An unreadable FILE is reported like in ``render`` (exit 66, 74 or 77).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from artpaint import api
from artpaint.cli.cmd_common import reporting_errors
from artpaint.cli.errors import ArtpaintValidationError
from artpaint.cli.options import input_format_option
from artpaint.config.logging import get_logger
from artpaint.core.errors import MalformedDocument, SchemaViolation

if TYPE_CHECKING:
    from artpaint.cli.console_api import ConsoleLike
    from artpaint.config.logging import ArtpaintLogger
    from artpaint.core.formats import InputFormat

logger: ArtpaintLogger = get_logger(__name__)

VALIDATION_SUCCEEDED = "Validation succeeded"
VALIDATION_FAILED = "Validation failed"


@click.command(
    name="validate",
    help="Validate FILE (or '-' for STDIN) against the document schema.",
)
@click.argument("source", metavar="FILE", type=str)
@input_format_option
@click.pass_context
def validate_command(
    ctx: click.Context,
    *,
    source: str,
    input_format: InputFormat,
) -> None:
    """Validate a document and report the outcome on stderr."""
    console: ConsoleLike = ctx.obj["console"]

    with reporting_errors("validate"):
        try:
            api.validate_source(source, input_format)
        except (MalformedDocument, SchemaViolation) as exc:
            raise ArtpaintValidationError(f"{VALIDATION_FAILED}: {exc.message}") from exc

    logger.info("%s is a valid %s document", source, input_format.label)
    console.info(console.styled(VALIDATION_SUCCEEDED, fg="green"))
