# topmark:header:start
#
#   project      : ArtPaint
#   file         : version.py
#   file_relpath : src/artpaint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint `version` command.

Prints the current ArtPaint version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from artpaint.cli.cli_types import EnumChoiceParam
from artpaint.constants import ARTPAINT_VERSION
from artpaint.core.formats import OutputFormat

if TYPE_CHECKING:
    from artpaint.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ArtPaint.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ArtPaint.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": ARTPAINT_VERSION}))
    else:
        console.print(console.styled(ARTPAINT_VERSION, bold=True))
