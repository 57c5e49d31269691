# topmark:header:start
#
#   project      : ArtPaint
#   file         : schema.py
#   file_relpath : src/artpaint/cli/commands/schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint `schema` command.

Prints the JSON Schema of input documents to standard output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from artpaint import api

if TYPE_CHECKING:
    from artpaint.cli.console_api import ConsoleLike


@click.command(
    name="schema",
    help="Print the JSON Schema of input documents.",
)
@click.pass_context
def schema_command(ctx: click.Context) -> None:
    """Print the pretty-printed document schema."""
    console: ConsoleLike = ctx.obj["console"]
    console.print(api.schema_text())
