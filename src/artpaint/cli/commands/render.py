# topmark:header:start
#
#   project      : ArtPaint
#   file         : render.py
#   file_relpath : src/artpaint/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint `render` command.

Reads a document from FILE (or STDIN when FILE is ``-``), renders the design
with its styles overlay and writes the result followed by a line feed to
standard output.

The rendering is built completely in memory before anything is written: a
shape or tag error leaves standard output empty.

Exit codes:
    0 on success, 3 when design and styles are not congruent or a tag has no
    style, 65 for malformed documents, 66/74/77 when FILE cannot be read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from artpaint import api
from artpaint.cli.cmd_common import reporting_errors
from artpaint.cli.options import input_format_option
from artpaint.config.logging import get_logger

if TYPE_CHECKING:
    from artpaint.cli.console_api import ConsoleLike
    from artpaint.config.logging import ArtpaintLogger
    from artpaint.core.formats import InputFormat

logger: ArtpaintLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render FILE (or '-' for STDIN) as styled terminal text.",
)
@click.argument("source", metavar="FILE", type=str)
@input_format_option
@click.option(
    "--plain",
    is_flag=True,
    default=False,
    help="Check the document but print the design without escape sequences.",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    source: str,
    input_format: InputFormat,
    plain: bool = False,
) -> None:
    """Render a document to standard output.

    Args:
        ctx (click.Context): Click context carrying the console in ``ctx.obj``.
        source (str): Path of the document, or ``-`` for STDIN.
        input_format (InputFormat): Document syntax selected with ``-t/--type``.
        plain (bool): Print the unstyled design instead of the rendering.
    """
    console: ConsoleLike = ctx.obj["console"]
    logger.info("Rendering %s as %s", source, input_format.label)

    with reporting_errors("render"):
        document = api.load(source, input_format)
        output = api.render_plain(document) if plain else api.render(document)

    console.emit(output)
