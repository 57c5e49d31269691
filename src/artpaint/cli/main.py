# topmark:header:start
#
#   project      : ArtPaint
#   file         : main.py
#   file_relpath : src/artpaint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint command-line entry point.

Key ideas:
- Group-level options (verbosity, diagnostics color) are resolved once and
  placed into ``ctx.obj`` together with the program-output console.
- Logging is configured from the verbosity flags and always writes to stderr.
- Subcommands stay thin: they call [`artpaint.api`][] and let
  [`reporting_errors`][artpaint.cli.cmd_common.reporting_errors] map failures to
  exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from artpaint.cli.commands.render import render_command
from artpaint.cli.commands.schema import schema_command
from artpaint.cli.commands.validate import validate_command
from artpaint.cli.commands.version import version_command
from artpaint.cli.console import ClickConsole
from artpaint.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from artpaint.config.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from artpaint.cli.console_api import ConsoleLike
    from artpaint.config.logging import ArtpaintLogger

logger: ArtpaintLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    log_level = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = log_level

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    setup_logging(level=log_level, use_color=enable_color)

    ctx.obj.setdefault("console", ClickConsole(enable_color=enable_color))
    logger.debug("Log level %d, colored diagnostics: %s", log_level, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ArtPaint: render ASCII art documents as styled terminal text.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ArtPaint CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'artpaint render FILE' to render a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(validate_command)

cli.add_command(schema_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
