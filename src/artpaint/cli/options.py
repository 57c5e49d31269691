# topmark:header:start
#
#   project      : ArtPaint
#   file         : options.py
#   file_relpath : src/artpaint/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based ArtPaint CLI.

This module centralizes reusable options (verbosity, color, input syntax) and
their resolution logic, so commands and groups can stay thin. The helpers here
are Click-aware.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from artpaint.cli.cli_types import EnumChoiceParam
from artpaint.cli.errors import ArtpaintUsageError
from artpaint.config.logging import TRACE_LEVEL, get_logger
from artpaint.core.formats import InputFormat

P = ParamSpec("P")
R = TypeVar("R")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        ArtpaintUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        The --verbose and --quiet options are mutually exclusive.
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ArtpaintUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity on stderr. Repeat up to three times.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors on stderr.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized diagnostics.

    Attributes:
        AUTO: Enable color only when stderr is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stderr_isatty: bool | None = None,
) -> bool:
    """Determine whether diagnostics should be colorized.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stderr_isatty: Whether stderr is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Defaults to enabling color if stderr is a TTY.
        The rendered design is never affected.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    if stderr_isatty is None:
        isatty = getattr(sys.stderr, "isatty", None)
        stderr_isatty = bool(isatty()) if callable(isatty) else False
    return stderr_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color diagnostics: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable colored diagnostics (equivalent to --color=never).",
    )(f)
    return f


def input_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the -t/--type option selecting the document syntax.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with the ``input_format`` parameter added.
    """
    f = click.option(
        "-t",
        "--type",
        "input_format",
        type=EnumChoiceParam(InputFormat),
        default=InputFormat.TOML.value,
        show_default=True,
        help="Document syntax (aliases: a = toml, b = json). The file extension is ignored.",
    )(f)
    return f
