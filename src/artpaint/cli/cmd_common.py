# topmark:header:start
#
#   project      : ArtPaint
#   file         : cmd_common.py
#   file_relpath : src/artpaint/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands.
They only encapsulate plumbing (error translation); messages
and exit-code policy live with the commands and in [`artpaint.cli.errors`][].
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from artpaint.cli.errors import ArtpaintUnexpectedError, translate_error
from artpaint.config.logging import get_logger
from artpaint.core.errors import ArtpaintError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from artpaint.config.logging import ArtpaintLogger

logger: ArtpaintLogger = get_logger(__name__)


@contextmanager
def reporting_errors(command: str) -> Iterator[None]:
    """Translate errors raised inside the block into CLI errors.

    Domain errors become the matching
    [`ArtpaintCliError`][artpaint.cli.errors.ArtpaintCliError] subclass; any other
    exception is logged with its traceback and reported as an unexpected error.

    Args:
        command (str): Name of the running command, for log records.

    Raises:
        ArtpaintCliError: For every failure inside the block.
    """
    try:
        yield
    except (click.ClickException, click.exceptions.Exit, click.Abort):
        raise
    except ArtpaintError as exc:
        logger.info("%s: %s", command, exc.message)
        raise translate_error(exc) from exc
    except Exception as exc:  # pragma: no cover - last resort
        logger.exception("Unexpected error in '%s'", command)
        raise ArtpaintUnexpectedError(
            f"Unexpected error: {exc} (use -vv for details)"
        ) from exc
