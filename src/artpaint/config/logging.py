# topmark:header:start
#
#   project      : ArtPaint
#   file         : logging.py
#   file_relpath : src/artpaint/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint diagnostics logging.

Adds a TRACE level below DEBUG, an `ArtpaintLogger` with a matching
``trace()`` method and a `ChalkFormatter` that colors each record by severity
with `yachalk`.

Records always go to ``sys.stderr``: standard output carries nothing but the
rendered design, the schema or the version. Coloring follows the diagnostics
color choice of the CLI (``--color`` / ``--no-color``).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d: %(message)s"

# Lowest level first; a record takes the style of the highest threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ArtpaintLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(ArtpaintLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors whole records by severity.

    Args:
        fmt (str): Record format string.
        use_color (bool): When False, records are returned uncolored.
    """

    def __init__(self, fmt: str, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then apply the style of its level."""
        message = super().format(record)
        if not self.use_color:
            return message
        style: Callable[[str], str] = chalk.dim
        for threshold, level_style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = level_style
        return style(message)


def setup_logging(level: int | None = None, *, use_color: bool = True) -> None:
    """(Re)configure the root logger with a single colored stderr handler.

    Below INFO the format also names the logger and line number.

    Args:
        level (int | None): The logging level; WARNING when ``None``.
        use_color (bool): Whether records are colored.
    """
    if level is None:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(
            LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT,
            use_color=use_color,
        )
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> ArtpaintLogger:
    """Return the `ArtpaintLogger` called ``name`` (usually ``__name__``)."""
    return cast("ArtpaintLogger", logging.getLogger(name))
