# topmark:header:start
#
#   project      : ArtPaint
#   file         : errors.py
#   file_relpath : src/artpaint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for ArtPaint CLI.

Usage:
    Commands never print domain errors themselves. They let
    [`ArtpaintError`][artpaint.core.errors.ArtpaintError] propagate to
    [`translate_error`][artpaint.cli.errors.translate_error] (see
    [`artpaint.cli.cmd_common`][]), which maps it to one of the classes below.
    Click then displays the message and exits with the class's exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from artpaint.cli.exit_codes import ExitCode
from artpaint.core.errors import (
    ArtpaintError,
    DocumentNotFoundError,
    DocumentPermissionError,
    DocumentReadError,
    MalformedDocument,
    RenderError,
    SchemaViolation,
)


class ArtpaintCliError(click.ClickException):
    """Base class for all ArtPaint CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        # Click shows the error after the command context has been popped.
        self.ctx: click.Context | None = click.get_current_context(silent=True)

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color or an ``Error:`` prefix.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = self.ctx or click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ArtpaintValidationError(ArtpaintCliError):
    """Error when ``validate`` rejects a document."""

    exit_code = ExitCode.VALIDATION_FAILED


class ArtpaintRenderError(ArtpaintCliError):
    """Error for documents that cannot be rendered (shape or tag coverage)."""

    exit_code = ExitCode.RENDER_ERROR


class ArtpaintUsageError(ArtpaintCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ArtpaintMalformedDocumentError(ArtpaintCliError):
    """Error for documents that do not parse or decode."""

    exit_code = ExitCode.MALFORMED_DOCUMENT


class ArtpaintFileNotFoundError(ArtpaintCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ArtpaintPermissionDeniedError(ArtpaintCliError):
    """Error for insufficient permissions to read the input."""

    exit_code = ExitCode.PERMISSION_DENIED


class ArtpaintIOError(ArtpaintCliError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class ArtpaintUnexpectedError(ArtpaintCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


# Most specific classes first: DocumentNotFoundError is a DocumentReadError.
_ERROR_MAP: tuple[tuple[type[ArtpaintError], type[ArtpaintCliError]], ...] = (
    (DocumentNotFoundError, ArtpaintFileNotFoundError),
    (DocumentPermissionError, ArtpaintPermissionDeniedError),
    (DocumentReadError, ArtpaintIOError),
    (MalformedDocument, ArtpaintMalformedDocumentError),
    (SchemaViolation, ArtpaintValidationError),
    (RenderError, ArtpaintRenderError),
)


def translate_error(exc: ArtpaintError) -> ArtpaintCliError:
    """Return the CLI error that reports the domain error ``exc``.

    Args:
        exc (ArtpaintError): A domain error raised by the library layer.

    Returns:
        ArtpaintCliError: An exception carrying the message and exit code to use.
    """
    for domain_cls, cli_cls in _ERROR_MAP:
        if isinstance(exc, domain_cls):
            return cli_cls(exc.message)
    return ArtpaintUnexpectedError(exc.message)
