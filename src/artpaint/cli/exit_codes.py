# topmark:header:start
#
#   project      : ArtPaint
#   file         : exit_codes.py
#   file_relpath : src/artpaint/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for ArtPaint CLI.

ArtPaint aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. Two values sit outside that convention:
`VALIDATION_FAILED=1` reports a document rejected by ``validate``, and `RENDER_ERROR=3`
reports a document that decodes but cannot be rendered (shape mismatch or missing style
tag). Click's own usage errors exit with 2 before any ArtPaint code runs.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for ArtPaint CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        VALIDATION_FAILED: ``validate`` rejected the document (parse failure or
            schema violation).
        RENDER_ERROR: The document is well-formed but design and styles are not
            congruent, or a tag has no style.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        MALFORMED_DOCUMENT: The document is not valid UTF-8, TOML or JSON, or does
            not decode to the document model. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading the input. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions to read the input. Mirrors BSD
            ``EX_NOPERM (77)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    VALIDATION_FAILED = 1
    RENDER_ERROR = 3

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    MALFORMED_DOCUMENT = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM

    UNEXPECTED_ERROR = 255
