# topmark:header:start
#
#   project      : ArtPaint
#   file         : errors.py
#   file_relpath : src/artpaint/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the ArtPaint loader, renderer and validator.

These exceptions are Click-free so the public API can raise them directly.
The CLI layer translates them into [`artpaint.cli.errors.ArtpaintCliError`][]
subclasses which carry the process exit code.

Hierarchy:
    ArtpaintError
    ├── DocumentReadError          could not open or read the source
    │   ├── DocumentNotFoundError
    │   └── DocumentPermissionError
    ├── MalformedDocument          the selected syntax could not decode the text
    ├── SchemaViolation            the decoded structure violates the schema
    └── RenderError
        ├── ShapeMismatch          design and styles are not congruent
        └── UnknownStyleTag        a tag is missing from the style map
"""

from __future__ import annotations


class ArtpaintError(Exception):
    """Base class for all ArtPaint domain errors."""

    @property
    def message(self) -> str:
        """Single-line, human-readable description of the error."""
        return str(self)


class DocumentReadError(ArtpaintError):
    """The document source could not be opened or read.

    Attributes:
        source: The source specifier (a path, or ``-`` for STDIN).
        reason: The underlying OS error text.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read {self._describe_source()}: {reason}")

    def _describe_source(self) -> str:
        return "standard input" if self.source == "-" else f"'{self.source}'"


class DocumentNotFoundError(DocumentReadError):
    """The document path does not exist or is not a regular file."""


class DocumentPermissionError(DocumentReadError):
    """The document path exists but may not be read."""


class MalformedDocument(ArtpaintError):
    """The document could not be decoded in the selected syntax.

    Attributes:
        syntax: Label of the syntax that was used (``"TOML"`` or ``"JSON"``).
        detail: The underlying parser or decoder message.
    """

    def __init__(self, syntax: str, detail: str) -> None:
        self.syntax = syntax
        self.detail = detail
        super().__init__(f"Invalid {syntax}: {detail}")


class SchemaViolation(ArtpaintError):
    """The decoded document does not satisfy the published schema.

    Attributes:
        detail: The validator message for the most relevant violation.
        path: JSON pointer-like location of the offending value (may be empty).
    """

    def __init__(self, detail: str, path: str = "") -> None:
        self.detail = detail
        self.path = path
        where = f" at '{path}'" if path else ""
        super().__init__(f"{detail}{where}")


class RenderError(ArtpaintError):
    """Base class for errors detected while rendering a decoded document."""


class ShapeMismatch(RenderError):
    """The design and styles overlays are not congruent.

    Two situations raise this error:

    * the overlays have a different number of lines (``lines`` is True,
      ``expected``/``actual`` are line counts);
    * a line pair has a different number of code points (``expected`` is the
      design count, ``actual`` the styles count).

    Attributes:
        expected: Count taken from the design.
        actual: Count taken from the styles overlay.
        line: 1-based line number where the mismatch was detected.
        lines: True if the counts are line counts rather than character counts.
    """

    def __init__(self, *, expected: int, actual: int, line: int, lines: bool = False) -> None:
        self.expected = expected
        self.actual = actual
        self.line = line
        self.lines = lines
        if lines:
            text = (
                f"Shape mismatch at line {line}: design has {expected} lines "
                f"but styles has {actual}"
            )
        else:
            text = (
                f"Shape mismatch at line {line}: design has {expected} characters "
                f"but styles has {actual}"
            )
        super().__init__(text)


class UnknownStyleTag(RenderError):
    """A character of the styles overlay has no entry in the style map.

    Attributes:
        char: The offending tag character.
        line: 1-based line number.
        column: 1-based column number (in code points).
    """

    def __init__(self, *, char: str, line: int, column: int) -> None:
        self.char = char
        self.line = line
        self.column = column
        super().__init__(f"No style for char '{char}' at line {line}, column {column}")
