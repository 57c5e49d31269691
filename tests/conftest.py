# topmark:header:start
#
#   project      : ArtPaint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ArtPaint test suite.

This file sets up typed wrappers around pytest decorators, shared fixtures for
writing documents to disk, and the logging configuration for test runs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from artpaint.config import logging

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.fixture`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.fixture`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging for the test suite.

    Sets the logging level to TRACE so detailed output is captured during test
    execution. CLI invocations reconfigure logging from their own flags.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Sample documents shared by several test modules -------------------------

SMOKE_TOML: str = """\
design = "AB\\nCD"
styles = "xx\\nyy"

[style_map.x]
foreground = "Red"

[style_map.y]
foreground = "Green"
styles = ["Bold"]
"""

SMOKE_JSON: str = """\
{
  "design": "AB\\nCD",
  "styles": "xx\\nyy",
  "style_map": {
    "x": {"foreground": "Red"},
    "y": {"foreground": "Green", "styles": ["Bold"]}
  }
}
"""

SMOKE_RENDERED: str = "\x1b[31mAB\x1b[0m\n\x1b[1;32mCD\x1b[0m"


def write_document(directory: Path, name: str, text: str) -> Path:
    """Write ``text`` to ``directory / name`` as UTF-8 and return the path.

    Args:
        directory (Path): Target directory.
        name (str): File name (the extension is irrelevant to ArtPaint).
        text (str): Document text.

    Returns:
        Path: The path of the written file.
    """
    path: Path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


# --- Documents that must be rejected as malformed, never crash ---------------

LONG_INTEGER_JSON: str = (
    '{"design": "A", "styles": "x", "style_map": {"x": {"foreground": {"Fixed": '
    + "9" * 5000
    + "}}}}"
)

DEEPLY_NESTED_JSON: str = (
    '{"design": "A", "styles": "x", "style_map": {}, "extra": '
    + "[" * 100_000
    + "]" * 100_000
    + "}"
)

LONE_SURROGATE_JSON: str = '{"design": "\\ud800", "styles": "x", "style_map": {"x": {}}}'

DATED_DESIGN_TOML: str = 'design = 1979-05-27\nstyles = "xxxxxxxxxx"\n[style_map.x]\n'
