# topmark:header:start
#
#   project      : ArtPaint
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests for the ArtPaint CLI group and its global options."""

from __future__ import annotations

from artpaint.cli.main import cli
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
def test_help_lists_commands() -> None:
    """`--help` succeeds and lists every subcommand."""
    result = run_cli(["--help"])

    assert_SUCCESS(result)
    for name in ("render", "validate", "schema", "version"):
        assert name in result.stdout


@mark_cli
def test_short_help_option() -> None:
    """`-h` is an alias of `--help`."""
    result = run_cli(["-h"])

    assert_SUCCESS(result)
    assert "Usage:" in result.stdout


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    """Invoking the group alone prints a hint followed by the help text."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "artpaint render FILE" in result.stdout
    assert "Usage:" in result.stdout


@mark_cli
@parametrize("command", ["render", "validate", "schema", "version"])
def test_subcommand_help(command: str) -> None:
    """Every subcommand has its own help page."""
    result = run_cli([command, "--help"])

    assert_SUCCESS(result)
    assert "Usage:" in result.stdout


@mark_cli
def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    """`-v` together with `-q` is a usage error."""
    result = run_cli(["-v", "-q", "schema"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@mark_cli
def test_unknown_subcommand_is_rejected() -> None:
    """Click rejects unknown subcommands with its own usage error."""
    result = run_cli(["paint"])

    assert result.exit_code != 0
    assert "No such command" in result.output


def test_group_registers_commands() -> None:
    """The group exposes exactly the documented subcommands."""
    assert set(cli.commands) == {"render", "validate", "schema", "version"}
