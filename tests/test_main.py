"""Tests for the demo command-line application."""

import pytest
from loguru import logger
from typer.testing import CliRunner

from flagparse.config import FlagConfig
from flagparse.main import build_demo_context, cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    """The CLI installs loguru sinks; put the library back to silent afterwards."""
    yield
    logger.remove()
    logger.disable("flagparse")


class TestDemoCli:
    """Test suite for the demo application."""

    def test_resolves_flags_and_leftovers(self):
        """Test a successful run prints each value and the leftovers."""
        result = runner.invoke(cli, ["--", "-size", "42", "-line", "hi", "in.txt", "-x"])

        assert result.exit_code == 0
        assert "help: False" in result.output
        assert "size: 42" in result.output
        assert "output: output.txt" in result.output
        assert "line: hi" in result.output
        assert "rest (2): in.txt -x" in result.output

    def test_defaults_without_arguments(self):
        """Test a run with nothing to parse."""
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "size: 0" in result.output
        assert "line: None" in result.output
        assert "rest (0):" in result.output

    def test_help_flag_prints_options(self):
        """Test that -help lists every flag with its default."""
        result = runner.invoke(cli, ["--", "-help"])

        assert result.exit_code == 0
        assert "    -size\n        Size of the thing\n        Default: 0\n" in result.output
        assert "        Default: output.txt\n" in result.output
        assert "size:" not in result.output

    def test_parse_error_exits_with_one(self):
        """Test that a bad value prints the error and usage."""
        result = runner.invoke(cli, ["--", "-size", "lots"])

        assert result.exit_code == 1
        assert "ERROR: -size: invalid number" in result.output
        assert "-output" in result.output

    def test_unknown_flag(self):
        """Test that undeclared flags are rejected."""
        result = runner.invoke(cli, ["--", "-bogus"])

        assert result.exit_code == 1
        assert "ERROR: -bogus: unknown flag" in result.output

    def test_log_level_option(self):
        """Test that --log-level is accepted."""
        result = runner.invoke(cli, ["--log-level", "error", "--", "-size", "1"])

        assert result.exit_code == 0
        assert "size: 1" in result.output


def test_build_demo_context_declares_in_order():
    ctx, handles = build_demo_context(FlagConfig())
    assert [flag.name for flag in ctx.registry] == ["help", "size", "output", "line"]
    assert set(handles) == {"help", "size", "output", "line"}
