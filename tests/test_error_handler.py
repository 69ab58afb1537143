"""Tests for the command error wrapper."""

import click
import pytest
from click.testing import CliRunner

from dbgc.scanner import ConfigurationError, DbgcError, ScanConfig
from dbgc.utils.error_handler import ConfigurationClickError, handle_exceptions
from dbgc.utils.exit_codes import ExitCodes


@click.command()
@click.argument("kind")
@handle_exceptions
def boom(kind):
    if kind == "config":
        raise ConfigurationError("debug_keyword must be a non-empty string")
    if kind == "usage":
        raise click.UsageError("bad usage")
    raise RuntimeError("disk on fire")


class TestHandleExceptions:
    """Mapping of failures to exit codes and the error log."""

    @pytest.fixture
    def runner(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        return CliRunner()

    def test_configuration_error(self, runner, tmp_path):
        result = runner.invoke(boom, ["config"])
        assert result.exit_code == ExitCodes.CONFIG_ERROR
        assert "Invalid configuration" in result.output
        assert not (tmp_path / ".dbgc" / "error.log").exists()

    def test_click_errors_pass_through(self, runner):
        result = runner.invoke(boom, ["usage"])
        assert result.exit_code == 2
        assert "bad usage" in result.output

    def test_unexpected_error_logged(self, runner, tmp_path):
        result = runner.invoke(boom, ["crash"])
        assert result.exit_code == 1
        assert "RuntimeError: disk on fire" in result.output
        log = (tmp_path / ".dbgc" / "error.log").read_text(encoding="utf-8")
        assert "dbgc boom" in log
        assert "RuntimeError: disk on fire" in log

    def test_config_click_error_exit_code(self):
        assert ConfigurationClickError("x").exit_code == ExitCodes.CONFIG_ERROR

    def test_invalid_scan_config_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ScanConfig(debug_keyword="")
        assert isinstance(exc_info.value, DbgcError)
