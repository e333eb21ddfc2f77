"""Tests for the CLI commands: argument parsing, startup errors, dispatch to transports."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from hubspot_mcp.cli.app import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for var in ("MODE", "HTTP_PORT", "HUBSPOT_API_KEY", "HUBSPOT_MCP_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("hubspot_mcp.cli.app.setup_logging", lambda config: None)


# ── CLI group ────────────────────────────────────────────────────


class TestCliGroup:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "hubspot-mcp" in result.output
        assert "1.0.0" in result.output

    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "stdio" in result.output
        assert "serve" in result.output
        assert "tools" in result.output

    def test_missing_api_key_exits_nonzero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "HUBSPOT_API_KEY environment variable is required" in result.output

    def test_default_mode_is_stdio(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HUBSPOT_API_KEY", "k")
        with patch("hubspot_mcp.cli.app._run_stdio", new_callable=AsyncMock) as mock:
            result = runner.invoke(cli, [])
        assert result.exit_code == 0, result.output
        mock.assert_awaited_once()
        assert mock.call_args.args[0].mode == "stdio"

    def test_http_mode_from_env(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HUBSPOT_API_KEY", "k")
        monkeypatch.setenv("MODE", "http")
        with patch("hubspot_mcp.cli.app._run_http") as mock:
            result = runner.invoke(cli, [])
        assert result.exit_code == 0, result.output
        mock.assert_called_once()
        assert mock.call_args.args[0].http.port == 3000


# ── Subcommands ──────────────────────────────────────────────────


class TestStdioCommand:
    def test_missing_api_key(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["stdio"])
        assert result.exit_code == 1
        assert "HUBSPOT_API_KEY" in result.output

    def test_runs_stdio(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HUBSPOT_API_KEY", "k")
        with patch("hubspot_mcp.cli.app._run_stdio", new_callable=AsyncMock) as mock:
            result = runner.invoke(cli, ["stdio"])
        assert result.exit_code == 0, result.output
        mock.assert_awaited_once()


class TestServeCommand:
    def test_port_override(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HUBSPOT_API_KEY", "k")
        monkeypatch.setenv("HTTP_PORT", "8080")
        with patch("hubspot_mcp.cli.app._run_http") as mock:
            result = runner.invoke(cli, ["serve", "--port", "9000", "--host", "127.0.0.1"])
        assert result.exit_code == 0, result.output
        config = mock.call_args.args[0]
        assert config.http.port == 9000
        assert config.http.host == "127.0.0.1"

    def test_env_port(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HUBSPOT_API_KEY", "k")
        monkeypatch.setenv("HTTP_PORT", "8080")
        with patch("hubspot_mcp.cli.app._run_http") as mock:
            result = runner.invoke(cli, ["serve"])
        assert result.exit_code == 0, result.output
        assert mock.call_args.args[0].http.port == 8080

    def test_uvicorn_invoked(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HUBSPOT_API_KEY", "k")
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(cli, ["serve", "--port", "3100"])
        assert result.exit_code == 0, result.output
        assert mock_run.call_args.kwargs["port"] == 3100
        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"


class TestToolsCommand:
    def test_lists_without_credential(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["tools"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 8
        assert lines[0].startswith("search_contacts:")
