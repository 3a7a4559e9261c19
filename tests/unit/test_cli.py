"""
Unit tests for the command line interface.
"""

import json
from unittest.mock import AsyncMock, patch

import click
import pytest
from click.testing import CliRunner

from context7_mcp import __version__
from context7_mcp.cli import config as cli_config
from context7_mcp.cli.main import cli
from context7_mcp.cli.utils import MCPClient, parse_arguments


@pytest.fixture(autouse=True)
def reset_settings():
    cli_config.set_settings(None)
    yield
    cli_config.set_settings(None)


class TestParseArguments:
    def test_strings_and_numbers(self):
        assert parse_arguments(("libraryName=Next.js", "tokens=5000")) == {
            "libraryName": "Next.js",
            "tokens": 5000,
        }

    def test_value_with_equals_sign(self):
        assert parse_arguments(("topic=a=b",)) == {"topic": "a=b"}

    def test_json_like_strings_stay_raw(self):
        assert parse_arguments(('topic="quoted"',)) == {"topic": '"quoted"'}

    def test_missing_separator(self):
        with pytest.raises(click.BadParameter):
            parse_arguments(("libraryName",))


class TestCLI:
    def setup_method(self):
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(cli, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_tools_list_json(self):
        result = self.runner.invoke(cli, ["tools", "list", "--format", "json"])
        assert result.exit_code == 0
        tools = json.loads(result.output)
        assert [tool["name"] for tool in tools] == [
            "get-library-docs",
            "resolve-library-id",
        ]
        assert tools[1]["inputSchema"]["required"] == ["libraryName"]

    def test_tools_list_table(self):
        result = self.runner.invoke(cli, ["tools", "list"])
        assert result.exit_code == 0
        assert "Tools" in result.output

    def test_tools_call(self):
        result_payload = {
            "content": [{"type": "text", "text": "/nextjs/nextjs/v14"}],
            "isError": False,
        }
        with patch.object(
            MCPClient, "call_tool", AsyncMock(return_value=(True, result_payload))
        ) as call_tool:
            result = self.runner.invoke(
                cli,
                ["tools", "call", "resolve-library-id", "-a", "libraryName=Next.js"],
            )

        assert result.exit_code == 0
        assert "/nextjs/nextjs/v14" in result.output
        call_tool.assert_awaited_once_with(
            "resolve-library-id", {"libraryName": "Next.js"}
        )

    def test_tools_call_failure(self):
        with patch.object(
            MCPClient,
            "call_tool",
            AsyncMock(return_value=(False, "Connection error: refused")),
        ):
            result = self.runner.invoke(cli, ["tools", "call", "resolve-library-id"])
        assert result.exit_code == 1

    def test_server_status_ok(self):
        with patch.object(MCPClient, "ping", AsyncMock(return_value=(True, None))):
            result = self.runner.invoke(
                cli, ["server", "status", "--url", "http://localhost:3000/mcp"]
            )
        assert result.exit_code == 0
        assert "reachable" in result.output

    def test_server_status_unreachable(self):
        with patch.object(
            MCPClient, "ping", AsyncMock(return_value=(False, "Connection error"))
        ):
            result = self.runner.invoke(cli, ["server", "status"])
        assert result.exit_code == 1

    def test_server_start_passes_overrides(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        with patch("context7_mcp.mcp_server.main.main") as server_main:
            result = self.runner.invoke(
                cli, ["server", "start", "--port", "3999", "--log-level", "debug"]
            )

        assert result.exit_code == 0, result.output
        settings = server_main.call_args.args[0]
        assert settings.port == 3999
        assert settings.log_level.value == "DEBUG"
