"""Tests for MCP server tool wrappers.

Tools run the real dispatcher; only the response contract is checked here.
"""

import pytest

mcp_mod = pytest.importorskip("slack_cli.mcp_server", reason="mcp package not installed")

import importlib  # noqa: E402
from unittest.mock import patch  # noqa: E402

from slack_cli.catalog import COMMANDS  # noqa: E402
from slack_cli.config import CONTRACT_SCHEMA_VERSION  # noqa: E402

_core = importlib.import_module("slack_cli.mcp_server._core")


class TestContract:
    def test_contract_error_shape(self):
        assert mcp_mod._contract_error("boom") == {
            "ok": False,
            "schema_version": CONTRACT_SCHEMA_VERSION,
            "error": {"code": "INTERNAL_ERROR", "message": "boom"},
        }

    def test_finalize_adds_schema_version(self):
        result = {"ok": True, "command": "version"}
        out = mcp_mod._finalize_tool_result(result)
        assert out["schema_version"] == CONTRACT_SCHEMA_VERSION
        assert "schema_version" not in result

    def test_call_rejects_non_string_args(self):
        result = mcp_mod._call(["version", 3])
        assert result["ok"] is False
        assert result["error"]["code"] == "INVALID_ARGUMENT"

    def test_call_converts_unexpected_exception(self):
        with patch.object(_core, "execute_cli", side_effect=RuntimeError("kaput")):
            result = mcp_mod._call(["version"])
        assert result["error"] == {"code": "INTERNAL_ERROR", "message": "Unexpected error: kaput"}


class TestTools:
    def test_run_command_version(self):
        result = mcp_mod.run_command(["version"])
        assert result["ok"] is True
        assert result["data"]["version"]
        assert result["schema_version"] == CONTRACT_SCHEMA_VERSION

    def test_run_command_unknown(self):
        result = mcp_mod.run_command(["nope"])
        assert result["ok"] is False
        assert result["error"]["code"] == "UNKNOWN_COMMAND"

    def test_run_batch(self):
        result = mcp_mod.run_batch(["version", "unknown x"], fail_on_error=True)
        assert result["ok"] is True
        data = result["data"]
        assert (data["total"], data["succeeded"], data["failed"]) == (2, 1, 1)
        assert data["failOnError"] is True
        assert result["exitCodeOverride"] == 2

    def test_run_batch_keeps_dash_commands_in_batch(self):
        result = mcp_mod.run_batch(["--help", "version"])
        assert result["command"] == "batch"
        data = result["data"]
        assert data["total"] == 2
        assert data["results"][0]["argv"] == ["--help"]
        assert data["results"][0]["result"]["command"] == "help"

    def test_run_batch_rejects_non_list(self):
        result = mcp_mod.run_batch("version")
        assert result["ok"] is False
        assert result["error"]["code"] == "INVALID_ARGUMENT"

    def test_run_batch_stop_on_error(self):
        result = mcp_mod.run_batch(["unknown x", "version"], stop_on_error=True)
        assert result["data"]["total"] == 1

    def test_list_commands(self):
        result = mcp_mod.list_commands()
        assert result["ok"] is True
        assert len(result["data"]) == len(COMMANDS)
        assert result["data"][0] == {
            "name": "help",
            "usage": "slack help [<namespace>]",
            "description": "Show this help message",
        }


class TestMain:
    def test_stdio_by_default(self):
        with patch.object(mcp_mod.mcp, "run") as run:
            mcp_mod.main([])
        run.assert_called_once_with()

    def test_http_transport(self, monkeypatch):
        monkeypatch.setattr(mcp_mod.config, "MCP_HTTP_HOST", "0.0.0.0")
        monkeypatch.setattr(mcp_mod.config, "MCP_HTTP_PORT", 9100)
        with patch.object(mcp_mod.mcp, "run") as run:
            mcp_mod.main(["--http"])
        run.assert_called_once_with(transport="streamable-http")
        assert mcp_mod.mcp.settings.host == "0.0.0.0"
        assert mcp_mod.mcp.settings.port == 9100
