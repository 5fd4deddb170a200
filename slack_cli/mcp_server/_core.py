"""Core helpers: CLI dispatch and the response contract."""

from __future__ import annotations

from slack_cli import CliError
from slack_cli.cli import execute_cli
from slack_cli.config import CONTRACT_SCHEMA_VERSION


def _contract_error(message: str, code: str = "INTERNAL_ERROR") -> dict:
    """Return a stable MCP error envelope shaped like a CLI failure result."""
    return {
        "ok": False,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "error": {"code": code, "message": message},
    }


def _finalize_tool_result(result: dict) -> dict:
    """Add contract metadata to a CLI result dict."""
    out = dict(result)
    out.setdefault("schema_version", CONTRACT_SCHEMA_VERSION)
    return out


def _call(argv: list[str]) -> dict:
    """Run argv through the CLI dispatcher, converting exceptions to error dicts."""
    if not isinstance(argv, list) or not all(isinstance(a, str) for a in argv):
        return _contract_error("args must be a list of strings", "INVALID_ARGUMENT")
    try:
        result, _ = execute_cli(argv)
        return _finalize_tool_result(result)
    except CliError as e:
        return _contract_error(e.message, e.code)
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}")
