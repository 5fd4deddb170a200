"""Dispatcher tools: run a command, run a batch, list the catalog."""

from __future__ import annotations

from slack_cli.catalog import COMMANDS
from slack_cli.mcp_server._core import _call, _contract_error, _finalize_tool_result


def run_command(args: list[str]) -> dict:
    """Run one slack-cli command.

    Args:
        args: argv without the program name, e.g. ["messages", "search", "deploy"].
    """
    return _call(args)


def run_batch(commands: list[str], stop_on_error: bool = False, fail_on_error: bool = False) -> dict:
    """Run several quoted commands sequentially with one shared credential.

    Args:
        commands: Command strings, e.g. ["version", "messages post C123 'hi there'"].
        stop_on_error: Stop at the first failed command.
        fail_on_error: Report exitCodeOverride=2 when any command failed.
    """
    if not isinstance(commands, list):
        return _contract_error("commands must be a list of strings", "INVALID_ARGUMENT")
    # After "--" every command string stays a batch positional, even "--help".
    argv = [
        "batch",
        f"--stop-on-error={'true' if stop_on_error else 'false'}",
        f"--fail-on-error={'true' if fail_on_error else 'false'}",
        "--",
        *commands,
    ]
    return _call(argv)


def list_commands() -> dict:
    """List every registered command with usage and description. No auth needed."""
    return _finalize_tool_result(
        {
            "ok": True,
            "command": "list_commands",
            "data": [
                {
                    "name": spec.name,
                    "usage": spec.usage,
                    "description": spec.description,
                }
                for spec in COMMANDS
            ],
        }
    )


def register(mcp):
    mcp.tool()(run_command)
    mcp.tool()(run_batch)
    mcp.tool()(list_commands)
