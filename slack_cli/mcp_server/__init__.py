"""MCP server exposing the slack-cli dispatcher as tools.

Package structure:
  __init__.py   — FastMCP init, register() call, re-exports
  _core.py      — CLI dispatch, response contract
  _tools.py     — run_command, run_batch, list_commands

Run: py -m slack_cli.mcp_server [--http]
Requires: py -m pip install .[mcp]
"""

from __future__ import annotations

import sys

from mcp.server.fastmcp import FastMCP

from slack_cli import config
from slack_cli.mcp_server import _tools

mcp = FastMCP(
    "slack",
    instructions=(
        "Slack workflow commands. "
        "run_command takes argv without the program name; results are CLI result "
        "objects with ok/command/data or ok=false/error{code,message,hint}. "
        "Use run_batch for several commands that should share one credential; "
        "individual failures are reported in data.results."
    ),
)

_tools.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from slack_cli.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _finalize_tool_result,
)
from slack_cli.mcp_server._tools import (  # noqa: E402, F401
    list_commands,
    run_batch,
    run_command,
)


def main(argv=None):
    """Run the MCP server. ``--http`` selects streamable-http instead of stdio."""
    argv = sys.argv[1:] if argv is None else argv
    if "--http" in argv:
        mcp.settings.host = config.MCP_HTTP_HOST
        mcp.settings.port = config.MCP_HTTP_PORT
        mcp.run(transport="streamable-http")
        return
    mcp.run()
