"""
Shared helpers for slack-cli: result constructors, exit-code mapping, and
the stderr trace log.

Used across router.py, batch.py, commands.py, cli.py and the MCP server.
"""

import json
import sys

from slack_cli import config

EXIT_CODE_BY_ERROR = {
    "UNKNOWN_COMMAND": 2,
    "INVALID_ARGUMENT": 2,
    "NOT_IMPLEMENTED": 2,
    "INTERNAL_ERROR": 1,
}


def create_error(code, message, hint=None, command=None):
    """Build a failure result. Absent hint/command keys are omitted."""
    result = {"ok": False}
    if command is not None:
        result["command"] = command
    error = {"code": code, "message": message}
    if hint is not None:
        error["hint"] = hint
    result["error"] = error
    return result


def create_success(command, message=None, data=None, text_lines=None, exit_code_override=None):
    """Build a success result. Absent optional keys are omitted."""
    result = {"ok": True, "command": command}
    if message is not None:
        result["message"] = message
    if data is not None:
        result["data"] = data
    if text_lines is not None:
        result["textLines"] = list(text_lines)
    if exit_code_override is not None:
        result["exitCodeOverride"] = exit_code_override
    return result


def exit_code_for_error(code):
    return EXIT_CODE_BY_ERROR.get(code, 1)


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _log_event(event, **fields):
    """Emit structured trace logs to stderr when enabled."""
    if not config.TRACE_ENABLED:
        return
    payload = {"event": event, **fields}
    print("[TRACE] " + json.dumps(payload, ensure_ascii=False, sort_keys=True), file=sys.stderr)
