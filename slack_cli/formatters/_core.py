"""Core result renderer: CliResult -> output lines and exit code."""

import json
import sys

from slack_cli._utils import exit_code_for_error
from slack_cli.formatters._table import _sanitize_str


class StdIO:
    """Default line writers bound to the process streams."""

    def stdout(self, line):
        print(line)

    def stderr(self, line):
        print(line, file=sys.stderr)


DEFAULT_IO = StdIO()


def pretty_print(data):
    return json.dumps(data, indent=2, ensure_ascii=False)


def render_cli_result(result, as_json, io=None):
    """Write *result* through *io* and return the process exit code."""
    io = io or DEFAULT_IO
    if as_json:
        io.stdout(pretty_print(result))
        if not result["ok"]:
            return exit_code_for_error(result["error"]["code"])
        return result.get("exitCodeOverride", 0)

    if result["ok"]:
        lines = result.get("textLines")
        if lines:
            for line in lines:
                io.stdout(_sanitize_str(line))
        elif result.get("message"):
            io.stdout(_sanitize_str(result["message"]))
        return result.get("exitCodeOverride", 0)

    error = result["error"]
    io.stderr(_sanitize_str(error["message"]))
    if error.get("hint"):
        io.stderr(_sanitize_str(error["hint"]))
    return exit_code_for_error(error["code"])
