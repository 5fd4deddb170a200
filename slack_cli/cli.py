"""
slack-cli — CLI dispatcher for Slack workflows.

argv -> parse_argv -> route_cli -> handler -> render_cli_result -> exit code.
"""

import sys

from slack_cli import config
from slack_cli._utils import create_error
from slack_cli.exceptions import CliError
from slack_cli.formatters import render_cli_result
from slack_cli.models import CliContext
from slack_cli.parse import parse_argv
from slack_cli.registry import COMMAND_REGISTRY
from slack_cli.router import route_cli

INTERNAL_ERROR_HINT = (
    "Retry the command. If it keeps failing, run with --json and report the output."
)


def _safe_route(parsed, context, registry):
    """Route and execute, converting any escaping exception into a failure result."""
    try:
        return route_cli(parsed, context, registry)
    except CliError as e:
        return create_error(e.code, e.message, e.hint, e.command)
    except Exception as e:
        return create_error("INTERNAL_ERROR", f"Unexpected error: {e}", INTERNAL_ERROR_HINT)


def make_subcommand_runner(version, registry):
    """Build the ``run_subcommand`` callback handed to top-level handlers.

    Sub-commands get a context without ``run_subcommand`` (no recursion past
    one level) and with the token context the caller threads in: the
    resolved token and the token type it was resolved for.
    """

    def run_subcommand(argv, token=None, token_type_override=None):
        context = CliContext(
            version=version, token=token, token_type_override=token_type_override
        )
        return _safe_route(parse_argv(argv), context, registry)

    return run_subcommand


def execute_cli(argv, version=None, registry=None):
    """Parse and run *argv*; return (result, as_json) without rendering."""
    version = version or config.VERSION
    registry = COMMAND_REGISTRY if registry is None else registry
    parsed = parse_argv(argv)
    context = CliContext(
        version=version,
        run_subcommand=make_subcommand_runner(version, registry),
    )
    return _safe_route(parsed, context, registry), parsed.flags.json


def run_cli(argv, version=None, io=None, registry=None):
    """Run one CLI invocation and return its exit code."""
    result, as_json = execute_cli(argv, version=version, registry=registry)
    return render_cli_result(result, as_json, io)


def main():
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
