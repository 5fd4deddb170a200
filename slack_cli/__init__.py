"""slack-cli — CLI dispatcher for Slack workflows."""

from slack_cli.cli import execute_cli, run_cli
from slack_cli.config import VERSION
from slack_cli.exceptions import CliError, TokenError
from slack_cli.models import (
    BatchEntry,
    CliContext,
    CommandRequest,
    CommandStrategy,
    GlobalFlags,
    ParsedArgv,
    ResolvedToken,
)
from slack_cli.parse import parse_argv
from slack_cli.router import route_cli
from slack_cli.types import BatchData, CliFailure, CliResult, CliSuccess

__all__ = [
    "VERSION",
    "BatchData",
    "BatchEntry",
    "CliContext",
    "CliError",
    "CliFailure",
    "CliResult",
    "CliSuccess",
    "CommandRequest",
    "CommandStrategy",
    "GlobalFlags",
    "ParsedArgv",
    "ResolvedToken",
    "TokenError",
    "execute_cli",
    "parse_argv",
    "route_cli",
    "run_cli",
]
