"""Output formatting package for slack-cli.

Re-exports all public names so consumers can do:
    from slack_cli.formatters import render_cli_result
"""

from slack_cli.formatters._core import (
    DEFAULT_IO,
    StdIO,
    pretty_print,
    render_cli_result,
)
from slack_cli.formatters._table import (
    _CONTROL_RE,
    _columns,
    _sanitize_str,
)

__all__ = [
    "_CONTROL_RE",
    "_columns",
    "_sanitize_str",
    "DEFAULT_IO",
    "StdIO",
    "pretty_print",
    "render_cli_result",
]
