"""
slack-cli exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""

ERROR_CODES = frozenset(
    {"UNKNOWN_COMMAND", "INVALID_ARGUMENT", "NOT_IMPLEMENTED", "INTERNAL_ERROR"}
)


class CliError(Exception):
    """Exit code 2 — caller-correctable failure raised from a handler.

    ``run_cli`` converts it into a failure result carrying ``code``,
    ``message`` and ``hint``.
    """

    exit_code = 2

    def __init__(self, message, code="INVALID_ARGUMENT", hint=None, command=None):
        super().__init__(message)
        if code not in ERROR_CODES:
            raise ValueError(f"Unknown error code: {code}")
        self.code = code
        self.message = message
        self.hint = hint
        self.command = command


class TokenError(CliError):
    """No usable Slack token could be resolved."""
