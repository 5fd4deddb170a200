"""
Batch command: run several quoted sub-commands sequentially.

Each positional is a shell-like command string (``"messages post C1 'hi there'"``)
that is tokenized here, then dispatched through the caller-supplied
``run_subcommand`` (parse -> route -> handler). Sub-command failures are
recorded per entry; the batch itself always succeeds so JSON output stays
parseable. The credential is resolved once up front and passed to every
sub-command as an explicit token context.
"""

import time

from slack_cli import config
from slack_cli._utils import _log_event, create_error, create_success
from slack_cli.auth import resolve_token
from slack_cli.exceptions import CliError, TokenError
from slack_cli.models import BatchEntry

COMMAND_ID = "batch"
USAGE_HINT = (
    'Usage: slack batch "command arg..." "command arg..." '
    "[--stop-on-error[=<bool>]] [--fail-on-error[=<bool>]] [--json]"
)

_TRUE_VALUES = {"true", "1", "yes", "y", "on"}
_FALSE_VALUES = {"false", "0", "no", "n", "off"}
_QUOTES = ('"', "'")

# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def tokenize_command(raw):
    """Split one batch command string into argv.

    Double and single quotes group words (one active quote at a time, quote
    characters dropped); a backslash escapes the next character anywhere.
    Returns a list of tokens, or an error message string.
    """
    source = raw.strip()
    if not source:
        return "batch command cannot be empty."

    tokens = []
    current = []
    quote = None
    escaped = False

    for char in source:
        if escaped:
            current.append(char)
            escaped = False
            continue
        if char == "\\":
            escaped = True
            continue
        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
            continue
        if char in _QUOTES:
            quote = char
            continue
        if char.isspace():
            if current:
                tokens.append("".join(current))
            current = []
            continue
        current.append(char)

    if escaped:
        return "batch command ends with dangling escape character."
    if quote is not None:
        return "batch command has unclosed quote."
    if current:
        tokens.append("".join(current))
    if not tokens:
        return "batch command cannot be empty."
    return tokens


def read_bool_option(value, option_name):
    """Interpret a ``--flag[=<bool>]`` option value. Raises CliError on junk."""
    if value is None or value is False:
        return False
    if value is True:
        return True
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise CliError(
        f"batch --{option_name} must be boolean. Use true|false|1|0|yes|no|on|off.",
        hint=USAGE_HINT,
        command=COMMAND_ID,
    )


def _resolve_batch_token(token_type_override):
    """Resolve the credential shared by every sub-command, or None."""
    try:
        return resolve_token(preferred_type=token_type_override)
    except TokenError:
        return None


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------


def _run_entry(index, raw, run_subcommand, token, token_type_override):
    argv = tokenize_command(raw)
    if isinstance(argv, str):
        result = create_error("INVALID_ARGUMENT", argv, USAGE_HINT, COMMAND_ID)
        return BatchEntry(index=index, raw=raw, argv=[], result=result, duration_ms=0)

    if argv[0] == COMMAND_ID:
        result = create_error(
            "INVALID_ARGUMENT",
            "Nested batch command is not supported.",
            "Run batch commands as separate CLI invocations.",
            COMMAND_ID,
        )
        return BatchEntry(index=index, raw=raw, argv=argv, result=result, duration_ms=0)

    start = time.perf_counter()
    try:
        result = run_subcommand(argv, token=token, token_type_override=token_type_override)
    except CliError as e:
        result = create_error(e.code, e.message, e.hint, e.command)
    except Exception as e:
        result = create_error(
            "INTERNAL_ERROR",
            f"Unexpected error: {e}",
            "Retry the command on its own to inspect the failure.",
            COMMAND_ID,
        )
    duration_ms = int(round((time.perf_counter() - start) * 1000))
    return BatchEntry(index=index, raw=raw, argv=argv, result=result, duration_ms=duration_ms)


def run_batch(
    raw_commands, run_subcommand, stop_on_error=False, token=None, token_type_override=None
):
    """Run *raw_commands* in order and return their BatchEntry list.

    Every sub-command receives the same *token* and *token_type_override*.
    """
    entries = []
    for index, raw in enumerate(raw_commands, start=1):
        entry = _run_entry(index, raw, run_subcommand, token, token_type_override)
        entries.append(entry)
        _log_event(
            "batch_entry",
            index=entry.index,
            ok=entry.ok,
            duration_ms=entry.duration_ms,
        )
        if stop_on_error and not entry.ok:
            break
    return entries


def _summary(entry):
    if entry.ok:
        return entry.result.get("message") or "completed"
    error = entry.result["error"]
    return f"{error['code']}: {error['message']}"


def build_text_lines(entries):
    succeeded = sum(1 for entry in entries if entry.ok)
    failed = len(entries) - succeeded
    lines = [
        f"Batch executed {len(entries)} commands: {succeeded} succeeded, {failed} failed.",
        "",
    ]
    for entry in entries:
        status = "ok" if entry.ok else "failed"
        lines.append(
            f"[{entry.index}] {entry.raw} -> {status} ({entry.duration_ms}ms) {_summary(entry)}"
        )
    return lines


def cmd_batch(request):
    run_subcommand = request.context.run_subcommand
    if run_subcommand is None:
        return create_error(
            "INTERNAL_ERROR",
            "batch runner is unavailable.",
            "Retry with latest CLI runtime.",
            COMMAND_ID,
        )

    try:
        stop_on_error = read_bool_option(request.options.get("stop-on-error"), "stop-on-error")
        fail_on_error = read_bool_option(request.options.get("fail-on-error"), "fail-on-error")
    except CliError as e:
        return create_error(e.code, e.message, e.hint, e.command)

    raw_commands = request.positionals
    if not raw_commands:
        return create_error(
            "INVALID_ARGUMENT",
            "batch requires at least one quoted command. [MISSING_ARGUMENT]",
            USAGE_HINT,
            COMMAND_ID,
        )
    if len(raw_commands) > config.MAX_BATCH_COMMANDS:
        return create_error(
            "INVALID_ARGUMENT",
            f"batch accepts up to {config.MAX_BATCH_COMMANDS} commands. "
            f"Received: {len(raw_commands)}",
            "Split into multiple batch executions.",
            COMMAND_ID,
        )

    token_type_override = request.context.token_type_override
    token = request.context.token or _resolve_batch_token(token_type_override)
    _log_event(
        "batch_start",
        commands=len(raw_commands),
        stop_on_error=stop_on_error,
        token_source=token.source if token else None,
    )
    entries = run_batch(
        raw_commands,
        run_subcommand,
        stop_on_error=stop_on_error,
        token=token,
        token_type_override=token_type_override,
    )

    succeeded = sum(1 for entry in entries if entry.ok)
    failed = len(entries) - succeeded
    _log_event("batch_end", total=len(entries), succeeded=succeeded, failed=failed)

    return create_success(
        COMMAND_ID,
        message=f"Batch completed: {succeeded} succeeded, {failed} failed.",
        data={
            "total": len(entries),
            "succeeded": succeeded,
            "failed": failed,
            "stopOnError": stop_on_error,
            "failOnError": fail_on_error,
            "results": [entry.to_dict() for entry in entries],
        },
        text_lines=build_text_lines(entries),
        exit_code_override=2 if fail_on_error and failed > 0 else 0,
    )
