"""
Command router: resolves parsed argv against the command registry and
invokes the matched handler.

Matching is longest-prefix-wins over the registry paths. Special cases
(help/version flags, namespace-only input, the ``message`` alias, the
implicit ``messages`` namespace) are ordered resolution strategies, each a
pure function ``(parsed, registry) -> RouteMatch | None``. The router keeps
no state between calls.
"""

from dataclasses import replace

from slack_cli import config
from slack_cli._utils import _log_event, create_error
from slack_cli.models import CommandRequest, RouteMatch


class _MissingBuiltin(Exception):
    """help or version is not registered in the registry."""

    def __init__(self, command_id):
        super().__init__(command_id)
        self.command_id = command_id


# ---------------------------------------------------------------------------
# Registry lookups
# ---------------------------------------------------------------------------


def _is_prefix(path, tokens):
    return len(path) <= len(tokens) and tuple(tokens[: len(path)]) == tuple(path)


def match_command(tokens, registry):
    """Return the registry entry with the longest path prefixing *tokens*."""
    best = None
    for strategy in registry:
        if not _is_prefix(strategy.path, tokens):
            continue
        if best is None or len(strategy.path) > len(best.path):
            best = strategy
    return best


def _find_builtin(registry, command_id):
    for strategy in registry:
        if strategy.path == (command_id,):
            return strategy
    raise _MissingBuiltin(command_id)


def namespace_subcommands(namespace, registry):
    """Second path tokens registered under *namespace*, de-duplicated, in order."""
    seen = []
    for strategy in registry:
        if strategy.namespace != namespace or len(strategy.path) < 2:
            continue
        if strategy.path[1] not in seen:
            seen.append(strategy.path[1])
    return seen


def _is_namespace(token, registry):
    return any(strategy.namespace == token for strategy in registry)


def _normalize_tokens(tokens):
    if tokens and tokens[0] in config.NAMESPACE_ALIASES:
        return [config.NAMESPACE_ALIASES[tokens[0]], *tokens[1:]]
    return list(tokens)


def _matched(strategy, tokens, parsed, step):
    positionals = [*tokens[len(strategy.path) :], *parsed.positionals_from_double_dash]
    return RouteMatch(
        strategy=strategy, command_path=strategy.path, positionals=positionals, step=step
    )


# ---------------------------------------------------------------------------
# Resolution strategies (tried in order)
# ---------------------------------------------------------------------------


def _resolve_help_flag(parsed, registry):
    if not (parsed.flags.help or (not parsed.tokens and not parsed.flags.version)):
        return None
    help_strategy = _find_builtin(registry, config.HELP_COMMAND_ID)
    positionals = [*_normalize_tokens(parsed.tokens), *parsed.positionals_from_double_dash]
    return RouteMatch(help_strategy, help_strategy.path, positionals, "help_flag")


def _resolve_version_flag(parsed, registry):
    if not parsed.flags.version:
        return None
    version_strategy = _find_builtin(registry, config.VERSION_COMMAND_ID)
    return RouteMatch(version_strategy, version_strategy.path, [], "version_flag")


def _namespace_help(tokens, parsed, registry, step):
    if len(tokens) != 1:
        return None
    namespace = tokens[0]
    if any(strategy.path == (namespace,) for strategy in registry):
        return None
    if not namespace_subcommands(namespace, registry):
        return None
    help_strategy = _find_builtin(registry, config.HELP_COMMAND_ID)
    positionals = [namespace, *parsed.positionals_from_double_dash]
    return RouteMatch(help_strategy, help_strategy.path, positionals, step)


def _resolve_namespace_help(parsed, registry):
    return _namespace_help(parsed.tokens, parsed, registry, "namespace_help")


def _resolve_direct(parsed, registry):
    strategy = match_command(parsed.tokens, registry)
    if strategy is None:
        return None
    return _matched(strategy, parsed.tokens, parsed, "direct")


def _resolve_alias(parsed, registry):
    if not parsed.tokens or parsed.tokens[0] not in config.NAMESPACE_ALIASES:
        return None
    tokens = _normalize_tokens(parsed.tokens)
    match = _namespace_help(tokens, parsed, registry, "alias_namespace_help")
    if match is not None:
        return match
    strategy = match_command(tokens, registry)
    if strategy is None:
        return None
    return _matched(strategy, tokens, parsed, "alias")


def _resolve_implicit_namespace(parsed, registry):
    if _is_namespace(parsed.tokens[0], registry):
        return None
    tokens = [config.IMPLICIT_NAMESPACE, *parsed.tokens]
    strategy = match_command(tokens, registry)
    if strategy is None or strategy.namespace != config.IMPLICIT_NAMESPACE:
        return None
    return _matched(strategy, tokens, parsed, "implicit_namespace")


RESOLUTION_STRATEGIES = (
    _resolve_help_flag,
    _resolve_version_flag,
    _resolve_namespace_help,
    _resolve_direct,
    _resolve_alias,
    _resolve_implicit_namespace,
)


def resolve_route(parsed, registry):
    """Run the resolution strategies in order; first non-None match wins."""
    for strategy in RESOLUTION_STRATEGIES:
        match = strategy(parsed, registry)
        if match is not None:
            return match
    return None


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


def unknown_command(tokens, registry):
    command = " ".join(tokens)
    normalized = _normalize_tokens(tokens)
    namespace = normalized[0] if normalized else ""
    subcommands = namespace_subcommands(namespace, registry)
    if subcommands:
        hint = (
            f"Available subcommands: {', '.join(subcommands)}. "
            f"Run '{config.CLI_NAME} {namespace} --help' to see details."
        )
    else:
        hint = f"Run '{config.CLI_NAME} --help' to see available commands."
    return create_error("UNKNOWN_COMMAND", f"Unknown command: {command}", hint, command)


def _check_token_type(strategy, flags, token_type):
    """Return a failure if the requested token type conflicts with the command.

    *token_type* is the sub-command's own flag or, failing that, the type
    inherited from the caller's context.
    """
    if not strategy.uses_token:
        return None
    command = " ".join(strategy.path)
    if flags.xoxp and flags.xoxb:
        return create_error(
            "INVALID_ARGUMENT",
            "--xoxp and --xoxb are mutually exclusive.",
            "Pass at most one token type flag.",
            strategy.id,
        )
    if token_type is None:
        if strategy.requires_explicit_token_type:
            return create_error(
                "INVALID_ARGUMENT",
                f"{command} requires an explicit token type.",
                "Pass --xoxp or --xoxb.",
                strategy.id,
            )
        return None
    allowed = strategy.allowed_token_types
    if allowed is not None and token_type not in allowed:
        return create_error(
            "INVALID_ARGUMENT",
            f"{command} does not support --{token_type}.",
            f"Supported token types: {', '.join(allowed)}.",
            strategy.id,
        )
    return None


def _with_token_type(context, token_type):
    """Record *token_type* on the context, dropping a token of another type."""
    if token_type is None:
        return context
    token = context.token
    if token is not None and token.token_type != token_type:
        token = None
    if token_type == context.token_type_override and token is context.token:
        return context
    return replace(context, token_type_override=token_type, token=token)


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------


def route_cli(parsed, context, registry):
    """Resolve *parsed* against *registry* and execute the matched handler."""
    try:
        match = resolve_route(parsed, registry)
    except _MissingBuiltin as e:
        return create_error(
            "INTERNAL_ERROR",
            f"{e.command_id} command is not registered",
            command=e.command_id,
        )

    if match is None:
        _log_event("route", step="unknown", tokens=parsed.tokens)
        return unknown_command(parsed.tokens, registry)

    _log_event(
        "route", step=match.step, command=match.strategy.id, positionals=len(match.positionals)
    )
    token_type = parsed.flags.token_type or context.token_type_override
    failure = _check_token_type(match.strategy, parsed.flags, token_type)
    if failure is not None:
        return failure
    context = _with_token_type(context, token_type)

    request = CommandRequest(
        command_path=match.command_path,
        positionals=match.positionals,
        options=parsed.options,
        flags=parsed.flags,
        context=context,
    )
    return match.strategy.execute(request)
