"""
Slack token resolution.

Tokens come from SLACK_MCP_XOXP_TOKEN / SLACK_MCP_XOXB_TOKEN (``.env`` values
overlaid by the process environment). Resolution is an ordered list of
strategies; the first one that yields a token wins.
"""

import os

from slack_cli import config
from slack_cli._utils import _log_event, _mask_token
from slack_cli.exceptions import TokenError
from slack_cli.models import ResolvedToken


def _current_env():
    env = dict(config.env)
    for key in config.TOKEN_ENV_KEYS.values():
        if key in os.environ:
            env[key] = os.environ[key]
    return env


def _read_trimmed(env, key):
    value = env.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _token_from_env(env, token_type):
    key = config.TOKEN_ENV_KEYS[token_type]
    token = _read_trimmed(env, key)
    if token is None:
        return None
    if not token.startswith(token_type):
        raise TokenError(
            f"{key} must start with {token_type}.",
            hint=f"Set {key} to a token that starts with {token_type}.",
        )
    return ResolvedToken(token=token, token_type=token_type, source=f"env:{key}")


def _resolve_from_override(env, preferred_type):
    if preferred_type is None:
        return None
    resolved = _token_from_env(env, preferred_type)
    if resolved is None:
        key = config.TOKEN_ENV_KEYS[preferred_type]
        raise TokenError(
            f"--{preferred_type} was requested but {key} is not set.",
            hint=f"Set {key} or drop the --{preferred_type} flag.",
        )
    return resolved


def _resolve_from_xoxp_env(env, preferred_type):
    return _token_from_env(env, "xoxp")


def _resolve_from_xoxb_env(env, preferred_type):
    return _token_from_env(env, "xoxb")


RESOLUTION_STRATEGIES = (
    _resolve_from_override,
    _resolve_from_xoxp_env,
    _resolve_from_xoxb_env,
)


def resolve_token(env=None, preferred_type=None):
    """Resolve the active Slack token. Raises TokenError when none is configured."""
    if env is None:
        env = _current_env()
    for strategy in RESOLUTION_STRATEGIES:
        resolved = strategy(env, preferred_type)
        if resolved is not None:
            _log_event(
                "token_resolved",
                token_type=resolved.token_type,
                source=resolved.source,
                token=_mask_token(resolved.token),
            )
            return resolved
    raise TokenError(
        "Slack token is not configured.",
        hint=f"Set {config.XOXP_ENV_KEY} or {config.XOXB_ENV_KEY}.",
    )

