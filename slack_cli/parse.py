"""
Argument vector tokenizer.

Splits raw argv into global flags, command-path tokens, ``--key[=value]``
options, and the verbatim positionals that follow ``--``. Never raises:
anything that is not a recognized flag or option becomes a token.
"""

from slack_cli.models import GlobalFlags, ParsedArgv

_GLOBAL_FLAGS = {f"--{name}": name for name in GlobalFlags.NAMES}


def _parse_option_token(token, next_token):
    """Split ``--key=value`` / ``--key value`` / ``--key``.

    Returns (key, value, consumed_next), or None when the key is empty.
    """
    body = token[2:]
    if "=" in body:
        key, value = body.split("=", 1)
        if not key:
            return None
        return key, value, False
    if next_token and not next_token.startswith("-"):
        return body, next_token, True
    return body, True, False


def parse_argv(argv):
    parsed = ParsedArgv()
    passthrough = False
    i = 0
    while i < len(argv):
        token = argv[i]
        i += 1
        if passthrough:
            parsed.positionals_from_double_dash.append(token)
            continue
        if token == "--":
            passthrough = True
            continue
        if token in _GLOBAL_FLAGS:
            setattr(parsed.flags, _GLOBAL_FLAGS[token], True)
            continue
        if token.startswith("--") and len(token) > 2:
            next_token = argv[i] if i < len(argv) else None
            option = _parse_option_token(token, next_token)
            if option is not None:
                key, value, consumed_next = option
                parsed.options[key] = value
                if consumed_next:
                    i += 1
                continue
        parsed.tokens.append(token)
    return parsed
