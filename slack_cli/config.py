"""
slack-cli shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

XOXP_ENV_KEY = "SLACK_MCP_XOXP_TOKEN"
XOXB_ENV_KEY = "SLACK_MCP_XOXB_TOKEN"

# Keys read from os.environ when the .env file does not define them.
_KNOWN_ENV_KEYS = (
    XOXP_ENV_KEY,
    XOXB_ENV_KEY,
    "SLACK_CLI_TRACE",
    "SLACK_CLI_MAX_BATCH_COMMANDS",
    "MCP_HTTP_HOST",
    "MCP_HTTP_PORT",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _KNOWN_ENV_KEYS:
        if key not in env and os.environ.get(key):
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.6.0"
CLI_NAME = "slack"
CONTRACT_SCHEMA_VERSION = "1.0"

TOKEN_TYPES = ("xoxp", "xoxb")
TOKEN_ENV_KEYS = {"xoxp": XOXP_ENV_KEY, "xoxb": XOXB_ENV_KEY}

HELP_COMMAND_ID = "help"
VERSION_COMMAND_ID = "version"
BATCH_COMMAND_ID = "batch"

# Namespace aliases and the namespace assumed when the user omits one.
NAMESPACE_ALIASES = {"message": "messages"}
IMPLICIT_NAMESPACE = "messages"

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env)
# ---------------------------------------------------------------------------

env = load_env()

MAX_BATCH_COMMANDS = max(1, _env_int("SLACK_CLI_MAX_BATCH_COMMANDS", 50))
TRACE_ENABLED = _env_bool("SLACK_CLI_TRACE", False)

MCP_HTTP_HOST = env.get("MCP_HTTP_HOST", "127.0.0.1")
MCP_HTTP_PORT = _env_int("MCP_HTTP_PORT", 8808)
