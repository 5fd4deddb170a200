"""Command catalog — single source of truth for command names and usage.

Standalone module (no project imports besides config). Adding a command
means appending one CommandSpec to COMMANDS; registry.py wires it to a
handler (or to the stub handler when no local implementation exists).
"""

from dataclasses import dataclass

from slack_cli.config import CLI_NAME


@dataclass(frozen=True)
class CommandSpec:
    """One user-facing command (e.g. ``messages post``)."""

    name: str
    args: str
    description: str
    allowed_token_types: tuple[str, ...] | None = None
    requires_explicit_token_type: bool = False
    uses_token: bool = True

    @property
    def path(self) -> tuple[str, ...]:
        return tuple(self.name.split())

    @property
    def id(self) -> str:
        return "-".join(self.path)

    @property
    def usage(self) -> str:
        line = f"{CLI_NAME} {self.name}"
        return f"{line} {self.args}" if self.args else line


COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec("help", "[<namespace>]", "Show this help message", uses_token=False),
    CommandSpec("version", "", "Print CLI version", uses_token=False),
    CommandSpec(
        "batch",
        '"<command> <args...>" ["<command> <args...>" ...] '
        "[--stop-on-error[=<bool>]] [--fail-on-error[=<bool>]] [--json]",
        "Run multiple commands sequentially with one credential",
    ),
    CommandSpec("auth check", "[--json]", "Check current auth session status"),
    CommandSpec("auth whoami", "[--json]", "Show active authenticated identity"),
    CommandSpec(
        "auth login",
        "--type <xoxp|xoxb> [--token <token>] [--json]",
        "Store Slack token and activate selected type",
    ),
    CommandSpec("auth logout", "[--json]", "Clear active auth session"),
    CommandSpec("auth use", "<xoxp|xoxb> [--json]", "Switch active auth token type"),
    CommandSpec(
        "attachment get",
        "<file-id> [--json]",
        "Download a file attachment's text content",
    ),
    CommandSpec(
        "channels list",
        "[--type <public|private|im|mpim>] [--sort <name|popularity>] [--limit <n>] "
        "[--cursor <cursor>] [--json]",
        "List channels",
    ),
    CommandSpec("channels info", "<channel-id> [--json]", "Show channel details"),
    CommandSpec("channels leave", "<channel-id> [--json]", "Leave a channel"),
    CommandSpec(
        "channels search",
        "<query> [--type <public|private|im|mpim>] [--json]",
        "Search channels by name",
    ),
    CommandSpec("users list", "[<query>] [--json]", "List users"),
    CommandSpec("users get", "<user-id> [user-id ...] [--json]", "Show user profiles"),
    CommandSpec("users search", "<query> [--json]", "Search users by name or email"),
    CommandSpec("users status get", "[<user-id>] [--json]", "Show a user's status"),
    CommandSpec(
        "users status set",
        "<emoji> <text> [--expiration=<30m|1h|2h|4h|today|unix-ts>] [--json]",
        "Set your status",
        allowed_token_types=("xoxp",),
    ),
    CommandSpec(
        "users status clear", "[--json]", "Clear your status", allowed_token_types=("xoxp",)
    ),
    CommandSpec("usergroups list", "[--json]", "List user groups"),
    CommandSpec(
        "usergroups create",
        "<name> <handle> [--description=<text>] [--channels=<ids>] [--json]",
        "Create user group",
    ),
    CommandSpec(
        "usergroups get",
        "<usergroup-id> [usergroup-id ...] [--include-users[=<bool>]] [--json]",
        "Show user group details",
    ),
    CommandSpec(
        "usergroups update",
        "<usergroup-id> <name> <handle> [--json]",
        "Update user group metadata",
    ),
    CommandSpec(
        "usergroups users update",
        "<usergroup-id> <user-id> [user-id ...] --yes [--json]",
        "Replace user group members",
    ),
    CommandSpec(
        "usergroups me list",
        "[--json]",
        "List user groups you belong to",
        allowed_token_types=("xoxp",),
    ),
    CommandSpec(
        "usergroups me join",
        "<usergroup-id> [--json]",
        "Join a user group",
        allowed_token_types=("xoxp",),
    ),
    CommandSpec(
        "usergroups me leave",
        "<usergroup-id> [--json]",
        "Leave a user group",
        allowed_token_types=("xoxp",),
    ),
    CommandSpec(
        "messages search",
        "<query> [--channel <value>] [--user <value>] [--after YYYY-MM-DD] "
        "[--before YYYY-MM-DD] [--threads] [--json]",
        "Search messages",
        allowed_token_types=("xoxp",),
    ),
    CommandSpec(
        "messages history",
        "<channel-id> [--limit=<n>] [--oldest=<ts>] [--latest=<ts>] [--cursor=<cursor>] [--json]",
        "Fetch channel message history",
    ),
    CommandSpec(
        "messages fetch",
        "<message-url> [--thread[=<bool>]] [--resolve-users[=<bool>]] [--json]",
        "Fetch a single message by permalink",
    ),
    CommandSpec(
        "messages context",
        "<message-url> [--before=<n>] [--after=<n>] [--json]",
        "Fetch messages around a permalink",
    ),
    CommandSpec(
        "messages post",
        "<channel-id> <text> [--thread-ts=<ts>] [--blocks[=<bool>]] [--json]",
        "Post a message to a channel",
    ),
    CommandSpec(
        "messages post-ephemeral",
        "<channel-id> <user-id> <text> [--thread-ts=<ts>] [--json]",
        "Post an ephemeral message visible to one user",
        requires_explicit_token_type=True,
    ),
    CommandSpec(
        "messages replies",
        "<channel-id> <thread-ts> [--limit=<n>] [--cursor=<cursor>] [--json]",
        "Fetch thread message replies",
    ),
    CommandSpec(
        "messages reply",
        "<channel-id-or-permalink> <thread-ts> <text> [--reply-broadcast[=<bool>]] [--json]",
        "Reply in a thread",
    ),
    CommandSpec(
        "messages update",
        "<channel-id> <timestamp> <text> [--json]",
        "Edit a posted message",
    ),
    CommandSpec("messages delete", "<channel-id> <timestamp> [--json]", "Delete a message"),
    CommandSpec("messages pin", "<channel-id> <timestamp> [--json]", "Pin a message"),
    CommandSpec("messages unpin", "<channel-id> <timestamp> [--json]", "Unpin a message"),
    CommandSpec("messages pins", "<channel-id> [--json]", "List pinned messages"),
    CommandSpec(
        "reactions add",
        "<channel-id> <timestamp> <emoji-name> [--json]",
        "Add reaction emoji to message",
    ),
    CommandSpec(
        "reactions remove",
        "<channel-id> <timestamp> <emoji-name> [--json]",
        "Remove reaction emoji from message",
    ),
    CommandSpec("reactions list", "<channel-id> <timestamp> [--json]", "List message reactions"),
    CommandSpec(
        "resources",
        "[--json]",
        "List available Slack MCP-style resources",
        uses_token=False,
    ),
    CommandSpec("tools", "[--json]", "List referenced MCP tools", uses_token=False),
)

COMMANDS_BY_ID = {spec.id: spec for spec in COMMANDS}

RESOURCES = (
    {
        "uri": "slack://<workspace>/channels",
        "title": "Directory of Channels",
        "format": "text/csv",
        "description": "List channels, DMs, group DMs with basic metadata",
    },
    {
        "uri": "slack://<workspace>/users",
        "title": "Directory of Users",
        "format": "text/csv",
        "description": "List workspace users for lookups and context enrichment",
    },
)

TOOLS = (
    "conversations_history",
    "conversations_replies",
    "conversations_add_message",
    "conversations_search_messages",
    "channels_list",
    "reactions_add",
    "reactions_remove",
    "users_search",
    "usergroups_list",
    "usergroups_create",
    "usergroups_update",
    "usergroups_users_update",
    "usergroups_me",
)


def required_placeholders(args):
    """Return the mandatory ``<placeholder>`` words of a usage string.

    Placeholders inside ``[...]`` are optional; ``--flag <value>`` values are
    option arguments, not positionals.
    """
    required = []
    depth = 0
    previous = ""
    for word in args.split():
        opened = word.count("[")
        if depth == 0 and opened == 0 and word.startswith("<") and word.endswith(">"):
            if not previous.startswith("--"):
                required.append(word)
        depth += opened - word.count("]")
        previous = word
    return required
