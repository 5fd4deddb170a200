"""
Built-in command implementations for slack-cli.
Each cmd_*() function receives a CommandRequest and returns a CliResult dict.

Commands backed by the Slack Web API are wired to stub handlers built by
make_stub_handler(); batch lives in batch.py.
"""

from slack_cli import config
from slack_cli._utils import create_error, create_success
from slack_cli.catalog import COMMANDS, RESOURCES, TOOLS, required_placeholders
from slack_cli.formatters import _columns

GLOBAL_OPTIONS = (
    ("--help", "Show help"),
    ("--version", "Show version"),
    ("--json", "Print JSON output"),
    ("--xoxp", "Use the user token (SLACK_MCP_XOXP_TOKEN)"),
    ("--xoxb", "Use the bot token (SLACK_MCP_XOXB_TOKEN)"),
)

# ---------------------------------------------------------------------------
# help
# ---------------------------------------------------------------------------


def build_command_groups(commands=COMMANDS):
    """Group catalog entries by namespace, preserving catalog order.

    Returns a list of (name, standalone_spec_or_None, [subcommand specs]).
    """
    order = []
    groups = {}
    for spec in commands:
        namespace = spec.path[0]
        if namespace not in groups:
            groups[namespace] = {"standalone": None, "subcommands": []}
            order.append(namespace)
        if len(spec.path) == 1:
            groups[namespace]["standalone"] = spec
        else:
            groups[namespace]["subcommands"].append(spec)
    return [(name, groups[name]["standalone"], groups[name]["subcommands"]) for name in order]


def _label(name, args):
    return f"{name} {args}" if args else name


def _render_root_help(groups):
    rows = []
    for name, standalone, subcommands in groups:
        if subcommands:
            rows.append((name, f"{name} commands"))
        elif standalone is not None:
            rows.append((_label(standalone.name, standalone.args), standalone.description))
    lines = [
        f"{config.CLI_NAME} - CLI for Slack workflows",
        "",
        "Usage:",
        f"  {config.CLI_NAME} <command> [options]",
        "",
        "Commands:",
        *_columns(rows),
        "",
        "Global options:",
        *_columns(list(GLOBAL_OPTIONS)),
    ]
    return lines


def _render_namespace_help(name, standalone, subcommands):
    cli = config.CLI_NAME
    if not subcommands and standalone is not None:
        return [
            f"{cli} {name} - command help",
            "",
            "Usage:",
            f"  {standalone.usage}",
            "",
            f"Description: {standalone.description}",
        ]
    rows = [(_label(" ".join(spec.path[1:]), spec.args), spec.description) for spec in subcommands]
    return [
        f"{cli} {name} - {name} commands",
        "",
        "Usage:",
        f"  {cli} {name} <command> [options]",
        "",
        "Commands:",
        *_columns(rows),
    ]


def cmd_help(request):
    groups = build_command_groups()
    if not request.positionals:
        return create_success(
            "help",
            message="Help displayed",
            data={"cli": config.CLI_NAME},
            text_lines=_render_root_help(groups),
        )

    namespace = request.positionals[0]
    for name, standalone, subcommands in groups:
        if name == namespace:
            return create_success(
                "help",
                message=f"Help for {namespace}",
                data={"cli": config.CLI_NAME, "namespace": namespace},
                text_lines=_render_namespace_help(name, standalone, subcommands),
            )
    return create_error(
        "INVALID_ARGUMENT",
        f"Unknown namespace: {namespace}",
        f"Run '{config.CLI_NAME} --help' to see available namespaces.",
        "help",
    )


# ---------------------------------------------------------------------------
# version / resources / tools
# ---------------------------------------------------------------------------


def cmd_version(request):
    version = request.context.version
    return create_success(
        "version", message=version, data={"version": version}, text_lines=[version]
    )


def cmd_resources(request):
    lines = ["Available resources:", ""]
    for resource in RESOURCES:
        lines.append(f"- {resource['uri']}")
        lines.append(f"  {resource['title']} ({resource['format']})")
        lines.append(f"  {resource['description']}")
    return create_success(
        "resources",
        message="Resources listed",
        data=[dict(resource) for resource in RESOURCES],
        text_lines=lines,
    )


def cmd_tools(request):
    lines = ["Referenced tools:", ""]
    lines.extend(f"- {tool}" for tool in TOOLS)
    return create_success("tools", message="Tools listed", data=list(TOOLS), text_lines=lines)


# ---------------------------------------------------------------------------
# Web API commands without a local implementation
# ---------------------------------------------------------------------------


def make_stub_handler(spec):
    """Handler that checks required positionals, then reports NOT_IMPLEMENTED."""
    required = required_placeholders(spec.args)
    usage_hint = f"Usage: {spec.usage}"

    def handler(request):
        missing = required[len(request.positionals) :]
        if missing:
            return create_error(
                "INVALID_ARGUMENT",
                f"{spec.name} requires {' '.join(missing)}",
                usage_hint,
                spec.id,
            )
        return create_error(
            "NOT_IMPLEMENTED",
            f"{spec.name} is not available in this build.",
            usage_hint,
            spec.id,
        )

    handler.__name__ = f"cmd_{spec.id.replace('-', '_')}"
    return handler
