"""
Command registry: the ordered CommandStrategy list the router matches against.

Built once at import from the catalog. Catalog entries without a local
handler get a stub that validates positionals and answers NOT_IMPLEMENTED.
"""

from slack_cli.batch import cmd_batch
from slack_cli.catalog import COMMANDS
from slack_cli.commands import cmd_help, cmd_resources, cmd_tools, cmd_version, make_stub_handler
from slack_cli.models import CommandStrategy

HANDLERS = {
    "help": cmd_help,
    "version": cmd_version,
    "batch": cmd_batch,
    "resources": cmd_resources,
    "tools": cmd_tools,
}


def build_registry(commands=COMMANDS, handlers=None):
    handlers = HANDLERS if handlers is None else handlers
    registry = []
    for spec in commands:
        execute = handlers.get(spec.id) or make_stub_handler(spec)
        registry.append(
            CommandStrategy(
                id=spec.id,
                path=spec.path,
                execute=execute,
                allowed_token_types=spec.allowed_token_types,
                requires_explicit_token_type=spec.requires_explicit_token_type,
                uses_token=spec.uses_token,
            )
        )
    return registry


COMMAND_REGISTRY = build_registry()
