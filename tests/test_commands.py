"""Tests for commands.py — help, version, resources, tools, stub handlers."""

from slack_cli.catalog import COMMANDS, COMMANDS_BY_ID, RESOURCES, TOOLS
from slack_cli.commands import (
    build_command_groups,
    cmd_help,
    cmd_resources,
    cmd_tools,
    cmd_version,
    make_stub_handler,
)
from slack_cli.models import CliContext, CommandRequest, GlobalFlags


def _request(positionals=None, version="4.5.6", path=("help",)):
    return CommandRequest(
        command_path=path,
        positionals=positionals or [],
        options={},
        flags=GlobalFlags(),
        context=CliContext(version=version),
    )


class TestBuildCommandGroups:
    def test_groups_follow_catalog_order(self):
        names = [name for name, _, _ in build_command_groups()]
        assert names[:4] == ["help", "version", "batch", "auth"]
        assert names[-2:] == ["resources", "tools"]
        assert len(names) == len(set(names))

    def test_standalone_and_subcommands(self):
        groups = {name: (standalone, subs) for name, standalone, subs in build_command_groups()}
        standalone, subs = groups["version"]
        assert standalone.name == "version"
        assert subs == []
        standalone, subs = groups["users"]
        assert standalone is None
        assert [spec.name for spec in subs][:3] == ["users list", "users get", "users search"]

    def test_every_command_grouped_once(self):
        total = sum(
            (1 if standalone else 0) + len(subs)
            for _, standalone, subs in build_command_groups()
        )
        assert total == len(COMMANDS)


class TestCmdHelp:
    def test_root_help(self):
        result = cmd_help(_request())
        assert result["ok"] is True
        assert result["message"] == "Help displayed"
        lines = result["textLines"]
        assert lines[:4] == ["slack - CLI for Slack workflows", "", "Usage:", "  slack <command> [options]"]
        assert "Commands:" in lines
        assert "Global options:" in lines
        assert any(line.strip().startswith("messages") for line in lines)
        assert any("--xoxp" in line for line in lines)

    def test_root_help_does_not_advertise_short_flags(self):
        lines = cmd_help(_request())["textLines"]
        assert not any(" -h" in line or " -v" in line for line in lines)

    def test_namespace_help(self):
        result = cmd_help(_request(["messages"]))
        assert result["message"] == "Help for messages"
        assert result["data"] == {"cli": "slack", "namespace": "messages"}
        lines = result["textLines"]
        assert lines[0] == "slack messages - messages commands"
        assert any(line.strip().startswith("post-ephemeral") for line in lines)

    def test_standalone_help(self):
        lines = cmd_help(_request(["batch"]))["textLines"]
        assert lines[0] == "slack batch - command help"
        assert lines[3].startswith("  slack batch ")

    def test_unknown_namespace(self):
        result = cmd_help(_request(["nope"]))
        assert result == {
            "ok": False,
            "command": "help",
            "error": {
                "code": "INVALID_ARGUMENT",
                "message": "Unknown namespace: nope",
                "hint": "Run 'slack --help' to see available namespaces.",
            },
        }


class TestSimpleCommands:
    def test_version_from_context(self):
        result = cmd_version(_request(version="7.8.9", path=("version",)))
        assert result == {
            "ok": True,
            "command": "version",
            "message": "7.8.9",
            "data": {"version": "7.8.9"},
            "textLines": ["7.8.9"],
        }

    def test_resources(self):
        result = cmd_resources(_request(path=("resources",)))
        assert result["data"] == [dict(resource) for resource in RESOURCES]
        assert result["textLines"][0] == "Available resources:"
        assert "- slack://<workspace>/channels" in result["textLines"]

    def test_tools(self):
        result = cmd_tools(_request(path=("tools",)))
        assert result["data"] == list(TOOLS)
        assert "- conversations_history" in result["textLines"]


class TestStubHandler:
    def test_missing_positionals(self):
        handler = make_stub_handler(COMMANDS_BY_ID["messages-post"])
        result = handler(_request(["C1"], path=("messages", "post")))
        assert result["command"] == "messages-post"
        assert result["error"]["code"] == "INVALID_ARGUMENT"
        assert result["error"]["message"] == "messages post requires <text>"
        assert result["error"]["hint"].startswith("Usage: slack messages post <channel-id> <text>")

    def test_not_implemented(self):
        handler = make_stub_handler(COMMANDS_BY_ID["messages-post"])
        result = handler(_request(["C1", "hi"], path=("messages", "post")))
        assert result["error"]["code"] == "NOT_IMPLEMENTED"
        assert result["error"]["message"] == "messages post is not available in this build."

    def test_optional_only_args(self):
        handler = make_stub_handler(COMMANDS_BY_ID["auth-check"])
        result = handler(_request(path=("auth", "check")))
        assert result["error"]["code"] == "NOT_IMPLEMENTED"

    def test_handler_name(self):
        handler = make_stub_handler(COMMANDS_BY_ID["users-status-set"])
        assert handler.__name__ == "cmd_users_status_set"
