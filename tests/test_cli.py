"""Tests for cli.py — end-to-end dispatch, rendering, and exit codes."""

import json

from slack_cli.cli import execute_cli, make_subcommand_runner, run_cli
from slack_cli.models import CommandStrategy, ResolvedToken
from slack_cli.registry import COMMAND_REGISTRY, build_registry


def _json(io):
    return json.loads("\n".join(io.out))


class TestHelpAndVersion:
    def test_no_args_prints_root_help(self, run):
        code, io = run([])
        assert code == 0
        assert io.out[0] == "slack - CLI for Slack workflows"
        assert io.err == []

    def test_help_json(self, run):
        code, io = run(["--help", "--json"])
        assert code == 0
        payload = _json(io)
        assert payload["ok"] is True
        assert payload["command"] == "help"
        assert payload["data"] == {"cli": "slack"}

    def test_version_flag(self, run):
        code, io = run(["--version"])
        assert code == 0
        assert io.out == ["1.2.3"]

    def test_version_json(self, run):
        code, io = run(["--version", "--json"])
        assert code == 0
        assert _json(io)["data"] == {"version": "1.2.3"}

    def test_version_ignores_token_type_flags(self, run):
        code, io = run(["--version", "--xoxp", "--xoxb"])
        assert code == 0
        assert io.out == ["1.2.3"]

    def test_short_flags_are_not_version(self, run):
        code, io = run(["-v"])
        assert code == 2
        assert io.err[0] == "Unknown command: -v"

    def test_namespace_help(self, run):
        code, io = run(["users"])
        assert code == 0
        assert io.out[0] == "slack users - users commands"

    def test_message_alias_help(self, run):
        code, io = run(["message", "--json"])
        assert _json(io)["message"] == "Help for messages"


class TestFailures:
    def test_unknown_command_text(self, run):
        code, io = run(["nope"])
        assert code == 2
        assert io.out == []
        assert io.err == [
            "Unknown command: nope",
            "Run 'slack --help' to see available commands.",
        ]

    def test_unknown_command_json(self, run):
        code, io = run(["auth", "foo", "--json"])
        assert code == 2
        payload = _json(io)
        assert payload["ok"] is False
        assert payload["command"] == "auth foo"
        assert payload["error"]["code"] == "UNKNOWN_COMMAND"

    def test_stub_requires_positionals(self, run):
        code, io = run(["reply", "--json"])
        assert code == 2
        error = _json(io)["error"]
        assert error["code"] == "INVALID_ARGUMENT"
        assert "messages reply requires <channel-id-or-permalink>" in error["message"]

    def test_stub_not_implemented(self, run):
        code, io = run(["message", "reply", "C1", "1.0", "hi", "--json"])
        assert code == 2
        payload = _json(io)
        assert payload["command"] == "messages-reply"
        assert payload["error"]["code"] == "NOT_IMPLEMENTED"

    def test_handler_exception_is_internal_error(self):
        def explode(request):
            raise RuntimeError("boom")

        registry = [
            *COMMAND_REGISTRY,
            CommandStrategy(id="explode", path=("explode",), execute=explode),
        ]
        result, as_json = execute_cli(["explode", "--json"], registry=registry)
        assert as_json is True
        assert result["ok"] is False
        assert result["error"]["code"] == "INTERNAL_ERROR"
        assert result["error"]["message"] == "Unexpected error: boom"
        assert "hint" in result["error"]

    def test_internal_error_exit_code(self, buffer_io):
        def explode(request):
            raise RuntimeError("boom")

        registry = build_registry(handlers={"help": explode})
        assert run_cli([], io=buffer_io, registry=registry) == 1
        assert buffer_io.err[0] == "Unexpected error: boom"


class TestSubcommandRunner:
    def test_threads_token_into_context(self):
        seen = []

        def capture(request):
            seen.append(request.context)
            return {"ok": True, "command": "capture"}

        registry = [CommandStrategy(id="capture", path=("capture",), execute=capture)]
        runner = make_subcommand_runner("2.0.0", registry)
        token = ResolvedToken("xoxb-1", "xoxb", "test")
        result = runner(["capture"], token=token, token_type_override="xoxb")
        assert result == {"ok": True, "command": "capture"}
        context = seen[0]
        assert context.token is token
        assert context.token_type_override == "xoxb"
        assert context.version == "2.0.0"
        assert context.run_subcommand is None

    def test_top_level_context_has_runner(self):
        seen = []

        def capture(request):
            seen.append(request.context)
            return {"ok": True, "command": "capture"}

        registry = [CommandStrategy(id="capture", path=("capture",), execute=capture)]
        execute_cli(["capture"], registry=registry)
        assert callable(seen[0].run_subcommand)
        assert seen[0].token is None
