"""
Typed models for parsed input, command requests, and batch bookkeeping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from slack_cli import config


@dataclass
class GlobalFlags:
    """Long flags recognized anywhere before ``--``."""

    help: bool = False
    version: bool = False
    json: bool = False
    xoxp: bool = False
    xoxb: bool = False

    NAMES = ("help", "version", "json", "xoxp", "xoxb")

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.NAMES}

    @property
    def token_type(self) -> str | None:
        """Explicitly requested token type, or None (also when both are set)."""
        if self.xoxp and not self.xoxb:
            return "xoxp"
        if self.xoxb and not self.xoxp:
            return "xoxb"
        return None


@dataclass
class ParsedArgv:
    flags: GlobalFlags = field(default_factory=GlobalFlags)
    tokens: list[str] = field(default_factory=list)
    positionals_from_double_dash: list[str] = field(default_factory=list)
    options: dict[str, str | bool] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedToken:
    """A Slack credential and where it came from."""

    token: str
    token_type: str
    source: str


@dataclass(frozen=True)
class CliContext:
    """Per-invocation context handed to every handler.

    ``run_subcommand`` is only set for the top-level invocation; handlers
    running inside a batch get a context without it. ``token`` is the
    credential threaded down by the batch runner.
    """

    version: str = config.VERSION
    run_subcommand: Callable | None = None
    token_type_override: str | None = None
    token: ResolvedToken | None = None


@dataclass(frozen=True)
class CommandRequest:
    command_path: tuple[str, ...]
    positionals: list[str]
    options: dict[str, str | bool]
    flags: GlobalFlags
    context: CliContext


@dataclass(frozen=True)
class CommandStrategy:
    """One registry entry: a command path and the handler that executes it."""

    id: str
    path: tuple[str, ...]
    execute: Callable[[CommandRequest], dict]
    allowed_token_types: tuple[str, ...] | None = None
    requires_explicit_token_type: bool = False
    uses_token: bool = True

    def __post_init__(self):
        if not self.path:
            raise ValueError(f"Command {self.id!r} has an empty path")

    @property
    def namespace(self) -> str:
        return self.path[0]


@dataclass(frozen=True)
class RouteMatch:
    """Outcome of one router resolution step."""

    strategy: CommandStrategy
    command_path: tuple[str, ...]
    positionals: list[str]
    step: str


@dataclass(frozen=True)
class BatchEntry:
    """One attempted batch sub-command, in submission order."""

    index: int
    raw: str
    argv: list[str]
    result: dict
    duration_ms: int

    @property
    def ok(self) -> bool:
        return self.result.get("ok") is True

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "raw": self.raw,
            "argv": list(self.argv),
            "durationMs": self.duration_ms,
            "result": self.result,
        }
