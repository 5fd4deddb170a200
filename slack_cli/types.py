"""Typed result definitions for command handlers.

These TypedDicts document the shape of the dicts handlers return and the
renderer prints. They are optional — runtime behavior is unchanged (plain
dicts). Optional keys are omitted rather than set to None, so the JSON
output matches these shapes exactly.
"""

from __future__ import annotations

from typing import Any, Literal, TypedDict, Union

ErrorCode = Literal["UNKNOWN_COMMAND", "INVALID_ARGUMENT", "NOT_IMPLEMENTED", "INTERNAL_ERROR"]

# ---------------------------------------------------------------------------
# CliResult union
# ---------------------------------------------------------------------------


class _CliErrorRequired(TypedDict):
    code: ErrorCode
    message: str


class CliErrorInfo(_CliErrorRequired, total=False):
    hint: str


class _CliSuccessRequired(TypedDict):
    ok: Literal[True]
    command: str


class CliSuccess(_CliSuccessRequired, total=False):
    """Successful handler result."""

    message: str
    data: Any
    textLines: list[str]
    exitCodeOverride: int


class _CliFailureRequired(TypedDict):
    ok: Literal[False]
    error: CliErrorInfo


class CliFailure(_CliFailureRequired, total=False):
    """Failed handler result."""

    command: str


CliResult = Union[CliSuccess, CliFailure]

# ---------------------------------------------------------------------------
# Batch payloads
# ---------------------------------------------------------------------------


class BatchResultRow(TypedDict):
    index: int
    raw: str
    argv: list[str]
    durationMs: int
    result: CliResult


class BatchData(TypedDict):
    """``data`` of a batch result."""

    total: int
    succeeded: int
    failed: int
    stopOnError: bool
    failOnError: bool
    results: list[BatchResultRow]


# ---------------------------------------------------------------------------
# Catalog payloads
# ---------------------------------------------------------------------------


class ResourceRow(TypedDict):
    uri: str
    title: str
    format: str
    description: str


class HelpData(TypedDict, total=False):
    cli: str
    namespace: str
