"""
Shared test fixtures for slack-cli tests.
Patches config module so tests never read a real .env or process tokens.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

_TOKEN_KEYS = ("SLACK_MCP_XOXP_TOKEN", "SLACK_MCP_XOXB_TOKEN")


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state and no tokens."""
    from slack_cli import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "TRACE_ENABLED", False)
    monkeypatch.setattr(config, "MAX_BATCH_COMMANDS", 50)
    for key in _TOKEN_KEYS:
        monkeypatch.delenv(key, raising=False)


class BufferIO:
    """Collects rendered lines instead of printing them."""

    def __init__(self):
        self.out = []
        self.err = []

    def stdout(self, line):
        self.out.append(line)

    def stderr(self, line):
        self.err.append(line)


@pytest.fixture
def run():
    """Run the CLI with a buffered io; returns (exit_code, io)."""
    from slack_cli.cli import run_cli

    def _run(argv, version="1.2.3"):
        io = BufferIO()
        code = run_cli(argv, version=version, io=io)
        return code, io

    return _run


@pytest.fixture
def buffer_io():
    return BufferIO()
