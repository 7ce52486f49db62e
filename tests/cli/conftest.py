"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from tempconv.output.formatter import OutputFormatter


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Plain, uncoloured output and no settings leaking in from the environment."""
    monkeypatch.setenv("NO_COLOR", "1")
    for key in ("FORCE_COLOR", "TEMPCONV_VERBOSE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def console_buf() -> tuple[Console, StringIO]:
    buf = StringIO()
    return Console(file=buf, force_terminal=False, no_color=True, width=100), buf


@pytest.fixture()
def formatter(console_buf: tuple[Console, StringIO]) -> OutputFormatter:
    """A formatter whose prompts land in ``console_buf``."""
    err = Console(file=StringIO(), force_terminal=False, no_color=True, width=100)
    return OutputFormatter(console=console_buf[0], error_console=err)
