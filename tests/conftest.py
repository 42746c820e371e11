"""Pytest configuration and fixtures for the setup tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from iotex_setup.settings import SetupSettings


class ScriptedTerminal:
    """Stand-in for TerminalInput that replays canned answers."""

    def __init__(self, answers: list[str] | None = None, interactive: bool = True) -> None:
        self._answers = list(answers or [])
        self.interactive = interactive
        self.prompts: list[str] = []

    def read_line(self, message: str) -> str:
        self.prompts.append(message)
        if not self._answers:
            return ""
        return self._answers.pop(0)


@pytest.fixture
def scripted_terminal():
    """Factory fixture: scripted_terminal(["1", "y"], interactive=True)."""

    def _make(answers: list[str] | None = None, interactive: bool = True) -> ScriptedTerminal:
        return ScriptedTerminal(answers, interactive)

    return _make


@pytest.fixture
def openclaw_dir(tmp_path: Path) -> Path:
    """OpenClaw state directory holding an onboarded, mostly empty config."""
    state_dir = tmp_path / ".openclaw"
    state_dir.mkdir()
    (state_dir / "openclaw.json").write_text(
        json.dumps({"gateway": {"port": 18789}}, indent=2),
        encoding="utf-8",
    )
    return state_dir


@pytest.fixture
def settings(openclaw_dir: Path) -> SetupSettings:
    return SetupSettings(openclaw_dir=openclaw_dir, settle_sec=0)
