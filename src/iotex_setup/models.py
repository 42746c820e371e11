"""Domain models for a setup run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SetupRequest:
    """Validated user choices, built once per run."""

    api_key: str
    llm_model_id: str
    audio_model_id: str
    set_as_default: bool = False


@dataclass(frozen=True)
class CliArgs:
    """Raw command-line tokens sorted by role; any of them may be missing."""

    api_key: str | None = None
    llm_model: str | None = None
    audio_model: str | None = None
    set_default: bool = False
