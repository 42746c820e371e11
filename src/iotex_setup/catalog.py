"""Model registry for the IoTeX gateway."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .constants import PROVIDER_ID


class ModelKind(StrEnum):
    LLM = "llm"
    AUDIO = "audio"


@dataclass(frozen=True, slots=True)
class ModelEntry:
    """One selectable model with display metadata for the menus."""

    id: str
    display_name: str
    provider: str
    price_note: str


@dataclass(frozen=True, slots=True)
class LlmModelSpec:
    """Provider-side limits advertised to OpenClaw for an LLM model."""

    id: str
    reasoning: bool = False
    context_window: int = 200_000
    max_tokens: int = 8192


# Order matters: the first entry of each table is the recommended default.
# Pricing source: https://gateway.iotex.ai
LLM_MODELS: tuple[ModelEntry, ...] = (
    ModelEntry(
        "gemini-2.5-flash-lite",
        "Gemini 2.5 Flash Lite",
        "Google",
        "$0.10/$0.40 per 1M tokens",
    ),
    ModelEntry(
        "gemini-2.5-flash",
        "Gemini 2.5 Flash",
        "Google",
        "$0.30/$2.50 per 1M tokens",
    ),
)

AUDIO_MODELS: tuple[ModelEntry, ...] = (
    ModelEntry(
        "openai/whisper-large-v3-turbo",
        "Whisper Large V3 Turbo (fast)",
        "OpenAI",
        "$0.0015/min",
    ),
    ModelEntry(
        "openai/whisper-large-v3",
        "Whisper Large V3 (standard)",
        "OpenAI",
        "$0.0030/min",
    ),
    ModelEntry("whisper-1", "Whisper 1 (legacy)", "OpenAI", "$0.0060/min"),
)

LLM_MODEL_SPECS: dict[str, LlmModelSpec] = {
    entry.id: LlmModelSpec(entry.id) for entry in LLM_MODELS
}


def list_llm_models() -> tuple[ModelEntry, ...]:
    return LLM_MODELS


def list_audio_models() -> tuple[ModelEntry, ...]:
    return AUDIO_MODELS


def models_for(kind: ModelKind) -> tuple[ModelEntry, ...]:
    """Return the ordered model table for a kind."""
    if kind is ModelKind.LLM:
        return LLM_MODELS
    return AUDIO_MODELS


def known_ids(kind: ModelKind) -> list[str]:
    return [entry.id for entry in models_for(kind)]


def is_known(model_id: str, kind: ModelKind) -> bool:
    """Return True when model_id is an exact id in the kind's table."""
    return any(entry.id == model_id for entry in models_for(kind))


def recommended(kind: ModelKind) -> ModelEntry:
    return models_for(kind)[0]


def provider_model_ref(model_id: str) -> str:
    """Return the OpenClaw model reference, e.g. ``iotex/gemini-2.5-flash``."""
    return f"{PROVIDER_ID}/{model_id}"
