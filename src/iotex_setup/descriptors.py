"""Subtrees written into OpenClaw's config document and auth-profile store.

OpenClaw's schema uses camelCase keys; the models here use snake_case fields
and are dumped by alias.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .catalog import LLM_MODELS, LLM_MODEL_SPECS
from .constants import (
    AUDIO_ENTRY_TYPE,
    AUDIO_PROVIDER_ID,
    AUTH_MODE_API_KEY,
    AUTH_PROFILE_NAME,
    GATEWAY_API_TAG,
    GATEWAY_BASE_URL,
    PROVIDER_ID,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ModelCost(_CamelModel):
    input: int = 0
    output: int = 0
    cache_read: int = 0
    cache_write: int = 0


class ProviderModel(_CamelModel):
    id: str
    reasoning: bool
    context_window: int
    max_tokens: int
    name: str
    input: list[str] = ["text"]
    # Billing happens on the gateway side, OpenClaw sees zero cost
    cost: ModelCost = ModelCost()


class ProviderDescriptor(_CamelModel):
    base_url: str
    api_key: str
    api: str
    models: list[ProviderModel]


class ConfigAuthProfile(_CamelModel):
    provider: str = PROVIDER_ID
    mode: str = AUTH_MODE_API_KEY


class AudioModelDescriptor(_CamelModel):
    provider: str = AUDIO_PROVIDER_ID
    model: str
    base_url: str = GATEWAY_BASE_URL
    profile: str = AUTH_PROFILE_NAME
    type: str = AUDIO_ENTRY_TYPE


class StoredCredential(_CamelModel):
    type: str = AUTH_MODE_API_KEY
    provider: str = PROVIDER_ID
    key: str


def build_provider_descriptor(api_key: str) -> ProviderDescriptor:
    """Describe the gateway with every catalog LLM model, in catalog order."""
    models = []
    for entry in LLM_MODELS:
        spec = LLM_MODEL_SPECS[entry.id]
        models.append(
            ProviderModel(
                id=spec.id,
                reasoning=spec.reasoning,
                context_window=spec.context_window,
                max_tokens=spec.max_tokens,
                name=f"{spec.id} (via IoTeX)",
            )
        )
    return ProviderDescriptor(
        base_url=GATEWAY_BASE_URL,
        api_key=api_key,
        api=GATEWAY_API_TAG,
        models=models,
    )
