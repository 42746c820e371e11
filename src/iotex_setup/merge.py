"""Idempotent upserts of the IoTeX provider into OpenClaw documents.

Every operation touches only the ``iotex`` provider, the ``iotex/*`` model
registry keys, the ``iotex:default`` auth profile and the gateway's audio
entry. Everything else in the documents is left as found, so applying the
same request twice yields the same document as applying it once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .catalog import LLM_MODELS, provider_model_ref
from .constants import AUTH_PROFILE_NAME, GATEWAY_BASE_URL, PROVIDER_ID
from .descriptors import (
    AudioModelDescriptor,
    ConfigAuthProfile,
    StoredCredential,
    build_provider_descriptor,
)
from .models import SetupRequest

AUDIO_ACTION_REPLACED = "replaced"
AUDIO_ACTION_APPENDED = "appended"


@dataclass(frozen=True)
class MergeReport:
    """What apply_provider_upserts changed, for logging."""

    registered_models: list[str]
    primary_model: str | None
    audio_index: int
    audio_action: str


def _ensure_dict(parent: dict[str, Any], key: str) -> dict[str, Any]:
    """Return parent[key] as a dict, replacing a missing or non-object value."""
    value = parent.get(key)
    if not isinstance(value, dict):
        value = {}
        parent[key] = value
    return value


def _ensure_list(parent: dict[str, Any], key: str) -> list[Any]:
    value = parent.get(key)
    if not isinstance(value, list):
        value = []
        parent[key] = value
    return value


def _ensure_path(root: dict[str, Any], *keys: str) -> dict[str, Any]:
    node = root
    for key in keys:
        node = _ensure_dict(node, key)
    return node


def upsert_provider(doc: dict[str, Any], api_key: str) -> None:
    """Overwrite models.providers.iotex with the current catalog descriptor."""
    providers = _ensure_path(doc, "models", "providers")
    providers[PROVIDER_ID] = build_provider_descriptor(api_key).to_json_dict()


def register_models(doc: dict[str, Any]) -> list[str]:
    """Add an ``iotex/<id>`` registry key per LLM model, keeping existing entries."""
    registry = _ensure_path(doc, "agents", "defaults", "models")
    added: list[str] = []
    for entry in LLM_MODELS:
        ref = provider_model_ref(entry.id)
        # An empty or missing entry is (re)initialised, anything else is user data
        if not registry.get(ref):
            registry[ref] = {}
            added.append(ref)
    return added


def set_primary_model(doc: dict[str, Any], llm_model_id: str) -> str:
    model = _ensure_path(doc, "agents", "defaults", "model")
    ref = provider_model_ref(llm_model_id)
    model["primary"] = ref
    return ref


def upsert_config_auth_profile(doc: dict[str, Any]) -> None:
    profiles = _ensure_path(doc, "auth", "profiles")
    profiles[AUTH_PROFILE_NAME] = ConfigAuthProfile().to_json_dict()


def _is_gateway_audio_entry(entry: Any) -> bool:
    if not isinstance(entry, dict):
        return False
    return (
        entry.get("baseUrl") == GATEWAY_BASE_URL
        or entry.get("profile") == AUTH_PROFILE_NAME
    )


def upsert_audio_model(doc: dict[str, Any], audio_model_id: str) -> tuple[int, str]:
    """Enable transcription and find-or-append the gateway's audio entry.

    The first entry matching on base URL or profile name is replaced in
    place. Returns the entry index and whether it was replaced or appended.
    """
    audio = _ensure_path(doc, "tools", "media", "audio")
    audio["enabled"] = True
    models = _ensure_list(audio, "models")

    descriptor = AudioModelDescriptor(model=audio_model_id).to_json_dict()
    for index, entry in enumerate(models):
        if _is_gateway_audio_entry(entry):
            models[index] = descriptor
            return index, AUDIO_ACTION_REPLACED

    models.append(descriptor)
    return len(models) - 1, AUDIO_ACTION_APPENDED


def apply_provider_upserts(doc: dict[str, Any], request: SetupRequest) -> MergeReport:
    """Apply all provider upserts to the config document in place."""
    upsert_provider(doc, request.api_key)
    registered = register_models(doc)

    primary: str | None = None
    if request.set_as_default:
        primary = set_primary_model(doc, request.llm_model_id)

    upsert_config_auth_profile(doc)
    audio_index, audio_action = upsert_audio_model(doc, request.audio_model_id)

    return MergeReport(
        registered_models=registered,
        primary_model=primary,
        audio_index=audio_index,
        audio_action=audio_action,
    )


def merge_provider_config(doc: dict[str, Any], request: SetupRequest) -> dict[str, Any]:
    apply_provider_upserts(doc, request)
    return doc


def merge_auth_profile(store: dict[str, Any], request: SetupRequest) -> dict[str, Any]:
    """Write the gateway credential into the auth-profile store in place."""
    profiles = _ensure_dict(store, "profiles")
    profiles[AUTH_PROFILE_NAME] = StoredCredential(key=request.api_key).to_json_dict()
    return store
