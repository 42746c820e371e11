"""User-facing text rendering."""

from __future__ import annotations

from .catalog import ModelEntry, provider_model_ref
from .constants import (
    GATEWAY_CONSOLE_URL,
    HEALTH_ARGS,
    OPENCLAW_COMMAND,
    PROVIDER_DISPLAY_NAME,
    RESTART_ARGS,
)
from .errors import UnknownModelError
from .models import SetupRequest

_TITLE = f"{PROVIDER_DISPLAY_NAME} — OpenClaw Setup"
_RECOMMENDED_MARKER = " (recommended)"
_ERROR_PREFIX = "Error:"


def _rule(text: str) -> str:
    return "━" * len(text)


def _command(*args: str) -> str:
    return " ".join((OPENCLAW_COMMAND, *args))


def render_banner() -> list[str]:
    return ["", f"  {_TITLE}", f"  {_rule(_TITLE)}", ""]


def render_api_key_prompt() -> str:
    return f"  API key (get one at {GATEWAY_CONSOLE_URL}): "


def render_menu(title: str, entries: tuple[ModelEntry, ...]) -> list[str]:
    """Render a 1-based menu; entry 1 carries the recommended marker."""
    lines = ["", title, ""]
    for number, entry in enumerate(entries, 1):
        label = f"{entry.display_name} ({entry.id})"
        marker = _RECOMMENDED_MARKER if number == 1 else ""
        lines.append(f"  {number}) {label:<45} {entry.price_note}{marker}")
    lines.append("")
    return lines


def render_menu_prompt(count: int) -> str:
    return f"Choose [1-{count}, default=1]: "


def render_default_question(llm_model_id: str) -> str:
    return f"  Set {provider_model_ref(llm_model_id)} as your default model? [y/N]: "


def render_error(message: str) -> str:
    return f"{_ERROR_PREFIX} {message}"


def render_unknown_model(error: UnknownModelError) -> list[str]:
    lines = [render_error(str(error)), "Supported models:"]
    lines.extend(f"  - {model_id}" for model_id in error.supported)
    return lines


def render_restart_failed() -> list[str]:
    return [
        "",
        "  Warning: Gateway restart failed. Run manually:",
        f"    {_command(*RESTART_ARGS)}",
        "",
    ]


def render_summary(request: SetupRequest) -> list[str]:
    title = f"Done! {PROVIDER_DISPLAY_NAME} is configured."
    ref = provider_model_ref(request.llm_model_id)
    lines = [
        "",
        f"  {title}",
        f"  {_rule(title)}",
        "",
        f"  LLM:    {ref}",
        f"  Audio:  {request.audio_model_id} (auto-transcribes voice messages)",
    ]
    if request.set_as_default:
        lines.append(f"  Default model set to: {ref}")
    else:
        lines.extend(
            [
                "",
                "  To set as default model:",
                f"    {_command('config', 'set', 'agents.defaults.model.primary')} '{ref}'",
            ]
        )
    lines.extend(
        [
            "",
            f"  Switch models in chat:  /model {ref}",
            f"  Verify:                 {_command(*HEALTH_ARGS)}",
            "",
        ]
    )
    return lines
