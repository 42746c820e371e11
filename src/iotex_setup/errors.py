"""Typed exceptions for the IoTeX OpenClaw setup."""

from __future__ import annotations

from pathlib import Path

from .constants import OPENCLAW_COMMAND


class SetupError(Exception):
    """Base class for all setup failures that stop the run."""


class MissingCredentialError(SetupError):
    def __init__(self) -> None:
        super().__init__("API key is required.")


class UnknownModelError(SetupError):
    def __init__(self, model_id: str, kind: str, supported: list[str]) -> None:
        self.model_id = model_id
        self.kind = kind
        self.supported = list(supported)
        label = "LLM" if kind == "llm" else kind
        super().__init__(f"Unknown {label} model '{model_id}'.")


class MissingDependencyError(SetupError):
    def __init__(self, command: str, hint: str) -> None:
        self.command = command
        super().__init__(f"{command} not found. {hint}")


class MissingConfigFileError(SetupError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"{path} not found. Run '{OPENCLAW_COMMAND} onboard' first."
        )


class ConfigDocumentError(SetupError):
    """Raised when an existing config file cannot be parsed as a JSON object."""


class RestartFailedError(SetupError):
    def __init__(self, returncode: int | None, detail: str = "") -> None:
        self.returncode = returncode
        message = "Gateway restart failed."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
