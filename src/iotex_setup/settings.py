"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    AUTH_STORE_RELATIVE_PATH,
    CONFIG_FILENAME,
    DEFAULT_OPENCLAW_DIR,
    DEFAULT_SETTLE_SEC,
    ENV_LOG_FILE,
    ENV_OPENCLAW_DIR,
    ENV_SETTLE_SEC,
)


@dataclass(frozen=True)
class SetupSettings:
    openclaw_dir: Path
    log_file: Path | None = None
    settle_sec: float = DEFAULT_SETTLE_SEC

    @property
    def config_path(self) -> Path:
        return self.openclaw_dir / CONFIG_FILENAME

    @property
    def auth_store_path(self) -> Path:
        return self.openclaw_dir.joinpath(*AUTH_STORE_RELATIVE_PATH)


def _expand(raw: str) -> Path:
    return Path(raw.strip()).expanduser()


def parse_settle_sec(raw: str | None) -> float:
    """Parse the settle delay override; blank means the default."""
    if raw is None or not raw.strip():
        return DEFAULT_SETTLE_SEC
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_SETTLE_SEC} must be a number, got '{raw}'")
    if value < 0:
        raise ValueError(f"{ENV_SETTLE_SEC} must not be negative, got '{raw}'")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> SetupSettings:
    """Build settings from environment variables.

    ``OPENCLAW_DIR`` overrides the OpenClaw state directory, ``IOTEX_SETUP_LOG``
    enables the structured log file and ``IOTEX_SETUP_SETTLE_SEC`` overrides
    the post-restart delay.

    Raises:
        ValueError: If the settle delay is not a non-negative number
    """
    env = os.environ if environ is None else environ

    openclaw_dir = env.get(ENV_OPENCLAW_DIR) or DEFAULT_OPENCLAW_DIR
    log_raw = env.get(ENV_LOG_FILE)

    return SetupSettings(
        openclaw_dir=_expand(openclaw_dir),
        log_file=_expand(log_raw) if log_raw and log_raw.strip() else None,
        settle_sec=parse_settle_sec(env.get(ENV_SETTLE_SEC)),
    )
