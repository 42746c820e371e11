"""Structured event emission and logging helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from .formatter import StructuredTextFormatter
from .sanitization import mask_key
from .schema import LOG_PATH_FIELDS

# Field names whose values are credentials and must never be logged verbatim
_SECRET_FIELDS = {"api_key", "key"}


def _to_log_safe(value: Any) -> Any:
    """Convert values to JSON-serializable, log-safe representations."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_log_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def _resolve_log_path(path_value: str) -> str:
    """Resolve a path-ish string to absolute form for log readability."""
    value = path_value.strip()
    if not value:
        return path_value
    try:
        return str(Path(value).expanduser().resolve())
    except (OSError, RuntimeError):
        return path_value


def log_event(
    event: str, level: int = logging.INFO, exc_info: bool = False, **fields: Any
) -> None:
    """Emit a structured log event, optionally with the active traceback."""
    payload: dict[str, Any] = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        if key in LOG_PATH_FIELDS and isinstance(value, (str, Path)):
            value = _resolve_log_path(str(value))
        elif key in _SECRET_FIELDS and isinstance(value, str):
            value = mask_key(value)
        payload[key] = _to_log_safe(value)
    logging.log(
        level,
        json.dumps(payload, ensure_ascii=False, separators=(",", ":")),
        exc_info=exc_info,
    )


def setup_logging(log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Without a log file all logging is disabled so nothing leaks onto the
    console the user is answering prompts on.
    """
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_path), encoding="utf-8")
        handler.setFormatter(StructuredTextFormatter())
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
