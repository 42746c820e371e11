"""Render log_event payloads as readable plaintext blocks."""

from __future__ import annotations

import json
import logging
from typing import Any

from .sanitization import sanitize_error_message
from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    message = record.getMessage()
    try:
        payload = json.loads(message)
    except ValueError:
        payload = None
    if isinstance(payload, dict) and "event" in payload:
        return payload
    # Records from other libraries become a block named after their logger
    return {"event": record.name, "message": message}


class StructuredTextFormatter(logging.Formatter):
    """One ``=== event ===`` block per record, separated by blank lines."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._emitted = False

    @staticmethod
    def _ordered_items(event_name: str, fields: dict[str, Any]) -> list[tuple[str, Any]]:
        preferred = EVENT_KEY_ORDER.get(event_name, DEFAULT_EVENT_KEY_ORDER)
        keys = [k for k in preferred if k in fields]
        keys += sorted(k for k in fields if k not in preferred)
        return [(k, fields[k]) for k in keys if fields[k] is not None]

    def format(self, record: logging.LogRecord) -> str:
        fields = _record_fields(record)
        fields.setdefault("level", record.levelname)
        event_name = str(fields.pop("event"))

        lines = [f"=== {event_name} ==="]
        for key, value in self._ordered_items(event_name, fields):
            text = sanitize_error_message(str(value)).replace("\n", "\\n")
            lines.append(f"{key}: {text}")
        if record.exc_info:
            lines.append("traceback:")
            lines.append(sanitize_error_message(self.formatException(record.exc_info)))

        block = "\n".join(lines)
        if self._emitted:
            return "\n" + block
        self._emitted = True
        return block
