"""Structured logging primitives for the setup CLI."""

from .events import log_event, setup_logging
from .formatter import StructuredTextFormatter
from .sanitization import mask_key, sanitize_error_message
from .schema import DEFAULT_EVENT_KEY_ORDER, EVENT_KEY_ORDER, LOG_PATH_FIELDS

__all__ = [
    "DEFAULT_EVENT_KEY_ORDER",
    "EVENT_KEY_ORDER",
    "LOG_PATH_FIELDS",
    "StructuredTextFormatter",
    "log_event",
    "mask_key",
    "sanitize_error_message",
    "setup_logging",
]
