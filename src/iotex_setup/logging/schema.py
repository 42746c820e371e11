"""Preferred key order for structured log events."""

DEFAULT_EVENT_KEY_ORDER: list[str] = ["ts", "level", "message"]

EVENT_KEY_ORDER: dict[str, list[str]] = {
    "app_start": [
        "ts",
        "level",
        "openclaw_dir",
        "config_file",
        "auth_store_file",
        "log_file",
        "interactive",
    ],
    "app_stop": [
        "ts",
        "level",
        "reason",
        "uptime_ms",
        "error_type",
        "error",
    ],
    "request_resolved": [
        "ts",
        "level",
        "llm_model",
        "audio_model",
        "set_as_default",
        "api_key",
    ],
    "config_merged": [
        "ts",
        "level",
        "config_file",
        "provider",
        "registered_models",
        "primary_model",
        "audio_index",
        "audio_action",
    ],
    "auth_store_unreadable": [
        "ts",
        "level",
        "auth_store_file",
        "error_type",
        "error",
    ],
    "files_written": [
        "ts",
        "level",
        "files",
    ],
    "unexpected_error": [
        "ts",
        "level",
        "error_type",
        "error",
    ],
    "gateway_restart": [
        "ts",
        "level",
        "command",
        "returncode",
        "elapsed_ms",
        "error",
    ],
}

LOG_PATH_FIELDS = {
    "openclaw_dir",
    "config_file",
    "auth_store_file",
    "log_file",
}
