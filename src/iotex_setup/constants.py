"""Application-level constants for the IoTeX OpenClaw setup.

This module keeps only cross-cutting names, URLs and file locations.
"""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "openclaw-setup-iotex-ai"

# ============================================================================
# Gateway and provider identity
# ============================================================================

PROVIDER_ID = "iotex"
PROVIDER_DISPLAY_NAME = "IoTeX AI Gateway"
GATEWAY_BASE_URL = "https://gateway.iotex.ai/v1"
GATEWAY_CONSOLE_URL = "https://gateway.iotex.ai/console/token"
GATEWAY_API_TAG = "openai-completions"

AUTH_PROFILE_NAME = f"{PROVIDER_ID}:default"
AUTH_MODE_API_KEY = "api_key"

# Audio transcription runs through the gateway's OpenAI-compatible endpoint
AUDIO_PROVIDER_ID = "openai"
AUDIO_ENTRY_TYPE = "provider"

API_KEY_PREFIX = "sk-"
FLAG_SET_DEFAULT = "--default"

# ============================================================================
# OpenClaw layout
# ============================================================================

OPENCLAW_COMMAND = "openclaw"
OPENCLAW_INSTALL_HINT = "npm install -g openclaw"
DEFAULT_OPENCLAW_DIR = "~/.openclaw"
CONFIG_FILENAME = "openclaw.json"
AUTH_STORE_RELATIVE_PATH = ("agents", "main", "agent", "auth-profiles.json")
AUTH_STORE_VERSION = 1

RESTART_ARGS = ("gateway", "restart")
HEALTH_ARGS = ("gateway", "health")
DEFAULT_SETTLE_SEC = 3.0

# ============================================================================
# Environment variables
# ============================================================================

ENV_OPENCLAW_DIR = "OPENCLAW_DIR"
ENV_LOG_FILE = "IOTEX_SETUP_LOG"
ENV_SETTLE_SEC = "IOTEX_SETUP_SETTLE_SEC"

# Controlling terminal used for prompts when stdin is a pipe
TTY_DEVICE = "/dev/tty"
