"""Environment-backed configuration for the chat log analyzer.

Every value is read on demand so that a redeployed environment takes effect
on the next call without a process restart.
"""
import os

# Server-side name first, then the name used by Gemini tooling.
API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY")
MODEL_ENV_VAR = "CHATLOG_ANALYZER_MODEL"
RESPONSE_SCHEMA_PATH_ENV_VAR = "CHATLOG_RESPONSE_SCHEMA_PATH"

DEFAULT_MODEL_NAME = "gemini-2.5-pro"
THINKING_BUDGET = 32768
RESPONSE_MIME_TYPE = "application/json"


def resolve_api_key() -> str | None:
    """Return the first non-blank API key from the environment, if any."""
    for name in API_KEY_ENV_VARS:
        raw = os.environ.get(name, "").strip()
        if raw:
            return raw
    return None


def is_api_key_configured() -> bool:
    return resolve_api_key() is not None


def get_model_name() -> str:
    raw = os.environ.get(MODEL_ENV_VAR, "").strip()
    return raw or DEFAULT_MODEL_NAME


def get_response_schema_path() -> str | None:
    raw = os.environ.get(RESPONSE_SCHEMA_PATH_ENV_VAR, "").strip()
    return raw or None
