"""Configuration module for the chat log analyzer."""
from .settings import (
    DEFAULT_MODEL_NAME,
    RESPONSE_MIME_TYPE,
    THINKING_BUDGET,
    get_model_name,
    get_response_schema_path,
    is_api_key_configured,
    resolve_api_key,
)

__all__ = [
    "DEFAULT_MODEL_NAME",
    "RESPONSE_MIME_TYPE",
    "THINKING_BUDGET",
    "get_model_name",
    "get_response_schema_path",
    "is_api_key_configured",
    "resolve_api_key",
]
