"""Language Model service module."""
from .base import (
    BaseLLMClient,
    ChatLogAnalysisError,
    ConfigurationError,
    EmptyResponseError,
    ErrorKind,
    GenerationOptions,
    MalformedResponseError,
    TransmissionFailure,
    UnknownAnalysisError,
)
from .gemini import GeminiClient, create_gemini_client

__all__ = [
    "BaseLLMClient",
    "GenerationOptions",
    "ErrorKind",
    "ChatLogAnalysisError",
    "ConfigurationError",
    "EmptyResponseError",
    "MalformedResponseError",
    "TransmissionFailure",
    "UnknownAnalysisError",
    "GeminiClient",
    "create_gemini_client",
]
