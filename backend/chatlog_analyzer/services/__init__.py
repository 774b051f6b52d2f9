"""Chat log analyzer services (hosted LLM clients)."""
from .llm import (
    BaseLLMClient,
    GenerationOptions,
    GeminiClient,
    create_gemini_client,
)

__all__ = [
    # LLM
    "BaseLLMClient",
    "GenerationOptions",
    "GeminiClient",
    "create_gemini_client",
]
