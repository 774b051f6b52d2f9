"""Google Gemini implementation backed by the google-genai SDK."""
from __future__ import annotations

from google import genai
from google.genai import types

from ...config.settings import get_model_name
from .base import BaseLLMClient, ConfigurationError, GenerationOptions


class GeminiClient(BaseLLMClient):
    """Gemini client bound to a single API key."""

    def __init__(self, api_key: str, model: str | None = None) -> None:
        self.model = model or get_model_name()
        self.client = genai.Client(api_key=api_key)

    @staticmethod
    def _build_config(options: GenerationOptions) -> types.GenerateContentConfig:
        config_kwargs: dict[str, object] = {}
        if options.system_instruction is not None:
            config_kwargs["system_instruction"] = options.system_instruction
        if options.response_mime_type is not None:
            config_kwargs["response_mime_type"] = options.response_mime_type
        if options.response_schema is not None:
            config_kwargs["response_schema"] = dict(options.response_schema)
        if options.thinking_budget is not None:
            config_kwargs["thinking_config"] = types.ThinkingConfig(
                thinking_budget=options.thinking_budget
            )
        return types.GenerateContentConfig(**config_kwargs)

    async def generate(
        self, prompt: str, options: GenerationOptions | None = None
    ) -> str | None:
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._build_config(options or GenerationOptions()),
            )
        finally:
            # One client per call: release both httpx pools before returning.
            await self.client.aio.aclose()
            self.client.close()
        return response.text


def create_gemini_client(api_key: str, model: str | None = None) -> GeminiClient:
    """Build a fresh client for one call. Never cache the result."""
    if not api_key or not api_key.strip():
        raise ConfigurationError(
            "API key is not configured. Set API_KEY in the environment and redeploy."
        )
    return GeminiClient(api_key=api_key, model=model)
