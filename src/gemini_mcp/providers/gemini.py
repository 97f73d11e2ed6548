"""Gemini generation adapter with Google Search and URL context grounding."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from gemini_mcp.constants import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from gemini_mcp.errors import ConfigurationError, GenerationError
from gemini_mcp.providers._errors import wrap_generation_error
from gemini_mcp.request import GenerationRequest
from gemini_mcp.result import GenerationResult, normalize_response

logger = logging.getLogger(__name__)


class GeminiClient:
    """Google Gemini API client.

    Holds only the API key, the model name and a lazily created SDK client, so
    one instance can serve concurrent calls.
    """

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL) -> None:
        """Create a client with an API key."""
        if not isinstance(api_key, str) or not api_key:
            raise ConfigurationError(
                "API key is required",
                hint="Set GEMINI_API_KEY or pass api_key=...",
            )
        if not isinstance(model, str) or not model:
            raise ConfigurationError("Model name is required")
        self.api_key = api_key
        self.model = model
        self._client: Any = None

    def _get_client(self) -> Any:
        """Lazy-initialize the google-genai client."""
        if self._client is None:
            try:
                from google import genai
            except ImportError as e:
                raise GenerationError(
                    "google-genai package not installed",
                    hint="pip install google-genai",
                ) from e

            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def build_config(self, request: GenerationRequest) -> Any:
        """Build the GenerateContentConfig for *request*.

        Search and URL context are always attached together.
        """
        from google.genai import types

        config_kwargs: dict[str, Any] = {
            "tools": [
                types.Tool(google_search=types.GoogleSearch()),
                types.Tool(url_context=types.UrlContext()),
            ],
            "temperature": (
                request.temperature
                if request.temperature is not None
                else DEFAULT_TEMPERATURE
            ),
        }
        if request.max_tokens is not None:
            config_kwargs["max_output_tokens"] = request.max_tokens
        if request.thinking_budget is not None:
            config_kwargs["thinking_config"] = types.ThinkingConfig(
                thinking_budget=request.thinking_budget
            )
        return types.GenerateContentConfig(**config_kwargs)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Run one grounded generation call and normalize the response."""
        try:
            client = self._get_client()
            config = self.build_config(request)
            logger.debug(
                "Calling Gemini model=%s prompt_chars=%d", self.model, len(request.prompt)
            )
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=request.prompt,
                config=config,
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise wrap_generation_error(e) from e

        if response is None:
            raise GenerationError("Gemini returned an empty response.")

        result = normalize_response(response)
        logger.debug(
            "Gemini answered chars=%d sources=%d", len(result.text), len(result.sources)
        )
        return result
