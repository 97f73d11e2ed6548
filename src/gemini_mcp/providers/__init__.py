"""Generation client implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gemini_mcp.errors import ConfigurationError

from .base import GenerationClient
from .gemini import GeminiClient
from .mock import MockGeminiClient

if TYPE_CHECKING:
    from gemini_mcp.config import Config


def create_client(config: Config) -> GenerationClient:
    """Get the appropriate client for *config*."""
    if config.use_mock:
        return MockGeminiClient()

    if not config.api_key:
        raise ConfigurationError(
            "api_key required for real API",
            hint="Set GEMINI_API_KEY or pass Config(api_key=...).",
        )
    return GeminiClient(config.api_key, model=config.model)


__all__ = [
    "GeminiClient",
    "GenerationClient",
    "MockGeminiClient",
    "create_client",
]
