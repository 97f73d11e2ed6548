"""Mock client for running the server without network access."""

from __future__ import annotations

from gemini_mcp.request import GenerationRequest
from gemini_mcp.result import GenerationResult


class MockGeminiClient:
    """Return a deterministic echo instead of calling Gemini."""

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Echo the first 100 characters of the prompt."""
        return GenerationResult(text=f"echo: {request.prompt[:100]}")
