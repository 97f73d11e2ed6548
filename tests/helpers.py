"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: it exists to prevent test suites from
growing lots of one-off client fakes as coverage expands.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import MagicMock

from gemini_mcp.providers.gemini import GeminiClient
from gemini_mcp.request import GenerationRequest
from gemini_mcp.result import GenerationResult


@dataclass
class FakeClient:
    """Generation client double.

    Returns ``result`` (or raises ``error``) and records every request.
    """

    result: GenerationResult = field(
        default_factory=lambda: GenerationResult(text="ok")
    )
    error: BaseException | None = None
    requests: list[GenerationRequest] = field(default_factory=list)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


def install_fake_sdk(
    client: GeminiClient,
    generate_content: Callable[..., Awaitable[Any]],
) -> None:
    """Replace the lazily created SDK client with a fake ``generate_content``."""
    fake_models = MagicMock()
    fake_models.generate_content = generate_content
    fake_aio = MagicMock()
    fake_aio.models = fake_models
    client._client = MagicMock()
    client._client.aio = fake_aio
