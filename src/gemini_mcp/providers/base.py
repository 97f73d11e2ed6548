"""Client protocol: the minimal interface the dispatcher depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gemini_mcp.request import GenerationRequest
    from gemini_mcp.result import GenerationResult


@runtime_checkable
class GenerationClient(Protocol):
    """Anything that can turn a GenerationRequest into a GenerationResult."""

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Perform one generation call."""
        ...
