"""Exception hierarchy for gemini-mcp.

Each exception class carries a stable ``code`` so callers can tell failure
categories apart without substring matching on messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class GeminiMcpError(Exception):
    """Base exception for all gemini-mcp errors."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(GeminiMcpError):
    """Configuration validation or resolution failed."""

    code = "CONFIGURATION_ERROR"


class ValidationError(GeminiMcpError):
    """Tool arguments failed schema or bounds checks."""

    code = "INVALID_ARGUMENTS"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        constraint: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.field = field
        self.constraint = constraint


class TemplateArgumentError(GeminiMcpError):
    """A required prompt template argument is missing."""

    code = "INVALID_PROMPT_ARGUMENTS"

    def __init__(
        self, message: str, *, argument: str, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.argument = argument


class GenerationError(GeminiMcpError):
    """The Gemini call itself failed (network, auth, quota, empty response)."""

    code = "TOOL_EXECUTION_FAILED"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code


class UnknownOperationError(GeminiMcpError):
    """A tool name that is not in the catalog was requested."""

    code = "UNKNOWN_TOOL"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class UnknownTemplateError(GeminiMcpError):
    """A prompt template name that is not registered was requested."""

    code = "UNKNOWN_PROMPT"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown prompt: {name}")
        self.name = name


def _walk_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__``/``__context__`` chain, with cycle protection."""
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)
        context = cur.__context__
        if isinstance(context, BaseException):
            stack.append(context)
