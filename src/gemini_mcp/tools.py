"""Tool catalog and dispatcher.

The dispatcher is the single entry point for tool calls. It validates the
arguments, awaits the client (which returns an already-normalized result)
and formats the answer. Every failure becomes a ``ToolResponse`` flagged as
an error, so nothing escapes to the host raw.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import TYPE_CHECKING, Any

from gemini_mcp.constants import (
    ASK_GEMINI,
    DEFAULT_SAMPLING_CONTROL,
    SAMPLING_CONTROL_BOUNDS,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    SamplingControl,
)
from gemini_mcp.errors import GeminiMcpError, GenerationError, UnknownOperationError
from gemini_mcp.request import validate_request

if TYPE_CHECKING:
    from gemini_mcp.providers.base import GenerationClient
    from gemini_mcp.result import GenerationResult

_log = logging.getLogger(__name__)

ASK_GEMINI_DESCRIPTION = (
    "Generate comprehensive responses using Google Gemini with built-in Google "
    "Search and URL context capabilities. Include URLs directly in your prompt "
    "text for the AI to automatically search and analyze them along with other "
    "relevant information."
)

_CONTROL_DESCRIPTIONS: dict[SamplingControl, str] = {
    SamplingControl.MAX_TOKENS: "Maximum number of tokens in the response.",
    SamplingControl.THINKING_BUDGET: (
        "Thinking budget for the model's internal reasoning. Leave unset to "
        "let the model decide."
    ),
}


@dataclass(frozen=True)
class ToolDescriptor:
    """Discovery metadata for one tool."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)


def ask_gemini_descriptor(
    control: SamplingControl = DEFAULT_SAMPLING_CONTROL,
) -> ToolDescriptor:
    """Describe ``ask_gemini`` for the given protocol revision."""
    control = SamplingControl(control)
    low, high = SAMPLING_CONTROL_BOUNDS[control]
    return ToolDescriptor(
        name=ASK_GEMINI,
        description=ASK_GEMINI_DESCRIPTION,
        input_schema={
            "type": "object",
            "properties": {
                "prompt": {
                    "type": "string",
                    "description": (
                        "Your question or request. Include any URLs directly in "
                        "the text that you want analyzed. The AI will "
                        "automatically search for current information and "
                        "analyze any URLs mentioned in your prompt."
                    ),
                },
                "temperature": {
                    "type": "number",
                    "description": "Controls randomness in the response (0.0-2.0).",
                    "minimum": TEMPERATURE_MIN,
                    "maximum": TEMPERATURE_MAX,
                },
                control.value: {
                    "type": "integer",
                    "description": _CONTROL_DESCRIPTIONS[control],
                    "minimum": low,
                    "maximum": high,
                },
            },
            "required": ["prompt"],
        },
    )


def tool_descriptors(
    control: SamplingControl = DEFAULT_SAMPLING_CONTROL,
) -> list[ToolDescriptor]:
    """Return every tool this server exposes."""
    return [ask_gemini_descriptor(control)]


@dataclass(frozen=True)
class ToolResponse:
    """Uniform tool call outcome.

    ``error_code`` is set only when ``is_error`` is true and mirrors the
    ``code`` of the exception that caused the failure.
    """

    text: str
    is_error: bool = False
    error_code: str | None = None


class CallState(str, Enum):
    """Per-call progress, used for diagnostics only."""

    RECEIVED = "received"
    VALIDATING = "validating"
    GENERATING = "generating"
    NORMALIZING = "normalizing"
    FORMATTING = "formatting"
    DONE = "done"
    ERRORED = "errored"


def format_result(result: GenerationResult) -> str:
    """Render a result as answer text plus numbered sources and searches."""
    formatted = result.text
    if result.sources:
        formatted += "\n\n**Sources:**\n"
        formatted += "".join(
            f"{i}. {source}\n" for i, source in enumerate(result.sources, start=1)
        )
    if result.search_suggestions:
        formatted += "\n\n**Related searches:**\n"
        formatted += "".join(
            f"{i}. {suggestion}\n"
            for i, suggestion in enumerate(result.search_suggestions, start=1)
        )
    return formatted


def _error_text(prefix: str, exc: BaseException) -> str:
    text = f"{prefix}{exc}"
    hint = getattr(exc, "hint", None)
    if hint:
        text += f"\nHint: {hint}"
    return text


class ToolDispatcher:
    """Name-keyed entry point for tool calls.

    Stateless between calls: the client and logger are collaborators held by
    reference and never mutated here.
    """

    def __init__(
        self,
        client: GenerationClient,
        *,
        sampling_control: SamplingControl = DEFAULT_SAMPLING_CONTROL,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self._control = SamplingControl(sampling_control)
        self._log = logger or _log

    @property
    def sampling_control(self) -> SamplingControl:
        return self._control

    def list_tools(self) -> list[ToolDescriptor]:
        return tool_descriptors(self._control)

    def _transition(self, name: str, state: CallState) -> None:
        self._log.debug("tool=%s state=%s", name, state.value)

    async def call(self, name: str, arguments: Any) -> ToolResponse:
        """Execute tool *name* with *arguments*; never raises for tool failures."""
        self._transition(name, CallState.RECEIVED)
        try:
            if name != ASK_GEMINI:
                raise UnknownOperationError(name)
            text = await self._ask_gemini(name, arguments)
        except UnknownOperationError as exc:
            self._transition(name, CallState.ERRORED)
            self._log.warning("Rejected call to unknown tool %r", name)
            return ToolResponse(
                text=f"Error: {exc}", is_error=True, error_code=exc.code
            )
        except GeminiMcpError as exc:
            self._transition(name, CallState.ERRORED)
            self._log.warning("Tool %s failed: %s", name, exc)
            return ToolResponse(
                text=_error_text(f"Error processing tool '{name}': ", exc),
                is_error=True,
                error_code=exc.code,
            )
        except Exception as exc:
            self._transition(name, CallState.ERRORED)
            self._log.exception("Unexpected failure in tool %s", name)
            return ToolResponse(
                text=f"Error processing tool '{name}': {exc}",
                is_error=True,
                error_code=GenerationError.code,
            )
        self._transition(name, CallState.DONE)
        return ToolResponse(text=text)

    async def _ask_gemini(self, name: str, arguments: Any) -> str:
        self._transition(name, CallState.VALIDATING)
        request = validate_request(arguments, self._control)

        self._transition(name, CallState.GENERATING)
        result = await self._client.generate(request)

        self._transition(name, CallState.NORMALIZING)
        self._log.info(
            "ask_gemini answered with %d source(s)", len(result.sources)
        )

        self._transition(name, CallState.FORMATTING)
        return format_result(result)
