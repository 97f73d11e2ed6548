"""Request validation: untyped tool arguments to a GenerationRequest."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from gemini_mcp.constants import (
    DEFAULT_SAMPLING_CONTROL,
    SAMPLING_CONTROL_BOUNDS,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    SamplingControl,
)
from gemini_mcp.errors import ValidationError

_MAX_TOKENS_MIN, _MAX_TOKENS_MAX = SAMPLING_CONTROL_BOUNDS[SamplingControl.MAX_TOKENS]
_BUDGET_MIN, _BUDGET_MAX = SAMPLING_CONTROL_BOUNDS[SamplingControl.THINKING_BUDGET]


@dataclass(frozen=True)
class GenerationRequest:
    """Validated request ready for the generation adapter."""

    prompt: str
    temperature: float | None = None
    #: Mutually exclusive with *thinking_budget*.
    max_tokens: int | None = None
    #: Mutually exclusive with *max_tokens*.
    thinking_budget: int | None = None

    def __post_init__(self) -> None:
        """Reject requests that carry both secondary controls."""
        if self.max_tokens is not None and self.thinking_budget is not None:
            raise ValidationError(
                "max_tokens and thinking_budget are mutually exclusive",
                field="thinking_budget",
                constraint="mutually_exclusive",
            )


class _AskGeminiArgs(BaseModel):
    """Schema wall for ``ask_gemini`` arguments."""

    model_config = ConfigDict(strict=True, extra="ignore")

    prompt: str = Field(min_length=1)
    temperature: float | None = Field(
        default=None, ge=TEMPERATURE_MIN, le=TEMPERATURE_MAX
    )

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, v: str) -> str:
        """Whitespace-only prompts count as empty; the text itself is kept."""
        if not v.strip():
            raise ValueError("Prompt is required")
        return v


class _MaxTokensArgs(_AskGeminiArgs):
    max_tokens: int | None = Field(default=None, ge=_MAX_TOKENS_MIN, le=_MAX_TOKENS_MAX)


class _ThinkingBudgetArgs(_AskGeminiArgs):
    thinking_budget: int | None = Field(default=None, ge=_BUDGET_MIN, le=_BUDGET_MAX)


_SCHEMAS: dict[SamplingControl, type[_AskGeminiArgs]] = {
    SamplingControl.MAX_TOKENS: _MaxTokensArgs,
    SamplingControl.THINKING_BUDGET: _ThinkingBudgetArgs,
}


def _loc(error: Mapping[str, Any]) -> str:
    return ".".join(str(p) for p in error.get("loc", ())) or "arguments"


def validate_request(
    arguments: Any,
    control: SamplingControl = DEFAULT_SAMPLING_CONTROL,
) -> GenerationRequest:
    """Validate raw tool arguments into a GenerationRequest.

    Args:
        arguments: Caller-supplied arguments, untyped. ``None`` counts as empty.
        control: The secondary sampling control accepted by this server.

    Returns:
        A well-typed GenerationRequest.

    Raises:
        ValidationError: Naming the offending field and violated constraint.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ValidationError(
            f"Invalid arguments: expected an object, got {type(arguments).__name__}",
            field="arguments",
            constraint="type",
        )

    control = SamplingControl(control)
    inactive = next(c for c in SamplingControl if c is not control)
    if arguments.get(inactive.value) is not None:
        raise ValidationError(
            f"Invalid arguments: {inactive.value} is not supported by this server",
            field=inactive.value,
            constraint="unsupported",
            hint=f"Use {control.value} instead.",
        )

    try:
        parsed = _SCHEMAS[control].model_validate(dict(arguments))
    except PydanticValidationError as exc:
        errors = exc.errors()
        details = "; ".join(f"{_loc(e)}: {e['msg']}" for e in errors)
        first = errors[0] if errors else {}
        raise ValidationError(
            f"Invalid arguments: {details}",
            field=_loc(first),
            constraint=str(first.get("type", "invalid")),
        ) from exc

    return GenerationRequest(
        prompt=parsed.prompt,
        temperature=parsed.temperature,
        max_tokens=getattr(parsed, "max_tokens", None),
        thinking_budget=getattr(parsed, "thinking_budget", None),
    )
