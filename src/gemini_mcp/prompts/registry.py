"""Prompt template types and argument helpers.

Templates are immutable values: a name, declared arguments, sampling defaults
and a pure builder that assembles prompt text from argument values. Required
arguments are checked before the builder runs, so a missing one never
produces partial prompt text.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gemini_mcp.constants import ASK_GEMINI
from gemini_mcp.errors import TemplateArgumentError


class TemplateName(str, Enum):
    """Every registered prompt template."""

    RESEARCH_ANALYSIS = "research_analysis"
    CURRENT_EVENTS = "current_events"
    TECHNICAL_DOCUMENTATION = "technical_documentation"
    COMPARE_SOURCES = "compare_sources"
    FACT_CHECK = "fact_check"
    DEEPTHINK = "deepthink"


@dataclass(frozen=True)
class TemplateArgument:
    name: str
    description: str
    required: bool = False


@dataclass(frozen=True)
class ToolInvocation:
    """A ready-to-dispatch tool call."""

    tool: str
    arguments: dict[str, Any] = field(default_factory=dict)


PromptBuilder = Callable[[Mapping[str, Any]], str]


def is_present(value: Any) -> bool:
    """True when an argument value carries content."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple)):
        return any(is_present(v) for v in value)
    return True


def as_list(value: Any) -> list[Any]:
    """Normalize a single value or a list into a list of present values."""
    items = list(value) if isinstance(value, (list, tuple)) else [value]
    return [item for item in items if is_present(item)]


def numbered(items: list[Any]) -> str:
    """Render items as a 1-based numbered list, one per line."""
    return "".join(f"\n{i}. {item}" for i, item in enumerate(items, start=1))


@dataclass(frozen=True)
class PromptTemplate:
    """A named, pure mapping from arguments to an ``ask_gemini`` call."""

    name: TemplateName
    description: str
    arguments: tuple[TemplateArgument, ...]
    builder: PromptBuilder
    temperature: float
    #: At most one of *max_tokens* / *thinking_budget* is set.
    max_tokens: int | None = None
    thinking_budget: int | None = None
    tool: str = ASK_GEMINI

    def __post_init__(self) -> None:
        if self.max_tokens is not None and self.thinking_budget is not None:
            raise ValueError(
                f"template {self.name.value!r} declares both max_tokens and thinking_budget"
            )

    @property
    def required_arguments(self) -> tuple[str, ...]:
        return tuple(a.name for a in self.arguments if a.required)

    def build(self, arguments: Mapping[str, Any] | None = None) -> ToolInvocation:
        """Assemble the tool invocation for *arguments*.

        Raises:
            TemplateArgumentError: If a required argument is missing or blank.
        """
        args: Mapping[str, Any] = arguments or {}
        for name in self.required_arguments:
            if not is_present(args.get(name)):
                raise TemplateArgumentError(
                    f"{name} is required", argument=name
                )

        tool_args: dict[str, Any] = {
            "prompt": self.builder(args),
            "temperature": self.temperature,
        }
        if self.max_tokens is not None:
            tool_args["max_tokens"] = self.max_tokens
        if self.thinking_budget is not None:
            tool_args["thinking_budget"] = self.thinking_budget
        return ToolInvocation(tool=self.tool, arguments=tool_args)
