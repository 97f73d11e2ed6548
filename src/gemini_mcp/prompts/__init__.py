"""Prompt template registry.

The registry is built once at import and is read-only afterwards. Resolution
never calls the network: it produces a human-readable instruction naming the
tool to call and its JSON arguments.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import json
import logging
from types import MappingProxyType
from typing import Any

from gemini_mcp.constants import DEFAULT_SAMPLING_CONTROL, SamplingControl
from gemini_mcp.errors import UnknownTemplateError

from .registry import (
    PromptTemplate,
    TemplateArgument,
    TemplateName,
    ToolInvocation,
)
from .templates import ALL_TEMPLATES

logger = logging.getLogger(__name__)

REGISTRY: Mapping[str, PromptTemplate] = MappingProxyType(
    {template.name.value: template for template in ALL_TEMPLATES}
)


@dataclass(frozen=True)
class PromptResolution:
    """A resolved template: the invocation plus text for the caller to act on."""

    name: str
    description: str
    invocation: ToolInvocation
    instruction: str


def list_templates() -> list[PromptTemplate]:
    """Return all registered templates in registration order."""
    return list(REGISTRY.values())


def get_template(name: str) -> PromptTemplate:
    """Look up a template by name.

    Raises:
        UnknownTemplateError: If *name* is not registered.
    """
    try:
        return REGISTRY[name]
    except KeyError:
        raise UnknownTemplateError(name) from None


def _render_instruction(invocation: ToolInvocation) -> str:
    rendered = json.dumps(invocation.arguments, indent=2, ensure_ascii=False)
    return (
        f"Please use the {invocation.tool} tool with the following arguments:"
        f"\n\n```json\n{rendered}\n```"
    )


def resolve_prompt(
    name: str,
    arguments: Mapping[str, Any] | None = None,
    *,
    control: SamplingControl = DEFAULT_SAMPLING_CONTROL,
) -> PromptResolution:
    """Resolve template *name* against *arguments*.

    A template default for a secondary control that *control* does not accept
    is dropped, so the invocation always validates against this server.

    Raises:
        UnknownTemplateError: If *name* is not registered.
        TemplateArgumentError: If a required argument is missing.
    """
    template = get_template(name)
    invocation = template.build(arguments)

    control = SamplingControl(control)
    inactive = next(c for c in SamplingControl if c is not control)
    if inactive.value in invocation.arguments:
        logger.debug(
            "Dropping %s default from template %s", inactive.value, template.name.value
        )
        kept = {k: v for k, v in invocation.arguments.items() if k != inactive.value}
        invocation = ToolInvocation(tool=invocation.tool, arguments=kept)

    return PromptResolution(
        name=template.name.value,
        description=template.description,
        invocation=invocation,
        instruction=_render_instruction(invocation),
    )


__all__ = [
    "REGISTRY",
    "PromptResolution",
    "PromptTemplate",
    "TemplateArgument",
    "TemplateName",
    "ToolInvocation",
    "get_template",
    "list_templates",
    "resolve_prompt",
]
