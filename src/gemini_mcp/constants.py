"""Shared constants: tool names, sampling bounds and defaults."""

from __future__ import annotations

from enum import Enum

SERVER_NAME = "gemini-mcp-server"

ASK_GEMINI = "ask_gemini"

DEFAULT_MODEL = "gemini-2.5-flash"

# Applied by the adapter whenever the caller leaves temperature unset.
DEFAULT_TEMPERATURE = 0.7

TEMPERATURE_MIN = 0.0
TEMPERATURE_MAX = 2.0


class SamplingControl(str, Enum):
    """Secondary sampling control accepted by a protocol revision.

    Revisions accept exactly one of these, never both.
    """

    MAX_TOKENS = "max_tokens"
    THINKING_BUDGET = "thinking_budget"


DEFAULT_SAMPLING_CONTROL = SamplingControl.THINKING_BUDGET

# Inclusive bounds per control.
SAMPLING_CONTROL_BOUNDS: dict[SamplingControl, tuple[int, int]] = {
    SamplingControl.MAX_TOKENS: (1, 8192),
    SamplingControl.THINKING_BUDGET: (128, 32768),
}
