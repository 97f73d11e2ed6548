"""gemini-mcp: Gemini with Google Search and URL context as an MCP server.

Public API:
    - ToolDispatcher: validate -> generate -> normalize -> format for tool calls
    - validate_request(): untyped tool arguments to a GenerationRequest
    - normalize_response(): raw Gemini responses to a GenerationResult
    - resolve_prompt(): research prompt templates to ready-to-run tool calls
    - Config: configuration dataclass
"""

from __future__ import annotations

import logging

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("gemini-mcp")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

from gemini_mcp.config import Config
from gemini_mcp.constants import SamplingControl
from gemini_mcp.errors import (
    ConfigurationError,
    GeminiMcpError,
    GenerationError,
    TemplateArgumentError,
    UnknownOperationError,
    UnknownTemplateError,
    ValidationError,
)
from gemini_mcp.prompts import PromptResolution, list_templates, resolve_prompt
from gemini_mcp.providers import GeminiClient, create_client
from gemini_mcp.request import GenerationRequest, validate_request
from gemini_mcp.result import GenerationResult, normalize_response
from gemini_mcp.tools import ToolDispatcher, ToolResponse

# Library-level NullHandler: stay silent unless the host configures logging.
logging.getLogger("gemini_mcp").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "GeminiClient",
    "GeminiMcpError",
    "GenerationError",
    "GenerationRequest",
    "GenerationResult",
    "PromptResolution",
    "SamplingControl",
    "TemplateArgumentError",
    "ToolDispatcher",
    "ToolResponse",
    "UnknownOperationError",
    "UnknownTemplateError",
    "ValidationError",
    "create_client",
    "list_templates",
    "normalize_response",
    "resolve_prompt",
    "validate_request",
]
