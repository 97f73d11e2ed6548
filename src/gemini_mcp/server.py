"""MCP binding: exposes the tool dispatcher and prompt registry over stdio."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from gemini_mcp import __version__
from gemini_mcp.constants import SERVER_NAME, SamplingControl
from gemini_mcp.errors import GeminiMcpError, UnknownTemplateError
from gemini_mcp.prompts import list_templates, resolve_prompt
from gemini_mcp.providers import create_client
from gemini_mcp.tools import ToolDispatcher

if TYPE_CHECKING:
    from gemini_mcp.config import Config
    from gemini_mcp.prompts import PromptResolution, PromptTemplate
    from gemini_mcp.tools import ToolDescriptor, ToolResponse

logger = logging.getLogger(__name__)


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.input_schema,
    )


def to_call_tool_result(response: ToolResponse) -> types.CallToolResult:
    """Convert a dispatcher response into an MCP tool result.

    Errors carry ``structuredContent.error.code`` as the machine-readable
    discriminator next to the readable text.
    """
    content = [types.TextContent(type="text", text=response.text)]
    if not response.is_error:
        return types.CallToolResult(content=content)
    return types.CallToolResult(
        content=content,
        isError=True,
        structuredContent={
            "error": {"code": response.error_code, "message": response.text}
        },
    )


def to_mcp_prompt(template: PromptTemplate) -> types.Prompt:
    return types.Prompt(
        name=template.name.value,
        description=template.description,
        arguments=[
            types.PromptArgument(
                name=arg.name, description=arg.description, required=arg.required
            )
            for arg in template.arguments
        ],
    )


def to_get_prompt_result(resolution: PromptResolution) -> types.GetPromptResult:
    return types.GetPromptResult(
        description=resolution.description,
        messages=[
            types.PromptMessage(
                role="user",
                content=types.TextContent(type="text", text=resolution.instruction),
            )
        ],
    )


def get_prompt_result(
    name: str,
    arguments: dict[str, Any] | None,
    control: SamplingControl,
) -> types.GetPromptResult:
    """Resolve a template, mapping failures to an MCP ``INVALID_PARAMS`` error."""
    try:
        resolution = resolve_prompt(name, arguments, control=control)
    except UnknownTemplateError as exc:
        raise McpError(
            types.ErrorData(
                code=types.INVALID_PARAMS, message=str(exc), data={"code": exc.code}
            )
        ) from exc
    except GeminiMcpError as exc:
        raise McpError(
            types.ErrorData(
                code=types.INVALID_PARAMS,
                message=f"Error in prompt builder for '{name}': {exc}",
                data={"code": exc.code},
            )
        ) from exc
    return to_get_prompt_result(resolution)


def build_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server and register its handlers."""
    server: Server = Server(SERVER_NAME, version=__version__)
    control = dispatcher.sampling_control

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(d) for d in dispatcher.list_tools()]

    # Arguments are validated by the dispatcher so failures keep their codes.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return to_call_tool_result(await dispatcher.call(name, arguments))

    @server.list_prompts()
    async def list_prompts() -> list[types.Prompt]:
        return [to_mcp_prompt(t) for t in list_templates()]

    @server.get_prompt()
    async def get_prompt(
        name: str, arguments: dict[str, str] | None
    ) -> types.GetPromptResult:
        return get_prompt_result(name, arguments, control)

    return server


async def serve(config: Config) -> None:
    """Run the server on stdio until the host disconnects."""
    client = create_client(config)
    dispatcher = ToolDispatcher(client, sampling_control=config.sampling_control)
    server = build_server(dispatcher)

    logger.info(
        "Gemini MCP Server running on stdio (model: %s, API Key: %s)",
        config.model,
        "configured" if config.api_key else "NOT SET",
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )
