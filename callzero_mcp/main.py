from __future__ import annotations

import json
import logging
import signal
import sys
from typing import Any, Dict, List, Optional

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from . import __version__
from .config import Settings, configure_logging, get_settings
from .errors import ConfigurationError, UnknownToolError
from .http_client import CallZeroClient
from .tools import ToolRegistry
from .tools import call_tools, management_tools, memory_tools, template_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "callzero-mcp"


def build_registry(client: CallZeroClient) -> ToolRegistry:
    """Register every tool group, in catalogue order."""
    registry = ToolRegistry()
    call_tools.register_tools(registry, client)
    management_tools.register_tools(registry, client)
    memory_tools.register_tools(registry, client)
    template_tools.register_tools(registry, client)
    return registry


def format_tool_result(result: Dict[str, Any]) -> List[types.TextContent]:
    return [types.TextContent(type="text", text=json.dumps(result, indent=2))]


def create_server(
    settings: Settings,
    client: Optional[CallZeroClient] = None,
) -> Server:
    """
    Create and configure the MCP server with all registered tools.

    The backend address and credential are validated here, once, when the
    client is built.
    """
    if client is None:
        client = CallZeroClient(settings)
    registry = build_registry(client)

    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.list_tools()

    # Arguments are validated by each tool so failures come back as text.
    @server.call_tool(validate_input=False)
    async def call_tool(
        name: str,
        arguments: Dict[str, Any],
    ) -> List[types.TextContent]:
        result = await registry.dispatch(name, arguments)
        return format_tool_result(result)

    # The SDK turns any exception raised inside call_tool into an isError
    # text result, so unknown names are rejected before it runs.
    sdk_call_tool = server.request_handlers[types.CallToolRequest]

    async def call_known_tool(req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        if name not in registry:
            logger.warning("Rejected call to unknown tool %r", name)
            raise McpError(
                types.ErrorData(code=types.INVALID_PARAMS, message=str(UnknownToolError(name)))
            )
        return await sdk_call_tool(req)

    server.request_handlers[types.CallToolRequest] = call_known_tool

    return server


async def _shutdown_on_signal(scope: anyio.CancelScope) -> None:
    with anyio.open_signal_receiver(signal.SIGINT, signal.SIGTERM) as signals:
        async for signum in signals:
            logger.info("Received %s, shutting down MCP server...", signal.Signals(signum).name)
            scope.cancel()
            return


async def serve(settings: Settings) -> None:
    client = CallZeroClient(settings)
    try:
        server = create_server(settings, client=client)
        async with stdio_server() as (read_stream, write_stream):
            async with anyio.create_task_group() as tg:
                tg.start_soon(_shutdown_on_signal, tg.cancel_scope)
                logger.info("CallZero MCP server running")
                logger.info("Available tools:")
                logger.info("  Core: make_call, get_call_status, get_call_transcript")
                logger.info("  Management: cancel_call, list_calls, get_credit_balance, share_call")
                logger.info("  Memory: create_memory, search_memories, get_contact_memories")
                logger.info("  Templates: search_form_templates")
                await server.run(
                    read_stream,
                    write_stream,
                    server.create_initialization_options(),
                )
                tg.cancel_scope.cancel()
    finally:
        await client.aclose()


def describe_settings_error(exc: ValidationError) -> str:
    for err in exc.errors():
        field = str((err.get("loc") or ("",))[0])
        if field == "api_key" and err.get("type") == "missing":
            return (
                "CALLZERO_API_KEY environment variable is required. "
                'Set your CallZero API key: export CALLZERO_API_KEY="callzero_your_api_key_here"'
            )
    return "; ".join(
        f"CALLZERO_{str(err['loc'][0]).upper()}: {err['msg']}" if err.get("loc") else err["msg"]
        for err in exc.errors()
    )


def main() -> None:
    """
    Entrypoint for running the MCP server over stdio.

    Exits with status 1 on bad configuration or startup failure, 0 on SIGINT/SIGTERM.
    """
    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging()
        logger.error("Error: %s", describe_settings_error(exc))
        sys.exit(1)

    configure_logging(settings.log_level)

    try:
        anyio.run(serve, settings)
    except ConfigurationError as exc:
        logger.error("Failed to start MCP server: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down MCP server...")
    except Exception:
        logger.exception("Failed to start MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
