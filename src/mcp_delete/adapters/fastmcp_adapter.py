"""FastMCP adapter exposing the tool catalog over MCP."""

import logging

from fastmcp.server import FastMCP
from mcp import types

from mcp_delete import SERVER_NAME, __version__
from mcp_delete.catalog import ToolCatalog
from mcp_delete.dispatcher import DeleteDispatcher
from mcp_delete.models import ToolDescriptor

logger = logging.getLogger(__name__)


def to_mcp_tool(descriptor: ToolDescriptor) -> types.Tool:
    return types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=dict(descriptor.input_schema),
    )


def register_tools(server: FastMCP, catalog: ToolCatalog, dispatcher: DeleteDispatcher) -> None:
    """Serve tools/list from `catalog` and tools/call through `dispatcher`.

    The handlers sit on the low-level MCP server, ahead of FastMCP's tool
    manager: call arguments reach the dispatcher unvalidated, and an
    `McpError` it raises is answered as a JSON-RPC error with its code and
    data intact.
    """

    async def list_tools(request: types.ListToolsRequest) -> types.ServerResult:
        tools = [to_mcp_tool(descriptor) for descriptor in catalog.list_tools()]
        return types.ServerResult(types.ListToolsResult(tools=tools))

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = dispatcher.invoke(request.params.name, request.params.arguments)
        content = [types.TextContent(type="text", text=result.to_message())]
        return types.ServerResult(types.CallToolResult(content=content))

    handlers = server._mcp_server.request_handlers
    handlers[types.ListToolsRequest] = list_tools
    handlers[types.CallToolRequest] = call_tool
    logger.debug(f"Registered MCP tools: {[d.name for d in catalog.list_tools()]}")


def create_fastmcp_server(
    dispatcher: DeleteDispatcher,
    catalog: ToolCatalog | None = None,
    name: str = SERVER_NAME,
) -> FastMCP:
    """Create a FastMCP server that serves the catalog through `dispatcher`.

    Args:
        dispatcher: Dispatcher that executes tool calls
        catalog: Tools to advertise (defaults to the dispatcher's catalog)
        name: Server name

    Returns:
        FastMCP server, ready for `run()` on the stdio transport

    Example:
        from mcp_delete.adapters.fastmcp_adapter import create_fastmcp_server
        from mcp_delete.config import Config
        from mcp_delete.dispatcher import DeleteDispatcher

        dispatcher = DeleteDispatcher(config=Config(fallback_root="/srv/files"))
        create_fastmcp_server(dispatcher).run()
    """
    server = FastMCP(name=name, version=__version__)
    register_tools(server, catalog if catalog is not None else dispatcher.catalog, dispatcher)
    return server
