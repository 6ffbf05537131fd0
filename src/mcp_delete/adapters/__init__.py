"""Adapters for exposing mcp-delete through protocol runtimes."""

from .fastmcp_adapter import create_fastmcp_server, register_tools, to_mcp_tool

__all__ = ["create_fastmcp_server", "register_tools", "to_mcp_tool"]
