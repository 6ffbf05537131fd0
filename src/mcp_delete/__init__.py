"""mcp-delete - MCP server exposing a single delete_file tool."""

SERVER_NAME = "mcp-delete"
__version__ = "0.1.0"

from mcp_delete.catalog import DELETE_FILE, ToolCatalog, create_catalog  # noqa: E402
from mcp_delete.config import Config  # noqa: E402
from mcp_delete.dispatcher import DeleteDispatcher  # noqa: E402
from mcp_delete.errors import (  # noqa: E402
    DeleteFailedError,
    DeleteFileError,
    FileNotFoundInPaths,
    InvalidParamsError,
    UnknownToolError,
)
from mcp_delete.models import DeleteFileArgs, DeleteRequest, DeleteSuccess, ToolDescriptor  # noqa: E402

__all__ = [
    "SERVER_NAME",
    "__version__",
    # Catalog
    "DELETE_FILE",
    "ToolCatalog",
    "ToolDescriptor",
    "create_catalog",
    # Dispatch
    "Config",
    "DeleteDispatcher",
    "DeleteFileArgs",
    "DeleteRequest",
    "DeleteSuccess",
    # Errors
    "DeleteFileError",
    "DeleteFailedError",
    "FileNotFoundInPaths",
    "InvalidParamsError",
    "UnknownToolError",
]
