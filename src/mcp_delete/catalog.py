"""Catalog of the tools this server exposes."""

import logging
from collections import OrderedDict

from mcp_delete.models import DeleteFileArgs, ToolDescriptor

logger = logging.getLogger(__name__)

DELETE_FILE = "delete_file"
DELETE_FILE_DESCRIPTION = (
    "Delete a file at the specified path (supports both relative and absolute paths)"
)


def delete_file_schema() -> dict:
    """JSON schema for the delete_file arguments: one required string `path`."""
    path_field = DeleteFileArgs.model_fields["path"]
    return {
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": path_field.description,
            }
        },
        "required": ["path"],
    }


class ToolCatalog:
    """Ordered set of tool descriptors, keyed by name."""

    def __init__(self, descriptors: list[ToolDescriptor] | None = None):
        self._tools: dict[str, ToolDescriptor] = OrderedDict()
        for descriptor in descriptors or []:
            self.register(descriptor)

    def register(self, descriptor: ToolDescriptor) -> None:
        if descriptor.name in self._tools:
            logger.debug(f"Tool {descriptor.name} already registered, skipping")
            return

        self._tools[descriptor.name] = descriptor
        logger.debug(f"Registered tool: {descriptor.name}")

    def list_tools(self) -> list[ToolDescriptor]:
        """Get all tool descriptors in registration order."""
        return list(self._tools.values())

    def get(self, name: str) -> ToolDescriptor | None:
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def create_catalog() -> ToolCatalog:
    """Build the catalog served by mcp-delete."""
    return ToolCatalog(
        [
            ToolDescriptor(
                name=DELETE_FILE,
                description=DELETE_FILE_DESCRIPTION,
                inputSchema=delete_file_schema(),
            )
        ]
    )
