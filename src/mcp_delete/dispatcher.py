"""Dispatch tool calls to the file deletion logic."""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from mcp_delete.catalog import DELETE_FILE, ToolCatalog, create_catalog
from mcp_delete.config import Config
from mcp_delete.errors import (
    DeleteFailedError,
    DeleteFileError,
    FileNotFoundInPaths,
    InvalidParamsError,
    UnknownToolError,
)
from mcp_delete.models import DeleteFileArgs, DeleteRequest, DeleteSuccess
from mcp_delete.resolve import candidate_paths, first_existing

logger = logging.getLogger(__name__)


def parse_delete_args(arguments: dict[str, Any] | None) -> DeleteFileArgs:
    """Validate raw call arguments before any filesystem access."""
    try:
        return DeleteFileArgs.model_validate(arguments or {})
    except ValidationError as e:
        raise InvalidParamsError("File path is required") from e


class DeleteDispatcher(BaseModel):
    """Executes exactly one deletion per invocation.

    Holds no per-call state; `cwd` pins the working directory used for
    resolution and defaults to the process working directory at call time.
    """

    model_config = {"arbitrary_types_allowed": True}
    config: Config = Field(default_factory=Config)
    catalog: ToolCatalog = Field(default_factory=create_catalog, exclude=True)
    cwd: Path | None = None

    def candidates_for(self, path: str) -> list[str]:
        return candidate_paths(path, cwd=self.cwd, fallback_root=self.config.fallback_root)

    def delete_file(self, arguments: dict[str, Any] | None) -> DeleteSuccess:
        """Resolve and delete the file named by `arguments["path"]`.

        Raises:
            InvalidParamsError: `path` is missing, empty or not a string.
            FileNotFoundInPaths: no candidate location exists.
            DeleteFailedError: the resolved file could not be removed.
        """
        args = parse_delete_args(arguments)
        candidates = self.candidates_for(args.path)

        target = first_existing(candidates)
        if target is None:
            raise FileNotFoundInPaths(args.path, candidates)

        try:
            os.unlink(target)
        except OSError as e:
            raise DeleteFailedError(args.path, candidates, e) from e

        logger.info(f"Deleted {target} (requested as {args.path!r})")
        return DeleteSuccess(reported_path=args.path, resolved_path=target)

    def _dispatch(self, operation_name: str, arguments: dict[str, Any] | None) -> DeleteSuccess:
        if operation_name != DELETE_FILE:
            raise UnknownToolError("Unknown tool")
        return self.delete_file(arguments)

    def invoke(self, operation_name: str, arguments: dict[str, Any] | None = None) -> DeleteSuccess:
        """Handle one tool call, converting failures to protocol errors.

        Raises:
            McpError: carrying the error code and a message that names the
                input path and every candidate tried.
        """
        logger.info(f"Calling tool: {operation_name} with arguments: {arguments}")
        try:
            return self._dispatch(operation_name, arguments)
        except DeleteFailedError as e:
            logger.exception(e.message)
            raise e.to_mcp_error() from e
        except DeleteFileError as e:
            logger.warning(e.message)
            raise e.to_mcp_error() from e

    def handle(self, request: DeleteRequest) -> DeleteSuccess:
        return self.invoke(request.operation_name, request.arguments)
