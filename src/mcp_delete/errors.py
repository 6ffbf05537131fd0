"""Typed failures raised while handling a delete_file call.

Each failure carries a `kind` that callers can match on and the MCP error
code it is reported with. The dispatcher converts them to `McpError` before
they reach the transport.
"""

from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


def format_tried_paths(candidates: list[str]) -> str:
    return "Tried paths:\n" + "\n".join(candidates)


class DeleteFileError(Exception):
    """Base class for delete_file failures."""

    kind: str = "internal_error"
    code: int = INTERNAL_ERROR

    def __init__(self, message: str, path: str | None = None, candidates: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.candidates = list(candidates or [])

    def to_error_data(self) -> ErrorData:
        data: dict[str, Any] = {"kind": self.kind}
        if self.path is not None:
            data["path"] = self.path
        if self.candidates:
            data["tried_paths"] = self.candidates
        return ErrorData(code=self.code, message=self.message, data=data)

    def to_mcp_error(self) -> McpError:
        return McpError(self.to_error_data())


class InvalidParamsError(DeleteFileError):
    """The caller supplied no usable `path` argument."""

    kind = "invalid_params"
    code = INVALID_PARAMS


class UnknownToolError(DeleteFileError):
    """The requested operation is not served here."""

    kind = "method_not_found"
    code = METHOD_NOT_FOUND


class FileNotFoundInPaths(DeleteFileError):
    """None of the candidate paths exists."""

    kind = "not_found"
    # Reported with the same code the server has always used for a bad path.
    code = INVALID_PARAMS

    def __init__(self, path: str, candidates: list[str]):
        super().__init__(
            f"File not found: {path}\n{format_tried_paths(candidates)}",
            path=path,
            candidates=candidates,
        )


class DeleteFailedError(DeleteFileError):
    """The resolved file exists but could not be removed."""

    kind = "internal_error"
    code = INTERNAL_ERROR

    def __init__(self, path: str, candidates: list[str], cause: BaseException):
        super().__init__(
            f"Failed to delete file {path}: {cause}\n{format_tried_paths(candidates)}",
            path=path,
            candidates=candidates,
        )
