"""Tests for error kinds and their protocol form."""

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND

from mcp_delete.errors import (
    DeleteFailedError,
    FileNotFoundInPaths,
    InvalidParamsError,
    UnknownToolError,
)


def test_codes_and_kinds():
    assert (InvalidParamsError.kind, InvalidParamsError.code) == ("invalid_params", INVALID_PARAMS)
    assert (UnknownToolError.kind, UnknownToolError.code) == ("method_not_found", METHOD_NOT_FOUND)
    assert (FileNotFoundInPaths.kind, FileNotFoundInPaths.code) == ("not_found", INVALID_PARAMS)
    assert (DeleteFailedError.kind, DeleteFailedError.code) == ("internal_error", INTERNAL_ERROR)


def test_not_found_error_data():
    error = FileNotFoundInPaths("a.txt", ["a.txt", "/w/a.txt", "/r/a.txt"])

    data = error.to_error_data()

    assert data.code == INVALID_PARAMS
    assert data.message == "File not found: a.txt\nTried paths:\na.txt\n/w/a.txt\n/r/a.txt"
    assert data.data == {
        "kind": "not_found",
        "path": "a.txt",
        "tried_paths": ["a.txt", "/w/a.txt", "/r/a.txt"],
    }


def test_delete_failed_includes_cause():
    cause = IsADirectoryError(21, "Is a directory", "docs")

    error = DeleteFailedError("docs", ["docs", "/w/docs", "/w/docs"], cause)

    assert error.message.startswith("Failed to delete file docs: [Errno 21] Is a directory")
    assert error.message.endswith("Tried paths:\ndocs\n/w/docs\n/w/docs")


def test_to_mcp_error():
    mcp_error = UnknownToolError("Unknown tool").to_mcp_error()

    assert isinstance(mcp_error, McpError)
    assert mcp_error.error.code == METHOD_NOT_FOUND
    assert mcp_error.error.data == {"kind": "method_not_found"}
    assert str(mcp_error) == "Unknown tool"
