"""Core data models for the delete server."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """A callable operation as advertised to clients."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class DeleteRequest(BaseModel):
    """One decoded tool invocation."""

    operation_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class DeleteFileArgs(BaseModel):
    """Validated arguments for delete_file.

    Numbers are accepted and coerced to their string form; any other
    non-string value, or an empty string, is rejected.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    path: str = Field(
        min_length=1,
        description="Path to the file to delete (relative to working directory or absolute)",
    )


class DeleteSuccess(BaseModel):
    """Outcome of a delete that removed a file."""

    reported_path: str
    resolved_path: str = Field(exclude=True)

    @property
    def message(self) -> str:
        return f"Successfully deleted file: {self.reported_path}"

    def to_message(self) -> str:
        return self.message
