"""Configuration management for the mcp-delete server."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Configuration for the delete server.

    Values come from keyword arguments, then `MCP_DELETE_*` environment
    variables, then a local `.env` file.
    """

    fallback_root: Path | None = Field(
        default=None,
        description="Base directory tried last when resolving relative paths",
    )
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "MCP_DELETE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "forbid",
    }

    @field_validator("fallback_root", mode="before")
    @classmethod
    def _empty_root_disables(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @property
    def fallback_enabled(self) -> bool:
        return self.fallback_root is not None
