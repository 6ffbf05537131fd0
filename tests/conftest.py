"""Shared fixtures for mcp-delete tests."""

from pathlib import Path

import pytest

from mcp_delete.config import Config
from mcp_delete.dispatcher import DeleteDispatcher


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty working directory with no MCP_DELETE_* settings."""
    for var in ("MCP_DELETE_FALLBACK_ROOT", "MCP_DELETE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def fallback_root(tmp_path) -> Path:
    root = tmp_path / "fallback"
    root.mkdir()
    return root


@pytest.fixture
def dispatcher() -> DeleteDispatcher:
    """Dispatcher with the fallback root disabled."""
    return DeleteDispatcher(config=Config())


@pytest.fixture
def fallback_dispatcher(fallback_root) -> DeleteDispatcher:
    return DeleteDispatcher(config=Config(fallback_root=fallback_root))
