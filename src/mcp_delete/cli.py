"""Command line entry point for the mcp-delete server."""

import json
import logging
import os
import sys
from pathlib import Path

import click
from mcp.shared.exceptions import McpError

from mcp_delete.adapters.fastmcp_adapter import create_fastmcp_server
from mcp_delete.catalog import DELETE_FILE
from mcp_delete.config import Config
from mcp_delete.dispatcher import DeleteDispatcher

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname).1s %(asctime)s %(filename)s:%(lineno)d - %(message)s"


def setup_logging(level: str) -> None:
    """Log to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if level != "DEBUG":
        logging.getLogger("fastmcp").setLevel(logging.WARNING)
        logging.getLogger("mcp").setLevel(logging.WARNING)


def load_config(fallback_root: Path | None, log_level: str | None) -> Config:
    overrides = {}
    if fallback_root is not None:
        overrides["fallback_root"] = fallback_root
    if log_level is not None:
        overrides["log_level"] = log_level
    return Config(**overrides)


def serve(config: Config) -> None:
    dispatcher = DeleteDispatcher(config=config)
    server = create_fastmcp_server(dispatcher)

    click.echo("File deletion MCP server running on stdio", err=True)
    click.echo(f"Process working directory: {os.getcwd()}", err=True)
    if config.fallback_enabled:
        logger.info(f"Fallback root: {config.fallback_root}")
    server.run()


@click.group(invoke_without_command=True)
@click.option(
    "--fallback-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory tried last when resolving relative paths",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: INFO)",
)
@click.pass_context
def cli(ctx: click.Context, fallback_root: Path | None, log_level: str | None):
    """Serve the delete_file tool over MCP on stdio."""
    config = load_config(fallback_root, log_level)
    setup_logging(config.log_level)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        serve(config)


@cli.command(name="serve")
@click.pass_obj
def serve_command(config: Config):
    """Start the stdio server (the default)."""
    serve(config)


@cli.command(name="tools")
@click.pass_obj
def tools_command(config: Config):
    """Print the tool catalog as JSON."""
    dispatcher = DeleteDispatcher(config=config)
    tools = [tool.to_json_dict() for tool in dispatcher.catalog.list_tools()]
    click.echo(json.dumps({"tools": tools}, indent=2))


@cli.command(name="delete")
@click.argument("path")
@click.pass_obj
def delete_command(config: Config, path: str):
    """Delete PATH once, resolving it the way the server does."""
    dispatcher = DeleteDispatcher(config=config)
    try:
        result = dispatcher.invoke(DELETE_FILE, {"path": path})
    except McpError as e:
        error = e.error
        kind = (error.data or {}).get("kind")
        click.echo(json.dumps({"error": error.message, "code": error.code, "kind": kind}, indent=2))
        sys.exit(1)

    click.echo(result.to_message())


def main():
    cli()


if __name__ == "__main__":
    main()
