"""Command-line interface for MCP DocDB."""

import asyncio
import sys
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from .config.settings import Settings
from .core.server import TRANSPORTS, DocDBServer
from .store import DocumentationStore

T = TypeVar("T")

app = typer.Typer(
    name="mcp-docdb",
    help="MCP DocDB - Documentation knowledge base over the Model Context Protocol",
    add_completion=False,
)
# stdout is reserved for the stdio transport
console = Console(stderr=True)

ENV_TEMPLATE = """# MCP DocDB Configuration
MCP_TRANSPORT=stdio
SERVER_HOST=localhost
SERVER_PORT=8000
DEBUG=false
LOG_LEVEL=INFO

# MongoDB
MONGODB_URL=mongodb://localhost:27017
MONGODB_DATABASE=documentation_db
MONGODB_COLLECTION=documentations
ENSURE_TEXT_INDEX=true

# Query limits
DEFAULT_SEARCH_LIMIT=10
RESOURCE_LIST_LIMIT=10
"""


def _load_settings(mongodb_url: Optional[str] = None, **overrides) -> Settings:
    settings = Settings(**overrides)
    if mongodb_url:
        settings.MONGODB_URL = mongodb_url
    return settings


def _with_store(settings: Settings, action: Callable[[DocumentationStore], Awaitable[T]]) -> T:
    """Run one store action against a freshly connected store."""

    async def _run() -> T:
        store = DocumentationStore(settings)
        await store.initialize()
        try:
            return await action(store)
        finally:
            await store.close()

    return asyncio.run(_run())


@app.command("server")
def run_server(
    transport: str = typer.Option("stdio", "--transport", "-t", help="MCP transport: stdio or sse"),
    host: str = typer.Option("localhost", "--host", "-h", help="Host to bind to (sse)"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to (sse)"),
    mongodb_url: Optional[str] = typer.Option(None, "--mongodb-url", help="MongoDB connection URL"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Start the MCP DocDB server."""
    if transport not in TRANSPORTS:
        console.print(f"[red]Unknown transport {transport!r}, expected one of {', '.join(TRANSPORTS)}[/red]")
        raise typer.Exit(2)

    settings = _load_settings(
        mongodb_url,
        MCP_TRANSPORT=transport,
        SERVER_HOST=host,
        SERVER_PORT=port,
    )
    if debug:
        settings.DEBUG = True
        settings.LOG_LEVEL = "DEBUG"

    where = f"{host}:{port}" if transport == "sse" else "stdio"
    console.print(f"[green]Starting MCP DocDB server on {where}[/green]")

    try:
        asyncio.run(DocDBServer(settings).run())
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")
    except Exception as e:
        console.print(f"[red]Error starting server: {e}[/red]")
        sys.exit(1)


@app.command("ensure-index")
def ensure_index(
    mongodb_url: Optional[str] = typer.Option(None, "--mongodb-url", help="MongoDB connection URL"),
) -> None:
    """Create the full-text index required by search-documentation."""
    settings = _load_settings(mongodb_url, ENSURE_TEXT_INDEX=False)

    try:
        name = _with_store(settings, lambda store: store.ensure_text_index())
    except Exception as e:
        console.print(f"[red]Failed to create text index: {e}[/red]")
        sys.exit(1)

    console.print(f"[green]Text index ready: {name}[/green]")


@app.command("schema")
def show_schema(
    mongodb_url: Optional[str] = typer.Option(None, "--mongodb-url", help="MongoDB connection URL"),
) -> None:
    """Print the collections and sampled field names of the database."""
    settings = _load_settings(mongodb_url, ENSURE_TEXT_INDEX=False)

    try:
        schema = _with_store(settings, lambda store: store.describe_schema())
    except Exception as e:
        console.print(f"[red]Failed to read schema: {e}[/red]")
        sys.exit(1)

    table = Table(title=f"Database: {settings.MONGODB_DATABASE}")
    table.add_column("Collection", style="cyan")
    table.add_column("Fields")
    for collection, fields in schema.items():
        table.add_row(collection, ", ".join(fields))
    console.print(table)


@app.command("init")
def init_project(
    directory: Path = typer.Argument(Path("."), help="Directory to initialize"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files"),
) -> None:
    """Write a starter .env configuration."""
    directory = directory.resolve()
    directory.mkdir(parents=True, exist_ok=True)
    config_file = directory / ".env"

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration file already exists: {config_file}[/yellow]")
        console.print("Use --force to overwrite")
        return

    config_file.write_text(ENV_TEMPLATE)
    console.print(f"[green]Wrote {config_file}[/green]")
    console.print("Next: [bold]mcp-docdb ensure-index[/bold], then [bold]mcp-docdb server[/bold]")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"MCP DocDB version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
