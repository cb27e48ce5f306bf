"""Typer CLI interface for Move On Up."""

import asyncio
import json
import signal
import sys
from typing import NoReturn, Optional

import httpx
import typer
import uvicorn
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import settings
from .engine import step as step_url
from .exceptions import MoveOnUpError
from .models.url import Url
from .navigation import build_jump_list, resolve_mode

app = typer.Typer(
    name="move-on-up",
    help="Move On Up - climb from a URL towards its site root",
    add_completion=False,
)
console = Console()


async def check_service_running(host: str, port: int) -> bool:
    """Check if service is already running on port."""
    try:
        async with httpx.AsyncClient() as client:
            resp = await client.get(f"http://{host}:{port}/health", timeout=2.0)
            return resp.status_code == 200
    except httpx.HTTPError:
        return False


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


@app.command()
def step(
    url: str = typer.Argument(..., help="Absolute URL to start from"),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Navigation mode: standard, root, param or slash-keep "
        "(defaults to DEFAULT_MODE)",
    ),
    repeat: int = typer.Option(
        1, "--repeat", "-n", min=1, help="Number of steps to take"
    ),
):
    """Print the URL one (or more) steps up."""
    moved = False
    try:
        effective = resolve_mode(mode, settings.DEFAULT_MODE)
        current = Url.parse(url)
        for _ in range(repeat):
            following = step_url(current, effective)
            if following == current:
                break
            current = following
            moved = True
            console.print(Text(current.to_string()), soft_wrap=True)
    except MoveOnUpError as e:
        _fail(e.message)

    if not moved:
        console.print("[yellow]Already at the top.[/yellow]")


@app.command()
def chain(
    url: str = typer.Argument(..., help="Absolute URL to start from"),
    max_steps: int = typer.Option(
        settings.MAX_CHAIN_STEPS, "--max-steps", min=0, help="Step cap"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the jump list as JSON"),
):
    """List every ancestor URL, deepest first."""
    try:
        entries = build_jump_list(url, max_steps=max_steps)
    except MoveOnUpError as e:
        _fail(e.message)

    if as_json:
        typer.echo(json.dumps([entry.model_dump() for entry in entries], indent=2))
        return

    if not entries:
        console.print("[yellow]Already at the top.[/yellow]")
        return

    table = Table(title="Navigate up")
    table.add_column("Id", style="dim")
    table.add_column("Title")
    table.add_column("URL", style="cyan")
    for entry in entries:
        table.add_row(entry.id, Text(entry.title), Text(entry.url))
    console.print(table)


@app.command()
def serve(
    port: int = typer.Option(settings.PORT, "--port", help="HTTP port"),
    host: str = typer.Option(settings.HOST, "--host", help="Bind address"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    reload: bool = typer.Option(
        False, "--reload", help="Enable auto-reload (dev mode)"
    ),
):
    """Start the Move On Up service for the browser extension."""
    # Check if already running
    if asyncio.run(check_service_running(host, port)):
        _fail(f"Service already running on port {port}")

    # Setup signal handlers for graceful shutdown
    def signal_handler(sig, frame):
        console.print("\n[yellow]Shutting down gracefully...[/yellow]")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    console.print(
        Panel.fit(
            f"[bold]Move On Up Service[/bold]\n\n"
            f"🧭 Default mode: {settings.DEFAULT_MODE.value}\n"
            f"📡 HTTP: http://{host}:{port}\n"
            f"🔍 Debug: {'enabled' if debug else 'disabled'}",
            border_style="green",
        )
    )

    uvicorn.run(
        "move_on_up.main:app",
        host=host,
        port=port,
        log_level="debug" if debug else "info",
        reload=reload,
        access_log=debug,
    )


if __name__ == "__main__":
    app()
