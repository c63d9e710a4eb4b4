"""
Database Commands.

Commands for database migrations using Alembic, plus direct table
creation for local development.
"""

import asyncio
import subprocess
import sys
from pathlib import Path

import typer
from rich.console import Console

from webcalendar.backend.core.logging import get_logger, log_with_source

app = typer.Typer(help="Database migration commands")
console = Console()
logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]
ALEMBIC_INI = PROJECT_ROOT / "webcalendar" / "backend" / "migrations" / "alembic.ini"


def _check_alembic() -> None:
    """Check that alembic.ini exists."""
    if not ALEMBIC_INI.exists():
        console.print("[red]Error: webcalendar/backend/migrations/alembic.ini not found[/red]")
        raise typer.Exit(1)


def _run_alembic(args: list[str]) -> None:
    """Run an alembic command."""
    cmd = [sys.executable, "-m", "alembic", "-c", str(ALEMBIC_INI)] + args

    try:
        result = subprocess.run(cmd, cwd=PROJECT_ROOT)
        if result.returncode != 0:
            raise typer.Exit(result.returncode)
    except FileNotFoundError:
        console.print("[red]Error: alembic not found. Install with: pip install alembic[/red]")
        raise typer.Exit(1)


@app.command()
def upgrade(
    revision: str = typer.Option("head", "--revision", "-r", help="Target revision"),
) -> None:
    """
    Upgrade database to a revision.

    Examples:
        cli.py db upgrade
        cli.py db upgrade -r 001
    """
    _check_alembic()
    console.print(f"[bold]Upgrading database to revision: {revision}[/bold]\n")
    _run_alembic(["upgrade", revision])
    console.print("\n[green]Upgrade completed[/green]")


@app.command()
def downgrade(
    revision: str = typer.Option(..., "--revision", "-r", help="Target revision"),
) -> None:
    """
    Downgrade database to a revision.

    Examples:
        cli.py db downgrade --revision -1
        cli.py db downgrade --revision base
    """
    _check_alembic()
    console.print(f"[bold]Downgrading database to revision: {revision}[/bold]\n")
    _run_alembic(["downgrade", revision])
    console.print("\n[green]Downgrade completed[/green]")


@app.command()
def current() -> None:
    """Show current database revision."""
    _check_alembic()
    console.print("[bold]Current database revision:[/bold]\n")
    _run_alembic(["current"])


@app.command()
def history() -> None:
    """Show migration history."""
    _check_alembic()
    console.print("[bold]Migration history:[/bold]\n")
    _run_alembic(["history", "--verbose"])


@app.command()
def generate(
    message: str = typer.Option(..., "--message", "-m", help="Migration message"),
) -> None:
    """
    Auto-generate a new migration from model changes.

    Examples:
        cli.py db generate -m "add reminders table"
    """
    _check_alembic()
    console.print(f"[bold]Generating migration: {message}[/bold]\n")
    _run_alembic(["revision", "--autogenerate", "-m", message])
    console.print("\n[green]Migration generated[/green]")


@app.command("create-tables")
def create_tables() -> None:
    """
    Create all tables directly from the models, skipping Alembic.

    Existing tables are left untouched. For local development only.
    """
    from webcalendar.backend.core.database import create_tables as _create_tables
    from webcalendar.backend.core.database import dispose_engine

    async def _run() -> list[str]:
        try:
            return await _create_tables()
        finally:
            await dispose_engine()

    try:
        tables = asyncio.run(_run())
    except Exception as e:
        log_with_source(logger, "cli", "error", "Table creation failed", error=str(e))
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Tables ready: {', '.join(tables)}[/green]")
