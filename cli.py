#!/usr/bin/env python3
"""
Web Calendar CLI.

Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                    # Show help

    # Database
    python cli.py db upgrade                # Upgrade to latest migration
    python cli.py db current                # Show current revision
    python cli.py db generate -m "message"  # Generate migration
    python cli.py db create-tables          # Create tables without Alembic

    # Health checks
    python cli.py health check              # Config and database connectivity

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --help            Show help message
"""

from pathlib import Path

import typer
from rich.console import Console

from webcalendar.cli.commands import db_app, health_app

project_root = Path(__file__).resolve().parent

app = typer.Typer(
    name="cli",
    help="Web Calendar CLI - database migrations and health checks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(db_app, name="db")
app.add_typer(health_app, name="health")


def _validate_project_root() -> None:
    """Validate that we're running from the project root."""
    if not (project_root / ".project_root").exists():
        console.print("[red]Error: .project_root not found. Run from project root.[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Web Calendar CLI.

    Database migrations and health checks.
    """
    _validate_project_root()

    from webcalendar.backend.core.logging import setup_logging

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


if __name__ == "__main__":
    app()
