"""
Health Check Commands.

Local checks of configuration and database connectivity.
"""

import asyncio
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(help="Health check commands")
console = Console()


@app.command()
def check() -> None:
    """
    Check configuration and database connectivity.

    Opens a connection, runs SELECT 1, lists tables, and releases the
    connection. Exits with status 1 if any check fails.

    Examples:
        cli.py health check
    """
    console.print("[bold]Checking application health...[/bold]\n")

    checks: list[tuple[str, bool, str | None]] = []

    try:
        from webcalendar.backend.core.config import get_app_config
        app_config = get_app_config()
        app_info = app_config.application
        checks.append(("YAML configuration", True, f"{app_info.name} v{app_info.version}"))
    except Exception as e:
        checks.append(("YAML configuration", False, str(e)))

    try:
        from webcalendar.backend.core.config import get_settings
        get_settings()
        checks.append(("Secrets (.env)", True, None))
    except Exception as e:
        checks.append(("Secrets (.env)", False, str(e)))

    db_result = asyncio.run(_check_database())
    checks.append(("Database", db_result["status"] == "healthy", _describe(db_result)))

    table = Table(title="Health Check Results", show_header=True)
    table.add_column("Check", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    all_passed = True
    for name, passed, detail in checks:
        status = "[green]✓ PASS[/green]" if passed else "[red]✗ FAIL[/red]"
        table.add_row(name, status, detail or "-")
        if not passed:
            all_passed = False

    console.print(table)

    if all_passed:
        console.print("\n[green]All checks passed![/green]")
    else:
        console.print("\n[yellow]Some checks failed. See details above.[/yellow]")
        raise typer.Exit(1)


async def _check_database() -> dict[str, Any]:
    """Run the connectivity check and release the pool afterwards."""
    from webcalendar.backend.core.database import check_database, dispose_engine

    try:
        return await check_database()
    finally:
        await dispose_engine()


def _describe(result: dict[str, Any]) -> str:
    """Summarize a database check result for the table."""
    if result["status"] != "healthy":
        return f"error: {result.get('error', 'unknown')}"
    return (
        f"{result['dialect']} {result.get('database') or ''}, "
        f"latency: {result['latency_ms']}ms, tables: {len(result['tables'])}"
    )
