"""
CLI Commands.

Organized by domain/feature area.
"""

from webcalendar.cli.commands.db import app as db_app
from webcalendar.cli.commands.health import app as health_app

__all__ = [
    "db_app",
    "health_app",
]
