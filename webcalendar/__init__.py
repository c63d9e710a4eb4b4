"""
Web Calendar.

- backend/: Data model, repositories, services, database and configuration
- cli/: Command-line tooling (Typer + Rich)
"""
