"""
Command-line tooling.

Built with Typer for type-safe commands and Rich for formatted output.
"""
