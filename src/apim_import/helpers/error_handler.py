"""Error handling utilities for the import action CLI."""

import typer


def handle_error(message: str, exit_code: int = 1) -> None:
    """Report an error on stderr and exit."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(exit_code)


def handle_success(message: str) -> None:
    """Handle success messages consistently across the CLI."""
    typer.echo(message)


def handle_info(message: str) -> None:
    """Report informational output on stderr, keeping stdout for results."""
    typer.echo(message, err=True)
