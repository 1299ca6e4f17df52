"""Validate command implementation."""

import json

import typer
from rich.console import Console

from ..document import load_document, validate_schema
from ..exceptions import ImportActionError, SchemaValidationError
from ..helpers.error_handler import handle_error

console = Console()


def validate_command(file_path: str, schema_url: str, output: str) -> None:
    """Parse a local document and validate it without uploading."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        handle_error(f"Failed to read file {file_path}: {e}")
        return

    violations = []
    try:
        document = load_document(raw, file_path)
        validate_schema(document.data, schema_url)
    except SchemaValidationError as e:
        violations = e.violations
    except ImportActionError as e:
        handle_error(str(e))
        return

    if output.upper() == "JSON":
        typer.echo(
            json.dumps(
                {
                    "file": file_path,
                    "format": document.format,
                    "valid": not violations,
                    "violations": violations,
                },
                indent=2,
            )
        )
    elif violations:
        console.print(
            f"[red]❌ {file_path}: {len(violations)} schema violation(s)[/red]"
        )
        for i, violation in enumerate(violations, 1):
            console.print(f"  {i}. {violation}")
    else:
        console.print(f"[green]✅ {file_path} ({document.format}) is valid[/green]")

    if violations:
        raise typer.Exit(1)
