#!/usr/bin/env python3
"""
APImetrics import CLI - render, validate and upload API monitoring definitions
"""

import logging
import os

import typer
from rich.console import Console

from . import __version__
from .commands.render import render_command
from .commands.run import run_command
from .commands.validate import validate_command
from .constants import DEFAULT_SCHEMA_URL, DEFAULT_YTT_VERSION
from .helpers.logger import setup_logger

console = Console()


def configure_logging(log_level: str = None):
    """Configure logging for the application and its module loggers."""
    # CLI option > environment > default
    if log_level is None:
        log_level = os.environ.get("APIM_LOG_LEVEL", "INFO")

    setup_logger("apim_import", log_level.upper(), json_output=True)

    level = getattr(logging, log_level.upper(), logging.INFO)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("apim_import."):
            logging.getLogger(name).setLevel(level)


app = typer.Typer(
    help="APImetrics import - render, validate and upload API monitoring definitions",
    no_args_is_help=True,
    add_completion=False,
    epilog="💡 Use 'apim-import <command> --help' for command-specific help",
)


def _version_callback(value: bool):
    if value:
        console.print(f"apim-import {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """APImetrics import - render, validate and upload API monitoring definitions."""
    configure_logging(log_level)


@app.command(
    "run",
    help="Render (optional), validate (optional) and upload a document. Inputs are read from INPUT_* environment variables. Example: INPUT_FILE=tests.yaml INPUT_TOKEN=... apim-import run",
)
def run():
    """Run the full import pipeline."""
    run_command()


@app.command(
    "render",
    help="Render a template with ytt and print the result. Example: apim-import render --template tpl/ --values values.yaml",
)
def render(
    template: str = typer.Option(
        ..., "--template", "-t", help="Template file or directory passed to ytt"
    ),
    values: str = typer.Option(
        "", "--values", "-v", help="Values file passed to ytt"
    ),
    ytt_args: str = typer.Option(
        "", "--ytt-args", help="Extra space-separated arguments for ytt"
    ),
    ytt_version: str = typer.Option(
        DEFAULT_YTT_VERSION,
        "--ytt-version",
        help="ytt release to download when ytt is not in the working directory",
    ),
):
    """Render a template with ytt."""
    render_command(template, values, ytt_args, ytt_version)


@app.command(
    "validate",
    help="Validate a local JSON/YAML document against the import schema without uploading. Example: apim-import validate --file tests.yaml",
)
def validate(
    file_path: str = typer.Option(
        ..., "--file", "-f", help="Path to a JSON or YAML document"
    ),
    schema_url: str = typer.Option(
        DEFAULT_SCHEMA_URL, "--schema-url", "-s", help="JSON Schema URL"
    ),
    output: str = typer.Option(
        "TEXT", "--output", "-o", help="Output format: TEXT (default) or JSON"
    ),
):
    """Validate a document against the import schema."""
    validate_command(file_path, schema_url, output)


if __name__ == "__main__":
    app()
