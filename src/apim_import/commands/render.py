"""Render command implementation."""

import typer

from ..exceptions import ImportActionError
from ..helpers.error_handler import handle_error
from ..helpers.ytt import render_with_ytt


def render_command(
    template: str, values: str, ytt_args: str, ytt_version: str
) -> None:
    """Render a template with ytt and print the document on stdout."""
    try:
        rendered = render_with_ytt(template, values, ytt_args, ytt_version)
    except ImportActionError as e:
        handle_error(str(e))
        return

    typer.echo(rendered, nl=False)
