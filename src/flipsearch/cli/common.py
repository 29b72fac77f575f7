"""Shared helpers for CLI commands."""

import json
from contextlib import contextmanager
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..client import Connection
from ..client.exceptions import FlipSearchError

console = Console()


def open_connection(ctx: click.Context) -> Connection:
    """Create a Connection from the configuration built by the root command."""
    return Connection((ctx.obj or {}).get("config"))


def parse_json_option(value: str | None, what: str) -> Any:
    """Parse a JSON command-line value, aborting with a readable message."""
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid {what} JSON: {escape(str(e))}[/red]")
        raise click.Abort()


@contextmanager
def report_errors():
    """Print flipsearch and configuration errors in red and abort the command."""
    try:
        yield
    except FlipSearchError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise click.Abort()
