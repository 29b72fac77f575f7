"""Server information commands."""

import click

from .common import console, open_connection, report_errors


@click.command()
@click.pass_context
def version(ctx: click.Context):
    """Show the search server version."""
    with report_errors(), open_connection(ctx) as connection:
        number = connection.version()
        console.print(f"[bold]Server:[/bold] {connection.base_url}")
        console.print(f"[bold]Version:[/bold] {number}")
