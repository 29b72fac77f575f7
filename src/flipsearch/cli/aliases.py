"""Alias management commands."""

import json

import click
from rich.table import Table

from .common import console, open_connection, report_errors


@click.group()
def alias():
    """Manage index aliases."""
    pass


@alias.command("list")
@click.option("--index", "-i", "index_name", default="*", help="Index name or pattern")
@click.option("--alias", "-a", "alias_name", default="*", help="Alias name or pattern")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_aliases(ctx: click.Context, index_name: str, alias_name: str, as_json: bool):
    """List aliases and the indices they point at."""
    with report_errors(), open_connection(ctx) as connection:
        result = connection.get_aliases(index_name=index_name, alias_name=alias_name)

        if as_json:
            console.print_json(json.dumps(result))
            return

        rows = [
            (name, index)
            for index, info in (result or {}).items()
            for name in info.get("aliases", {})
        ]
        if not rows:
            console.print("[yellow]No aliases found.[/yellow]")
            return

        table = Table(title="Aliases")
        table.add_column("Alias", style="cyan")
        table.add_column("Index")
        for name, index in sorted(rows):
            table.add_row(name, index)

        console.print(table)


@alias.command("exists")
@click.argument("name")
@click.pass_context
def alias_exists(ctx: click.Context, name: str):
    """Check whether an alias exists (exit code 1 if it does not)."""
    with report_errors(), open_connection(ctx) as connection:
        exists = connection.alias_exists(name)

    if exists:
        console.print(f"[green]Alias exists:[/green] {name}")
    else:
        console.print(f"[yellow]Alias not found:[/yellow] {name}")
        ctx.exit(1)


@alias.command("add")
@click.argument("index_name")
@click.argument("alias_name")
@click.pass_context
def add_alias(ctx: click.Context, index_name: str, alias_name: str):
    """Point ALIAS_NAME at INDEX_NAME."""
    with report_errors(), open_connection(ctx) as connection:
        connection.update_aliases({"actions": [{"add": {"index": index_name, "alias": alias_name}}]})
        console.print(f"[green]Added alias:[/green] {alias_name} -> {index_name}")


@alias.command("remove")
@click.argument("index_name")
@click.argument("alias_name")
@click.pass_context
def remove_alias(ctx: click.Context, index_name: str, alias_name: str):
    """Remove ALIAS_NAME from INDEX_NAME."""
    with report_errors(), open_connection(ctx) as connection:
        connection.update_aliases({"actions": [{"remove": {"index": index_name, "alias": alias_name}}]})
        console.print(f"[green]Removed alias:[/green] {alias_name} -> {index_name}")
