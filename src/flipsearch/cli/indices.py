"""Index and mapping management commands."""

import json

import click
from rich.table import Table

from .common import console, open_connection, parse_json_option, report_errors


@click.group()
def index():
    """Manage indices."""
    pass


@index.command("list")
@click.argument("pattern", default="*")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_indices(ctx: click.Context, pattern: str, as_json: bool):
    """List indices matching PATTERN."""
    with report_errors(), open_connection(ctx) as connection:
        result = connection.get_indices(pattern)

        if as_json:
            console.print_json(json.dumps(result))
            return

        if not result:
            console.print("[yellow]No indices found.[/yellow]")
            return

        table = Table(title="Indices")
        table.add_column("Index", style="cyan")
        table.add_column("Health")
        table.add_column("Status")
        table.add_column("Docs", justify="right")
        table.add_column("Size", justify="right")

        for row in result:
            table.add_row(
                row.get("index", ""),
                row.get("health", ""),
                row.get("status", ""),
                str(row.get("docs.count", "-")),
                str(row.get("store.size", "-")),
            )

        console.print(table)


@index.command("create")
@click.argument("name")
@click.option("--settings", "-s", help="Index settings and mappings as JSON")
@click.pass_context
def create_index(ctx: click.Context, name: str, settings: str | None):
    """Create an index."""
    index_settings = parse_json_option(settings, "settings")

    with report_errors(), open_connection(ctx) as connection:
        connection.create_index(name, index_settings)
        console.print(f"[green]Created index:[/green] {name}")


@index.command("delete")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_index(ctx: click.Context, name: str, yes: bool):
    """Delete an index."""
    if not yes:
        click.confirm(f"Delete index '{name}' and ALL its documents?", abort=True)

    with report_errors(), open_connection(ctx) as connection:
        connection.delete_index(name)
        console.print(f"[green]Deleted index:[/green] {name}")


@index.command("exists")
@click.argument("name")
@click.pass_context
def index_exists(ctx: click.Context, name: str):
    """Check whether an index exists (exit code 1 if it does not)."""
    with report_errors(), open_connection(ctx) as connection:
        exists = connection.index_exists(name)

    if exists:
        console.print(f"[green]Index exists:[/green] {name}")
    else:
        console.print(f"[yellow]Index not found:[/yellow] {name}")
        ctx.exit(1)


@index.command("settings")
@click.argument("name")
@click.option("--update", "-u", "update_json", help="New settings as JSON")
@click.pass_context
def index_settings(ctx: click.Context, name: str, update_json: str | None):
    """Show or update index settings."""
    new_settings = parse_json_option(update_json, "settings")

    with report_errors(), open_connection(ctx) as connection:
        if new_settings is not None:
            connection.update_index_settings(name, new_settings)
            console.print(f"[green]Updated settings:[/green] {name}")
            return

        console.print_json(json.dumps(connection.get_index_settings(name)))


@index.command("refresh")
@click.argument("names", nargs=-1)
@click.pass_context
def refresh(ctx: click.Context, names: tuple[str, ...]):
    """Refresh NAMES, or all indices if none are given."""
    with report_errors(), open_connection(ctx) as connection:
        connection.refresh(list(names) or None)
        console.print(f"[green]Refreshed:[/green] {', '.join(names) or 'all indices'}")


@click.group()
def mapping():
    """Manage type mappings."""
    pass


@mapping.command("get")
@click.argument("index_name")
@click.argument("type_name")
@click.pass_context
def get_mapping(ctx: click.Context, index_name: str, type_name: str):
    """Show the mapping of TYPE_NAME in INDEX_NAME."""
    with report_errors(), open_connection(ctx) as connection:
        console.print_json(json.dumps(connection.get_mapping(index_name, type_name)))


@mapping.command("put")
@click.argument("index_name")
@click.argument("type_name")
@click.argument("mapping_json")
@click.pass_context
def put_mapping(ctx: click.Context, index_name: str, type_name: str, mapping_json: str):
    """Update the mapping of TYPE_NAME in INDEX_NAME."""
    new_mapping = parse_json_option(mapping_json, "mapping")

    with report_errors(), open_connection(ctx) as connection:
        connection.update_mapping(index_name, type_name, new_mapping)
        console.print(f"[green]Updated mapping:[/green] {index_name}/{type_name}")
