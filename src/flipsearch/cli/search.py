"""Multi-search command."""

import json
from pathlib import Path

import click
from rich.markup import escape
from rich.panel import Panel

from ..client import SearchCriteria
from .common import console, open_connection, report_errors


def load_criterias(path: Path) -> list[SearchCriteria]:
    """Read search requests from a JSON file.

    The file holds an array of objects with "index", optional "type"
    (default "_doc") and optional "body" keys.
    """
    try:
        entries = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON in {path}: {e}")

    if not isinstance(entries, list):
        raise click.BadParameter(f"{path} must contain a JSON array")

    criterias = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict) or "index" not in entry:
            raise click.BadParameter(f"Entry {i} in {path} has no index")
        criterias.append(SearchCriteria(
            index_name=entry["index"],
            request=entry.get("body", {}),
            type_name=entry.get("type", "_doc"),
        ))
    return criterias


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output raw responses as JSON")
@click.pass_context
def msearch(ctx: click.Context, file: Path, as_json: bool):
    """Run the searches listed in FILE as one multi-search request."""
    criterias = load_criterias(file)

    with report_errors(), open_connection(ctx) as connection:
        responses = connection.msearch(criterias)

    if as_json:
        console.print_json(json.dumps([response.raw for response in responses]))
        return

    if not responses:
        console.print("[yellow]No searches to run.[/yellow]")
        return

    for i, response in enumerate(responses, 1):
        raw = response.raw
        if "error" in raw:
            body = f"[red]{escape(str(raw['error']))}[/red]"
        else:
            total = raw.get("hits", {}).get("total", 0)
            if isinstance(total, dict):
                total = total.get("value", 0)
            body = f"[bold]Hits:[/bold] {total}\n[bold]Took:[/bold] {raw.get('took', '-')} ms"
        console.print(Panel(
            body,
            title=f"[cyan]{i}. {response.criteria.index_name_with_prefix}[/cyan]",
        ))
