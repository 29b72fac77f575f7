"""Main CLI entry point."""

import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from flipsearch import __version__
from flipsearch.client.config import SearchConfig

from .common import report_errors

# Load .env from cwd
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


@click.group()
@click.version_option(version=__version__, prog_name="flipsearch")
@click.option("--url", "-u", help="Search server base URL (default: FLIPSEARCH_BASE_URL)")
@click.option("--verbose", "-v", is_flag=True, help="Log requests at debug level")
@click.pass_context
def cli(ctx: click.Context, url: str | None, verbose: bool):
    """flipsearch CLI - Manage indices and aliases, run multi-searches."""
    ctx.ensure_object(dict)
    with report_errors():
        config = SearchConfig(base_url=url) if url else SearchConfig()
    ctx.obj["config"] = config
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def setup_cli():
    """Register all commands."""
    from .aliases import alias
    from .indices import index, mapping
    from .info import version
    from .search import msearch

    cli.add_command(version)
    cli.add_command(index)
    cli.add_command(mapping)
    cli.add_command(alias)
    cli.add_command(msearch)


setup_cli()


def main():
    """Entry point for flipsearch CLI."""
    cli()


if __name__ == "__main__":
    main()
