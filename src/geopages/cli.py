"""CLI interface for Geopages.

Command-line tool for serving AI-friendly page projections.
"""

import json
import logging
from pathlib import Path

import click

from geopages.config import Config
from geopages.core.segments import resolve_segments


@click.group()
def cli() -> None:
    """Geopages - AI-friendly JSON projections of geo content pages."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover geopages.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--api-url",
    default=None,
    help="Upstream content API URL (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log upstream requests)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    api_url: str | None,
    verbose: bool,
) -> None:
    """Start the projection server."""
    from geopages.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host, port=port, api_url=api_url
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1) from e

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Upstream API: {config.api.base_url}")
    click.echo(f"Site URL: {config.site.base_url}")

    run_server(config)


@cli.command()
@click.argument("city")
@click.argument("category")
@click.argument("slug")
def resolve(city: str, category: str, slug: str) -> None:
    """Show how CITY CATEGORY SLUG path segments are disambiguated.

    Pass "-" for a missing city or category.
    """
    resolved = resolve_segments(
        None if city == "-" else city,
        None if category == "-" else category,
        slug,
    )
    click.echo(
        json.dumps(
            {
                "city": resolved.city,
                "category": resolved.category,
                "slug": resolved.slug,
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    cli()
