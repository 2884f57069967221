"""Local development launcher for the HTTP functions."""

from __future__ import annotations

from pathlib import Path

import click
import functions_framework

from catalog.infrastructure.config import get_settings
from catalog.infrastructure.http import functions

TARGETS = ("add_product", "hello_world")


@click.group()
def cli() -> None:
    """Catalog — product functions"""


@cli.command("serve")
@click.option(
    "--target",
    type=click.Choice(TARGETS),
    default="add_product",
    show_default=True,
    help="Function to serve.",
)
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8080, show_default=True, type=int)
@click.option("--debug/--no-debug", default=None, help="Override CATALOG_DEBUG.")
def serve(target: str, host: str, port: int, debug: bool | None) -> None:
    """Serve one function on a local development server."""
    if debug is None:
        debug = get_settings().debug

    app = functions_framework.create_app(
        target=target,
        source=str(Path(functions.__file__)),
        signature_type="http",
    )
    click.echo(f"Serving '{target}' on http://{host}:{port}/")
    app.run(host=host, port=port, debug=debug)
