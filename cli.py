"""Command line entry point for the tool adapters."""

from __future__ import annotations

import importlib
import json
import sys

import click

from shared.server import TRANSPORTS, Adapter, run_adapter

ADAPTERS = {
    "telegram": "modules.telegram.main",
    "supabase": "modules.supabase.main",
    "bluesky": "modules.bluesky.main",
    "rss_feed": "modules.rss_feed.main",
    "obsidian": "modules.obsidian.main",
    "ios_simulator": "modules.ios_simulator.main",
    "apple_shortcuts": "modules.apple_shortcuts.main",
}


def load_adapter(name: str) -> Adapter:
    """Import an adapter module and return its ADAPTER."""
    return importlib.import_module(ADAPTERS[name]).ADAPTER


@click.group()
def cli():
    """Tool adapter servers."""
    pass


@cli.command("adapters")
def list_adapters():
    """List the available adapters."""
    for name in ADAPTERS:
        adapter = load_adapter(name)
        click.echo(f"{name:<16} {len(adapter.manifest.tools):>2} tools  {adapter.manifest.description}")


@cli.command("tools")
@click.argument("adapter", type=click.Choice(list(ADAPTERS)))
def show_tools(adapter):
    """Print an adapter's static tool catalog as JSON."""
    manifest = load_adapter(adapter).manifest
    click.echo(json.dumps([tool.to_wire() for tool in manifest.tools], indent=2))


@cli.command()
@click.argument("adapter", type=click.Choice(list(ADAPTERS)))
@click.option("--transport", type=click.Choice(TRANSPORTS), default=None, help="Override TRANSPORT")
@click.option("--host", default=None, help="HTTP bind host")
@click.option("--port", type=int, default=None, help="HTTP bind port")
def serve(adapter, transport, host, port):
    """Serve an adapter until EOF or a termination signal."""
    from pydantic import ValidationError

    from shared.config import get_settings

    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    overrides = {}
    if host is not None:
        overrides["http_host"] = host
    if port is not None:
        overrides["http_port"] = port
    if overrides:
        settings = settings.model_copy(update=overrides)
    sys.exit(run_adapter(load_adapter(adapter), settings=settings, transport=transport))


if __name__ == "__main__":
    cli()
