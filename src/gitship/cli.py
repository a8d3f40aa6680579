"""
git-ship CLI - run one lifecycle step of a plugin.

Usage:
    git-ship init
    git-ship --plugin perl build
    git-ship -p mypkg.ship:Python ship
    git-ship plugins
"""

import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .app import App
from .config import append_config, config_file, load_config, write_config
from .errors import ShipError
from .loader import available_plugins, load_plugin
from .settings import get_settings

PROG = "git-ship"


def setup_logging(debug: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=debug)],
        force=True,
    )


def fail(ctx: click.Context, error: ShipError) -> None:
    """Print ``error`` the way git-ship aborts and exit non-zero."""
    console = Console(stderr=True)
    if ctx.obj["debug"]:
        console.print_exception()
    console.print(f"{PROG}: {error}", markup=False, highlight=False, soft_wrap=True)
    ctx.exit(1)


def run_step(ctx: click.Context, step: str) -> App:
    app = ctx.obj["app"]
    try:
        getattr(app, step)()
    except ShipError as e:
        fail(ctx, e)
    return app


@click.group()
@click.option("--plugin", "-p", "plugin_name", help="Plugin name or module:Class")
@click.pass_context
def main(ctx, plugin_name):
    """git-ship - ship your project."""
    settings = get_settings()
    setup_logging(settings.debug)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = settings.debug

    try:
        plugin = load_plugin(plugin_name or settings.plugin)
    except ShipError as e:
        fail(ctx, e)
    ctx.obj["app"] = plugin()


@main.command()
@click.pass_context
def init(ctx):
    """Add project defaults to the config file.

    An existing file only gets the keys init derived; its other lines stay.
    """
    path = config_file()
    try:
        existing = load_config(path) if os.path.exists(path) else None
        app = run_step(ctx, "init")
        if existing is None:
            write_config(path, app.config())
        else:
            added = {
                key: value
                for key, value in app.config().items()
                if existing.get(key) != value
            }
            if not added:
                click.echo(f"{path} is up to date")
                return
            append_config(path, added)
    except ShipError as e:
        fail(ctx, e)
    click.echo(f"Wrote {path}")


@main.command()
@click.pass_context
def build(ctx):
    """Build the project."""
    run_step(ctx, "build")


@main.command()
@click.pass_context
def test(ctx):
    """Test the project."""
    run_step(ctx, "test")


@main.command()
@click.pass_context
def ship(ctx):
    """Ship the project."""
    run_step(ctx, "ship")


@main.command("plugins")
def list_plugins():
    """List known plugins."""
    table = Table(title="git-ship plugins")
    table.add_column("Name", style="cyan")
    table.add_column("Class")

    for name in available_plugins():
        try:
            plugin = load_plugin(name)
        except ShipError as e:
            table.add_row(name, Text(str(e), style="red"))
            continue
        table.add_row(name, f"{plugin.__module__}.{plugin.__qualname__}")

    Console().print(table)


if __name__ == "__main__":
    main()
