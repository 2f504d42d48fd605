"""CLI: jur config show|set-unit"""

import json

import click
from rich.console import Console

from jur.cli.inspect import UNIT_CHOICE

console = Console()


def _load_config() -> dict:
    from jur.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from jur.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """Default settings (~/.jur/config.json)."""


@config.command("show")
def config_show():
    """Print the current configuration."""
    click.echo(json.dumps(_load_config(), indent=2))


@config.command("set-unit")
@click.argument("unit", type=UNIT_CHOICE)
def config_set_unit(unit: str):
    """Set the default time unit used by `jur inspect`."""
    cfg = _load_config()
    cfg["unit"] = unit.lower()
    _save_config(cfg)
    console.print(f"[green]Default unit set to {cfg['unit']}[/green]")
