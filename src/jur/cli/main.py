"""
JUR CLI — `jur` command.

Commands:
  jur inspect [FILE]        Show the fields and timings of a response
  jur validate FILE...      Check documents are valid JURs
  jur config <cmd>          Default settings
"""

import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install jur[cli]")

from jur import __version__
from jur.models.envelope import TimeUnit

err_console = Console(stderr=True)
CONFIG_FILE = Path.home() / ".jur" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _default_unit() -> str:
    return _load_config().get("unit") or TimeUnit.MICROSECOND.value


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def main(verbose):
    """JUR CLI — inspect and validate JSON Uniform Responses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        err_console.print("[dim]Debug logging enabled[/dim]")


# Register subcommands from separate modules
from jur.cli.inspect import inspect_cmd, validate_cmd
from jur.cli.config import config

main.add_command(inspect_cmd)
main.add_command(validate_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
