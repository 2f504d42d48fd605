"""CLI: jur inspect, jur validate"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jur.errors import JurError
from jur.timing import normalize_unit
from jur.models.envelope import TimeUnit
from jur.response import Jur

console = Console()
err_console = Console(stderr=True)
UNIT_CHOICE = click.Choice([unit.value for unit in TimeUnit], case_sensitive=False)


def _default_unit() -> str:
    from jur.cli.main import _default_unit
    return _default_unit()


def _source_name(source) -> str:
    return "<stdin>" if source.name in ("-", "<stdin>") else source.name


@click.command("inspect")
@click.argument("source", type=click.File("r"), default="-")
@click.option("-u", "--unit", type=UNIT_CHOICE, default=None, help="Time unit for debug timings.")
@click.option("--json-output", "--json", is_flag=True)
def inspect_cmd(source, unit: Optional[str], json_output: bool):
    """Show the fields of a JUR document (FILE or stdin)."""
    try:
        unit = normalize_unit(unit or _default_unit()).value
        response = Jur().parse(source.read())
        timings = {
            "elapsed": response.elapsed(unit),
            "issued_at": response.issued_at(unit),
            "resolved_at": response.resolved_at(unit),
        }
    except JurError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps({
            "message": response.message(),
            "request": response.request(),
            "data": response.data(),
            "unit": unit,
            "debug": timings,
        }, indent=2))
        return

    table = Table(title=f"JUR response ({_source_name(source)})")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    message = response.message()
    table.add_row("message", "[dim]null[/dim]" if message is None else escape(message))
    table.add_row("request", response.request().upper())
    for key, value in timings.items():
        table.add_row(key, f"{value} {unit}")
    table.add_row("data", escape(json.dumps(response.data())[:200]))
    console.print(table)


@click.command("validate")
@click.argument("sources", type=click.File("r"), nargs=-1)
def validate_cmd(sources):
    """Check that each FILE (or stdin) is a valid JUR document."""
    if not sources:
        sources = (click.get_text_stream("stdin"),)
    failed = 0
    for source in sources:
        name = _source_name(source)
        try:
            Jur().parse(source.read())
        except JurError as e:
            failed += 1
            console.print(f"[red]{escape(name)}: {escape(str(e))}[/red]")
            continue
        console.print(f"[green]{escape(name)}: OK[/green]")
    if failed:
        raise SystemExit(1)
