"""main.py - CLI entry point for flagcat.

Inspects the flag registry the way a consuming parser sees it: which flags a
subcommand accepts, what a given token resolves to, whether every subcommand
assembly is free of spelling collisions, and how typed options render back
into argv.
"""

import shlex
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from flagcat.argv import build_argv, parse_assignment
from flagcat.catalog import FlagCatalog
from flagcat.cli import (
    CommandOption,
    ConfigOption,
    JsonOption,
    error_exit,
    get_registry,
    json_print,
)
from flagcat.errors import FlagError
from flagcat.registry import FlagRegistry

app = typer.Typer(
    help="Inspect and validate the command-line flag registry.",
    rich_markup_mode="rich",
    no_args_is_help=True,
    epilog="""\
[bold]Examples:[/bold]
  flagcat list                         All catalogs and their flags
  flagcat list --command eval          Effective flag set of 'eval'
  flagcat resolve -C eval -- -o        What '-o' means to 'eval'
  flagcat check                        Validate every subcommand assembly
  flagcat argv -C eval OUTPUT_PATH=out.json NO_CACHE

[dim]Project catalogs and commands are read from flagcat.toml when present.[/dim]""",
)

_console = Console()


def _selected(
    registry: FlagRegistry, command: str | None, catalog: str | None, json_mode: bool
) -> list[FlagCatalog]:
    if command is not None and catalog is not None:
        error_exit("--command and --catalog are mutually exclusive", json_mode=json_mode)
    try:
        if command is not None:
            return [registry.for_command(command)]
        if catalog is not None:
            return [registry.catalog(catalog)]
    except FlagError as e:
        error_exit(str(e), json_mode=json_mode)
    return registry.catalogs()


def _flag_row(catalog: FlagCatalog, key: str) -> dict[str, str | None]:
    flag = catalog.lookup(key)
    return {
        "key": key,
        "long": flag.long_name,
        "short": flag.short_name,
        "catalog": catalog.origin(key),
    }


@app.command("list")
def list_flags(
    command: str | None = CommandOption,
    catalog: str | None = typer.Option(None, "--catalog", help="Show a single catalog."),
    config: Path | None = ConfigOption,
    json_output: bool = JsonOption,
) -> None:
    """List flags in declaration order."""
    registry = get_registry(config, json_mode=json_output)
    selected = _selected(registry, command, catalog, json_output)

    if json_output:
        json_print([_flag_row(cat, key) for cat in selected for key in cat])
        return

    for cat in selected:
        tbl = Table(title=cat.name, show_header=True, header_style="bold", box=None, padding=(0, 2))
        tbl.add_column("Key", style="cyan", no_wrap=True)
        tbl.add_column("Spellings", no_wrap=True)
        tbl.add_column("Catalog", style="dim")
        for key, flag in cat.items():
            tbl.add_row(key, flag.usage(), cat.origin(key))
        _console.print(tbl)


@app.command("resolve")
def resolve(
    token: str = typer.Argument(..., help="Raw argv token, e.g. '-o' or '--no-cache'."),
    command: str | None = CommandOption,
    config: Path | None = ConfigOption,
    json_output: bool = JsonOption,
) -> None:
    """Show which flag a token refers to."""
    registry = get_registry(config, json_mode=json_output)
    for cat in _selected(registry, command, None, json_output):
        key = cat.resolve_key(token)
        if key is None:
            continue
        if json_output:
            json_print({"token": token, **_flag_row(cat, key)})
        else:
            typer.echo(f"{key}  {cat.lookup(key).usage()}  ({cat.origin(key)})")
        return
    scope = f" for '{command}'" if command else ""
    error_exit(f"unknown option {token!r}{scope}", json_mode=json_output)


@app.command("check")
def check(
    config: Path | None = ConfigOption,
    json_output: bool = JsonOption,
) -> None:
    """Build the registry and report every subcommand's flag set."""
    registry = get_registry(config, json_mode=json_output)

    if json_output:
        json_print(
            {
                "catalogs": {cat.name: len(cat) for cat in registry.catalogs()},
                "commands": {
                    cmd: {
                        "catalogs": registry.command_catalogs(cmd),
                        "flags": len(registry.for_command(cmd)),
                    }
                    for cmd in registry.commands()
                },
            }
        )
        return

    tbl = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    tbl.add_column("Command")
    tbl.add_column("Catalogs")
    tbl.add_column("Flags", justify="right")
    for cmd in registry.commands():
        parts = ", ".join(registry.command_catalogs(cmd))
        tbl.add_row(cmd, parts, str(len(registry.for_command(cmd))))
    _console.print(tbl)
    typer.secho("ok: no duplicate spellings", fg=typer.colors.GREEN)


@app.command("argv")
def argv(
    assignments: list[str] = typer.Argument(..., help="KEY=VALUE pairs; bare KEY sets a switch."),
    command: str = typer.Option(..., "--command", "-C", help="Subcommand to render for."),
    config: Path | None = ConfigOption,
    json_output: bool = JsonOption,
) -> None:
    """Render symbolic KEY=VALUE options as an argv list."""
    registry = get_registry(config, json_mode=json_output)
    options: dict[str, str | bool | list[str]] = {}
    for text in assignments:
        key, value = parse_assignment(text)
        if key in options and isinstance(value, str) and not isinstance(options[key], bool):
            # repeated keys accumulate, e.g. PROPERTY=a=1 PROPERTY=b=2
            prev = options[key]
            options[key] = [*prev, value] if isinstance(prev, list) else [prev, value]
        else:
            options[key] = value

    try:
        rendered = build_argv(registry.for_command(command), options)
    except FlagError as e:
        error_exit(str(e), json_mode=json_output)

    if json_output:
        json_print(rendered)
    else:
        typer.echo(shlex.join(rendered))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
