"""Shared CLI utilities for flagcat commands.

Provides common Typer options, registry-loading helpers, and standardised
output / error helpers so every command reports startup errors the same way.

Usage in a command::

    from flagcat.cli import ConfigOption, error_exit, get_registry

    @app.command()
    def main(config: Path | None = ConfigOption) -> None:
        registry = get_registry(config)
        ...
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from flagcat.config import load_registry
from flagcat.errors import FlagError
from flagcat.registry import FlagRegistry

# Re-usable Typer option for --config
ConfigOption: Path | None = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to flagcat.toml (default: search upward from cwd).",
)

CommandOption: str | None = typer.Option(
    None,
    "--command",
    "-C",
    help="Subcommand whose effective flag set to use, e.g. 'eval'.",
)

JsonOption: bool = typer.Option(False, "--json", help="Output as JSON.")


def get_registry(config: Path | None = None, *, json_mode: bool = False) -> FlagRegistry:
    """Load the registry, turning startup errors into a clean exit."""
    try:
        return load_registry(config)
    except (FlagError, FileNotFoundError) as e:
        error_exit(str(e), json_mode=json_mode)


# ---------------------------------------------------------------------------
# Standardised output helpers
# ---------------------------------------------------------------------------

_err_console = Console(stderr=True)


def error_exit(msg: str, *, json_mode: bool = False, code: int = 1) -> NoReturn:
    """Print *msg* as an error and ``raise typer.Exit(code)``."""
    if json_mode:
        print(json.dumps({"error": msg}, indent=2))
    else:
        _err_console.print(f"[red bold]error:[/red bold] {escape(msg)}")
    raise typer.Exit(code=code)


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))
