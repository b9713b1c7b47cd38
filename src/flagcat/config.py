"""Project-level flag definitions loaded from ``flagcat.toml``.

A project can declare its own catalogs and subcommand assemblies on top of
the standard tables in :mod:`flagcat.flag_data`::

    [catalogs.extra]
    VERBOSE = ["--verbose", "-v"]
    DRY_RUN = "--dry-run"
    LEVEL = { long = "--level", short = "-l" }

    [commands]
    build = ["base", "extra"]

A command listed in the file replaces a standard command of the same name.
Catalog names must not shadow the standard ones.

Usage::

    from flagcat.config import load_registry

    registry = load_registry()               # searches cwd upward
    registry = load_registry(Path("flagcat.toml"))
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from flagcat.catalog import FlagCatalog
from flagcat.errors import InvalidFlagDefinition
from flagcat.flag import Flag
from flagcat.flag_data import COMMAND_CATALOGS, STANDARD_CATALOGS
from flagcat.registry import FlagRegistry, default_registry

CONFIG_NAME = "flagcat.toml"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (or cwd) looking for ``flagcat.toml``.

    Returns ``None`` when no file is found; the config is optional.
    """
    candidate = (start or Path.cwd()).resolve()
    while True:
        path = candidate / CONFIG_NAME
        if path.is_file():
            return path
        if candidate == candidate.parent:
            return None
        candidate = candidate.parent


def _parse_flag(raw: Any, key: str) -> Flag:
    """Build a Flag from a string, a ``[long, short]`` list, or a table."""
    if isinstance(raw, str):
        args: tuple[Any, ...] = (raw,)
    elif isinstance(raw, list) and 1 <= len(raw) <= 2:
        args = tuple(raw)
    elif isinstance(raw, dict) and set(raw) <= {"long", "short"} and "long" in raw:
        args = (raw["long"], raw.get("short"))
    else:
        raise InvalidFlagDefinition(
            "expected a string, a [long, short] list, or a {long, short} table", key=key
        )
    if not all(a is None or isinstance(a, str) for a in args):
        raise InvalidFlagDefinition("flag spellings must be strings", key=key)
    try:
        return Flag(*args)
    except InvalidFlagDefinition as e:
        raise InvalidFlagDefinition(str(e), key=key) from e


def parse_catalogs(raw: dict[str, Any]) -> list[FlagCatalog]:
    """Build catalogs from the ``[catalogs]`` table of a parsed config."""
    standard = {c.name for c in STANDARD_CATALOGS}
    catalogs: list[FlagCatalog] = []
    for name, table in raw.items():
        if name in standard:
            raise InvalidFlagDefinition(f"catalog {name!r} shadows a standard catalog")
        if not isinstance(table, dict):
            raise InvalidFlagDefinition(f"catalog {name!r} must be a table")
        flags = {key: _parse_flag(value, f"{name}.{key}") for key, value in table.items()}
        catalogs.append(FlagCatalog(name, flags))
    return catalogs


def parse_commands(raw: dict[str, Any]) -> dict[str, list[str]]:
    """Validate the ``[commands]`` table: command -> list of catalog names."""
    commands: dict[str, list[str]] = {}
    for command, names in raw.items():
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise InvalidFlagDefinition(
                "must be a list of catalog names", key=f"commands.{command}"
            )
        commands[command] = names
    return commands


def load_registry(path: Path | None = None, *, include_defaults: bool = True) -> FlagRegistry:
    """Build a registry from *path* (or the nearest ``flagcat.toml``).

    With no config file this is simply the default registry.  With
    *include_defaults* False only the file's own catalogs and commands are
    used.
    """
    if path is None:
        path = find_config()
        if path is None:
            return default_registry() if include_defaults else FlagRegistry([])
    elif not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise InvalidFlagDefinition(f"{path}: {e}") from e

    for section in ("catalogs", "commands"):
        if not isinstance(raw.get(section, {}), dict):
            raise InvalidFlagDefinition("must be a table", key=section)

    file_catalogs = parse_catalogs(raw.get("catalogs", {}))
    file_commands = parse_commands(raw.get("commands", {}))

    if not include_defaults:
        return FlagRegistry(file_catalogs, file_commands)
    return FlagRegistry(
        [*STANDARD_CATALOGS, *file_catalogs],
        {**COMMAND_CATALOGS, **file_commands},
    )
