"""registry.py - Process-wide flag registry, passed around explicitly.

A :class:`FlagRegistry` is built once at startup and handed to whatever needs
to resolve flags (parsers, help renderers, argv builders) instead of being
looked up from module globals.  Construction assembles and validates every
subcommand's effective catalog eagerly, so a registry that exists is a
registry that is consistent.

Usage::

    from flagcat.registry import default_registry

    registry = default_registry()
    flags = registry.for_command("eval")
    flag = flags.resolve("-o")          # Flag("--output-path", "-o")
"""

import functools
import warnings
from collections.abc import Iterable, Mapping, Sequence

from flagcat.catalog import FlagCatalog
from flagcat.errors import InvalidFlagDefinition, UnknownFlagKey
from flagcat.flag_data import COMMAND_CATALOGS, STANDARD_CATALOGS


class FlagRegistry:
    """Named catalogs plus the per-subcommand assemblies built from them."""

    def __init__(
        self,
        catalogs: Iterable[FlagCatalog],
        commands: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self._catalogs: dict[str, FlagCatalog] = {}
        for catalog in catalogs:
            if catalog.name in self._catalogs:
                raise InvalidFlagDefinition(f"catalog {catalog.name!r} registered twice")
            self._catalogs[catalog.name] = catalog

        self._commands: dict[str, FlagCatalog] = {}
        self._command_parts: dict[str, list[str]] = {}
        for command, names in (commands or {}).items():
            parts = [self.catalog(n) for n in names]
            self._command_parts[command] = list(names)
            self._commands[command] = FlagCatalog.union(command, *parts)

        self._warn_conventions()

    def _warn_conventions(self) -> None:
        for catalog in self._catalogs.values():
            for key, flag in catalog.items():
                for problem in flag.check_convention():
                    warnings.warn(f"{catalog.name}.{key}: {problem}", stacklevel=3)

    def catalog(self, name: str) -> FlagCatalog:
        """Return the catalog registered as *name*."""
        try:
            return self._catalogs[name]
        except KeyError:
            raise UnknownFlagKey(name, "registry catalogs") from None

    def for_command(self, command: str) -> FlagCatalog:
        """Return the validated effective flag set for *command*."""
        try:
            return self._commands[command]
        except KeyError:
            raise UnknownFlagKey(command, "registry commands") from None

    def catalogs(self) -> list[FlagCatalog]:
        return list(self._catalogs.values())

    def commands(self) -> list[str]:
        return list(self._commands)

    def command_catalogs(self, command: str) -> list[str]:
        """Names of the catalogs *command* assembles, in order."""
        self.for_command(command)
        return list(self._command_parts[command])

    def __repr__(self) -> str:
        return f"FlagRegistry(catalogs={list(self._catalogs)}, commands={list(self._commands)})"


@functools.lru_cache(maxsize=1)
def default_registry() -> FlagRegistry:
    """Build the standard registry (once per process)."""
    return FlagRegistry(STANDARD_CATALOGS, COMMAND_CATALOGS)
