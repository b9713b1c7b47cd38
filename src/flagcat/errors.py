"""Exceptions raised while defining, assembling, or looking up flags.

All of these signal defects in a static flag table or in the code wiring
catalogs to subcommands.  None of them describe bad user input: an argv token
that matches no flag is reported by :meth:`FlagCatalog.resolve` returning
``None``.
"""

from __future__ import annotations

from collections.abc import Sequence


class FlagError(Exception):
    """Base class for all flagcat errors."""


class InvalidFlagDefinition(FlagError, ValueError):
    """A flag (or a config entry describing one) is malformed."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        if key is not None:
            message = f"{key}: {message}"
        super().__init__(message)


class DuplicateFlagSpelling(FlagError, ValueError):
    """Two flags in one effective set share a spelling."""

    def __init__(self, spelling: str, keys: Sequence[str]) -> None:
        self.spelling = spelling
        self.keys = tuple(keys)
        super().__init__(f"spelling {spelling!r} is claimed by {', '.join(self.keys)}")


class UnknownFlagKey(FlagError, KeyError):
    """A symbolic key (or catalog/command name) was never registered."""

    def __init__(self, key: str, scope: str | None = None) -> None:
        self.key = key
        self.scope = scope
        super().__init__(key)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key
        if self.scope is None:
            return f"unknown flag key {self.key!r}"
        return f"unknown flag key {self.key!r} in {self.scope}"
