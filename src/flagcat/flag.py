"""Flag identity primitive.

A :class:`Flag` is the name surface of one command-line option: a canonical
long spelling (``--output-path``) and an optional short alias (``-o``).  It
knows nothing about values; splitting ``--flag=value`` and expanding short
clusters like ``-wf`` is the tokenizer's job and happens before
:meth:`Flag.matches` is called.
"""

import re
from dataclasses import dataclass

from flagcat.errors import InvalidFlagDefinition

_LONG_RE = re.compile(r"^--[a-z0-9]+(-[a-z0-9]+)*$")
_SHORT_RE = re.compile(r"^-[A-Za-z]$")


@dataclass(frozen=True)
class Flag:
    """One option's canonical long name plus optional short alias."""

    long_name: str
    short_name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.long_name, str):
            raise InvalidFlagDefinition(
                f"long name must be a string, got {type(self.long_name).__name__}"
            )
        if self.short_name is not None and not isinstance(self.short_name, str):
            raise InvalidFlagDefinition(
                f"short name of {self.long_name} must be a string or None"
            )
        if not self.long_name:
            raise InvalidFlagDefinition("long name must not be empty")
        if self.short_name is not None:
            if not self.short_name:
                raise InvalidFlagDefinition(
                    f"short name of {self.long_name} must be omitted, not empty"
                )
            if self.short_name == self.long_name:
                raise InvalidFlagDefinition(
                    f"short name of {self.long_name} must differ from the long name"
                )

    @property
    def names(self) -> tuple[str, ...]:
        """Accepted spellings, short alias first."""
        if self.short_name is not None:
            return (self.short_name, self.long_name)
        return (self.long_name,)

    def accepted_names(self) -> tuple[str, ...]:
        return self.names

    def matches(self, token: str) -> bool:
        """Return True if *token* is exactly one of this flag's spellings."""
        return token == self.long_name or (
            self.short_name is not None and token == self.short_name
        )

    def usage(self) -> str:
        """Help-style rendering, e.g. ``-o, --output-path``."""
        return ", ".join(self.names)

    def check_convention(self) -> list[str]:
        """List deviations from the ``--long-name`` / ``-x`` spelling convention.

        Deviations are not fatal; the registry reports them as warnings.
        """
        problems: list[str] = []
        if not _LONG_RE.match(self.long_name):
            problems.append(
                f"long name {self.long_name!r} should be '--' plus lowercase dash-separated words"
            )
        if self.short_name is not None and not _SHORT_RE.match(self.short_name):
            problems.append(f"short name {self.short_name!r} should be '-' plus one letter")
        return problems

    def __str__(self) -> str:
        return self.long_name
