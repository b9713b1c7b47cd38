"""catalog.py - Named, immutable collections of flag identities.

A :class:`FlagCatalog` maps stable symbolic keys (``OUTPUT_PATH``,
``WORKING_DIR``) to :class:`~flagcat.flag.Flag` values and builds a spelling
index up front so that every accepted spelling belongs to exactly one key.
Subcommands assemble their effective flag set with :meth:`FlagCatalog.union`,
which re-checks the same invariant across all the catalogs involved.

Catalogs are plain composition: grouping base, project, and test flags is a
namespacing convenience, not a type hierarchy.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from flagcat.errors import DuplicateFlagSpelling, InvalidFlagDefinition, UnknownFlagKey
from flagcat.flag import Flag


def _claim_spellings(entries: Iterable[tuple[str, str, Flag]]) -> dict[str, str]:
    """Map every spelling to its key from ``(key, qualified_key, flag)`` entries.

    Collisions are reported in declaration order, listing the qualified key
    of every entry that claims the offending spelling.
    """
    claims: dict[str, list[tuple[str, str]]] = {}
    for key, qualified, flag in entries:
        for spelling in flag.names:
            claims.setdefault(spelling, []).append((key, qualified))

    for spelling, owners in claims.items():
        if len(owners) > 1:
            raise DuplicateFlagSpelling(spelling, [qualified for _, qualified in owners])

    return {spelling: owners[0][0] for spelling, owners in claims.items()}


class FlagCatalog:
    """An ordered, read-only mapping of symbolic key -> :class:`Flag`."""

    def __init__(
        self,
        name: str,
        flags: Mapping[str, Flag] | Iterable[tuple[str, Flag]],
        *,
        origins: Mapping[str, str] | None = None,
    ) -> None:
        self.name = name
        pairs = list(flags.items()) if isinstance(flags, Mapping) else list(flags)

        entries: dict[str, Flag] = {}
        for key, flag in pairs:
            if not key:
                raise InvalidFlagDefinition(f"empty symbolic key in catalog {name!r}")
            if not isinstance(flag, Flag):
                raise InvalidFlagDefinition(
                    f"expected a Flag, got {type(flag).__name__}", key=f"{name}.{key}"
                )
            if key in entries:
                raise InvalidFlagDefinition("key registered twice", key=f"{name}.{key}")
            entries[key] = flag

        self._origins: dict[str, str] = {
            key: (origins or {}).get(key, name) for key in entries
        }
        self._index = self._build_index(entries)
        self._flags: Mapping[str, Flag] = MappingProxyType(entries)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    def _qualified(self, key: str) -> str:
        return f"{self._origins[key]}.{key}"

    def _build_index(self, entries: Mapping[str, Flag]) -> dict[str, str]:
        """Map every spelling to its key, failing on the first collision."""
        return _claim_spellings(
            (key, self._qualified(key), flag) for key, flag in entries.items()
        )

    @classmethod
    def union(cls, name: str, *catalogs: "FlagCatalog") -> "FlagCatalog":
        """Assemble the effective flag set of a subcommand from *catalogs*.

        Raises :class:`DuplicateFlagSpelling` if any two flags across the
        catalogs share a spelling, and :class:`InvalidFlagDefinition` if a
        symbolic key appears in more than one catalog with disjoint spellings.
        """
        _claim_spellings(
            (key, f"{catalog.origin(key)}.{key}", flag)
            for catalog in catalogs
            for key, flag in catalog.items()
        )

        pairs: list[tuple[str, Flag]] = []
        origins: dict[str, str] = {}
        for catalog in catalogs:
            for key, flag in catalog.items():
                if key in origins:
                    raise InvalidFlagDefinition(
                        f"key defined by both {origins[key]!r} and {catalog.origin(key)!r}",
                        key=key,
                    )
                origins[key] = catalog.origin(key)
                pairs.append((key, flag))
        return cls(name, pairs, origins=origins)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, key: str) -> Flag:
        """Return the flag registered under *key*.

        An unknown key is a wiring bug in the caller, so this raises
        :class:`UnknownFlagKey` rather than returning ``None``.
        """
        try:
            return self._flags[key]
        except KeyError:
            raise UnknownFlagKey(key, f"catalog {self.name!r}") from None

    __getitem__ = lookup

    def all(self) -> Iterator[Flag]:
        """Yield every flag in declaration order (a fresh iterator per call)."""
        yield from self._flags.values()

    def items(self) -> Iterator[tuple[str, Flag]]:
        yield from self._flags.items()

    def keys(self) -> Iterator[str]:
        yield from self._flags

    def resolve(self, token: str) -> Flag | None:
        """Return the flag whose spelling is exactly *token*, or ``None``."""
        key = self._index.get(token)
        return None if key is None else self._flags[key]

    def resolve_key(self, token: str) -> str | None:
        """Return the symbolic key whose flag is spelled *token*, or ``None``."""
        return self._index.get(token)

    def origin(self, key: str) -> str:
        """Name of the catalog that originally declared *key*."""
        if key not in self._origins:
            raise UnknownFlagKey(key, f"catalog {self.name!r}")
        return self._origins[key]

    @property
    def spellings(self) -> frozenset[str]:
        """Every accepted spelling in this catalog."""
        return frozenset(self._index)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, key: object) -> bool:
        return key in self._flags

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __repr__(self) -> str:
        return f"FlagCatalog({self.name!r}, {len(self)} flags)"
