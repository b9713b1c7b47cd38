"""Render typed option values back into command-line arguments.

Build integrations and wrappers hold options as typed values keyed by symbolic
flag key; :func:`build_argv` turns them into the argv a subcommand expects,
always using the canonical long spelling.
"""

import os
from collections.abc import Mapping
from typing import Any

from flagcat.catalog import FlagCatalog


def _render(value: Any) -> str:
    if isinstance(value, os.PathLike):
        return os.fspath(value)
    return str(value)


def build_argv(catalog: FlagCatalog, options: Mapping[str, Any]) -> list[str]:
    """Render *options* (symbolic key -> value) as an argv list.

    Value handling, per option:

    - ``None`` / ``False``: omitted
    - ``True``: the bare flag
    - list or tuple: the flag repeated once per item
    - mapping: the flag repeated once per ``name=value`` pair
    - anything else: the flag followed by ``str(value)``

    Raises :class:`~flagcat.errors.UnknownFlagKey` for keys not in *catalog*.
    """
    argv: list[str] = []
    for key, value in options.items():
        flag = catalog.lookup(key)
        if value is None or value is False:
            continue
        if value is True:
            argv.append(flag.long_name)
        elif isinstance(value, Mapping):
            for name, item in value.items():
                argv += [flag.long_name, f"{name}={_render(item)}"]
        elif isinstance(value, (list, tuple)):
            for item in value:
                argv += [flag.long_name, _render(item)]
        else:
            argv += [flag.long_name, _render(value)]
    return argv


def parse_assignment(text: str) -> tuple[str, str | bool]:
    """Split a ``KEY=VALUE`` CLI argument; a bare ``KEY`` means ``True``."""
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep:
        return key, True
    return key, value
