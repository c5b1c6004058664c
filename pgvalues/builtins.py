"""Lookup of built-in PostgreSQL types by constant or server name."""

from __future__ import annotations

from pgvalues.catalog import all_entries
from pgvalues.types import Type

_BY_CONSTANT: dict[str, Type] = {
    entry.constant: Type.from_oid(entry.oid) for entry in all_entries()
}
_BY_SERVER_NAME: dict[str, Type] = {
    entry.name: Type.from_oid(entry.oid) for entry in all_entries()
}


def builtin(name: str) -> Type:
    """Return the built-in type with this constant name or server name.

    ``builtin("INT4")`` and ``builtin("int4")`` both give ``Type.INT4``.
    Raises :class:`KeyError` if no built-in type has that name.
    """
    try:
        return _BY_CONSTANT[name]
    except KeyError:
        pass
    try:
        return _BY_SERVER_NAME[name]
    except KeyError:
        raise KeyError(f"no built-in Postgres type named {name!r}") from None