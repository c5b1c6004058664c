"""PostgreSQL type descriptors: the type, its kind and composite fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pgvalues.catalog import BuiltinEntry, KindTag, all_entries, lookup_oid

_TRANSPARENT_SCHEMAS = frozenset({"public", "pg_catalog"})


@dataclass(frozen=True)
class Field:
    """A named, typed field of a composite type."""

    name: str
    type: "Type"


@dataclass(frozen=True)
class Kind:
    """The kind of a PostgreSQL type.

    ``name`` is one of ``simple``, ``pseudo``, ``enum``, ``array``,
    ``range``, ``domain`` and ``composite``. ``member`` holds the element
    type of arrays and ranges and the underlying type of domains;
    ``variants`` holds the labels of an enum and ``fields`` the fields of a
    composite type.
    """

    name: str
    member: Optional["Type"] = None
    variants: tuple[str, ...] = ()
    fields: tuple[Field, ...] = ()

    @classmethod
    def simple(cls) -> "Kind":
        """A plain type such as ``varchar`` or ``integer``."""
        return cls("simple")

    @classmethod
    def pseudo(cls) -> "Kind":
        """A pseudo-type."""
        return cls("pseudo")

    @classmethod
    def enum(cls, variants: Iterable[str]) -> "Kind":
        """An enumerated type with the given labels, in order."""
        return cls("enum", variants=tuple(variants))

    @classmethod
    def array(cls, member: "Type") -> "Kind":
        """An array whose elements are of ``member``."""
        return cls("array", member=member)

    @classmethod
    def range(cls, member: "Type") -> "Kind":
        """A range over ``member``."""
        return cls("range", member=member)

    @classmethod
    def domain(cls, inner: "Type") -> "Kind":
        """A domain over ``inner``."""
        return cls("domain", member=inner)

    @classmethod
    def composite(cls, fields: Iterable[Field]) -> "Kind":
        """A composite type with the given fields, in order."""
        return cls("composite", fields=tuple(fields))


class Type:
    """A PostgreSQL type.

    Built-in types are available as class attributes such as ``Type.INT4``
    and through :meth:`from_oid`; other types are created with the
    constructor. A type created with the constructor never equals a
    built-in one, even if its OID and name match.
    """

    __slots__ = ("_name", "_oid", "_kind", "_schema", "_constant")

    def __init__(self, name: str, oid: int, kind: Kind, schema: str) -> None:
        self._name = name
        self._oid = oid
        self._kind: Optional[Kind] = kind
        self._schema = schema
        self._constant: Optional[str] = None

    @classmethod
    def _from_entry(cls, entry: BuiltinEntry) -> "Type":
        ty = cls.__new__(cls)
        ty._name = entry.name
        ty._oid = entry.oid
        ty._kind = None  # resolved lazily from the catalog
        ty._schema = "pg_catalog"
        ty._constant = entry.constant
        return ty

    @classmethod
    def from_oid(cls, oid: int) -> Optional["Type"]:
        """Return the built-in type with this OID, or ``None``."""
        entry = lookup_oid(oid)
        if entry is None:
            return None
        return _BUILTINS[entry.oid]

    @property
    def oid(self) -> int:
        """The OID of the type."""
        return self._oid

    @property
    def name(self) -> str:
        """The name of the type."""
        return self._name

    @property
    def schema(self) -> str:
        """The schema the type lives in."""
        return self._schema

    @property
    def kind(self) -> Kind:
        """The kind of the type."""
        if self._kind is None:
            self._kind = _builtin_kind(self._oid)
        return self._kind

    @property
    def is_builtin(self) -> bool:
        """Whether this is one of the server's built-in types."""
        return self._constant is not None

    def _key(self) -> tuple:
        if self._constant is not None:
            return (True, self._oid)
        return (False, self._oid, self._name, self._schema, self.kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        if self._schema in _TRANSPARENT_SCHEMAS:
            return self._name
        return f"{self._schema}.{self._name}"

    def __repr__(self) -> str:
        if self._constant is not None:
            return f"Type.{self._constant}"
        return (
            f"Type(name={self._name!r}, oid={self._oid!r}, "
            f"kind={self.kind!r}, schema={self._schema!r})"
        )


def _builtin_kind(oid: int) -> Kind:
    entry = lookup_oid(oid)
    if entry is None:
        raise KeyError(oid)
    if entry.kind is KindTag.SIMPLE:
        return Kind.simple()
    if entry.kind is KindTag.PSEUDO:
        return Kind.pseudo()
    member = _BUILTINS[entry.element]
    if entry.kind is KindTag.ARRAY:
        return Kind.array(member)
    return Kind.range(member)


_BUILTINS: dict[int, Type] = {
    entry.oid: Type._from_entry(entry) for entry in all_entries()
}

for _entry in all_entries():
    setattr(Type, _entry.constant, _BUILTINS[_entry.oid])
del _entry