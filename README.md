# pgvalues

`pgvalues` describes PostgreSQL types in Python. It knows the catalog of
types built into the server (their OIDs, names and kinds), lets you describe
user-defined enums, domains, arrays, ranges and composites, and defines the
errors that conversion code raises.

It has no dependencies outside the standard library.

## Installation

```
pip install pgvalues
```

## The built-in catalog

`pgvalues.catalog` holds one `BuiltinEntry` per built-in type. An entry has
a `constant` (such as `"INT4_ARRAY"`), an `oid`, the server `name` (such as
`"_int4"`), a `kind` from the `KindTag` enum (`SIMPLE`, `PSEUDO`, `ARRAY`,
`RANGE`) and, for arrays and ranges, the `element` OID of the member type,
whose entry `element_entry` returns.

```python
from pgvalues.catalog import all_entries, lookup_name, lookup_oid

entry = lookup_oid(1007)
print(entry.name)                 # _int4
print(entry.element_entry.name)   # int4
print(lookup_name("jsonb").oid)   # 3802
print(lookup_oid(1))              # None
print(len(all_entries()))         # every built-in type, in OID order
```

## Types

`pgvalues.types.Type` describes a Postgres type. It has `name`, `oid`,
`schema` and `kind` properties, and `is_builtin` tells whether it is one of
the server's own types. Every built-in type is a class attribute named after
its catalog constant, and `Type.from_oid` finds one by OID:

```python
from pgvalues.types import Type

print(Type.from_oid(23) == Type.INT4)   # True
print(Type.from_oid(1))                 # None
print(Type.INT4_ARRAY.kind.member)      # int4
```

`pgvalues.builtins.builtin(name)` accepts either the constant or the server
name, so `builtin("INT4")` and `builtin("int4")` both return `Type.INT4`; an
unknown name raises `KeyError`.

A `Kind` has a `name` (`simple`, `pseudo`, `enum`, `array`, `range`,
`domain` or `composite`), a `member` for arrays, ranges and domains,
`variants` for enums and `fields` for composites. Build one with
`Kind.simple()`, `Kind.pseudo()`, `Kind.enum(variants)`,
`Kind.array(member)`, `Kind.range(member)`, `Kind.domain(inner)` or
`Kind.composite(fields)`, where each field is a `Field(name, type)`.

User-defined types are created with the constructor,
`Type(name, oid, kind, schema)`:

```python
from pgvalues.types import Field, Kind, Type

mood = Type("mood", 16390, Kind.enum(["sad", "ok", "happy"]), "app")
item = Type(
    "inventory_item",
    16400,
    Kind.composite([Field("name", Type.TEXT), Field("supplier", Type.INT4)]),
    "public",
)
print(str(mood))   # app.mood
print(str(item))   # inventory_item
```

A type prints with its schema as a prefix unless the schema is `public` or
`pg_catalog`. Built-in types compare equal by OID; a type made with the
constructor compares by OID, name, schema and kind, and never equals a
built-in type.

## Errors

`pgvalues.errors` defines the exceptions for conversion code:

- `ConversionError`, the base of the others;
- `WasNull`, for a NULL that reached a conversion which does not accept it;
- `WrongType(postgres, python_type)`, for a Python type paired with a
  Postgres type it cannot be converted to. It keeps `postgres`,
  `python_type` and `python_name`, and its message reads, for example,
  ``cannot convert between the Python type `int` and the Postgres type `text` ``.

## What the package does not do

`pgvalues` only describes types. It does not encode Python values into the
binary wire format or decode them from it, has no converters for any type,
and does no networking: it does not talk to a server.

## Running the tests

```
pip install -e ".[test]"
pytest
```