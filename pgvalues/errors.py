"""Errors raised while converting values to and from PostgreSQL."""

from __future__ import annotations

from typing import Any


class ConversionError(Exception):
    """A value could not be converted to or from its wire format."""


class WasNull(ConversionError):
    """A NULL value reached a conversion that does not accept NULL."""

    def __init__(self) -> None:
        super().__init__("a Postgres value was `NULL`")


class WrongType(ConversionError):
    """A conversion was attempted between incompatible Python and Postgres types."""

    def __init__(self, postgres: Any, python_type: Any) -> None:
        self.postgres = postgres
        self.python_type = python_type
        if isinstance(python_type, type):
            python_name = python_type.__qualname__
        else:
            python_name = str(python_type)
        self.python_name = python_name
        super().__init__(
            f"cannot convert between the Python type `{python_name}` "
            f"and the Postgres type `{postgres}`"
        )