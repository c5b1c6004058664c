"""Descriptions of PostgreSQL types, the built-in type catalog and conversion errors."""

__version__ = "0.2.1"