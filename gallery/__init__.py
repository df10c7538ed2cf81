"""Searchable content gallery rendered from a JSON site document."""

__version__ = "0.1.0"
