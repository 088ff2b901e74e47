"""Lookup tables of canonical identifier names and their known typos."""

from .model import CanonicalEntry, LookupTable
from .loader import DEFAULT_TYPOS, default_table, load_table

__all__ = [
    "CanonicalEntry",
    "LookupTable",
    "DEFAULT_TYPOS",
    "default_table",
    "load_table",
]
