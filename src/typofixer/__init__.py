"""
typofixer: fix misspelled identifiers in source code.

Identifiers are matched against a table of canonical names and their known
typos; matches are rewritten in place and every other byte of the source is
left untouched.
"""

from .engine import Change, Position, RewriteResult, Token, TokenKind, rewrite
from .errors import ConfigError, SourcePathError, TypoFixerError
from .fixer import FileResult, fix_source, process_paths
from .table import CanonicalEntry, LookupTable, default_table, load_table

__all__ = [
    "CanonicalEntry",
    "Change",
    "ConfigError",
    "FileResult",
    "LookupTable",
    "Position",
    "RewriteResult",
    "SourcePathError",
    "Token",
    "TokenKind",
    "TypoFixerError",
    "default_table",
    "fix_source",
    "load_table",
    "process_paths",
    "rewrite",
]
