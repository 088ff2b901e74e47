"""Token-level rewrite engine."""

from .tokens import Change, Position, Token, TokenKind
from .rewrite import RewriteResult, rewrite

__all__ = [
    "Change",
    "Position",
    "Token",
    "TokenKind",
    "RewriteResult",
    "rewrite",
]
