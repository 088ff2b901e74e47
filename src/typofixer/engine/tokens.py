"""Token and change records exchanged between the tokenizer and the engine."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class TokenKind(Enum):
    IDENTIFIER = "identifier"
    OTHER = "other"


class Position(NamedTuple):
    """1-based line and column of the first character of a token."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """A lexical unit of source text. A kind of None is treated as OTHER."""
    text: str
    kind: Optional[TokenKind]
    position: Position

    @property
    def is_identifier(self) -> bool:
        return self.kind is TokenKind.IDENTIFIER


@dataclass(frozen=True)
class Change:
    """One substitution made during a rewrite pass."""
    position: Position
    original_text: str
    corrected_text: str

    def to_dict(self) -> dict:
        return {
            "line": self.position.line,
            "column": self.position.column,
            "original": self.original_text,
            "corrected": self.corrected_text,
        }
