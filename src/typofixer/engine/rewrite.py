"""
Single-pass identifier rewriting.

The pass walks a token stream once and swaps the text of every IDENTIFIER
token that the lookup table knows as a typo. Tokens are never added,
removed or reordered, so positions in the output match the input.
"""

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from ..logging import get_logger
from ..table.model import LookupTable
from .tokens import Change, Token

logger = get_logger(__name__)


@dataclass(frozen=True)
class RewriteResult:
    """Rewritten tokens and the changes made, both in input order."""
    tokens: Tuple[Token, ...]
    changes: Tuple[Change, ...]

    @property
    def changed(self) -> bool:
        return bool(self.changes)


def rewrite(tokens: Iterable[Token], table: LookupTable) -> RewriteResult:
    """
    Replace known typos in identifier tokens with their canonical names.

    Args:
        tokens: Tokens in source order
        table: Lookup table of canonical names and typos

    Returns:
        RewriteResult with one output token per input token and one Change
        per substitution
    """
    rewritten: List[Token] = []
    changes: List[Change] = []

    for token in tokens:
        if not token.is_identifier:
            rewritten.append(token)
            continue

        canonical = table.lookup(token.text)
        if canonical is None or canonical == token.text:
            rewritten.append(token)
            continue

        rewritten.append(replace(token, text=canonical))
        changes.append(Change(token.position, token.text, canonical))
        logger.debug(f"{token.position}: {token.text} -> {canonical}")

    return RewriteResult(tuple(rewritten), tuple(changes))
