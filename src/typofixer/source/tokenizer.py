"""
Lexical scanner for PHP, C-family and Python source files.

This is not a parser. It only separates identifier words from the text that
must never be rewritten (comments, string literals, numbers, punctuation)
and records where each token starts. Concatenating the token texts always
reproduces the input exactly.

Comment and string syntax depend on the language. Variables interpolated
into strings (PHP "$name", JavaScript `${name}`, Python f"{name}") are split
out of the literal so they are renamed together with the rest of the code.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..engine.tokens import Position, Token, TokenKind

DEFAULT_LANGUAGE = "php"

_NAME = r"[^\W\d]\w*"

_BLOCK_COMMENT = r"/\*.*?(?:\*/|\Z)"
_DOUBLE = r'"(?:[^"\\]|\\.?)*(?:"|\Z)'
_SINGLE = r"'(?:[^'\\]|\\.?)*(?:'|\Z)"
_BACKTICK = r"`(?:[^`\\]|\\.?)*(?:`|\Z)"
_TRIPLE_DOUBLE = r'"""(?:\\.?|(?!""")[^\\])*(?:"""|\Z)'
_TRIPLE_SINGLE = r"'''(?:\\.?|(?!''')[^\\])*(?:'''|\Z)"
_PY_STRING = f"{_TRIPLE_DOUBLE}|{_TRIPLE_SINGLE}|{_DOUBLE}|{_SINGLE}"
# <<<EOT / <<<"EOT" interpolate, <<<'EOT' (nowdoc) does not.
_HEREDOC = r"<<<[ \t]*(?P<hq>[\"']?)(?P<hid>[^\W\d]\w*)(?P=hq).*?(?:\n[ \t]*(?P=hid)\b|\Z)"


def _compile(*alternatives: Tuple[str, str]) -> "re.Pattern[str]":
    tail = (
        ("sigil", r"\$"),
        ("word", _NAME),
        ("number", r"\d\w*"),
        ("space", r"\s+"),
        ("other", "."),
    )
    # Alternatives are tried in order; the first match at a position wins.
    return re.compile(
        "|".join(f"(?P<{group}>{pattern})" for group, pattern in alternatives + tail),
        re.DOTALL,
    )


_TOKEN_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    "php": _compile(
        ("block_comment", _BLOCK_COMMENT),
        ("line_comment", r"(?://|\#)[^\r\n]*"),
        ("heredoc", _HEREDOC),
        ("interpolated", f"{_DOUBLE}|{_BACKTICK}"),
        ("string", _SINGLE),
    ),
    "c": _compile(
        ("block_comment", _BLOCK_COMMENT),
        ("line_comment", r"//[^\r\n]*"),
        ("interpolated", _BACKTICK),
        ("string", f"{_DOUBLE}|{_SINGLE}"),
    ),
    "python": _compile(
        ("line_comment", r"\#[^\r\n]*"),
        ("interpolated", f"(?:[fF][rR]?|[rR][fF])(?:{_PY_STRING})"),
        ("string", f"[bBrRuU]{{0,2}}(?:{_PY_STRING})"),
    ),
}

# Inside an interpolated literal: `var` is a $-variable, `expr` is the
# leading name of an embedded expression, anything else is literal text.
_INTERPOLATION_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    "php": re.compile(rf"\$\{{?(?P<var>{_NAME})|\\.?|[^\\$]+|.", re.DOTALL),
    "c": re.compile(rf"\$\{{\s*(?P<expr>{_NAME})|\\.?|[^\\$]+|.", re.DOTALL),
    "python": re.compile(rf"\{{\{{|\{{\s*(?P<expr>{_NAME})|\\.?|[^\\{{]+|.", re.DOTALL),
}

LANGUAGES: Tuple[str, ...] = tuple(_TOKEN_PATTERNS)

_EXTENSION_LANGUAGES = {
    ".php": "php",
    ".phtml": "php",
    ".inc": "php",
    ".py": "python",
    ".pyi": "python",
    ".js": "c",
    ".mjs": "c",
    ".jsx": "c",
    ".ts": "c",
    ".tsx": "c",
    ".c": "c",
    ".h": "c",
    ".java": "c",
}


def language_for_path(path: Optional[Path]) -> str:
    """Pick the lexing rules for a file from its extension."""
    if path is None:
        return DEFAULT_LANGUAGE
    return _EXTENSION_LANGUAGES.get(Path(path).suffix.lower(), DEFAULT_LANGUAGE)


def _split_interpolated(value: str, language: str, variables_only: bool) -> List[Tuple[str, TokenKind]]:
    pieces: List[Tuple[str, TokenKind]] = []
    literal = []

    for match in _INTERPOLATION_PATTERNS[language].finditer(value):
        groups = match.groupdict()
        if groups.get("var"):
            group = "var"
        elif groups.get("expr") and not variables_only:
            group = "expr"
        else:
            literal.append(match.group())
            continue

        name_start = match.start(group) - match.start()
        literal.append(match.group()[:name_start])
        pieces.append(("".join(literal), TokenKind.OTHER))
        literal = []
        pieces.append((match.group(group), TokenKind.IDENTIFIER))

    if literal:
        pieces.append(("".join(literal), TokenKind.OTHER))
    return pieces


def tokenize(
    text: str,
    variables_only: bool = False,
    language: str = DEFAULT_LANGUAGE,
) -> List[Token]:
    """
    Split source text into tokens.

    Args:
        text: Source text
        variables_only: When True, only words directly after a '$' sigil
            (including those interpolated into PHP strings) are IDENTIFIER
            tokens; other words become OTHER
        language: One of LANGUAGES; selects comment and string syntax

    Returns:
        Tokens in source order covering the whole input
    """
    try:
        pattern = _TOKEN_PATTERNS[language]
    except KeyError:
        raise ValueError(f"Unknown language {language!r}, expected one of {', '.join(LANGUAGES)}") from None

    tokens: List[Token] = []
    line, column = 1, 1
    after_sigil = False

    for match in pattern.finditer(text):
        group = match.lastgroup
        value = match.group()

        if group == "interpolated" or (group == "heredoc" and match.group("hq") != "'"):
            pieces = _split_interpolated(value, language, variables_only)
        elif group == "word" and (after_sigil or not variables_only):
            pieces = [(value, TokenKind.IDENTIFIER)]
        else:
            pieces = [(value, TokenKind.OTHER)]
        after_sigil = group == "sigil"

        for piece, kind in pieces:
            if not piece:
                continue
            tokens.append(Token(piece, kind, Position(line, column)))

            newlines = piece.count("\n")
            if newlines:
                line += newlines
                column = len(piece) - piece.rfind("\n")
            else:
                column += len(piece)

    return tokens


def render(tokens: List[Token]) -> str:
    """Join tokens back into source text."""
    return "".join(token.text for token in tokens)
