"""Regex-driven tokenizer for mal source text.

One composite pattern skips any run of whitespace and commas, then captures
the next lexeme. Alternatives are tried in order:

    ~@                      splice-unquote
    [\\[\\]{}()'`~^@]          one special punctuation character
    "(?:\\\\.|[^\\\\"])*"?       a string, closing quote optional
    ;.*                     a comment up to the end of the line
    [^\\s\\[\\]{}('"`,;)]*      a symbol run, possibly empty

The pattern matches everywhere, so every position of the input is covered
and the scan always ends with an empty capture at end of input.
"""

import logging
import re
from typing import Iterator

from .types import (
    OPERATOR_CHARS,
    SPECIAL_CHARS,
    Comment,
    Operator,
    OperatorToken,
    Special,
    SpecialToken,
    SpliceUnquote,
    StringLiteral,
    Symbol,
    Token,
)

logger = logging.getLogger(__name__)

STRING_PATTERN = r'"(?:\\.|[^\\"])*"'

TOKEN_PATTERN = re.compile(
    r"""[\s,]*(~@|[\[\]{}()'`~^@]|"(?:\\.|[^\\"])*"?|;.*|[^\s\[\]{}('"`,;)]*)"""
)

_CLOSED_STRING = re.compile(STRING_PATTERN)


def classify(lexeme: str) -> Token:
    """Map one captured lexeme to its token. Total: the first rule that fits wins."""
    if lexeme == "~@":
        return SpliceUnquote()
    if lexeme.startswith(";"):
        return Comment(lexeme[1:])
    if not lexeme:
        return Symbol(lexeme)
    first = lexeme[0]
    if first in SPECIAL_CHARS:
        return SpecialToken(Special(first))
    if first in OPERATOR_CHARS:
        return OperatorToken(Operator(first))
    if first == '"':
        # "abc\" ends in a quote but the quote is escaped
        if _CLOSED_STRING.fullmatch(lexeme):
            return StringLiteral(lexeme[1:-1], closed=True)
        return StringLiteral(lexeme[1:], closed=False)
    return Symbol(lexeme)


def scan(src: str) -> Iterator[tuple[int, int, str]]:
    """Yield (start, end, lexeme) for each capture, left to right."""
    for m in TOKEN_PATTERN.finditer(src):
        start, end = m.span(1)
        logger.debug("capture %d:%d %r", start, end, m.group(1))
        yield start, end, m.group(1)


def tokenize(src: str) -> list[Token]:
    """Classify every lexeme of src; the list always ends with Symbol("")."""
    return [classify(lexeme) for _, _, lexeme in scan(src)]
