"""Recursive-descent reader over a token queue.

Reads return None rather than raising on malformed input. None covers three
cases: the tokens ran out, the next token carries no atom (comments, ``~@``,
punctuation other than parens), or a list was never closed. The last case
also sets ``Reader.unbalanced``.
"""

import logging
from collections import deque
from typing import Iterable, Optional

from .lexer import tokenize
from .printer import UNBALANCED
from .types import (
    CLOSE_PAREN,
    OPEN_PAREN,
    Atom,
    Comment,
    Form,
    List,
    Literal,
    OperatorAtom,
    OperatorToken,
    SpecialToken,
    SpliceUnquote,
    StringLiteral,
    Symbol,
    Token,
)

logger = logging.getLogger(__name__)


class ReaderInvariantError(RuntimeError):
    pass


class Reader:
    """Consumable cursor over an eagerly tokenized input. Cannot be rewound."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: deque[Token] = deque(tokens)
        self.unbalanced = False

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        tok = self.next()
        if tok is None:
            raise StopIteration
        return tok

    def __repr__(self) -> str:
        return f"Reader({list(self._tokens)!r})"

    def peek(self) -> Optional[Token]:
        if not self._tokens:
            return None
        tok = self._tokens[0]
        # the pattern's trailing empty capture marks end of input
        if tok == Symbol(""):
            return None
        return tok

    def next(self) -> Optional[Token]:
        if self.peek() is None:
            return None
        return self._tokens.popleft()

    def read_form(self) -> Optional[Form]:
        self.unbalanced = False
        tok = self.peek()
        if tok is None:
            return None
        if tok == OPEN_PAREN:
            self.next()
            items = self.read_list()
            if items is None:
                return None
            self.next()  # the close paren read_list stopped on
            return List(tuple(items))
        if tok == CLOSE_PAREN:
            # only reachable at top level; inside a list read_list stops on it
            self.next()
            logger.debug("unbalanced input: stray close paren")
            self.unbalanced = True
            return None
        return self.read_atom()

    def read_list(self) -> Optional[list[Form]]:
        """Read forms up to the close paren of a list whose open paren is consumed.

        Inner lists are kept on an explicit stack, so nesting depth is not
        bound by the recursion limit. The outermost close paren is left
        unconsumed.
        """
        self.unbalanced = False
        stack: list[list[Form]] = [[]]
        while True:
            tok = self.peek()
            if tok is None:
                logger.debug("unbalanced list: input ended with %d lists open", len(stack))
                self.unbalanced = True
                return None
            if tok == CLOSE_PAREN:
                if len(stack) == 1:
                    return stack[0]
                self.next()
                items = stack.pop()
                stack[-1].append(List(tuple(items)))
            elif tok == OPEN_PAREN:
                self.next()
                stack.append([])
            else:
                atom = self.read_atom()
                # None is a filtered token
                if atom is not None:
                    stack[-1].append(atom)

    def read_atom(self) -> Optional[Atom]:
        tok = self.next()
        if tok is None:
            return None
        if isinstance(tok, OperatorToken):
            return OperatorAtom(tok.kind)
        if isinstance(tok, Symbol):
            return Literal(tok.text)
        if isinstance(tok, StringLiteral):
            tail = '"' if tok.closed else UNBALANCED
            return Literal(f'"{tok.contents}{tail}')
        if isinstance(tok, (SpliceUnquote, Comment)):
            logger.debug("skipping %r", tok)
            return None
        if isinstance(tok, SpecialToken):
            if tok in (OPEN_PAREN, CLOSE_PAREN):
                raise ReaderInvariantError(f"paren token reached read_atom: {tok.kind}")
            logger.debug("skipping %r", tok)
            return None
        raise ReaderInvariantError(f"unknown token: {tok!r}")


def read_str(src: str) -> Reader:
    """Tokenize src up front and return a reader positioned at its start."""
    return Reader(tokenize(src))


def read(src: str) -> Optional[Form]:
    """Read the first form of src, or None."""
    return read_str(src).read_form()
