from dataclasses import dataclass
from enum import Enum

# Token and Form node types. Payloads are plain str, shared by reference.


class Special(Enum):
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    TICK = "'"
    BACKTICK = "`"
    TILDE = "~"
    CARET = "^"
    AT = "@"

    def __str__(self) -> str:
        return self.value


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.value


SPECIAL_CHARS = frozenset(s.value for s in Special)
OPERATOR_CHARS = frozenset(op.value for op in Operator)


# --- Tokens ---

@dataclass(frozen=True)
class SpliceUnquote:
    pass


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class SpecialToken:
    kind: Special


@dataclass(frozen=True)
class OperatorToken:
    kind: Operator


@dataclass(frozen=True)
class StringLiteral:
    contents: str
    closed: bool


@dataclass(frozen=True)
class Symbol:
    text: str


Token = SpliceUnquote | Comment | SpecialToken | OperatorToken | StringLiteral | Symbol

OPEN_PAREN = SpecialToken(Special.OPEN_PAREN)
CLOSE_PAREN = SpecialToken(Special.CLOSE_PAREN)


# --- Forms ---

@dataclass(frozen=True)
class OperatorAtom:
    op: Operator


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class List:
    items: tuple["Form", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __iter__(self):
        return iter(self.items)


Atom = OperatorAtom | Literal
Form = OperatorAtom | Literal | List
