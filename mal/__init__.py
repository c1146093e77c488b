from .lexer import tokenize
from .reader import Reader, ReaderInvariantError, read, read_str
from .printer import pr_str
from .repl import rep

__all__ = ["tokenize", "Reader", "ReaderInvariantError", "read", "read_str", "pr_str", "rep"]
