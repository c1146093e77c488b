"""Read-print loop front end."""

import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .lexer import tokenize
from .printer import UNBALANCED, pr_str
from .reader import read_str

logger = logging.getLogger(__name__)


class ReplError(RuntimeError):
    pass


@dataclass
class ReplConfig:
    prompt: str = "user> "
    tokenize_command: str = "tokenize"
    dump_tokens: bool = False


def rep(line: str, config: Optional[ReplConfig] = None) -> str:
    """Process one input line and return the text to show for it.

    ``tokenize <text>`` dumps the tokens of ``<text>``. Anything else is read
    as one form and printed; an unterminated list yields the ``unbalanced``
    sentinel, and input that produces no form yields an empty string.
    """
    config = config or ReplConfig()
    if config.dump_tokens:
        return repr(tokenize(line))

    head, sep, rest = line.partition(" ")
    if head == config.tokenize_command:
        if not sep:
            raise ReplError("no input")
        return repr(tokenize(rest))

    reader = read_str(line)
    form = reader.read_form()
    if form is None:
        return UNBALANCED if reader.unbalanced else ""
    return pr_str(form)


def repl(
    config: Optional[ReplConfig] = None,
    input_fn: Callable[[str], str] = input,
    output: Optional[TextIO] = None,
) -> int:
    """Prompt for lines until EOF or Ctrl-C. Returns the exit status.

    Results go to ``output`` (stdout by default); errors go to stderr.
    """
    config = config or ReplConfig()
    try:
        import readline  # noqa: F401  line editing and history for input()
    except ImportError:
        logger.debug("readline not available; no line history")

    while True:
        try:
            line = input_fn(config.prompt)
        except (EOFError, KeyboardInterrupt):
            print(file=output)
            return 0
        try:
            print(rep(line, config), file=output)
        except ReplError as e:
            print(f"error: {e}", file=sys.stderr)
