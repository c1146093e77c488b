"""CLI: python -m mal [-e TEXT] [-t] [--prompt TEXT] [-v]"""

import argparse
import logging
import sys

from .repl import ReplConfig, ReplError, rep, repl


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="mal", description="Read and print mal forms.")
    parser.add_argument("-e", "--eval", metavar="TEXT", default=None,
                        help="process one line of input and exit")
    parser.add_argument("-t", "--tokenize", action="store_true",
                        help="print the token list of each line instead of reading it")
    parser.add_argument("--prompt", default=ReplConfig.prompt,
                        help="prompt shown before each line (default: %(default)r)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log lexer and reader activity")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ReplConfig(prompt=args.prompt, dump_tokens=args.tokenize)
    if args.eval is not None:
        try:
            print(rep(args.eval, config))
        except ReplError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        return 0
    return repl(config)


if __name__ == "__main__":
    sys.exit(main())
