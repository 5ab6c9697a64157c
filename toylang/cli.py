"""Command that prints the tokens read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from toylang.lexer import LexError, Lexer, Token, TokenType


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize standard input and print one token per line."""
    parser = argparse.ArgumentParser(
        prog="toylang", description="Print the tokens read from standard input."
    )
    parser.parse_args(argv)

    lexer = Lexer(sys.stdin)
    while True:
        try:
            token = lexer.get_token()
        except LexError as err:
            print(err)
            token = Token(TokenType.ERR)
        if token.type is TokenType.EOF:
            return 0
        print(token)


if __name__ == "__main__":
    sys.exit(main())