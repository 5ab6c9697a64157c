"""Tokenizer for the toy language."""

from __future__ import annotations

import enum
import io
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")


class TokenType(enum.IntEnum):
    """Kinds of token produced by the lexer."""

    ERR = -100
    EOF = -1
    DEF = -2
    RETURN = -3
    ID = -4
    NUMBER = -5
    LPAREN = -6
    RPAREN = -7
    LBRACE = -8
    RBRACE = -9
    COMMA = -10
    PLUS = -11
    MINUS = -12
    MULT = -13
    DIV = -14
    EQ = -15
    GT = -16
    GTEQ = -17
    LT = -18
    LTEQ = -19
    EQEQ = -20
    SEMICOLON = -21


_KEYWORDS = {"def": TokenType.DEF, "return": TokenType.RETURN}

_SINGLE = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULT,
    "/": TokenType.DIV,
}

# Operators that become a two-character token when followed by '='.
_WITH_EQ = {
    "=": (TokenType.EQ, TokenType.EQEQ),
    ">": (TokenType.GT, TokenType.GTEQ),
    "<": (TokenType.LT, TokenType.LTEQ),
}


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType
    name: str = ""
    number: int = 0

    def __str__(self) -> str:
        return f"TOK_{self.type.name} {self.name} {self.number}"


class LexError(Exception):
    """Raised when the input holds a character that starts no token."""

    def __init__(self, char: str) -> None:
        super().__init__("invalid input")
        self.char = char


class Lexer:
    """Reads tokens from a text stream, with one token of look-ahead."""

    def __init__(self, stream: TextIO | str) -> None:
        self._stream = io.StringIO(stream) if isinstance(stream, str) else stream
        self._pushed_back: str | None = None
        self._last_char = ""
        self._buffered: Token | None = None

    def get_token(self) -> Token:
        """Consume and return the next token."""
        if self._buffered is not None:
            token, self._buffered = self._buffered, None
            return token
        return self._scan()

    def peek_next_token(self) -> Token:
        """Return the next token without consuming it."""
        if self._buffered is None:
            self._buffered = self._scan()
        return self._buffered

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the end of input."""
        while (token := self.get_token()).type is not TokenType.EOF:
            yield token

    def _read(self) -> str:
        if self._pushed_back is not None:
            char, self._pushed_back = self._pushed_back, None
        else:
            char = self._stream.read(1)
        self._last_char = char
        return char

    def _unread(self) -> None:
        if self._last_char:
            self._pushed_back = self._last_char

    def _scan(self) -> Token:
        char = self._read()
        while char in _WHITESPACE and char:
            char = self._read()

        if not char:
            return Token(TokenType.EOF, "0")

        if char in _LETTERS:
            chars = [char]
            while (char := self._read()) and (char in _LETTERS or char in _DIGITS):
                chars.append(char)
            self._unread()
            word = "".join(chars)
            return Token(_KEYWORDS.get(word, TokenType.ID), word)

        if char in _DIGITS:
            value = int(char)
            while (char := self._read()) and char in _DIGITS:
                value = _wrap_int32(value * 10 + int(char))
            self._unread()
            return Token(TokenType.NUMBER, "", value)

        if char in _SINGLE:
            return Token(_SINGLE[char], char)

        if char in _WITH_EQ:
            plain, doubled = _WITH_EQ[char]
            if self._read() == "=":
                return Token(doubled, char + "=")
            self._unread()
            return Token(plain, char)

        raise LexError(char)