"""Lexer, parser and token-printing command for a small expression language."""

__version__ = "0.1.0"
__all__ = ["cli", "lexer", "parser"]