"""Recursive-descent parser producing an abstract syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from toylang.lexer import Lexer, Token, TokenType


class ExprAST:
    """Base class for all syntax tree nodes."""


@dataclass(frozen=True)
class NumberExprAST(ExprAST):
    """A numeric literal such as ``1``."""

    value: int


@dataclass(frozen=True)
class VariableExprAST(ExprAST):
    """A reference to a variable such as ``a``."""

    name: str


@dataclass(frozen=True)
class BinaryExprAST(ExprAST):
    """A binary operation; ``op`` is the operator's spelling."""

    op: str
    lhs: ExprAST
    rhs: ExprAST


@dataclass(frozen=True)
class CallExprAST(ExprAST):
    """A call of a function with a tuple of argument expressions."""

    func_name: str
    args: tuple[ExprAST, ...] = ()


@dataclass(frozen=True)
class PrototypeAST(ExprAST):
    """A function's name and the names of its parameters."""

    name: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class FunctionAST(ExprAST):
    """A function definition: a prototype and a single-expression body."""

    prototype: PrototypeAST
    body: ExprAST


class ParseError(Exception):
    """Raised when the token stream does not match the grammar."""


_BINOP_PRECEDENCE = {
    TokenType.PLUS: 20,
    TokenType.MINUS: 20,
    TokenType.MULT: 40,
    TokenType.DIV: 40,
}


class Parser:
    """Builds syntax trees from the tokens of a :class:`Lexer`."""

    def __init__(self, lexer: Lexer | TextIO | str) -> None:
        self._lexer = lexer if isinstance(lexer, Lexer) else Lexer(lexer)
        self._precedence = dict(_BINOP_PRECEDENCE)

    def _peek(self) -> Token:
        return self._lexer.peek_next_token()

    def _next(self) -> Token:
        return self._lexer.get_token()

    def _expect(self, token_type: TokenType, message: str) -> Token:
        if self._peek().type is not token_type:
            raise ParseError(message)
        return self._next()

    def parse(self) -> list[ExprAST]:
        """Parse the whole input into definitions and top-level expressions."""
        items: list[ExprAST] = []
        while True:
            token_type = self._peek().type
            if token_type is TokenType.EOF:
                return items
            if token_type is TokenType.SEMICOLON:
                self._next()
            elif token_type is TokenType.DEF:
                items.append(self.parse_definition())
            else:
                items.append(self.parse_expression())

    def parse_definition(self) -> FunctionAST:
        """Parse ``def prototype { expression }``."""
        self._expect(TokenType.DEF, "Expected def before a function definition")
        prototype = self.parse_prototype()
        self._expect(TokenType.LBRACE, "Expected '{' at start of function body")
        body = self.parse_expression()
        self._expect(TokenType.RBRACE, "Expected '}' at end of function body")
        return FunctionAST(prototype, body)

    def parse_prototype(self) -> PrototypeAST:
        """Parse ``name ( arg, arg, ... )``."""
        name = self._expect(TokenType.ID, "Expected function name in prototype").name
        self._expect(TokenType.LPAREN, "Expected '(' in prototype")

        arg_names: list[str] = []
        if self._peek().type is TokenType.ID:
            arg_names.append(self._next().name)
            while self._peek().type is TokenType.COMMA:
                self._next()
                arg_names.append(
                    self._expect(
                        TokenType.ID,
                        "Expected parameter name after ',' in function prototype",
                    ).name
                )

        self._expect(TokenType.RPAREN, "Expected ')' in prototype")
        return PrototypeAST(name, tuple(arg_names))

    def parse_expression(self) -> ExprAST:
        """Parse a primary expression followed by any binary operations."""
        return self._parse_binop_rhs(0, self.parse_primary())

    def parse_primary(self) -> ExprAST:
        """Parse an identifier, call, number or parenthesised expression."""
        token_type = self._peek().type
        if token_type is TokenType.ID:
            return self._parse_identifier_expr()
        if token_type is TokenType.NUMBER:
            return self._parse_number_expr()
        if token_type is TokenType.LPAREN:
            return self._parse_paren_expr()
        raise ParseError("expecting expression")

    def token_precedence(self, token_type: TokenType) -> int:
        """Return the binding strength of a binary operator, or -1."""
        precedence = self._precedence.get(token_type, 0)
        return precedence if precedence > 0 else -1

    def _parse_number_expr(self) -> NumberExprAST:
        return NumberExprAST(self._expect(TokenType.NUMBER, "expecting number").number)

    def _parse_identifier_expr(self) -> ExprAST:
        name = self._next().name
        if self._peek().type is not TokenType.LPAREN:
            return VariableExprAST(name)
        self._next()

        args: list[ExprAST] = []
        if self._peek().type is not TokenType.RPAREN:
            args.append(self._argument("expecting expression after '('"))
            while self._peek().type is TokenType.COMMA:
                self._next()
                args.append(self._argument("expecting expression after ','"))

        self._expect(TokenType.RPAREN, "expecting ')' at the end of function call")
        return CallExprAST(name, tuple(args))

    def _argument(self, message: str) -> ExprAST:
        try:
            return self.parse_expression()
        except ParseError as err:
            raise ParseError(message) from err

    def _parse_paren_expr(self) -> ExprAST:
        self._expect(TokenType.LPAREN, "expecting '('")
        expr = self.parse_expression()
        self._expect(TokenType.RPAREN, "expecting ')'")
        return expr

    def _parse_binop_rhs(self, expr_prec: int, lhs: ExprAST) -> ExprAST:
        while True:
            tok_prec = self.token_precedence(self._peek().type)
            if tok_prec < expr_prec:
                return lhs
            op = self._next().name
            rhs = self.parse_primary()
            if tok_prec < self.token_precedence(self._peek().type):
                rhs = self._parse_binop_rhs(tok_prec + 1, rhs)
            lhs = BinaryExprAST(op, lhs, rhs)