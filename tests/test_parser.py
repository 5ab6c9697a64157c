import io

import pytest

from toylang.lexer import LexError, Lexer, TokenType
from toylang.parser import (
    BinaryExprAST,
    CallExprAST,
    FunctionAST,
    NumberExprAST,
    ParseError,
    Parser,
    PrototypeAST,
    VariableExprAST,
)


def expr(text):
    return Parser(Lexer(text)).parse_expression()


def test_number_literal():
    assert expr("42") == NumberExprAST(42)


def test_variable():
    assert expr("abc") == VariableExprAST("abc")


def test_multiplication_binds_tighter_than_addition():
    assert expr("1 + 2 * 3") == BinaryExprAST(
        "+", NumberExprAST(1), BinaryExprAST("*", NumberExprAST(2), NumberExprAST(3))
    )


def test_multiplication_first():
    assert expr("1 * 2 + 3") == BinaryExprAST(
        "+", BinaryExprAST("*", NumberExprAST(1), NumberExprAST(2)), NumberExprAST(3)
    )


def test_left_associative_subtraction():
    assert expr("a - b - c") == BinaryExprAST(
        "-",
        BinaryExprAST("-", VariableExprAST("a"), VariableExprAST("b")),
        VariableExprAST("c"),
    )


def test_parentheses_group():
    assert expr("(1 + 2) / x") == BinaryExprAST(
        "/", BinaryExprAST("+", NumberExprAST(1), NumberExprAST(2)), VariableExprAST("x")
    )


def test_call_with_arguments():
    assert expr("f(1, x + 2)") == CallExprAST(
        "f",
        (NumberExprAST(1), BinaryExprAST("+", VariableExprAST("x"), NumberExprAST(2))),
    )


def test_call_without_arguments():
    assert expr("g()") == CallExprAST("g", ())
    # the semicolon is still pending, so parse_primary above must have failed
    

def test_parse_primary_rejects_semicolon():
    parser = Parser(Lexer("x ; y"))
    assert parser.parse_expression() == VariableExprAST("x")
    with pytest.raises(ParseError):
        parser.parse_primary()


def test_prototype():
    parser = Parser(Lexer("foo(a, b, c)"))
    assert parser.parse_prototype() == PrototypeAST("foo", ("a", "b", "c"))


def test_prototype_without_parameters():
    assert Parser(Lexer("foo()")).parse_prototype() == PrototypeAST("foo", ())


def test_definition():
    parser = Parser(Lexer("def add(x, y) { x + y }"))
    assert parser.parse_definition() == FunctionAST(
        PrototypeAST("add", ("x", "y")),
        BinaryExprAST("+", VariableExprAST("x"), VariableExprAST("y")),
    )


def test_parse_program_skips_semicolons():
    items = Parser(Lexer("def id(x) { x };; id(3);")).parse()
    assert items == [
        FunctionAST(PrototypeAST("id", ("x",)), VariableExprAST("x")),
        CallExprAST("id", (NumberExprAST(3),)),
    ]


def test_parse_empty_input():
    assert Parser(Lexer("   \n ")).parse() == []


def test_parser_accepts_text_and_streams():
    from_text = Parser("def f(a) { a * 2 }").parse()
    from_stream = Parser(io.StringIO("def f(a) { a * 2 }")).parse()
    assert from_text == from_stream
    assert len(from_text) == 1


def test_token_precedence_values():
    parser = Parser(Lexer(""))
    assert parser.token_precedence(TokenType.PLUS) == 20
    assert parser.token_precedence(TokenType.MINUS) == 20
    assert parser.token_precedence(TokenType.MULT) == 40
    assert parser.token_precedence(TokenType.DIV) == 40


@pytest.mark.parametrize(
    "token_type", [TokenType.SEMICOLON, TokenType.EQ, TokenType.LT, TokenType.ID]
)
def test_non_operators_have_negative_precedence(token_type):
    assert Parser(Lexer("")).token_precedence(token_type) == -1


@pytest.mark.parametrize(
    "text, message",
    [
        ("f(1, 2", "expecting ')' at the end of function call"),
        ("f(1,)", "expecting expression after ','"),
        ("f(;)", "expecting expression after '('"),
    ],
)
def test_call_errors(text, message):
    with pytest.raises(ParseError, match=message.replace("(", r"\(").replace(")", r"\)")):
        expr(text)


@pytest.mark.parametrize(
    "text, message",
    [
        ("x(a) { a }", "Expected def before a function definition"),
        ("def (a) { a }", "Expected function name in prototype"),
        ("def f a { a }", "Expected '\\(' in prototype"),
        ("def f(a, ) { a }", "Expected parameter name after ','"),
        ("def f(a b) { a }", "Expected '\\)' in prototype"),
        ("def f(a) ( a )", "Expected '\\{' at start of function body"),
        ("def f(a) { a ", "Expected '\\}' at end of function body"),
    ],
)
def test_definition_errors(text, message):
    with pytest.raises(ParseError, match=message):
        Parser(Lexer(text)).parse_definition()


def test_unclosed_parenthesis():
    with pytest.raises(ParseError):
        expr("(1 + 2")


def test_missing_right_operand():
    with pytest.raises(ParseError):
        expr("1 +")


def test_lex_error_propagates():
    with pytest.raises(LexError):
        Parser(Lexer("def f(a) { a @ b }")).parse()