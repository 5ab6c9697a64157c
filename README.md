# toylang

A lexer and a recursive-descent parser for a small expression language.

A program is made of function definitions and expressions, which may be
separated by semicolons:

```
def add(a, b) { a + b * 2 }
add(1, 2);
```

The lexer knows:

- the keywords `def` and `return`
- identifiers (a letter followed by letters or digits) and non-negative
  integer literals (kept as signed 32-bit values)
- the operators `+ - * / = == > >= < <=`
- the punctuation `; ( ) { } ,`

## Installation

```
pip install .
```

## Command line

`toylang` reads source text from standard input and prints one line per token.
Each line holds the token type, the token's text and its numeric value:

```
$ echo "def f(x) { x + 1 }" | toylang
TOK_DEF def 0
TOK_ID f 0
TOK_LPAREN ( 0
TOK_ID x 0
TOK_RPAREN ) 0
TOK_LBRACE { 0
TOK_ID x 0
TOK_PLUS + 0
TOK_NUMBER  1
TOK_RBRACE } 0
```

A character that starts no token prints `invalid input` followed by a
`TOK_ERR  0` line, and tokenizing goes on with the next character.

## Library use

### Lexer

```python
import io
from toylang.lexer import Lexer

lexer = Lexer(io.StringIO("x >= 10;"))
for token in lexer:
    print(token)
```

`Lexer` takes a text stream or a string. `Lexer.get_token()` consumes the next
token; `Lexer.peek_next_token()` returns it and leaves it to be read. Iterating
over a lexer yields tokens up to, but not including, the end of input. Each
`Token` has a `type` (a `TokenType`), a `name` and a `number`. A character the
language does not know raises `LexError`, whose `char` attribute holds it.

### Parser

```python
from toylang.lexer import Lexer
from toylang.parser import Parser

parser = Parser(Lexer("def add(a, b) { a + b }"))
function = parser.parse_definition()
print(function.prototype.name, function.prototype.args)
```

`Parser` takes a `Lexer`, a text stream or a string. It builds frozen
dataclass nodes, all subclasses of `ExprAST`: `NumberExprAST`,
`VariableExprAST`, `BinaryExprAST`, `CallExprAST`, `PrototypeAST` and
`FunctionAST`.

- `Parser.parse()` reads the whole input and returns a list of function
  definitions and top-level expressions, skipping semicolons.
- `Parser.parse_definition()` parses `def name(args) { expression }`.
- `Parser.parse_prototype()` parses `name(arg, arg, ...)`.
- `Parser.parse_expression()` and `Parser.parse_primary()` parse expressions:
  numbers, variables, calls and parenthesised expressions joined by binary
  operators.
- `Parser.token_precedence(token_type)` gives an operator's binding strength,
  or -1 for a token that is not a binary operator.

`+` and `-` bind less tightly than `*` and `/`, and operators of equal
strength group to the left. Malformed input raises `ParseError`.

## What it does not do

The package stops at syntax trees. It does not evaluate or compile them, the
comparison and assignment operators and the `return` keyword are tokenized but
not accepted by the parser, and a function body is a single expression. The
command line only prints tokens; it does not run the parser.

## Tests

```
pip install .[test]
pytest
```