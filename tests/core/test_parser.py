"""
Tests for the Euclid Parser.

Verifies:
1. Operator precedence and associativity.
2. Unary binding relative to powers.
3. Constants, Greek letters and function calls.
4. Error reporting (missing delimiters, unexpected tokens, arity).
"""

import pytest

from euclid.core.errors import ArityError, DelimiterError, MissingDelimiterError, UnexpectedTokenError
from euclid.core.lexer import tokenize
from euclid.core.nodes import (
  Binary,
  Call,
  DisplayMath,
  Document,
  Grouping,
  Identifier,
  InlineMath,
  Literal,
  Text,
  Unary,
)
from euclid.core.parser import Parser
from euclid.core.tokens import Token, TokenKind


def parse(source: str) -> Document:
  return Parser(tokenize(source)).parse()


def parse_one(source: str):
  doc = parse(source)
  assert len(doc.nodes) == 1
  return doc.nodes[0]


def test_empty_document() -> None:
  assert parse("") == Document(nodes=())


def test_requires_eof_terminated_stream() -> None:
  with pytest.raises(ValueError):
    Parser([Token(TokenKind.NUMBER, "1", 1, 1, literal=1.0)])


def test_multiplication_binds_tighter_than_addition() -> None:
  node = parse_one("2 + 3 * 4")
  assert node == Binary(
    TokenKind.PLUS,
    Literal(2.0),
    Binary(TokenKind.MULTIPLY, Literal(3.0), Literal(4.0)),
  )


def test_additive_is_left_associative() -> None:
  node = parse_one("a - b - c")
  assert node == Binary(
    TokenKind.MINUS,
    Binary(TokenKind.MINUS, Identifier("a"), Identifier("b")),
    Identifier("c"),
  )


def test_fraction_shares_multiplicative_level() -> None:
  node = parse_one("a \\\\ b * c")
  assert node == Binary(
    TokenKind.MULTIPLY,
    Binary(TokenKind.FRACTION, Identifier("a"), Identifier("b")),
    Identifier("c"),
  )


def test_power_is_right_associative() -> None:
  node = parse_one("2^3^4")
  assert node == Binary(
    TokenKind.POWER,
    Literal(2.0),
    Binary(TokenKind.POWER, Literal(3.0), Literal(4.0)),
  )


def test_unary_minus_applies_to_whole_power() -> None:
  node = parse_one("-x^2")
  assert node == Unary(TokenKind.MINUS, Binary(TokenKind.POWER, Identifier("x"), Literal(2.0)))


def test_negative_exponent() -> None:
  node = parse_one("2^-1")
  assert node == Binary(TokenKind.POWER, Literal(2.0), Unary(TokenKind.MINUS, Literal(1.0)))


def test_nested_unary() -> None:
  assert parse_one("--x") == Unary(TokenKind.MINUS, Unary(TokenKind.MINUS, Identifier("x")))
  assert parse_one("+x") == Unary(TokenKind.PLUS, Identifier("x"))


def test_grouping() -> None:
  node = parse_one("(a + b) * c")
  assert isinstance(node, Binary)
  assert node.left == Grouping(Binary(TokenKind.PLUS, Identifier("a"), Identifier("b")))


def test_constants_parse_as_literals() -> None:
  node = parse_one("PI")
  assert node == Literal(TokenKind.PI)
  assert node.is_constant


def test_greek_letters_parse_as_identifiers() -> None:
  assert parse_one("ALPHA") == Identifier("ALPHA", TokenKind.ALPHA)


def test_function_call_arguments() -> None:
  node = parse_one("integral(sin(x), x, 0, PI)")
  assert isinstance(node, Call)
  assert node.function == TokenKind.INTEGRAL
  assert node.name == "integral"
  assert len(node.arguments) == 4
  assert node.arguments[0] == Call(TokenKind.SIN, "sin", (Identifier("x"),))
  assert node.arguments[3] == Literal(TokenKind.PI)


def test_variadic_call_with_no_arguments() -> None:
  assert parse_one("vector()") == Call(TokenKind.VECTOR, "vector", ())


def test_newlines_separate_expressions() -> None:
  doc = parse("x\n\ny + 1\n")
  assert len(doc.nodes) == 2
  assert doc.nodes[0] == Identifier("x")


def test_text_and_math_regions() -> None:
  doc = parse("$x$ ! $$y$$")
  assert doc.nodes == (InlineMath(Identifier("x")), Text("!"), DisplayMath(Identifier("y")))


def test_missing_paren_after_function() -> None:
  with pytest.raises(MissingDelimiterError) as exc:
    parse("sin x")
  assert exc.value.message == "Expected '(' after function name 'sin'"
  assert (exc.value.line, exc.value.column) == (1, 1)


def test_unclosed_call_is_reported_at_opening_paren() -> None:
  with pytest.raises(DelimiterError) as exc:
    parse("sin(x + y")
  assert (exc.value.line, exc.value.column) == (1, 4)


def test_missing_closing_dollar() -> None:
  with pytest.raises(MissingDelimiterError):
    parse("$x + y")


@pytest.mark.parametrize(
  "source, text",
  [
    ("* 2", "*"),
    ("x = 2", "="),
    ("from x", "from"),
    (", x", ","),
  ],
)
def test_unexpected_tokens(source, text) -> None:
  with pytest.raises(UnexpectedTokenError) as exc:
    parse(source)
  assert exc.value.text == text


def test_operator_at_end_of_input() -> None:
  with pytest.raises(UnexpectedTokenError) as exc:
    parse("1 +")
  assert "end of input" in exc.value.message
  assert (exc.value.line, exc.value.column) == (1, 4)


def test_arity_errors_name_the_function() -> None:
  with pytest.raises(ArityError) as exc:
    parse("sin()")
  assert exc.value.function == "sin"
  assert exc.value.expected == "1"
  assert exc.value.actual == 0
  assert exc.value.message == "Function 'sin' expects 1 argument, but got 0"

  with pytest.raises(ArityError) as exc:
    parse("sin(x, y)")
  assert exc.value.actual == 2
