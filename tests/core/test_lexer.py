"""
Tests for the Euclid Tokenizer.

Verifies:
1. Symbol, number and keyword classification.
2. Comment skipping (``//`` and ``#``) and the ``\\\\`` fraction operator.
3. Line/column tracking and the trailing EOF token.
4. Unknown characters falling through as TEXT.
"""

import pytest

from euclid.core.lexer import Tokenizer, tokenize
from euclid.core.tokens import TokenKind


def kinds(source):
  return [t.kind for t in tokenize(source)]


def test_empty_input_yields_only_eof() -> None:
  tokens = tokenize("")
  assert len(tokens) == 1
  assert tokens[0].kind == TokenKind.EOF
  assert tokens[0].line == 1
  assert tokens[0].column == 1


def test_arithmetic_expression() -> None:
  assert kinds("2 + 3 * 4") == [
    TokenKind.NUMBER,
    TokenKind.PLUS,
    TokenKind.NUMBER,
    TokenKind.MULTIPLY,
    TokenKind.NUMBER,
    TokenKind.EOF,
  ]


def test_all_single_char_symbols() -> None:
  assert kinds("()[]{},+-*/%^=") == [
    TokenKind.LPAREN,
    TokenKind.RPAREN,
    TokenKind.LBRACKET,
    TokenKind.RBRACKET,
    TokenKind.LBRACE,
    TokenKind.RBRACE,
    TokenKind.COMMA,
    TokenKind.PLUS,
    TokenKind.MINUS,
    TokenKind.MULTIPLY,
    TokenKind.DIVIDE,
    TokenKind.MODULO,
    TokenKind.POWER,
    TokenKind.EQUALS,
    TokenKind.EOF,
  ]


@pytest.mark.parametrize(
  "source, value",
  [
    ("42", 42.0),
    ("3.14", 3.14),
    ("1e3", 1000.0),
    ("2.5E-2", 0.025),
    ("7e+1", 70.0),
  ],
)
def test_number_literals(source, value) -> None:
  token = tokenize(source)[0]
  assert token.kind == TokenKind.NUMBER
  assert token.text == source
  assert token.literal == pytest.approx(value)


def test_dot_without_digit_is_not_part_of_number() -> None:
  tokens = tokenize("3.")
  assert tokens[0].kind == TokenKind.NUMBER
  assert tokens[0].text == "3"
  assert tokens[1].kind == TokenKind.TEXT
  assert tokens[1].text == "."


def test_exponent_without_digits_is_not_consumed() -> None:
  tokens = tokenize("2e")
  assert tokens[0].text == "2"
  assert tokens[1].kind == TokenKind.IDENTIFIER
  assert tokens[1].text == "e"


def test_keywords_and_identifiers() -> None:
  tokens = tokenize("sin PI ALPHA foo_bar1")
  assert [t.kind for t in tokens[:-1]] == [
    TokenKind.SIN,
    TokenKind.PI,
    TokenKind.ALPHA,
    TokenKind.IDENTIFIER,
  ]
  assert tokens[3].text == "foo_bar1"


def test_keywords_are_case_sensitive() -> None:
  assert tokenize("pi")[0].kind == TokenKind.IDENTIFIER
  assert tokenize("Sin")[0].kind == TokenKind.IDENTIFIER


def test_fraction_operator_and_lone_backslash() -> None:
  assert kinds("a \\\\ b") == [TokenKind.IDENTIFIER, TokenKind.FRACTION, TokenKind.IDENTIFIER, TokenKind.EOF]
  tokens = tokenize("a \\ b")
  assert tokens[1].kind == TokenKind.TEXT
  assert tokens[1].text == "\\"


def test_line_comments_are_discarded() -> None:
  assert kinds("x // trailing note") == [TokenKind.IDENTIFIER, TokenKind.EOF]
  assert kinds("# heading\ny") == [TokenKind.NEWLINE, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_single_slash_is_division() -> None:
  assert kinds("a / b")[1] == TokenKind.DIVIDE


def test_dollar_delimiters() -> None:
  assert kinds("$$x$$ $y$") == [
    TokenKind.DOUBLE_DOLLAR,
    TokenKind.IDENTIFIER,
    TokenKind.DOUBLE_DOLLAR,
    TokenKind.DOLLAR,
    TokenKind.IDENTIFIER,
    TokenKind.DOLLAR,
    TokenKind.EOF,
  ]


def test_positions_across_lines() -> None:
  tokens = Tokenizer("x +\n  sin(y)").tokenize()
  by_text = {t.text: t for t in tokens if t.text}

  assert (by_text["x"].line, by_text["x"].column) == (1, 1)
  assert (by_text["+"].line, by_text["+"].column) == (1, 3)
  assert (by_text["sin"].line, by_text["sin"].column) == (2, 3)
  assert (by_text["y"].line, by_text["y"].column) == (2, 7)

  eof = tokens[-1]
  assert eof.kind == TokenKind.EOF
  assert (eof.line, eof.column) == (2, 9)


def test_unknown_characters_become_text() -> None:
  tokens = tokenize("x ≤ y!")
  assert tokens[1].kind == TokenKind.TEXT
  assert tokens[1].text == "≤"
  assert tokens[3].kind == TokenKind.TEXT
  assert tokens[3].text == "!"


def test_describe_uses_readable_names() -> None:
  tokens = tokenize("x\n")
  assert tokens[0].describe() == "'x'"
  assert tokens[1].describe() == "end of line"
  assert tokens[2].describe() == "end of input"
