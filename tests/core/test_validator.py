"""
Tests for delimiter balance, arity checks and identifier suggestions.
"""

import pytest

from euclid.core.errors import ArityError, DelimiterError
from euclid.core.lexer import tokenize
from euclid.core.tokens import Token, TokenKind
from euclid.core.validator import check_arity, check_delimiters, misspelling_hint, suggest_similar, suggestion_for


def test_balanced_delimiters_pass() -> None:
  check_delimiters(tokenize("f(x) [a] {b} ((c))"))


def test_unmatched_closing_paren() -> None:
  with pytest.raises(DelimiterError) as exc:
    check_delimiters(tokenize("x + y)"))
  assert exc.value.message == "Unmatched closing parenthesis ')'"
  assert (exc.value.line, exc.value.column) == (1, 6)


def test_unclosed_paren_reports_earliest_open() -> None:
  with pytest.raises(DelimiterError) as exc:
    check_delimiters(tokenize("(a + (b)"))
  assert exc.value.message == "Unclosed parenthesis '(' - missing closing ')'"
  assert exc.value.column == 1
  assert exc.value.suggestion == "Add a closing ')'"


def test_unclosed_bracket_and_brace() -> None:
  with pytest.raises(DelimiterError) as exc:
    check_delimiters(tokenize("[x"))
  assert "bracket" in exc.value.message

  with pytest.raises(DelimiterError) as exc:
    check_delimiters(tokenize("x}"))
  assert exc.value.message == "Unmatched closing brace '}'"


def test_parentheses_reported_before_braces() -> None:
  with pytest.raises(DelimiterError) as exc:
    check_delimiters(tokenize("{ ("))
  assert "parenthesis" in exc.value.message
  assert exc.value.column == 3


def test_pairs_are_counted_independently() -> None:
  # Interleaving is not a balance error.
  check_delimiters(tokenize("( [ ) ]"))


def test_unmatched_closer_on_later_line() -> None:
  with pytest.raises(DelimiterError) as exc:
    check_delimiters(tokenize("x\n  ]"))
  assert (exc.value.line, exc.value.column) == (2, 3)


def _token(kind: TokenKind, text: str) -> Token:
  return Token(kind, text, 3, 5)


@pytest.mark.parametrize(
  "kind, text, count",
  [
    (TokenKind.SIN, "sin", 1),
    (TokenKind.LOG, "log", 1),
    (TokenKind.LOG, "log", 2),
    (TokenKind.INTEGRAL, "integral", 4),
    (TokenKind.SUM, "sum", 1),
    (TokenKind.VECTOR, "vector", 7),
  ],
)
def test_accepted_arities(kind, text, count) -> None:
  check_arity(_token(kind, text), count)


def test_arity_error_lists_all_accepted_counts() -> None:
  with pytest.raises(ArityError) as exc:
    check_arity(_token(TokenKind.INTEGRAL, "integral"), 3)
  err = exc.value
  assert err.message == "Function 'integral' expects 2 or 4 arguments, but got 3"
  assert err.expected == "2 or 4"
  assert (err.line, err.column) == (3, 5)


def test_arity_ignores_non_functions() -> None:
  check_arity(_token(TokenKind.IDENTIFIER, "f"), 9)


def test_suggestions() -> None:
  assert suggest_similar("sine")[0] == "sin"
  assert "sqrt" in suggest_similar("sqr")
  assert suggest_similar("zzzzzzzz") == []
  assert suggestion_for("cosine") is not None
  assert suggestion_for("cosine").startswith("Did you mean 'cos'")
  assert suggestion_for("zzzzzzzz") is None


@pytest.mark.parametrize("name", ["f", "g", "h2", "fog", "area"])
def test_ordinary_call_names_get_no_misspelling_hint(name) -> None:
  assert misspelling_hint(name) is None


def test_misspelling_hint_for_typos() -> None:
  assert misspelling_hint("sine") == "Did you mean 'sin'?"
  assert misspelling_hint("sqr") == "Did you mean 'sqrt'?"
  assert misspelling_hint("sin") is None
