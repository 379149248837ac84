"""
Tests for the Translation Engine boundary (`translate` / `transpile`).
"""

import logging

import pytest

from euclid import MathMode, translate, transpile
from euclid.core.engine import TranslationEngine, dump_tree, source_line
from euclid.core.errors import ArityError, DelimiterError
from euclid.core.lexer import tokenize
from euclid.core.parser import Parser


def test_successful_translation() -> None:
  res = translate("sqrt(x) + PI")
  assert res.success
  assert res.latex == "\\sqrt{x} + \\pi"
  assert res.error is None
  assert res.unwrap() == res.latex


def test_math_mode_is_forwarded() -> None:
  assert translate("x", math_mode=MathMode.INLINE).latex == "$x$"
  assert translate("x", math_mode="display").latex == "$$x$$"


def test_empty_input() -> None:
  res = translate("")
  assert res.success
  assert res.latex == ""


def test_error_carries_position_and_source_line() -> None:
  res = translate("y\nsin(x + y")
  assert not res.success
  err = res.error
  assert err.kind == "DelimiterError"
  assert (err.line, err.column) == (2, 4)
  assert err.source_line == "sin(x + y"
  assert err.suggestion == "Add a closing ')'"
  assert res.latex == ""
  with pytest.raises(ValueError):
    res.unwrap()


def test_arity_error_info() -> None:
  err = translate("sin()").error
  assert err.kind == "ArityError"
  assert "sin" in err.message
  assert "1 argument" in err.message
  assert str(err) == "ArityError at line 1, column 1: Function 'sin' expects 1 argument, but got 0"


def test_translation_is_idempotent() -> None:
  source = "integral(f, x, 0, 1) + limit(g, x, INFINITY)"
  assert translate(source) == translate(source)


def test_verbose_mode_fills_dumps() -> None:
  res = translate("x + 1", verbose=True)
  assert res.tokens[0] == "IDENTIFIER 'x' at 1:1"
  assert res.tokens[-1].startswith("EOF")
  assert res.ast == ["Document", "  Binary(PLUS)", "    Identifier(x)", "    Literal(1.0)"]


def test_verbose_dumps_tokens_even_on_failure() -> None:
  res = translate("(", verbose=True)
  assert not res.success
  assert len(res.tokens) == 2
  assert res.ast == []


def test_quiet_mode_has_no_dumps() -> None:
  res = translate("x + 1")
  assert res.tokens == []
  assert res.ast == []


def test_unknown_function_like_identifier_warns(caplog) -> None:
  with caplog.at_level(logging.WARNING, logger="euclid.core.engine"):
    res = TranslationEngine().run("sine(x)")
  assert res.success
  assert res.latex == "sine(x)"
  assert "Did you mean 'sin'" in caplog.text


def test_single_letter_user_functions_do_not_warn(caplog) -> None:
  with caplog.at_level(logging.WARNING, logger="euclid.core.engine"):
    res = translate("f(x) + g(t)")
  assert res.success
  assert res.latex == "f(x) + g(t)"
  assert not caplog.records


def test_transpile_raises_typed_errors() -> None:
  assert transpile("a \\\\ b") == "\\frac{a}{b}"
  with pytest.raises(ArityError):
    transpile("sin(x, y)")
  with pytest.raises(DelimiterError) as exc:
    transpile("x + y)")
  assert exc.value.source_line == "x + y)"


def test_source_line_helper() -> None:
  assert source_line("a\r\nb", 1) == "a"
  assert source_line("a\nb", 2) == "b"
  assert source_line("a", 5) is None


def test_dump_tree_indents_children() -> None:
  doc = Parser(tokenize("sin(x)")).parse()
  assert dump_tree(doc) == ["Document", "  Call(sin, 1 args)", "    Identifier(x)"]
