"""
Tests for error presentation helpers.
"""

import io

from rich.console import Console

from euclid import translate
from euclid.core.result import ErrorInfo
from euclid.utils.diagnostics import caret_line, format_error, render_error


def test_caret_line():
  assert caret_line(1) == "^"
  assert caret_line(4) == "   ^"


def test_format_error_with_snippet():
  err = translate("sin(x + y").error
  text = format_error(err)
  assert text.splitlines() == [
    "DelimiterError at line 1, column 4: Unclosed parenthesis '(' - missing closing ')'",
    "  sin(x + y",
    "     ^",
    "Suggestion: Add a closing ')'",
  ]


def test_format_error_without_source_line():
  err = ErrorInfo(kind="UnexpectedTokenError", message="Unexpected token '*'", line=2, column=3)
  assert format_error(err) == "UnexpectedTokenError at line 2, column 3: Unexpected token '*'"


def test_render_error_panel():
  console = Console(file=io.StringIO(), record=True, width=100)
  console.print(render_error(translate("[x").error))
  out = console.export_text()
  assert "DelimiterError" in out
  assert "line 1, column 1" in out
  assert "[x" in out
  assert "Suggestion" in out
