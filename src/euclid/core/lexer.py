"""
Euclid Tokenizer.

Provides a Regex-based Lexer (`Tokenizer`) that decomposes raw Euclid source into a
list of typed `Token` objects terminated by an ``EOF`` token.

The tokenizer is permissive: any character without a rule becomes a ``TEXT`` token
so that expressions can be embedded in prose and markdown. It never raises.
"""

import re
from typing import Dict, Iterator, List

from euclid.core.tokens import Token, TokenKind, lookup_keyword

_SYMBOLS: Dict[str, TokenKind] = {
  "(": TokenKind.LPAREN,
  ")": TokenKind.RPAREN,
  "[": TokenKind.LBRACKET,
  "]": TokenKind.RBRACKET,
  "{": TokenKind.LBRACE,
  "}": TokenKind.RBRACE,
  ",": TokenKind.COMMA,
  "+": TokenKind.PLUS,
  "-": TokenKind.MINUS,
  "*": TokenKind.MULTIPLY,
  "/": TokenKind.DIVIDE,
  "%": TokenKind.MODULO,
  "^": TokenKind.POWER,
  "=": TokenKind.EQUALS,
}


class Tokenizer:
  """
  Regex-based Lexer for Euclid source.
  """

  # Order determines priority
  PATTERN_DEFS = [
    ("COMMENT", r"//[^\n]*|#[^\n]*"),
    ("NEWLINE", r"\n"),
    ("WHITESPACE", r"[ \t\r]+"),
    ("FRACTION", r"\\\\"),
    ("DOUBLE_DOLLAR", r"\$\$"),
    ("DOLLAR", r"\$"),
    ("NUMBER", r"[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"),
    ("WORD", r"[A-Za-z_][A-Za-z0-9_]*"),
    ("SYMBOL", r"[()\[\]{},+\-*/%^=]"),
    ("MISMATCH", r"."),
  ]

  _REGEX = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in PATTERN_DEFS), re.DOTALL)

  def __init__(self, text: str) -> None:
    """
    Initializes the tokenizer.

    Args:
        text (str): Raw Euclid source.
    """
    self.text = text

  def tokenize(self) -> List[Token]:
    """
    Scans the whole source.

    Returns:
        List[Token]: The token stream, always ending with ``EOF``.
    """
    return list(self._scan())

  def _scan(self) -> Iterator[Token]:
    line_num = 1
    line_start = 0

    for mo in self._REGEX.finditer(self.text):
      group = mo.lastgroup
      value = mo.group()
      column = mo.start() - line_start + 1

      if group in ("COMMENT", "WHITESPACE"):
        continue

      if group == "NEWLINE":
        yield Token(TokenKind.NEWLINE, value, line_num, column)
        line_num += 1
        line_start = mo.end()
      elif group == "FRACTION":
        yield Token(TokenKind.FRACTION, value, line_num, column)
      elif group == "DOUBLE_DOLLAR":
        yield Token(TokenKind.DOUBLE_DOLLAR, value, line_num, column)
      elif group == "DOLLAR":
        yield Token(TokenKind.DOLLAR, value, line_num, column)
      elif group == "NUMBER":
        yield Token(TokenKind.NUMBER, value, line_num, column, literal=float(value))
      elif group == "WORD":
        yield Token(lookup_keyword(value), value, line_num, column)
      elif group == "SYMBOL":
        yield Token(_SYMBOLS[value], value, line_num, column)
      else:
        yield Token(TokenKind.TEXT, value, line_num, column)

    yield Token(TokenKind.EOF, "", line_num, len(self.text) - line_start + 1)


def tokenize(source: str) -> List[Token]:
  """
  Convenience wrapper around `Tokenizer`.

  Args:
      source (str): Raw Euclid source.

  Returns:
      List[Token]: The token stream.
  """
  return Tokenizer(source).tokenize()
