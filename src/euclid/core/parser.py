"""
Euclid Recursive Descent Parser.

Parses a token list from the `Tokenizer` into the AST defined in `nodes.py`.

Grammar (lowest to highest precedence)::

    document       := (NEWLINE | expression)* EOF
    expression     := additive
    additive       := multiplicative (('+' | '-') multiplicative)*
    multiplicative := unary (('*' | '/' | '%' | '\\\\') unary)*
    unary          := ('-' | '+') unary | power
    power          := call ('^' unary)?
    call           := CONSTANT | FUNCTION '(' (expression (',' expression)*)? ')' | primary
    primary        := NUMBER | GREEK | IDENTIFIER | '(' expression ')' | TEXT
                    | '$' expression '$' | '$$' expression '$$'

Because the exponent is parsed through `unary`, powers are right-associative
(``a^b^c`` is ``a^(b^c)``) and ``-x^2`` is ``-(x^2)``.

The parser keeps a single cursor, never backtracks, and raises on the first error.
"""

import logging
from typing import List, Sequence

from euclid.core.errors import MissingDelimiterError, UnexpectedTokenError
from euclid.core.functions import is_function
from euclid.core.nodes import (
  Binary,
  Call,
  DisplayMath,
  Document,
  Grouping,
  Identifier,
  InlineMath,
  Literal,
  Node,
  Text,
  Unary,
)
from euclid.core.tokens import CONSTANTS, GREEK_LETTERS, Token, TokenKind
from euclid.core.validator import check_arity, check_delimiters

logger = logging.getLogger(__name__)

_ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
_MULTIPLICATIVE = (TokenKind.MULTIPLY, TokenKind.DIVIDE, TokenKind.MODULO, TokenKind.FRACTION)


class Parser:
  """
  Recursive descent parser for Euclid expressions.
  """

  def __init__(self, tokens: Sequence[Token]) -> None:
    """
    Initialize the parser.

    Args:
        tokens (Sequence[Token]): Output of the tokenizer, terminated by EOF.
    """
    if not tokens or tokens[-1].kind != TokenKind.EOF:
      raise ValueError("Token stream must end with an EOF token")
    self.tokens = tokens
    self.pos = 0

  def parse(self) -> Document:
    """
    Parses the entire document.

    Returns:
        Document: Root node holding the top-level expressions.

    Raises:
        TranslationError: On the first delimiter, syntax or arity error.
    """
    check_delimiters(self.tokens)

    nodes: List[Node] = []
    while not self._is_eof():
      if self._match(TokenKind.NEWLINE):
        continue
      nodes.append(self._expression())

    logger.debug("Parsed %d top-level expressions", len(nodes))
    return Document(nodes=tuple(nodes))

  # --- Cursor helpers ---

  def _peek(self) -> Token:
    return self.tokens[self.pos]

  def _previous(self) -> Token:
    return self.tokens[self.pos - 1]

  def _is_eof(self) -> bool:
    return self._peek().kind == TokenKind.EOF

  def _check(self, kind: TokenKind) -> bool:
    return self._peek().kind == kind

  def _advance(self) -> Token:
    token = self._peek()
    if not self._is_eof():
      self.pos += 1
    return token

  def _match(self, *kinds: TokenKind) -> bool:
    if self._peek().kind in kinds:
      self._advance()
      return True
    return False

  def _expect(self, kind: TokenKind, message: str) -> Token:
    if self._check(kind):
      return self._advance()
    raise MissingDelimiterError.at(self._peek(), f"{message}, found {self._peek().describe()}")

  # --- Productions ---

  def _expression(self) -> Node:
    return self._additive()

  def _additive(self) -> Node:
    expr = self._multiplicative()
    while self._match(*_ADDITIVE):
      op = self._previous().kind
      expr = Binary(op, expr, self._multiplicative())
    return expr

  def _multiplicative(self) -> Node:
    expr = self._unary()
    while self._match(*_MULTIPLICATIVE):
      op = self._previous().kind
      expr = Binary(op, expr, self._unary())
    return expr

  def _unary(self) -> Node:
    if self._match(TokenKind.MINUS, TokenKind.PLUS):
      op = self._previous().kind
      return Unary(op, self._unary())
    return self._power()

  def _power(self) -> Node:
    base = self._call()
    if self._match(TokenKind.POWER):
      return Binary(TokenKind.POWER, base, self._unary())
    return base

  def _call(self) -> Node:
    token = self._peek()

    if token.kind in CONSTANTS:
      self._advance()
      return Literal(token.kind)

    if not is_function(token.kind):
      return self._primary()

    self._advance()
    if not self._check(TokenKind.LPAREN):
      raise MissingDelimiterError.at(
        token,
        f"Expected '(' after function name '{token.text}'",
        suggestion=f"Write {token.text}(...)",
      )
    self._advance()

    arguments: List[Node] = []
    if not self._check(TokenKind.RPAREN):
      arguments.append(self._expression())
      while self._match(TokenKind.COMMA):
        arguments.append(self._expression())

    self._expect(TokenKind.RPAREN, f"Expected ')' after arguments of '{token.text}'")
    check_arity(token, len(arguments))
    return Call(token.kind, token.text, tuple(arguments))

  def _primary(self) -> Node:
    token = self._peek()

    if token.kind == TokenKind.NUMBER:
      self._advance()
      return Literal(token.literal)

    if token.kind in GREEK_LETTERS:
      self._advance()
      return Identifier(token.text, token.kind)

    if token.kind == TokenKind.IDENTIFIER:
      self._advance()
      return Identifier(token.text)

    if token.kind == TokenKind.LPAREN:
      self._advance()
      inner = self._expression()
      self._expect(TokenKind.RPAREN, "Expected ')' after expression")
      return Grouping(inner)

    if token.kind == TokenKind.TEXT:
      self._advance()
      return Text(token.text)

    if token.kind == TokenKind.DOLLAR:
      self._advance()
      inner = self._expression()
      self._expect(TokenKind.DOLLAR, "Expected closing '$' for inline math")
      return InlineMath(inner)

    if token.kind == TokenKind.DOUBLE_DOLLAR:
      self._advance()
      inner = self._expression()
      self._expect(TokenKind.DOUBLE_DOLLAR, "Expected closing '$$' for display math")
      return DisplayMath(inner)

    raise self._unexpected(token)

  def _unexpected(self, token: Token) -> UnexpectedTokenError:
    if token.kind in (TokenKind.EOF, TokenKind.NEWLINE):
      return UnexpectedTokenError.at(
        token,
        f"Unexpected {token.describe()}, expected an expression",
        suggestion="Complete the expression after the last operator",
      )
    if token.kind in (TokenKind.FROM, TokenKind.TO):
      return UnexpectedTokenError.at(
        token,
        f"Unexpected token {token.describe()}",
        suggestion="Write bounded sums as sum(i, lower, upper, body)",
      )
    return UnexpectedTokenError.at(token, f"Unexpected token {token.describe()}")
