"""
Translation Engine.

This module provides the `TranslationEngine`, the driver that runs the pipeline
for one source string:

1.  **Tokenizing**: `Tokenizer` turns the text into typed tokens (never fails).
2.  **Parsing**: `Parser` validates delimiters, builds the AST and checks arity.
3.  **Emission**: `LatexEmitter` renders the AST according to the math mode.

Errors raised by any stage are `TranslationError` subclasses. The engine catches
them at this boundary, attaches the offending source line, and returns them as
structured `ErrorInfo` inside a `TranslationResult`. Nothing is printed here.
"""

import logging
from typing import List, Optional, Sequence

from euclid.core.emitter import LatexEmitter
from euclid.core.errors import TranslationError
from euclid.core.lexer import Tokenizer
from euclid.core.nodes import Node, describe
from euclid.core.parser import Parser
from euclid.core.result import TranslationResult
from euclid.core.tokens import Token, TokenKind
from euclid.core.validator import misspelling_hint
from euclid.enums import MathMode

logger = logging.getLogger(__name__)


class TranslationEngine:
  """
  Runs the tokenize, parse and emit stages over a single source string.

  The engine holds only its settings, so one instance may be reused for any
  number of `run` calls.
  """

  def __init__(self, math_mode: MathMode = MathMode.NONE, verbose: bool = False) -> None:
    """
    Initializes the Engine.

    Args:
        math_mode (MathMode): Wrapping applied to top-level expressions.
        verbose (bool): If True, token and AST dumps are included in results.
    """
    self.math_mode = MathMode(math_mode)
    self.verbose = verbose
    self.emitter = LatexEmitter(self.math_mode)

  def run(self, source: str) -> TranslationResult:
    """
    Translates Euclid source into LaTeX.

    Args:
        source (str): The Euclid text.

    Returns:
        TranslationResult: The LaTeX text, or the first error encountered.
    """
    tokens = Tokenizer(source).tokenize()
    token_dump = [t.debug_string() for t in tokens] if self.verbose else []
    self._warn_unknown_calls(tokens)

    try:
      document = Parser(tokens).parse()
    except TranslationError as e:
      return self._failure(e, source, token_dump)

    ast_dump = dump_tree(document) if self.verbose else []
    latex = self.emitter.emit(document)
    return TranslationResult(latex=latex, tokens=token_dump, ast=ast_dump)

  def _failure(self, error: TranslationError, source: str, tokens: List[str]) -> TranslationResult:
    error.source_line = source_line(source, error.line)
    logger.debug("Translation failed: %s", error)
    return TranslationResult(error=error.to_info(), tokens=tokens)

  def _warn_unknown_calls(self, tokens: Sequence[Token]) -> None:
    # `sine(x)` parses as an identifier followed by a grouping; flag it.
    for current, following in zip(tokens, tokens[1:]):
      if current.kind != TokenKind.IDENTIFIER or following.kind != TokenKind.LPAREN:
        continue
      hint = misspelling_hint(current.text)
      if hint:
        logger.warning(
          "'%s' at line %d, column %d is not a known function. %s",
          current.text,
          current.line,
          current.column,
          hint,
        )


def source_line(source: str, line: int) -> Optional[str]:
  """
  Extracts a 1-based line from the source.

  Args:
      source (str): Full source text.
      line (int): 1-based line number.

  Returns:
      Optional[str]: The line without its terminator, or None if out of range.
  """
  lines = source.split("\n")
  if 1 <= line <= len(lines):
    return lines[line - 1].rstrip("\r")
  return None


def dump_tree(node: Node, depth: int = 0) -> List[str]:
  """
  Renders an AST as indented label lines for verbose output.

  Args:
      node (Node): Root of the subtree.
      depth (int): Current indentation level.

  Returns:
      List[str]: One line per node, in pre-order.
  """
  lines = ["  " * depth + describe(node)]
  for child in node.children():
    lines.extend(dump_tree(child, depth + 1))
  return lines


def translate(source: str, math_mode: MathMode = MathMode.NONE, verbose: bool = False) -> TranslationResult:
  """
  Translates Euclid source into LaTeX.

  Args:
      source (str): The Euclid text.
      math_mode (MathMode): Wrapping applied to each top-level expression.
      verbose (bool): Include token and AST dumps in the result.

  Returns:
      TranslationResult: Result value holding either `latex` or `error`.
  """
  return TranslationEngine(math_mode=math_mode, verbose=verbose).run(source)


def transpile(source: str, math_mode: MathMode = MathMode.NONE) -> str:
  """
  Translates Euclid source and returns the LaTeX text directly.

  Args:
      source (str): The Euclid text.
      math_mode (MathMode): Wrapping applied to each top-level expression.

  Returns:
      str: The generated LaTeX.

  Raises:
      TranslationError: The first error raised by the pipeline.
  """
  emitter = LatexEmitter(MathMode(math_mode))
  try:
    document = Parser(Tokenizer(source).tokenize()).parse()
  except TranslationError as e:
    e.source_line = source_line(source, e.line)
    raise
  return emitter.emit(document)
