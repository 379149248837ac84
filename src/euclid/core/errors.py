"""
Translation Error Taxonomy.

Every failure raised by the parsing pipeline derives from `TranslationError` and
carries a message plus the 1-based position of the offending token. Formatting
(snippets, carets, colour) is left to the presentation layer in
`euclid.utils.diagnostics`.
"""

from typing import Optional

from euclid.core.result import ErrorInfo
from euclid.core.tokens import Token


class TranslationError(Exception):
  """
  Base class for pipeline failures.

  Attributes:
      message (str): Description of the failure, without position information.
      line (int): 1-based line of the offending token.
      column (int): 1-based column of the offending token.
      source_line (Optional[str]): The source line, attached by the engine.
      suggestion (Optional[str]): Hint for fixing the input.
  """

  kind = "TranslationError"

  def __init__(
    self,
    message: str,
    line: int,
    column: int,
    source_line: Optional[str] = None,
    suggestion: Optional[str] = None,
  ) -> None:
    super().__init__(f"{message} (line {line}, column {column})")
    self.message = message
    self.line = line
    self.column = column
    self.source_line = source_line
    self.suggestion = suggestion

  @classmethod
  def at(cls, token: Token, message: str, suggestion: Optional[str] = None) -> "TranslationError":
    """Builds the error positioned on `token`."""
    return cls(message, token.line, token.column, suggestion=suggestion)

  def to_info(self) -> ErrorInfo:
    """
    Converts the exception into its serialisable form.

    Returns:
        ErrorInfo: Structured error value.
    """
    return ErrorInfo(
      kind=self.kind,
      message=self.message,
      line=self.line,
      column=self.column,
      source_line=self.source_line,
      suggestion=self.suggestion,
    )


class DelimiterError(TranslationError):
  """Unmatched closing or unclosed opening ``()``, ``[]`` or ``{}``."""

  kind = "DelimiterError"


class UnexpectedTokenError(TranslationError):
  """A token with no valid production at the current position."""

  kind = "UnexpectedTokenError"

  def __init__(self, message: str, line: int, column: int, text: str = "", **kwargs) -> None:
    super().__init__(message, line, column, **kwargs)
    self.text = text

  @classmethod
  def at(cls, token: Token, message: str, suggestion: Optional[str] = None) -> "UnexpectedTokenError":
    return cls(message, token.line, token.column, text=token.text, suggestion=suggestion)


class MissingDelimiterError(TranslationError):
  """An expected ``(`` after a function keyword, or a closing delimiter, is absent."""

  kind = "MissingDelimiterError"


class ArityError(TranslationError):
  """
  A function was called with an unsupported number of arguments.

  Attributes:
      function (str): Function name as written.
      expected (str): Accepted counts, e.g. ``"1"`` or ``"1 or 2"``.
      actual (int): Number of arguments supplied.
  """

  kind = "ArityError"

  def __init__(
    self,
    message: str,
    line: int,
    column: int,
    function: str = "",
    expected: str = "",
    actual: int = 0,
    **kwargs,
  ) -> None:
    super().__init__(message, line, column, **kwargs)
    self.function = function
    self.expected = expected
    self.actual = actual
