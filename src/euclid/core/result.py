"""
Data structures representing the output of the translation pipeline.

This module defines the `TranslationResult` Pydantic model, which encapsulates the
generated LaTeX or the structured error that aborted the translation.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorInfo(BaseModel):
  """
  Structured description of a failed translation.
  """

  kind: str = Field(description="Error class name, e.g. 'ArityError'.")
  message: str = Field(description="Human readable description without position.")
  line: int = Field(ge=1, description="1-based line of the offending token.")
  column: int = Field(ge=1, description="1-based column of the offending token.")
  source_line: Optional[str] = Field(default=None, description="The offending source line.")
  suggestion: Optional[str] = Field(default=None, description="Hint for fixing the input.")

  def __str__(self) -> str:
    return f"{self.kind} at line {self.line}, column {self.column}: {self.message}"


class TranslationResult(BaseModel):
  """
  Container for the result of a single `translate` call.

  Exactly one of `latex` (on success) or `error` (on failure) is meaningful.
  """

  latex: str = Field(default="", description="The generated LaTeX text.")
  error: Optional[ErrorInfo] = Field(default=None, description="The error that aborted translation.")
  tokens: List[str] = Field(default_factory=list, description="Token dump (verbose mode only).")
  ast: List[str] = Field(default_factory=list, description="AST dump lines (verbose mode only).")

  @property
  def success(self) -> bool:
    """
    True if the pipeline produced output.

    Returns:
        bool: True when no error was recorded.
    """
    return self.error is None

  def unwrap(self) -> str:
    """
    Returns the LaTeX text or raises the recorded error.

    Returns:
        str: The generated LaTeX.

    Raises:
        ValueError: If the translation failed.
    """
    if self.error is not None:
      raise ValueError(f"Translation failed: {self.error}")
    return self.latex
