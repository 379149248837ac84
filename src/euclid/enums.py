"""
Enumerations for euclid.

This module defines standard enumerations shared by the core, the configuration
layer and the CLI.
"""

from enum import Enum


class MathMode(str, Enum):
  """
  Output wrapping applied to each top-level expression of a document.
  """

  NONE = "none"  # raw LaTeX
  INLINE = "inline"  # $...$
  DISPLAY = "display"  # $$...$$

  def wrap(self, latex: str) -> str:
    """
    Wraps a fragment in this mode's delimiters.

    Args:
        latex (str): Raw LaTeX fragment.

    Returns:
        str: The wrapped fragment.
    """
    if self is MathMode.INLINE:
      return f"${latex}$"
    if self is MathMode.DISPLAY:
      return f"$${latex}$$"
    return latex
