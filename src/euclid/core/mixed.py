"""
Mixed Content Processor.

Best-effort translation of Euclid fragments embedded in markdown prose. Each line is
scanned with a heuristic regex for function calls, constants, Greek letters and
simple binary expressions; every match is translated on its own and wrapped in
math delimiters. Matches that fail to translate are left exactly as written.

Headings (lines starting with ``#``) and blank lines pass through untouched.
"""

import logging
import re
from typing import List

from euclid.core.engine import translate
from euclid.core.functions import FUNCTIONS
from euclid.core.tokens import CONSTANTS, GREEK_LETTERS, KEYWORDS, TokenKind
from euclid.enums import MathMode

logger = logging.getLogger(__name__)


def _alternation(words: List[str]) -> str:
  # Longest first so that `sinh` wins over `sin`.
  return "|".join(re.escape(w) for w in sorted(words, key=lambda w: (-len(w), w)))


# Logical connectives read as ordinary words in prose.
_PROSE_WORDS = {TokenKind.AND, TokenKind.OR, TokenKind.NOT}

_FUNCTION_WORDS = [word for word, kind in KEYWORDS.items() if kind in FUNCTIONS]
_CONSTANT_WORDS = [
  word
  for word, kind in KEYWORDS.items()
  if (kind in CONSTANTS or kind in GREEK_LETTERS) and kind not in _PROSE_WORDS
]

MATH_PATTERN = re.compile(
  r"\b(?:" + _alternation(_FUNCTION_WORDS) + r")\s*\([^)]*\)"  # sin(x), pow(2, 3)
  r"|\b(?:" + _alternation(_CONSTANT_WORDS) + r")\b"  # PI, ALPHA
  r"|\d+\s*[+\-*/^]\s*\d+"  # 2 + 3
  r"|\w+\s*\\\\\s*\w+"  # a \\ b
  r"|\w+\s*\^\s*\w+"  # x ^ 2
)


class MixedContentProcessor:
  """
  Translates math fragments found inside prose.

  Attributes:
      math_mode (MathMode): Delimiters placed around each translated fragment.
  """

  def __init__(self, math_mode: MathMode = MathMode.INLINE) -> None:
    self.math_mode = MathMode(math_mode)

  def process_line(self, line: str) -> str:
    """
    Translates every recognised fragment of a single line.

    Args:
        line (str): One line of prose.

    Returns:
        str: The line with translated fragments wrapped in math delimiters.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
      return line

    return MATH_PATTERN.sub(self._replace, line)

  def process_document(self, content: str) -> str:
    """
    Applies `process_line` to each line, keeping line breaks as they were.

    Args:
        content (str): Whole document.

    Returns:
        str: The processed document.
    """
    return "\n".join(self.process_line(line) for line in content.split("\n"))

  def _replace(self, match: "re.Match[str]") -> str:
    fragment = match.group()
    result = translate(fragment)
    if not result.success:
      logger.debug("Keeping %r as text: %s", fragment, result.error)
      return fragment
    return self.math_mode.wrap(result.latex)


def process_document(content: str, math_mode: MathMode = MathMode.INLINE) -> str:
  """Convenience wrapper around `MixedContentProcessor.process_document`."""
  return MixedContentProcessor(math_mode).process_document(content)
