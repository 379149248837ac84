"""
Grammar Validator.

Two independent checks used by the `Parser`:

1.  **Delimiter balance**: a whole-document scan over the token list, run once
    before any AST is built.
2.  **Arity**: run per call site after the argument list is assembled, against
    the function table.

Also provides `suggest_similar` and `misspelling_hint` for "did you mean" hints.
"""

import difflib
from typing import Dict, List, Optional, Sequence, Tuple

from euclid.core.errors import ArityError, DelimiterError
from euclid.core.functions import FUNCTIONS
from euclid.core.tokens import KEYWORDS, Token, TokenKind

# (open, close, noun, open char, close char)
_PAIRS: Tuple[Tuple[TokenKind, TokenKind, str, str, str], ...] = (
  (TokenKind.LPAREN, TokenKind.RPAREN, "parenthesis", "(", ")"),
  (TokenKind.LBRACKET, TokenKind.RBRACKET, "bracket", "[", "]"),
  (TokenKind.LBRACE, TokenKind.RBRACE, "brace", "{", "}"),
)

_COMMON_MISTAKES = {
  "sine": "sin",
  "cosine": "cos",
  "tangent": "tan",
  "logarithm": "log",
  "square": "sqrt",
  "squareroot": "sqrt",
  "root": "sqrt",
  "absolute": "abs",
  "power": "pow",
  "exponential": "exp",
  "pi": "PI",
  "euler": "E",
  "infinity": "INFINITY",
  "inf": "INFINITY",
  "integrate": "integral",
  "derivative": "diff",
  "lim": "limit",
}

# Call-like identifiers shorter than this are treated as user functions.
_MIN_TYPO_LENGTH = 3
_TYPO_CUTOFF = 0.8


def check_delimiters(tokens: Sequence[Token]) -> None:
  """
  Verifies that ``()``, ``[]`` and ``{}`` are balanced across the whole token list.

  Each pair has its own counter; pairs are not required to nest with each other.

  Args:
      tokens (Sequence[Token]): Full token stream.

  Raises:
      DelimiterError: On the first closing delimiter without an opener, or, after
          the scan, at the earliest opener that was never closed.
  """
  open_stacks: List[List[Token]] = [[] for _ in _PAIRS]

  for token in tokens:
    for idx, (open_kind, close_kind, noun, _, close_char) in enumerate(_PAIRS):
      if token.kind == open_kind:
        open_stacks[idx].append(token)
      elif token.kind == close_kind:
        if not open_stacks[idx]:
          raise DelimiterError.at(token, f"Unmatched closing {noun} '{close_char}'")
        open_stacks[idx].pop()

  for stack, (_, _, noun, open_char, close_char) in zip(open_stacks, _PAIRS):
    if stack:
      raise DelimiterError.at(
        stack[0],
        f"Unclosed {noun} '{open_char}' - missing closing '{close_char}'",
        suggestion=f"Add a closing '{close_char}'",
      )


def check_arity(function: Token, count: int) -> None:
  """
  Validates the argument count of a call.

  Args:
      function (Token): The function keyword token.
      count (int): Number of parsed arguments.

  Raises:
      ArityError: If the function table does not accept `count` arguments.
  """
  entry = FUNCTIONS.get(function.kind)
  if entry is None:
    return

  arity = entry.arity
  if arity.accepts(count):
    return

  raise ArityError(
    f"Function '{function.text}' expects {arity.describe()}, but got {count}",
    function.line,
    function.column,
    function=function.text,
    expected=arity.expected(),
    actual=count,
  )


def _close_keywords(name: str, cutoff: float) -> List[str]:
  by_lower: Dict[str, List[str]] = {}
  for keyword in KEYWORDS:
    by_lower.setdefault(keyword.lower(), []).append(keyword)

  matches = difflib.get_close_matches(name.lower(), list(by_lower), n=5, cutoff=cutoff)
  return [keyword for match in matches for keyword in by_lower[match]]


def suggest_similar(name: str, cutoff: float = 0.6) -> List[str]:
  """
  Proposes keywords close to a mistyped identifier.

  Args:
      name (str): The identifier as written.
      cutoff (float): Minimum `difflib` similarity ratio for a candidate.

  Returns:
      List[str]: Candidate keywords, closest first; empty if none.
  """
  found: List[str] = []

  mapped = _COMMON_MISTAKES.get(name.lower())
  if mapped:
    found.append(mapped)

  if name in KEYWORDS:
    return found

  found.extend(k for k in _close_keywords(name, cutoff) if k not in found)
  return found


def suggestion_for(name: str) -> Optional[str]:
  """Formats `suggest_similar` output as a hint, or None."""
  return _format_hint(suggest_similar(name))


def misspelling_hint(name: str) -> Optional[str]:
  """
  Hint for an identifier used like a call, only when it looks like a typo.

  Short names such as ``f`` or ``g`` are ordinary user functions and never
  produce a hint unless they are a known common mistake.

  Args:
      name (str): The identifier as written.

  Returns:
      Optional[str]: "Did you mean ..." text, or None.
  """
  mapped = _COMMON_MISTAKES.get(name.lower())
  if mapped:
    return _format_hint([mapped])
  if len(name) < _MIN_TYPO_LENGTH or name in KEYWORDS:
    return None
  return _format_hint(_close_keywords(name, _TYPO_CUTOFF))


def _format_hint(candidates: List[str]) -> Optional[str]:
  if not candidates:
    return None
  return "Did you mean " + ", ".join(f"'{c}'" for c in candidates[:3]) + "?"
