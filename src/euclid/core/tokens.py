"""
Euclid Token Definitions.

Defines the closed set of token kinds produced by the `Tokenizer`, the immutable
`Token` record, and the read-only keyword table used to resolve identifier-shaped
lexemes (``sin``, ``PI``, ``ALPHA``...) to their specific kind.
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional


class TokenKind(Enum):
  """Enumeration of Euclid token kinds."""

  # Special
  TEXT = auto()  # passthrough character (markdown, unknown symbols)
  NEWLINE = auto()
  EOF = auto()

  # Delimiters
  LPAREN = auto()  # (
  RPAREN = auto()  # )
  LBRACKET = auto()  # [
  RBRACKET = auto()  # ]
  LBRACE = auto()  # {
  RBRACE = auto()  # }
  COMMA = auto()  # ,

  # Literals
  NUMBER = auto()  # 42, 3.14, 1.5e10
  IDENTIFIER = auto()  # x, my_var

  # Arithmetic operators
  PLUS = auto()  # +
  MINUS = auto()  # -
  MULTIPLY = auto()  # *
  DIVIDE = auto()  # /
  MODULO = auto()  # %
  POWER = auto()  # ^
  FRACTION = auto()  # \\
  EQUALS = auto()  # =

  # Constants
  PI = auto()
  E = auto()
  I = auto()  # noqa: E741
  GAMMA = auto()
  PHI = auto()
  INFINITY = auto()
  EMPTYSET = auto()

  # Greek letters
  ALPHA = auto()
  BETA = auto()
  DELTA = auto()
  EPSILON = auto()
  ZETA = auto()
  ETA = auto()
  THETA = auto()
  KAPPA = auto()
  LAMBDA = auto()
  MU = auto()
  NU = auto()
  XI = auto()
  OMICRON = auto()
  RHO = auto()
  SIGMA = auto()
  TAU = auto()
  UPSILON = auto()
  CHI = auto()
  PSI = auto()
  OMEGA = auto()

  # Basic operations
  POW = auto()
  ABS = auto()
  CEIL = auto()
  FLOOR = auto()
  MOD = auto()
  GCD = auto()
  LCM = auto()

  # Comparisons
  LT = auto()
  GT = auto()
  LEQ = auto()
  GEQ = auto()
  APPROX = auto()
  NEQ = auto()
  EQUIV = auto()

  # Binary operation symbols
  PM = auto()
  TIMES = auto()
  DIV = auto()
  CDOT = auto()
  AST = auto()
  STAR = auto()
  CIRC = auto()
  BULLET = auto()
  CAP = auto()
  CUP = auto()

  # Trigonometric / hyperbolic
  SIN = auto()
  COS = auto()
  TAN = auto()
  CSC = auto()
  SEC = auto()
  COT = auto()
  SINH = auto()
  COSH = auto()
  TANH = auto()

  # Logarithms / exponential / roots
  LOG = auto()
  LN = auto()
  EXP = auto()
  SQRT = auto()

  # Calculus
  PARTIAL = auto()
  LIMIT = auto()
  DIFF = auto()
  INTEGRAL = auto()
  SUM = auto()
  PROD = auto()

  # Linear algebra
  VECTOR = auto()
  MATRIX = auto()

  # Sets
  SUBSET = auto()
  SUPSET = auto()
  SUBSETEQ = auto()
  SUPSETEQ = auto()
  UNION = auto()
  INTERSECTION = auto()
  SET_DIFF = auto()
  ELEMENT_OF = auto()
  NOT_ELEMENT_OF = auto()

  # Logic
  AND = auto()
  OR = auto()
  NOT = auto()
  IMPLIES = auto()
  IFF = auto()
  FORALL = auto()
  EXISTS = auto()

  # Accents and decorations
  HAT = auto()
  TILDE = auto()
  BAR = auto()
  VEC = auto()
  DOT = auto()
  DDOT = auto()
  OVERLINE = auto()
  UNDERLINE = auto()
  MATHTEXT = auto()

  # Structural keywords (reserved for bounded sums)
  FROM = auto()
  TO = auto()

  # Math mode delimiters
  DOLLAR = auto()  # $
  DOUBLE_DOLLAR = auto()  # $$


@dataclass(frozen=True)
class Token:
  """
  Represents a lexical unit.

  Attributes:
      kind (TokenKind): The type of token.
      text (str): The raw lexeme.
      line (int): Line number in source (1-based).
      column (int): Column number in source (1-based).
      literal (Optional[float]): Parsed value for NUMBER tokens.
  """

  kind: TokenKind
  text: str
  line: int
  column: int
  literal: Optional[float] = None

  def is_kind(self, *kinds: TokenKind) -> bool:
    """Checks if the token is any of the given kinds."""
    return self.kind in kinds

  def describe(self) -> str:
    """Human readable form used in error messages."""
    if self.kind == TokenKind.EOF:
      return "end of input"
    if self.kind == TokenKind.NEWLINE:
      return "end of line"
    return f"'{self.text}'"

  def debug_string(self) -> str:
    """One-line dump used by verbose mode."""
    if self.literal is not None:
      return f"{self.kind.name} '{self.text}' ({self.literal}) at {self.line}:{self.column}"
    return f"{self.kind.name} '{self.text}' at {self.line}:{self.column}"


# Built once at import, never written afterwards.
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType(
  {
    # Constants
    "PI": TokenKind.PI,
    "E": TokenKind.E,
    "I": TokenKind.I,
    "GAMMA": TokenKind.GAMMA,
    "PHI": TokenKind.PHI,
    "INFINITY": TokenKind.INFINITY,
    "emptyset": TokenKind.EMPTYSET,
    # Greek letters
    "ALPHA": TokenKind.ALPHA,
    "BETA": TokenKind.BETA,
    "DELTA": TokenKind.DELTA,
    "EPSILON": TokenKind.EPSILON,
    "ZETA": TokenKind.ZETA,
    "ETA": TokenKind.ETA,
    "THETA": TokenKind.THETA,
    "KAPPA": TokenKind.KAPPA,
    "LAMBDA": TokenKind.LAMBDA,
    "MU": TokenKind.MU,
    "NU": TokenKind.NU,
    "XI": TokenKind.XI,
    "OMICRON": TokenKind.OMICRON,
    "RHO": TokenKind.RHO,
    "SIGMA": TokenKind.SIGMA,
    "TAU": TokenKind.TAU,
    "UPSILON": TokenKind.UPSILON,
    "CHI": TokenKind.CHI,
    "PSI": TokenKind.PSI,
    "OMEGA": TokenKind.OMEGA,
    # Basic operations
    "pow": TokenKind.POW,
    "abs": TokenKind.ABS,
    "ceil": TokenKind.CEIL,
    "floor": TokenKind.FLOOR,
    "mod": TokenKind.MOD,
    "gcd": TokenKind.GCD,
    "lcm": TokenKind.LCM,
    # Comparisons
    "lt": TokenKind.LT,
    "gt": TokenKind.GT,
    "leq": TokenKind.LEQ,
    "geq": TokenKind.GEQ,
    "approx": TokenKind.APPROX,
    "neq": TokenKind.NEQ,
    "equiv": TokenKind.EQUIV,
    # Binary operation symbols
    "pm": TokenKind.PM,
    "times": TokenKind.TIMES,
    "div": TokenKind.DIV,
    "cdot": TokenKind.CDOT,
    "ast": TokenKind.AST,
    "star": TokenKind.STAR,
    "circ": TokenKind.CIRC,
    "bullet": TokenKind.BULLET,
    "cap": TokenKind.CAP,
    "cup": TokenKind.CUP,
    # Trigonometric / hyperbolic
    "sin": TokenKind.SIN,
    "cos": TokenKind.COS,
    "tan": TokenKind.TAN,
    "csc": TokenKind.CSC,
    "sec": TokenKind.SEC,
    "cot": TokenKind.COT,
    "sinh": TokenKind.SINH,
    "cosh": TokenKind.COSH,
    "tanh": TokenKind.TANH,
    # Logarithms / exponential / roots
    "log": TokenKind.LOG,
    "ln": TokenKind.LN,
    "exp": TokenKind.EXP,
    "sqrt": TokenKind.SQRT,
    # Calculus
    "partial": TokenKind.PARTIAL,
    "limit": TokenKind.LIMIT,
    "diff": TokenKind.DIFF,
    "integral": TokenKind.INTEGRAL,
    "sum": TokenKind.SUM,
    "prod": TokenKind.PROD,
    # Linear algebra
    "vector": TokenKind.VECTOR,
    "matrix": TokenKind.MATRIX,
    # Sets
    "subset": TokenKind.SUBSET,
    "supset": TokenKind.SUPSET,
    "subseteq": TokenKind.SUBSETEQ,
    "supseteq": TokenKind.SUPSETEQ,
    "union": TokenKind.UNION,
    "intersection": TokenKind.INTERSECTION,
    "set_diff": TokenKind.SET_DIFF,
    "element_of": TokenKind.ELEMENT_OF,
    "not_element_of": TokenKind.NOT_ELEMENT_OF,
    # Logic
    "AND": TokenKind.AND,
    "OR": TokenKind.OR,
    "NOT": TokenKind.NOT,
    "implies": TokenKind.IMPLIES,
    "iff": TokenKind.IFF,
    "forall": TokenKind.FORALL,
    "exists": TokenKind.EXISTS,
    # Accents
    "hat": TokenKind.HAT,
    "tilde": TokenKind.TILDE,
    "bar": TokenKind.BAR,
    "vec": TokenKind.VEC,
    "dot": TokenKind.DOT,
    "ddot": TokenKind.DDOT,
    "overline": TokenKind.OVERLINE,
    "underline": TokenKind.UNDERLINE,
    "mathtext": TokenKind.MATHTEXT,
    # Structural keywords
    "from": TokenKind.FROM,
    "to": TokenKind.TO,
  }
)

# Zero-argument keywords: parsed as literals, never followed by '('.
CONSTANTS: Mapping[TokenKind, str] = MappingProxyType(
  {
    TokenKind.PI: r"\pi",
    TokenKind.E: "e",
    TokenKind.I: "i",
    TokenKind.GAMMA: r"\gamma",
    TokenKind.PHI: r"\phi",
    TokenKind.INFINITY: r"\infty",
    TokenKind.EMPTYSET: r"\emptyset",
    TokenKind.AND: r"\land",
    TokenKind.OR: r"\lor",
    TokenKind.NOT: r"\neg",
  }
)

GREEK_LETTERS: Mapping[TokenKind, str] = MappingProxyType(
  {
    TokenKind.ALPHA: r"\alpha",
    TokenKind.BETA: r"\beta",
    TokenKind.DELTA: r"\delta",
    TokenKind.EPSILON: r"\epsilon",
    TokenKind.ZETA: r"\zeta",
    TokenKind.ETA: r"\eta",
    TokenKind.THETA: r"\theta",
    TokenKind.KAPPA: r"\kappa",
    TokenKind.LAMBDA: r"\lambda",
    TokenKind.MU: r"\mu",
    TokenKind.NU: r"\nu",
    TokenKind.XI: r"\xi",
    TokenKind.OMICRON: "o",
    TokenKind.RHO: r"\rho",
    TokenKind.SIGMA: r"\sigma",
    TokenKind.TAU: r"\tau",
    TokenKind.UPSILON: r"\upsilon",
    TokenKind.CHI: r"\chi",
    TokenKind.PSI: r"\psi",
    TokenKind.OMEGA: r"\omega",
  }
)


def lookup_keyword(text: str) -> TokenKind:
  """
  Resolves an identifier-shaped lexeme to its token kind.

  Args:
      text (str): The scanned identifier.

  Returns:
      TokenKind: The keyword kind, or ``IDENTIFIER`` when the lexeme is not reserved.
  """
  return KEYWORDS.get(text, TokenKind.IDENTIFIER)
