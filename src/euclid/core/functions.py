"""
Function Table.

Single source of truth for every function keyword: which argument counts it accepts
and how each accepted shape renders to LaTeX. The parser's arity check and the
emitter both read `FUNCTIONS`, so a call that parses always has a template.

Example:
    >>> entry = FUNCTIONS[TokenKind.SQRT]
    >>> entry.arity.describe()
    '1 or 2 arguments'
    >>> entry.render(["n", "x"])
    '\\\\sqrt[n]{x}'
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Mapping, Optional, Sequence

from euclid.core.tokens import TokenKind

Renderer = Callable[[Sequence[str]], str]


@dataclass(frozen=True)
class Arity:
  """
  Accepted argument counts.

  Attributes:
      counts (Optional[FrozenSet[int]]): Allowed counts, or None for variable arity.
  """

  counts: Optional[FrozenSet[int]] = None

  @property
  def is_variable(self) -> bool:
    return self.counts is None

  def accepts(self, count: int) -> bool:
    """Checks whether `count` arguments are allowed."""
    return self.counts is None or count in self.counts

  def expected(self) -> str:
    """Accepted counts joined for messages, e.g. ``'1 or 2'``."""
    if self.counts is None:
      return "any number of"
    return " or ".join(str(c) for c in sorted(self.counts))

  def describe(self) -> str:
    """Full phrase, e.g. ``'1 argument'`` or ``'2 or 4 arguments'``."""
    if self.counts is not None and self.counts == frozenset({1}):
      return "1 argument"
    return f"{self.expected()} arguments"


@dataclass(frozen=True)
class FunctionSpec:
  """
  Arity and LaTeX templates of one function keyword.

  Attributes:
      kind (TokenKind): The function keyword.
      shapes (Mapping[int, Renderer]): Template per accepted argument count.
      variadic (Optional[Renderer]): Template for variable-arity functions.
  """

  kind: TokenKind
  shapes: Mapping[int, Renderer] = field(default_factory=dict)
  variadic: Optional[Renderer] = None

  @property
  def arity(self) -> Arity:
    if self.variadic is not None:
      return Arity()
    return Arity(frozenset(self.shapes))

  def render(self, args: Sequence[str]) -> str:
    """
    Renders already-translated arguments.

    Args:
        args (Sequence[str]): LaTeX for each argument, in call order.

    Returns:
        str: The LaTeX for the call.

    Raises:
        ValueError: If no template exists for the argument count.
    """
    if self.variadic is not None:
      return self.variadic(args)
    renderer = self.shapes.get(len(args))
    if renderer is None:
      raise ValueError(f"No template for {self.kind.name} with {len(args)} arguments")
    return renderer(args)


def _infix(symbol: str) -> Dict[int, Renderer]:
  return {2: lambda a: f"{a[0]} {symbol} {a[1]}"}


def _applied(macro: str) -> Dict[int, Renderer]:
  return {1: lambda a: f"{macro}({a[0]})"}


def _braced(macro: str) -> Dict[int, Renderer]:
  return {1: lambda a: f"{macro}{{{a[0]}}}"}


def _big_operator(macro: str) -> Dict[int, Renderer]:
  # op(f) or op(index, lower, upper, f)
  return {
    1: lambda a: f"{macro} {a[0]}",
    4: lambda a: f"{macro}_{{{a[0]}={a[1]}}}^{{{a[2]}}} {a[3]}",
  }


def _quantifier(macro: str) -> Dict[int, Renderer]:
  return {
    1: lambda a: f"{macro} {a[0]}",
    2: lambda a: f"{macro} {a[0]} \\, {a[1]}",
  }


def _environment(name: str) -> Renderer:
  return lambda a: f"\\begin{{{name}}} " + " \\\\ ".join(a) + f" \\end{{{name}}}"


_TABLE: Dict[TokenKind, FunctionSpec] = {}


def _register(kind: TokenKind, shapes: Optional[Dict[int, Renderer]] = None, variadic: Optional[Renderer] = None):
  _TABLE[kind] = FunctionSpec(kind=kind, shapes=MappingProxyType(shapes or {}), variadic=variadic)


# Basic operations
_register(TokenKind.POW, {2: lambda a: f"{a[0]}^{{{a[1]}}}"})
_register(TokenKind.ABS, {1: lambda a: f"|{a[0]}|"})
_register(TokenKind.CEIL, {1: lambda a: f"\\lceil {a[0]} \\rceil"})
_register(TokenKind.FLOOR, {1: lambda a: f"\\lfloor {a[0]} \\rfloor"})
_register(TokenKind.MOD, _infix("\\mod"))
_register(TokenKind.GCD, {2: lambda a: f"\\gcd({a[0]}, {a[1]})"})
_register(TokenKind.LCM, {2: lambda a: f"\\text{{lcm}}({a[0]}, {a[1]})"})

# Comparisons, binary symbols, sets, logic
for _kind, _symbol in (
  (TokenKind.LT, "<"),
  (TokenKind.GT, ">"),
  (TokenKind.LEQ, "\\leq"),
  (TokenKind.GEQ, "\\geq"),
  (TokenKind.APPROX, "\\approx"),
  (TokenKind.NEQ, "\\neq"),
  (TokenKind.EQUIV, "\\equiv"),
  (TokenKind.PM, "\\pm"),
  (TokenKind.TIMES, "\\times"),
  (TokenKind.DIV, "\\div"),
  (TokenKind.CDOT, "\\cdot"),
  (TokenKind.AST, "\\ast"),
  (TokenKind.STAR, "\\star"),
  (TokenKind.CIRC, "\\circ"),
  (TokenKind.BULLET, "\\bullet"),
  (TokenKind.CAP, "\\cap"),
  (TokenKind.CUP, "\\cup"),
  (TokenKind.SUBSET, "\\subset"),
  (TokenKind.SUPSET, "\\supset"),
  (TokenKind.SUBSETEQ, "\\subseteq"),
  (TokenKind.SUPSETEQ, "\\supseteq"),
  (TokenKind.UNION, "\\cup"),
  (TokenKind.INTERSECTION, "\\cap"),
  (TokenKind.SET_DIFF, "\\setminus"),
  (TokenKind.ELEMENT_OF, "\\in"),
  (TokenKind.NOT_ELEMENT_OF, "\\notin"),
  (TokenKind.IMPLIES, "\\implies"),
  (TokenKind.IFF, "\\iff"),
):
  _register(_kind, _infix(_symbol))

# Trigonometric / hyperbolic
for _kind in (
  TokenKind.SIN,
  TokenKind.COS,
  TokenKind.TAN,
  TokenKind.CSC,
  TokenKind.SEC,
  TokenKind.COT,
  TokenKind.SINH,
  TokenKind.COSH,
  TokenKind.TANH,
):
  _register(_kind, _applied("\\" + _kind.name.lower()))

# Logarithms, exponential, roots
_register(
  TokenKind.LOG,
  {
    1: lambda a: f"\\log({a[0]})",
    2: lambda a: f"\\log_{{{a[1]}}}({a[0]})",
  },
)
_register(TokenKind.LN, _applied("\\ln"))
_register(TokenKind.EXP, {1: lambda a: f"e^{{{a[0]}}}"})
_register(
  TokenKind.SQRT,
  {
    1: lambda a: f"\\sqrt{{{a[0]}}}",
    2: lambda a: f"\\sqrt[{a[0]}]{{{a[1]}}}",
  },
)

# Calculus
_register(TokenKind.PARTIAL, {2: lambda a: f"\\frac{{\\partial}}{{\\partial {a[1]}}} {a[0]}"})
_register(TokenKind.DIFF, {2: lambda a: f"\\frac{{d}}{{d{a[1]}}} {a[0]}"})
_register(TokenKind.LIMIT, {3: lambda a: f"\\lim_{{{a[1]} \\to {a[2]}}} {a[0]}"})
_register(
  TokenKind.INTEGRAL,
  {
    2: lambda a: f"\\int {a[0]} \\, d{a[1]}",
    4: lambda a: f"\\int_{{{a[2]}}}^{{{a[3]}}} {a[0]} \\, d{a[1]}",
  },
)
_register(TokenKind.SUM, _big_operator("\\sum"))
_register(TokenKind.PROD, _big_operator("\\prod"))

# Linear algebra
_register(TokenKind.VECTOR, variadic=_environment("pmatrix"))
_register(TokenKind.MATRIX, variadic=_environment("matrix"))

# Quantifiers
_register(TokenKind.FORALL, _quantifier("\\forall"))
_register(TokenKind.EXISTS, _quantifier("\\exists"))

# Accents and text
for _kind in (
  TokenKind.HAT,
  TokenKind.TILDE,
  TokenKind.BAR,
  TokenKind.VEC,
  TokenKind.DOT,
  TokenKind.DDOT,
  TokenKind.OVERLINE,
  TokenKind.UNDERLINE,
):
  _register(_kind, _braced("\\" + _kind.name.lower()))
_register(TokenKind.MATHTEXT, _braced("\\text"))

FUNCTIONS: Mapping[TokenKind, FunctionSpec] = MappingProxyType(_TABLE)


def is_function(kind: TokenKind) -> bool:
  """Checks if `kind` is a keyword that must be followed by an argument list."""
  return kind in FUNCTIONS
