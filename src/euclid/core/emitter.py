"""
LaTeX Emitter.

Walks a parsed `Document` and produces the LaTeX text. Each node variant maps to
one template; function calls are rendered through the shared function table.
"""

from typing import List

from euclid.core.functions import FUNCTIONS
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
from euclid.core.tokens import CONSTANTS, GREEK_LETTERS, TokenKind
from euclid.enums import MathMode

_INFIX = {
  TokenKind.PLUS: "+",
  TokenKind.MINUS: "-",
  TokenKind.MULTIPLY: "*",
  TokenKind.DIVIDE: "/",
  TokenKind.MODULO: "\\bmod",
}

_PREFIX = {
  TokenKind.MINUS: "-",
  TokenKind.PLUS: "+",
}


class LatexEmitter:
  """
  Converts a Euclid AST into LaTeX.

  The emitter is stateless apart from its math mode, so one instance can be
  shared between calls.
  """

  def __init__(self, math_mode: MathMode = MathMode.NONE) -> None:
    self.math_mode = math_mode

  def emit(self, document: Document) -> str:
    """
    Renders a whole document.

    Non-text top-level nodes are wrapped according to `math_mode`; text nodes and
    explicit ``$``/``$$`` regions are left as they are. Consecutive wrapped
    expressions are separated by a newline.

    Args:
        document (Document): Root node from the parser.

    Returns:
        str: The LaTeX source string.
    """
    parts: List[str] = []
    previous_wrapped = False
    for node in document.nodes:
      latex = self.render(node)
      if isinstance(node, (Text, InlineMath, DisplayMath)):
        parts.append(latex)
        previous_wrapped = False
        continue
      if previous_wrapped and self.math_mode != MathMode.NONE:
        # Adjacent `$x$$y$` would read as a `$$` delimiter.
        parts.append("\n")
      parts.append(self.math_mode.wrap(latex))
      previous_wrapped = True
    return "".join(parts)

  def render(self, node: Node) -> str:
    """
    Renders a single node without math mode wrapping.

    Args:
        node (Node): Any AST node.

    Returns:
        str: LaTeX for the node.

    Raises:
        ValueError: If the node or operator has no template.
    """
    match node:
      case Document():
        return self.emit(node)

      case Literal(value=TokenKind() as kind):
        return CONSTANTS[kind]

      case Literal(value=value):
        return str(value)

      case Identifier(name=name, kind=kind):
        if kind is not None:
          return GREEK_LETTERS[kind]
        return name

      case Binary(op=TokenKind.FRACTION, left=left, right=right):
        return f"\\frac{{{self.render(left)}}}{{{self.render(right)}}}"

      case Binary(op=TokenKind.POWER, left=left, right=right):
        return f"{self.render(left)}^{{{self.render(right)}}}"

      case Binary(op=op, left=left, right=right):
        symbol = _INFIX.get(op)
        if symbol is None:
          raise ValueError(f"No template for binary operator {op.name}")
        return f"{self.render(left)} {symbol} {self.render(right)}"

      case Unary(op=op, operand=operand):
        return f"{_PREFIX[op]}{self.render(operand)}"

      case Call(function=function, arguments=arguments):
        entry = FUNCTIONS.get(function)
        if entry is None:
          raise ValueError(f"No template for function {function.name}")
        return entry.render([self.render(arg) for arg in arguments])

      case Grouping(inner=inner):
        return f"({self.render(inner)})"

      case Text(raw=raw):
        return raw

      case InlineMath(inner=inner):
        return MathMode.INLINE.wrap(self.render(inner))

      case DisplayMath(inner=inner):
        return MathMode.DISPLAY.wrap(self.render(inner))

    raise ValueError(f"Unknown node type: {type(node).__name__}")
