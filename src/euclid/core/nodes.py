"""
Euclid AST Nodes.

Defines the data structures for the Euclid expression tree. Nodes are immutable
and own their children exclusively (tuples, never shared), so a tree built by the
`Parser` can be handed to the `LatexEmitter` without defensive copying.

Variants:
    - Literal     -> number or zero-argument constant (PI, INFINITY, AND...)
    - Identifier  -> variable name or Greek letter
    - Binary      -> infix operator application
    - Unary       -> prefix ``-`` / ``+``
    - Call        -> function keyword applied to arguments
    - Grouping    -> parenthesised sub-expression
    - Text        -> passthrough character
    - InlineMath  -> ``$ ... $`` region
    - DisplayMath -> ``$$ ... $$`` region
    - Document    -> ordered top-level nodes
"""

import abc
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from euclid.core.tokens import TokenKind


class Node(abc.ABC):
  """Abstract base class for all Euclid AST nodes."""

  @abc.abstractmethod
  def children(self) -> Tuple["Node", ...]:
    """Returns the direct child nodes in source order."""


@dataclass(frozen=True)
class Literal(Node):
  """
  A numeric literal or a named constant.

  Attributes:
      value (Union[float, TokenKind]): The number, or the constant's token kind.
  """

  value: Union[float, TokenKind]

  @property
  def is_constant(self) -> bool:
    return isinstance(self.value, TokenKind)

  def children(self) -> Tuple[Node, ...]:
    return ()


@dataclass(frozen=True)
class Identifier(Node):
  """
  A variable reference.

  Attributes:
      name (str): The lexeme as written.
      kind (Optional[TokenKind]): Set for Greek letter keywords, None for plain names.
  """

  name: str
  kind: Optional[TokenKind] = None

  def children(self) -> Tuple[Node, ...]:
    return ()


@dataclass(frozen=True)
class Binary(Node):
  """
  An infix operation.

  Attributes:
      op (TokenKind): One of PLUS, MINUS, MULTIPLY, DIVIDE, MODULO, FRACTION, POWER.
      left (Node): Left operand.
      right (Node): Right operand.
  """

  op: TokenKind
  left: Node
  right: Node

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)


@dataclass(frozen=True)
class Unary(Node):
  """Prefix sign applied to an operand."""

  op: TokenKind
  operand: Node

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)


@dataclass(frozen=True)
class Call(Node):
  """
  A function keyword applied to an argument list.

  Attributes:
      function (TokenKind): The function keyword kind.
      name (str): The keyword as written (for messages and dumps).
      arguments (Tuple[Node, ...]): Arguments in call order.
  """

  function: TokenKind
  name: str
  arguments: Tuple[Node, ...] = field(default_factory=tuple)

  def children(self) -> Tuple[Node, ...]:
    return self.arguments


@dataclass(frozen=True)
class Grouping(Node):
  """Parenthesised expression."""

  inner: Node

  def children(self) -> Tuple[Node, ...]:
    return (self.inner,)


@dataclass(frozen=True)
class Text(Node):
  """Raw passthrough text."""

  raw: str

  def children(self) -> Tuple[Node, ...]:
    return ()


@dataclass(frozen=True)
class InlineMath(Node):
  """Explicit ``$...$`` region."""

  inner: Node

  def children(self) -> Tuple[Node, ...]:
    return (self.inner,)


@dataclass(frozen=True)
class DisplayMath(Node):
  """Explicit ``$$...$$`` region."""

  inner: Node

  def children(self) -> Tuple[Node, ...]:
    return (self.inner,)


@dataclass(frozen=True)
class Document(Node):
  """
  Root container.

  Attributes:
      nodes (Tuple[Node, ...]): Top-level expressions in source order.
  """

  nodes: Tuple[Node, ...] = field(default_factory=tuple)

  def children(self) -> Tuple[Node, ...]:
    return self.nodes


def describe(node: Node) -> str:
  """
  Short label for a node, used by tree dumps in verbose mode.

  Args:
      node (Node): The node to label.

  Returns:
      str: e.g. ``Binary(PLUS)`` or ``Identifier(x)``.
  """
  match node:
    case Literal(value=TokenKind() as kind):
      return f"Literal({kind.name})"
    case Literal(value=value):
      return f"Literal({value})"
    case Identifier(name=name):
      return f"Identifier({name})"
    case Binary(op=op):
      return f"Binary({op.name})"
    case Unary(op=op):
      return f"Unary({op.name})"
    case Call(name=name, arguments=args):
      return f"Call({name}, {len(args)} args)"
    case Text(raw=raw):
      return f"Text({raw!r})"
    case _:
      return type(node).__name__
