"""
Error Presentation.

Turns structured `ErrorInfo` values into human readable reports: a plain-text
form with a caret under the offending column, and a `rich` panel for the CLI.
"""

from typing import List

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from euclid.core.result import ErrorInfo


def caret_line(column: int) -> str:
  """Spaces up to `column` (1-based) followed by ``^``."""
  return " " * max(column - 1, 0) + "^"


def format_error(error: ErrorInfo) -> str:
  """
  Plain-text report for logs and non-terminal output.

  Example::

      ArityError at line 1, column 1: Function 'sin' expects 1 argument, but got 0
        sin()
        ^
      Suggestion: ...

  Args:
      error (ErrorInfo): The error to format.

  Returns:
      str: Multi-line report.
  """
  lines: List[str] = [str(error)]
  if error.source_line is not None:
    lines.append(f"  {error.source_line}")
    lines.append(f"  {caret_line(error.column)}")
  if error.suggestion:
    lines.append(f"Suggestion: {error.suggestion}")
  return "\n".join(lines)


def render_error(error: ErrorInfo) -> Panel:
  """
  Rich panel report for terminal output.

  Args:
      error (ErrorInfo): The error to render.

  Returns:
      Panel: Renderable to pass to `console.print`.
  """
  parts = [Text(error.message, style="bold")]
  parts.append(Text(f"at line {error.line}, column {error.column}", style="dim"))

  if error.source_line is not None:
    parts.append(Text(""))
    parts.append(Text(f"  {error.source_line}"))
    parts.append(Text(f"  {caret_line(error.column)}", style="bold red"))

  if error.suggestion:
    parts.append(Text(""))
    parts.append(Text(f"Suggestion: {error.suggestion}", style="green"))

  return Panel(Group(*parts), title=error.kind, title_align="left", border_style="red", expand=False)
