"""
Interactive REPL.

Reads one Euclid expression per line, prints its LaTeX, and keeps going after
errors. Lines starting with ``:`` are commands.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from euclid import __version__
from euclid.config import RuntimeConfig
from euclid.core.engine import translate
from euclid.enums import MathMode
from euclid.utils.console import get_console
from euclid.utils.diagnostics import render_error

PROMPT = "[bold cyan]>>>[/bold cyan] "

HELP_TEXT = """\
[bold]Available Commands:[/bold]
  :help, :h          Show this help message
  :quit, :q, :exit   Exit the REPL
  :version, :v       Show version information
  :clear, :c         Clear the screen

[bold]Examples:[/bold]
  >>> PI                           LaTeX: \\pi
  >>> pow(x, 2) + 3                LaTeX: x^{2.0} + 3.0
  >>> sqrt(2, 16)                  LaTeX: \\sqrt[2.0]{16.0}
  >>> integral(sin(x), x, 0, PI)   LaTeX: \\int_{0.0}^{\\pi} \\sin(x) \\, dx"""


class EuclidRepl:
  """
  Read-eval-print loop over `translate`.

  Attributes:
      math_mode (MathMode): Wrapping applied to each translated line.
      console (Console): Output and input device.
  """

  def __init__(self, math_mode: MathMode = MathMode.NONE, console: Optional[Console] = None) -> None:
    self.math_mode = MathMode(math_mode)
    self.console = console or get_console()
    self.running = False

  def start(self) -> None:
    """Runs the loop until ``:quit``, end of input or Ctrl+C."""
    self._print_welcome()
    self.running = True

    try:
      while self.running:
        try:
          line = self.console.input(PROMPT)
        except EOFError:
          break
        self.handle_line(line)
    except KeyboardInterrupt:
      self.console.print("")

    self.console.print("Goodbye!")

  def handle_line(self, line: str) -> None:
    """
    Processes one input line: a command, a blank line, or an expression.

    Args:
        line (str): Raw input.
    """
    text = line.strip()
    if not text:
      return

    if text.startswith(":"):
      self._run_command(text)
      return

    result = translate(text, math_mode=self.math_mode)
    if result.success:
      self.console.print(Text.assemble(("LaTeX: ", "bold"), result.latex))
    else:
      self.console.print(render_error(result.error))
    self.console.print("")

  def _run_command(self, command: str) -> None:
    if command in (":quit", ":q", ":exit"):
      self.running = False
    elif command in (":help", ":h"):
      self.console.print(HELP_TEXT, highlight=False)
    elif command in (":version", ":v"):
      self.console.print(f"Euclid version {__version__}")
    elif command in (":clear", ":c"):
      self.console.clear()
      self._print_welcome()
    else:
      self.console.print(f"[yellow]Unknown command: {escape(command)}[/yellow] (type :help)")

  def _print_welcome(self) -> None:
    self.console.print(
      Panel(
        "Intuitive syntax for beautiful LaTeX mathematical expressions.\n"
        "Type [bold]:help[/bold] for available commands, or [bold]:quit[/bold] to exit.",
        title=f"Euclid Interactive REPL v{__version__}",
        style="cyan",
      )
    )


def handle_repl(math_mode: Optional[MathMode] = None) -> int:
  """
  Handles the 'repl' command execution.

  Args:
      math_mode: Override for the configured math mode.

  Returns:
      int: Exit code (always 0).
  """
  config = RuntimeConfig.load(math_mode=math_mode)
  EuclidRepl(config.math_mode).start()
  return 0
