"""
Main Entry Point for the euclid CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `euclid.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from euclid import __version__
from euclid.cli import commands
from euclid.enums import MathMode


def _add_math_mode_flags(parser: argparse.ArgumentParser) -> None:
  group = parser.add_mutually_exclusive_group()
  group.add_argument(
    "-i",
    "--inline",
    dest="math_mode",
    action="store_const",
    const=MathMode.INLINE,
    help="Wrap each expression in $...$",
  )
  group.add_argument(
    "-D",
    "--display",
    dest="math_mode",
    action="store_const",
    const=MathMode.DISPLAY,
    help="Wrap each expression in $$...$$",
  )
  parser.set_defaults(math_mode=None)


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="euclid: Math notation to LaTeX translator")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: TRANSLATE ---
  cmd_tr = subparsers.add_parser("translate", help="Translate a Euclid file to LaTeX/markdown")
  cmd_tr.add_argument("input", type=Path, help="Input .ed file")
  cmd_tr.add_argument("output", type=Path, nargs="?", default=None, help="Output file (default: input with .md)")
  _add_math_mode_flags(cmd_tr)
  cmd_tr.add_argument(
    "-m",
    "--mixed",
    action="store_true",
    default=None,
    help="Treat input as markdown with embedded Euclid expressions",
  )
  cmd_tr.add_argument(
    "-v",
    "--verbose",
    "-d",
    "--debug",
    dest="verbose",
    action="store_true",
    default=None,
    help="Print the token stream and the AST",
  )
  cmd_tr.add_argument("-w", "--watch", action="store_true", help="Re-translate whenever the input changes")
  cmd_tr.add_argument(
    "--interval",
    type=float,
    default=None,
    help="Polling interval in seconds for --watch (default: from toml, else 1.0)",
  )

  # --- Command: REPL ---
  cmd_repl = subparsers.add_parser("repl", help="Start the interactive REPL")
  _add_math_mode_flags(cmd_repl)

  args = parser.parse_args(argv)

  if args.command == "translate":
    return commands.handle_translate(
      args.input,
      args.output,
      args.math_mode,
      args.mixed,
      args.verbose,
      args.watch,
      args.interval,
    )

  elif args.command == "repl":
    return commands.handle_repl(args.math_mode)

  return 0


if __name__ == "__main__":
  sys.exit(main())
