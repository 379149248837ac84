"""
Translate Command Handler.

This module implements the logic for the `euclid translate` command:

1. Configuration loading (``[tool.euclid]`` plus CLI overrides).
2. Translation of the input file, either as pure Euclid or as prose with
   embedded fragments (``--mixed``).
3. Output writing, with optional token and AST dumps (``--verbose``).
4. An optional polling loop that re-translates whenever the input changes (``--watch``).
"""

import time
from pathlib import Path
from typing import Callable, Optional

from rich.markup import escape
from rich.rule import Rule

from euclid.config import RuntimeConfig
from euclid.core.engine import translate
from euclid.core.mixed import MixedContentProcessor
from euclid.core.result import TranslationResult
from euclid.enums import MathMode
from euclid.utils.console import console, log_error, log_info, log_success, set_verbose
from euclid.utils.diagnostics import render_error


def default_output_path(input_path: Path, suffix: str = ".md") -> Path:
  """
  Derives the output path: ``notes.ed`` becomes ``notes.md``, anything else gets
  the suffix appended (``notes.txt`` becomes ``notes.txt.md``).

  Args:
      input_path (Path): Source file.
      suffix (str): Output extension including the dot.

  Returns:
      Path: Destination file.
  """
  if input_path.suffix == ".ed":
    return input_path.with_suffix(suffix)
  return input_path.with_name(input_path.name + suffix)


def handle_translate(
  input_path: Path,
  output_path: Optional[Path],
  math_mode: Optional[MathMode],
  mixed: Optional[bool],
  verbose: Optional[bool],
  watch: bool,
  interval: Optional[float] = None,
) -> int:
  """
  Handles the 'translate' command execution.

  Args:
      input_path: Path to the Euclid source file.
      output_path: Destination; derived from `input_path` when None.
      math_mode: Override for the math mode (default: from toml).
      mixed: Override for mixed content processing.
      verbose: Override for token/AST dumps.
      watch: If True, keep re-translating on change until interrupted.
      interval: Override for the polling interval in seconds.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {escape(str(input_path))}")
    return 1

  config = RuntimeConfig.load(
    math_mode=math_mode,
    mixed=mixed,
    verbose=verbose,
    watch_interval=interval,
    search_path=input_path.parent,
  )
  set_verbose(config.verbose)

  destination = output_path or default_output_path(input_path, config.output_suffix)

  if watch:
    watch_file(input_path, destination, config)
    return 0

  return 0 if translate_file(input_path, destination, config) else 1


def translate_file(input_path: Path, output_path: Path, config: RuntimeConfig) -> bool:
  """
  Translates one file and writes the result.

  Args:
      input_path (Path): Source file.
      output_path (Path): Destination file.
      config (RuntimeConfig): Resolved settings.

  Returns:
      bool: True if output was written.
  """
  try:
    source = input_path.read_text(encoding="utf-8")
  except OSError as e:
    log_error(f"Cannot read {escape(str(input_path))}: {escape(str(e))}")
    return False

  if config.mixed:
    # Fragments in prose always need delimiters.
    mode = config.math_mode if config.math_mode != MathMode.NONE else MathMode.INLINE
    latex = MixedContentProcessor(mode).process_document(source)
  else:
    result = translate(source, math_mode=config.math_mode, verbose=config.verbose)
    if config.verbose:
      _print_dumps(result)
    if not result.success:
      console.print(render_error(result.error))
      log_error(f"Translation of [path]{escape(str(input_path))}[/path] failed")
      return False
    latex = result.latex

  try:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(latex, encoding="utf-8")
  except OSError as e:
    log_error(f"Cannot write {escape(str(output_path))}: {escape(str(e))}")
    return False

  log_success(f"Translated [path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]")
  return True


def watch_file(
  input_path: Path,
  output_path: Path,
  config: RuntimeConfig,
  sleep: Callable[[float], None] = time.sleep,
  max_polls: Optional[int] = None,
) -> None:
  """
  Translates once, then polls the input's modification time and re-translates
  whenever it changes. Translation errors are reported and the loop continues.

  Args:
      input_path (Path): Source file to watch.
      output_path (Path): Destination file.
      config (RuntimeConfig): Resolved settings (uses `watch_interval`).
      sleep (Callable): Delay function between polls.
      max_polls (Optional[int]): Stop after this many polls; None runs until Ctrl+C.
  """
  log_info(f"Initial translation of [path]{escape(str(input_path))}[/path]")
  translate_file(input_path, output_path, config)
  last_mtime = _mtime(input_path)

  log_info(f"Watching [path]{escape(str(input_path))}[/path] for changes... (Press Ctrl+C to stop)")
  polls = 0
  try:
    while max_polls is None or polls < max_polls:
      sleep(config.watch_interval)
      polls += 1
      current = _mtime(input_path)
      if current is None or current == last_mtime:
        continue
      last_mtime = current
      log_info(f"Change detected at {time.strftime('%H:%M:%S')}, re-translating")
      translate_file(input_path, output_path, config)
  except KeyboardInterrupt:
    console.print("\n[yellow]Watch stopped by user.[/yellow]")


def _mtime(path: Path) -> Optional[float]:
  try:
    return path.stat().st_mtime
  except OSError:
    # Editors may briefly remove the file while saving.
    return None


def _print_dumps(result: TranslationResult) -> None:
  console.print(Rule("Tokens"))
  for line in result.tokens:
    console.print(line, markup=False, highlight=False)
  console.print(f"[dim]Total tokens: {len(result.tokens)}[/dim]")

  if result.ast:
    console.print(Rule("Abstract Syntax Tree"))
    for line in result.ast:
      console.print(line, markup=False, highlight=False)
