from .translate import default_output_path, handle_translate, translate_file, watch_file
from .repl import EuclidRepl, handle_repl

__all__ = [
  "EuclidRepl",
  "default_output_path",
  "handle_repl",
  "handle_translate",
  "translate_file",
  "watch_file",
]
