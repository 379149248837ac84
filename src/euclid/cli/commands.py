"""
CLI Command Handlers Facade.

Re-exports handlers from `euclid.cli.handlers` so the dispatcher and tests have a
single patch target.
"""

from euclid.cli.handlers.repl import handle_repl
from euclid.cli.handlers.translate import handle_translate

__all__ = ["handle_repl", "handle_translate"]
