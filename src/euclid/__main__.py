"""
Entry point for module execution (``python -m euclid``).

This module delegates execution to the CLI handler in ``euclid.cli.__main__``.
"""

import sys
from euclid.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
