"""
Pytest Configuration.

Puts ``src`` on the import path so tests run against the working tree without
installing the package.
"""

import sys
from pathlib import Path

src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
