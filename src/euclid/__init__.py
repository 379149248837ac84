"""
euclid Package.

Translates Euclid, a small expression language for mathematical notation, into
LaTeX fragments.

Usage
-----

Simple String Translation
^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import euclid
    print(euclid.transpile("sqrt(x) + PI"))
    # \\sqrt{x} + \\pi

Result Values
^^^^^^^^^^^^^

.. code-block:: python

    from euclid import MathMode, translate

    res = translate("sin(x", math_mode=MathMode.INLINE)
    if res.success:
        print(res.latex)
    else:
        print(f"Error: {res.error}")
"""

from euclid.core.engine import TranslationEngine, translate, transpile
from euclid.core.errors import (
  ArityError,
  DelimiterError,
  MissingDelimiterError,
  TranslationError,
  UnexpectedTokenError,
)
from euclid.core.result import ErrorInfo, TranslationResult
from euclid.enums import MathMode

__version__ = "1.0.0"

__all__ = [
  "ArityError",
  "DelimiterError",
  "ErrorInfo",
  "MathMode",
  "MissingDelimiterError",
  "TranslationEngine",
  "TranslationError",
  "TranslationResult",
  "UnexpectedTokenError",
  "translate",
  "transpile",
  "__version__",
]
