"""
Tests for the Mixed Content Processor (Euclid fragments inside prose).
"""

from euclid.core.mixed import MATH_PATTERN, MixedContentProcessor, process_document
from euclid.enums import MathMode


def test_function_call_in_prose() -> None:
  proc = MixedContentProcessor()
  out = proc.process_line("The slope is sin(x) at the origin.")
  assert out == "The slope is $\\sin(x)$ at the origin."


def test_constants_and_arithmetic() -> None:
  proc = MixedContentProcessor()
  assert proc.process_line("Area is PI times r") == "Area is $\\pi$ times r"
  assert proc.process_line("We know 2 + 3 is small") == "We know $2.0 + 3.0$ is small"


def test_fraction_and_power_fragments() -> None:
  proc = MixedContentProcessor()
  assert proc.process_line("ratio a \\\\ b here") == "ratio $\\frac{a}{b}$ here"
  assert proc.process_line("square x ^ 2 now") == "square $x^{2.0}$ now"


def test_longest_function_name_wins() -> None:
  assert MATH_PATTERN.search("use sinh(t)").group() == "sinh(t)"


def test_headings_and_blank_lines_pass_through() -> None:
  proc = MixedContentProcessor()
  assert proc.process_line("# Notes on sin(x)") == "# Notes on sin(x)"
  assert proc.process_line("   ") == "   "


def test_failed_fragment_is_kept_verbatim() -> None:
  proc = MixedContentProcessor()
  # `sin(x, y)` matches the pattern but has the wrong arity.
  assert proc.process_line("bad sin(x, y) here") == "bad sin(x, y) here"


def test_plain_prose_is_untouched() -> None:
  line = "nothing mathematical in this sentence"
  assert MixedContentProcessor().process_line(line) == line


def test_display_mode_delimiters() -> None:
  proc = MixedContentProcessor(MathMode.DISPLAY)
  assert proc.process_line("value PI") == "value $$\\pi$$"


def test_document_preserves_line_structure() -> None:
  doc = "# Title\n\nsqrt(x) is a root\n"
  assert process_document(doc) == "# Title\n\n$\\sqrt{x}$ is a root\n"


def test_logical_connectives_stay_prose() -> None:
  proc = MixedContentProcessor()
  assert proc.process_line("Let A AND B hold, or NOT") == "Let A AND B hold, or NOT"
  assert proc.process_line("A OR B and PI") == "A OR B and $\\pi$"
