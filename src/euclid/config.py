"""
Runtime Configuration Store.

Settings are resolved in three layers: CLI arguments override the
``[tool.euclid]`` table of the nearest ``pyproject.toml``, which overrides the
model defaults.

Example ``pyproject.toml``::

    [tool.euclid]
    math_mode = "inline"
    mixed = true
    watch_interval = 0.5
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from euclid.enums import MathMode

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Global configuration container for translation commands.
  """

  math_mode: MathMode = Field(MathMode.NONE, description="Wrapping of top-level expressions.")
  mixed: bool = Field(False, description="Treat input as prose with embedded Euclid fragments.")
  verbose: bool = Field(False, description="Print token and AST dumps.")
  watch_interval: float = Field(1.0, gt=0, description="Seconds between polls in watch mode.")
  output_suffix: str = Field(".md", description="Extension used for default output paths.")

  @field_validator("math_mode", mode="before")
  @classmethod
  def validate_math_mode(cls, v: Any) -> Any:
    """
    Normalizes math mode strings.

    Args:
        v (Any): Raw value, e.g. ``"Inline "``.

    Returns:
        Any: The normalized (lowercase) value.

    Raises:
        ValueError: If the mode is not one of none, inline, display.
    """
    if isinstance(v, MathMode) or not isinstance(v, str):
      return v
    v_clean = v.lower().strip()
    known = [m.value for m in MathMode]
    if v_clean not in known:
      raise ValueError(f"Unknown math mode: '{v_clean}'. Supported modes: {known}")
    return v_clean

  @field_validator("output_suffix")
  @classmethod
  def validate_suffix(cls, v: str) -> str:
    return v if v.startswith(".") else f".{v}"

  @classmethod
  def load(
    cls,
    math_mode: Optional[MathMode] = None,
    mixed: Optional[bool] = None,
    verbose: Optional[bool] = None,
    watch_interval: Optional[float] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        math_mode (Optional[MathMode]): Override for the math mode.
        mixed (Optional[bool]): Override for mixed content processing.
        verbose (Optional[bool]): Override for verbose dumps.
        watch_interval (Optional[float]): Override for the polling interval.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    overrides: Dict[str, Any] = {
      "math_mode": math_mode,
      "mixed": mixed,
      "verbose": verbose,
      "watch_interval": watch_interval,
    }
    merged = {**toml_config, **{k: v for k, v in overrides.items() if v is not None}}
    known = set(cls.model_fields)
    return cls(**{k: v for k, v in merged.items() if k in known})


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.euclid]`` table and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None
      return data.get("tool", {}).get("euclid", {}), parent

  return {}, None
