"""
Runtime Configuration Store.

Resolves the style, language and whitespace settings for a run from
``[tool.lit_switcheroo]`` in the nearest ``pyproject.toml``, with explicit
arguments (typically from the CLI) taking precedence.

Example ``pyproject.toml``::

    [tool.lit_switcheroo]
    source_style = "markdown"
    language = "haskell"
    whitespace_mode = "all"
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from lit_switcheroo.core.styles import Style, parse_style, set_language
from lit_switcheroo.enums import WhitespaceMode, parse_whitespace_mode

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "lit_switcheroo"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the extraction and transcoding engine.
  """

  source_style: str = Field("infer", description="Preset used to recognize markers (e.g. 'markdown').")
  target_style: Optional[str] = Field(None, description="Preset to transcode into. None means extract.")
  language: Optional[str] = Field(None, description="Only recognize blocks tagged with this language.")
  whitespace_mode: WhitespaceMode = Field(WhitespaceMode.KEEP_INDENT, description="'indent' or 'all'.")

  @field_validator("source_style")
  @classmethod
  def validate_source_style(cls, v: str) -> str:
    """
    Ensures the source style names a known preset.

    Args:
        v (str): The preset name.

    Returns:
        str: The normalized (lowercase) name.

    Raises:
        ValueError: If the preset is unknown.
    """
    v_clean = v.lower().strip()
    if parse_style(v_clean) is None:
      raise ValueError(f"Unknown style: '{v_clean}'.")
    return v_clean

  @field_validator("target_style")
  @classmethod
  def validate_target_style(cls, v: Optional[str]) -> Optional[str]:
    """
    Ensures the target style names a preset with at least one shape.

    Raises:
        ValueError: If the preset is unknown or is 'infer'.
    """
    if v is None:
      return None
    v_clean = v.lower().strip()
    if not parse_style(v_clean):
      raise ValueError(f"Cannot transcode to style: '{v_clean}'.")
    return v_clean

  @field_validator("whitespace_mode", mode="before")
  @classmethod
  def validate_whitespace_mode(cls, v: Any) -> Any:
    """Accepts the CLI names 'indent' and 'all' in any case."""
    if isinstance(v, str) and not isinstance(v, WhitespaceMode):
      mode = parse_whitespace_mode(v)
      if mode is None:
        raise ValueError(f"Unknown whitespace mode: '{v}'. Expected 'indent' or 'all'.")
      return mode
    return v

  @property
  def source_shapes(self) -> Style:
    """
    The source style with the language filter applied.

    Returns:
        Style: Shapes to recognize. Empty when inferring.
    """
    return set_language(self.language, parse_style(self.source_style))

  @property
  def target_shapes(self) -> Style:
    """
    The target style with the language tag applied.

    Returns:
        Style: Shapes to render with, or the empty style when extracting.
    """
    if self.target_style is None:
      return ()
    return set_language(self.language, parse_style(self.target_style))

  @property
  def is_transcoding(self) -> bool:
    return self.target_style is not None

  @classmethod
  def load(
    cls,
    source: Optional[str] = None,
    target: Optional[str] = None,
    language: Optional[str] = None,
    whitespace: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        source (Optional[str]): Override for the source style.
        target (Optional[str]): Override for the target style.
        language (Optional[str]): Override for the language filter.
        whitespace (Optional[str]): Override for the whitespace mode.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    final_source = source or toml_config.get("source_style", "infer")
    final_target = target or toml_config.get("target_style")
    final_language = language or toml_config.get("language")
    final_whitespace = whitespace or toml_config.get("whitespace_mode", WhitespaceMode.KEEP_INDENT)

    return cls(
      source_style=final_source,
      target_style=final_target,
      language=final_language,
      whitespace_mode=final_whitespace,
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
