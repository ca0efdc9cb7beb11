"""
Extract and Transcode Command Handlers.

This module implements the logic for the `lit-switcheroo extract` and
`lit-switcheroo transcode` commands. Both follow the same flow:

1. Configuration loading (pyproject.toml + CLI overrides).
2. Reading the document from a file or standard input.
3. Running the Engine.
4. Writing the result to a file or standard output, or reporting the error.
"""

import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.markup import escape

from lit_switcheroo.config import RuntimeConfig
from lit_switcheroo.core.conversion_result import ConversionResult
from lit_switcheroo.core.engine import LiterateEngine
from lit_switcheroo.utils.console import log_error, log_info, log_success, log_warning

STDIO = Path("-")


def handle_extract(
  input_path: Path,
  output_path: Optional[Path],
  source: Optional[str],
  language: Optional[str],
  whitespace: Optional[str],
) -> int:
  """
  Handles the 'extract' command execution.

  Args:
      input_path: Literate document to read, or '-' for stdin.
      output_path: Where to write the code. None or '-' writes to stdout.
      source: Override for the source style (e.g. 'markdown').
      language: Only extract blocks tagged with this language.
      whitespace: Override for the whitespace mode ('indent' or 'all').

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  config = _load_config(input_path, source=source, language=language, whitespace=whitespace)
  if config is None:
    return 1
  # target_style from pyproject.toml only applies to transcode
  config = config.model_copy(update={"target_style": None})
  return _convert_single_file(input_path, output_path, config)


def handle_transcode(
  input_path: Path,
  output_path: Optional[Path],
  source: Optional[str],
  target: Optional[str],
  language: Optional[str],
) -> int:
  """
  Handles the 'transcode' command execution.

  Args:
      input_path: Literate document to read, or '-' for stdin.
      output_path: Where to write the document. None or '-' writes to stdout.
      source: Override for the source style.
      target: Style to render code blocks in.
      language: Language filter for the source and tag for the target.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  config = _load_config(input_path, source=source, target=target, language=language)
  if config is None:
    return 1
  if not config.is_transcoding:
    log_error("Transcoding requires a target style (--target or target_style in pyproject.toml).")
    return 1
  return _convert_single_file(input_path, output_path, config)


def _load_config(input_path: Path, **overrides: Optional[str]) -> Optional[RuntimeConfig]:
  if input_path == STDIO:
    search_path = Path.cwd()
  else:
    search_path = input_path.parent
  try:
    return RuntimeConfig.load(search_path=search_path, **overrides)
  except ValidationError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return None


def _read_document(input_path: Path) -> str:
  if input_path == STDIO:
    return sys.stdin.read()
  with open(input_path, "rt", encoding="utf-8") as f:
    return f.read()


def _write_document(output_path: Optional[Path], text: str) -> None:
  if output_path is None or output_path == STDIO:
    sys.stdout.write(text)
    return
  output_path.parent.mkdir(parents=True, exist_ok=True)
  with open(output_path, "wt", encoding="utf-8") as f:
    f.write(text)


def _convert_single_file(input_path: Path, output_path: Optional[Path], config: RuntimeConfig) -> int:
  """
  Helper to run the engine on a single document.

  Args:
      input_path: Source document path, or '-' for stdin.
      output_path: Destination path, or None/'-' for stdout.
      config: Runtime configuration object.

  Returns:
      int: Exit code.
  """
  if input_path != STDIO and not input_path.is_file():
    log_error(f"Input not found: [path]{escape(str(input_path))}[/path]")
    return 1

  try:
    document = _read_document(input_path)
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Failed to read {escape(str(input_path))}: {escape(str(e))}")
    return 1

  result: ConversionResult = LiterateEngine(config).run(document)
  if not result.success:
    for message in result.errors:
      log_error(f"{escape(str(input_path))}: {escape(message)}")
    return 1

  _write_document(output_path, result.code)
  if config.source_style == "infer" and result.inferred_style:
    log_info(f"{escape(str(input_path))}: inferred style [marker]{escape('  '.join(result.inferred_style))}[/marker]")
  if not config.is_transcoding and document.strip() and not result.code.strip():
    log_warning(f"{escape(str(input_path))}: no code blocks found")
  if output_path is not None and output_path != STDIO:
    log_success(f"Wrote [path]{escape(str(input_path))}[/path] -> [path]{escape(str(output_path))}[/path]")
  return 0
