"""
Main Entry Point for lit-switcheroo CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `lit_switcheroo.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from lit_switcheroo import __version__
from lit_switcheroo.cli import commands
from lit_switcheroo.core.styles import STYLE_PRESETS, parse_style
from lit_switcheroo.enums import parse_whitespace_mode
from lit_switcheroo.utils.console import set_verbose

_STYLE_CHOICES = ", ".join(sorted(STYLE_PRESETS))


def _style_name(value: str) -> str:
  """argparse type for a source style preset."""
  if parse_style(value) is None:
    raise argparse.ArgumentTypeError(f"unknown style '{value}' (choose from {_STYLE_CHOICES})")
  return value.strip().lower()


def _target_style_name(value: str) -> str:
  """argparse type for a target style preset; 'infer' has nothing to render with."""
  name = _style_name(value)
  if not parse_style(name):
    raise argparse.ArgumentTypeError(f"cannot transcode to '{value}'")
  return name


def _whitespace_name(value: str) -> str:
  if parse_whitespace_mode(value) is None:
    raise argparse.ArgumentTypeError(f"unknown whitespace mode '{value}' (choose from indent, all)")
  return value.strip().lower()


def _add_common_arguments(cmd: argparse.ArgumentParser) -> None:
  cmd.add_argument(
    "input",
    nargs="?",
    type=Path,
    default=Path("-"),
    help="Literate document to read (default: stdin)",
  )
  cmd.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")
  cmd.add_argument(
    "-s",
    "--source",
    type=_style_name,
    default=None,
    help=f"Source style (default: from toml, else infer). One of: {_STYLE_CHOICES}",
  )
  cmd.add_argument("-l", "--language", default=None, help="Only process code blocks tagged with this language")


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="lit-switcheroo: Literate document extractor and transcoder")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: EXTRACT ---
  cmd_ext = subparsers.add_parser("extract", help="Extract the code from a literate document")
  _add_common_arguments(cmd_ext)
  cmd_ext.add_argument(
    "--ws-mode",
    dest="whitespace",
    type=_whitespace_name,
    default=None,
    help="Whitespace mode: 'indent' drops filler lines, 'all' keeps line numbers aligned (default: indent)",
  )

  # --- Command: TRANSCODE ---
  cmd_trans = subparsers.add_parser("transcode", help="Rewrite a literate document in another style")
  _add_common_arguments(cmd_trans)
  cmd_trans.add_argument(
    "-t",
    "--target",
    type=_target_style_name,
    default=None,
    help="Target style (default: from toml). Its first marker is used for every block",
  )

  # --- Command: STYLES ---
  subparsers.add_parser("styles", help="List the style presets and their markers")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "extract":
    return commands.handle_extract(args.input, args.output, args.source, args.language, args.whitespace)

  elif args.command == "transcode":
    return commands.handle_transcode(args.input, args.output, args.source, args.target, args.language)

  elif args.command == "styles":
    return commands.handle_styles()

  return 0


if __name__ == "__main__":
  sys.exit(main())
