"""CLI handler for the 'styles' command."""

from lit_switcheroo.cli.styles import StyleTable


def handle_styles() -> int:
  """Handles 'styles' command."""
  StyleTable().render()
  return 0
