"""
Style preset table rendering.

Lists every named style together with the markers it recognizes, either as a
Rich table (CLI) or as structured rows.
"""

from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from lit_switcheroo.core.styles import STYLE_PRESETS, describe_style


class StyleTable:
  """
  Builds the overview of the available style presets.
  """

  def __init__(self, output: Optional[Console] = None):
    """
    Args:
        output (Optional[Console]): Destination console. Defaults to stdout.
    """
    self.console = output or Console()

  def get_json(self) -> List[Dict[str, str]]:
    """
    Returns the presets as structured data.

    Returns:
        List[Dict[str, str]]: One row per preset with keys 'style' and 'markers'.
    """
    rows = []
    for name in sorted(STYLE_PRESETS):
      markers = describe_style(STYLE_PRESETS[name])
      rows.append({"style": name, "markers": "  ".join(markers) if markers else "(inferred from first marker)"})
    return rows

  def render(self) -> None:
    """Prints the preset table."""
    table = Table(title="Literate Styles")
    table.add_column("Style", style="cyan")
    table.add_column("Markers", style="magenta")
    for row in self.get_json():
      table.add_row(row["style"], Text(row["markers"]))
    self.console.print(table)
