"""
CLI Command Handlers Facade.

Re-exports the handlers from `lit_switcheroo.cli.handlers` so the dispatcher
and tests have a single module to import and patch.
"""

from lit_switcheroo.cli.handlers.convert import (
  handle_extract,
  handle_transcode,
  _convert_single_file,
)
from lit_switcheroo.cli.handlers.styles import handle_styles

__all__ = [
  "_convert_single_file",
  "handle_extract",
  "handle_styles",
  "handle_transcode",
]
