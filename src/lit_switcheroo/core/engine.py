"""
Orchestration Engine.

This module provides the `LiterateEngine`, the driver used by the CLI and the
package-level helpers. It resolves the runtime configuration into styles and
dispatches to one of the two automata:

1.  **Extraction** (no target style): `lit_switcheroo.core.unlit.Extractor`.
2.  **Transcoding** (target style set): `lit_switcheroo.core.relit.Transcoder`.

Failures of the automata are captured into a `ConversionResult` instead of
propagating, so batch callers can report and continue.
"""

import logging
from typing import Optional

from lit_switcheroo.config import RuntimeConfig
from lit_switcheroo.core.conversion_result import ConversionResult
from lit_switcheroo.core.errors import LiterateError, render_error
from lit_switcheroo.core.machine import join_lines, split_lines
from lit_switcheroo.core.relit import Transcoder
from lit_switcheroo.core.styles import describe_style
from lit_switcheroo.core.unlit import Extractor

logger = logging.getLogger(__name__)


class LiterateEngine:
  """
  Runs a single document through the configured automaton.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Initializes the Engine.

    Args:
        config (Optional[RuntimeConfig]): Run settings. Defaults to inferring
            the style and extracting with KEEP_INDENT.
    """
    self.config = config or RuntimeConfig()

  def run(self, text: str) -> ConversionResult:
    """
    Executes extraction or transcoding on a whole document.

    Args:
        text (str): The literate document.

    Returns:
        ConversionResult: Object containing the output text or the error message.
    """
    config = self.config
    lines = split_lines(text)
    mode = "transcode" if config.is_transcoding else "extract"
    logger.debug("Starting %s run: %s -> %s", mode, config.source_style, config.target_style)

    try:
      if config.is_transcoding:
        transcoder = Transcoder(config.target_shapes[0], config.language)
        output, style = transcoder.fold(lines, config.source_shapes)
      else:
        extractor = Extractor(config.whitespace_mode, config.language)
        output, style = extractor.fold(lines, config.source_shapes)
    except LiterateError as e:
      return ConversionResult(success=False, errors=[render_error(e)])

    return ConversionResult(code=join_lines(output), inferred_style=describe_style(style))
