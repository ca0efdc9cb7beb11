"""
Extraction Automaton.

Consumes a literate document and emits only the code it contains.

State transitions per line (``q`` = current state, ``q'`` = marker on the line)::

    prose  --no marker-->      prose   (emit nothing)
    prose  --Bird-->           Bird    (emit stripped code)
    prose  --begin marker-->   block
    prose  --other marker-->   error: spurious delimiter
    Bird   --no marker-->      prose
    Bird   --Bird-->           Bird    (emit stripped code)
    block  --no marker/Bird--> block   (emit raw line)
    block  --matching end-->   prose
    any    --other marker-->   error: spurious delimiter

Bird blocks end on the first line without a marker; every other block only
ends on its matching closing marker, and running out of input inside one is
an error.
"""

import logging
from typing import List, Optional, Tuple

from lit_switcheroo.core.delimiters import is_begin, matches, recognize
from lit_switcheroo.core.errors import SpuriousDelimiterError, UnexpectedEndError
from lit_switcheroo.core.machine import State, Step, join_lines, split_lines, strip_bird
from lit_switcheroo.core.styles import INFER, Style, advance_style, effective_style
from lit_switcheroo.enums import WhitespaceMode

logger = logging.getLogger(__name__)


class Extractor:
  """
  Line-by-line code extractor.

  Holds only the run configuration; the automaton state is threaded through
  `step` explicitly.
  """

  def __init__(
    self,
    whitespace: WhitespaceMode = WhitespaceMode.KEEP_INDENT,
    language: Optional[str] = None,
  ):
    """
    Args:
        whitespace (WhitespaceMode): Placeholder and Bird-stripping behaviour.
        language (Optional[str]): Tag applied to shapes chosen by inference.
    """
    self.whitespace = whitespace
    self.language = language

  def _keep_all(self) -> List[str]:
    return [""] if self.whitespace is WhitespaceMode.KEEP_ALL else []

  def _separator(self, has_output: bool) -> List[str]:
    # A blank line between consecutive blocks, never at the very top.
    if self.whitespace is WhitespaceMode.KEEP_INDENT and has_output:
      return [""]
    return []

  def step(self, state: State, style: Style, lineno: int, line: str, has_output: bool = False) -> Step:
    """
    Feeds a single line to the automaton.

    Args:
        state (State): None in prose, else the marker that opened the block.
        style (Style): The style in effect before this line.
        lineno (int): 1-based line number, used for error reporting.
        line (str): The line without its newline.
        has_output (bool): Whether any line has been emitted so far.

    Returns:
        Step: Emitted lines plus the next state and style.

    Raises:
        SpuriousDelimiterError: If the line holds a marker that is invalid here.
    """
    found = recognize(line, effective_style(style, self.language))
    next_style = advance_style(style, found, self.language)

    if state is None:
      if found is None:
        return Step(None, next_style, self._keep_all())
      if found.is_bird:
        return Step(found, next_style, self._separator(has_output) + [strip_bird(line, self.whitespace)])
      if is_begin(found):
        return Step(found, next_style, self._separator(has_output) + self._keep_all())
      raise SpuriousDelimiterError(lineno, found)

    if state.is_bird:
      if found is None:
        return Step(None, next_style, self._keep_all())
      if found.is_bird:
        return Step(state, next_style, [strip_bird(line, self.whitespace)])
    elif found is None or found.is_bird:
      return Step(state, next_style, [line])

    if matches(state, found):
      return Step(None, next_style, self._keep_all())
    raise SpuriousDelimiterError(lineno, found)

  def finish(self, state: State) -> None:
    """
    Validates the final state.

    Raises:
        UnexpectedEndError: If the document ended inside a non-Bird block.
    """
    if state is not None and not state.is_bird:
      raise UnexpectedEndError(state)

  def fold(self, lines: List[str], style: Style = INFER) -> Tuple[List[str], Style]:
    """
    Extracts the code lines of a document.

    Args:
        lines (List[str]): Document lines without newlines.
        style (Style): Shapes to recognize. Empty means infer.

    Returns:
        Tuple[List[str], Style]: The code lines and the style in effect at the end.
    """
    state: State = None
    output: List[str] = []
    for lineno, line in enumerate(lines, start=1):
      result = self.step(state, style, lineno, line, has_output=bool(output))
      state, style = result.state, result.style
      output.extend(result.emitted)
    self.finish(state)
    logger.debug("Extracted %d lines from %d", len(output), len(lines))
    return output, style


def unlit(
  text: str,
  style: Style = INFER,
  whitespace: WhitespaceMode = WhitespaceMode.KEEP_INDENT,
  language: Optional[str] = None,
) -> str:
  """
  Extracts the code from a literate document.

  Args:
      text (str): The full document.
      style (Style): Shapes to recognize. Empty means infer from the first marker.
      whitespace (WhitespaceMode): KEEP_INDENT (default) or KEEP_ALL.
      language (Optional[str]): Tag applied to shapes chosen by inference.
          Explicit styles should already be tagged via `set_language`.

  Returns:
      str: The code, one newline-terminated line per extracted line.

  Raises:
      LiterateError: On a spurious marker or an unterminated block.
  """
  code_lines, _ = Extractor(whitespace, language).fold(split_lines(text), style)
  return join_lines(code_lines)
