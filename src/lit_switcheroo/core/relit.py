"""
Transcoding Automaton.

Rewrites a literate document from one markup convention to another. It walks
the same state machine as `lit_switcheroo.core.unlit`, but instead of dropping
prose it passes prose through and re-renders every block boundary and code
line in a single target shape.

Markers are emitted without the indentation they had in the source document.
"""

import logging
from typing import List, Optional, Tuple

from lit_switcheroo.core.delimiters import Delimiter, is_begin, matches, recognize
from lit_switcheroo.core.errors import SpuriousDelimiterError, UnexpectedEndError
from lit_switcheroo.core.machine import State, Step, join_lines, split_lines, strip_bird
from lit_switcheroo.core.styles import INFER, Style, advance_style, effective_style

logger = logging.getLogger(__name__)


class Transcoder:
  """
  Line-by-line transcoder targeting a single delimiter shape.
  """

  def __init__(self, target: Delimiter, language: Optional[str] = None):
    """
    Args:
        target (Delimiter): Shape used to render every block. Its language tag,
            if any, is written on opening markers.
        language (Optional[str]): Tag applied to source shapes chosen by inference.
    """
    self.target = target
    self.language = language

  def emit_code(self, line: str) -> str:
    if self.target.is_bird:
      return f"> {line}"
    return line

  def emit_open(self, content: Optional[str] = None) -> List[str]:
    """
    Lines opening a block in the target shape.

    Args:
        content (Optional[str]): Code carried by the opening line itself (Bird sources).
    """
    if self.target.is_bird:
      opened = [""]
    else:
      opened = [self.target.begin_form().render()]
    if content is not None:
      opened.append(self.emit_code(content))
    return opened

  def emit_close(self) -> str:
    if self.target.is_bird:
      return ""
    return self.target.end_form().render()

  def step(self, state: State, style: Style, lineno: int, line: str) -> Step:
    """
    Feeds a single line to the automaton.

    Args:
        state (State): None in prose, else the marker that opened the block.
        style (Style): The source style in effect before this line.
        lineno (int): 1-based line number, used for error reporting.
        line (str): The line without its newline.

    Returns:
        Step: Emitted lines plus the next state and style.

    Raises:
        SpuriousDelimiterError: If the line holds a marker that is invalid here.
    """
    found = recognize(line, effective_style(style, self.language))
    next_style = advance_style(style, found, self.language)

    if state is None:
      if found is None:
        return Step(None, next_style, [line])
      if found.is_bird:
        return Step(found, next_style, self.emit_open(strip_bird(line)))
      if is_begin(found):
        return Step(found, next_style, self.emit_open())
      raise SpuriousDelimiterError(lineno, found)

    if state.is_bird:
      if found is None:
        return Step(None, next_style, [self.emit_close(), line])
      if found.is_bird:
        return Step(state, next_style, [self.emit_code(strip_bird(line))])
    elif found is None or found.is_bird:
      return Step(state, next_style, [self.emit_code(line)])

    if matches(state, found):
      return Step(None, next_style, [self.emit_close()])
    raise SpuriousDelimiterError(lineno, found)

  def finish(self, state: State) -> List[str]:
    """
    Closes the document.

    Returns:
        List[str]: A closing marker if a Bird block is still open.

    Raises:
        UnexpectedEndError: If the document ended inside a non-Bird block.
    """
    if state is None:
      return []
    if state.is_bird:
      return [self.emit_close()]
    raise UnexpectedEndError(state)

  def fold(self, lines: List[str], style: Style = INFER) -> Tuple[List[str], Style]:
    state: State = None
    output: List[str] = []
    for lineno, line in enumerate(lines, start=1):
      result = self.step(state, style, lineno, line)
      state, style = result.state, result.style
      output.extend(result.emitted)
    output.extend(self.finish(state))
    logger.debug("Transcoded %d lines into %d using %r", len(lines), len(output), self.target.render())
    return output, style


def relit(
  text: str,
  source_style: Style,
  target_style: Style,
  language: Optional[str] = None,
) -> str:
  """
  Transcodes a literate document to another markup convention.

  Args:
      text (str): The full document.
      source_style (Style): Shapes to recognize. Empty means infer.
      target_style (Style): Output style. Only its first shape is used.
      language (Optional[str]): Tag applied to source shapes chosen by inference.

  Returns:
      str: The rewritten document.

  Raises:
      ValueError: If `target_style` is empty.
      LiterateError: On a spurious marker or an unterminated block.
  """
  if not target_style:
    raise ValueError("Transcoding requires a non-empty target style.")
  document, _ = Transcoder(target_style[0], language).fold(split_lines(text), source_style)
  return join_lines(document)
