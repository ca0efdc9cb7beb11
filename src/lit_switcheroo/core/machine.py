"""
Shared scaffolding for the extraction and transcoding automata.

Both automata are a left fold over the document's lines carrying the pair
``(state, style)``. ``state`` is None while in prose, or the marker that
opened the current block. ``style`` is the active style, which may widen once
through inference.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from lit_switcheroo.core.delimiters import Delimiter
from lit_switcheroo.core.styles import Style
from lit_switcheroo.enums import WhitespaceMode

State = Optional[Delimiter]


@dataclass(frozen=True)
class Step:
  """
  Result of feeding one line to an automaton.

  Attributes:
      emitted: Output lines produced for this input line.
      state: The state carried to the next line.
      style: The style carried to the next line.
  """

  state: State
  style: Style
  emitted: List[str] = field(default_factory=list)


def split_lines(text: str) -> List[str]:
  """
  Splits a document on newlines.

  A trailing newline does not produce an extra empty line, and carriage
  returns are left in place.
  """
  lines = text.split("\n")
  if lines and lines[-1] == "":
    lines.pop()
  return lines


def join_lines(lines: List[str]) -> str:
  """Joins lines, terminating every line with a newline."""
  return "".join(f"{line}\n" for line in lines)


def strip_bird(line: str, whitespace: WhitespaceMode = WhitespaceMode.KEEP_INDENT) -> str:
  """
  Removes the Bird marker from a line recognized as Bird.

  KEEP_INDENT removes ``>`` and at most one following space. KEEP_ALL removes
  the marker and its trailing character as a single unit.

  Args:
      line (str): A line that is exactly ``>`` or starts with ``> ``.
      whitespace (WhitespaceMode): The active whitespace mode.

  Returns:
      str: The code carried by the line.
  """
  if whitespace is WhitespaceMode.KEEP_ALL:
    return line[2:]
  body = line[1:]
  return body[1:] if body.startswith(" ") else body
