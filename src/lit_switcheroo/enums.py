"""
Enumerations for lit-switcheroo.

This module defines the small closed vocabularies shared across the codebase:
the delimiter families understood by the recognizer, the begin/end side of
bracket-style delimiters, and the whitespace handling modes of the extractor.
"""

from enum import Enum, auto
from typing import Optional


class DelimiterKind(Enum):
  """
  The markup family a delimiter belongs to.

  Used as the tag of the `Delimiter` union in `lit_switcheroo.core.delimiters`.
  """

  LATEX = auto()  # \begin{code} / \end{code}
  ORG_MODE = auto()  # #+BEGIN_SRC / #+END_SRC
  BIRD = auto()  # > code
  JEKYLL = auto()  # {% highlight %} / {% endhighlight %}
  TILDE_FENCE = auto()  # ~~~
  BACKTICK_FENCE = auto()  # ```


class BeginEnd(Enum):
  """Side of a bracket-style delimiter."""

  BEGIN = "begin"
  END = "end"


class WhitespaceMode(str, Enum):
  """
  Controls how the extractor treats whitespace around code blocks.

  KEEP_INDENT drops the Bird marker plus one space and omits blank filler
  lines. KEEP_ALL maps every input line to exactly one output line, so line
  numbers in the extracted code agree with the source document.
  """

  KEEP_INDENT = "indent"
  KEEP_ALL = "all"


def parse_whitespace_mode(name: str) -> Optional[WhitespaceMode]:
  """
  Resolves a user supplied whitespace mode name.

  Args:
      name (str): Either 'indent' or 'all' (case-insensitive).

  Returns:
      Optional[WhitespaceMode]: The matching mode, or None if the name is unknown.
  """
  key = name.strip().lower()
  for mode in WhitespaceMode:
    if mode.value == key:
      return mode
  return None
