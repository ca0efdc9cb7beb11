"""
Error Model.

Both automata fail with one of exactly two errors. They are fatal to the run:
no partial output is produced.
"""

from lit_switcheroo.core.delimiters import Delimiter


class LiterateError(ValueError):
  """
  Base class for failures raised while processing a literate document.

  Attributes:
      delimiter (Delimiter): The marker responsible for the failure.
  """

  def __init__(self, delimiter: Delimiter):
    self.delimiter = delimiter
    super().__init__(render_error(self))


class SpuriousDelimiterError(LiterateError):
  """A marker appeared where it cannot open or close a block."""

  def __init__(self, line: int, delimiter: Delimiter):
    self.line = line
    super().__init__(delimiter)


class UnexpectedEndError(LiterateError):
  """The document ended inside a block that needs an explicit closing marker."""


def render_error(error: LiterateError) -> str:
  """
  Formats an error the way the CLI reports it.

  Args:
      error (LiterateError): The failure to describe.

  Returns:
      str: e.g. 'at line 3: spurious #+END_SRC'.
  """
  if isinstance(error, SpuriousDelimiterError):
    return f"at line {error.line}: spurious {error.delimiter.render()}"
  return f"unexpected end of file: unmatched {error.delimiter.render()}"
