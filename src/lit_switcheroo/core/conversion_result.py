"""
Outcome of a single extraction or transcoding run.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  What `LiterateEngine.run` hands back instead of raising.

  Attributes:
      code: Extracted code or transcoded document. Empty on failure.
      errors: Rendered failure messages, e.g. 'at line 3: spurious #+END_SRC'.
      success: False once an automaton rejected the document.
      inferred_style: Rendered markers of the source style the run ended with.
  """

  code: str = ""
  errors: List[str] = Field(default_factory=list)
  success: bool = True
  inferred_style: Optional[List[str]] = Field(default=None, description="None when the run failed.")

  @property
  def has_errors(self) -> bool:
    return bool(self.errors)
