"""
Delimiter Model.

Defines the closed set of code-block markers understood by lit-switcheroo and
the pure functions operating on them:

- ``recognize``: classify a single line against an ordered list of shapes.
- ``matches``: decide whether a closing marker terminates an open block.
- ``is_begin``: decide whether a marker may open a block from prose.

Supported markers::

    LaTeX     \\begin{code} ... \\end{code}
    OrgMode   #+BEGIN_SRC lang ... #+END_SRC
    Bird      > code
    Jekyll    {% highlight lang %} ... {% endhighlight %}
    Fences    ~~~lang ... ~~~   and   ```lang ... ```

A *shape* is a `Delimiter` used as a recognition template; its language tag is
the tag the caller asked for, not one parsed from a document.
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterable, Optional

from lit_switcheroo.enums import BeginEnd, DelimiterKind

_LANGUAGE_KINDS = frozenset(
  {
    DelimiterKind.ORG_MODE,
    DelimiterKind.JEKYLL,
    DelimiterKind.TILDE_FENCE,
    DelimiterKind.BACKTICK_FENCE,
  }
)
_FENCE_KINDS = frozenset({DelimiterKind.TILDE_FENCE, DelimiterKind.BACKTICK_FENCE})
_BRACKET_KINDS = frozenset({DelimiterKind.LATEX, DelimiterKind.ORG_MODE, DelimiterKind.JEKYLL})


@dataclass(frozen=True)
class Delimiter:
  """
  A single code-block marker.

  Attributes:
      kind: The markup family (LaTeX, Bird, fences, ...).
      side: BEGIN or END for LaTeX, OrgMode and Jekyll. None for Bird and fences.
      language: Optional language tag. Only meaningful for OrgMode, Jekyll and fences.
  """

  kind: DelimiterKind
  side: Optional[BeginEnd] = None
  language: Optional[str] = None

  @classmethod
  def latex(cls, side: BeginEnd) -> "Delimiter":
    return cls(DelimiterKind.LATEX, side)

  @classmethod
  def org_mode(cls, side: BeginEnd, language: Optional[str] = None) -> "Delimiter":
    return cls(DelimiterKind.ORG_MODE, side, language)

  @classmethod
  def bird(cls) -> "Delimiter":
    return cls(DelimiterKind.BIRD)

  @classmethod
  def jekyll(cls, side: BeginEnd, language: Optional[str] = None) -> "Delimiter":
    return cls(DelimiterKind.JEKYLL, side, language)

  @classmethod
  def tilde_fence(cls, language: Optional[str] = None) -> "Delimiter":
    return cls(DelimiterKind.TILDE_FENCE, None, language)

  @classmethod
  def backtick_fence(cls, language: Optional[str] = None) -> "Delimiter":
    return cls(DelimiterKind.BACKTICK_FENCE, None, language)

  @property
  def is_bird(self) -> bool:
    return self.kind is DelimiterKind.BIRD

  @property
  def carries_language(self) -> bool:
    """True if this kind of marker can be annotated with a language tag."""
    return self.kind in _LANGUAGE_KINDS

  def with_language(self, language: Optional[str]) -> "Delimiter":
    """
    Returns a copy carrying `language`.

    Bird and LaTeX markers have no language slot and are returned unchanged.

    Args:
        language (Optional[str]): The new tag, or None to clear it.

    Returns:
        Delimiter: The re-tagged marker.
    """
    if not self.carries_language:
      return self
    return replace(self, language=language)

  def begin_form(self) -> "Delimiter":
    """
    The marker that opens a block of this shape, keeping the language tag.
    """
    if self.kind in _BRACKET_KINDS:
      return replace(self, side=BeginEnd.BEGIN)
    return self

  def end_form(self) -> "Delimiter":
    """
    The marker that closes a block of this shape.

    Derived from the begin form with the language tag cleared, so fences close
    with a bare fence.
    """
    opened = self.begin_form().with_language(None)
    if self.kind in _BRACKET_KINDS:
      return replace(opened, side=BeginEnd.END)
    return opened

  def render(self) -> str:
    """
    Serializes the marker to the text it occupies in a document.

    Returns:
        str: e.g. ``\\begin{code}``, ``#+BEGIN_SRC haskell`` or ``~~~``.
    """
    return _RENDERERS[self.kind](self)

  def __str__(self) -> str:
    return self.render()


def _render_latex(d: Delimiter) -> str:
  return "\\begin{code}" if d.side is BeginEnd.BEGIN else "\\end{code}"


def _render_org_mode(d: Delimiter) -> str:
  if d.side is BeginEnd.END:
    return "#+END_SRC"
  return "#+BEGIN_SRC" + (f" {d.language}" if d.language else "")


def _render_jekyll(d: Delimiter) -> str:
  if d.side is BeginEnd.END:
    return "{% endhighlight %}"
  return "{% highlight " + (d.language or "") + " %}"


_RENDERERS: Dict[DelimiterKind, Callable[[Delimiter], str]] = {
  DelimiterKind.LATEX: _render_latex,
  DelimiterKind.ORG_MODE: _render_org_mode,
  DelimiterKind.BIRD: lambda d: ">",
  DelimiterKind.JEKYLL: _render_jekyll,
  DelimiterKind.TILDE_FENCE: lambda d: "~~~" + (d.language or ""),
  DelimiterKind.BACKTICK_FENCE: lambda d: "```" + (d.language or ""),
}


def contains_language(language: Optional[str], line: str) -> bool:
  """
  Case-insensitive substring test of a requested language tag against a line.

  Args:
      language (Optional[str]): The requested tag. None matches every line.
      line (str): The raw document line.

  Returns:
      bool: True if the line satisfies the request.
  """
  if language is None:
    return True
  return language.lower() in line.lower()


def is_bird_tag(line: str) -> bool:
  """A Bird line is a bare ``>`` or starts with ``> ``."""
  return line == ">" or line.startswith("> ")


def _recognize_shape(shape: Delimiter, line: str) -> Optional[Delimiter]:
  stripped = line.lstrip()
  kind = shape.kind

  if kind is DelimiterKind.BIRD:
    return shape if is_bird_tag(line) else None

  if kind is DelimiterKind.LATEX:
    marker = "\\begin{code}" if shape.side is BeginEnd.BEGIN else "\\end{code}"
    return shape if stripped.startswith(marker) else None

  if kind is DelimiterKind.ORG_MODE:
    if shape.side is BeginEnd.BEGIN:
      if stripped.startswith("#+BEGIN_SRC") and contains_language(shape.language, line):
        return shape
      return None
    return Delimiter.org_mode(BeginEnd.END) if stripped.startswith("#+END_SRC") else None

  if kind is DelimiterKind.JEKYLL:
    if shape.side is BeginEnd.BEGIN:
      if (
        stripped.startswith("{% highlight")
        and contains_language(shape.language, line)
        and line.rstrip().endswith("%}")
      ):
        return shape
      return None
    return shape if stripped.startswith("{% endhighlight %}") else None

  # Fences: a mismatching tag still opens or closes a block, it just loses the tag.
  fence = "~~~" if kind is DelimiterKind.TILDE_FENCE else "```"
  if not stripped.startswith(fence):
    return None
  if contains_language(shape.language, line):
    return shape
  return shape.with_language(None)


def recognize(line: str, shapes: Iterable[Delimiter]) -> Optional[Delimiter]:
  """
  Classifies a line against an ordered collection of shapes.

  The first shape whose recognizer accepts the line wins.

  Args:
      line (str): A single document line without its newline.
      shapes (Iterable[Delimiter]): The active style.

  Returns:
      Optional[Delimiter]: The recognized marker instance, or None for prose/code.
  """
  for shape in shapes:
    found = _recognize_shape(shape, line)
    if found is not None:
      return found
  return None


def matches(opened: Delimiter, closed: Delimiter) -> bool:
  """
  Determines whether `closed` terminates a block opened by `opened`.

  Bracket-style pairs ignore language tags. Fences only close on an untagged
  fence of the same kind. Bird never participates.

  Args:
      opened (Delimiter): The marker that opened the current block.
      closed (Delimiter): The marker recognized on the current line.

  Returns:
      bool: True if the block is closed.
  """
  if opened.is_bird or closed.is_bird or opened.kind is not closed.kind:
    return False
  if opened.kind in _FENCE_KINDS:
    return closed.language is None
  return opened.side is BeginEnd.BEGIN and closed.side is BeginEnd.END


def is_begin(delimiter: Delimiter) -> bool:
  """
  True if the marker can open a block from prose.

  Every fence opens a block; bracket-style markers only on their BEGIN side.
  Bird is handled separately by the automata.
  """
  if delimiter.kind in _FENCE_KINDS:
    return True
  return delimiter.kind in _BRACKET_KINDS and delimiter.side is BeginEnd.BEGIN
