"""
Style Presets and Inference.

A *style* is an ordered tuple of delimiter shapes describing which markers the
recognizer should look for. Order matters: recognition is first-match-wins.

An empty style means "infer": every known shape is tried until the first
marker is seen, at which point the style is pinned to that marker's family
for the rest of the document.
"""

import logging
from typing import Dict, List, Optional, Tuple

from lit_switcheroo.core.delimiters import Delimiter
from lit_switcheroo.enums import BeginEnd, DelimiterKind

logger = logging.getLogger(__name__)

Style = Tuple[Delimiter, ...]

INFER: Style = ()
LATEX: Style = (Delimiter.latex(BeginEnd.BEGIN), Delimiter.latex(BeginEnd.END))
BIRD: Style = (Delimiter.bird(),)
ORG_MODE: Style = (Delimiter.org_mode(BeginEnd.BEGIN), Delimiter.org_mode(BeginEnd.END))
JEKYLL: Style = (Delimiter.jekyll(BeginEnd.BEGIN), Delimiter.jekyll(BeginEnd.END))
TILDE_FENCE: Style = (Delimiter.tilde_fence(),)
BACKTICK_FENCE: Style = (Delimiter.backtick_fence(),)
HASKELL: Style = LATEX + BIRD
MARKDOWN: Style = BIRD + TILDE_FENCE + BACKTICK_FENCE
ALL: Style = LATEX + MARKDOWN + ORG_MODE + JEKYLL

STYLE_PRESETS: Dict[str, Style] = {
  "all": ALL,
  "backtickfence": BACKTICK_FENCE,
  "bird": BIRD,
  "haskell": HASKELL,
  "infer": INFER,
  "jekyll": JEKYLL,
  "latex": LATEX,
  "markdown": MARKDOWN,
  "orgmode": ORG_MODE,
  "tildefence": TILDE_FENCE,
}


def parse_style(name: str) -> Optional[Style]:
  """
  Resolves a preset name to its style.

  Args:
      name (str): Preset name (case-insensitive), e.g. 'markdown' or 'latex'.

  Returns:
      Optional[Style]: The preset, or None if the name is unknown.
  """
  return STYLE_PRESETS.get(name.strip().lower())


def set_language(language: Optional[str], style: Style) -> Style:
  """
  Re-tags every language-carrying shape of a style.

  Bird and LaTeX shapes have no language slot and pass through untouched.

  Args:
      language (Optional[str]): Tag to apply, or None to clear existing tags.
      style (Style): The style to rewrite.

  Returns:
      Style: A new style with the same order.
  """
  return tuple(shape.with_language(language) for shape in style)


def effective_style(style: Style, language: Optional[str] = None) -> Style:
  """
  The shapes to recognize against for the current line.

  A non-empty style is used as-is; the empty style falls back to every shape.
  """
  return style or set_language(language, ALL)


def inferred_style(delimiter: Optional[Delimiter], language: Optional[str] = None) -> Style:
  """
  Maps a first observed marker to the family it belongs to.

  LaTeX, Jekyll and OrgMode markers infer their own family. Bird and both
  fences infer the whole markdown family.

  Args:
      delimiter (Optional[Delimiter]): The marker on the current line, if any.
      language (Optional[str]): Language tag to apply to the inferred family.

  Returns:
      Style: The inferred family, or the empty style if nothing was seen.
  """
  if delimiter is None:
    return INFER
  if delimiter.kind is DelimiterKind.LATEX:
    family = LATEX
  elif delimiter.kind is DelimiterKind.JEKYLL:
    family = JEKYLL
  elif delimiter.kind is DelimiterKind.ORG_MODE:
    family = ORG_MODE
  else:
    family = MARKDOWN
  return set_language(language, family)


def advance_style(style: Style, delimiter: Optional[Delimiter], language: Optional[str] = None) -> Style:
  """
  Computes the style carried to the next line.

  Once a style is non-empty it never changes again within a run.
  """
  if style:
    return style
  widened = inferred_style(delimiter, language)
  if widened:
    logger.debug("Inferred style %s from %r", describe_style(widened), delimiter.render())
  return widened


def describe_style(style: Style) -> List[str]:
  """
  Human readable marker list for a style.

  Returns:
      List[str]: The rendering of each shape, e.g. ['\\begin{code}', '\\end{code}'].
  """
  return [shape.render() for shape in style]
