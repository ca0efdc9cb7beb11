"""
Tests for the Extraction Automaton.

Verifies:
1. Code extraction for every markup family.
2. Whitespace modes (filler lines, Bird stripping).
3. Style inference during a run.
4. Failure modes (spurious markers, unterminated blocks).
"""

import pytest

from lit_switcheroo.core.delimiters import Delimiter
from lit_switcheroo.core.errors import SpuriousDelimiterError, UnexpectedEndError
from lit_switcheroo.core.styles import BIRD, HASKELL, INFER, LATEX, MARKDOWN, ORG_MODE, parse_style, set_language
from lit_switcheroo.core.unlit import Extractor, unlit
from lit_switcheroo.enums import BeginEnd, WhitespaceMode

KEEP_ALL = WhitespaceMode.KEEP_ALL


def test_latex_block():
  assert unlit("\\begin{code}\nx = 1\n\\end{code}\n", LATEX) == "x = 1\n"


def test_bird_block():
  assert unlit("> x = 1\n> y = 2\n", BIRD) == "x = 1\ny = 2\n"


def test_prose_is_dropped(latex_doc, bird_doc):
  assert unlit(latex_doc) == "x = 1\ny = 2\n"
  assert unlit(bird_doc, BIRD) == "x = 1\ny = 2\n"


def test_no_markers_yields_nothing():
  """Without any marker every line is prose."""
  assert unlit("a\nb\n", LATEX) == ""
  assert unlit("a\nb\n", LATEX, KEEP_ALL) == "\n\n"


def test_keep_all_preserves_line_count(latex_doc, bird_doc):
  """In KEEP_ALL mode each input line maps to exactly one output line."""
  assert unlit(latex_doc, LATEX, KEEP_ALL) == "\n\nx = 1\ny = 2\n\n\n"
  assert unlit(bird_doc, BIRD, KEEP_ALL) == "\n\nx = 1\ny = 2\n\n\n"


def test_consecutive_blocks_are_separated():
  """A blank line separates blocks, but is never emitted at the top."""
  assert unlit("> a\n\n> b\n", BIRD) == "a\n\nb\n"
  doc = "\\begin{code}\na\n\\end{code}\nprose\n\\begin{code}\nb\n\\end{code}\n"
  assert unlit(doc, LATEX) == "a\n\nb\n"


def test_markdown_document(markdown_doc):
  assert unlit(markdown_doc) == "main = print 1\n\nfoo = 2\n"


def test_orgmode_and_jekyll():
  org = "* Heading\n#+BEGIN_SRC haskell\nmain = pure ()\n#+END_SRC\n"
  assert unlit(org, ORG_MODE) == "main = pure ()\n"
  jekyll = "text\n{% highlight haskell %}\nmain = pure ()\n{% endhighlight %}\n"
  assert unlit(jekyll, parse_style("jekyll")) == "main = pure ()\n"


def test_bird_stripping_modes():
  """The marker and one space are removed; a bare marker yields an empty line."""
  doc = ">   indented\n>\n"
  assert unlit(doc, BIRD) == "  indented\n\n"
  assert unlit(doc, BIRD, KEEP_ALL) == "  indented\n\n"


def test_bird_inside_bracket_block_is_raw():
  """Bird lines cannot interrupt a LaTeX block; they are emitted verbatim."""
  doc = "\\begin{code}\n> not bird\n\\end{code}\n"
  assert unlit(doc, HASKELL) == "> not bird\n"


def test_non_marker_lines_stay_inside_bracket_block():
  doc = "```\n\nprose-looking line\n```\n"
  assert unlit(doc, MARKDOWN) == "\nprose-looking line\n"


def test_inference_widens_to_markdown_family():
  """A tilde fence first pins markdown: backtick fences and Bird are then recognized."""
  doc = "~~~\na\n~~~\n```\nb\n```\n> c\n"
  assert unlit(doc, INFER) == "a\n\nb\n\nc\n"


def test_inference_excludes_other_families():
  """After pinning markdown a LaTeX marker is plain prose."""
  doc = "```\na\n```\n\\begin{code}\n"
  assert unlit(doc, INFER) == "a\n"
  with pytest.raises(UnexpectedEndError):
    unlit(doc, parse_style("all"))


def test_language_filter():
  org = set_language("haskell", ORG_MODE)
  doc = "#+BEGIN_SRC haskell\na\n#+END_SRC\n"
  assert unlit(doc, org) == "a\n"


def test_language_applies_to_inferred_style():
  assert unlit("```haskell\na\n```\n", INFER, language="haskell") == "a\n"


def test_spurious_end_in_prose():
  with pytest.raises(SpuriousDelimiterError) as exc:
    unlit("#+END_SRC\n")
  assert exc.value.line == 1
  assert exc.value.delimiter == Delimiter.org_mode(BeginEnd.END)
  assert str(exc.value) == "at line 1: spurious #+END_SRC"


def test_mismatched_close():
  with pytest.raises(SpuriousDelimiterError) as exc:
    unlit("\\begin{code}\nx\n#+END_SRC\n", parse_style("all"))
  assert exc.value.line == 3


def test_bird_block_cannot_be_closed_by_a_fence():
  with pytest.raises(SpuriousDelimiterError) as exc:
    unlit("> a\n```\n", MARKDOWN)
  assert exc.value.line == 2
  assert exc.value.delimiter == Delimiter.backtick_fence()


def test_unterminated_latex_block():
  with pytest.raises(UnexpectedEndError) as exc:
    unlit("\\begin{code}\nx = 1\n", LATEX)
  assert exc.value.delimiter == Delimiter.latex(BeginEnd.BEGIN)
  assert str(exc.value) == "unexpected end of file: unmatched \\begin{code}"


def test_bird_block_closes_at_eof():
  assert unlit("prose\n> x\n", BIRD) == "x\n"


def test_step_returns_next_state_and_style():
  """The automaton threads state and style explicitly."""
  extractor = Extractor()
  step = extractor.step(None, INFER, 1, "```haskell")
  assert step.state == Delimiter.backtick_fence()
  assert step.style == MARKDOWN
  assert step.emitted == []

  step = extractor.step(step.state, step.style, 2, "main = 1", has_output=False)
  assert step.emitted == ["main = 1"]


def test_fold_reports_final_style():
  lines, style = Extractor().fold(["#+BEGIN_SRC", "x", "#+END_SRC"])
  assert lines == ["x"]
  assert style == ORG_MODE
