"""
Tests for the Delimiter Model.

Verifies:
1. Per-shape recognition rules (prefix, trimming, Bird lookahead).
2. Language containment and fence downgrading.
3. The begin/end matching relation.
4. Marker rendering.
"""

import pytest

from lit_switcheroo.core.delimiters import (
  Delimiter,
  contains_language,
  is_begin,
  is_bird_tag,
  matches,
  recognize,
)
from lit_switcheroo.core.styles import ALL, BIRD, JEKYLL, LATEX, ORG_MODE, set_language
from lit_switcheroo.enums import BeginEnd

BEGIN = BeginEnd.BEGIN
END = BeginEnd.END


@pytest.mark.parametrize(
  "line, expected",
  [
    ("\\begin{code}", Delimiter.latex(BEGIN)),
    ("   \\begin{code}", Delimiter.latex(BEGIN)),
    ("\\end{code} % trailing", Delimiter.latex(END)),
    ("#+BEGIN_SRC haskell", Delimiter.org_mode(BEGIN)),
    ("  #+END_SRC", Delimiter.org_mode(END)),
    ("{% highlight haskell %}", Delimiter.jekyll(BEGIN)),
    ("{% endhighlight %}", Delimiter.jekyll(END)),
    ("~~~", Delimiter.tilde_fence()),
    ("```python", Delimiter.backtick_fence()),
    ("> x = 1", Delimiter.bird()),
    (">", Delimiter.bird()),
  ],
)
def test_recognize_all_shapes(line, expected):
  """Each marker form is recognized against the full style."""
  assert recognize(line, ALL) == expected


@pytest.mark.parametrize("line", ["", "plain prose", ">no space", " > indented bird", "``not a fence", "{% highlight x"])
def test_recognize_prose(line):
  """Lines that only resemble markers are prose."""
  assert recognize(line, ALL) is None


def test_bird_tag_lookahead():
  assert is_bird_tag(">")
  assert is_bird_tag("> ")
  assert not is_bird_tag(">>")
  assert not is_bird_tag("")


def test_recognize_respects_style():
  """Only shapes in the given style are tried."""
  assert recognize("```", LATEX) is None
  assert recognize("> x", LATEX) is None
  assert recognize("\\begin{code}", BIRD) is None


def test_first_match_wins():
  """The first shape in style order that accepts the line is returned."""
  style = (Delimiter.backtick_fence("python"), Delimiter.backtick_fence())
  assert recognize("```python", style) == Delimiter.backtick_fence("python")
  assert recognize("```", style) == Delimiter.backtick_fence()


def test_jekyll_begin_requires_closing_brace():
  assert recognize("{% highlight haskell", JEKYLL) is None
  assert recognize("{% highlight haskell %}   ", JEKYLL) == Delimiter.jekyll(BEGIN)


def test_contains_language():
  """Containment is a case-insensitive substring test; None is a wildcard."""
  assert contains_language(None, "anything")
  assert contains_language("Haskell", "```haskell")
  assert contains_language("hask", "#+BEGIN_SRC HASKELL")
  assert not contains_language("python", "```haskell")


def test_language_filter_on_bracket_styles():
  """OrgMode and Jekyll begin markers only match the requested language."""
  org = set_language("haskell", ORG_MODE)
  assert recognize("#+BEGIN_SRC haskell", org) == Delimiter.org_mode(BEGIN, "haskell")
  assert recognize("#+BEGIN_SRC python", org) is None
  # END is always untagged
  assert recognize("#+END_SRC", org) == Delimiter.org_mode(END)

  jek = set_language("haskell", JEKYLL)
  assert recognize("{% highlight haskell %}", jek) == Delimiter.jekyll(BEGIN, "haskell")
  assert recognize("{% highlight ruby %}", jek) is None


def test_fence_language_downgrade():
  """A fence with a different tag is still a fence, but untagged."""
  style = (Delimiter.backtick_fence("haskell"),)
  assert recognize("```haskell", style) == Delimiter.backtick_fence("haskell")
  assert recognize("```python", style) == Delimiter.backtick_fence()
  assert recognize("```", style) == Delimiter.backtick_fence()


@pytest.mark.parametrize(
  "opened, closed, expected",
  [
    (Delimiter.latex(BEGIN), Delimiter.latex(END), True),
    (Delimiter.latex(END), Delimiter.latex(BEGIN), False),
    (Delimiter.jekyll(BEGIN, "haskell"), Delimiter.jekyll(END), True),
    (Delimiter.org_mode(BEGIN, "haskell"), Delimiter.org_mode(END, "python"), True),
    (Delimiter.tilde_fence("haskell"), Delimiter.tilde_fence(), True),
    (Delimiter.tilde_fence(), Delimiter.tilde_fence("haskell"), False),
    (Delimiter.backtick_fence(), Delimiter.backtick_fence(), True),
    (Delimiter.backtick_fence(), Delimiter.tilde_fence(), False),
    (Delimiter.latex(BEGIN), Delimiter.org_mode(END), False),
    (Delimiter.bird(), Delimiter.bird(), False),
  ],
)
def test_matches(opened, closed, expected):
  assert matches(opened, closed) is expected


def test_is_begin():
  assert is_begin(Delimiter.latex(BEGIN))
  assert is_begin(Delimiter.org_mode(BEGIN))
  assert is_begin(Delimiter.jekyll(BEGIN))
  assert is_begin(Delimiter.tilde_fence())
  assert is_begin(Delimiter.backtick_fence("x"))
  assert not is_begin(Delimiter.latex(END))
  assert not is_begin(Delimiter.org_mode(END))
  assert not is_begin(Delimiter.bird())


@pytest.mark.parametrize(
  "delimiter, text",
  [
    (Delimiter.latex(BEGIN), "\\begin{code}"),
    (Delimiter.latex(END), "\\end{code}"),
    (Delimiter.org_mode(BEGIN), "#+BEGIN_SRC"),
    (Delimiter.org_mode(BEGIN, "haskell"), "#+BEGIN_SRC haskell"),
    (Delimiter.org_mode(END), "#+END_SRC"),
    (Delimiter.bird(), ">"),
    (Delimiter.jekyll(BEGIN), "{% highlight  %}"),
    (Delimiter.jekyll(BEGIN, "haskell"), "{% highlight haskell %}"),
    (Delimiter.jekyll(END), "{% endhighlight %}"),
    (Delimiter.tilde_fence(), "~~~"),
    (Delimiter.backtick_fence("haskell"), "```haskell"),
  ],
)
def test_render(delimiter, text):
  assert delimiter.render() == text
  assert str(delimiter) == text


def test_begin_and_end_forms():
  """End forms drop the language tag; Bird and LaTeX have no tag to drop."""
  fence = Delimiter.backtick_fence("haskell")
  assert fence.begin_form().render() == "```haskell"
  assert fence.end_form().render() == "```"

  org = Delimiter.org_mode(BEGIN, "haskell")
  assert org.end_form() == Delimiter.org_mode(END)
  assert Delimiter.latex(BEGIN).end_form() == Delimiter.latex(END)
  assert Delimiter.jekyll(BEGIN, "c").end_form().render() == "{% endhighlight %}"


def test_with_language_skips_untagged_kinds():
  assert Delimiter.bird().with_language("haskell") == Delimiter.bird()
  assert Delimiter.latex(BEGIN).with_language("haskell") == Delimiter.latex(BEGIN)
  assert Delimiter.tilde_fence().with_language("c").language == "c"
