"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so tests that swap the Rich console do not leak.
- Sample literate documents shared across test modules.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'lit_switcheroo' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from lit_switcheroo.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures logging is routed to a fresh console after every test."""
  yield
  reset_console()


@pytest.fixture
def latex_doc():
  return "Some prose.\n\\begin{code}\nx = 1\ny = 2\n\\end{code}\nMore prose.\n"


@pytest.fixture
def bird_doc():
  return "Some prose.\n\n> x = 1\n> y = 2\n\nMore prose.\n"


@pytest.fixture
def markdown_doc():
  return "# Title\n\n```haskell\nmain = print 1\n```\n\nText.\n\n~~~\nfoo = 2\n~~~\n"
