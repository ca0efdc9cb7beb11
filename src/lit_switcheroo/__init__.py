"""
lit-switcheroo Package.

Extracts code from literate documents and transcodes them between markup
conventions: LaTeX ``\\begin{code}`` blocks, Bird tracks, Markdown fences,
Jekyll ``{% highlight %}`` blocks and Org-mode ``#+BEGIN_SRC`` blocks.

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import lit_switcheroo as lit
    doc = "Some prose.\\n\\n> main = print 42\\n"
    print(lit.extract(doc))
    # main = print 42
    print(lit.transcode(doc, source="bird", target="backtickfence"))

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from lit_switcheroo import LiterateEngine, RuntimeConfig

    config = RuntimeConfig(source_style="markdown", language="haskell")
    res = LiterateEngine(config).run(doc)

    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from typing import Optional

from lit_switcheroo.config import RuntimeConfig
from lit_switcheroo.core.conversion_result import ConversionResult
from lit_switcheroo.core.engine import LiterateEngine

__version__ = "0.0.1"


def _run(config: RuntimeConfig, text: str) -> str:
  result = LiterateEngine(config).run(text)
  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Conversion failed:\n{error_msg}")
  return result.code


def extract(
  text: str,
  style: str = "infer",
  whitespace: str = "indent",
  language: Optional[str] = None,
) -> str:
  """
  Extracts the code from a literate document.

  Args:
      text (str): The literate document.
      style (str): Preset name of the markers to recognize (default: infer).
      whitespace (str): 'indent' (default) or 'all'.
      language (str, optional): Only extract blocks tagged with this language.

  Returns:
      str: The extracted code.

  Raises:
      ValueError: On an unknown preset, a spurious marker or an unterminated block.
  """
  config = RuntimeConfig(source_style=style, whitespace_mode=whitespace, language=language)
  return _run(config, text)


def transcode(
  text: str,
  source: str = "infer",
  target: str = "markdown",
  language: Optional[str] = None,
) -> str:
  """
  Rewrites a literate document in another markup convention.

  Args:
      text (str): The literate document.
      source (str): Preset name of the markers to recognize (default: infer).
      target (str): Preset name to render blocks with. Its first marker is used.
      language (str, optional): Language filter for the source and tag for the target.

  Returns:
      str: The transcoded document.

  Raises:
      ValueError: On an unknown preset, a spurious marker or an unterminated block.
  """
  config = RuntimeConfig(source_style=source, target_style=target, language=language)
  return _run(config, text)


__all__ = [
  "ConversionResult",
  "LiterateEngine",
  "RuntimeConfig",
  "extract",
  "transcode",
  "__version__",
]
