"""
Diagnostics output for lit-switcheroo.

Every module logs through a plain ``logging`` logger under the
``lit_switcheroo`` namespace. A single `RichHandler` on that namespace
renders the records on standard error, leaving standard output to the
extracted code or transcoded document.

The Rich Console sits behind `console`, a proxy whose backend can be swapped
at runtime. Tests install a recording console with `set_console` and read the
diagnostics back with `console.export_text()`.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "lit_switcheroo"

# Sits between INFO and WARNING
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

STYLES = Theme(
  {
    "logging.level.success": "bold green",
    "path": "underline cyan",
    "marker": "bold magenta",
    "lineno": "yellow",
  }
)

_logger = logging.getLogger(LOGGER_NAME)


def _stderr_console() -> Console:
  return Console(theme=STYLES, stderr=True)


class _ConsoleProxy:
  """
  Stable handle on the Rich Console used for diagnostics.

  Modules import `console` once; swapping the backend re-targets both direct
  printing and the logging handler.
  """

  def __init__(self, backend: Optional[Console] = None):
    self._backend = backend or _stderr_console()
    self._handler: Optional[RichHandler] = None
    self._attach()

  @property
  def backend(self) -> Console:
    return self._backend

  def _attach(self) -> None:
    if self._handler is not None:
      _logger.removeHandler(self._handler)
    self._handler = RichHandler(
      console=self._backend,
      markup=True,
      show_time=False,
      show_path=False,
      rich_tracebacks=True,
    )
    _logger.addHandler(self._handler)

  def use(self, backend: Console) -> None:
    """
    Replaces the Console that receives diagnostics.

    Args:
        backend (Console): E.g. ``Console(record=True)`` to capture output.
    """
    self._backend = backend
    self._attach()

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()
_logger.setLevel(logging.INFO)


def set_console(new_console: Console) -> None:
  """
  Routes all diagnostics to another Console.

  Args:
      new_console (Console): The Rich Console to use from now on.
  """
  console.use(new_console)


def reset_console() -> None:
  """Restores diagnostics to a fresh stderr Console at INFO level."""
  console.use(_stderr_console())
  _logger.setLevel(logging.INFO)


def set_verbose(verbose: bool) -> None:
  """
  Toggles debug output for the whole package.

  Args:
      verbose (bool): True shows the automata's DEBUG records.
  """
  _logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def log_info(msg: str) -> None:
  """
  Reports progress.

  Args:
      msg (str): Message text. Rich markup such as ``[path]...[/path]`` is rendered.
  """
  _logger.info(msg)


def log_success(msg: str) -> None:
  _logger.log(SUCCESS, msg)


def log_warning(msg: str) -> None:
  _logger.warning(msg)


def log_error(msg: str) -> None:
  """
  Reports a failure. Callers escape untrusted text with `rich.markup.escape`.

  Args:
      msg (str): Message text.
  """
  _logger.error(msg)
