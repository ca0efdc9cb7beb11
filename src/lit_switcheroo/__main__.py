"""
Entry point for module execution (``python -m lit_switcheroo``).

This module delegates execution to the CLI handler in ``lit_switcheroo.cli.__main__``.
"""

import sys
from lit_switcheroo.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
