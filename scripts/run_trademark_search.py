"""
Run a trademark search from CLI.
"""

from __future__ import annotations

from trademark_search.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
