"""Run the bookmark dump CLI from a source checkout."""

from __future__ import annotations

from bookmark_dump.cli import main

if __name__ == "__main__":
    main()
