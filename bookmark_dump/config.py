"""Global configuration constants for bookmark dump."""

from __future__ import annotations

from pathlib import Path

# Only this root of the bookmarks document is traversed.
BOOKMARK_BAR_ROOT: str = "bookmark_bar"

# Location of the Chrome profile bookmarks file, relative to the home directory.
DEFAULT_BOOKMARKS_RELATIVE_PATH: Path = Path(".config/google-chrome/Default/Bookmarks")

# Environment variable (or .env entry) overriding the default bookmarks file.
BOOKMARKS_FILE_ENV: str = "CHROME_BOOKMARKS_FILE"
