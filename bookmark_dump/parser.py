"""Load a Chrome bookmarks JSON file into an immutable tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .config import BOOKMARK_BAR_ROOT
from .models import BookmarksFileModel, BookmarksTree

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path

    from pydantic_core import ErrorDetails

LOGGER = logging.getLogger(__name__)


class BookmarksLoadError(RuntimeError):
    """Raised when a bookmarks file cannot be turned into a tree."""


class BookmarksReadError(BookmarksLoadError):
    """Raised when the bookmarks file cannot be read."""


class BookmarksSchemaError(BookmarksLoadError):
    """Raised when the bookmarks document does not have the expected shape."""


class BookmarksTooDeepError(BookmarksSchemaError):
    """Raised when folders nest deeper than the JSON parser's recursion limit."""


def load_bookmarks(path: Path) -> BookmarksTree:
    """Read and parse the bookmarks file at ``path``.

    The JSON parser stops at roughly 200 levels of nesting; deeper folder
    trees raise BookmarksTooDeepError.
    """
    LOGGER.debug("Reading bookmarks from %s", path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        msg = f"{path}: {exc.strerror or exc}"
        raise BookmarksReadError(msg) from exc
    return parse_bookmarks(raw)


def parse_bookmarks(raw: bytes | str) -> BookmarksTree:
    """Validate a raw bookmarks document and build its tree."""
    try:
        document = BookmarksFileModel.model_validate_json(raw)
    except ValidationError as exc:
        if any(_is_recursion_limit(error) for error in exc.errors()):
            msg = "nesting exceeds the JSON parser's recursion limit"
            raise BookmarksTooDeepError(msg) from exc
        raise BookmarksSchemaError(str(exc)) from exc

    if BOOKMARK_BAR_ROOT not in document.roots:
        msg = f"document has no '{BOOKMARK_BAR_ROOT}' root"
        raise BookmarksSchemaError(msg)

    tree = document.to_tree()
    LOGGER.debug("Parsed bookmarks roots: %s", ", ".join(tree.roots))
    return tree


def _is_recursion_limit(error: ErrorDetails) -> bool:
    return error["type"] == "json_invalid" and "recursion limit" in error["msg"]

