"""CLI entry point for dumping Chrome bookmark URLs.

Without arguments every URL under the bookmark bar is printed. Folder names
given as positional arguments select a subtree, for example
``dumpbookmarks recipes italian``. ``--no-descend`` (or ``-descend=false``)
limits output to the URLs directly inside the selected folder.
"""

from __future__ import annotations

# Standard library imports (alphabetical within groups)
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

# Third-party imports
from dotenv import load_dotenv

# Internal imports
from bookmark_dump.config import BOOKMARKS_FILE_ENV, DEFAULT_BOOKMARKS_RELATIVE_PATH
from bookmark_dump.dumper import iter_urls, write_urls
from bookmark_dump.locator import SubtreeNotFoundError, require_subtree
from bookmark_dump.parser import (
    BookmarksReadError,
    BookmarksSchemaError,
    BookmarksTooDeepError,
    load_bookmarks,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

_TRUE_VALUES = frozenset({"1", "t", "true", "y", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "f", "false", "n", "no", "off"})

# Long options that may also be spelled with a single dash, as Go's flag package allows.
_SINGLE_DASH_OPTIONS = ("descend", "filename", "verbose")


class HomeDirectoryError(RuntimeError):
    """Raised when the current user's home directory cannot be determined."""


def configure_logging(*, verbose: bool) -> None:
    """Configure root logging on stderr (debug when verbose, warnings otherwise)."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _normalise_flags(argv: Sequence[str]) -> list[str]:
    """Rewrite ``-descend``-style options and ``--descend=<bool>`` into argparse spellings."""
    normalised: list[str] = []
    for arg in argv:
        if arg == "--":
            normalised.extend(argv[len(normalised):])
            break
        if arg.startswith("-") and not arg.startswith("--"):
            if arg[1:].partition("=")[0] in _SINGLE_DASH_OPTIONS:
                arg = f"-{arg}"
        if arg.startswith("--descend="):
            value = arg.partition("=")[2].strip().lower()
            if value in _TRUE_VALUES:
                arg = "--descend"
            elif value in _FALSE_VALUES:
                arg = "--no-descend"
        normalised.append(arg)
    return normalised


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dumpbookmarks",
        description="Print the URLs stored in a Chrome bookmarks file, one per line",
    )
    parser.add_argument(
        "path",
        nargs="*",
        metavar="FOLDER",
        help="Folder names leading from the bookmark bar to the subtree to dump",
    )
    parser.add_argument(
        "--descend",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Descend into subfolders (default: %(default)s)",
    )
    parser.add_argument(
        "--filename",
        help=(
            "Chrome bookmarks file to process. Falls back to the environment variable"
            f" {BOOKMARKS_FILE_ENV}, then ~/{DEFAULT_BOOKMARKS_RELATIVE_PATH}."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    raw = sys.argv[1:] if argv is None else argv
    return _build_parser().parse_args(_normalise_flags(raw))


def default_bookmarks_path() -> Path:
    """Return the Chrome bookmarks file inside the user's home directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryError(str(exc)) from exc
    return home / DEFAULT_BOOKMARKS_RELATIVE_PATH


def resolve_bookmarks_path(filename: str | None) -> Path:
    """Pick the bookmarks file: explicit flag, then environment, then home default."""
    resolved = filename or os.getenv(BOOKMARKS_FILE_ENV)
    if resolved:
        try:
            return Path(resolved).expanduser()
        except RuntimeError as exc:
            raise HomeDirectoryError(str(exc)) from exc
    return default_bookmarks_path()


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the bookmark dump CLI."""
    load_dotenv()
    args = _parse_args(argv)
    configure_logging(verbose=args.verbose)
    logger = logging.getLogger("bookmark_dump")

    try:
        bookmarks_path = resolve_bookmarks_path(args.filename)
    except HomeDirectoryError as exc:
        msg = f"Unable to determine user's home directory: {exc}"
        raise SystemExit(msg) from exc

    try:
        tree = load_bookmarks(bookmarks_path)
    except BookmarksReadError as exc:
        msg = f"Error reading bookmarks file: {exc}"
        raise SystemExit(msg) from exc
    except BookmarksTooDeepError as exc:
        msg = f"Error parsing bookmarks file, folders are nested too deeply: {exc}"
        raise SystemExit(msg) from exc
    except BookmarksSchemaError as exc:
        msg = f"Error parsing bookmarks file, has the schema changed?: {exc}"
        raise SystemExit(msg) from exc

    try:
        start = require_subtree(tree.bookmark_bar, args.path)
    except SubtreeNotFoundError as exc:
        msg = f"Requested bookmarks not found: {exc}"
        raise SystemExit(msg) from exc

    try:
        count = write_urls(iter_urls(start, descend=args.descend))
    except BrokenPipeError:
        # The reader went away (e.g. piped into head); silence the final flush at exit.
        os.dup2(os.open(os.devnull, os.O_WRONLY), sys.stdout.fileno())
        raise SystemExit(1) from None
    logger.debug("Dumped %d URLs from %s", count, bookmarks_path)


if __name__ == "__main__":
    main()
