"""Emit the URLs held in a bookmarks subtree."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Iterator

    from .models import BookmarkNode

LOGGER = logging.getLogger(__name__)


def iter_urls(node: BookmarkNode, *, descend: bool = True) -> Iterator[str]:
    """Yield the URLs under ``node`` in document order.

    Non-URL children are expanded in place when ``descend`` is set and
    skipped otherwise.
    """
    for child in node.children:
        if child.is_url:
            yield child.url
        elif descend:
            yield from iter_urls(child, descend=descend)


def write_urls(urls: Iterable[str], stream: TextIO | None = None) -> int:
    """Write one URL per line as they are produced and return how many were written."""
    out = stream if stream is not None else sys.stdout
    count = 0
    for url in urls:
        out.write(f"{url}\n")
        count += 1
    out.flush()
    LOGGER.debug("Wrote %d URLs", count)
    return count
