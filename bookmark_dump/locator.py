"""Find the subtree named by a sequence of folder names."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from .models import BookmarkNode

LOGGER = logging.getLogger(__name__)


class SubtreeNotFoundError(LookupError):
    """Raised when a folder path does not resolve to a node."""

    def __init__(self, path: Sequence[str]) -> None:
        """Remember the path that failed to resolve."""
        self.path = tuple(path)
        super().__init__(" -> ".join(self.path))


def locate(root: BookmarkNode, path: Sequence[str]) -> BookmarkNode | None:
    """Walk ``path`` down from ``root``, returning None when it does not resolve.

    The first child whose name matches exactly is followed; later siblings
    with the same name are never tried.
    """
    if not path:
        return root
    for child in root.children:
        if child.name == path[0]:
            return locate(child, path[1:])
    return None


def require_subtree(root: BookmarkNode, path: Sequence[str]) -> BookmarkNode:
    """Like :func:`locate` but raise SubtreeNotFoundError on a miss."""
    node = locate(root, path)
    if node is None:
        raise SubtreeNotFoundError(path)
    LOGGER.debug("Located subtree %r (%s)", node.name, node.kind.value)
    return node
