"""Data models for the Chrome bookmarks tree."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from attrs import field, frozen
from pydantic import BaseModel, Field, field_validator

from .config import BOOKMARK_BAR_ROOT

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping


class NodeKind(str, Enum):
    """Kind of a bookmarks tree node.

    OTHER absorbs any ``type`` value Chrome may add in the future.
    """

    URL = "url"
    FOLDER = "folder"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> NodeKind:
        return cls.OTHER


@frozen
class BookmarkNode:
    """A bookmark (kind URL) or a folder holding ordered children."""

    name: str
    kind: NodeKind
    url: str = ""
    children: tuple[BookmarkNode, ...] = field(default=(), converter=tuple)

    @property
    def is_url(self) -> bool:
        """Return True when the node is a bookmark carrying a URL."""
        return self.kind is NodeKind.URL


@frozen
class BookmarksTree:
    """All named roots of a bookmarks document."""

    roots: Mapping[str, BookmarkNode]

    @property
    def bookmark_bar(self) -> BookmarkNode:
        """Return the bookmark bar root."""
        return self.roots[BOOKMARK_BAR_ROOT]


class BookmarkNodeModel(BaseModel):
    """Pydantic model for a node object in the bookmarks JSON."""

    name: str = ""
    type: str = ""
    url: str = ""
    children: list[BookmarkNodeModel] = Field(default_factory=list)

    @field_validator("name", "type", "url", mode="before")
    @classmethod
    def _null_to_empty_str(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("children", mode="before")
    @classmethod
    def _null_to_empty_list(cls, value: object) -> object:
        return [] if value is None else value

    def to_node(self) -> BookmarkNode:
        """Convert the model into an immutable tree node.

        Children listed on a URL node are dropped.
        """
        kind = NodeKind(self.type)
        if kind is NodeKind.URL:
            return BookmarkNode(name=self.name, kind=kind, url=self.url)
        return BookmarkNode(
            name=self.name,
            kind=kind,
            children=[child.to_node() for child in self.children],
        )


class BookmarksFileModel(BaseModel):
    """Pydantic model for the whole bookmarks document."""

    roots: dict[str, BookmarkNodeModel]

    @field_validator("roots", mode="before")
    @classmethod
    def _null_to_empty_dict(cls, value: object) -> object:
        return {} if value is None else value

    def to_tree(self) -> BookmarksTree:
        """Convert every root into a tree node."""
        return BookmarksTree(roots={name: node.to_node() for name, node in self.roots.items()})
