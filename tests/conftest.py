"""Shared pytest fixtures for bookmark dump tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from bookmark_dump import parser

if TYPE_CHECKING:
    from pathlib import Path

    from bookmark_dump.models import BookmarkNode


def _url_node(name: str, url: str) -> dict[str, Any]:
    return {"type": "url", "name": name, "url": url}


def _folder_node(name: str, *children: dict[str, Any]) -> dict[str, Any]:
    return {"type": "folder", "name": name, "children": list(children)}


def _document(bookmark_bar: dict[str, Any], **other_roots: dict[str, Any]) -> dict[str, Any]:
    return {"roots": {"bookmark_bar": bookmark_bar, **other_roots}}


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """The bar with one URL and one subfolder holding another URL."""
    return _document(
        _folder_node(
            "bar",
            _url_node("A", "http://a"),
            _folder_node("sub", _url_node("B", "http://b")),
        ),
    )


@pytest.fixture
def sample_bookmarks_file(tmp_path: Path, sample_document: dict[str, Any]) -> Path:
    """Write the sample document as a Chrome Bookmarks file."""
    p = tmp_path / "Bookmarks"
    p.write_text(json.dumps(sample_document), encoding="utf-8")
    return p


@pytest.fixture
def nested_bar() -> BookmarkNode:
    """A deeper tree mixing URLs, folders and an unknown node type."""
    doc = _document(
        _folder_node(
            "Bookmarks bar",
            _url_node("one", "https://one.example"),
            _folder_node(
                "recipes",
                _url_node("soup", "https://soup.example"),
                _folder_node("italian", _url_node("pasta", "https://pasta.example")),
                _url_node("bread", "https://bread.example"),
            ),
            _url_node("two", "https://two.example"),
            {
                "type": "separator",
                "name": "misc",
                "children": [_url_node("hidden", "https://hidden.example")],
            },
            _folder_node("empty"),
        ),
        other=_folder_node("Other bookmarks", _url_node("other", "https://other.example")),
    )
    return parser.parse_bookmarks(json.dumps(doc)).bookmark_bar


@pytest.fixture
def duplicate_names_bar() -> BookmarkNode:
    """Two sibling folders called ``dup``; only the second contains ``inner``."""
    doc = _document(
        _folder_node(
            "bar",
            _folder_node("dup", _url_node("first", "https://first.example")),
            _folder_node(
                "dup",
                _folder_node("inner", _url_node("second", "https://second.example")),
            ),
        ),
    )
    return parser.parse_bookmarks(json.dumps(doc)).bookmark_bar


@pytest.fixture
def write_bookmarks(tmp_path: Path):
    """Return a helper writing an arbitrary document (or raw text) to a file."""

    def _write(content: dict[str, Any] | str, name: str = "Bookmarks") -> Path:
        p = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        p.write_text(text, encoding="utf-8")
        return p

    return _write
