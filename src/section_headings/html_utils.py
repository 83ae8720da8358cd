"""Shared HTML tree utilities for heading sectioning."""

from __future__ import annotations

import re
from typing import Any, Mapping

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML sectioning (pip install beautifulsoup4)."
    ) from exc

_HEADING_RE = re.compile(r"^h([1-6])$")


def heading_rank(tag_name: str | None) -> int | None:
    """Return the rank (1-6) of a heading tag name, or None for other tags."""
    if not tag_name:
        return None
    match = _HEADING_RE.match(tag_name)
    return int(match.group(1)) if match else None


def find_document(node: Tag) -> BeautifulSoup | None:
    """Walk up to the BeautifulSoup object owning ``node``, if any."""
    root = node
    while root.parent is not None:
        root = root.parent
    return root if isinstance(root, BeautifulSoup) else None


def new_element(
    document: BeautifulSoup | None,
    name: str,
    attrs: Mapping[str, Any] | None = None,
) -> Tag:
    """Create a detached element, through the owning document when there is one.

    Attribute values are copied so that elements built from the same
    template never share a mutable list.
    """
    copied = {
        key: list(value) if isinstance(value, list) else value
        for key, value in (attrs or {}).items()
    }
    if document is not None:
        return document.new_tag(name, attrs=copied)
    return Tag(name=name, attrs=copied)


def element_id(element: Tag) -> str | None:
    """Return the element's ``id`` attribute as a string, or None."""
    value = element.get("id")
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)
