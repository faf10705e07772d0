"""Helpers for building inline document runs."""

from __future__ import annotations

from typing import Any

DocumentNode = dict[str, Any]

# Inline tag names that map onto a mark flag.
MARK_TAGS: dict[str, str] = {
    "u": "underline",
    "kbd": "keyboard",
    "s": "strikethrough",
    "sub": "subscript",
    "sup": "superscript",
}


def is_text(node: DocumentNode) -> bool:
    """Text runs are the only document nodes without a ``type``."""
    return "type" not in node


def get_inline_nodes(text: str) -> list[DocumentNode]:
    """Return the markless text runs for ``text``."""
    return [{"text": text}]


def add_mark_to_children(mark: str, children: list[DocumentNode]) -> list[DocumentNode]:
    """Set ``mark`` on every text run in ``children``, descending into inline elements."""
    for child in children:
        if is_text(child):
            child[mark] = True
        else:
            add_mark_to_children(mark, child.get("children", []))
    return children


def set_link_for_children(href: str, children: list[DocumentNode]) -> list[DocumentNode]:
    """Annotate every text run in ``children`` with ``href``, descending into inline elements."""
    for child in children:
        if is_text(child):
            child["href"] = href
        else:
            set_link_for_children(href, child.get("children", []))
    return children
