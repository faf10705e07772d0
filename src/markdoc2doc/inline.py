"""Convert inline markup nodes into document text runs."""

from __future__ import annotations

from collections.abc import Sequence

from markdoc2doc.config import COMPONENT_INLINE_PROP_TAG
from markdoc2doc.exceptions import UnknownNodeKindError
from markdoc2doc.inline_utils import (
    MARK_TAGS,
    DocumentNode,
    add_mark_to_children,
    get_inline_nodes,
    is_text,
    set_link_for_children,
)
from markdoc2doc.prop_path import is_prop_path
from markdoc2doc.schemas import MarkupNode, NodeType

_MARK_NODES: dict[NodeType, str] = {
    NodeType.STRONG: "bold",
    NodeType.EM: "italic",
    NodeType.S: "strikethrough",
}


def inline_from_markdoc(nodes: Sequence[MarkupNode]) -> list[DocumentNode]:
    """Convert inline nodes, dropping redundant empty runs.

    An empty markless run is kept only when it is the last one or follows
    an inline element. The result is never empty.
    """
    transformed = inline_children_from_markdoc(nodes)
    result: list[DocumentNode] = []
    last: DocumentNode | None = None
    for idx, node in enumerate(transformed):
        if (
            _is_empty_plain_text(node)
            and (last is None or is_text(last))
            and idx != len(transformed) - 1
        ):
            continue
        result.append(node)
        last = node
    if not result:
        result.append({"text": ""})
    return result


def inline_children_from_markdoc(nodes: Sequence[MarkupNode]) -> list[DocumentNode]:
    """Convert inline nodes without post-processing."""
    result: list[DocumentNode] = []
    for node in nodes:
        result.extend(inline_node_from_markdoc(node))
    return result


def inline_node_from_markdoc(node: MarkupNode) -> list[DocumentNode]:
    """Convert a single inline node.

    Raises:
        UnknownNodeKindError: If the node type (or inline tag) is not supported.
    """
    kind = node.kind

    if kind is NodeType.INLINE:
        return inline_children_from_markdoc(node.children)

    if kind is NodeType.TEXT:
        return get_inline_nodes(str(node.attributes.get("content", "")))

    if kind is NodeType.LINK:
        return set_link_for_children(
            node.attributes.get("href"), inline_children_from_markdoc(node.children)
        )

    if kind in _MARK_NODES:
        return add_mark_to_children(_MARK_NODES[kind], inline_children_from_markdoc(node.children))

    if kind is NodeType.CODE:
        return [{"text": node.attributes.get("content", ""), "code": True}]

    if kind is NodeType.SOFTBREAK:
        return get_inline_nodes(" ")

    if kind is NodeType.HARDBREAK:
        return get_inline_nodes("\n")

    if kind is NodeType.TAG:
        if node.tag in MARK_TAGS:
            return add_mark_to_children(MARK_TAGS[node.tag], inline_children_from_markdoc(node.children))
        if node.tag == COMPONENT_INLINE_PROP_TAG and is_prop_path(node.attributes.get("propPath")):
            return [
                {
                    "type": COMPONENT_INLINE_PROP_TAG,
                    "propPath": list(node.attributes["propPath"]),
                    "children": inline_from_markdoc(node.children),
                }
            ]

    raise UnknownNodeKindError(node.type, node.tag)


def _is_empty_plain_text(node: DocumentNode) -> bool:
    return is_text(node) and node["text"] == "" and not any(key != "text" for key in node)
