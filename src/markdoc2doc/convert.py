"""Convert a parsed markup tree into editor document blocks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from markdoc2doc.config import (
    COMPONENT_BLOCK_PROP_TAG,
    COMPONENT_BLOCK_TAG,
    COMPONENT_INLINE_PROP_TAG,
    LAYOUT_AREA_TAG,
    LAYOUT_TAG,
    MARKDOC2DOC_STRICT_CHILD_FIELDS,
)
from markdoc2doc.exceptions import ConversionError, PropPathError, TagMismatchError, UnknownTagError
from markdoc2doc.find_children import ArrayFieldPath, ChildFieldPath, FieldPath, find_single_child_field
from markdoc2doc.inline import inline_from_markdoc, inline_node_from_markdoc
from markdoc2doc.inline_utils import DocumentNode
from markdoc2doc.logging_config import get_logger
from markdoc2doc.prop_path import PropPathSegment, clone_value, get_value_at_prop_path, is_prop_path
from markdoc2doc.schemas import ComponentBlock, MarkupNode, NodeType

logger = get_logger(__name__)

ComponentBlocks = Mapping[str, ComponentBlock]


@dataclass
class ConversionOptions:
    """Options for a conversion.

    Attributes:
        strict_child_fields: If True, a registered component whose schema has
            more than one field eligible for bare children raises
            ``AmbiguousChildFieldError`` instead of being converted as if it
            had no shorthand form.
    """

    strict_child_fields: bool = MARKDOC2DOC_STRICT_CHILD_FIELDS


def from_markdoc(
    document: MarkupNode | Mapping[str, Any],
    component_blocks: ComponentBlocks,
    *,
    options: ConversionOptions | None = None,
) -> list[DocumentNode]:
    """Convert a parsed document into a list of editor blocks.

    The result is never empty and always ends in a paragraph so the editor
    has somewhere to place the cursor after the content.

    Args:
        document: Root node of the parsed tree, as a model or a plain dict.
        component_blocks: Registered components keyed by tag name.
        options: Conversion options. Uses defaults if None.

    Returns:
        The converted top-level blocks.

    Raises:
        ConversionError: If the tree contains an unknown node kind, an
            unregistered tag, an array child with the wrong tag, or a tag
            whose attributes cannot hold a routed array (``PropPathError``).
        AmbiguousChildFieldError: In strict mode, if a registered component
            has more than one field eligible for bare children.
    """
    opts = options or ConversionOptions()
    if not isinstance(document, MarkupNode):
        document = MarkupNode.model_validate(document)

    nodes = _blocks_from_markdoc(document.children, component_blocks, opts)
    if not nodes or nodes[-1].get("type") != "paragraph":
        logger.debug("Appending trailing paragraph after %d blocks", len(nodes))
        nodes.append(_empty_paragraph())
    return nodes


def from_markdoc_node(
    node: MarkupNode,
    component_blocks: ComponentBlocks,
    *,
    options: ConversionOptions | None = None,
) -> list[DocumentNode]:
    """Convert a single block-level node."""
    return _block_from_markdoc(node, component_blocks, options or ConversionOptions())


def _blocks_from_markdoc(
    nodes: Sequence[MarkupNode], component_blocks: ComponentBlocks, opts: ConversionOptions
) -> list[DocumentNode]:
    result: list[DocumentNode] = []
    for node in nodes:
        result.extend(_block_from_markdoc(node, component_blocks, opts))
    return result


def _block_from_markdoc(
    node: MarkupNode, component_blocks: ComponentBlocks, opts: ConversionOptions
) -> list[DocumentNode]:
    kind = node.kind

    if kind is NodeType.BLOCKQUOTE:
        return [
            {
                "type": "blockquote",
                "children": _blocks_from_markdoc(node.children, component_blocks, opts),
            }
        ]

    if kind is NodeType.FENCE:
        content = str(node.attributes.get("content", ""))
        if content.endswith("\n"):
            content = content[:-1]
        block: DocumentNode = {"type": "code", "children": [{"text": content}]}
        language = node.attributes.get("language")
        if isinstance(language, str):
            block["language"] = language
        return [block]

    if kind is NodeType.HEADING:
        return [
            {
                "type": "heading",
                "level": node.attributes.get("level"),
                "children": inline_from_markdoc(node.children),
            }
        ]

    if kind is NodeType.LIST:
        return [
            {
                "type": "ordered-list" if node.attributes.get("ordered") else "unordered-list",
                "children": _blocks_from_markdoc(node.children, component_blocks, opts),
            }
        ]

    if kind is NodeType.ITEM:
        # Only the first child of an item is kept.
        first = node.children[:1]
        if first and first[0].kind is NodeType.PARAGRAPH:
            first = first[0].children
        return [
            {
                "type": "list-item",
                "children": [{"type": "list-item-content", "children": inline_from_markdoc(first)}],
            }
        ]

    if kind is NodeType.PARAGRAPH:
        children = inline_from_markdoc(node.children)
        if len(children) == 1 and children[0].get("type") == COMPONENT_INLINE_PROP_TAG:
            return children
        return [{"type": "paragraph", "children": children}]

    if kind is NodeType.HR:
        return [{"type": "divider", "children": [{"text": ""}]}]

    if kind is NodeType.TAG:
        return _tag_from_markdoc(node, component_blocks, opts)

    return inline_node_from_markdoc(node)


def _tag_from_markdoc(
    node: MarkupNode, component_blocks: ComponentBlocks, opts: ConversionOptions
) -> list[DocumentNode]:
    tag = node.tag

    if tag == LAYOUT_TAG:
        return [
            {
                "type": "layout",
                "layout": node.attributes.get("layout"),
                "children": _blocks_from_markdoc(node.children, component_blocks, opts),
            }
        ]

    if tag == LAYOUT_AREA_TAG:
        return [
            {
                "type": "layout-area",
                "children": _blocks_from_markdoc(node.children, component_blocks, opts),
            }
        ]

    if tag == COMPONENT_BLOCK_TAG:
        return [
            {
                "type": "component-block",
                "component": node.attributes.get("component"),
                "props": clone_value(node.attributes.get("props", {})),
                "children": _component_children(node, component_blocks, opts),
            }
        ]

    if tag == COMPONENT_BLOCK_PROP_TAG and is_prop_path(node.attributes.get("propPath")):
        return [
            {
                "type": COMPONENT_BLOCK_PROP_TAG,
                "propPath": list(node.attributes["propPath"]),
                "children": _blocks_from_markdoc(node.children, component_blocks, opts),
            }
        ]

    component_block = component_blocks.get(tag) if tag else None
    if component_block is None:
        raise UnknownTagError(tag)

    single_child_field = find_single_child_field(
        component_block.as_object_field(), strict=opts.strict_child_fields
    )
    if single_child_field is not None:
        logger.debug("Routing children of %r into %s field", tag, single_child_field.kind)
        props = clone_value(node.attributes)
        children: list[DocumentNode] = []
        to_children_and_props(
            node.children,
            children,
            props,
            single_child_field,
            (),
            component_blocks,
            options=opts,
        )
        return [{"type": "component-block", "component": tag, "props": props, "children": children}]

    return [
        {
            "type": "component-block",
            "component": tag,
            "props": clone_value(node.attributes),
            "children": _component_children(node, component_blocks, opts),
        }
    ]


def _component_children(
    node: MarkupNode, component_blocks: ComponentBlocks, opts: ConversionOptions
) -> list[DocumentNode]:
    if not node.children:
        return [{"type": COMPONENT_INLINE_PROP_TAG, "children": [{"text": ""}]}]
    return _blocks_from_markdoc(node.children, component_blocks, opts)


def to_children_and_props(
    nodes: Sequence[MarkupNode],
    resulting_children: list[DocumentNode],
    value: Any,
    field_path: FieldPath,
    parent_prop_path: Sequence[PropPathSegment],
    component_blocks: ComponentBlocks,
    *,
    options: ConversionOptions | None = None,
) -> None:
    """Route a tag's children into its props and embedded prop nodes.

    A child field receives all of ``nodes`` as one embedded prop node
    appended to ``resulting_children``. An array field turns each node (a
    repeated tag) into an element built from its attributes, recursing into
    the element's own child field, and stores the list in ``value``.

    Args:
        nodes: The tag's parsed children.
        resulting_children: Embedded prop nodes are appended here.
        value: Props object that array values are written into.
        field_path: Field to route into, relative to ``value``.
        parent_prop_path: Path of ``value`` within the component's props.
        component_blocks: Registered components.
        options: Conversion options. Uses defaults if None.

    Raises:
        TagMismatchError: If an array child is not the expected tag.
        PropPathError: If the array's parent path runs through a value
            that is not an object. Missing objects along it are created.
    """
    opts = options or ConversionOptions()
    prop_path = [*parent_prop_path, *field_path.relative_path]

    if isinstance(field_path, ChildFieldPath):
        resulting_children.append(
            {
                "type": f"component-{field_path.options.kind}-prop",
                "propPath": prop_path,
                "children": _blocks_from_markdoc(nodes, component_blocks, opts),
            }
        )
        return

    if isinstance(field_path, ArrayFieldPath):
        elements: list[Any] = []
        for idx, child in enumerate(nodes):
            child = _unwrap_paragraph(child)
            if child.kind is not NodeType.TAG:
                raise TagMismatchError(field_path.as_child_tag, found_type=child.type)
            if child.tag != field_path.as_child_tag:
                raise TagMismatchError(field_path.as_child_tag, found_tag=child.tag)

            attributes = clone_value(child.attributes)
            if field_path.child is not None:
                to_children_and_props(
                    child.children,
                    resulting_children,
                    attributes,
                    field_path.child,
                    [*prop_path, idx],
                    component_blocks,
                    options=opts,
                )
            elements.append(attributes)

        if not field_path.relative_path:
            raise ConversionError(f"Array of {field_path.as_child_tag!r} tags has no prop key to be stored under")
        *parent_path, key = field_path.relative_path
        parent = get_value_at_prop_path(value, parent_path, create_missing=True)
        if not isinstance(parent, dict):
            raise PropPathError(
                f"Cannot store {field_path.as_child_tag!r} array under {list(parent_path)!r}: not an object"
            )
        parent[key] = elements


def _unwrap_paragraph(node: MarkupNode) -> MarkupNode:
    """Return the first node nested in a paragraph and its inline container."""
    if node.kind is not NodeType.PARAGRAPH:
        return node
    unwrapped = node
    while unwrapped.kind in (NodeType.PARAGRAPH, NodeType.INLINE) and unwrapped.children:
        unwrapped = unwrapped.children[0]
    return unwrapped


def _empty_paragraph() -> DocumentNode:
    return {"type": "paragraph", "children": [{"text": ""}]}
