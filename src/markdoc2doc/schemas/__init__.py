"""Shared schemas for markdoc2doc."""

from markdoc2doc.schemas.components import (
    ArrayField,
    ChildField,
    ChildFieldOptions,
    ComponentBlock,
    ObjectField,
    ScalarField,
    SchemaField,
)
from markdoc2doc.schemas.nodes import MarkupNode, NodeType

__all__ = [
    "ArrayField",
    "ChildField",
    "ChildFieldOptions",
    "ComponentBlock",
    "MarkupNode",
    "NodeType",
    "ObjectField",
    "ScalarField",
    "SchemaField",
]
