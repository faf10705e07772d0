"""markdoc2doc: convert parsed Markdoc trees into editor document trees."""

from markdoc2doc.convert import ConversionOptions, from_markdoc, from_markdoc_node, to_children_and_props
from markdoc2doc.exceptions import (
    AmbiguousChildFieldError,
    ConversionError,
    Markdoc2DocError,
    PropPathError,
    TagMismatchError,
    UnknownNodeKindError,
    UnknownTagError,
)
from markdoc2doc.find_children import find_single_child_field
from markdoc2doc.inline import inline_from_markdoc
from markdoc2doc.schemas import (
    ArrayField,
    ChildField,
    ChildFieldOptions,
    ComponentBlock,
    MarkupNode,
    NodeType,
    ObjectField,
    ScalarField,
)

__all__ = [
    "AmbiguousChildFieldError",
    "ArrayField",
    "ChildField",
    "ChildFieldOptions",
    "ComponentBlock",
    "ConversionError",
    "ConversionOptions",
    "Markdoc2DocError",
    "MarkupNode",
    "NodeType",
    "ObjectField",
    "PropPathError",
    "ScalarField",
    "TagMismatchError",
    "UnknownNodeKindError",
    "UnknownTagError",
    "find_single_child_field",
    "from_markdoc",
    "from_markdoc_node",
    "inline_from_markdoc",
    "to_children_and_props",
]
