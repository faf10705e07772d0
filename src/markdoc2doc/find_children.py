"""Locate the schema field that a tag's bare children are routed into."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from markdoc2doc.exceptions import AmbiguousChildFieldError
from markdoc2doc.logging_config import get_logger
from markdoc2doc.prop_path import PropPath
from markdoc2doc.schemas import (
    ArrayField,
    ChildField,
    ChildFieldOptions,
    ObjectField,
    ScalarField,
    SchemaField,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChildFieldPath:
    """A child field reachable from the walked schema node.

    Attributes:
        relative_path: Path from the walked node to the child field.
        options: The child field's options; ``options.kind`` decides whether
            routed content becomes a block or an inline prop.
    """

    relative_path: PropPath
    options: ChildFieldOptions
    kind: str = "child"


@dataclass(frozen=True)
class ArrayFieldPath:
    """An array field written as repeated ``as_child_tag`` tags.

    Attributes:
        relative_path: Path from the walked node to the array.
        as_child_tag: Tag name every array element must be written as.
        field: The array field itself.
        child: Eligible field inside each element, relative to the element.
    """

    relative_path: PropPath
    as_child_tag: str
    field: ArrayField
    child: "FieldPath | None"
    kind: str = "array"


FieldPath = Union[ChildFieldPath, ArrayFieldPath]


class _NotShorthandEligible(Exception):
    """Raised inside the walk when no single field can be chosen."""


def find_single_child_field(schema: ObjectField, *, strict: bool = False) -> FieldPath | None:
    """Find the one field a tag's children can be written into without prop tags.

    Args:
        schema: The component's top-level schema, as an object field.
        strict: If True, raise when several fields are eligible instead of
            treating the component as having no shorthand form.

    Returns:
        The path to the field, or None when there is no eligible field or
        the choice is ambiguous in non-strict mode.

    Raises:
        AmbiguousChildFieldError: In strict mode, if more than one field is
            eligible or an array without a child tag contains child fields.
    """
    try:
        return _find_in_field(schema)
    except _NotShorthandEligible as exc:
        if strict:
            raise AmbiguousChildFieldError(str(exc)) from exc
        logger.debug("No shorthand child field: %s", exc)
        return None


def _find_in_field(field: SchemaField) -> FieldPath | None:
    if isinstance(field, ScalarField):
        return None

    if isinstance(field, ChildField):
        return ChildFieldPath(relative_path=(), options=field.options)

    if isinstance(field, ObjectField):
        found: list[tuple[str, FieldPath]] = []
        for key, value in field.fields.items():
            path = _find_in_field(value)
            if path is not None:
                found.append((key, path))
        if len(found) > 1:
            keys = ", ".join(key for key, _ in found)
            raise _NotShorthandEligible(f"multiple fields accept children: {keys}")
        if not found:
            return None
        key, path = found[0]
        return replace(path, relative_path=(key, *path.relative_path))

    if isinstance(field, ArrayField):
        element_path = _find_in_field(field.element)
        if field.as_child_tag is None:
            if element_path is not None:
                raise _NotShorthandEligible("array containing child fields has no child tag")
            return None
        return ArrayFieldPath(
            relative_path=(),
            as_child_tag=field.as_child_tag,
            field=field,
            child=element_path,
        )

    raise TypeError(f"Unsupported schema field: {field!r}")
