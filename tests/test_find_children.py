"""Tests for locating the single child field of a schema."""

from __future__ import annotations

import pytest

from markdoc2doc.exceptions import AmbiguousChildFieldError
from markdoc2doc.find_children import ArrayFieldPath, ChildFieldPath, find_single_child_field
from markdoc2doc.schemas import ComponentBlock, ObjectField


def _schema(fields: dict) -> ObjectField:
    return ComponentBlock.model_validate({"schema": fields}).as_object_field()


class TestFindSingleChildField:
    """Tests for find_single_child_field."""

    def test_scalar_only_schema_has_no_child_field(self) -> None:
        """Schemas without child or array fields have no shorthand."""
        assert find_single_child_field(_schema({"color": {"kind": "scalar"}})) is None

    def test_top_level_child_field(self) -> None:
        """A child field is found with its key as path."""
        result = find_single_child_field(
            _schema({"title": {"kind": "scalar"}, "body": {"kind": "child", "options": {"kind": "inline"}}})
        )

        assert isinstance(result, ChildFieldPath)
        assert result.relative_path == ("body",)
        assert result.options.kind == "inline"

    def test_child_inside_object(self) -> None:
        """Paths through nested objects are concatenated."""
        result = find_single_child_field(
            _schema({"card": {"kind": "object", "fields": {"content": {"kind": "child"}}}})
        )

        assert isinstance(result, ChildFieldPath)
        assert result.relative_path == ("card", "content")

    def test_array_with_child_tag(self) -> None:
        """An array written as child tags carries its element's child field."""
        result = find_single_child_field(
            _schema(
                {
                    "rows": {
                        "kind": "array",
                        "as_child_tag": "row",
                        "element": {"kind": "object", "fields": {"cell": {"kind": "child"}}},
                    }
                }
            )
        )

        assert isinstance(result, ArrayFieldPath)
        assert result.relative_path == ("rows",)
        assert result.as_child_tag == "row"
        assert isinstance(result.child, ChildFieldPath)
        assert result.child.relative_path == ("cell",)

    def test_array_without_nested_child(self) -> None:
        """Arrays of plain elements are still eligible when they name a tag."""
        result = find_single_child_field(
            _schema({"items": {"kind": "array", "as_child_tag": "item", "element": {"kind": "scalar"}}})
        )

        assert isinstance(result, ArrayFieldPath)
        assert result.child is None

    def test_array_without_tag_and_plain_elements_is_ignored(self) -> None:
        """Arrays of scalars without a tag do not take children."""
        result = find_single_child_field(
            _schema({"items": {"kind": "array", "element": {"kind": "scalar"}}, "body": {"kind": "child"}})
        )

        assert isinstance(result, ChildFieldPath)
        assert result.relative_path == ("body",)

    def test_multiple_child_fields_are_not_eligible(self) -> None:
        """Several candidate fields leave the component without shorthand."""
        schema = _schema({"left": {"kind": "child"}, "right": {"kind": "child"}})

        assert find_single_child_field(schema) is None

    def test_multiple_child_fields_raise_in_strict_mode(self) -> None:
        """Strict mode reports the ambiguity instead of ignoring it."""
        schema = _schema({"left": {"kind": "child"}, "right": {"kind": "child"}})

        with pytest.raises(AmbiguousChildFieldError, match="left, right"):
            find_single_child_field(schema, strict=True)

    def test_untagged_array_of_children_is_not_eligible(self) -> None:
        """Child fields inside an array without a tag block the shorthand."""
        schema = _schema(
            {"items": {"kind": "array", "element": {"kind": "object", "fields": {"c": {"kind": "child"}}}}}
        )

        assert find_single_child_field(schema) is None
        with pytest.raises(AmbiguousChildFieldError):
            find_single_child_field(schema, strict=True)
