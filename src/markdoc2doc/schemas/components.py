"""Component schema models."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ScalarField(BaseModel):
    """A plain JSON value stored directly in props."""

    kind: Literal["scalar"] = "scalar"
    default: Any = None


class ChildFieldOptions(BaseModel):
    """Options for a rich-text child field."""

    kind: Literal["block", "inline"] = "block"
    placeholder: str = ""


class ChildField(BaseModel):
    """A prop location that receives an embedded rich-text sub-document."""

    kind: Literal["child"] = "child"
    options: ChildFieldOptions = Field(default_factory=ChildFieldOptions)


class ObjectField(BaseModel):
    """A nested group of fields."""

    kind: Literal["object"] = "object"
    fields: dict[str, "SchemaField"] = Field(default_factory=dict)


class ArrayField(BaseModel):
    """A list of elements, optionally written as repeated child tags."""

    kind: Literal["array"] = "array"
    element: "SchemaField"
    as_child_tag: str | None = None


SchemaField = Annotated[
    Union[ScalarField, ChildField, ObjectField, ArrayField],
    Field(discriminator="kind"),
]

ObjectField.model_rebuild()
ArrayField.model_rebuild()


class ComponentBlock(BaseModel):
    """A registered component: its label and top-level prop schema."""

    model_config = ConfigDict(populate_by_name=True)

    label: str = ""
    schema_: dict[str, SchemaField] = Field(default_factory=dict, alias="schema")

    def as_object_field(self) -> ObjectField:
        """Wrap the top-level schema in an :class:`ObjectField`."""
        return ObjectField(fields=self.schema_)
