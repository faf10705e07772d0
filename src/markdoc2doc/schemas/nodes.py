"""Input node model produced by the markup parser."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeType(str, Enum):
    """Node kinds the converter understands."""

    DOCUMENT = "document"
    INLINE = "inline"
    TEXT = "text"
    STRONG = "strong"
    EM = "em"
    S = "s"
    LINK = "link"
    CODE = "code"
    SOFTBREAK = "softbreak"
    HARDBREAK = "hardbreak"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BLOCKQUOTE = "blockquote"
    FENCE = "fence"
    LIST = "list"
    ITEM = "item"
    HR = "hr"
    TAG = "tag"


class MarkupNode(BaseModel):
    """A parsed markup node.

    Attributes:
        type: Parser node type. Kept as a free string so that kinds the
            converter does not know about can still be represented and
            rejected during conversion.
        tag: Tag name for ``tag`` nodes.
        attributes: Attribute bag; values are JSON-like scalars, lists or dicts.
        children: Ordered child nodes.
    """

    model_config = ConfigDict(extra="ignore")

    type: str
    tag: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    children: list["MarkupNode"] = Field(default_factory=list)

    @property
    def kind(self) -> NodeType | None:
        """Resolve ``type`` to a :class:`NodeType`, or ``None`` if unknown."""
        try:
            return NodeType(self.type)
        except ValueError:
            return None
