"""Custom exceptions for markdoc2doc."""

from __future__ import annotations


class Markdoc2DocError(Exception):
    """Base exception for markdoc2doc operations."""


class ConversionError(Markdoc2DocError):
    """Error during markup tree conversion."""


class UnknownNodeKindError(ConversionError):
    """Inline node of a type or tag the converter does not handle."""

    def __init__(self, node_type: str, tag: str | None = None) -> None:
        self.node_type = node_type
        self.tag = tag
        detail = f"Unknown inline node type: {node_type}"
        if tag:
            detail += f" (tag: {tag})"
        super().__init__(detail)


class UnknownTagError(ConversionError):
    """Block tag that is neither reserved nor a registered component."""

    def __init__(self, tag: str | None) -> None:
        self.tag = tag
        super().__init__(f"Unknown tag: {tag}")


class TagMismatchError(ConversionError):
    """Array-routed child is not the tag the schema expects."""

    def __init__(self, expected: str, *, found_tag: str | None = None, found_type: str | None = None) -> None:
        self.expected = expected
        self.found_tag = found_tag
        self.found_type = found_type
        if found_tag is not None:
            found = f"found tag: {found_tag}"
        else:
            found = f"found type: {found_type}"
        super().__init__(f"expected tag {expected}, {found}")


class AmbiguousChildFieldError(Markdoc2DocError):
    """More than one schema field is eligible for bare-children shorthand."""


class PropPathError(ConversionError):
    """Property path does not resolve inside a props value."""
