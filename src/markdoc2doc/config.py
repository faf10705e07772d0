"""Local configuration for markdoc2doc."""

from __future__ import annotations

import os


DEFAULT_STRICT_CHILD_FIELDS = False
DEFAULT_LOG_LEVEL = "WARNING"

# Tag names the converter handles itself; never looked up in the registry.
LAYOUT_TAG = "layout"
LAYOUT_AREA_TAG = "layout-area"
COMPONENT_BLOCK_TAG = "component-block"
COMPONENT_BLOCK_PROP_TAG = "component-block-prop"
COMPONENT_INLINE_PROP_TAG = "component-inline-prop"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Raise instead of falling back when a schema has several shorthand-eligible fields.
MARKDOC2DOC_STRICT_CHILD_FIELDS = _env_flag("MARKDOC2DOC_STRICT_CHILD_FIELDS", DEFAULT_STRICT_CHILD_FIELDS)
MARKDOC2DOC_LOG_LEVEL = os.getenv("MARKDOC2DOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
