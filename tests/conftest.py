"""Test setup for markdoc2doc."""

from __future__ import annotations

import sys
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from markdoc2doc.schemas import ComponentBlock  # noqa: E402


@pytest.fixture
def component_blocks() -> dict[str, ComponentBlock]:
    """A small registry covering child, array and nested-array shorthand."""
    return {
        "note": ComponentBlock.model_validate(
            {
                "label": "Note",
                "schema": {
                    "tone": {"kind": "scalar", "default": "info"},
                    "body": {"kind": "child", "options": {"kind": "block"}},
                },
            }
        ),
        "caption": ComponentBlock.model_validate(
            {
                "label": "Caption",
                "schema": {
                    "text": {"kind": "child", "options": {"kind": "inline"}},
                },
            }
        ),
        "table": ComponentBlock.model_validate(
            {
                "label": "Table",
                "schema": {
                    "rows": {
                        "kind": "array",
                        "as_child_tag": "row",
                        "element": {
                            "kind": "object",
                            "fields": {
                                "label": {"kind": "scalar"},
                                "content": {"kind": "child", "options": {"kind": "block"}},
                            },
                        },
                    },
                },
            }
        ),
        "tags": ComponentBlock.model_validate(
            {
                "label": "Tags",
                "schema": {
                    "items": {
                        "kind": "array",
                        "as_child_tag": "tag-item",
                        "element": {"kind": "object", "fields": {"name": {"kind": "scalar"}}},
                    },
                },
            }
        ),
        "two-column": ComponentBlock.model_validate(
            {
                "label": "Two column",
                "schema": {
                    "left": {"kind": "child"},
                    "right": {"kind": "child"},
                },
            }
        ),
        "badge": ComponentBlock.model_validate(
            {"label": "Badge", "schema": {"color": {"kind": "scalar"}}}
        ),
    }

