"""Machine-checkable response schemas for backends that accept one (Gemini).

Written in the OpenAPI subset the Gemini API understands.
"""
from typing import Any, Dict, Final

LAB_MARKER_SCHEMA: Final[Dict[str, Any]] = {
    "type": "OBJECT",
    "properties": {
        "name": {"type": "STRING"},
        "value": {"type": "NUMBER"},
        "unit": {"type": "STRING"},
        "status": {"type": "STRING", "enum": ["low", "normal", "high"]},
        "optimalRange": {"type": "STRING"},
        "description": {"type": "STRING"},
    },
    "required": ["name", "value", "unit", "status"],
}

LAB_RESULT_SCHEMA: Final[Dict[str, Any]] = {
    "type": "OBJECT",
    "properties": {
        "id": {"type": "STRING"},
        "date": {"type": "STRING"},
        "markers": {"type": "ARRAY", "items": LAB_MARKER_SCHEMA},
    },
    "required": ["markers"],
}

RECIPE_SCHEMA: Final[Dict[str, Any]] = {
    "type": "OBJECT",
    "properties": {
        "id": {"type": "STRING"},
        "title": {"type": "STRING"},
        "description": {"type": "STRING"},
        "ingredients": {"type": "ARRAY", "items": {"type": "STRING"}},
        "instructions": {"type": "ARRAY", "items": {"type": "STRING"}},
        "prepTime": {"type": "STRING"},
        "tags": {"type": "ARRAY", "items": {"type": "STRING"}},
        "image": {"type": "STRING"},
        "benefits": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["title", "description", "ingredients", "instructions", "benefits"],
}

RECIPES_SCHEMA: Final[Dict[str, Any]] = {"type": "ARRAY", "items": RECIPE_SCHEMA}
