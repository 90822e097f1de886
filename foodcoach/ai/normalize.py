"""Turn raw model output into domain records."""
import logging
from typing import Any, List

from pydantic import ValidationError

from foodcoach.ai.errors import ResponseParseError
from foodcoach.ai.json_utils import parse_json_response
from foodcoach.domain.LabResult import LabResult
from foodcoach.domain.Recipe import Recipe

logger = logging.getLogger(__name__)

# Keys some backends wrap the recipe array in, e.g. {"recipes": [...]}
RECIPE_LIST_KEYS = ("recipes", "list")


def _is_lab_payload(value: Any) -> bool:
    return isinstance(value, dict)


def _is_recipe_payload(value: Any) -> bool:
    """A list of objects, bare or wrapped under one of RECIPE_LIST_KEYS."""
    if isinstance(value, dict):
        value = next((value[k] for k in RECIPE_LIST_KEYS if isinstance(value.get(k), list)), None)
    return isinstance(value, list) and all(isinstance(item, dict) for item in value)


def lab_result_from_text(raw: str) -> LabResult:
    """Decode a LabResult from model output; ResponseParseError on bad JSON or a bad shape."""
    parsed = parse_json_response(raw, accept=_is_lab_payload)
    if not isinstance(parsed, dict):
        raise ResponseParseError(f"Expected a JSON object for lab results, got {type(parsed).__name__}", raw=raw)
    try:
        return LabResult.from_dict(parsed)
    except ValidationError as e:
        raise ResponseParseError(f"Lab result JSON has an invalid shape: {e.error_count()} error(s)", raw=raw) from e


def normalize_recipe_list(parsed: Any) -> List[Any]:
    """Bare array -> itself; object wrapping the array under a known key -> the array; anything else -> []."""
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict):
        for key in RECIPE_LIST_KEYS:
            if isinstance(parsed.get(key), list):
                return parsed[key]
    return []


def recipes_from_text(raw: str) -> List[Recipe]:
    """Decode recipes from model output. Undecodable text raises; an unexpected shape yields []."""
    items = normalize_recipe_list(parse_json_response(raw, accept=_is_recipe_payload))
    recipes: List[Recipe] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            recipes.append(Recipe.from_dict(item))
        except ValidationError:
            logger.warning("Skipping recipe with invalid shape: %r", item.get("title"))
    return recipes


__all__ = ["lab_result_from_text", "normalize_recipe_list", "recipes_from_text", "RECIPE_LIST_KEYS"]
