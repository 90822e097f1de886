"""Shopping list builder.

Provides build_shopping_list(week_plan): every ingredient line needed by the
planned meals, merged case- and whitespace-insensitively.
"""
from collections import defaultdict
from typing import Any, Dict, List

from foodcoach.domain.DayPlan import WeekPlan


def _normalize(name: str) -> str:
    return ' '.join((name or '').lower().split())


def build_shopping_list(week_plan: WeekPlan) -> List[Dict[str, Any]]:
    """Aggregate ingredients over all filled slots of the week.

    Returns:
        List of dicts sorted by name: { name, meals, recipes } where `meals` is
        how many planned meals use the ingredient and `recipes` lists the
        recipe titles in first-seen order.
    """
    required: Dict[str, Dict[str, Any]] = defaultdict(lambda: {"name": "", "meals": 0, "recipes": []})

    for day in week_plan:
        for _slot, recipe in day.meals():
            for ingredient in recipe.ingredients:
                k = _normalize(ingredient)
                if not k:
                    continue
                entry = required[k]
                if not entry['name']:
                    entry['name'] = ingredient.strip()
                entry['meals'] += 1
                if recipe.title not in entry['recipes']:
                    entry['recipes'].append(recipe.title)

    shopping_list = [dict(entry) for entry in required.values()]
    shopping_list.sort(key=lambda x: x['name'].lower())
    return shopping_list


__all__ = ['build_shopping_list']
