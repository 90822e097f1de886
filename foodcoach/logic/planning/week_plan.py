"""Week plan builder.

Distributes a list of recipes over the current Sunday-to-Saturday week,
three meal slots per day, strictly round-robin.
"""
from datetime import date as _date, timedelta
from typing import List, Optional, Sequence, Tuple

from foodcoach.domain.DayPlan import DayPlan, WeekPlan
from foodcoach.domain.Recipe import Recipe
from foodcoach.utilities.constants import DAY_LABELS, MEAL_SLOTS


def week_start(today: Optional[_date] = None) -> _date:
    """Sunday of the week containing `today`."""
    today = today or _date.today()
    # date.weekday() is Monday=0; shift so Sunday=0
    return today - timedelta(days=(today.weekday() + 1) % 7)


def get_week_dates(today: Optional[_date] = None) -> List[Tuple[str, str]]:
    """(ISO date, day label) for the 7 days of the current week, Sunday first."""
    sunday = week_start(today)
    return [((sunday + timedelta(days=i)).isoformat(), DAY_LABELS[i]) for i in range(7)]


def build_week_plan(recipes: Sequence[Recipe], today: Optional[_date] = None) -> WeekPlan:
    """Assign recipes[counter % len] to each slot in day/slot order with one shared counter.

    No recipes -> every slot stays empty. With 3 recipes every day repeats the
    same breakfast/lunch/dinner; repetition is expected.
    """
    recipes = list(recipes)
    counter = 0
    week: WeekPlan = []
    for iso_date, label in get_week_dates(today):
        slots = {}
        for slot in MEAL_SLOTS:
            if recipes:
                slots[slot] = recipes[counter % len(recipes)]
                counter += 1
        week.append(DayPlan(date=iso_date, day_label=label, **slots))
    return week


__all__ = ["week_start", "get_week_dates", "build_week_plan"]
