"""DayPlan domain entity: one calendar day with optional breakfast, lunch and dinner recipes."""
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from foodcoach.domain.Recipe import Recipe
from foodcoach.utilities.constants import MEAL_SLOTS


class DayPlan(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str  # YYYY-MM-DD
    day_label: str = Field(..., alias="dayLabel")
    breakfast: Optional[Recipe] = None
    lunch: Optional[Recipe] = None
    dinner: Optional[Recipe] = None

    def slot(self, name: str) -> Optional[Recipe]:
        if name not in MEAL_SLOTS:
            raise KeyError(name)
        return getattr(self, name)

    def meals(self) -> List[Tuple[str, Recipe]]:
        """Filled slots in breakfast, lunch, dinner order."""
        return [(s, getattr(self, s)) for s in MEAL_SLOTS if getattr(self, s) is not None]

    def to_dict(self) -> Dict[str, Any]:
        # Empty slots are left out entirely
        return self.model_dump(by_alias=True, exclude_none=True)


# Exactly seven days, Sunday first
WeekPlan = List[DayPlan]
