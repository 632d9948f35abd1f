"""Catalog generation: the fixed schedule template, 8-week workout plan and weekly meal plan."""
from __future__ import annotations

import copy
from typing import Dict, List, NamedTuple

from fitplan.domain.Meal import Meal
from fitplan.domain.Workout import Workout
from fitplan.logic.catalog.data import (
    SCHEDULE_TEMPLATE, MEAL_PLAN, WORKOUT_PLAN, BODYWEIGHT_CIRCUITS, RUN_DETAILS
)

__all__ = ["Catalog", "CatalogGenerator", "workout_details"]


class Catalog(NamedTuple):
    schedule: Dict[str, Dict[str, str]]
    workouts: List[Workout]
    meals: List[Meal]


def workout_details(name: str) -> str:
    """Instruction text for named circuits and runs; empty for everything else."""
    if "Run" in name:
        return RUN_DETAILS
    if "Bodyweight Circuit" in name:
        return BODYWEIGHT_CIRCUITS.get(name, "")
    return ""


class CatalogGenerator:
    def generate(self, user_id: int) -> Catalog:
        user_id = int(user_id)
        workouts = [
            Workout(user_id, week, day, name, f"Workout for {day}", workout_details(name))
            for week, days in sorted(WORKOUT_PLAN.items())
            for day, name in days.items()
        ]
        meals = [Meal(user_id, day, info["main_meal"], info["snack"]) for day, info in MEAL_PLAN.items()]
        return Catalog(copy.deepcopy(SCHEDULE_TEMPLATE), workouts, meals)
