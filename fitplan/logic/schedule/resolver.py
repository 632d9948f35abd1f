"""Per-day schedule resolution.

Merges the user's fixed "HH:MM" template with the day's workout (for the
workout slot) and meal (for the snack and main-meal slots). Missing
workout/meal rows fall back to the template text.
"""
from __future__ import annotations

import logging
from typing import Dict, Any

from fitplan.domain.Trigger import SlotKind, slot_kind_for
from fitplan.infra.Program_Repository import ProgramRepository

__all__ = ["ScheduleResolver", "MEAL_FIELDS"]

logger = logging.getLogger(__name__)

MEAL_FIELDS = {SlotKind.SNACK: "snack", SlotKind.MAIN_MEAL: "main_meal"}


class ScheduleResolver:
    def __init__(self, repo: ProgramRepository):
        self.repo = repo

    def resolve_for_day(self, template: Dict[str, Dict[str, Any]], user_id: int,
                        day: str, week: int) -> Dict[str, Dict[str, Any]]:
        """Return a copy of ``template`` with the day-specific overrides applied.

        The result always has exactly the template's slots.
        """
        workout = None
        meal = None
        kinds = {slot: slot_kind_for(slot) for slot in template}
        if SlotKind.WORKOUT in kinds.values():
            workout = self.repo.get_workout(user_id, week, day)
        if any(k in MEAL_FIELDS for k in kinds.values()):
            meal = self.repo.get_meal(user_id, day)

        resolved: Dict[str, Dict[str, Any]] = {}
        for slot, base in template.items():
            entry = dict(base)
            kind = kinds[slot]
            if kind is SlotKind.WORKOUT and workout is not None:
                entry["title"] = workout.title
                entry["description"] = workout.description
            elif kind in MEAL_FIELDS and meal is not None:
                entry["meal_content"] = meal.content_for(MEAL_FIELDS[kind])
            resolved[slot] = entry
        logger.debug("Resolved schedule user=%s day=%s week=%s workout=%s meal=%s",
                     user_id, day, week, workout is not None, meal is not None)
        return resolved
