"""Reminder text for each slot kind."""
from typing import Optional, Tuple

from fitplan.domain.Meal import Meal
from fitplan.domain.Workout import Workout
from fitplan.utilities.constants import WORKOUT_FALLBACK_TEXT, MEAL_FALLBACK_TEXT

# (text, formatted) - formatted texts use Telegram Markdown
Message = Tuple[str, bool]

MEAL_LABELS = {"snack": "snack", "main_meal": "main meal"}


def workout_message(workout: Optional[Workout]) -> Message:
    if workout is None:
        return WORKOUT_FALLBACK_TEXT, False
    text = f"Time to workout!\n\n*{workout.title}*\n{workout.description}"
    if workout.details:
        text += f"\n\n*Details:*\n{workout.details}"
    return text, True


def meal_message(meal: Optional[Meal], field: str) -> Message:
    label = MEAL_LABELS.get(field, field)
    if meal is None:
        return MEAL_FALLBACK_TEXT.format(label=label), False
    return f"Time for your {label}!\n\n*{meal.content_for(field)}*", True


def generic_message(title: str, description: str) -> Message:
    return f"*{title}*\n{description}", True
