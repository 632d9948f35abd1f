from typing import Final

PROGRAM_WEEKS: Final[int] = 8
SECONDS_PER_DAY: Final[int] = 24 * 60 * 60

DAYS: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
# Task keys are written by the mini-app as "<day>_<slot>" with a lowercase day
TASK_KEY_DAYS: Final[tuple[str, ...]] = tuple(d.lower() for d in DAYS)

WORKOUT_SLOT: Final[str] = "17:00"
SNACK_SLOT: Final[str] = "16:00"
MAIN_MEAL_SLOT: Final[str] = "22:00"

WORKOUT_FALLBACK_TEXT: Final[str] = "It's workout time! Check the mini-app for details."
MEAL_FALLBACK_TEXT: Final[str] = "It's time for your {label}! Check the mini-app for details."

USERS: Final[str] = "users"
SCHEDULES: Final[str] = "schedules"
WORKOUTS: Final[str] = "workouts"
MEALS: Final[str] = "meals"
COLLECTIONS: Final[tuple[str, ...]] = (USERS, SCHEDULES, WORKOUTS, MEALS)
