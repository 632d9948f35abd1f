"""NotificationTrigger: one recurring reminder bound to a user and a schedule slot."""
from enum import Enum

from fitplan.utilities.constants import WORKOUT_SLOT, SNACK_SLOT, MAIN_MEAL_SLOT


class SlotKind(Enum):
    WORKOUT = "workout"
    SNACK = "snack"
    MAIN_MEAL = "main_meal"
    GENERIC = "generic"


_SLOT_KINDS = {
    WORKOUT_SLOT: SlotKind.WORKOUT,
    SNACK_SLOT: SlotKind.SNACK,
    MAIN_MEAL_SLOT: SlotKind.MAIN_MEAL,
}


def slot_kind_for(slot: str) -> SlotKind:
    """The kind depends only on the literal "HH:MM" value."""
    return _SLOT_KINDS.get(slot, SlotKind.GENERIC)


class NotificationTrigger:
    def __init__(self, user_id: int, slot: str, title: str = "", description: str = ""):
        hour, minute = slot.split(":")
        self.user_id = user_id
        self.slot = slot
        self.hour = int(hour)
        self.minute = int(minute)
        self.kind = slot_kind_for(slot)
        self.title = title
        self.description = description

    @property
    def key(self):
        return (self.user_id, self.slot)

    @property
    def job_name(self) -> str:
        return f"reminder:{self.user_id}:{self.slot}"

    def __str__(self) -> str:
        return f"Trigger {self.user_id} @ {self.slot} ({self.kind.value})"

    __repr__ = __str__
