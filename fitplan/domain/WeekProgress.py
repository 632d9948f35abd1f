"""WeekProgress domain entity: task completion flags plus per-day and per-week counters.

Counters are always derived from ``tasks`` (``recount``/``recount_day``);
they are never incremented in place.
"""
from typing import Dict, Optional


class DayCounter:
    def __init__(self, total: int = 0, completed: int = 0):
        self.total = total
        self.completed = completed

    def __eq__(self, other) -> bool:
        if isinstance(other, DayCounter):
            return (self.total, self.completed) == (other.total, other.completed)
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.completed}/{self.total}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return DayCounter(int(d.get("total", 0) or 0), int(d.get("completed", 0) or 0))

    def to_dict(self):
        return {"total": self.total, "completed": self.completed}


# Keys an old flat week record may carry next to its task flags
_LEGACY_RESERVED = {"daily", "total", "completed", "tasks"}


def task_day(task_key: str) -> Optional[str]:
    """Return the day prefix of a "<day>_<slot>" key, or None when the key has no day part."""
    if not isinstance(task_key, str) or "_" not in task_key:
        return None
    day = task_key.split("_", 1)[0]
    return day or None


class WeekProgress:
    def __init__(self, tasks: Optional[Dict[str, bool]] = None,
                 daily: Optional[Dict[str, DayCounter]] = None,
                 total: int = 0, completed: int = 0, has_daily: bool = True):
        self.tasks = dict(tasks) if tasks else {}
        self.daily = dict(daily) if daily else {}
        self.total = total
        self.completed = completed
        # False when the stored record never had a "daily" field
        self.has_daily = has_daily

    def __str__(self) -> str:
        return f"WeekProgress {self.completed}/{self.total} - daily: {self.daily}"

    __repr__ = __str__

    def recount_day(self, day: str) -> DayCounter:
        prefix = day + "_"
        keys = [k for k in self.tasks if k.startswith(prefix)]
        counter = DayCounter(len(keys), sum(1 for k in keys if self.tasks[k] is True))
        self.daily[day] = counter
        return counter

    def recount(self) -> None:
        self.total = len(self.tasks)
        self.completed = sum(1 for v in self.tasks.values() if v is True)

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        if isinstance(d.get("tasks"), dict):
            tasks = {str(k): bool(v) for k, v in d["tasks"].items()}
        else:
            # Flat legacy layout: task flags live directly on the week object
            tasks = {k: v for k, v in d.items() if k not in _LEGACY_RESERVED and isinstance(v, bool)}
        has_daily = isinstance(d.get("daily"), dict)
        daily = {day: DayCounter.from_dict(c) for day, c in (d.get("daily") or {}).items()} if has_daily else {}
        progress = WeekProgress(tasks, daily, has_daily=has_daily)
        progress.recount()
        return progress

    def to_dict(self):
        return {
            "tasks": dict(self.tasks),
            "daily": {day: c.to_dict() for day, c in self.daily.items()},
            "total": self.total,
            "completed": self.completed,
        }
