"""Program week arithmetic."""
from __future__ import annotations

from datetime import datetime, timezone

from fitplan.utilities.constants import PROGRAM_WEEKS, SECONDS_PER_DAY

__all__ = ["current_week", "elapsed_days"]


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def elapsed_days(start: datetime, now: datetime) -> int:
    """Whole days between the two instants, in either direction."""
    seconds = abs((_aware(now) - _aware(start)).total_seconds())
    return int(seconds // SECONDS_PER_DAY)


def current_week(start: datetime | None, now: datetime) -> int:
    """Return the 1-indexed program week for ``now``, capped at the program length.

    A missing start date maps to week 1, so "not enrolled" and "first week"
    look the same to callers.
    """
    if start is None:
        return 1
    week = elapsed_days(start, now) // 7 + 1
    return min(week, PROGRAM_WEEKS)
