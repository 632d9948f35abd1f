"""User domain entity: enrolled id, program start date and per-week progress."""
from datetime import datetime, timezone
from typing import Dict, Optional

from fitplan.domain.WeekProgress import WeekProgress


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 string (or pass a datetime through); naive values are taken as UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class User:
    def __init__(self, user_id: int, start_date: Optional[datetime] = None,
                 progress: Optional[Dict[int, WeekProgress]] = None):
        self.user_id = user_id
        self.start_date = start_date
        self.progress = dict(progress) if progress else {}

    def __str__(self) -> str:
        start = self.start_date.isoformat() if self.start_date else "-"
        return f"User {self.user_id} - started {start} - weeks tracked: {sorted(self.progress)}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        progress = {}
        for week, raw in (d.get("progress") or {}).items():
            try:
                progress[int(week)] = WeekProgress.from_dict(raw)
            except (TypeError, ValueError):
                continue
        return User(int(d.get("user_id", 0)), parse_timestamp(d.get("start_date")), progress)

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "progress": {str(w): p.to_dict() for w, p in sorted(self.progress.items())},
        }
