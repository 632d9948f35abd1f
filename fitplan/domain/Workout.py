"""Workout domain entity: one planned session per (user, week, day)."""


class Workout:
    def __init__(self, user_id: int, week: int, day: str, title: str = "",
                 description: str = "", details: str = ""):
        self.user_id = user_id
        self.week = week
        self.day = day
        self.title = title
        self.description = description
        self.details = details

    def __str__(self) -> str:
        return f"Week {self.week} {self.day}: {self.title}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Workout from a stored record. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Workout(
            int(d.get("user_id", 0)),
            int(d.get("week", 0)),
            d.get("day", ""),
            d.get("title", ""),
            d.get("description", ""),
            d.get("details", "") or "",
        )

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "week": self.week,
            "day": self.day,
            "title": self.title,
            "description": self.description,
            "details": self.details,
        }
