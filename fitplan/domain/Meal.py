"""Meal domain entity: the day's main meal and snack (repeats every week)."""


class Meal:
    def __init__(self, user_id: int, day: str, main_meal: str = "", snack: str = ""):
        self.user_id = user_id
        self.day = day
        self.main_meal = main_meal
        self.snack = snack

    def __str__(self) -> str:
        return f"{self.day} - Main: {self.main_meal} - Snack: {self.snack}"

    __repr__ = __str__

    def content_for(self, field: str) -> str:
        return self.snack if field == "snack" else self.main_meal

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Meal(int(d.get("user_id", 0)), d.get("day", ""), d.get("main_meal", ""), d.get("snack", ""))

    def to_dict(self):
        return {"user_id": self.user_id, "day": self.day, "main_meal": self.main_meal, "snack": self.snack}
