"""Program repository: typed access to users, schedules, workouts and meals in the record store."""
import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional
from weakref import WeakValueDictionary

from fitplan.domain.Meal import Meal
from fitplan.domain.User import User
from fitplan.domain.WeekProgress import WeekProgress
from fitplan.domain.Workout import Workout
from fitplan.infra.Record_Store import JsonRecordStore
from fitplan.logic.program.week_calculator import current_week
from fitplan.utilities.constants import USERS, SCHEDULES, WORKOUTS, MEALS

logger = logging.getLogger(__name__)


class ProgramRepository:
    def __init__(self, store: JsonRecordStore):
        self.store = store
        self._locks_guard = Lock()
        self._user_locks: "WeakValueDictionary[int, Lock]" = WeakValueDictionary()

    def user_lock(self, user_id: int) -> Lock:
        """Lock serialising every read-modify-write on one user's rows.

        Entries live only while some caller holds the lock object.
        """
        with self._locks_guard:
            lock = self._user_locks.get(int(user_id))
            if lock is None:
                lock = Lock()
                self._user_locks[int(user_id)] = lock
            return lock

    # -------------------- users --------------------
    def get_user(self, user_id: int) -> Optional[User]:
        record = self.store.find(USERS, {"user_id": int(user_id)})
        return User.from_dict(record) if record else None

    def user_exists(self, user_id: int) -> bool:
        return self.store.find(USERS, {"user_id": int(user_id)}) is not None

    def all_user_ids(self) -> List[int]:
        return [r["user_id"] for r in self.store.find_all(USERS) if "user_id" in r]

    def add_user(self, user: User) -> None:
        self.store.insert(USERS, user.to_dict())

    def save_week_progress(self, user_id: int, week: int, progress: WeekProgress) -> None:
        record = self.store.find(USERS, {"user_id": int(user_id)})
        if record is None:
            return
        all_progress = dict(record.get("progress") or {})
        all_progress[str(week)] = progress.to_dict()
        self.store.update(USERS, {"user_id": int(user_id)}, {"progress": all_progress})

    def current_week_for(self, user_id: int, now: Optional[datetime] = None) -> int:
        """Program week for a stored user; users without a start date are in week 1."""
        user = self.get_user(user_id)
        start = user.start_date if user else None
        return current_week(start, now or datetime.now(timezone.utc))

    # -------------------- schedule --------------------
    def get_schedule(self, user_id: int) -> Optional[Dict[str, dict]]:
        record = self.store.find(SCHEDULES, {"user_id": int(user_id)})
        return record.get("tasks") if record else None

    def add_schedule(self, user_id: int, tasks: Dict[str, dict]) -> None:
        self.store.insert(SCHEDULES, {"user_id": int(user_id), "tasks": tasks})

    # -------------------- catalog --------------------
    def get_workout(self, user_id: int, week: int, day: str) -> Optional[Workout]:
        record = self.store.find(WORKOUTS, {"user_id": int(user_id), "week": int(week), "day": day})
        return Workout.from_dict(record) if record else None

    def get_meal(self, user_id: int, day: str) -> Optional[Meal]:
        record = self.store.find(MEALS, {"user_id": int(user_id), "day": day})
        return Meal.from_dict(record) if record else None

    def add_workouts(self, workouts: List[Workout]) -> None:
        if workouts:
            self.store.insert(WORKOUTS, *[w.to_dict() for w in workouts])

    def add_meals(self, meals: List[Meal]) -> None:
        if meals:
            self.store.insert(MEALS, *[m.to_dict() for m in meals])

    def delete_program(self, user_id: int) -> None:
        """Remove every row owned by the user (user, schedule, workouts, meals)."""
        removed = {name: self.store.delete(name, {"user_id": int(user_id)})
                   for name in (USERS, SCHEDULES, WORKOUTS, MEALS)}
        logger.info("Deleted program rows for user %s: %s", user_id, removed)
