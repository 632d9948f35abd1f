"""Shared services for the API routes and the bot."""
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from fitplan.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from fitplan.infra.Program_Repository import ProgramRepository
from fitplan.infra.Record_Store import JsonRecordStore
from fitplan.logic.program.enrollment import EnrollmentService
from fitplan.logic.progress.tracker import ProgressTracker
from fitplan.logic.schedule.resolver import ScheduleResolver
from fitplan.utilities.config import DB_FILE


class ProgramServices:
    """One store and the components built on it; shared so per-user locks are shared too."""

    def __init__(self, store: JsonRecordStore, bus: EventBus = GLOBAL_EVENT_BUS):
        self.store = store
        self.repo = ProgramRepository(store)
        self.resolver = ScheduleResolver(self.repo)
        self.tracker = ProgressTracker(self.repo)
        self.enrollment = EnrollmentService(self.repo, bus=bus)

    @classmethod
    def from_path(cls, path: Optional[Union[str, Path]] = None, bus: EventBus = GLOBAL_EVENT_BUS):
        return cls(JsonRecordStore(path), bus=bus)


@lru_cache(maxsize=1)
def get_services() -> ProgramServices:
    return ProgramServices.from_path(DB_FILE)
