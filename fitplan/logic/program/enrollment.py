"""Enrollment: creating (generate) and resetting (regenerate) a user's 8-week program."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from fitplan.domain.User import User
from fitplan.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from fitplan.events.event_helpers import publish_enrolled
from fitplan.infra.Program_Repository import ProgramRepository
from fitplan.logic.catalog.generator import CatalogGenerator

__all__ = ["EnrollmentResult", "EnrollmentService"]

logger = logging.getLogger(__name__)


class EnrollmentResult(Enum):
    ENROLLED = "enrolled"
    ALREADY_ENROLLED = "already_enrolled"
    REGENERATED = "regenerated"


class EnrollmentService:
    def __init__(self, repo: ProgramRepository, generator: Optional[CatalogGenerator] = None,
                 bus: EventBus = GLOBAL_EVENT_BUS):
        self.repo = repo
        self.generator = generator or CatalogGenerator()
        self.bus = bus

    def _create_program(self, user_id: int, now: datetime) -> None:
        catalog = self.generator.generate(user_id)
        self.repo.add_user(User(int(user_id), now))
        self.repo.add_schedule(user_id, catalog.schedule)
        self.repo.add_workouts(catalog.workouts)
        self.repo.add_meals(catalog.meals)

    def enroll(self, user_id: int, now: Optional[datetime] = None) -> EnrollmentResult:
        """Create the user's program; an existing program is left untouched."""
        now = now or datetime.now(timezone.utc)
        with self.repo.user_lock(user_id):
            if self.repo.user_exists(user_id):
                logger.info("User %s already enrolled; enrollment skipped", user_id)
                return EnrollmentResult.ALREADY_ENROLLED
            self._create_program(user_id, now)
        logger.info("Enrolled user %s starting %s", user_id, now.isoformat())
        publish_enrolled(user_id, False, bus=self.bus)
        return EnrollmentResult.ENROLLED

    def regenerate(self, user_id: int, now: Optional[datetime] = None) -> EnrollmentResult:
        """Drop every row the user owns (progress included) and enroll again from ``now``."""
        now = now or datetime.now(timezone.utc)
        with self.repo.user_lock(user_id):
            self.repo.delete_program(user_id)
            self._create_program(user_id, now)
        logger.info("Regenerated program for user %s starting %s", user_id, now.isoformat())
        publish_enrolled(user_id, True, bus=self.bus)
        return EnrollmentResult.REGENERATED
