"""Task completion tracking per user, week and day.

Every write recounts the affected day and the week totals from the task
flags, so the counters can never drift from ``tasks``.
"""
from __future__ import annotations

import logging
from typing import Optional

from fitplan.domain.WeekProgress import WeekProgress, task_day
from fitplan.infra.Program_Repository import ProgramRepository
from fitplan.utilities.constants import TASK_KEY_DAYS

__all__ = ["ProgressTracker"]

logger = logging.getLogger(__name__)


def _backfill_daily(progress: WeekProgress) -> None:
    """Build ``daily`` for weeks stored before per-day counters existed."""
    for day in TASK_KEY_DAYS:
        if any(k.startswith(day + "_") for k in progress.tasks):
            progress.recount_day(day)
    progress.has_daily = True


class ProgressTracker:
    def __init__(self, repo: ProgramRepository):
        self.repo = repo

    def record_completion(self, user_id: int, week: int, task_key: str,
                          completed: bool) -> Optional[WeekProgress]:
        """Set one task flag and refresh the counters.

        Unknown users are ignored (returns None) rather than reported as errors.
        """
        with self.repo.user_lock(user_id):
            user = self.repo.get_user(user_id)
            if user is None:
                logger.info("Ignoring progress update for unknown user %s", user_id)
                return None
            progress = user.progress.get(int(week)) or WeekProgress()
            if not progress.has_daily:
                _backfill_daily(progress)
            progress.tasks[task_key] = bool(completed)

            day = task_day(task_key)
            if day is not None:
                progress.recount_day(day)
            else:
                logger.debug("Task key %r has no day part; skipping daily counters", task_key)
            progress.recount()

            self.repo.save_week_progress(user_id, week, progress)
            return progress

    def get_progress(self, user_id: int, week: int) -> WeekProgress:
        """Return the week's progress, zero-valued when nothing was recorded.

        Weeks stored without daily counters get them backfilled (and saved) on
        first read; later reads find ``daily`` present and change nothing.
        """
        with self.repo.user_lock(user_id):
            user = self.repo.get_user(user_id)
            progress = user.progress.get(int(week)) if user else None
            if progress is None:
                return WeekProgress()
            if not progress.has_daily:
                _backfill_daily(progress)
                self.repo.save_week_progress(user_id, week, progress)
                logger.info("Backfilled daily progress for user %s week %s", user_id, week)
            return progress
