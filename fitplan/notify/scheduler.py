"""Daily reminder scheduling.

One job per (user, slot) is registered on a python-telegram-bot ``JobQueue``
and re-arms every day at the slot's wall-clock time in the configured zone.
Message content is resolved when the job fires, so the reminder follows the
user's live program week and weekday.

Registry:
  * ``_jobs`` maps (user_id, slot) -> job handle returned by ``run_daily``.
  * ``register_user`` replaces a user's jobs; ``rebuild`` replaces all jobs.
  * Enrollment events (program.enrolled) trigger ``register_user`` once
    ``start`` has subscribed the scheduler to the bus.
"""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, time
from threading import Lock
from typing import Any, Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo

from fitplan.domain.Trigger import NotificationTrigger, SlotKind
from fitplan.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS, PROGRAM_ENROLLED
from fitplan.events.event_helpers import publish_reminder_sent, publish_reminder_failed
from fitplan.infra.Program_Repository import ProgramRepository
from fitplan.infra.Record_Store import StoreUnavailableError
from fitplan.logic.schedule.resolver import MEAL_FIELDS
from fitplan.notify.messages import Message, workout_message, meal_message, generic_message
from fitplan.utilities.constants import DAYS

__all__ = ["NotificationScheduler"]

logger = logging.getLogger(__name__)


class NotificationScheduler:
    def __init__(self, repo: ProgramRepository, transport, job_queue, zone: ZoneInfo,
                 bus: EventBus = GLOBAL_EVENT_BUS):
        self.repo = repo
        self.transport = transport
        self.job_queue = job_queue
        self.zone = zone
        self.bus = bus
        self._lock = Lock()
        self._jobs: Dict[Tuple[int, str], Any] = {}

    # -------------------- registry --------------------
    def build_triggers(self, user_id: int) -> List[NotificationTrigger]:
        schedule = self.repo.get_schedule(user_id)
        if not schedule:
            return []
        triggers = []
        for slot, entry in schedule.items():
            try:
                trigger = NotificationTrigger(int(user_id), slot, entry.get("title", ""), entry.get("description", ""))
            except ValueError:
                logger.warning("Skipping malformed schedule slot %r for user %s", slot, user_id)
                continue
            triggers.append(trigger)
        return triggers

    def _remove_user_jobs(self, user_id: int) -> None:
        for key in [k for k in self._jobs if k[0] == int(user_id)]:
            self._jobs.pop(key).schedule_removal()

    def register_user(self, user_id: int) -> int:
        """(Re)register every slot of the user's schedule; returns the number of jobs."""
        triggers = self.build_triggers(user_id)
        with self._lock:
            self._remove_user_jobs(user_id)
            for trigger in triggers:
                self._jobs[trigger.key] = self.job_queue.run_daily(
                    self._run_job,
                    time=time(hour=trigger.hour, minute=trigger.minute, tzinfo=self.zone),
                    data=trigger,
                    name=trigger.job_name,
                )
        logger.info("Registered %d reminders for user %s", len(triggers), user_id)
        return len(triggers)

    def rebuild(self) -> int:
        """Drop every job and register all enrolled users again."""
        with self._lock:
            for job in self._jobs.values():
                job.schedule_removal()
            self._jobs.clear()
        total = sum(self.register_user(user_id) for user_id in self.repo.all_user_ids())
        logger.info("Reminder registry rebuilt with %d jobs", total)
        return total

    @property
    def registered(self) -> List[Tuple[int, str]]:
        with self._lock:
            return sorted(self._jobs)

    def _on_enrolled(self, event_name: str, payload: Any) -> None:
        self.register_user(payload["user_id"])

    def start(self) -> int:
        self.bus.subscribe(PROGRAM_ENROLLED, self._on_enrolled)
        return self.rebuild()

    def shutdown(self) -> None:
        self.bus.unsubscribe(PROGRAM_ENROLLED, self._on_enrolled)
        with self._lock:
            for job in self._jobs.values():
                job.schedule_removal()
            self._jobs.clear()

    # -------------------- firing --------------------
    def compose_message(self, trigger: NotificationTrigger, now: datetime) -> Message:
        """Build the reminder text for ``trigger`` as of ``now``."""
        local_now = now.astimezone(self.zone)
        day = DAYS[local_now.weekday()]
        if trigger.kind is SlotKind.WORKOUT:
            week = self.repo.current_week_for(trigger.user_id, now)
            return workout_message(self.repo.get_workout(trigger.user_id, week, day))
        if trigger.kind in MEAL_FIELDS:
            return meal_message(self.repo.get_meal(trigger.user_id, day), MEAL_FIELDS[trigger.kind])
        return generic_message(trigger.title, trigger.description)

    async def fire(self, trigger: NotificationTrigger, now: Optional[datetime] = None) -> bool:
        """Resolve and send one reminder. Failures are logged and never raised."""
        now = now or datetime.now(self.zone)
        try:
            text, formatted = await asyncio.to_thread(self.compose_message, trigger, now)
        except StoreUnavailableError as e:
            logger.error("Could not resolve %s: %s", trigger, e)
            publish_reminder_failed(trigger, str(e), bus=self.bus)
            return False

        try:
            sent = await self.transport.send_message(trigger.user_id, text, formatted=formatted)
        except Exception as e:
            logger.exception("Transport raised while sending %s", trigger)
            publish_reminder_failed(trigger, str(e), bus=self.bus)
            return False

        if sent:
            logger.debug("Sent %s", trigger)
            publish_reminder_sent(trigger, bus=self.bus)
        else:
            logger.warning("Delivery failed for %s; next attempt at the next occurrence", trigger)
            publish_reminder_failed(trigger, "transport failure", bus=self.bus)
        return bool(sent)

    async def _run_job(self, context) -> None:
        await self.fire(context.job.data)
