"""Helpers that build and publish the program and reminder event payloads.

Quick import:
    from fitplan.events.event_helpers import (
        publish_enrolled, publish_reminder_sent, publish_reminder_failed
    )
"""
from __future__ import annotations

from fitplan.domain.Trigger import NotificationTrigger
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS, PROGRAM_ENROLLED, REMINDER_SENT, REMINDER_FAILED
)

__all__ = ['publish_enrolled', 'publish_reminder_sent', 'publish_reminder_failed']


def _reminder_payload(trigger: NotificationTrigger) -> dict:
    return {'user_id': trigger.user_id, 'slot': trigger.slot, 'kind': trigger.kind.value}


def publish_enrolled(user_id: int, regenerated: bool, bus: EventBus = GLOBAL_EVENT_BUS) -> int:
    """Publish program.enrolled after a program was created or rebuilt."""
    return bus.publish(PROGRAM_ENROLLED, {'user_id': int(user_id), 'regenerated': regenerated})


def publish_reminder_sent(trigger: NotificationTrigger, bus: EventBus = GLOBAL_EVENT_BUS) -> int:
    return bus.publish(REMINDER_SENT, _reminder_payload(trigger))


def publish_reminder_failed(trigger: NotificationTrigger, error: str,
                            bus: EventBus = GLOBAL_EVENT_BUS) -> int:
    return bus.publish(REMINDER_FAILED, {**_reminder_payload(trigger), 'error': error})
