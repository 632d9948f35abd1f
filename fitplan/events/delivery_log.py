"""In-memory log of reminder deliveries for the web layer.

Subscribes to reminder.sent / reminder.failed and keeps a ring buffer of
recent events. Each event gets an auto-increment id (cursor) so clients can
poll with since=<last_id_seen> and only receive newer entries.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import EventBus, GLOBAL_EVENT_BUS, REMINDER_SENT, REMINDER_FAILED

MAX_EVENTS = 300


class DeliveryLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._max_events = max_events
        self._buses: List[EventBus] = []

    def record(self, event_name: str, payload: Any) -> None:
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat(),
            }
            if isinstance(payload, dict):
                for k in ('user_id', 'slot', 'kind', 'error'):
                    if k in payload:
                        evt[k] = payload[k]
            self._events.append(evt)
            self._next_id += 1
            if len(self._events) > self._max_events:
                del self._events[: len(self._events) - self._max_events]

    def start(self, bus: EventBus = GLOBAL_EVENT_BUS) -> None:
        """Idempotent: subscribe once per bus."""
        if bus in self._buses:
            return
        bus.subscribe(REMINDER_SENT, self.record)
        bus.subscribe(REMINDER_FAILED, self.record)
        self._buses.append(bus)

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than ``since`` (exclusive), or all buffered events."""
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


DELIVERY_LOG = DeliveryLog()

__all__ = ['DeliveryLog', 'DELIVERY_LOG', 'MAX_EVENTS']
