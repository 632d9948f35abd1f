"""Synchronous event bus for program and reminder events.

Event names:
  program.enrolled -> payload {"user_id": int, "regenerated": bool}
  reminder.sent    -> payload {"user_id": int, "slot": str, "kind": str}
  reminder.failed  -> payload {"user_id": int, "slot": str, "kind": str, "error": str}

Handlers are callables taking (event_name, payload). They run in the
publisher's thread, in subscription order; a handler that raises is logged
and skipped. Only the names above are accepted.
"""
from __future__ import annotations
import logging
from threading import Lock
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

PROGRAM_ENROLLED = "program.enrolled"
REMINDER_SENT = "reminder.sent"
REMINDER_FAILED = "reminder.failed"

EVENTS = frozenset({PROGRAM_ENROLLED, REMINDER_SENT, REMINDER_FAILED})

Handler = Callable[[str, Dict[str, Any]], None]


class EventBus:
    def __init__(self):
        self._lock = Lock()
        self._handlers: Dict[str, List[Handler]] = {name: [] for name in EVENTS}

    def _handlers_for(self, event_name: str) -> List[Handler]:
        if event_name not in self._handlers:
            raise ValueError(f"Unknown event {event_name!r}")
        return self._handlers[event_name]

    def subscribe(self, event_name: str, handler: Handler) -> None:
        with self._lock:
            handlers = self._handlers_for(event_name)
            if handler not in handlers:
                handlers.append(handler)

    def unsubscribe(self, event_name: str, handler: Handler) -> None:
        with self._lock:
            handlers = self._handlers_for(event_name)
            if handler in handlers:
                handlers.remove(handler)

    def publish(self, event_name: str, payload: Dict[str, Any]) -> int:
        """Deliver ``payload``; returns how many handlers took it without raising."""
        with self._lock:
            handlers = list(self._handlers_for(event_name))
        delivered = 0
        for handler in handlers:
            try:
                handler(event_name, payload)
            except Exception:
                logger.exception("Handler %r failed on %s for user %s",
                                 handler, event_name, payload.get("user_id"))
            else:
                delivered += 1
        return delivered


GLOBAL_EVENT_BUS = EventBus()

__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'EVENTS', 'Handler',
           'PROGRAM_ENROLLED', 'REMINDER_SENT', 'REMINDER_FAILED']
