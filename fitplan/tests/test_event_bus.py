import unittest

from fitplan.domain.Trigger import NotificationTrigger
from fitplan.events.Event_Bus import EventBus, PROGRAM_ENROLLED, REMINDER_SENT, REMINDER_FAILED
from fitplan.events.event_helpers import publish_enrolled, publish_reminder_sent, publish_reminder_failed


class TestEventBus(unittest.TestCase):
    def setUp(self):
        self.bus = EventBus()
        self.received = []

    def _collect(self, name, payload):
        self.received.append((name, payload))

    def test_unknown_event_names_are_rejected(self):
        with self.assertRaises(ValueError):
            self.bus.subscribe("program.deleted", self._collect)
        with self.assertRaises(ValueError):
            self.bus.publish("program.deleted", {"user_id": 1})

    def test_subscribe_is_idempotent_and_unsubscribe_stops_delivery(self):
        self.bus.subscribe(PROGRAM_ENROLLED, self._collect)
        self.bus.subscribe(PROGRAM_ENROLLED, self._collect)
        self.assertEqual(publish_enrolled(1, False, bus=self.bus), 1)
        self.bus.unsubscribe(PROGRAM_ENROLLED, self._collect)
        self.bus.unsubscribe(PROGRAM_ENROLLED, self._collect)
        self.assertEqual(publish_enrolled(1, True, bus=self.bus), 0)
        self.assertEqual(self.received, [(PROGRAM_ENROLLED, {"user_id": 1, "regenerated": False})])

    def test_failing_handler_is_not_counted(self):
        def broken(name, payload):
            raise RuntimeError("handler down")
        self.bus.subscribe(REMINDER_SENT, broken)
        self.bus.subscribe(REMINDER_SENT, self._collect)
        self.assertEqual(self.bus.publish(REMINDER_SENT, {"user_id": 4}), 1)
        self.assertEqual(self.received, [(REMINDER_SENT, {"user_id": 4})])

    def test_reminder_payloads(self):
        self.bus.subscribe(REMINDER_SENT, self._collect)
        self.bus.subscribe(REMINDER_FAILED, self._collect)
        trigger = NotificationTrigger(7, "16:00", "Snack", "")
        publish_reminder_sent(trigger, bus=self.bus)
        publish_reminder_failed(trigger, "blocked", bus=self.bus)
        self.assertEqual(self.received, [
            (REMINDER_SENT, {"user_id": 7, "slot": "16:00", "kind": "snack"}),
            (REMINDER_FAILED, {"user_id": 7, "slot": "16:00", "kind": "snack", "error": "blocked"}),
        ])


if __name__ == '__main__':
    unittest.main()
