import copy
import unittest
from datetime import datetime, timezone

from fitplan.api.dependencies import ProgramServices
from fitplan.events.Event_Bus import EventBus
from fitplan.logic.catalog.data import SCHEDULE_TEMPLATE
from fitplan.utilities.constants import WORKOUTS, MEALS

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestScheduleResolver(unittest.TestCase):
    def setUp(self):
        self.services = ProgramServices.from_path(None, bus=EventBus())
        self.services.enrollment.enroll(1, T0)
        self.resolver = self.services.resolver
        self.template = self.services.repo.get_schedule(1)

    def test_workout_slot_uses_the_days_workout(self):
        resolved = self.resolver.resolve_for_day(self.template, 1, "Wednesday", 1)
        self.assertEqual(resolved["17:00"]["title"], "Bodyweight Circuit 1")
        self.assertEqual(resolved["17:00"]["description"], "Workout for Wednesday")
        resolved = self.resolver.resolve_for_day(self.template, 1, "Monday", 2)
        self.assertEqual(resolved["17:00"]["title"], "35 min Run (easy pace)")

    def test_meal_slots_get_meal_content(self):
        resolved = self.resolver.resolve_for_day(self.template, 1, "Monday", 1)
        self.assertEqual(resolved["16:00"]["meal_content"], "Handful of almonds and a small apple.")
        self.assertTrue(resolved["22:00"]["meal_content"].startswith("Grilled chicken breast"))
        self.assertEqual(resolved["16:00"]["title"], "Snack")

    def test_generic_slots_pass_through(self):
        resolved = self.resolver.resolve_for_day(self.template, 1, "Monday", 1)
        self.assertEqual(resolved["12:00"], SCHEDULE_TEMPLATE["12:00"])

    def test_missing_overrides_fall_back_to_template(self):
        self.services.store.delete(WORKOUTS, {"user_id": 1})
        self.services.store.delete(MEALS, {"user_id": 1})
        resolved = self.resolver.resolve_for_day(self.template, 1, "Monday", 1)
        self.assertEqual(resolved, SCHEDULE_TEMPLATE)

    def test_slot_set_is_preserved(self):
        for user_id, day in ((1, "Monday"), (1, "Funday"), (5, "Monday")):
            resolved = self.resolver.resolve_for_day(self.template, user_id, day, 1)
            self.assertEqual(set(resolved), set(self.template))

    def test_template_is_not_mutated(self):
        before = copy.deepcopy(self.template)
        self.resolver.resolve_for_day(self.template, 1, "Monday", 1)
        self.assertEqual(self.template, before)

    def test_template_without_special_slots(self):
        template = {"08:00": {"title": "Stretch", "description": "5 minutes"}}
        self.assertEqual(self.resolver.resolve_for_day(template, 1, "Monday", 1), template)


if __name__ == '__main__':
    unittest.main()
