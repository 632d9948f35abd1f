import threading
import unittest
from datetime import datetime, timedelta, timezone
from unittest import mock

from fitplan.api.dependencies import ProgramServices
from fitplan.events.Event_Bus import EventBus, PROGRAM_ENROLLED
from fitplan.logic.program.enrollment import EnrollmentResult
from fitplan.utilities.constants import USERS, SCHEDULES, WORKOUTS, MEALS

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestEnrollment(unittest.TestCase):
    def setUp(self):
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(PROGRAM_ENROLLED, lambda name, payload: self.events.append(payload))
        self.services = ProgramServices.from_path(None, bus=self.bus)
        self.store = self.services.store

    def _counts(self, user_id):
        return {name: len(self.store.find_all(name, {"user_id": user_id}))
                for name in (USERS, SCHEDULES, WORKOUTS, MEALS)}

    def test_enroll_creates_the_program(self):
        self.assertIs(self.services.enrollment.enroll(1, T0), EnrollmentResult.ENROLLED)
        self.assertEqual(self._counts(1), {USERS: 1, SCHEDULES: 1, WORKOUTS: 56, MEALS: 7})
        self.assertEqual(self.services.repo.get_user(1).start_date, T0)
        self.assertEqual(self.events, [{"user_id": 1, "regenerated": False}])

    def test_second_enroll_is_rejected_without_changes(self):
        self.services.enrollment.enroll(1, T0)
        result = self.services.enrollment.enroll(1, T0 + timedelta(days=3))
        self.assertIs(result, EnrollmentResult.ALREADY_ENROLLED)
        self.assertEqual(self._counts(1), {USERS: 1, SCHEDULES: 1, WORKOUTS: 56, MEALS: 7})
        self.assertEqual(self.services.repo.get_user(1).start_date, T0)
        self.assertEqual(len(self.events), 1)

    def test_regenerate_replaces_rows_and_restarts_the_clock(self):
        self.services.enrollment.enroll(1, T0)
        self.services.enrollment.enroll(2, T0)
        self.services.tracker.record_completion(1, 1, "monday_1700", True)
        restart = T0 + timedelta(days=30)
        self.assertEqual(self.services.repo.current_week_for(1, restart), 5)

        self.assertIs(self.services.enrollment.regenerate(1, restart), EnrollmentResult.REGENERATED)
        self.assertEqual(self._counts(1), {USERS: 1, SCHEDULES: 1, WORKOUTS: 56, MEALS: 7})
        self.assertEqual(self._counts(2), {USERS: 1, SCHEDULES: 1, WORKOUTS: 56, MEALS: 7})
        self.assertEqual(self.services.repo.current_week_for(1, restart), 1)
        self.assertEqual(self.services.tracker.get_progress(1, 1).total, 0)
        self.assertEqual(self.events[-1], {"user_id": 1, "regenerated": True})

    def test_regenerate_waits_for_an_in_flight_progress_write(self):
        self.services.enrollment.enroll(1, T0)
        self.services.tracker.record_completion(1, 1, "monday_1700", True)
        repo = self.services.repo
        read_user = repo.get_user
        workers = []

        def read_then_regenerate(user_id):
            user = read_user(user_id)
            if not workers:
                worker = threading.Thread(target=self.services.enrollment.regenerate,
                                          args=(1, T0 + timedelta(days=30)))
                workers.append(worker)
                worker.start()
                worker.join(timeout=0.2)
            return user

        with mock.patch.object(repo, "get_user", side_effect=read_then_regenerate):
            self.services.tracker.record_completion(1, 1, "tuesday_1000", True)
        workers[0].join()

        progress = self.services.tracker.get_progress(1, 1)
        self.assertEqual(progress.tasks, {})
        self.assertEqual((progress.total, progress.completed), (0, 0))
        self.assertEqual(repo.get_user(1).start_date, T0 + timedelta(days=30))

    def test_enrollment_does_not_keep_locks_around(self):
        self.services.enrollment.enroll(1, T0)
        self.services.enrollment.regenerate(1, T0)
        self.assertEqual(len(self.services.repo._user_locks), 0)

    def test_regenerate_enrolls_a_new_user(self):
        self.services.enrollment.regenerate(3, T0)
        self.assertTrue(self.services.repo.user_exists(3))

    def test_unknown_user_defaults_to_week_one(self):
        self.assertEqual(self.services.repo.current_week_for(404, T0 + timedelta(days=40)), 1)


if __name__ == '__main__':
    unittest.main()
