import unittest
import tempfile
from pathlib import Path

from fitplan.infra.Record_Store import JsonRecordStore, StoreUnavailableError


class TestRecordStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "db.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_new_file_has_all_collections(self):
        store = JsonRecordStore(self.path)
        self.assertTrue(self.path.exists())
        for name in ("users", "schedules", "workouts", "meals"):
            self.assertEqual(store.find_all(name), [])

    def test_records_survive_reopen(self):
        JsonRecordStore(self.path).insert("meals", {"user_id": 1, "day": "Monday", "snack": "Apple"})
        reopened = JsonRecordStore(self.path)
        self.assertEqual(reopened.find("meals", {"user_id": 1, "day": "Monday"})["snack"], "Apple")

    def test_find_matches_every_field(self):
        store = JsonRecordStore()
        store.insert("workouts",
                     {"user_id": 1, "week": 1, "day": "Monday", "title": "Rest"},
                     {"user_id": 1, "week": 2, "day": "Monday", "title": "Run"})
        self.assertEqual(store.find("workouts", {"user_id": 1, "week": 2, "day": "Monday"})["title"], "Run")
        self.assertIsNone(store.find("workouts", {"user_id": 1, "week": 3}))
        self.assertIsNone(store.find("workouts", {"missing_field": 1}))
        self.assertEqual(len(store.find_all("workouts", {"user_id": 1})), 2)

    def test_update_and_delete_return_counts(self):
        store = JsonRecordStore()
        store.insert("users", {"user_id": 1, "progress": {}}, {"user_id": 2, "progress": {}})
        self.assertEqual(store.update("users", {"user_id": 1}, {"progress": {"1": {}}}), 1)
        self.assertEqual(store.find("users", {"user_id": 1})["progress"], {"1": {}})
        self.assertEqual(store.update("users", {"user_id": 9}, {"progress": {}}), 0)
        self.assertEqual(store.delete("users", {"user_id": 2}), 1)
        self.assertEqual(store.delete("users", {"user_id": 2}), 0)
        self.assertEqual([r["user_id"] for r in store.find_all("users")], [1])

    def test_returned_records_are_copies(self):
        store = JsonRecordStore()
        store.insert("users", {"user_id": 1, "progress": {}})
        record = store.find("users", {"user_id": 1})
        record["progress"]["1"] = {"tasks": {}}
        self.assertEqual(store.find("users", {"user_id": 1})["progress"], {})

    def test_corrupt_file_is_a_hard_failure(self):
        self.path.write_text("{not json", encoding="utf-8")
        store = JsonRecordStore(self.path)
        with self.assertRaises(StoreUnavailableError):
            store.find("users", {"user_id": 1})

    def test_non_object_document_is_a_hard_failure(self):
        for content in ("[]", "[1, 2]", "\"text\"", "null"):
            with self.subTest(content=content):
                self.path.write_text(content, encoding="utf-8")
                store = JsonRecordStore(self.path)
                with self.assertRaises(StoreUnavailableError):
                    store.find_all("users")


if __name__ == '__main__':
    unittest.main()
