from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from smartflow.store import ScheduleStore, load_schedules_from_json, schedules_from_list
from smartflow.validate import StoreValidationError

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURE = REPO_ROOT / "tests" / "fixtures" / "schedules_small.json"


class TestScheduleStoreContract(unittest.TestCase):
    def test_load_fixture(self) -> None:
        store = load_schedules_from_json(FIXTURE)
        self.assertEqual([s.id for s in store.get_all_schedules()], ["A", "B", "C", "R", "E"])
        self.assertTrue(store.get("A").completed)
        self.assertTrue(store.get("C").all_day)
        self.assertEqual(store.get("E").reminders, (5, 30))
        self.assertEqual(store.version, 0)

    def test_wrapped_document_and_bad_root(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "wrapped.json"
            p.write_text(json.dumps({"schedules": [{"id": "A", "title": "Plan"}]}), encoding="utf-8")
            self.assertEqual(len(load_schedules_from_json(p)), 1)

            p.write_text("42", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_schedules_from_json(p)

            p.write_text(json.dumps([{"id": "A"}, {"id": "A"}]), encoding="utf-8")
            with self.assertRaises(StoreValidationError):
                load_schedules_from_json(p)
            self.assertEqual(len(load_schedules_from_json(p, validate=False)), 1)

    def test_mutations_bump_version(self) -> None:
        store = ScheduleStore(schedules_from_list([{"id": "A"}, {"id": "B", "relations": [{"id": "A", "type": "parent"}]}]))
        v = store.version
        store.upsert(schedules_from_list([{"id": "C"}])[0])
        self.assertEqual(store.version, v + 1)
        self.assertTrue(store.toggle_complete("C"))
        self.assertTrue(store.get("C").completed)
        self.assertFalse(store.toggle_complete("nope"))
        self.assertEqual(store.version, v + 2)

    def test_delete_leaves_relations_dangling(self) -> None:
        store = ScheduleStore(schedules_from_list([{"id": "A"}, {"id": "B", "relations": [{"id": "A", "type": "parent"}]}]))
        self.assertTrue(store.delete("A"))
        self.assertFalse(store.delete("A"))
        self.assertEqual([r.id for r in store.get("B").relations], ["A"])
        self.assertEqual(store.to_list()[0]["relations"], [{"id": "A", "type": "parent"}])

    def test_snapshot_is_immutable(self) -> None:
        store = ScheduleStore(schedules_from_list([{"id": "A"}]))
        snap = store.get_all_schedules()
        store.replace_all([])
        self.assertEqual(len(snap), 1)
        self.assertEqual(len(store), 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
