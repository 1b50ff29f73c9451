from __future__ import annotations

import os
import unittest
from unittest import mock

from smartflow.model import Relation, RelationType
from smartflow.normalize import normalize_schedule, parse_relation_type, schedule_to_dict
from smartflow.validate import StoreValidationError, assert_valid_schedules, validate_schedules


class TestNormalizeContract(unittest.TestCase):
    def test_relation_type_parsing(self) -> None:
        self.assertIs(parse_relation_type("PARENT"), RelationType.PARENT)
        self.assertIs(parse_relation_type(" parallel "), RelationType.PARALLEL)
        self.assertIs(parse_relation_type(RelationType.PARENT), RelationType.PARENT)
        self.assertIsNone(parse_relation_type("sibling"))
        self.assertIsNone(parse_relation_type(None))

    def test_schedule_fields(self) -> None:
        s = normalize_schedule(
            {
                "id": " B ",
                "title": "Design",
                "date": "2026-03-01",
                "time": "09:30",
                "allDay": True,
                "completed": True,
                "owner": "ana",
                "reminders": [5, "x", True, 30],
                "relations": [{"id": "A", "type": "parent"}, {"id": "R", "type": "Parallel"}],
                "color": "#ffcc00",
            }
        )
        self.assertEqual(s.id, "B")
        self.assertTrue(s.all_day)
        self.assertTrue(s.completed)
        self.assertEqual(s.reminders, (5, 30))
        self.assertEqual(
            s.relations,
            (Relation("A", RelationType.PARENT), Relation("R", RelationType.PARALLEL)),
        )

        back = schedule_to_dict(s)
        self.assertEqual(back["color"], "#ffcc00")
        self.assertEqual(back["relations"], [{"id": "A", "type": "parent"}, {"id": "R", "type": "parallel"}])

    def test_missing_id_is_rejected(self) -> None:
        self.assertIsNone(normalize_schedule({"title": "no id"}))
        self.assertIsNone(normalize_schedule({"id": "   "}))

    def test_truthy_non_bool_completed_stays_false(self) -> None:
        self.assertFalse(normalize_schedule({"id": "x", "completed": "yes"}).completed)

    def test_bad_relations_are_dropped_with_obs_warning(self) -> None:
        raw = {"id": "X", "relations": ["junk", {"id": "", "type": "parent"}, {"id": "A", "type": "?"}, {"id": "A", "type": "parent"}]}
        with mock.patch.dict(os.environ, {"SMARTFLOW_OBS_LOG": "1"}):
            with mock.patch("smartflow.util.console.eprint") as ep:
                s = normalize_schedule(raw)
        self.assertEqual(s.relations, (Relation("A", RelationType.PARENT),))
        lines = [c.args[0] for c in ep.call_args_list]
        self.assertEqual(len(lines), 3)
        for line in lines:
            self.assertTrue(line.startswith("[smartflow.normalize] WARN: relation dropped"))
            self.assertIn("owner='X'", line)

    def test_obs_is_silent_by_default(self) -> None:
        with mock.patch.dict(os.environ, {"SMARTFLOW_OBS_LOG": ""}):
            with mock.patch("smartflow.util.console.eprint") as ep:
                normalize_schedule({"id": "X", "relations": ["junk"]})
        ep.assert_not_called()


class TestValidateContract(unittest.TestCase):
    def test_valid_documents(self) -> None:
        items = [
            {"id": "A", "title": "Plan", "date": "2026-01-01"},
            {"id": "B", "title": "Design", "relations": [{"id": "A", "type": "parent"}, {"id": "gone", "type": "parent"}]},
        ]
        self.assertEqual(validate_schedules(items), [])
        self.assertEqual(validate_schedules({"schedules": items}), [])
        assert_valid_schedules(items)

    def test_structural_errors(self) -> None:
        items = [
            {"id": "A", "completed": "no"},
            {"id": "A"},
            {"id": ""},
            "junk",
            {"id": "C", "relations": [{"id": "A", "type": "sibling"}, {"type": "parent"}, 7]},
            {"id": "D", "relations": {"id": "A"}},
        ]
        errs = validate_schedules(items)
        self.assertIn("schedules[0].completed must be bool", errs)
        self.assertTrue(any("schedules[1].id duplicates schedules[0].id" in e for e in errs))
        self.assertIn("schedules[2].id must be non-empty string", errs)
        self.assertIn("schedules[3] must be dict", errs)
        self.assertIn("schedules[4].relations[0].type must be 'parent' or 'parallel'", errs)
        self.assertIn("schedules[4].relations[1].id must be non-empty string", errs)
        self.assertIn("schedules[4].relations[2] must be dict", errs)
        self.assertIn("schedules[5].relations must be list", errs)

    def test_non_list_document(self) -> None:
        self.assertEqual(len(validate_schedules({"foo": 1})), 1)
        with self.assertRaises(StoreValidationError):
            assert_valid_schedules("nope")
        self.assertTrue(issubclass(StoreValidationError, ValueError))


if __name__ == "__main__":
    unittest.main(verbosity=2)
