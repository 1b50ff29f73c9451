# smartflow/store.py
from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .model import Schedule
from .normalize import normalize_schedule, schedule_to_dict
from .validate import assert_valid_schedules, schedules_list

JsonPath = Union[str, Path]


class ScheduleStore:
    """In-memory ordered schedule collection.

    The graph engine only reads it through get_all_schedules(). Every mutation
    bumps `version`, which is what FocusController compares to decide that a
    rebuild is due.
    """

    def __init__(self, schedules: Iterable[Schedule] = ()) -> None:
        self._items: List[Schedule] = list(schedules)
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._items)

    def get_all_schedules(self) -> Tuple[Schedule, ...]:
        return tuple(self._items)

    def get(self, schedule_id: str) -> Optional[Schedule]:
        for s in self._items:
            if s.id == schedule_id:
                return s
        return None

    def _touch(self) -> None:
        self._version += 1

    def replace_all(self, schedules: Iterable[Schedule]) -> None:
        self._items = list(schedules)
        self._touch()

    def upsert(self, schedule: Schedule) -> None:
        for i, s in enumerate(self._items):
            if s.id == schedule.id:
                self._items[i] = schedule
                self._touch()
                return
        self._items.append(schedule)
        self._touch()

    def delete(self, schedule_id: str) -> bool:
        """Remove a schedule. Relations naming it are left dangling on purpose."""
        before = len(self._items)
        self._items = [s for s in self._items if s.id != schedule_id]
        if len(self._items) == before:
            return False
        self._touch()
        return True

    def toggle_complete(self, schedule_id: str) -> bool:
        for i, s in enumerate(self._items):
            if s.id == schedule_id:
                self._items[i] = dataclasses.replace(s, completed=not s.completed)
                self._touch()
                return True
        return False

    def to_list(self) -> List[Dict[str, Any]]:
        return [schedule_to_dict(s) for s in self._items]


def schedules_from_list(items: Any) -> List[Schedule]:
    """Normalize raw dicts, skipping entries without an id and later duplicate ids."""
    out: List[Schedule] = []
    seen: set[str] = set()
    for raw in schedules_list(items) or []:
        if not isinstance(raw, dict):
            continue
        s = normalize_schedule(raw)
        if s is None or s.id in seen:
            continue
        seen.add(s.id)
        out.append(s)
    return out


def load_schedules_from_json(path: JsonPath, *, validate: bool = True) -> ScheduleStore:
    """Load a schedules export (bare list or {"schedules": [...]}) into a store."""
    p = Path(path)
    doc = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    if not isinstance(doc, (list, dict)):
        raise ValueError(f"schedules JSON must be a list or object; got {type(doc).__name__}")
    if validate:
        assert_valid_schedules(doc)
    return ScheduleStore(schedules_from_list(doc))

