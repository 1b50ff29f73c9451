# smartflow/relations.py
"""Relation lookups over a schedule snapshot.

Only schedules store relations, and only in one direction: a PARENT relation
on A naming B says "B comes before A". Descendants are therefore found by
scanning for schedules that name the id in question.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .model import RelationType, Schedule


def _related_ids(schedule: Optional[Schedule], rtype: RelationType) -> Tuple[str, ...]:
    if schedule is None:
        return ()
    out: List[str] = []
    for r in schedule.relations:
        if r.type is rtype and r.id not in out:
            out.append(r.id)
    return tuple(out)


def predecessor_ids(schedule: Optional[Schedule]) -> Tuple[str, ...]:
    """PARENT targets declared by `schedule`, declaration order."""
    return _related_ids(schedule, RelationType.PARENT)


def parallel_ids(schedule: Optional[Schedule]) -> Tuple[str, ...]:
    return _related_ids(schedule, RelationType.PARALLEL)


def descendant_ids(schedules: Sequence[Schedule], target_id: str) -> Tuple[str, ...]:
    """Ids of schedules (store order) that declare `target_id` as a PARENT."""
    out: List[str] = []
    seen: set[str] = set()
    for s in schedules:
        if s.id in seen:
            continue
        seen.add(s.id)
        if any(r.id == target_id and r.type is RelationType.PARENT for r in s.relations):
            out.append(s.id)
    return tuple(out)


class RelationIndex:
    """Adjacency maps for one immutable snapshot.

    Answers the same questions as the scan helpers above, with identical
    ordering, in O(1) per lookup after an O(n) build.
    """

    def __init__(self, schedules: Sequence[Schedule]) -> None:
        self.snapshot: Tuple[Schedule, ...] = tuple(schedules)
        self._by_id: Dict[str, Schedule] = {}
        self._children: Dict[str, List[str]] = {}

        for s in self.snapshot:
            # First occurrence wins, matching a front-to-back scan.
            self._by_id.setdefault(s.id, s)

        seen: set[str] = set()
        for s in self.snapshot:
            if s.id in seen:
                continue
            seen.add(s.id)
            for pid in predecessor_ids(s):
                self._children.setdefault(pid, []).append(s.id)

    def __contains__(self, schedule_id: object) -> bool:
        return schedule_id in self._by_id

    def get(self, schedule_id: str) -> Optional[Schedule]:
        return self._by_id.get(schedule_id)

    def predecessors(self, schedule_id: str) -> Tuple[str, ...]:
        return predecessor_ids(self._by_id.get(schedule_id))

    def descendants(self, schedule_id: str) -> Tuple[str, ...]:
        return tuple(self._children.get(schedule_id, ()))

    def parallels(self, schedule_id: str) -> Tuple[str, ...]:
        return parallel_ids(self._by_id.get(schedule_id))
