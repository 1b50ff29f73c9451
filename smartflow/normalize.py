# smartflow/normalize.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .model import Relation, RelationType, Schedule
from .util.console import obs


def parse_relation_type(value: Any) -> Optional[RelationType]:
    """Map 'parent' / 'parallel' (any case, or the enum itself) to RelationType."""
    if isinstance(value, RelationType):
        return value
    s = str(value or "").strip().lower()
    for rt in RelationType:
        if s == rt.value:
            return rt
    return None


def normalize_relations(raw: Any, *, owner_id: str = "") -> Tuple[Relation, ...]:
    if not isinstance(raw, list):
        return ()
    out: List[Relation] = []
    for i, r in enumerate(raw):
        if not isinstance(r, dict):
            obs("normalize", "WARN: relation dropped", owner=repr(owner_id), index=i, reason="not-an-object")
            continue
        rid = str(r.get("id") or "").strip()
        rtype = parse_relation_type(r.get("type"))
        if not rid or rtype is None:
            obs(
                "normalize",
                "WARN: relation dropped",
                owner=repr(owner_id),
                index=i,
                id=repr(rid),
                type=repr(r.get("type")),
            )
            continue
        out.append(Relation(id=rid, type=rtype))
    return tuple(out)


def normalize_schedule(s: Dict[str, Any]) -> Optional[Schedule]:
    sid = str(s.get("id") or "").strip()
    if not sid:
        return None

    reminders = s.get("reminders") or []
    if not isinstance(reminders, list):
        reminders = []

    return Schedule(
        id=sid,
        title=str(s.get("title") or ""),
        date=str(s.get("date") or ""),
        completed=s.get("completed") is True,
        relations=normalize_relations(s.get("relations"), owner_id=sid),
        time=str(s.get("time") or ""),
        all_day=s.get("allDay") is True,
        owner=str(s.get("owner") or ""),
        reminders=tuple(int(x) for x in reminders if isinstance(x, int) and not isinstance(x, bool)),
        raw=dict(s),
    )


def schedule_to_dict(s: Schedule) -> Dict[str, Any]:
    """Inverse of normalize_schedule for the fields the engine knows about."""
    out: Dict[str, Any] = dict(s.raw)
    out.update(
        {
            "id": s.id,
            "title": s.title,
            "date": s.date,
            "time": s.time,
            "allDay": s.all_day,
            "owner": s.owner,
            "completed": s.completed,
            "relations": [{"id": r.id, "type": r.type.value} for r in s.relations],
            "reminders": list(s.reminders),
        }
    )
    return out
