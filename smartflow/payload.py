from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Optional, Sequence

from .config import DEFAULT_CONFIG, ViewConfig
from .focus import relatives_of
from .graph import build_graph
from .layout import layout_relatives
from .model import Schedule
from .normalize import schedule_to_dict

SCHEMA_VERSION = 1


def _relatives_dict(schedules: Sequence[Schedule], schedule_id: str) -> Optional[Dict[str, Any]]:
    rel = relatives_of(schedules, schedule_id)
    if rel is None:
        return None
    return {
        "parents": [s.id for s in rel.parents],
        "children": [s.id for s in rel.children],
        "parallels": [s.id for s in rel.parallels],
        "card": [
            {"scheduleId": p.schedule.id, "role": p.role, "x": p.x, "y": p.y}
            for p in layout_relatives(rel)
        ],
    }


def build_payload(
    schedules: Sequence[Schedule],
    *,
    focus_id: Optional[str] = None,
    config: Optional[ViewConfig] = None,
) -> Dict[str, Any]:
    """Everything the HTML viewer needs, precomputed.

    One graph per schedule so re-focusing in the browser is a lookup; the
    traversal itself only exists here.
    """
    cfg = config or DEFAULT_CONFIG
    snap = tuple(schedules)
    ids = [s.id for s in snap]
    if focus_id not in ids:
        focus_id = ids[0] if ids else None

    graphs: Dict[str, Any] = {}
    relatives: Dict[str, Any] = {}
    for sid in ids:
        if sid in graphs:
            continue
        graphs[sid] = build_graph(sid, snap, config=cfg).to_dict()
        relatives[sid] = _relatives_dict(snap, sid)

    return {
        "schema_version": SCHEMA_VERSION,
        "meta": {"generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds")},
        "cfg": cfg.to_dict(),
        "focus": focus_id,
        "schedules": [schedule_to_dict(s) for s in snap],
        "graphs": graphs,
        "relatives": relatives,
    }
