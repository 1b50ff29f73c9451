# smartflow/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class RelationType(str, Enum):
    PARENT = "parent"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class Relation:
    id: str
    type: RelationType


@dataclass(frozen=True)
class Schedule:
    id: str
    title: str
    date: str
    completed: bool = False
    relations: Tuple[Relation, ...] = ()

    time: str = ""
    all_day: bool = False
    owner: str = ""
    reminders: Tuple[int, ...] = ()

    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class GraphNode:
    """One schedule placed in the relation view.

    level is the signed PARENT distance from the focus (ancestors < 0).
    """

    schedule_id: str
    level: int
    x: float = 0.0
    y: float = 0.0
    is_focus: bool = False
    schedule: Optional[Schedule] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class GraphEdge:
    """Predecessor -> descendant, whichever side declared the relation."""

    source_id: str
    target_id: str


@dataclass(frozen=True)
class RelationGraph:
    focus_id: Optional[str]
    nodes: Tuple[GraphNode, ...] = ()
    edges: Tuple[GraphEdge, ...] = ()
    truncated: bool = False

    def is_empty(self) -> bool:
        return not self.nodes

    def node(self, schedule_id: str) -> Optional[GraphNode]:
        for n in self.nodes:
            if n.schedule_id == schedule_id:
                return n
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "focus_id": self.focus_id,
            "truncated": bool(self.truncated),
            "nodes": [
                {
                    "scheduleId": n.schedule_id,
                    "level": int(n.level),
                    "x": n.x,
                    "y": n.y,
                    "isFocus": bool(n.is_focus),
                }
                for n in self.nodes
            ],
            "edges": [{"sourceId": e.source_id, "targetId": e.target_id} for e in self.edges],
        }


@dataclass(frozen=True)
class ViewTransform:
    pan_x: float = 0.0
    pan_y: float = 0.0
    scale: float = 1.0

    def to_dict(self) -> Dict[str, float]:
        return {"panX": self.pan_x, "panY": self.pan_y, "scale": self.scale}


IDENTITY_TRANSFORM = ViewTransform()


@dataclass(frozen=True)
class Relatives:
    """Immediate neighbourhood of one schedule, PARALLEL included."""

    focus: Schedule
    parents: Tuple[Schedule, ...] = ()
    children: Tuple[Schedule, ...] = ()
    parallels: Tuple[Schedule, ...] = ()


@dataclass(frozen=True)
class PlacedRelative:
    schedule: Schedule
    role: str  # "focus" | "parent" | "child" | "parallel"
    x: float
    y: float


__all__ = [
    "RelationType",
    "Relation",
    "Schedule",
    "GraphNode",
    "GraphEdge",
    "RelationGraph",
    "ViewTransform",
    "IDENTITY_TRANSFORM",
    "Relatives",
    "PlacedRelative",
]
