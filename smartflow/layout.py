# smartflow/layout.py
from __future__ import annotations

import dataclasses
from typing import Dict, List, Optional

from .config import DEFAULT_CONFIG, ViewConfig
from .model import GraphNode, PlacedRelative, RelationGraph, Relatives


def _rows(nodes: tuple[GraphNode, ...], row_mode: str) -> List[int]:
    if row_mode != "level":
        return list(range(len(nodes)))
    per_level: Dict[int, int] = {}
    out: List[int] = []
    for n in nodes:
        i = per_level.get(n.level, 0)
        out.append(i)
        per_level[n.level] = i + 1
    return out


def assign_layout(graph: RelationGraph, config: Optional[ViewConfig] = None) -> RelationGraph:
    """Place every node: x from its level, y from its row.

    In the default "discovery" row mode the row is the node's position in the
    builder's discovery order, so siblings of one level are not necessarily
    adjacent. "level" row mode numbers rows within each level instead.
    """
    cfg = config or DEFAULT_CONFIG
    rows = _rows(graph.nodes, cfg.row_mode)
    placed = tuple(
        dataclasses.replace(
            n,
            x=n.level * cfg.level_spacing + cfg.origin_x,
            y=row * cfg.row_spacing + cfg.origin_y,
            is_focus=n.schedule_id == graph.focus_id,
        )
        for n, row in zip(graph.nodes, rows)
    )
    return dataclasses.replace(graph, nodes=placed)


# Detail card (immediate relatives, PARALLEL included).
CARD_WIDTH = 380
CARD_HEIGHT = 450
CARD_H_GAP = 130
CARD_V_GAP = 90
PARALLEL_X_OFFSET = 40
PARALLEL_Y_OFFSET = 120


def layout_relatives(rel: Relatives) -> List[PlacedRelative]:
    """Focus in the middle, parents left, children right, parallels above/below."""
    cx = CARD_WIDTH / 2
    cy = CARD_HEIGHT / 2
    out = [PlacedRelative(schedule=rel.focus, role="focus", x=cx, y=cy)]

    def column(items, x: float, role: str) -> None:
        mid = (len(items) - 1) / 2
        for i, s in enumerate(items):
            out.append(PlacedRelative(schedule=s, role=role, x=x, y=cy + (i - mid) * CARD_V_GAP))

    column(rel.parents, cx - CARD_H_GAP, "parent")
    column(rel.children, cx + CARD_H_GAP, "child")

    for i, s in enumerate(rel.parallels):
        x = cx + (-PARALLEL_X_OFFSET if i % 2 == 0 else PARALLEL_X_OFFSET)
        y = cy + (-PARALLEL_Y_OFFSET if i < 2 else PARALLEL_Y_OFFSET)
        out.append(PlacedRelative(schedule=s, role="parallel", x=x, y=y))

    return out
