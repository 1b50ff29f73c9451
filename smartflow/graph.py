# smartflow/graph.py
from __future__ import annotations

import time
from collections import deque
from typing import Deque, Dict, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, ViewConfig
from .layout import assign_layout
from .model import GraphEdge, GraphNode, RelationGraph, Schedule
from .relations import RelationIndex
from .util.console import obs


def discover(
    focus_id: str,
    index: RelationIndex,
    *,
    max_nodes: int,
) -> Tuple[List[Tuple[str, int]], List[Tuple[str, str]], bool]:
    """Bounded bidirectional expansion from `focus_id`.

    Returns (discovered (id, level) pairs in discovery order, raw edge list,
    truncated flag). Every id is expanded at most once, so cyclic relation
    graphs terminate. Raw edges may still name dangling or capped-away ids.
    """
    levels: Dict[str, int] = {}
    order: List[Tuple[str, int]] = []
    raw_edges: List[Tuple[str, str]] = []
    work: Deque[str] = deque()
    truncated = False

    def visit(sid: str, level: int) -> None:
        nonlocal truncated
        if sid in levels or sid not in index:
            return
        if len(order) >= max_nodes:
            truncated = True
            return
        levels[sid] = level
        order.append((sid, level))
        work.append(sid)

    visit(focus_id, 0)
    while work:
        sid = work.popleft()
        level = levels[sid]
        for child in index.descendants(sid):
            raw_edges.append((sid, child))
            visit(child, level + 1)
        for parent in index.predecessors(sid):
            raw_edges.append((parent, sid))
            visit(parent, level - 1)

    return order, raw_edges, truncated


def _keep_edges(raw_edges: List[Tuple[str, str]], kept: Dict[str, int]) -> Tuple[GraphEdge, ...]:
    out: List[GraphEdge] = []
    seen: set[Tuple[str, str]] = set()
    for src, dst in raw_edges:
        if src == dst or src not in kept or dst not in kept:
            continue
        if (src, dst) in seen:
            continue
        seen.add((src, dst))
        out.append(GraphEdge(source_id=src, target_id=dst))
    return tuple(out)


def build_graph(
    focus_id: Optional[str],
    schedules: Sequence[Schedule],
    max_nodes: Optional[int] = None,
    *,
    config: Optional[ViewConfig] = None,
) -> RelationGraph:
    """Discover and lay out the PARENT neighbourhood of `focus_id`.

    Pure function of (schedule snapshot, focus id). PARALLEL relations are not
    followed. A missing focus yields an empty graph.
    """
    cfg = config or DEFAULT_CONFIG
    cap = int(max_nodes) if max_nodes is not None else int(cfg.max_nodes)

    if not focus_id:
        return RelationGraph(focus_id=focus_id)

    t0 = time.monotonic()
    index = RelationIndex(schedules)
    if focus_id not in index or cap <= 0:
        obs("graph", "build.empty", focus=repr(focus_id), schedules=len(index.snapshot))
        return RelationGraph(focus_id=focus_id)

    order, raw_edges, truncated = discover(focus_id, index, max_nodes=cap)
    kept = dict(order)

    nodes = tuple(GraphNode(schedule_id=sid, level=lvl, schedule=index.get(sid)) for sid, lvl in order)
    graph = RelationGraph(
        focus_id=focus_id,
        nodes=nodes,
        edges=_keep_edges(raw_edges, kept),
        truncated=truncated,
    )
    graph = assign_layout(graph, cfg)

    elapsed_ms = int((time.monotonic() - t0) * 1000)
    if truncated:
        obs("graph", "graph.overflow", focus=repr(focus_id), max_nodes=cap)
    obs(
        "graph",
        "build.ok",
        ms=elapsed_ms,
        focus=repr(focus_id),
        nodes=len(graph.nodes),
        edges=len(graph.edges),
    )
    return graph
