"""smartflow.api

Stable *library* entrypoint for smartflow.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from smartflow.config import ViewConfig, load_view_config, resolve_view_config
from smartflow.focus import FocusController, relatives_of, search_by_title
from smartflow.graph import build_graph
from smartflow.layout import assign_layout, layout_relatives
from smartflow.model import (
    GraphEdge,
    GraphNode,
    Relation,
    RelationGraph,
    RelationType,
    Relatives,
    Schedule,
    ViewTransform,
)
from smartflow.payload import build_payload
from smartflow.render.inline import build_html
from smartflow.store import ScheduleStore, load_schedules_from_json, schedules_from_list
from smartflow.validate import StoreValidationError, assert_valid_schedules, validate_schedules
from smartflow.viewport import ViewportController


def graph_dict(focus_id: Optional[str], schedules: Sequence[Schedule], **kwargs: Any) -> Dict[str, Any]:
    """build_graph(...) as plain JSON-ready data: {nodes: [...], edges: [...]}."""
    return build_graph(focus_id, schedules, **kwargs).to_dict()


def render_html(schedules: Sequence[Schedule], *, focus_id: Optional[str] = None, config: Optional[ViewConfig] = None) -> str:
    return build_html(build_payload(schedules, focus_id=focus_id, config=config))


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "FocusController",
    "GraphEdge",
    "GraphNode",
    "Relation",
    "RelationGraph",
    "RelationType",
    "Relatives",
    "Schedule",
    "ScheduleStore",
    "StoreValidationError",
    "ViewConfig",
    "ViewTransform",
    "ViewportController",
    "assert_valid_schedules",
    "assign_layout",
    "build_graph",
    "build_payload",
    "graph_dict",
    "layout_relatives",
    "load_schedules_from_json",
    "load_view_config",
    "relatives_of",
    "render_html",
    "resolve_view_config",
    "schedules_from_list",
    "search_by_title",
    "validate_schedules",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
