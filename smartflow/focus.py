# smartflow/focus.py
from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, ViewConfig
from .graph import build_graph
from .model import GraphNode, RelationGraph, Relatives, Schedule
from .relations import RelationIndex
from .util.console import obs
from .viewport import ViewportController

EditCallback = Callable[[Schedule], Any]
ToggleCallback = Callable[[str], Any]


def search_by_title(schedules: Sequence[Schedule], query: str) -> List[Schedule]:
    """Case-insensitive substring match over titles, store order.

    The query is matched as typed (no trimming); an empty query matches nothing.
    """
    q = (query or "").lower()
    if not q:
        return []
    return [s for s in schedules if q in (s.title or "").lower()]


def relatives_of(schedules: Sequence[Schedule], schedule_id: str) -> Optional[Relatives]:
    index = RelationIndex(schedules)
    focus = index.get(schedule_id)
    if focus is None:
        return None

    def resolve(ids: Tuple[str, ...]) -> Tuple[Schedule, ...]:
        return tuple(s for s in (index.get(i) for i in ids) if s is not None and s.id != focus.id)

    return Relatives(
        focus=focus,
        parents=resolve(index.predecessors(focus.id)),
        children=resolve(index.descendants(focus.id)),
        parallels=resolve(index.parallels(focus.id)),
    )


class FocusController:
    """Owns the focus id and decides when the relation graph is rebuilt.

    The graph is rebuilt synchronously on every focus change and lazily on
    the next `graph` access after the schedule source changed. A focus change
    always resets the viewport before the new graph is handed out.
    """

    def __init__(
        self,
        get_all_schedules: Callable[[], Sequence[Schedule]],
        *,
        viewport: Optional[ViewportController] = None,
        on_edit_requested: Optional[EditCallback] = None,
        on_toggle_complete: Optional[ToggleCallback] = None,
        get_version: Optional[Callable[[], int]] = None,
        config: Optional[ViewConfig] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.viewport = viewport or ViewportController(self.config)
        self._get_all = get_all_schedules
        self._get_version = get_version
        self._on_edit = on_edit_requested
        self._on_toggle = on_toggle_complete

        self._focus_id: Optional[str] = None
        self._graph: Optional[RelationGraph] = None
        self._built_key: Any = None

    @classmethod
    def for_store(cls, store: Any, **kwargs: Any) -> "FocusController":
        """Wire to a ScheduleStore-like object (get_all_schedules + version)."""
        return cls(store.get_all_schedules, get_version=lambda: store.version, **kwargs)

    @property
    def focus_id(self) -> Optional[str]:
        return self._focus_id

    def _snapshot(self) -> Tuple[Schedule, ...]:
        return tuple(self._get_all())

    def _key(self, snap: Tuple[Schedule, ...]) -> Any:
        return self._get_version() if self._get_version is not None else snap

    def _rebuild(self, snap: Tuple[Schedule, ...]) -> RelationGraph:
        self._graph = build_graph(self._focus_id, snap, config=self.config)
        self._built_key = self._key(snap)
        return self._graph

    def set_focus(self, schedule_id: Optional[str]) -> RelationGraph:
        if schedule_id != self._focus_id:
            self.viewport.reset()
        self._focus_id = schedule_id
        return self._rebuild(self._snapshot())

    @property
    def graph(self) -> RelationGraph:
        snap = self._snapshot()
        if self._graph is not None and self._key(snap) == self._built_key:
            return self._graph

        known = {s.id for s in snap}
        if self._focus_id not in known:
            fallback = snap[0].id if snap else None
            if fallback != self._focus_id:
                obs("focus", "focus.fallback", old=repr(self._focus_id), new=repr(fallback))
                self._focus_id = fallback
                self.viewport.reset()
        return self._rebuild(snap)

    def select_node(self, node: GraphNode) -> Optional[RelationGraph]:
        """Clicking the focus node requests an edit; any other node becomes the focus."""
        if node.is_focus:
            schedule = node.schedule
            if schedule is None:
                schedule = next((s for s in self._snapshot() if s.id == node.schedule_id), None)
            if schedule is not None and self._on_edit is not None:
                self._on_edit(schedule)
            return None
        return self.set_focus(node.schedule_id)

    def toggle_complete(self, node: GraphNode) -> None:
        if self._on_toggle is not None:
            self._on_toggle(node.schedule_id)

    def search_by_title(self, query: str) -> List[Schedule]:
        return search_by_title(self._snapshot(), query)

    def choose_search_result(self, schedule: Schedule) -> RelationGraph:
        return self.set_focus(schedule.id)

    def relatives(self) -> Optional[Relatives]:
        if self._focus_id is None:
            return None
        return relatives_of(self._snapshot(), self._focus_id)
