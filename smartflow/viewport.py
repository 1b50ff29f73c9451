# smartflow/viewport.py
from __future__ import annotations

from typing import Optional, Tuple

from .config import DEFAULT_CONFIG, SCALE_CEIL, SCALE_FLOOR, ViewConfig
from .model import IDENTITY_TRANSFORM, ViewTransform

# Pointer-down on these never starts a pan; drags must start on empty canvas.
INTERACTIVE_TARGETS = frozenset({"button", "input", "node"})


class ViewportController:
    """Pan/zoom state for the relation canvas.

    Input is serialized by the host event loop; there is one drag session at
    a time and a pointer-down during an active drag is ignored.
    """

    def __init__(self, config: Optional[ViewConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._t = IDENTITY_TRANSFORM
        self._drag_origin: Optional[Tuple[float, float]] = None

    @property
    def state(self) -> ViewTransform:
        return self._t

    @property
    def dragging(self) -> bool:
        return self._drag_origin is not None

    def begin_drag(self, pointer_x: float, pointer_y: float, target: Optional[str] = None) -> bool:
        if target is not None and str(target).lower() in INTERACTIVE_TARGETS:
            return False
        if self._drag_origin is not None:
            return False
        self._drag_origin = (pointer_x - self._t.pan_x, pointer_y - self._t.pan_y)
        return True

    def continue_drag(self, pointer_x: float, pointer_y: float) -> None:
        if self._drag_origin is None:
            return
        ox, oy = self._drag_origin
        self._t = ViewTransform(pan_x=pointer_x - ox, pan_y=pointer_y - oy, scale=self._t.scale)

    def end_drag(self) -> None:
        self._drag_origin = None

    def clamp_scale(self, scale: float) -> float:
        lo = max(SCALE_FLOOR, self.config.min_scale)
        hi = min(SCALE_CEIL, self.config.max_scale)
        return max(lo, min(hi, scale))

    def zoom(self, delta: float) -> float:
        """One wheel step: positive delta (wheel down) zooms out, otherwise in."""
        if delta > 0:
            factor = self.config.zoom_out_factor if 0 < self.config.zoom_out_factor < 1 else DEFAULT_CONFIG.zoom_out_factor
        else:
            factor = self.config.zoom_in_factor if self.config.zoom_in_factor > 1 else DEFAULT_CONFIG.zoom_in_factor
        scale = self.clamp_scale(self._t.scale * factor)
        self._t = ViewTransform(pan_x=self._t.pan_x, pan_y=self._t.pan_y, scale=scale)
        return scale

    def reset(self) -> None:
        self._t = IDENTITY_TRANSFORM
        self._drag_origin = None
