from __future__ import annotations

import dataclasses
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

ROW_MODES = ("discovery", "level")

# Hard scale limits; configured bounds may only narrow them.
SCALE_FLOOR = 0.2
SCALE_CEIL = 3.0


@dataclass(frozen=True)
class ViewConfig:
    """Traversal, layout and viewport constants for the relation view."""

    max_nodes: int = 25

    level_spacing: float = 280.0
    origin_x: float = 400.0
    row_spacing: float = 140.0
    origin_y: float = 100.0
    # "discovery": row = index in discovery order (default)
    # "level": row = index within the node's level
    row_mode: str = "discovery"

    min_scale: float = SCALE_FLOOR
    max_scale: float = SCALE_CEIL
    zoom_in_factor: float = 1.1
    zoom_out_factor: float = 1.0 / 1.1

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


DEFAULT_CONFIG = ViewConfig()


def _pos_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    try:
        i = int(v)
    except (TypeError, ValueError):
        return None
    return i if i > 0 else None


def _pos_float(v: Any) -> Optional[float]:
    if isinstance(v, bool):
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    return f if f > 0 else None


def _row_mode(v: Any) -> Optional[str]:
    s = str(v or "").strip().lower()
    return s if s in ROW_MODES else None


def config_from_dict(raw: Dict[str, Any], base: ViewConfig = DEFAULT_CONFIG) -> ViewConfig:
    """Overlay recognised keys from `raw` onto `base`; invalid values are ignored."""
    changes: Dict[str, Any] = {}
    if not isinstance(raw, dict):
        return base

    mn = _pos_int(raw.get("max_nodes"))
    if mn is not None:
        changes["max_nodes"] = mn

    for k in ("level_spacing", "row_spacing"):
        f = _pos_float(raw.get(k))
        if f is not None:
            changes[k] = f

    # Zoom in must enlarge and zoom out must shrink.
    zi = _pos_float(raw.get("zoom_in_factor"))
    if zi is not None and zi > 1.0:
        changes["zoom_in_factor"] = zi
    zo = _pos_float(raw.get("zoom_out_factor"))
    if zo is not None and zo < 1.0:
        changes["zoom_out_factor"] = zo

    for k in ("origin_x", "origin_y"):
        v = raw.get(k)
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            changes[k] = float(v)

    rm = _row_mode(raw.get("row_mode"))
    if rm is not None:
        changes["row_mode"] = rm

    lo = _pos_float(raw.get("min_scale"))
    hi = _pos_float(raw.get("max_scale"))
    lo = max(SCALE_FLOOR, lo if lo is not None else base.min_scale)
    hi = min(SCALE_CEIL, hi if hi is not None else base.max_scale)
    if lo <= hi:
        changes["min_scale"] = lo
        changes["max_scale"] = hi

    return dataclasses.replace(base, **changes)


def load_view_config(path: Optional[str], base: ViewConfig = DEFAULT_CONFIG) -> ViewConfig:
    """Load a view config JSON file.

    Accepted formats:
      - { "view": { ...keys... } }
      - { ...keys... }

    A missing or unreadable file yields `base` unchanged.
    """
    if not path:
        return base
    try:
        if not os.path.exists(path):
            return base
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError):
        return base

    if isinstance(raw, dict) and isinstance(raw.get("view"), dict):
        raw = raw["view"]
    return config_from_dict(raw, base)


def config_from_env(base: ViewConfig = DEFAULT_CONFIG) -> ViewConfig:
    raw: Dict[str, Any] = {}
    mn = os.getenv("SMARTFLOW_MAX_NODES")
    if mn:
        raw["max_nodes"] = mn.strip()
    rm = os.getenv("SMARTFLOW_ROW_MODE")
    if rm:
        raw["row_mode"] = rm
    return config_from_dict(raw, base) if raw else base


def resolve_view_config(
    path: Optional[str] = None,
    *,
    max_nodes: Optional[int] = None,
    row_mode: Optional[str] = None,
) -> ViewConfig:
    """defaults < config file < env < explicit arguments"""
    cfg = load_view_config(path)
    cfg = config_from_env(cfg)
    explicit: Dict[str, Any] = {}
    if max_nodes is not None:
        explicit["max_nodes"] = max_nodes
    if row_mode is not None:
        explicit["row_mode"] = row_mode
    return config_from_dict(explicit, cfg) if explicit else cfg
