"""Schedules document validation helpers (library-facing)."""

from __future__ import annotations

from typing import Any, List

from .normalize import parse_relation_type


class StoreValidationError(ValueError):
    """Raised when a schedules document fails validation."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def schedules_list(doc: Any) -> Any:
    """Accept either a bare list (backup export) or {"schedules": [...]}."""
    if isinstance(doc, dict) and "schedules" in doc:
        return doc.get("schedules")
    return doc


def validate_schedules(doc: Any, *, label: str = "schedules") -> List[str]:
    """Structural checks only.

    Relation targets are not required to exist: a dangling relation is a
    valid document (the schedule it named was deleted).
    """
    errs: List[str] = []
    items = schedules_list(doc)
    if not isinstance(items, list):
        return [f"{label}: must be a list (or an object with a 'schedules' list)"]

    seen: dict[str, int] = {}
    for i, s in enumerate(items):
        if not isinstance(s, dict):
            errs.append(f"{label}[{i}] must be dict")
            continue
        sid = s.get("id")
        _require(isinstance(sid, str) and bool(sid.strip()), f"{label}[{i}].id must be non-empty string", errs)
        if isinstance(sid, str) and sid.strip():
            if sid in seen:
                errs.append(f"{label}[{i}].id duplicates {label}[{seen[sid]}].id: {sid!r}")
            else:
                seen[sid] = i
        _require(isinstance(s.get("title", ""), str), f"{label}[{i}].title must be string", errs)
        _require(isinstance(s.get("date", ""), str), f"{label}[{i}].date must be string", errs)
        _require(isinstance(s.get("completed", False), bool), f"{label}[{i}].completed must be bool", errs)

        rels = s.get("relations", [])
        if rels is None:
            continue
        if not isinstance(rels, list):
            errs.append(f"{label}[{i}].relations must be list")
            continue
        for j, r in enumerate(rels):
            if not isinstance(r, dict):
                errs.append(f"{label}[{i}].relations[{j}] must be dict")
                continue
            rid = r.get("id")
            _require(
                isinstance(rid, str) and bool(rid.strip()),
                f"{label}[{i}].relations[{j}].id must be non-empty string",
                errs,
            )
            _require(
                parse_relation_type(r.get("type")) is not None,
                f"{label}[{i}].relations[{j}].type must be 'parent' or 'parallel'",
                errs,
            )

    return errs


def assert_valid_schedules(doc: Any) -> None:
    errs = validate_schedules(doc)
    if errs:
        raise StoreValidationError(errs[0])


__all__ = [
    "StoreValidationError",
    "assert_valid_schedules",
    "schedules_list",
    "validate_schedules",
]
