#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from smartflow.relations import RelationIndex
from smartflow.store import schedules_from_list
from smartflow.validate import validate_schedules


def _die(msg: str, rc: int = 2) -> int:
    print(f"[smartflow-validate] ERROR: {msg}", file=sys.stderr)
    return rc


def dangling_relations(doc: object) -> List[str]:
    """Relations naming ids that are not in the document (informational)."""
    schedules = schedules_from_list(doc)
    index = RelationIndex(schedules)
    out: List[str] = []
    for s in schedules:
        for r in s.relations:
            if r.id not in index:
                out.append(f"{s.id} -> {r.id} ({r.type.value})")
    return out


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="smartflow-validate",
        description="Validate a schedules JSON document and report dangling relations.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Schedules JSON path")
    ap.add_argument("--strict", action="store_true", help="Treat dangling relations as errors")
    ns = ap.parse_args(argv)

    p = Path(ns.in_json)
    if not p.exists():
        return _die(f"Missing JSON file: {p}")
    try:
        doc = json.loads(p.read_text(encoding="utf-8", errors="replace"))
    except ValueError as e:
        return _die(f"Failed to parse JSON: {p} ({e})")

    errs = validate_schedules(doc)
    if errs:
        for e in errs[:20]:
            print(f"[smartflow-validate] {e}", file=sys.stderr)
        return _die(f"{len(errs)} validation error(s)", rc=3)

    dangling = dangling_relations(doc)
    for d in dangling:
        print(f"[smartflow-validate] WARN: dangling relation {d}", file=sys.stderr)
    if dangling and ns.strict:
        return _die(f"{len(dangling)} dangling relation(s)", rc=3)

    print(f"[smartflow-validate] OK: {p}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
