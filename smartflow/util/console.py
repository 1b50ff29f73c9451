# smartflow/util/console.py
from __future__ import annotations
import os
import sys
from typing import Any

def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def obs_enabled() -> bool:
    v = (os.getenv("SMARTFLOW_OBS_LOG", "") or "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def obs(tag: str, event: str, **fields: Any) -> None:
    """Emit one `[smartflow.<tag>] <event> k=v ...` line when SMARTFLOW_OBS_LOG is on."""
    if not obs_enabled():
        return
    parts = [f"[smartflow.{tag}] {event}"]
    for k, v in fields.items():
        parts.append(f"{k}={v}")
    eprint(" ".join(parts))
