from __future__ import annotations

import argparse
import json
import os
import sys
import webbrowser
from pathlib import Path

from .config import ROW_MODES, resolve_view_config
from .focus import search_by_title
from .graph import build_graph
from .payload import build_payload
from .render.inline import build_html
from .store import load_schedules_from_json


def _die(msg: str, rc: int = 2) -> int:
    print(f"[smartflow] ERROR: {msg}", file=sys.stderr)
    return rc


def _write_out(out_arg: str, default_out: str, text: str) -> str:
    out_path = os.path.abspath(out_arg)
    try:
        Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        # Default relative path from an unwritable CWD: fall back to the home dir.
        if out_arg != default_out:
            raise SystemExit(f"Cannot create output directory '{Path(out_path).parent}': {e}")
        fallback = Path.home() / ".smartflow" / default_out
        fallback.parent.mkdir(parents=True, exist_ok=True)
        out_path = str(fallback)
        print(f"[smartflow] WARN: default output directory is not writable; using {out_path}", file=sys.stderr)
    with open(out_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    return out_path


def main(argv: list[str] | None = None) -> int:
    default_out = os.path.join("build", "smartflow_graph.html")
    ap = argparse.ArgumentParser(
        prog="smartflow",
        description="Explore the precedence graph around one schedule (interactive HTML or JSON).",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Schedules JSON (list, or object with 'schedules')")
    ap.add_argument("--focus", default=None, help="Focus schedule id (default: first schedule)")
    ap.add_argument("--search", default=None, help="Print schedules whose title contains this text and exit")
    ap.add_argument("--format", choices=("html", "json"), default="html", help="Output format (default: html)")
    ap.add_argument("--config", default=os.getenv("SMARTFLOW_CONFIG"), help="View config JSON (default: env SMARTFLOW_CONFIG)")
    ap.add_argument("--max-nodes", type=int, default=None, help="Traversal node cap (default: 25)")
    ap.add_argument("--row-mode", choices=ROW_MODES, default=None, help="Row assignment: discovery (default) or level")
    ap.add_argument("--no-validate", action="store_true", help="Skip structural validation of the input")
    ap.add_argument("--out", default=None, help="Output path (html default: ./build/smartflow_graph.html; json default: stdout)")
    ap.add_argument("--no-open", action="store_true", help="Do not open the generated HTML in a browser")
    args = ap.parse_args(argv)

    in_path = Path(args.in_json)
    if not in_path.exists():
        return _die(f"Missing input JSON: {in_path}")
    try:
        store = load_schedules_from_json(in_path, validate=not args.no_validate)
    except ValueError as e:
        return _die(f"Invalid schedules file: {in_path} ({e})", rc=3)

    schedules = store.get_all_schedules()

    if args.search is not None:
        for s in search_by_title(schedules, args.search):
            print(f"{s.id}\t{s.date}\t{s.title}")
        return 0

    cfg = resolve_view_config(args.config, max_nodes=args.max_nodes, row_mode=args.row_mode)

    focus_id = args.focus
    if focus_id is None and schedules:
        focus_id = schedules[0].id
    if focus_id is not None and store.get(focus_id) is None:
        if args.format == "json":
            print(f"[smartflow] WARN: focus {focus_id!r} not found; graph is empty", file=sys.stderr)
        else:
            # build_payload opens the page on the first schedule instead.
            fallback = schedules[0].id if schedules else None
            print(f"[smartflow] WARN: focus {focus_id!r} not found; page opens on {fallback!r}", file=sys.stderr)

    if args.format == "json":
        txt = json.dumps(build_graph(focus_id, schedules, config=cfg).to_dict(), ensure_ascii=False, indent=2)
        if args.out:
            print(_write_out(args.out, "", txt + "\n"))
        else:
            print(txt)
        return 0

    html = build_html(build_payload(schedules, focus_id=focus_id, config=cfg))
    out_arg = args.out or default_out
    out_path = _write_out(out_arg, default_out, html)
    print(out_path)

    if not args.no_open:
        try:
            webbrowser.open("file://" + out_path)
        except webbrowser.Error:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
