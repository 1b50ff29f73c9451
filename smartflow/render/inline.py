# smartflow/render/inline.py
from __future__ import annotations

import json
from .template import HTML_TEMPLATE

_DATA_MARKER = "__DATA_JSON__"
_DATA_MARKER_COUNT = HTML_TEMPLATE.count(_DATA_MARKER)


def build_html(payload: dict) -> str:
    # Template must contain the marker exactly once, and none may survive injection.
    if not isinstance(payload, dict):
        raise TypeError(f"payload must be dict, got {type(payload).__name__}")

    if _DATA_MARKER_COUNT != 1:
        raise RuntimeError(f"HTML_TEMPLATE must contain {_DATA_MARKER} exactly once (found {_DATA_MARKER_COUNT})")

    data_json = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    data_json = data_json.replace("</", r"<\/")  # script-safe injection
    html = HTML_TEMPLATE.replace(_DATA_MARKER, data_json)

    if _DATA_MARKER in html:
        raise RuntimeError("HTML generation failed: marker still present after injection")

    return html
