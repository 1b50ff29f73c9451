# Public helper API: extract the embedded viewer payload from rendered HTML
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class HtmlPayloadExtractError(RuntimeError):
    message: str
    def __str__(self) -> str:
        return self.message


_BY_ID_RE = re.compile(
    r'<script\b[^>]*\bid=["\']sf-data["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)
_BY_TYPE_RE = re.compile(
    r'<script\b[^>]*\btype=["\']application/json(?:\s*;[^"\']*)?["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)


def extract_payload_json_from_html_text(html_text: str) -> Any:
    """
    Supported embeddings:
      1) Preferred: <script id="sf-data"> ...json... </script>
      2) Also:      <script type="application/json[;...]"> ...json... </script>
    """
    for pat in (_BY_ID_RE, _BY_TYPE_RE):
        for m in pat.finditer(html_text):
            body = (m.group("body") or "").strip()
            if not body:
                continue
            try:
                return json.loads(body)
            except ValueError:
                continue
    raise HtmlPayloadExtractError("No <script type='application/json'> payload block found in HTML.")


def extract_payload_json_from_html_file(path: str | Path) -> Any:
    p = Path(path)
    return extract_payload_json_from_html_text(p.read_text(encoding="utf-8"))
