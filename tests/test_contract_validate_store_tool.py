from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

from smartflow.tools.validate_store import dangling_relations, main

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURE = REPO_ROOT / "tests" / "fixtures" / "schedules_small.json"


class TestValidateStoreToolContract:
    def test_fixture_is_valid_and_reports_dangling(self):
        cmd = [sys.executable, "-m", "smartflow.tools.validate_store", "--in", str(FIXTURE)]
        p = subprocess.run(cmd, cwd=str(REPO_ROOT), capture_output=True, text=True)
        combined = (p.stdout or "") + "\n" + (p.stderr or "")
        assert p.returncode == 0, combined
        assert "[smartflow-validate] OK:" in p.stdout
        assert "dangling relation E -> F (parent)" in p.stderr

    def test_strict_fails_on_dangling(self, tmp_path: Path):
        assert main(["--in", str(FIXTURE), "--strict"]) == 3

    def test_validation_errors(self, tmp_path: Path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"schedules": [{"id": "A", "relations": [{"id": "B", "type": "after"}]}]}), encoding="utf-8")
        assert main(["--in", str(bad)]) == 3
        err = capsys.readouterr().err
        assert "schedules[0].relations[0].type" in err

    def test_missing_and_unparseable_input(self, tmp_path: Path):
        assert main(["--in", str(tmp_path / "missing.json")]) == 2
        broken = tmp_path / "broken.json"
        broken.write_text("[{", encoding="utf-8")
        assert main(["--in", str(broken)]) == 2

    def test_dangling_relations_helper(self):
        doc = [{"id": "A", "relations": [{"id": "Z", "type": "parallel"}]}, {"id": "B", "relations": [{"id": "A", "type": "parent"}]}]
        assert dangling_relations(doc) == ["A -> Z (parallel)"]
