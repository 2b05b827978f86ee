import importlib.util
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def load_script():
    spec = importlib.util.spec_from_file_location("run_timeline", ROOT / "scripts" / "run_timeline.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_cli_prints_only_json(monkeypatch, capsys):
    script = load_script()
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_timeline.py", "--data", str(ROOT / "examples" / "sample_events.csv"), "--from", "2025-01-01"],
    )

    script.main()
    payload = json.loads(capsys.readouterr().out)

    ids = [event["id"] for bucket in payload["buckets"] for event in bucket["events"]]
    assert ids == [1, 2, 4, 6, 7]
    assert len(payload["buckets"]) == 4
    assert payload["can_load_more"] is False
    assert payload["loading_more"] is False
