import json
from pathlib import Path

from model_catalog.utils.structured_logger import create_structured_logger


def test_events_are_written_as_json_lines(tmp_path: Path) -> None:
    base, events = create_structured_logger(tmp_path / "logs", enable_json=True)
    with base:
        base.set_session_context(command="export")
        events.catalog_exported("out.json", "json", 1)
        events.validation_failed("catalog.json", ["dragon.triangles: too small"])

    lines = base.json_log_path.read_text(encoding="utf-8").splitlines()
    entries = [json.loads(line) for line in lines]

    assert [e["event"] for e in entries] == ["catalog_exported", "validation_failed"]
    assert entries[0]["level"] == "INFO"
    assert entries[0]["model_count"] == 1
    assert entries[0]["command"] == "export"
    assert entries[1]["level"] == "ERROR"
    assert entries[1]["problems"] == ["dragon.triangles: too small"]


def test_json_logging_disabled_without_directory() -> None:
    base, events = create_structured_logger(None, enable_json=True)
    with base:
        events.catalog_loaded("builtin", 1)
    assert base.json_log_path is None
    assert not base.enable_json
