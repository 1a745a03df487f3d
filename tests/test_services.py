from __future__ import annotations

import json

import pytest

from padelmemory.paths import get_paths
from padelmemory.services.content import ContentError, ContentService
from padelmemory.services.records import JsonRecordStore
from padelmemory.services.telemetry import TelemetryService


def test_content_schemas_validate() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    content.validate_all()


def test_shipped_content_values() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    catalog = content.load_catalog()
    config = content.load_game_config()

    assert catalog.set_count == 5
    assert len(catalog.file_names) == 18
    assert catalog.back_ref() == "memory/back.png"
    assert config.joker_keyword == "heerjan"
    assert config.resolution_delay_match_ms == 650
    assert config.resolution_delay_mismatch_ms == 1200
    assert config.end_screen_delay_ms == 1500


def test_invalid_content_is_rejected(tmp_path) -> None:
    paths = get_paths()
    raw = json.loads((paths.data_dir / "memory.json").read_text(encoding="utf-8"))
    raw["delays"]["resolution_match_ms"] = -5
    del raw["back_image"]
    (tmp_path / "memory.json").write_text(json.dumps(raw), encoding="utf-8")

    content = ContentService(tmp_path, paths.schema_dir)
    with pytest.raises(ContentError) as exc:
        content.validate_all()
    assert "Schema validation failed" in str(exc.value)


def test_missing_or_broken_content_file(tmp_path) -> None:
    paths = get_paths()
    with pytest.raises(ContentError):
        ContentService(tmp_path, paths.schema_dir).load_catalog()
    (tmp_path / "memory.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentError):
        ContentService(tmp_path, paths.schema_dir).load_catalog()


def test_record_store_persists(tmp_path) -> None:
    path = tmp_path / "userdata" / "records.json"
    store = JsonRecordStore(path)
    assert store.get("bestTime_8") is None
    store.set("bestTime_8", 12345)
    assert store.get("bestTime_8") == 12345

    reopened = JsonRecordStore(path)
    assert reopened.get("bestTime_8") == 12345
    assert json.loads(path.read_text(encoding="utf-8")) == {"bestTime_8": 12345}


def test_record_store_ignores_corrupt_file(tmp_path) -> None:
    path = tmp_path / "records.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert JsonRecordStore(path).get("bestTime_8") is None

    path.write_text(json.dumps({"bestTime_8": "fast", "bestTime_12": 9000.0}), encoding="utf-8")
    store = JsonRecordStore(path)
    assert store.get("bestTime_8") is None
    assert store.get("bestTime_12") == 9000


def test_record_store_write_failure_raises_oserror(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonRecordStore(blocker / "records.json")
    with pytest.raises(OSError):
        store.set("bestTime_8", 1)
    assert store.get("bestTime_8") is None


def test_telemetry_appends_jsonl(tmp_path) -> None:
    path = tmp_path / "telemetry.jsonl"
    telemetry = TelemetryService(path)
    telemetry.log("game_started", {"players": 2})
    telemetry.log("game_complete", {"scores": [3, 1]})
    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [r["type"] for r in lines] == ["game_started", "game_complete"]
    assert lines[1]["payload"] == {"scores": [3, 1]}
    assert "ts" in lines[0]


def test_telemetry_disables_itself_on_write_error(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    telemetry = TelemetryService(blocker / "telemetry.jsonl")
    telemetry.log("boot", {"ok": True})
    assert not telemetry.enabled
