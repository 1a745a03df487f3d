from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from padelmemory.engine.session import GameConfig
from padelmemory.engine.types import ImageCatalog


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_str(obj: Mapping[str, object], key: str) -> str:
    v = obj.get(key)
    if not isinstance(v, str):
        raise ContentError(f"Expected string for {key}")
    return v


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int):
        raise ContentError(f"Expected int for {key}")
    return v


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path, filename: str = "memory.json") -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir
        self._filename = filename

    def _load_validated(self) -> Mapping[str, object]:
        path = self._data_dir / self._filename
        schema = _load_json(self._schema_dir / "memory.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise ContentError(f"{self._filename} must be an object")
        return raw

    def load_catalog(self) -> ImageCatalog:
        raw = self._load_validated()
        names_raw = raw.get("file_names")
        if not isinstance(names_raw, list):
            raise ContentError("file_names must be a list")
        return ImageCatalog(
            asset_root=_require_str(raw, "asset_root").rstrip("/"),
            back_image=_require_str(raw, "back_image"),
            set_count=_require_int(raw, "image_set_count"),
            # blanks are kept here; the deck builder cleans the pool
            file_names=tuple(n for n in names_raw if isinstance(n, str)),
        )

    def load_game_config(self) -> GameConfig:
        raw = self._load_validated()
        delays = raw.get("delays")
        if not isinstance(delays, dict):
            raise ContentError("delays must be an object")
        return GameConfig(
            joker_keyword=_require_str(raw, "joker_keyword"),
            resolution_delay_match_ms=_require_int(delays, "resolution_match_ms"),
            resolution_delay_mismatch_ms=_require_int(delays, "resolution_mismatch_ms"),
            end_screen_delay_ms=_require_int(delays, "end_screen_ms"),
        )

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_catalog()
        _ = self.load_game_config()
