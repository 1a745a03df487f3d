from __future__ import annotations

import json
from pathlib import Path


class JsonRecordStore:
    """Best-time records kept in a small JSON object on disk.

    A missing or unreadable file reads as "no records". Write failures raise
    OSError to the caller, which decides whether the game can go on.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._values = self._load()

    def _load(self) -> dict[str, int]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return {}
        if not isinstance(raw, dict):
            return {}
        out: dict[str, int] = {}
        for k, v in raw.items():
            if isinstance(k, str) and isinstance(v, (int, float)) and not isinstance(v, bool):
                out[k] = int(v)
        return out

    def get(self, key: str) -> int | None:
        return self._values.get(key)

    def set(self, key: str, value: int) -> None:
        updated = dict(self._values)
        updated[key] = int(value)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(updated, indent=2, sort_keys=True), encoding="utf-8")
        self._values = updated
