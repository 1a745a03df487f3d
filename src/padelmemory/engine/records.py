from __future__ import annotations

from typing import Protocol


def best_time_key(board_cards: int) -> str:
    return f"bestTime_{board_cards}"


class RecordStore(Protocol):
    def get(self, key: str) -> int | None: ...

    def set(self, key: str, value: int) -> None: ...


class InMemoryRecordStore:
    """Record store that lives as long as the process. Used in tests and as a default."""

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self.values: dict[str, int] = dict(initial or {})

    def get(self, key: str) -> int | None:
        return self.values.get(key)

    def set(self, key: str, value: int) -> None:
        self.values[key] = int(value)


def is_better_time(final_ms: int, best_ms: int | None) -> bool:
    return best_ms is None or final_ms < best_ms
