from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

# Callbacks receive the clock reading they were due at.
Callback = Callable[[int], None]


@dataclass(order=True)
class DeferredAction:
    due_ms: int
    seq: int
    generation: int = field(compare=False)
    name: str = field(compare=False)
    callback: Callback = field(compare=False, repr=False)


class DeferredActions:
    """Timed callbacks tied to a session generation.

    Nothing runs on its own: the owner polls `run_due` from its main loop.
    Actions scheduled for an older generation are discarded instead of run.
    """

    def __init__(self) -> None:
        self._pending: list[DeferredAction] = []
        self._seq = 0

    def schedule(self, name: str, due_ms: int, generation: int, callback: Callback) -> DeferredAction:
        self._seq += 1
        action = DeferredAction(
            due_ms=due_ms, seq=self._seq, generation=generation, name=name, callback=callback
        )
        self._pending.append(action)
        self._pending.sort()
        return action

    def cancel_all(self) -> None:
        self._pending.clear()

    def pending(self, generation: int | None = None) -> list[DeferredAction]:
        if generation is None:
            return list(self._pending)
        return [a for a in self._pending if a.generation == generation]

    def run_due(self, now_ms: int, generation: int) -> int:
        ran = 0
        while self._pending and self._pending[0].due_ms <= now_ms:
            action = self._pending.pop(0)
            if action.generation != generation:
                continue
            action.callback(action.due_ms)
            ran += 1
        return ran
