from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .types import Card


def is_complete(cards: Sequence[Card]) -> bool:
    return len(cards) > 0 and all(c.matched for c in cards)


def compute_winners(scores: Sequence[int]) -> tuple[int, ...]:
    if not scores:
        return ()
    top = max(scores)
    return tuple(i for i, s in enumerate(scores) if s == top)


@dataclass(frozen=True)
class GameOutcome:
    """Final result of a completed session.

    Time fields are only populated for single-player games.
    """

    scores: tuple[int, ...]
    winners: tuple[int, ...]
    final_time_ms: int | None = None
    best_time_ms: int | None = None
    new_record: bool = False

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    @staticmethod
    def from_scores(
        scores: Sequence[int],
        final_time_ms: int | None = None,
        best_time_ms: int | None = None,
        new_record: bool = False,
    ) -> "GameOutcome":
        return GameOutcome(
            scores=tuple(scores),
            winners=compute_winners(scores),
            final_time_ms=final_time_ms,
            best_time_ms=best_time_ms,
            new_record=new_record,
        )
