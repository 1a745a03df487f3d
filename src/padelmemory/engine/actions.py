from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlipAction:
    card_id: str


@dataclass(frozen=True)
class ResolveAction:
    """Applies the outcome of the two open cards (issued after the delay)."""


Action = FlipAction | ResolveAction
