from __future__ import annotations

import random
from typing import Iterable, Sequence

from .types import Card


class InsufficientAssets(RuntimeError):
    def __init__(self, needed: int, available: int) -> None:
        super().__init__(
            f"Board needs {needed} distinct images but only {available} are available."
        )
        self.needed = needed
        self.available = available


def clean_pool(image_pool: Iterable[object]) -> list[str]:
    """Strip entries, drop blanks and non-strings, keep first occurrence order."""
    seen: set[str] = set()
    out: list[str] = []
    for item in image_pool:
        if not isinstance(item, str):
            continue
        name = item.strip()
        if not name or name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out


def resolve_image_refs(asset_root: str, set_index: int, file_names: Sequence[str]) -> list[str]:
    return [f"{asset_root}/set{set_index}/{name}" for name in file_names]


def _fresh_id(rng: random.Random, index: int) -> str:
    return f"{index}-{rng.getrandbits(48):012x}"


def fisher_yates(rng: random.Random, items: list[Card]) -> None:
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def build_deck(image_pool: Iterable[object], pairs_needed: int, rng: random.Random) -> list[Card]:
    pool = clean_pool(image_pool)
    if pairs_needed > len(pool):
        raise InsufficientAssets(needed=pairs_needed, available=len(pool))

    chosen = rng.sample(pool, pairs_needed)
    cards = [Card(id=_fresh_id(rng, i), image_ref=ref) for i, ref in enumerate(chosen + chosen)]
    fisher_yates(rng, cards)
    return cards
