from __future__ import annotations

from .types import Card

JOKER_POINTS = 3
PAIR_POINTS = 1


def is_joker(image_ref: str, joker_keyword: str) -> bool:
    keyword = joker_keyword.strip().lower()
    if not keyword:
        return False
    return keyword in image_ref.lower()


def points_for(card: Card, joker_keyword: str) -> int:
    return JOKER_POINTS if is_joker(card.image_ref, joker_keyword) else PAIR_POINTS
