from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Phase = Literal["idle", "one_open", "resolving", "all_matched"]

PLAYER_COUNTS: tuple[int, ...] = (1, 2, 3, 4)


@dataclass
class Card:
    id: str
    image_ref: str
    face_up: bool = False
    matched: bool = False
    owner: int | None = None


@dataclass(frozen=True)
class BoardOption:
    cards: int
    cols: int  # narrow side
    rows: int  # tall side
    label: str

    @property
    def pairs(self) -> int:
        return self.cards // 2


BOARD_OPTIONS: tuple[BoardOption, ...] = (
    BoardOption(cards=8, cols=2, rows=4, label="8 (2x4)"),
    BoardOption(cards=12, cols=3, rows=4, label="12 (3x4)"),
    BoardOption(cards=16, cols=4, rows=4, label="16 (4x4)"),
    BoardOption(cards=20, cols=4, rows=5, label="20 (4x5)"),
    BoardOption(cards=24, cols=4, rows=6, label="24 (4x6)"),
    BoardOption(cards=30, cols=5, rows=6, label="30 (5x6)"),
    BoardOption(cards=36, cols=6, rows=6, label="36 (6x6)"),
)

DEFAULT_BOARD_CARDS = 36
DEFAULT_PLAYER_COUNT = 2


def board_for(cards: int) -> BoardOption:
    for opt in BOARD_OPTIONS:
        if opt.cards == cards:
            return opt
    allowed = ", ".join(str(o.cards) for o in BOARD_OPTIONS)
    raise ValueError(f"Unsupported board size {cards} (choose one of {allowed}).")


@dataclass(frozen=True)
class ImageCatalog:
    """Interchangeable front-image sets plus the shared card back."""

    asset_root: str
    back_image: str
    set_count: int
    file_names: tuple[str, ...]

    def back_ref(self) -> str:
        return f"{self.asset_root}/{self.back_image}"
