from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable

from .actions import Action, FlipAction, ResolveAction
from .deck import build_deck, clean_pool, resolve_image_refs
from .outcome import is_complete
from .scoring import points_for
from .types import PLAYER_COUNTS, BoardOption, Card, ImageCatalog, Phase, board_for

Event = dict[str, object]


@dataclass(frozen=True)
class GameConfig:
    joker_keyword: str = "heerjan"
    resolution_delay_match_ms: int = 650
    resolution_delay_mismatch_ms: int = 1200
    end_screen_delay_ms: int = 1500


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    reason: str | None = None


@dataclass
class Session:
    generation: int
    seed: int
    board: BoardOption
    image_set_index: int
    player_count: int
    cards: list[Card]
    scores: list[int]
    open_selection: list[str] = field(default_factory=list)
    input_locked: bool = False
    active_player: int = 0
    phase: Phase = "idle"
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    def card(self, card_id: str) -> Card | None:
        for c in self.cards:
            if c.id == card_id:
                return c
        return None

    @property
    def pairs_found(self) -> int:
        return sum(1 for c in self.cards if c.matched) // 2

    @property
    def total_pairs(self) -> int:
        return self.board.pairs

    def pending_is_match(self) -> bool:
        """Whether the two open cards form a pair. False unless two are open."""
        if len(self.open_selection) != 2:
            return False
        id_a, id_b = self.open_selection
        if id_a == id_b:
            return False
        a = self.card(id_a)
        b = self.card(id_b)
        return a is not None and b is not None and a.image_ref == b.image_ref


def _ignored(reason: str) -> StepResult:
    return StepResult(ok=False, events=[], reason=reason)


def request_flip(session: Session, card_id: str) -> StepResult:
    if session.phase in ("resolving", "all_matched") or session.input_locked:
        return _ignored("Input locked.")
    if len(session.open_selection) >= 2:
        return _ignored("Two cards already open.")
    if card_id in session.open_selection:
        return _ignored("Card already open.")
    card = session.card(card_id)
    if card is None:
        return _ignored("Unknown card.")
    if card.face_up:
        return _ignored("Card already face up.")
    if card.matched:
        return _ignored("Card already matched.")

    session.action_log.append(FlipAction(card_id=card_id))
    before = len(session.event_log)

    card.face_up = True
    session.open_selection.append(card_id)
    session.event_log.append(
        {"type": "CARD_FLIPPED", "player": session.active_player, "card_id": card_id}
    )
    if len(session.open_selection) == 2:
        session.input_locked = True
        session.phase = "resolving"
    else:
        session.phase = "one_open"
    return StepResult(ok=True, events=session.event_log[before:])


def resolve_selection(session: Session, config: GameConfig) -> StepResult:
    if session.phase != "resolving" or len(session.open_selection) != 2:
        return _ignored("Nothing to resolve.")

    session.action_log.append(ResolveAction())
    before = len(session.event_log)
    player = session.active_player
    id_a, id_b = session.open_selection
    a = session.card(id_a)
    b = session.card(id_b)
    assert a is not None and b is not None

    if session.pending_is_match():
        points = points_for(a, config.joker_keyword)
        for c in (a, b):
            c.matched = True
            if c.owner is None:
                c.owner = player
        session.scores[player] += points
        session.event_log.append(
            {
                "type": "PAIR_MATCHED",
                "player": player,
                "image_ref": a.image_ref,
                "points": points,
                "score": session.scores[player],
            }
        )
    else:
        # Covers the degenerate same-id selection too: no score change.
        a.face_up = False
        b.face_up = False
        session.active_player = (player + 1) % session.player_count
        session.event_log.append({"type": "PAIR_MISSED", "player": player, "card_ids": [id_a, id_b]})
        session.event_log.append({"type": "TURN_PASSED", "player": session.active_player})

    session.open_selection.clear()
    session.input_locked = False
    session.phase = "idle"

    if is_complete(session.cards):
        session.phase = "all_matched"
        session.event_log.append({"type": "GAME_COMPLETE", "scores": list(session.scores)})
    return StepResult(ok=True, events=session.event_log[before:])


def step(session: Session, action: Action, config: GameConfig) -> StepResult:
    if isinstance(action, FlipAction):
        return request_flip(session, action.card_id)
    if isinstance(action, ResolveAction):
        return resolve_selection(session, config)
    return _ignored("Unknown action.")


def new_session(
    catalog: ImageCatalog,
    player_count: int,
    board_cards: int,
    seed: int,
    generation: int = 1,
) -> Session:
    """Deal a fresh session. Raises before anything is built if the deal is impossible."""
    if player_count not in PLAYER_COUNTS:
        raise ValueError(f"Player count must be one of {PLAYER_COUNTS}, got {player_count}.")
    board = board_for(board_cards)

    rng = random.Random(seed)
    set_index = rng.randint(1, max(1, catalog.set_count))
    pool = resolve_image_refs(catalog.asset_root, set_index, clean_pool(catalog.file_names))
    cards = build_deck(pool, board.pairs, rng)

    session = Session(
        generation=generation,
        seed=seed,
        board=board,
        image_set_index=set_index,
        player_count=player_count,
        cards=cards,
        scores=[0] * player_count,
    )
    session.event_log.append(
        {
            "type": "GAME_STARTED",
            "players": player_count,
            "board": board.cards,
            "image_set": set_index,
        }
    )
    return session


def replay(
    catalog: ImageCatalog,
    player_count: int,
    board_cards: int,
    seed: int,
    flips: Iterable[str],
    config: GameConfig | None = None,
) -> Session:
    """Rebuild a session from its seed and flip sequence, resolving each pair at once."""
    cfg = config or GameConfig()
    session = new_session(catalog, player_count=player_count, board_cards=board_cards, seed=seed)
    for card_id in flips:
        request_flip(session, card_id)
        if session.phase == "resolving":
            resolve_selection(session, cfg)
        if session.phase == "all_matched":
            break
    return session
