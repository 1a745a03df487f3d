from __future__ import annotations

import random

from padelmemory.engine.serialize import snapshot
from padelmemory.engine.session import GameConfig, new_session, replay, request_flip, resolve_selection
from padelmemory.paths import get_paths
from padelmemory.services.content import ContentService


def _load():
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    return content.load_catalog(), content.load_game_config()


def test_same_seed_deals_same_board() -> None:
    catalog, _ = _load()
    a = new_session(catalog, player_count=2, board_cards=36, seed=424242)
    b = new_session(catalog, player_count=2, board_cards=36, seed=424242)
    assert snapshot(a) == snapshot(b)

    c = new_session(catalog, player_count=2, board_cards=36, seed=424243)
    assert [x.image_ref for x in c.cards] != [x.image_ref for x in a.cards]


def test_engine_determinism_replay() -> None:
    catalog, config = _load()
    seed = 98765
    state1 = new_session(catalog, player_count=3, board_cards=16, seed=seed)

    # A forgetful player: random flips, some of them invalid.
    rng = random.Random(1)
    flips: list[str] = []
    for _ in range(200):
        if state1.phase == "all_matched":
            break
        card_id = rng.choice(state1.cards).id
        flips.append(card_id)
        request_flip(state1, card_id)
        if state1.phase == "resolving":
            resolve_selection(state1, config)

    state2 = replay(catalog, player_count=3, board_cards=16, seed=seed, flips=flips, config=config)
    assert snapshot(state1) == snapshot(state2)
    assert sum(state1.scores) >= state1.pairs_found


def test_replay_default_config_matches_shipped_rules() -> None:
    _, config = _load()
    assert config == GameConfig()
