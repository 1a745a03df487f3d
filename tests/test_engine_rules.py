from __future__ import annotations

import copy

from padelmemory.engine.outcome import GameOutcome, compute_winners, is_complete
from padelmemory.engine.scoring import points_for
from padelmemory.engine.serialize import snapshot
from padelmemory.engine.session import GameConfig, Session, request_flip, resolve_selection
from padelmemory.engine.types import Card, board_for

CONFIG = GameConfig(joker_keyword="heerjan")


def _session(images: list[str], players: int = 2) -> Session:
    cards = [Card(id=f"c{i}", image_ref=img) for i, img in enumerate(images)]
    return Session(
        generation=1,
        seed=0,
        board=board_for(len(cards)),
        image_set_index=1,
        player_count=players,
        cards=cards,
        scores=[0] * players,
    )


def _four_pairs(players: int = 2) -> Session:
    return _session(
        ["set1/a.png", "set1/a.png", "set1/b.png", "set1/b.png",
         "set1/c.png", "set1/c.png", "set1/d.png", "set1/d.png"],
        players=players,
    )


def _turn(session: Session, a: str, b: str) -> None:
    assert request_flip(session, a).ok
    assert request_flip(session, b).ok
    assert session.phase == "resolving"
    assert resolve_selection(session, CONFIG).ok


def test_first_flip_opens_one_card() -> None:
    s = _four_pairs()
    res = request_flip(s, "c0")
    assert res.ok
    assert s.phase == "one_open"
    assert s.open_selection == ["c0"]
    assert s.card("c0").face_up
    assert not s.input_locked
    assert res.events[0]["type"] == "CARD_FLIPPED"


def test_second_flip_locks_input() -> None:
    s = _four_pairs()
    request_flip(s, "c0")
    request_flip(s, "c2")
    assert s.phase == "resolving"
    assert s.input_locked
    assert s.open_selection == ["c0", "c2"]


def test_invalid_flips_never_change_state() -> None:
    s = _four_pairs()
    _turn(s, "c0", "c1")  # c0/c1 matched
    request_flip(s, "c2")

    before = snapshot(s)
    for card_id in ("c2", "c0", "c1", "missing"):
        res = request_flip(s, card_id)
        assert not res.ok
        assert res.reason
    assert snapshot(s) == before

    request_flip(s, "c4")
    locked = snapshot(s)
    res = request_flip(s, "c6")
    assert not res.ok
    assert res.reason == "Input locked."
    assert snapshot(s) == locked


def test_match_awards_active_player_and_keeps_turn() -> None:
    s = _four_pairs(players=3)
    s.active_player = 2
    _turn(s, "c2", "c3")
    assert s.card("c2").matched and s.card("c3").matched
    assert s.card("c2").owner == 2 and s.card("c3").owner == 2
    assert s.scores == [0, 0, 1]
    assert s.active_player == 2
    assert s.open_selection == []
    assert not s.input_locked
    assert s.phase == "idle"


def test_mismatch_flips_back_and_passes_turn() -> None:
    s = _four_pairs(players=3)
    s.active_player = 2
    _turn(s, "c0", "c2")
    assert not s.card("c0").face_up and not s.card("c2").face_up
    assert not s.card("c0").matched
    assert s.scores == [0, 0, 0]
    assert s.active_player == 0
    assert s.phase == "idle"
    assert [e["type"] for e in s.event_log[-2:]] == ["PAIR_MISSED", "TURN_PASSED"]


def test_owner_is_never_reassigned() -> None:
    s = _four_pairs()
    _turn(s, "c0", "c1")
    s.active_player = 1
    # a matched card cannot be reopened by anyone
    assert not request_flip(s, "c0").ok
    assert s.card("c0").owner == 0


def test_same_card_twice_is_not_a_match() -> None:
    s = _four_pairs()
    s.cards[0].face_up = True
    s.open_selection = ["c0", "c0"]
    s.input_locked = True
    s.phase = "resolving"
    assert not s.pending_is_match()
    resolve_selection(s, CONFIG)
    assert s.scores == [0, 0]
    assert not s.card("c0").matched


def test_joker_pair_scores_three_case_insensitive() -> None:
    joker = Card(id="j", image_ref="memory/set2/HeerJan.png")
    plain = Card(id="p", image_ref="memory/set2/leo.png")
    assert points_for(joker, "heerjan") == 3
    assert points_for(joker, "HEERJAN") == 3
    assert points_for(plain, "heerjan") == 1
    assert points_for(joker, "joker") == 1
    assert points_for(plain, "") == 1

    s = _session(["x/HEERJAN.png", "x/HEERJAN.png", "x/b.png", "x/b.png",
                  "x/c.png", "x/c.png", "x/d.png", "x/d.png"])
    _turn(s, "c0", "c1")
    _turn(s, "c2", "c3")
    assert s.scores == [4, 0]


def test_is_complete() -> None:
    assert not is_complete([])
    s = _four_pairs()
    assert not is_complete(s.cards)
    _turn(s, "c0", "c1")
    assert not is_complete(s.cards)
    for c in s.cards:
        c.matched = True
    assert is_complete(s.cards)


def test_winners() -> None:
    assert compute_winners([2, 2, 1]) == (0, 1)
    assert compute_winners([3, 1, 1]) == (0,)
    assert compute_winners([0]) == (0,)

    tie = GameOutcome.from_scores([2, 2, 1])
    assert tie.is_tie
    assert tie.winners == (0, 1)
    solo = GameOutcome.from_scores([3, 1, 1])
    assert not solo.is_tie
    assert solo.winners == (0,)


def test_game_complete_freezes_session() -> None:
    s = _four_pairs(players=1)
    for a, b in (("c0", "c1"), ("c2", "c3"), ("c4", "c5"), ("c6", "c7")):
        _turn(s, a, b)
    assert s.phase == "all_matched"
    assert s.scores == [4]
    assert s.event_log[-1]["type"] == "GAME_COMPLETE"

    frozen = snapshot(s)
    assert not request_flip(s, "c0").ok
    assert not resolve_selection(s, CONFIG).ok
    assert snapshot(s) == frozen


def test_two_player_scenario_depends_only_on_outcomes() -> None:
    def play(session: Session) -> tuple[list[int], int, str]:
        _turn(session, "c0", "c1")  # p0 match
        _turn(session, "c2", "c3")  # p0 match
        _turn(session, "c4", "c6")  # p0 miss -> p1
        _turn(session, "c4", "c5")  # p1 match
        return list(session.scores), session.active_player, session.phase

    first = play(_four_pairs())
    relabelled = _session(
        ["q/zz.png", "q/zz.png", "q/yy.png", "q/yy.png",
         "q/xx.png", "q/xx.png", "q/ww.png", "q/ww.png"]
    )
    second = play(copy.deepcopy(relabelled))

    assert first == ([2, 1], 1, "idle")
    assert second == first
