from __future__ import annotations

import random
from typing import Callable, Mapping

from .outcome import GameOutcome
from .records import InMemoryRecordStore, RecordStore, best_time_key, is_better_time
from .scheduler import DeferredActions
from .session import (
    GameConfig,
    Session,
    StepResult,
    new_session,
    request_flip,
    resolve_selection,
)
from .timer import Clock, SessionTimer, monotonic_ms
from .types import ImageCatalog, Phase

EventSink = Callable[[str, Mapping[str, object]], None]


class GameController:
    """Owns the current session and everything timed around it.

    The controller never sleeps or spawns threads. The host loop calls
    `update()` once per frame; pending resolutions and the end-screen reveal
    fire from there. Every new game bumps the generation, which makes any
    still-pending action from an earlier game a no-op.
    """

    def __init__(
        self,
        catalog: ImageCatalog,
        config: GameConfig | None = None,
        records: RecordStore | None = None,
        clock: Clock = monotonic_ms,
        log: EventSink | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config or GameConfig()
        self.records: RecordStore = records if records is not None else InMemoryRecordStore()
        self._clock = clock
        self._log = log
        self._rng = rng or random.Random()

        self._deferred = DeferredActions()
        self._timer = SessionTimer(clock)
        self._generation = 0
        self._session: Session | None = None
        self._settings: tuple[int, int] | None = None
        self._outcome: GameOutcome | None = None
        self._end_screen_ready = False

    # -------- Lifecycle --------
    def new_game(self, player_count: int, board_cards: int, seed: int | None = None) -> Session:
        if seed is None:
            seed = self._rng.randrange(1, 2**31 - 1)
        # Build first: a failed deal leaves the current game untouched.
        session = new_session(
            self.catalog,
            player_count=player_count,
            board_cards=board_cards,
            seed=seed,
            generation=self._generation + 1,
        )
        self._teardown()
        self._generation = session.generation
        self._session = session
        self._settings = (player_count, board_cards)
        if player_count == 1:
            self._timer.start()

        self._emit(
            "game_started",
            {
                "generation": session.generation,
                "seed": seed,
                "players": player_count,
                "board": board_cards,
                "image_set": session.image_set_index,
            },
        )
        return session

    def reset(self) -> Session:
        if self._settings is None:
            raise RuntimeError("No previous game to reset.")
        players, board = self._settings
        return self.new_game(players, board)

    def leave(self) -> None:
        self._teardown()
        self._generation += 1
        self._session = None

    def _teardown(self) -> None:
        self._deferred.cancel_all()
        self._timer.cancel()
        self._outcome = None
        self._end_screen_ready = False

    # -------- Input / clock --------
    def request_flip(self, card_id: str) -> StepResult:
        session = self._session
        if session is None:
            return StepResult(ok=False, events=[], reason="No game in progress.")
        res = request_flip(session, card_id)
        if res.ok and session.phase == "resolving":
            delay = (
                self.config.resolution_delay_match_ms
                if session.pending_is_match()
                else self.config.resolution_delay_mismatch_ms
            )
            self._deferred.schedule(
                "resolve", self._clock() + delay, session.generation, self._on_resolve_due
            )
        return res

    def update(self, now_ms: int | None = None) -> int:
        """Run every deferred action that is due. Returns how many ran."""
        now = self._clock() if now_ms is None else now_ms
        return self._deferred.run_due(now, self._generation)

    def _on_resolve_due(self, due_ms: int) -> None:
        session = self._session
        if session is None:
            return
        resolve_selection(session, self.config)
        if session.phase == "all_matched":
            self._complete(session, due_ms)

    def _complete(self, session: Session, at_ms: int) -> None:
        final_ms: int | None = None
        best_ms: int | None = None
        new_record = False
        if session.player_count == 1:
            final_ms = self._timer.stop(at_ms=at_ms)
            best_ms, new_record = self._submit_time(session.board.cards, final_ms)

        self._outcome = GameOutcome.from_scores(
            session.scores, final_time_ms=final_ms, best_time_ms=best_ms, new_record=new_record
        )
        self._emit(
            "game_complete",
            {
                "generation": session.generation,
                "scores": list(session.scores),
                "winners": list(self._outcome.winners),
                "time_ms": final_ms,
            },
        )
        self._deferred.schedule(
            "end_screen",
            at_ms + self.config.end_screen_delay_ms,
            session.generation,
            self._on_end_screen_due,
        )

    def _on_end_screen_due(self, due_ms: int) -> None:
        self._end_screen_ready = True

    def _submit_time(self, board_cards: int, final_ms: int) -> tuple[int | None, bool]:
        key = best_time_key(board_cards)
        best = self.records.get(key)
        if not is_better_time(final_ms, best):
            return best, False
        try:
            self.records.set(key, final_ms)
        except OSError as e:
            self._emit("record_save_failed", {"key": key, "error": str(e)})
            return best, False
        self._emit("record_set", {"key": key, "time_ms": final_ms, "previous_ms": best})
        return final_ms, True

    def _emit(self, event_type: str, payload: Mapping[str, object]) -> None:
        if self._log is not None:
            self._log(event_type, payload)

    # -------- Read-only views --------
    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def phase(self) -> Phase | None:
        return self._session.phase if self._session is not None else None

    @property
    def end_screen_ready(self) -> bool:
        return self._end_screen_ready

    @property
    def outcome(self) -> GameOutcome | None:
        return self._outcome

    @property
    def timer_running(self) -> bool:
        return self._timer.running

    @property
    def elapsed_ms(self) -> int | None:
        if self._session is None or self._session.player_count != 1:
            return None
        return self._timer.elapsed_ms

    @property
    def best_time_ms(self) -> int | None:
        if self._session is None:
            return None
        return self.records.get(best_time_key(self._session.board.cards))

    def pending_actions(self) -> int:
        return len(self._deferred.pending(self._generation))
