from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from padelmemory.engine.deck import InsufficientAssets
from padelmemory.engine.types import BOARD_OPTIONS, PLAYER_COUNTS

from ..app import GameContext
from ..scene_base import SceneBase
from ..ui import BG, Button, draw_text


class SetupScene(SceneBase):
    def __init__(self, ctx: GameContext) -> None:
        super().__init__(ctx)
        self._message = ""
        self._player_buttons: list[tuple[int, Button]] = []
        self._board_buttons: list[tuple[int, Button]] = []
        self._build_ui()

    def _build_ui(self) -> None:
        x, y = 60, 140
        w, h, gap = 90, 56, 12
        for i, n in enumerate(PLAYER_COUNTS):
            btn = Button(
                rect=pygame.Rect(x + i * (w + gap), y, w, h),
                text=str(n),
                on_click=lambda n=n: self._set_players(n),
            )
            self._player_buttons.append((n, btn))

        y = 270
        w = 124
        for i, opt in enumerate(BOARD_OPTIONS):
            row, col = divmod(i, 3)
            btn = Button(
                rect=pygame.Rect(x + col * (w + gap), y + row * (h + gap), w, h),
                text=opt.label,
                on_click=lambda cards=opt.cards: self._set_board(cards),
            )
            self._board_buttons.append((opt.cards, btn))

        self.btn_start = Button(
            rect=pygame.Rect(x, 500, 3 * w + 2 * gap, 60),
            text="Start (random set)",
            on_click=self._on_start,
            primary=True,
        )
        self._sync_selection()

    def _set_players(self, n: int) -> None:
        self.ctx.player_count = n
        self._sync_selection()

    def _set_board(self, cards: int) -> None:
        self.ctx.board_cards = cards
        self._sync_selection()

    def _sync_selection(self) -> None:
        for n, btn in self._player_buttons:
            btn.selected = n == self.ctx.player_count
        for cards, btn in self._board_buttons:
            btn.selected = cards == self.ctx.board_cards

    def _on_start(self) -> None:
        from .game import GameScene

        controller = self.ctx.controller
        if controller is None:
            return
        try:
            controller.new_game(self.ctx.player_count, self.ctx.board_cards)
        except InsufficientAssets as e:
            self._message = str(e)
            return
        self._go(GameScene(self.ctx))

    def handle_event(self, event: pygame.event.Event) -> None:
        for _, b in self._player_buttons + self._board_buttons:
            if b.handle_event(event):
                return
        self.btn_start.handle_event(event)

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(BG)
        fonts = self.ctx.assets.fonts
        draw_text(screen, fonts.big, "Padel Memory", (60, 40))
        draw_text(screen, fonts.ui, "Number of players", (60, 110))
        draw_text(screen, fonts.ui, "Choose a board", (60, 240))
        for _, b in self._player_buttons + self._board_buttons:
            b.draw(screen, fonts.ui)
        self.btn_start.draw(screen, fonts.ui)
        if self._message:
            draw_text(screen, fonts.ui, self._message, (60, 580), color=(240, 120, 120))
