from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from padelmemory.engine.session import Session

from ..app import GameContext, format_seconds, player_color
from ..scene_base import SceneBase, SceneTransition
from ..ui import BG, Button, draw_panel, draw_text

HEADER_H = 64
SCORES_H = 56
PAD = 14
GAP = 8


class GameScene(SceneBase):
    def __init__(self, ctx: GameContext) -> None:
        super().__init__(ctx)
        self._message = ""
        w, _h = ctx.screen.get_size()
        self.btn_reset = Button(
            rect=pygame.Rect(w - 2 * (110 + 10), PAD, 110, 40), text="Reset", on_click=self._on_reset, primary=True
        )
        self.btn_back = Button(rect=pygame.Rect(w - 120, PAD, 110, 40), text="Back", on_click=self._on_back)
        self._prefetch()

    @property
    def session(self) -> Session | None:
        controller = self.ctx.controller
        return controller.session if controller is not None else None

    def _prefetch(self) -> None:
        session = self.session
        catalog = self.ctx.catalog
        if session is None or catalog is None:
            return
        size = self._card_size(session)
        refs = [catalog.back_ref()] + [c.image_ref for c in session.cards]
        self.ctx.assets.prefetch(refs, size=(size, size))

    def _on_reset(self) -> None:
        controller = self.ctx.controller
        if controller is None:
            return
        controller.reset()
        self._prefetch()

    def _on_back(self) -> None:
        from .setup import SetupScene

        if self.ctx.controller is not None:
            self.ctx.controller.leave()
        self._go(SetupScene(self.ctx))

    # -------- Layout --------
    def _grid_top(self) -> int:
        return PAD + HEADER_H + SCORES_H + PAD

    def _card_size(self, session: Session) -> int:
        w, h = self.ctx.screen.get_size()
        cols, rows = session.board.cols, session.board.rows
        avail_w = w - 2 * PAD - GAP * (cols - 1)
        avail_h = h - self._grid_top() - PAD - GAP * (rows - 1)
        return max(16, min(avail_w // cols, avail_h // rows))

    def _card_rect(self, session: Session, index: int) -> pygame.Rect:
        size = self._card_size(session)
        cols = session.board.cols
        grid_w = cols * size + (cols - 1) * GAP
        x0 = (self.ctx.screen.get_width() - grid_w) // 2
        row, col = divmod(index, cols)
        return pygame.Rect(x0 + col * (size + GAP), self._grid_top() + row * (size + GAP), size, size)

    def _hit_test_card(self, pos: tuple[int, int]) -> str | None:
        session = self.session
        if session is None:
            return None
        for i, card in enumerate(session.cards):
            if self._card_rect(session, i).collidepoint(pos):
                return card.id
        return None

    # -------- Scene protocol --------
    def handle_event(self, event: pygame.event.Event) -> None:
        if self.btn_reset.handle_event(event) or self.btn_back.handle_event(event):
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            card_id = self._hit_test_card(event.pos)
            if card_id is not None and self.ctx.controller is not None:
                self.ctx.controller.request_flip(card_id)

    def update(self, dt: float) -> SceneTransition | None:
        controller = self.ctx.controller
        if self._next is None and controller is not None and controller.end_screen_ready:
            from .result import ResultScene

            self._go(ResultScene(self.ctx))
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(BG)
        session = self.session
        if session is None:
            return
        self._draw_header(screen, session)
        self._draw_scores(screen, session)
        self._draw_grid(screen, session)
        self.btn_reset.draw(screen, self.ctx.assets.fonts.ui)
        self.btn_back.draw(screen, self.ctx.assets.fonts.ui)

    def _draw_header(self, screen: pygame.Surface, session: Session) -> None:
        fonts = self.ctx.assets.fonts
        controller = self.ctx.controller
        draw_text(screen, fonts.big, "Padel Memory", (PAD, PAD))
        parts: list[tuple[str, tuple[int, int, int]]] = []
        if session.player_count == 1 and controller is not None:
            parts.append((f"Time: {format_seconds(controller.elapsed_ms)}", (240, 240, 240)))
        parts.append((f"PAIRS: {session.pairs_found}/{session.total_pairs}", (200, 200, 210)))
        parts.append((f"TURN: Player {session.active_player + 1}", player_color(session.active_player)))
        parts.append((f"Set: {session.image_set_index}", (200, 200, 210)))
        parts.append((f"Board: {session.board.cols}x{session.board.rows}", (200, 200, 210)))
        x = PAD
        for text, color in parts:
            draw_text(screen, fonts.small, text, (x, PAD + 40), color=color)
            x += fonts.small.size(text)[0] + 18

    def _draw_scores(self, screen: pygame.Surface, session: Session) -> None:
        fonts = self.ctx.assets.fonts
        w = screen.get_width()
        n = session.player_count
        slot_w = (w - 2 * PAD - GAP * (n - 1)) // n
        y = PAD + HEADER_H
        for i in range(n):
            rect = pygame.Rect(PAD + i * (slot_w + GAP), y, slot_w, SCORES_H - GAP)
            active = i == session.active_player
            draw_panel(screen, rect, border=player_color(i) if active else None, width=2 if active else 1)
            draw_text(screen, fonts.ui, f"Player {i + 1}", (rect.x + 12, rect.y + 14))
            score = str(session.scores[i])
            draw_text(screen, fonts.ui, score, (rect.right - 12 - fonts.ui.size(score)[0], rect.y + 14))

    def _draw_grid(self, screen: pygame.Surface, session: Session) -> None:
        catalog = self.ctx.catalog
        size = self._card_size(session)
        for i, card in enumerate(session.cards):
            rect = self._card_rect(session, i)
            if card.face_up or card.matched:
                img = self.ctx.assets.get_image(card.image_ref, size=(size, size))
            elif catalog is not None:
                img = self.ctx.assets.get_image(catalog.back_ref(), size=(size, size))
            else:
                img = None
            if img is not None:
                screen.blit(img, rect.topleft)
            if card.owner is not None:
                pygame.draw.rect(screen, player_color(card.owner), rect, width=3, border_radius=6)
