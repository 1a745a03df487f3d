from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from ..app import GameContext, format_seconds, player_color
from ..scene_base import SceneBase
from ..ui import BG, Button, draw_panel, draw_text


class ResultScene(SceneBase):
    def __init__(self, ctx: GameContext) -> None:
        super().__init__(ctx)
        self.btn_again = Button(
            rect=pygame.Rect(60, 0, 360, 56), text="Play again", on_click=self._on_again, primary=True
        )
        self.btn_home = Button(rect=pygame.Rect(60, 0, 360, 56), text="Back to start", on_click=self._on_home)

    def _on_again(self) -> None:
        from .game import GameScene

        controller = self.ctx.controller
        if controller is None:
            return
        controller.reset()
        self._go(GameScene(self.ctx))

    def _on_home(self) -> None:
        from .setup import SetupScene

        if self.ctx.controller is not None:
            self.ctx.controller.leave()
        self._go(SetupScene(self.ctx))

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.btn_again.handle_event(event):
            return
        self.btn_home.handle_event(event)

    def _title(self) -> str:
        controller = self.ctx.controller
        session = controller.session if controller is not None else None
        outcome = controller.outcome if controller is not None else None
        if session is None or outcome is None:
            return ""
        if session.player_count == 1:
            return "DONE!"
        if outcome.is_tie:
            return "TIE: Player " + " & ".join(str(w + 1) for w in outcome.winners)
        return f"WINNER: Player {outcome.winners[0] + 1}"

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(BG)
        fonts = self.ctx.assets.fonts
        controller = self.ctx.controller
        session = controller.session if controller is not None else None
        outcome = controller.outcome if controller is not None else None

        draw_text(screen, fonts.big, self._title(), (60, 60))
        y = 120
        if session is not None and outcome is not None:
            if session.player_count == 1:
                draw_text(screen, fonts.ui, f"Your time: {format_seconds(outcome.final_time_ms)}", (60, y))
                best = (
                    format_seconds(outcome.best_time_ms)
                    if outcome.best_time_ms is not None
                    else "No record yet"
                )
                draw_text(screen, fonts.ui, f"Best time ({session.board.cards} cards): {best}", (60, y + 30))
                if outcome.new_record:
                    draw_text(screen, fonts.ui, "New record!", (60, y + 60), color=(255, 204, 0))
                y += 110
            else:
                for i, score in enumerate(outcome.scores):
                    rect = pygame.Rect(60, y, 360, 44)
                    draw_panel(screen, rect, border=player_color(i), width=2)
                    draw_text(screen, fonts.ui, f"Player {i + 1}", (rect.x + 12, rect.y + 12))
                    draw_text(screen, fonts.ui, str(score), (rect.right - 40, rect.y + 12))
                    y += 54
                y += 16

        self.btn_again.rect.y = y
        self.btn_home.rect.y = y + 70
        self.btn_again.draw(screen, fonts.ui)
        self.btn_home.draw(screen, fonts.ui)
