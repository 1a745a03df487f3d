from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from ..app import GameContext
from ..scene_base import SceneBase, SceneTransition
from ..ui import ACCENT, BG, draw_text_centered

ZOOM_SECONDS = 0.25


class IntroScene(SceneBase):
    """Splash screen: a tennis ball to tap, which zooms before the setup screen."""

    def __init__(self, ctx: GameContext) -> None:
        super().__init__(ctx)
        self._zoom_elapsed: float | None = None

    def _ball_rect(self) -> pygame.Rect:
        w, h = self.ctx.screen.get_size()
        return pygame.Rect(w // 2 - 70, h - 180, 140, 140)

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._zoom_elapsed is not None:
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._ball_rect().collidepoint(event.pos):
                self._zoom_elapsed = 0.0
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE):
            self._zoom_elapsed = 0.0

    def update(self, dt: float) -> SceneTransition | None:
        if self._zoom_elapsed is not None:
            self._zoom_elapsed += dt
            if self._zoom_elapsed >= ZOOM_SECONDS:
                from .setup import SetupScene

                self._go(SetupScene(self.ctx))
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(BG)
        w, _h = screen.get_size()
        fonts = self.ctx.assets.fonts
        draw_text_centered(screen, fonts.title, "Padel Memory", (w // 2, 140))
        draw_text_centered(screen, fonts.ui, "Tap the ball to start", (w // 2, 200), color=(200, 200, 210))

        rect = self._ball_rect()
        scale = 1.0
        if self._zoom_elapsed is not None:
            scale = 1.0 + min(1.0, self._zoom_elapsed / ZOOM_SECONDS)
        radius = int(rect.width / 2 * scale)
        pygame.draw.circle(screen, (214, 232, 60), rect.center, radius)
        pygame.draw.arc(
            screen,
            (250, 250, 250),
            pygame.Rect(rect.centerx - radius, rect.centery - radius // 2, radius, radius),
            -1.2,
            1.2,
            max(2, radius // 14),
        )
        pygame.draw.circle(screen, ACCENT, rect.center, radius, width=2)
