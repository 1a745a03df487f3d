from __future__ import annotations

import traceback

import pygame  # type: ignore[import-not-found]

from padelmemory.engine.controller import GameController
from padelmemory.services.content import ContentError
from padelmemory.services.records import JsonRecordStore

from ..app import GameContext
from ..scene_base import SceneBase, SceneTransition
from ..ui import BG, Button, draw_text
from .intro import IntroScene


class BootScene(SceneBase):
    def __init__(self, ctx: GameContext) -> None:
        super().__init__(ctx)
        self._did_boot = False
        self._error: str | None = None
        self._quit_button: Button | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        try:
            self.ctx.content.validate_all()
            self.ctx.catalog = self.ctx.content.load_catalog()
            self.ctx.config = self.ctx.content.load_game_config()
            self.ctx.records = JsonRecordStore(self.ctx.paths.records_file)
            self.ctx.controller = GameController(
                self.ctx.catalog,
                config=self.ctx.config,
                records=self.ctx.records,
                log=self.ctx.telemetry.log,
            )
            self.ctx.telemetry.log("boot", {"ok": True, "image_sets": self.ctx.catalog.set_count})
            return SceneTransition(IntroScene(self.ctx))
        except ContentError as e:
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self.ctx.telemetry.log("boot", {"ok": False, "error": str(e)})
            self._quit_button = Button(
                rect=pygame.Rect(20, self.ctx.screen.get_height() - 64, 140, 44),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            )
            return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill(BG)
        fonts = self.ctx.assets.fonts
        draw_text(screen, fonts.big, "Padel Memory", (20, 20))

        if self._error is None:
            draw_text(screen, fonts.ui, "Loading image sets...", (20, 80))
            draw_text(screen, fonts.small, "Tip: run `python tools/generate_placeholder_assets.py`", (20, 110))
        else:
            draw_text(screen, fonts.ui, "BOOT ERROR", (20, 80), color=(240, 80, 80))
            y = 120
            for line in self._error.splitlines()[:22]:
                draw_text(screen, fonts.small, line[:120], (20, y), color=(230, 230, 230))
                y += 18
            if self._quit_button is not None:
                self._quit_button.draw(screen, fonts.ui)
