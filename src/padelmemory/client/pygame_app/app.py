from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame  # type: ignore[import-not-found]

from padelmemory.engine.controller import GameController
from padelmemory.engine.session import GameConfig
from padelmemory.engine.types import DEFAULT_BOARD_CARDS, DEFAULT_PLAYER_COUNT, ImageCatalog
from padelmemory.paths import Paths
from padelmemory.services.content import ContentService
from padelmemory.services.records import JsonRecordStore
from padelmemory.services.telemetry import TelemetryService

from .asset_manager import AssetManager
from .scene_base import Scene

Color = tuple[int, int, int]

# Player 1..4: yellow, blue, green, pink
PLAYER_COLORS: tuple[Color, ...] = (
    (255, 204, 0),
    (96, 165, 250),
    (52, 211, 153),
    (244, 114, 182),
)


def player_color(index: int) -> Color:
    if 0 <= index < len(PLAYER_COLORS):
        return PLAYER_COLORS[index]
    return (255, 255, 255)


def format_seconds(ms: int | None) -> str:
    if ms is None:
        return "-"
    return f"{ms / 1000:.1f} sec"


@dataclass
class GameContext:
    screen: pygame.Surface
    clock: pygame.time.Clock
    paths: Paths
    assets: AssetManager
    content: ContentService
    telemetry: TelemetryService

    # Chosen on the setup screen (or from the command line)
    player_count: int = DEFAULT_PLAYER_COUNT
    board_cards: int = DEFAULT_BOARD_CARDS

    # Loaded at boot
    catalog: Optional[ImageCatalog] = None
    config: Optional[GameConfig] = None
    records: Optional[JsonRecordStore] = None
    controller: Optional[GameController] = None


class App:
    def __init__(self, ctx: GameContext, initial_scene: Scene) -> None:
        self.ctx = ctx
        self.scene: Scene = initial_scene
        self.running = True

    def run(self) -> int:
        while self.running:
            dt = self.ctx.clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                self.scene.handle_event(event)

            # Deferred resolutions fire here, independent of the active scene.
            if self.ctx.controller is not None:
                self.ctx.controller.update()

            tr = self.scene.update(dt)
            if tr is not None:
                self.scene = tr.next_scene

            self.scene.render(self.ctx.screen)
            pygame.display.flip()

        if self.ctx.controller is not None:
            self.ctx.controller.leave()
        return 0
