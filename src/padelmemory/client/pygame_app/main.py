from __future__ import annotations

import argparse
from pathlib import Path

import pygame  # type: ignore[import-not-found]

from padelmemory.engine.types import BOARD_OPTIONS, DEFAULT_BOARD_CARDS, DEFAULT_PLAYER_COUNT, PLAYER_COUNTS
from padelmemory.paths import get_paths
from padelmemory.services.content import ContentService
from padelmemory.services.telemetry import TelemetryService

from .app import App, GameContext
from .asset_manager import AssetManager
from .scenes.boot import BootScene


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="padelmemory")
    parser.add_argument("--width", type=int, default=980)
    parser.add_argument("--height", type=int, default=900)
    parser.add_argument("--players", type=int, choices=PLAYER_COUNTS, default=DEFAULT_PLAYER_COUNT)
    parser.add_argument(
        "--board", type=int, choices=[o.cards for o in BOARD_OPTIONS], default=DEFAULT_BOARD_CARDS
    )
    parser.add_argument("--userdata", type=Path, default=None, help="Directory for records and telemetry.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Padel Memory")

    clock = pygame.time.Clock()
    paths = get_paths(userdata_dir=args.userdata)

    assets = AssetManager(repo_root=paths.repo_root, assets_dir=paths.assets_dir)
    content = ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir)
    telemetry = TelemetryService(paths.telemetry_file)

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        assets=assets,
        content=content,
        telemetry=telemetry,
        player_count=args.players,
        board_cards=args.board,
    )

    app = App(ctx, BootScene(ctx))
    try:
        return app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())
