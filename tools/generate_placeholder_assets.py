from __future__ import annotations

import json
import os
from pathlib import Path

# Allow headless generation (CI, terminals without a display)
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # type: ignore[import-not-found]


def _repo_root() -> Path:
    # tools/generate_placeholder_assets.py -> parents: [tools, repo_root]
    return Path(__file__).resolve().parents[1]


# One tint per image set, so a set change is obvious on screen.
SET_COLORS: tuple[tuple[int, int, int], ...] = (
    (60, 110, 170),
    (170, 90, 60),
    (70, 150, 90),
    (140, 80, 160),
    (160, 140, 50),
)

CARD_SIZE = (256, 256)


def generate_all() -> None:
    root = _repo_root()
    data_dir = root / "src" / "padelmemory" / "data"
    assets_dir = root / "assets"

    content = json.loads((data_dir / "memory.json").read_text(encoding="utf-8"))
    asset_root = assets_dir / content["asset_root"]
    file_names = [n.strip() for n in content["file_names"] if isinstance(n, str) and n.strip()]
    joker = str(content.get("joker_keyword", "")).lower()

    pygame.init()
    pygame.font.init()
    font = pygame.font.SysFont(None, 40)
    font_small = pygame.font.SysFont(None, 24)

    asset_root.mkdir(parents=True, exist_ok=True)
    _make_back(asset_root / content["back_image"], font)

    for set_index in range(1, int(content["image_set_count"]) + 1):
        set_dir = asset_root / f"set{set_index}"
        set_dir.mkdir(parents=True, exist_ok=True)
        color = SET_COLORS[(set_index - 1) % len(SET_COLORS)]
        for name in file_names:
            is_joker = bool(joker) and joker in name.lower()
            _make_front(set_dir / name, name, set_index, color, is_joker, font, font_small)

    pygame.quit()
    print(f"Generated placeholder assets under {asset_root}")


def _make_back(path: Path, font: pygame.font.Font) -> None:
    w, h = CARD_SIZE
    surf = pygame.Surface(CARD_SIZE)
    surf.fill((17, 24, 39))
    for i in range(0, w + h, 24):
        pygame.draw.line(surf, (30, 42, 66), (i, 0), (i - h, h), 6)
    pygame.draw.circle(surf, (214, 232, 60), (w // 2, h // 2), 46)
    pygame.draw.rect(surf, (255, 204, 0), pygame.Rect(6, 6, w - 12, h - 12), width=4, border_radius=14)
    txt = font.render("?", True, (17, 24, 39))
    surf.blit(txt, txt.get_rect(center=(w // 2, h // 2)).topleft)
    pygame.image.save(surf, path.as_posix())


def _make_front(
    path: Path,
    name: str,
    set_index: int,
    color: tuple[int, int, int],
    is_joker: bool,
    font: pygame.font.Font,
    font_small: pygame.font.Font,
) -> None:
    w, h = CARD_SIZE
    surf = pygame.Surface(CARD_SIZE)
    surf.fill((20, 20, 20))
    fill = (200, 160, 30) if is_joker else color
    pygame.draw.rect(surf, fill, pygame.Rect(8, 8, w - 16, h - 16), border_radius=14)

    label = Path(name).stem.upper()
    txt = font.render(label, True, (245, 245, 245))
    surf.blit(txt, txt.get_rect(center=(w // 2, h // 2)).topleft)

    meta = f"SET {set_index}" + ("  |  JOKER x3" if is_joker else "")
    meta_s = font_small.render(meta, True, (235, 235, 235))
    surf.blit(meta_s, (18, h - 36))
    pygame.image.save(surf, path.as_posix())


if __name__ == "__main__":
    generate_all()
