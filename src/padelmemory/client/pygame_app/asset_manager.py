from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pygame  # type: ignore[import-not-found]


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font
    title: pygame.font.Font


class AssetManager:
    def __init__(self, repo_root: Path, assets_dir: Path) -> None:
        self.repo_root = repo_root
        self.assets_dir = assets_dir
        self._cache: dict[tuple[str, int, int], pygame.Surface] = {}

        pygame.font.init()
        self.fonts = Fonts(
            ui=pygame.font.SysFont(None, 24),
            small=pygame.font.SysFont(None, 18),
            big=pygame.font.SysFont(None, 34),
            title=pygame.font.SysFont(None, 56),
        )

    def _resolve(self, path_str: str) -> Path:
        p = Path(path_str)
        if p.is_absolute():
            return p
        # Allow refs written as "assets/..."
        if path_str.startswith("assets/"):
            return self.repo_root / path_str
        return self.assets_dir / path_str

    def get_image(self, path_str: str, size: tuple[int, int] | None = None) -> pygame.Surface:
        w, h = size if size is not None else (0, 0)
        key = (path_str, w, h)
        if key in self._cache:
            return self._cache[key]

        path = self._resolve(path_str)
        if path.exists():
            try:
                img = pygame.image.load(path.as_posix()).convert_alpha()
                if size is not None:
                    img = pygame.transform.smoothscale(img, size)
                self._cache[key] = img
                return img
            except pygame.error:
                pass

        # Fallback placeholder: one flat colour per ref so pairs still look alike
        fallback = pygame.Surface(size or (64, 64))
        seed = sum(path_str.encode("utf-8"))
        fallback.fill((60 + seed * 37 % 180, 60 + seed * 67 % 180, 60 + seed * 97 % 180))
        self._cache[key] = fallback
        return fallback

    def prefetch(self, refs: Iterable[str], size: tuple[int, int]) -> int:
        """Warm the cache for a new board. Failed loads fall back silently."""
        loaded = 0
        for ref in dict.fromkeys(refs):
            self.get_image(ref, size=size)
            loaded += 1
        return loaded

    def clear(self) -> None:
        self._cache.clear()
