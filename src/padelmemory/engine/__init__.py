"""Headless game-state engine for Padel Memory.

IMPORTANT: This package must never import pygame.
"""

from .actions import FlipAction, ResolveAction
from .controller import GameController
from .deck import InsufficientAssets, build_deck
from .outcome import GameOutcome, compute_winners, is_complete
from .scoring import points_for
from .session import GameConfig, Session, StepResult, new_session, request_flip, resolve_selection
from .types import BOARD_OPTIONS, BoardOption, Card, ImageCatalog

__all__ = [
    "BOARD_OPTIONS",
    "BoardOption",
    "Card",
    "FlipAction",
    "GameConfig",
    "GameController",
    "GameOutcome",
    "ImageCatalog",
    "InsufficientAssets",
    "ResolveAction",
    "Session",
    "StepResult",
    "build_deck",
    "compute_winners",
    "is_complete",
    "new_session",
    "points_for",
    "request_flip",
    "resolve_selection",
]
