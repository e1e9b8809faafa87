"""Score keeping and the heads-up status line."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import pygame

from .config import HudConfig, KeyBindings
from .entity import TickClock
from .text import draw_centred_text, load_font

if TYPE_CHECKING:
    from .levels import LevelManager

logger = logging.getLogger(__name__)


class ScoreBoard:
    """Tracks score and session high score, and draws the status line."""

    def __init__(self, config: HudConfig, keys: KeyBindings, clock: TickClock) -> None:
        self.cfg = config
        self.keys = keys
        self.clock = clock
        self.levels: Optional[LevelManager] = None
        self.score = 0
        self.high_score = 0

    def status_text(self) -> str:
        level = self.levels.level if self.levels is not None else 1
        return f"FPS: {self.clock.fps} Lvl: {level} Score: {self.score} HS: {self.high_score}"

    def update(self) -> None:
        # Scoring happens in the gate field.
        pass

    def draw(self, surface: pygame.Surface) -> None:
        draw_centred_text(
            surface,
            load_font(self.cfg.font_size),
            self.status_text(),
            self.cfg.top,
            self.cfg.fill_color,
            self.cfg.outline_color,
        )

    def receive_key(self, key: int) -> None:
        if key in self.keys.reset:
            if self.score > self.high_score:
                logger.info("New high score %d (was %d)", self.score, self.high_score)
                self.high_score = self.score
            self.score = 0
