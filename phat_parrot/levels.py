"""Level progression and background selection."""

from __future__ import annotations

import logging

import pygame

from .config import KeyBindings, LevelConfig
from .overlay import MessageOverlay
from .scoreboard import ScoreBoard

logger = logging.getLogger(__name__)


class LevelManager:
    """Advances the level every few gates and picks the matching background."""

    def __init__(
        self,
        config: LevelConfig,
        keys: KeyBindings,
        scoreboard: ScoreBoard,
        overlay: MessageOverlay,
    ) -> None:
        self.cfg = config
        self.keys = keys
        self.scoreboard = scoreboard
        self.overlay = overlay
        self.backgrounds: list[pygame.Surface] = []
        self.level = 1
        self.background_index = 0
        self.leveled_up = False

    @property
    def level_count(self) -> int:
        return len(self.cfg.background_names)

    def load_backgrounds(self, images: list[pygame.Surface]) -> None:
        self.backgrounds = list(images)

    def update(self) -> None:
        score = self.scoreboard.score
        per_level = self.cfg.gates_per_level

        if score > 0 and self.level < self.level_count:
            if not self.leveled_up and score % per_level == 0:
                self.level += 1
                self.background_index += 1
                self.leveled_up = True
                logger.info("Level up: %d at score %d", self.level, score)
                self.overlay.toast(self.cfg.level_text.format(level=self.level), self.cfg.toast_seconds)
            elif score % per_level == 1:
                self.leveled_up = False
        elif score == 0 or self.background_index >= self.level_count:
            self.background_index = 0

    def draw(self, surface: pygame.Surface) -> None:
        if not self.backgrounds:
            return
        surface.blit(self.backgrounds[self.background_index % len(self.backgrounds)], (0, 0))

    def receive_key(self, key: int) -> None:
        if key in self.keys.reset:
            self.level = 1
            self.background_index = 0
            self.leveled_up = False
