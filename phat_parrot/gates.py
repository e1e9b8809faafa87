"""The rolling field of gate obstacles."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

import pygame

from .config import GateConfig, KeyBindings
from .flyer import Flyer
from .geometry import boxes_overlap
from .levels import LevelManager
from .scoreboard import ScoreBoard

logger = logging.getLogger(__name__)


@dataclass
class Gate:
    """A top/bottom pair of obstacles with a gap between them."""

    x: float = 0.0
    vx: int = 0
    width: int = 0
    top_height: int = 0
    bottom_height: int = 0
    gap: int = 0
    scored: bool = False

    @property
    def top_y(self) -> int:
        return 0

    @property
    def bottom_y(self) -> int:
        return self.top_height + self.gap

    def top_box(self) -> tuple[float, float, float, float]:
        return self.x, self.top_y, self.width, self.top_height

    def bottom_box(self) -> tuple[float, float, float, float]:
        return self.x, self.bottom_y, self.width, self.bottom_height


class GateField:
    """Moves, recycles and scores gates, and detects collisions with the flyer."""

    def __init__(
        self,
        config: GateConfig,
        keys: KeyBindings,
        screen_size: tuple[int, int],
        flyer: Flyer,
        scoreboard: ScoreBoard,
        levels: LevelManager,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.cfg = config
        self.keys = keys
        self.screen_width, self.screen_height = screen_size
        self.flyer = flyer
        self.scoreboard = scoreboard
        self.levels = levels
        self.rng = rng or random.Random()
        self.top_image: Optional[pygame.Surface] = None
        self.bottom_image: Optional[pygame.Surface] = None
        self.collision = False
        self.started = False
        self.gap_size = config.base_gap
        self.gates = [Gate() for _ in range(config.count)]
        self._lay_out()

    @property
    def midline(self) -> float:
        return self.screen_width / 2

    def load_images(self, top: pygame.Surface, bottom: pygame.Surface) -> None:
        self.top_image = top
        self.bottom_image = bottom

    def gap_for_level(self, level: int) -> int:
        return max(self.cfg.min_gap, int(self.cfg.base_gap - level * self.cfg.gap_shrink_per_level))

    def update(self) -> None:
        self.gap_size = self.gap_for_level(self.levels.level)

        for gate in self.gates:
            if not self.collision and gate.x < self.midline and not gate.scored:
                self.scoreboard.score += 1
                gate.scored = True

            if self.started:
                gate.x -= gate.vx

            if self._in_strike_zone(gate) and self._touches_flyer(gate):
                self.collision = True
                logger.info("Collision at score %d", self.scoreboard.score)
                self.flyer.hit()

        if self.collision:
            for gate in self.gates:
                if self.started:
                    gate.x += gate.vx
                gate.vx = 0

        for gate in self.gates:
            if gate.x <= -gate.width:
                self._recycle(gate)

    def _in_strike_zone(self, gate: Gate) -> bool:
        if self.flyer.immune or self.collision:
            return False
        half = self.flyer.w / 2
        return self.midline - half - gate.width < gate.x < self.midline + half

    def _touches_flyer(self, gate: Gate) -> bool:
        flyer_box = self.flyer.box()
        return boxes_overlap(*flyer_box, *gate.top_box()) or boxes_overlap(*flyer_box, *gate.bottom_box())

    def _recycle(self, gate: Gate) -> None:
        others = [other.x for other in self.gates if other is not gate]
        rightmost = max(others, default=self.screen_width - self.cfg.interval)
        gate.x = max(self.screen_width, rightmost + self.cfg.interval)
        gate.scored = False
        self._randomize(gate)

    def _randomize(self, gate: Gate) -> None:
        """Split the column into a random top height and the remaining bottom height."""
        low = self.cfg.min_height + 1
        gap = max(0, min(self.gap_size, self.screen_height - low))
        gate.gap = gap
        gate.top_height = self.rng.randint(low, max(low, self.screen_height - gap))
        gate.bottom_height = self.screen_height - gate.top_height - gap

    def _lay_out(self) -> None:
        for index, gate in enumerate(self.gates):
            gate.width = self.cfg.width
            gate.x = self.screen_width + index * self.cfg.interval
            gate.vx = self.cfg.velocity
            gate.scored = False
            self._randomize(gate)

    def draw(self, surface: pygame.Surface) -> None:
        if self.top_image is None or self.bottom_image is None:
            return
        for gate in self.gates:
            x = int(gate.x)
            surface.blit(self.top_image, (x, gate.top_height - self.top_image.get_height()))
            surface.blit(self.bottom_image, (x, gate.bottom_y))

    def receive_key(self, key: int) -> None:
        if key in self.keys.reset:
            self.collision = False
            self.started = False
            self.gap_size = self.cfg.base_gap
            self._lay_out()
        elif key in self.keys.flap:
            self.started = True
