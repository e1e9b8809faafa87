"""The player-controlled parrot."""

from __future__ import annotations

import logging

import pygame

from .config import FlyerConfig, KeyBindings

logger = logging.getLogger(__name__)

WING_DOWN = 0
WING_UP = 1
DEAD = 2


class Flyer:
    """Handles the parrot's vertical physics, flap animation and life state.

    The parrot starts out without dimensions; it stays inert until
    :meth:`load_frames` supplies its images and it can centre itself.
    """

    def __init__(self, config: FlyerConfig, keys: KeyBindings, screen_size: tuple[int, int]) -> None:
        self.cfg = config
        self.keys = keys
        self.screen_width, self.screen_height = screen_size
        self.frames: list[pygame.Surface] = []
        self.x = 0.0
        self.y = 0.0
        self.vy = 0
        self.w = 0
        self.h = 0
        self.frame = WING_DOWN
        self.alive = True
        self.immune = False
        self.launched = False

    @property
    def ready(self) -> bool:
        return bool(self.frames)

    @property
    def floor(self) -> float:
        return self.screen_height - self.h

    def load_frames(self, frames: list[pygame.Surface]) -> None:
        """Completion signal from the asset loader: size from the first frame and centre."""
        if not frames:
            return
        self.frames = list(frames)
        self.w, self.h = self.frames[0].get_size()
        self._centre()

    def _centre(self) -> None:
        self.x = self.screen_width / 2 - self.w / 2
        self.y = self.screen_height / 2 - self.h / 2

    def update(self) -> None:
        if not self.ready:
            return

        if self.alive:
            self.frame = WING_UP if self.frame == WING_DOWN else WING_DOWN

        if self.launched:
            self.y += self.vy
            self.vy += self.cfg.gravity

        if self.y >= self.floor:
            self.y = self.floor
            self.vy = 0
        elif self.y < 0:
            self.y = 0
            self.vy = max(0, self.vy)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.ready:
            return
        image = self.frames[min(self.frame, len(self.frames) - 1)]
        surface.blit(image, (int(self.x), int(self.y)))

    def receive_key(self, key: int) -> None:
        if key in self.keys.flap and self.y > 0 and self.alive:
            self.launched = True
            self.vy = self.cfg.flap_velocity
        elif key in self.keys.immune:
            self.immune = not self.immune
            logger.debug("Immunity %s", "on" if self.immune else "off")
        elif key in self.keys.reset:
            self.reset()

    def reset(self) -> None:
        self.frame = WING_DOWN
        self.alive = True
        self.launched = False
        self.vy = 0
        if self.ready:
            self._centre()

    def hit(self) -> None:
        """Called by the gate field when the parrot flies into a gate."""
        self.alive = False
        self.frame = DEAD
        self.vy = 0

    def box(self) -> tuple[float, float, float, float]:
        return self.x, self.y, self.w, self.h

