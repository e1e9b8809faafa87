"""Fixed-interval game loop: tick, pause, speed control and key dispatch."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import pygame

from .config import GameConfig
from .entity import Entity
from .flyer import Flyer
from .gates import GateField
from .levels import LevelManager
from .overlay import MessageOverlay
from .scoreboard import ScoreBoard

logger = logging.getLogger(__name__)

# Called with the new interval in milliseconds; 0 cancels the recurring tick.
Scheduler = Callable[[int], None]


@dataclass
class GameWorld:
    """Typed handles to every entity, in update and draw order."""

    levels: LevelManager
    flyer: Flyer
    gates: GateField
    scoreboard: ScoreBoard
    overlay: MessageOverlay

    def entities(self) -> list[Entity]:
        return [self.levels, self.flyer, self.gates, self.scoreboard, self.overlay]


def _no_schedule(interval_ms: int) -> None:
    return None


class GameLoop:
    """Owns the entities and drives them from a single recurring timer."""

    def __init__(
        self,
        config: GameConfig,
        entities: Sequence[Entity] = (),
        scheduler: Optional[Scheduler] = None,
        surface: Optional[pygame.Surface] = None,
    ) -> None:
        self.config = config
        self.cfg = config.loop
        self.keys = config.keys
        self.entities: list[Entity] = list(entities)
        self.scheduler = scheduler or _no_schedule
        self.surface = surface
        self.paused = False
        self.interval_ms = self._clamp(self.cfg.initial_interval_ms)
        self.running = False
        self.world: Optional[GameWorld] = None

    @property
    def fps(self) -> int:
        return 1000 // self.interval_ms

    def start(self) -> None:
        self.running = True
        self.scheduler(self.interval_ms)

    def stop(self) -> None:
        self.running = False
        self.scheduler(0)

    def tick(self) -> None:
        if self.paused:
            return
        for entity in self.entities:
            entity.update()
        self.render()

    def render(self) -> None:
        if self.surface is None:
            return
        self.surface.fill((0, 0, 0))
        for entity in self.entities:
            entity.draw(self.surface)

    def _clamp(self, interval_ms: int) -> int:
        step = self.cfg.interval_step_ms
        snapped = self.cfg.min_interval_ms + round((interval_ms - self.cfg.min_interval_ms) / step) * step
        return max(self.cfg.min_interval_ms, min(self.cfg.max_interval_ms, snapped))

    def set_speed(self, interval_ms: int) -> None:
        """Clamp to the configured bounds and grid, then replace the running timer."""
        self.interval_ms = self._clamp(interval_ms)
        logger.debug("Tick interval %d ms (%d fps)", self.interval_ms, self.fps)
        if self.running:
            self.scheduler(self.interval_ms)

    def speed_up(self) -> None:
        if self.interval_ms > self.cfg.min_interval_ms:
            self.set_speed(self.interval_ms - self.cfg.interval_step_ms)

    def slow_down(self) -> None:
        if self.interval_ms < self.cfg.max_interval_ms:
            self.set_speed(self.interval_ms + self.cfg.interval_step_ms)

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        logger.debug("Paused" if self.paused else "Resumed")

    def reset(self) -> None:
        """Loop-level part of a reset; entities restore themselves from the reset key."""
        logger.debug("Reset")
        self.paused = False
        self.set_speed(self.cfg.initial_interval_ms)

    def dispatch_key(self, key: int) -> None:
        if key in self.keys.pause:
            self.toggle_pause()
        elif key in self.keys.slow_down:
            self.slow_down()
        elif key in self.keys.speed_up:
            self.speed_up()
        elif key in self.keys.reset:
            self.reset()

        for entity in self.entities:
            entity.receive_key(key)

    @classmethod
    def create(
        cls,
        config: GameConfig,
        scheduler: Optional[Scheduler] = None,
        surface: Optional[pygame.Surface] = None,
        rng: Optional[random.Random] = None,
    ) -> "GameLoop":
        """Build the five entities, hand each its collaborators, and register them in draw order."""
        loop = cls(config, scheduler=scheduler, surface=surface)
        keys = config.keys
        flyer = Flyer(config.flyer, keys, config.window_size)
        scoreboard = ScoreBoard(config.hud, keys, loop)
        overlay = MessageOverlay(config.overlay, keys, flyer, loop)
        levels = LevelManager(config.levels, keys, scoreboard, overlay)
        scoreboard.levels = levels
        gates = GateField(config.gates, keys, config.window_size, flyer, scoreboard, levels, rng=rng)

        loop.world = GameWorld(levels, flyer, gates, scoreboard, overlay)
        loop.entities = loop.world.entities()
        return loop
