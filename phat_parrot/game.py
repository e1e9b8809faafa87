"""pygame host: window, tick timer, event pump and the run loop."""

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .assets import AssetLibrary, load_game_assets
from .config import GameConfig
from .input import InputProvider, KeyboardInput
from .loop import GameLoop

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class ParrotGame:
    """High-level game orchestration."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_provider: Optional[InputProvider] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode(self.config.window_size)
        pygame.display.set_caption(self.config.caption)

        self.clock = pygame.time.Clock()
        self.loop = GameLoop.create(
            self.config,
            scheduler=self._schedule_ticks,
            surface=self.screen,
            rng=rng,
        )
        self.input_provider = input_provider or KeyboardInput(self.config.keys)
        self.running = True

        assets = load_game_assets(self.config, AssetLibrary(self.config.asset_dir))
        world = self.loop.world
        assert world is not None
        world.levels.load_backgrounds(assets.backgrounds)
        world.gates.load_images(assets.gate_top, assets.gate_bottom)
        world.flyer.load_frames(assets.flyer_frames)

    @staticmethod
    def _schedule_ticks(interval_ms: int) -> None:
        # set_timer replaces any pending timer for the same event; 0 disables it.
        pygame.time.set_timer(TICK_EVENT, interval_ms)

    def run(self) -> None:
        self.loop.start()
        self.loop.render()
        pygame.display.flip()
        logger.info("Started at %d ms per tick", self.loop.interval_ms)

        while self.running:
            self.clock.tick(self.config.poll_rate)
            events = pygame.event.get()
            self._handle_events(events)

            # Keys and ticks are handled in arrival order so a key is fully
            # dispatched before the tick queued after it.
            ticked = False
            for event in events:
                if event.type == TICK_EVENT:
                    self.loop.tick()
                    ticked = True
                else:
                    self._dispatch(self.input_provider.poll([event]))
            self._dispatch(self.input_provider.poll([]))

            if ticked and not self.loop.paused:
                pygame.display.flip()

        self.loop.stop()
        if hasattr(self.input_provider, "shutdown"):
            self.input_provider.shutdown()  # type: ignore[attr-defined]

        pygame.quit()

    def _dispatch(self, keys: list[int]) -> None:
        for key in keys:
            self.loop.dispatch_key(key)

    def _handle_events(self, events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key in self.config.keys.quit:
                self.running = False
