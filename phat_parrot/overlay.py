"""Start prompt, level-up toasts and the death prompt."""

from __future__ import annotations

import pygame

from .config import KeyBindings, OverlayConfig
from .entity import TickClock
from .flyer import Flyer
from .text import draw_centred_text, load_font

NO_COUNTDOWN = -1


class MessageOverlay:
    """Centre-screen message that is either sticky or counts down and hides."""

    def __init__(self, config: OverlayConfig, keys: KeyBindings, flyer: Flyer, clock: TickClock) -> None:
        self.cfg = config
        self.keys = keys
        self.flyer = flyer
        self.clock = clock
        self.text = config.start_text
        self.visible = True
        self.countdown = NO_COUNTDOWN

    def toast(self, message: str, seconds: int) -> None:
        """Show ``message`` for ``seconds`` worth of ticks at the current speed."""
        self.countdown = seconds * self.clock.fps
        self.text = message
        self.visible = True

    def update(self) -> None:
        if not self.flyer.alive:
            self.text = self.cfg.end_text
            self.visible = True
        elif self.countdown > 0:
            self.countdown -= 1
        elif self.countdown == 0:
            self.countdown = NO_COUNTDOWN
            self.visible = False

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        draw_centred_text(
            surface,
            load_font(self.cfg.font_size),
            self.text,
            self.cfg.top,
            self.cfg.fill_color,
            self.cfg.outline_color,
        )

    def receive_key(self, key: int) -> None:
        if key in self.keys.flap and self.countdown < 0:
            self.visible = False
        elif key in self.keys.reset:
            self.countdown = NO_COUNTDOWN
            self.text = self.cfg.start_text
            self.visible = True
