"""Common contract shared by every game object."""

from __future__ import annotations

from typing import Protocol

import pygame


class Entity(Protocol):
    """Interface the game loop drives once per tick."""

    def update(self) -> None:
        """Advance state by one tick."""

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current state onto ``surface``."""

    def receive_key(self, key: int) -> None:
        """React to a raw key code dispatched by the loop."""


class TickClock(Protocol):
    """Anything that can report the current ticks-per-second rate."""

    @property
    def fps(self) -> int:
        ...
