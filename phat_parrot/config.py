"""Configuration data structures for Phat Parrot."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pygame


@dataclass(frozen=True)
class LoopConfig:
    """Tick interval bounds for the fixed-rate game loop (milliseconds)."""

    initial_interval_ms: int = 80
    min_interval_ms: int = 20
    max_interval_ms: int = 140
    interval_step_ms: int = 20


@dataclass(frozen=True)
class FlyerConfig:
    """Parameters for the player-controlled parrot."""

    flap_velocity: int = -10  # px/tick applied on flap
    gravity: int = 1  # px/tick^2
    frame_names: tuple[str, str, str] = ("p1.png", "p2.png", "p3.png")  # wing-down, wing-up, dead
    placeholder_size: tuple[int, int] = (48, 36)
    body_color: tuple[int, int, int] = (60, 170, 70)
    wing_color: tuple[int, int, int] = (230, 200, 40)
    dead_color: tuple[int, int, int] = (130, 130, 130)


@dataclass(frozen=True)
class GateConfig:
    """Parameters governing the rolling gate obstacles."""

    count: int = 4
    interval: int = 200  # px between consecutive gates
    width: int = 36
    velocity: int = 5  # px/tick
    min_height: int = 50  # minimum top gate height
    base_gap: int = 150
    gap_shrink_per_level: int = 5
    min_gap: int = 60
    top_image: str = "gateTop.png"
    bottom_image: str = "gateBottom.png"
    color: tuple[int, int, int] = (70, 140, 60)
    edge_color: tuple[int, int, int] = (30, 70, 30)


@dataclass(frozen=True)
class LevelConfig:
    """Level progression and backgrounds."""

    gates_per_level: int = 5
    toast_seconds: int = 3
    level_text: str = "Level {level}"
    background_names: tuple[str, ...] = ("jungle.png", "inca.png", "desert.png", "peru.png")
    background_colors: tuple[tuple[int, int, int], ...] = (
        (40, 110, 60),
        (150, 120, 80),
        (220, 190, 120),
        (120, 90, 130),
    )


@dataclass(frozen=True)
class HudConfig:
    """Heads-up status line appearance."""

    font_size: int = 36
    top: int = 5
    fill_color: tuple[int, int, int] = (255, 255, 255)
    outline_color: tuple[int, int, int] = (0, 0, 0)


@dataclass(frozen=True)
class OverlayConfig:
    """Transient message overlay text and appearance."""

    start_text: str = "Press F to fly"
    end_text: str = "Press R to restart"
    font_size: int = 36
    top: int = 125
    fill_color: tuple[int, int, int] = (220, 30, 30)
    outline_color: tuple[int, int, int] = (0, 0, 0)


@dataclass(frozen=True)
class KeyBindings:
    """pygame key codes for each command; any code in a tuple triggers it."""

    pause: tuple[int, ...] = (pygame.K_p,)
    slow_down: tuple[int, ...] = (pygame.K_MINUS, pygame.K_KP_MINUS)
    speed_up: tuple[int, ...] = (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS)
    reset: tuple[int, ...] = (pygame.K_r,)
    flap: tuple[int, ...] = (pygame.K_f,)
    immune: tuple[int, ...] = (pygame.K_i,)
    quit: tuple[int, ...] = (pygame.K_ESCAPE,)

    def commands(self) -> dict[str, tuple[int, ...]]:
        """Command name to key codes, excluding host-only keys."""
        return {
            "pause": self.pause,
            "slow_down": self.slow_down,
            "speed_up": self.speed_up,
            "reset": self.reset,
            "flap": self.flap,
            "immune": self.immune,
        }


@dataclass(frozen=True)
class SocketInputConfig:
    """JSON-over-TCP command input settings."""

    host: str = "127.0.0.1"
    port: int = 4790
    backlog: int = 1
    read_timeout: float = 1.0


@dataclass(frozen=True)
class GameConfig:
    """High-level configuration of the game."""

    window_size: tuple[int, int] = (600, 480)
    poll_rate: int = 120  # event pump iterations per second; ticks come from the loop timer
    caption: str = "Phat Parrot"
    asset_dir: Optional[Path] = None
    loop: LoopConfig = field(default_factory=LoopConfig)
    flyer: FlyerConfig = field(default_factory=FlyerConfig)
    gates: GateConfig = field(default_factory=GateConfig)
    levels: LevelConfig = field(default_factory=LevelConfig)
    hud: HudConfig = field(default_factory=HudConfig)
    overlay: OverlayConfig = field(default_factory=OverlayConfig)
    keys: KeyBindings = field(default_factory=KeyBindings)
    socket_input: SocketInputConfig = field(default_factory=SocketInputConfig)
