"""Phat Parrot side-scrolling arcade game package."""

from .config import GameConfig, KeyBindings, SocketInputConfig
from .game import ParrotGame
from .input import KeyboardInput, SocketInput
from .loop import GameLoop, GameWorld

__all__ = [
    "ParrotGame",
    "GameLoop",
    "GameWorld",
    "GameConfig",
    "KeyBindings",
    "SocketInputConfig",
    "KeyboardInput",
    "SocketInput",
]
