"""Shared helpers for building a headless game world in tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random  # noqa: E402

import pygame  # noqa: E402

from phat_parrot.config import GameConfig  # noqa: E402
from phat_parrot.loop import GameLoop  # noqa: E402

FLYER_SIZE = (40, 30)


class RecordingScheduler:
    """Stands in for the pygame timer; remembers every interval requested."""

    def __init__(self):
        self.calls = []

    def __call__(self, interval_ms):
        self.calls.append(interval_ms)


def make_frames(size=FLYER_SIZE):
    return [pygame.Surface(size) for _ in range(3)]


def build_loop(config=None, seed=1234, with_frames=True, surface=None):
    """Return (loop, scheduler) with every entity wired and the flyer sized."""
    scheduler = RecordingScheduler()
    loop = GameLoop.create(
        config or GameConfig(),
        scheduler=scheduler,
        surface=surface,
        rng=random.Random(seed),
    )
    if with_frames:
        loop.world.flyer.load_frames(make_frames())
    return loop, scheduler
