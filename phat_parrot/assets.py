"""Image loading with drawn fallbacks for missing files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pygame

from .config import FlyerConfig, GameConfig, GateConfig, LevelConfig

logger = logging.getLogger(__name__)

DEFAULT_ASSET_ROOT = Path(__file__).resolve().parent.parent / "assets"


@dataclass
class GameAssets:
    """Ready-to-draw images for every entity."""

    flyer_frames: list[pygame.Surface]
    gate_top: pygame.Surface
    gate_bottom: pygame.Surface
    backgrounds: list[pygame.Surface]


class AssetLibrary:
    """Loads images by filename from an asset directory, caching each surface."""

    def __init__(self, root: Optional[Path] = None) -> None:
        if root is not None and not root.is_dir():
            raise NotADirectoryError(f"Asset directory not found at {root}")
        self.root = root or DEFAULT_ASSET_ROOT
        self._cache: dict[str, Optional[pygame.Surface]] = {}

    def load(self, filename: str) -> Optional[pygame.Surface]:
        """Return the image for ``filename`` or None when it is not on disk."""
        if filename in self._cache:
            return self._cache[filename]
        path = self.root / filename
        surface: Optional[pygame.Surface] = None
        if path.exists():
            surface = pygame.image.load(str(path))
            if pygame.display.get_surface() is not None:
                surface = surface.convert_alpha()
        else:
            logger.warning("Missing asset %s, drawing a placeholder", path)
        self._cache[filename] = surface
        return surface

    def flyer_frames(self, cfg: FlyerConfig) -> list[pygame.Surface]:
        frames: list[pygame.Surface] = []
        for index, name in enumerate(cfg.frame_names):
            frames.append(self.load(name) or _flyer_placeholder(cfg, index))
        return frames

    def gate_images(self, cfg: GateConfig, height: int) -> tuple[pygame.Surface, pygame.Surface]:
        top = self.load(cfg.top_image) or _gate_placeholder(cfg, height, cap_at_bottom=True)
        bottom = self.load(cfg.bottom_image) or _gate_placeholder(cfg, height, cap_at_bottom=False)
        return top, bottom

    def backgrounds(self, cfg: LevelConfig, size: tuple[int, int]) -> list[pygame.Surface]:
        images: list[pygame.Surface] = []
        for index, name in enumerate(cfg.background_names):
            image = self.load(name)
            if image is None:
                color = cfg.background_colors[index % len(cfg.background_colors)]
                image = pygame.Surface(size)
                image.fill(color)
            images.append(image)
        return images


def load_game_assets(config: GameConfig, library: AssetLibrary) -> GameAssets:
    """Load every image the game needs."""
    width, height = config.window_size
    top, bottom = library.gate_images(config.gates, height)
    return GameAssets(
        flyer_frames=library.flyer_frames(config.flyer),
        gate_top=top,
        gate_bottom=bottom,
        backgrounds=library.backgrounds(config.levels, (width, height)),
    )


def _flyer_placeholder(cfg: FlyerConfig, frame: int) -> pygame.Surface:
    width, height = cfg.placeholder_size
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    body = cfg.dead_color if frame == 2 else cfg.body_color
    pygame.draw.ellipse(surface, body, pygame.Rect(0, 0, width, height))
    wing = pygame.Rect(0, 0, width // 2, height // 3)
    if frame == 0:
        wing.midtop = (width // 2, height // 2)
    elif frame == 1:
        wing.midbottom = (width // 2, height // 2)
    else:
        wing.center = (width // 2, height // 2)
    pygame.draw.ellipse(surface, cfg.wing_color, wing)
    eye = (width * 3 // 4, height // 3)
    pygame.draw.circle(surface, (0, 0, 0), eye, max(1, height // 10))
    return surface


def _gate_placeholder(cfg: GateConfig, height: int, cap_at_bottom: bool) -> pygame.Surface:
    surface = pygame.Surface((cfg.width, height), pygame.SRCALPHA)
    surface.fill(cfg.color)
    cap = pygame.Rect(0, 0, cfg.width, 12)
    if cap_at_bottom:
        cap.bottom = height
    pygame.draw.rect(surface, cfg.edge_color, cap)
    pygame.draw.rect(surface, cfg.edge_color, surface.get_rect(), 2)
    return surface
