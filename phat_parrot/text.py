"""Font loading and outlined text rendering shared by the HUD and the overlay."""

from __future__ import annotations

import pygame

_FONT_CACHE: dict[int, pygame.font.Font] = {}


def load_font(size: int) -> pygame.font.Font:
    # Fonts do not survive pygame.quit(), so a fresh font module means a fresh cache.
    if not pygame.font.get_init():
        _FONT_CACHE.clear()
        pygame.font.init()
    font = _FONT_CACHE.get(size)
    if font is None:
        font = pygame.font.Font(None, size)
        _FONT_CACHE[size] = font
    return font


def draw_centred_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    top: int,
    fill: tuple[int, int, int],
    outline: tuple[int, int, int],
) -> pygame.Rect:
    """Blit ``text`` horizontally centred at ``top`` with a one pixel outline."""
    face = font.render(text, True, fill)
    edge = font.render(text, True, outline)
    width = face.get_width()
    x = surface.get_width() // 2 - width // 2
    for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        surface.blit(edge, (x + dx, top + dy))
    return surface.blit(face, (x, top))
