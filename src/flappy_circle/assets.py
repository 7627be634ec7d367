"""
assets.py: Image and font loading by path.

Missing files are not fatal: a drawn placeholder of the same role is used
instead, so the game also runs from a bare checkout.
"""

import os
from typing import Dict, Optional, Tuple

import pygame

from .constants import (
    ASSETS_DIR, BACKGROUND_IMAGE, CLEAR_COLOR, FONT_FILE, FONT_SIZE, GROUND_IMAGE,
    PIPE_IMAGE, PLAYER_FRAMES, PLAYER_IMAGE
)

PLACEHOLDER_SIZE = 64


def _placeholder(name: str) -> pygame.Surface:
    """Draws a stand-in surface for a known image name."""
    size = PLACEHOLDER_SIZE

    if name == PLAYER_IMAGE:
        # Horizontal strip, one circle per animation frame
        sheet = pygame.Surface((size * PLAYER_FRAMES, size), pygame.SRCALPHA)
        for i in range(PLAYER_FRAMES):
            shade = 255 - 30 * i
            center = (i * size + size // 2, size // 2)
            pygame.draw.circle(sheet, (255, shade, 0), center, size // 2)
            pygame.draw.circle(sheet, (0, 0, 0), (center[0] + 10, center[1] - 10 + 4 * i), 5)
        return sheet

    surface = pygame.Surface((size, size), pygame.SRCALPHA)
    if name == GROUND_IMAGE:
        surface.fill((222, 184, 135))
        pygame.draw.rect(surface, (34, 139, 34), (0, 0, size, size // 4))
    elif name == PIPE_IMAGE:
        surface.fill((0, 150, 0))
        pygame.draw.rect(surface, (0, 100, 0), (0, 0, size, size), 4)
    elif name == BACKGROUND_IMAGE:
        surface.fill(CLEAR_COLOR)
        pygame.draw.circle(surface, (255, 255, 255), (size // 3, size // 3), size // 6)
    else:
        surface.fill((255, 0, 255))
    return surface


class AssetServer:
    """Loads images once and hands out scaled frames of them."""

    def __init__(self, assets_dir: str = ASSETS_DIR, frames: Optional[Dict[str, int]] = None):
        self.assets_dir = assets_dir
        self.frames = frames if frames is not None else {PLAYER_IMAGE: PLAYER_FRAMES}
        self._images: Dict[str, pygame.Surface] = {}
        self._scaled: Dict[Tuple, pygame.Surface] = {}
        self._fonts: Dict[int, pygame.font.Font] = {}

    def path(self, name: str) -> str:
        return os.path.join(self.assets_dir, name)

    def image(self, name: str) -> pygame.Surface:
        if name not in self._images:
            path = self.path(name)
            try:
                self._images[name] = pygame.image.load(path)
            except (FileNotFoundError, pygame.error) as e:
                print(f"Couldn't load image {path}: {e}. Using placeholder.")
                self._images[name] = _placeholder(name)
        return self._images[name]

    def frame(self, name: str, index: int, size: Tuple[int, int], flip_y: bool = False) -> pygame.Surface:
        """Returns frame `index` of an image strip, scaled to size."""
        key = (name, index, size, flip_y)
        if key not in self._scaled:
            sheet = self.image(name)
            count = self.frames.get(name, 1)
            frame_w = sheet.get_width() // count
            rect = pygame.Rect((index % count) * frame_w, 0, frame_w, sheet.get_height())
            surface = pygame.transform.scale(sheet.subsurface(rect), size)
            if flip_y:
                surface = pygame.transform.flip(surface, False, True)
            self._scaled[key] = surface
        return self._scaled[key]

    def font(self, size: int = FONT_SIZE) -> pygame.font.Font:
        """The assets font at `size`, or pygame's default font when it is missing."""
        if size not in self._fonts:
            path = self.path(FONT_FILE)
            self._fonts[size] = pygame.font.Font(path if os.path.exists(path) else None, size)
        return self._fonts[size]
