# canvas.py

import logging
import math
from abc import ABC, abstractmethod

import numpy as np
import pygame

logger = logging.getLogger("comet_sim")


def _normalize_color(color):
    """
    Accepts a grey level, an RGB tuple or an RGBA tuple and returns an RGBA
    tuple of ints, with every channel clamped to 0-255.
    """
    if isinstance(color, (int, float)):
        color = (color, color, color)
    channels = np.clip(np.nan_to_num(np.asarray(color, dtype=float)), 0, 255)
    if len(channels) == 3:
        channels = np.append(channels, 255)
    return tuple(int(c) for c in channels)


class Canvas(ABC):
    """
    The drawing capability a comet needs.

    Data Contract:
    - Points are (x, y) pairs in screen pixels.
    - Colors are a grey level, (R, G, B) or (R, G, B, A), channels 0-255.
    - Implementations must alpha-blend translucent shapes over what is
      already drawn.
    """

    @abstractmethod
    def fill_circle(self, center, diameter: float, color):
        """Draws a filled circle of the given diameter."""

    @abstractmethod
    def fill_polygon(self, points, color):
        """Draws a filled, closed polygon."""


class PygameCanvas(Canvas):
    """
    Canvas backed by a pygame.Surface.

    pygame.draw ignores per-pixel alpha on the destination, so translucent
    shapes are drawn onto a scratch SRCALPHA surface covering only the shape's
    bounding box, then blitted.
    """
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def fill_circle(self, center, diameter: float, color):
        rgba = _normalize_color(color)
        radius = diameter / 2
        if rgba[3] == 0 or radius < 0.5:
            return

        if rgba[3] == 255:
            pygame.draw.circle(self.surface, rgba, (int(center[0]), int(center[1])), int(round(radius)))
            return

        size = int(math.ceil(radius)) * 2 + 2
        scratch = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(scratch, rgba, (size // 2, size // 2), int(round(radius)))
        self.surface.blit(scratch, (int(center[0]) - size // 2, int(center[1]) - size // 2))

    def fill_polygon(self, points, color):
        rgba = _normalize_color(color)
        if rgba[3] == 0 or len(points) < 3:
            return

        coords = np.asarray(points, dtype=float)
        if not np.all(np.isfinite(coords)):
            logger.warning(f"Skipping polygon with non-finite vertices: {points}")
            return

        if rgba[3] == 255:
            pygame.draw.polygon(self.surface, rgba, [tuple(p) for p in coords])
            return

        min_x, min_y = (int(v) for v in np.floor(coords.min(axis=0)))
        max_x, max_y = (int(v) for v in np.ceil(coords.max(axis=0)))
        width, height = max_x - min_x + 1, max_y - min_y + 1
        if width < 1 or height < 1:
            return

        scratch = pygame.Surface((width, height), pygame.SRCALPHA)
        local = [(x - min_x, y - min_y) for x, y in coords]
        pygame.draw.polygon(scratch, rgba, local)
        self.surface.blit(scratch, (min_x, min_y))
