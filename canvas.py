# canvas.py
import logging

import numpy as np
import pygame

from config import (ALIASED_ON_DARK, ALIASED_ON_LIGHT, BACKGROUND_DARK,
                    BACKGROUND_LIGHT)

logger = logging.getLogger(__name__)


class SampleCanvas:
    """Software renderer: draws pixel samples into a float RGB buffer.

    Grid y grows upwards like GL window coordinates, so the buffer is
    flipped when exported. Samples outside the grid are dropped here;
    the rasterizers never clip."""

    def __init__(self, grid, background=BACKGROUND_LIGHT):
        self.grid = grid
        self.background = tuple(background)
        self.pixels = np.empty((grid.height, grid.width, 3), dtype=np.float32)
        self.clear()

    def clear(self):
        self.pixels[:, :] = self.background

    def _inside(self, samples):
        kept = [s for s in samples if self.grid.contains(s.px, s.py)]
        dropped = len(samples) - len(kept)
        if dropped:
            logger.debug("discarded %d samples outside %dx%d grid",
                         dropped, self.grid.width, self.grid.height)
        return kept

    def draw_aliased(self, samples, color=ALIASED_ON_LIGHT):
        for s in self._inside(samples):
            self.pixels[s.py, s.px] = color

    def draw_antialiased(self, samples):
        # overlapping samples blend in emission order, nothing is deduplicated
        for s in self._inside(samples):
            a = s.coverage
            dst = self.pixels[s.py, s.px]
            self.pixels[s.py, s.px] = np.asarray(s.color, dtype=np.float32) * a + dst * (1.0 - a)

    def to_rgb8(self):
        """(height, width, 3) uint8 image with row 0 at the top."""
        rgb = np.clip(self.pixels[::-1] * 255.0 + 0.5, 0, 255)
        return rgb.astype(np.uint8)

    def save(self, path):
        return save_png(self.to_rgb8(), path)


def save_png(rgb, path):
    # surfarray wants (width, height, 3)
    surf = pygame.surfarray.make_surface(np.ascontiguousarray(rgb.transpose(1, 0, 2)))
    pygame.image.save(surf, str(path))
    logger.info("wrote %dx%d image to %s", rgb.shape[1], rgb.shape[0], path)
    return path


def render_panels(aliased, antialiased, grid):
    """Compose the 2x2 comparison: aliased on the left, Wu on the right,
    light background on top, dark background below."""
    cells = []
    for background, aliased_color in ((BACKGROUND_LIGHT, ALIASED_ON_LIGHT),
                                      (BACKGROUND_DARK, ALIASED_ON_DARK)):
        left = SampleCanvas(grid, background)
        left.draw_aliased(aliased, aliased_color)
        right = SampleCanvas(grid, background)
        right.draw_antialiased(antialiased)
        cells.append(np.concatenate([left.to_rgb8(), right.to_rgb8()], axis=1))
    return np.concatenate(cells, axis=0)
