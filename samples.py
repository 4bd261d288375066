# samples.py
from dataclasses import dataclass
from typing import NamedTuple, Tuple

RGB = Tuple[float, float, float]


class Point2D(NamedTuple):
    x: float
    y: float


class Line(NamedTuple):
    x0: float
    y0: float
    x1: float
    y1: float


class PixelSample(NamedTuple):
    """One antialiased pixel: grid indices, coverage in [0, 1] and color."""
    px: int
    py: int
    coverage: float
    color: RGB


class AliasedSample(NamedTuple):
    px: int
    py: int


@dataclass(frozen=True)
class Grid:
    """Target raster size. Rasterizers never clip against it; renderers do."""
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid size must be positive, got {self.width}x{self.height}")

    def contains(self, px, py):
        return 0 <= px < self.width and 0 <= py < self.height

    @property
    def center(self):
        return Point2D(self.width / 2.0, self.height / 2.0)
