# algorithms.py
import math

from config import WU_COLOR
from samples import AliasedSample, PixelSample
from transform2d import keep_xy, swap_xy
from vertex_utils import color_vertices, point_vertices

def fpart(x):
    """Fractional part via floor, so fpart(-0.25) == 0.75."""
    return x - math.floor(x)

def rfpart(x):
    return 1.0 - fpart(x)

def round_endpoint(v):
    """Round half away from zero (C round), not Python's banker's rounding."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))

def _bresenham_walk(x0, y0, x1, y1):
    pts = []
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        pts.append(AliasedSample(x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    return pts

def bresenham_line(x0, y0, x1, y1):
    """Integer Bresenham line. Returns AliasedSamples from (x0,y0) to (x1,y1),
    real-valued endpoints rounded to the nearest pixel first.
    The walk always starts at the smaller endpoint so both directions
    cover the same pixels."""
    x0, y0 = round_endpoint(x0), round_endpoint(y0)
    x1, y1 = round_endpoint(x1), round_endpoint(y1)
    if (x0, y0) > (x1, y1):
        pts = _bresenham_walk(x1, y1, x0, y0)
        pts.reverse()
        return pts
    return _bresenham_walk(x0, y0, x1, y1)

def _endpoint(x, y, gradient, snap):
    xend = snap(x)
    yend = y + gradient * (xend - x)
    xgap = 1.0 - abs(x - xend)
    return xend, yend, xgap

def _emit_pair(out, plot, x, y, gap, color):
    # lower pixel takes 1 - frac, upper pixel takes frac
    ypxl = math.floor(y)
    px, py = plot(x, ypxl)
    out.append(PixelSample(px, py, rfpart(y) * gap, color))
    px, py = plot(x, ypxl + 1)
    out.append(PixelSample(px, py, fpart(y) * gap, color))

def xiaolin_wu_line(x0, y0, x1, y1, color=WU_COLOR):
    """Xiaolin Wu antialiased line.

    Walks the major axis one pixel at a time and splits each step's
    intensity between the two pixels straddling the ideal line. Steep lines
    are computed with x and y swapped and swapped back on output. Samples
    come out as: start pair, interior pairs left to right, end pair."""
    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = swap_xy(x0, y0)
        x1, y1 = swap_xy(x1, y1)
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0
    plot = swap_xy if steep else keep_xy

    dx = x1 - x0
    dy = y1 - y0
    gradient = 1.0 if dx == 0 else dy / dx

    # start column is floored and end column ceiled, so the interior
    # range below never revisits either endpoint column
    xpxl1, yend1, xgap1 = _endpoint(x0, y0, gradient, math.floor)
    xpxl2, yend2, xgap2 = _endpoint(x1, y1, gradient, math.ceil)

    samples = []
    _emit_pair(samples, plot, xpxl1, yend1, xgap1, color)

    intery = yend1 + gradient
    for x in range(xpxl1 + 1, xpxl2):
        _emit_pair(samples, plot, x, intery, 1.0, color)
        intery += gradient

    _emit_pair(samples, plot, xpxl2, yend2, xgap2, color)
    return samples


class AliasedRasterizer:
    """Bresenham lines bound to a target grid."""

    def __init__(self, grid):
        self.grid = grid

    def rasterize(self, x0, y0, x1, y1):
        return bresenham_line(x0, y0, x1, y1)

    def vertices(self, samples):
        """NDC (x, y) rows for a batch of samples on this grid."""
        return point_vertices(samples, self.grid)


class AntialiasedRasterizer:
    """Xiaolin Wu lines bound to a target grid and a single color."""

    def __init__(self, grid, color=WU_COLOR):
        self.grid = grid
        self.color = tuple(color)

    def rasterize(self, x0, y0, x1, y1):
        return xiaolin_wu_line(x0, y0, x1, y1, self.color)

    def vertices(self, samples, drop_transparent=False):
        return color_vertices(samples, self.grid, drop_transparent)
