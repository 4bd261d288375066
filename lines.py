# lines.py
import math

from algorithms import round_endpoint
from config import (RADIAL_ANGLE_STEP, RADIAL_RADIUS, WAVE_AMPLITUDE,
                    WAVE_FREQUENCY, WAVE_MARGIN, WU_COLOR)
from samples import AliasedSample, Line, PixelSample, Point2D
from states import CurveMode
from transform2d import rotate

def radial_lines(cx, cy, radius, angle_step):
    """Spokes from (cx, cy), one every angle_step degrees over a full turn."""
    if angle_step <= 0:
        raise ValueError("angle_step must be positive")
    tip = [(cx + radius, cy)]
    lines = []
    for angle in range(0, 360, angle_step):
        (x1, y1), = rotate(tip, angle, origin=(cx, cy))
        lines.append(Line(float(cx), float(cy), x1, y1))
    return lines

def sine_wave(x_start, x_end, center_y, amplitude, frequency, phase):
    # one sample per pixel column so Wu can blend adjacent rows
    return [Point2D(float(x), center_y + amplitude * math.sin(frequency * x + phase))
            for x in range(x_start, x_end + 1)]

def wave_aliased_samples(points):
    return [AliasedSample(round_endpoint(p.x), round_endpoint(p.y)) for p in points]

def wave_antialiased_samples(points, color=WU_COLOR):
    """Per column, split intensity between floor(y) and the row above it."""
    out = []
    for p in points:
        px = round_endpoint(p.x)
        y_floor = math.floor(p.y)
        frac = p.y - y_floor
        out.append(PixelSample(px, y_floor, 1.0 - frac, color))
        out.append(PixelSample(px, y_floor + 1, frac, color))
    return out

def build_frame(mode, phase, aliased_rast, wu_rast):
    """Return (aliased, antialiased) samples for one frame of the given mode,
    drawn on the grid the rasterizers are bound to."""
    grid = wu_rast.grid
    center = grid.center
    if mode == CurveMode.SINE:
        points = sine_wave(WAVE_MARGIN, grid.width - WAVE_MARGIN, center.y,
                           WAVE_AMPLITUDE, WAVE_FREQUENCY, phase)
        return wave_aliased_samples(points), wave_antialiased_samples(points, wu_rast.color)

    aliased, antialiased = [], []
    for line in radial_lines(center.x, center.y, RADIAL_RADIUS, RADIAL_ANGLE_STEP):
        # Bresenham rounds to whole pixels, Wu keeps the subpixel endpoints
        aliased.extend(aliased_rast.rasterize(*line))
        antialiased.extend(wu_rast.rasterize(*line))
    return aliased, antialiased
