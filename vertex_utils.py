# vertex_utils.py
import numpy as np
from transform2d import pixel_to_ndc

def point_vertices(samples, grid):
    """Pack aliased samples as an (N, 2) float32 array of NDC positions."""
    if not samples:
        return np.zeros((0, 2), dtype=np.float32)
    pix = np.array([(s.px, s.py) for s in samples], dtype=np.float64)
    x, y = pixel_to_ndc(pix[:, 0], pix[:, 1], grid.width, grid.height)
    return np.stack([x, y], axis=1).astype(np.float32)

def color_vertices(samples, grid, drop_transparent=False):
    """Pack antialiased samples as (N, 6) float32 rows: x, y, r, g, b, alpha.
    drop_transparent skips zero-coverage samples; drawing them is harmless."""
    if drop_transparent:
        samples = [s for s in samples if s.coverage > 0.0]
    if not samples:
        return np.zeros((0, 6), dtype=np.float32)
    rows = np.array([(s.px, s.py, s.color[0], s.color[1], s.color[2], s.coverage)
                     for s in samples], dtype=np.float64)
    rows[:, 0], rows[:, 1] = pixel_to_ndc(rows[:, 0], rows[:, 1], grid.width, grid.height)
    return rows.astype(np.float32)
