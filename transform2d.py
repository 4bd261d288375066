# transform2d.py
import math

def keep_xy(x, y):
    return x, y

def swap_xy(x, y):
    return y, x

def rotate(points, angle_deg, origin=(0,0)):
    angle = math.radians(angle_deg)
    ox, oy = origin
    cos_a = math.cos(angle); sin_a = math.sin(angle)
    out = []
    for x, y in points:
        x -= ox; y -= oy
        xr = x * cos_a - y * sin_a
        yr = x * sin_a + y * cos_a
        out.append((xr + ox, yr + oy))
    return out

def pixel_to_ndc(px, py, width, height):
    """Map a pixel index to the NDC position of its centre."""
    return (2.0 * (px + 0.5)) / width - 1.0, (2.0 * (py + 0.5)) / height - 1.0
