import pytest

from algorithms import AliasedRasterizer, AntialiasedRasterizer
from lines import (build_frame, radial_lines, sine_wave, wave_aliased_samples,
                   wave_antialiased_samples)
from samples import AliasedSample, Grid, PixelSample, Point2D
from states import CurveMode


def rasterizers(width, height, color=(1.0, 0.0, 1.0)):
    grid = Grid(width, height)
    return AliasedRasterizer(grid), AntialiasedRasterizer(grid, color)


def test_radial_lines_quarter_turns():
    lines = radial_lines(100, 50, 10, 90)
    assert len(lines) == 4
    ends = [(l.x1, l.y1) for l in lines]
    expected = [(110, 50), (100, 60), (90, 50), (100, 40)]
    for got, want in zip(ends, expected):
        assert got == pytest.approx(want, abs=1e-9)
    assert all((l.x0, l.y0) == (100.0, 50.0) for l in lines)


def test_radial_lines_count():
    assert len(radial_lines(0, 0, 800, 15)) == 24


def test_radial_lines_rejects_bad_step():
    with pytest.raises(ValueError):
        radial_lines(0, 0, 10, 0)


def test_sine_wave_one_point_per_column():
    pts = sine_wave(0, 9, 5, 0.0, 1.0, 0.0)
    assert [p.x for p in pts] == [float(x) for x in range(10)]
    assert all(p.y == 5 for p in pts)


def test_wave_aliased_samples_round():
    pts = [Point2D(3.0, 4.5), Point2D(4.0, 4.49)]
    assert wave_aliased_samples(pts) == [AliasedSample(3, 5), AliasedSample(4, 4)]


def test_wave_antialiased_samples_split():
    color = (1.0, 0.0, 1.0)
    samples = wave_antialiased_samples([Point2D(3.0, 4.25)], color)
    assert samples == [PixelSample(3, 4, 0.75, color), PixelSample(3, 5, 0.25, color)]


def test_build_frame_sine():
    aliased, antialiased = build_frame(CurveMode.SINE, 0.5, *rasterizers(200, 100))
    assert len(aliased) == 101
    assert len(antialiased) == 202
    for i in range(0, len(antialiased), 2):
        low, high = antialiased[i], antialiased[i + 1]
        assert low.px == high.px
        assert low.coverage + high.coverage == pytest.approx(1.0)


def test_build_frame_sine_centred_on_grid():
    # zero phase: sin(0.01 * 50) offsets the first column from the centre row
    aliased, antialiased = build_frame(CurveMode.SINE, 0.0, *rasterizers(200, 101))
    assert aliased[0].px == 50
    low = antialiased[0]
    assert low.py + antialiased[1].coverage == pytest.approx(50.5 + 200.0 * 0.479425538604203)


def test_build_frame_sine_uses_rasterizer_color():
    _, antialiased = build_frame(CurveMode.SINE, 0.0, *rasterizers(200, 100, (0.0, 1.0, 0.0)))
    assert {s.color for s in antialiased} == {(0.0, 1.0, 0.0)}


def test_build_frame_sine_animates():
    rasts = rasterizers(200, 100)
    _, a = build_frame(CurveMode.SINE, 0.0, *rasts)
    _, b = build_frame(CurveMode.SINE, 1.0, *rasts)
    assert a != b


def test_build_frame_radial():
    grid = Grid(200, 100)
    aliased, antialiased = build_frame(CurveMode.RADIAL, 0.0, *rasterizers(200, 100))
    assert aliased[0] == AliasedSample(100, 50)
    assert len(antialiased) % 2 == 0
    assert all(0.0 <= s.coverage <= 1.0 for s in antialiased)
    # spokes run far outside the grid; clipping is left to the renderer
    assert any(not grid.contains(s.px, s.py) for s in aliased)


def test_build_frame_radial_starts_at_rounded_centre():
    aliased, antialiased = build_frame(CurveMode.RADIAL, 0.0, *rasterizers(201, 101))
    # centre (100.5, 50.5) rounds half away from zero for Bresenham
    assert aliased[0] == AliasedSample(101, 51)
    # Wu keeps the subpixel start: column 100 with the row split evenly
    assert (antialiased[0].px, antialiased[0].py) == (100, 50)
    assert antialiased[0].coverage == pytest.approx(0.25)
