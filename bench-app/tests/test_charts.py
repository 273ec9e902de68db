"""
Chart rendering tests.

Pygame runs in SDL dummy mode (see conftest.py); the charts draw onto a
plain off-screen Surface so pixels can be read back.
"""

import unittest

import pygame

import charts
from charts import (
    CURVE_COLOR,
    bar_heights,
    curve_points,
    draw_band_strip,
    draw_charge_curve,
    draw_network_bars,
)
from rc_circuit import sample_charge_curve
from resistor_network import PARALLEL, SERIES, NetworkResult, ResistorNetwork


def _surface(w=480, h=320):
    return pygame.Surface((w, h))


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


# ---------------------------------------------------------------------------
# Pure mapping helpers
# ---------------------------------------------------------------------------

class TestCurvePoints(unittest.TestCase):

    def setUp(self):
        self.samples = sample_charge_curve(tau=1.0, v_in=5.0)
        self.area = pygame.Rect(10, 20, 101, 51)

    def test_first_point_bottom_left(self):
        points = curve_points(self.samples, self.area, 5.0)
        self.assertEqual(points[0], (10, 70))

    def test_last_point_right_edge_near_top(self):
        x, y = curve_points(self.samples, self.area, 5.0)[-1]
        self.assertEqual(x, 110)
        self.assertEqual(y, 20)

    def test_shape(self):
        points = curve_points(self.samples, self.area, 5.0)
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        self.assertEqual(len(points), 31)
        self.assertEqual(xs, sorted(xs))
        self.assertEqual(ys, sorted(ys, reverse=True))

    def test_points_stay_inside_area(self):
        for x, y in curve_points(self.samples, self.area, 1.0):
            self.assertTrue(self.area.collidepoint(x, y))

    def test_empty(self):
        self.assertEqual(curve_points([], self.area, 5.0), [])

    def test_zero_v_max_flat(self):
        ys = {y for _, y in curve_points(self.samples, self.area, 0.0)}
        self.assertEqual(ys, {70})


class TestBarHeights(unittest.TestCase):

    def test_scaled_to_peak(self):
        self.assertEqual(bar_heights([1.0, 2.0, 4.0], 100), [25, 50, 100])

    def test_all_zero(self):
        self.assertEqual(bar_heights([0.0, 0.0], 100), [0, 0])

    def test_negative_clamped(self):
        self.assertEqual(bar_heights([-1.0, 2.0], 100), [0, 100])

    def test_empty(self):
        self.assertEqual(bar_heights([], 100), [])


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------

class TestDrawChargeCurve(unittest.TestCase):

    def setUp(self):
        self.surface = _surface()

    def test_returns_points_inside_rect(self):
        rect = pygame.Rect(0, 0, 240, 260)
        points = draw_charge_curve(self.surface, sample_charge_curve(1e-3, 5.0), 5.0, rect)
        self.assertEqual(len(points), 31)
        for p in points:
            self.assertTrue(rect.collidepoint(p))

    def test_curve_pixels_drawn(self):
        points = draw_charge_curve(self.surface, sample_charge_curve(1.0, 5.0), 5.0)
        x, y = points[15]
        nearby = {_rgb(self.surface, (x + dx, y + dy)) for dx in (-1, 0, 1) for dy in (-1, 0, 1)}
        self.assertIn(CURVE_COLOR, nearby)

    def test_no_samples_draws_frame_only(self):
        self.assertEqual(draw_charge_curve(self.surface, [], 5.0), [])


class TestDrawNetworkBars(unittest.TestCase):

    def setUp(self):
        self.surface = _surface()
        self.network = ResistorNetwork()   # 100 Ω + 200 Ω

    def test_series_bars_follow_voltage_drop(self):
        bars = draw_network_bars(self.surface, self.network.result, SERIES)
        self.assertEqual(len(bars), 2)
        self.assertAlmostEqual(bars[0].height / bars[1].height, 0.5, places=2)
        self.assertEqual(bars[0].bottom, bars[1].bottom)

    def test_parallel_bars_follow_current(self):
        self.network.set_mode(PARALLEL)
        bars = draw_network_bars(self.surface, self.network.result, PARALLEL)
        self.assertGreater(bars[0].height, bars[1].height)
        self.assertLess(bars[0].left, bars[1].left)

    def test_bar_pixels_use_palette(self):
        bars = draw_network_bars(self.surface, self.network.result, SERIES)
        self.assertEqual(_rgb(self.surface, bars[1].center), charts.BAR_COLORS[1])

    def test_empty_result(self):
        empty = NetworkResult([], 0.0, 0.0, 0.0, 0.0)
        self.assertEqual(draw_network_bars(self.surface, empty, SERIES), [])


class TestDrawBandStrip(unittest.TestCase):

    def setUp(self):
        self.surface = _surface()
        self.rect = pygame.Rect(40, 100, 400, 60)

    def test_four_bands(self):
        bands = draw_band_strip(self.surface, ["brown", "black", "red", "gold"], self.rect)
        self.assertEqual(len(bands), 4)
        self.assertEqual(_rgb(self.surface, bands[0].center), (139, 69, 19))
        lefts = [b.left for b in bands]
        self.assertEqual(lefts, sorted(lefts))

    def test_five_bands_inside_rect(self):
        bands = draw_band_strip(
            self.surface, ["brown", "black", "black", "brown", "brown"], self.rect
        )
        self.assertEqual(len(bands), 5)
        for band in bands:
            self.assertTrue(self.rect.contains(band))

    def test_unsupported_count(self):
        with self.assertRaises(ValueError):
            draw_band_strip(self.surface, ["brown", "black", "red"], self.rect)


if __name__ == "__main__":
    unittest.main()
