"""Unit tests for window geometry and placement"""

import pytest

from textdisplay.common.types import Placement, Position, ScreenGeometry, TextMetrics, WindowGeometry
from textdisplay.core.geometry import geometry_compute, textOrigin_compute

SCREEN = ScreenGeometry(width=1920, height=1080)


class TestWindowSize:
    """Test window size derivation from text metrics and margins"""

    @pytest.mark.parametrize("margin_x,margin_y", [(0, 0), (10, 20), (3, 0), (250, 7)])
    def test_size_is_text_plus_margins(self, margin_x, margin_y):
        """Width and height add twice the margins to the text extents"""
        metrics = TextMetrics(width=123, ascent=11, descent=3)
        geom = geometry_compute(metrics, SCREEN, margin_x, margin_y, Placement.TOP_LEFT)
        assert geom.width == 123 + 2 * margin_x
        assert geom.height == 14 + 2 * margin_y

    def test_degenerate_window_is_accepted(self):
        """Empty text with zero margins yields a zero-size window, not an error"""
        geom = geometry_compute(TextMetrics(0, 0, 0), SCREEN, 0, 0, Placement.CENTER)
        assert (geom.width, geom.height) == (0, 0)


class TestPlacementScenarios:
    """Test the documented placement scenarios"""

    def test_top_right(self, abc_metrics):
        """Top-right: inset by margins from the right edge"""
        geom = geometry_compute(abc_metrics, SCREEN, 10, 20, Placement.TOP_RIGHT)
        assert geom == WindowGeometry(x=1860, y=20, width=50, height=48)

    def test_center(self, abc_metrics):
        """Center: truncated half of the free space"""
        geom = geometry_compute(abc_metrics, SCREEN, 10, 20, Placement.CENTER)
        assert geom.origin == Position(x=935, y=516)

    def test_unrecognized_placement_anchors_at_origin(self, abc_metrics):
        """Unknown placement tokens silently fall back to (0, 0)"""
        geom = geometry_compute(abc_metrics, SCREEN, 10, 20, "diagonal")
        assert geom.origin == Position(x=0, y=0)
        assert (geom.width, geom.height) == (50, 48)

    def test_string_token_matches_enum(self, abc_metrics):
        """A valid raw token behaves like the enum member"""
        by_token = geometry_compute(abc_metrics, SCREEN, 10, 20, "bottom-left")
        by_enum = geometry_compute(abc_metrics, SCREEN, 10, 20, Placement.BOTTOM_LEFT)
        assert by_token == by_enum

    def test_corners(self, abc_metrics):
        """Each corner is inset by the margins"""
        expected = {
            Placement.TOP_LEFT: (10, 20),
            Placement.TOP_RIGHT: (1860, 20),
            Placement.BOTTOM_LEFT: (10, 1012),
            Placement.BOTTOM_RIGHT: (1860, 1012),
        }
        for placement, origin in expected.items():
            geom = geometry_compute(abc_metrics, SCREEN, 10, 20, placement)
            assert (geom.x, geom.y) == origin, placement

    def test_height_tracks_font_extent(self):
        """A taller font (ascent 10, descent 4) grows the window to 54px"""
        metrics = TextMetrics(width=30, ascent=10, descent=4)
        center = geometry_compute(metrics, SCREEN, 10, 20, Placement.CENTER)
        bottom = geometry_compute(metrics, SCREEN, 10, 20, Placement.BOTTOM_LEFT)
        assert center.height == 54
        assert center.origin == Position(x=935, y=513)
        assert bottom.origin == Position(x=10, y=1006)


class TestPlacementProperties:
    """Test on-screen and centering properties over a range of sizes"""

    SIZES = [(1, 1), (50, 48), (640, 480), (1919, 1079), (1920, 1080)]

    def test_fitting_window_stays_on_screen(self):
        """Zero margins: every placement keeps a fitting window on screen"""
        for width, height in self.SIZES:
            metrics = TextMetrics(width=width, ascent=height, descent=0)
            for placement in Placement:
                geom = geometry_compute(metrics, SCREEN, 0, 0, placement)
                assert 0 <= geom.x and geom.x + geom.width <= SCREEN.width
                assert 0 <= geom.y and geom.y + geom.height <= SCREEN.height

    @pytest.mark.parametrize("screen_w,screen_h", [(1920, 1080), (1921, 1081), (7, 5)])
    def test_center_within_one_pixel(self, screen_w, screen_h):
        """Window center lands within 1px of the screen center"""
        screen = ScreenGeometry(width=screen_w, height=screen_h)
        for width in range(0, min(screen_w, 40) + 1):
            metrics = TextMetrics(width=width, ascent=3, descent=1)
            geom = geometry_compute(metrics, screen, 0, 0, Placement.CENTER)
            assert abs(geom.x + geom.width / 2 - screen_w / 2) <= 1
            assert abs(geom.y + geom.height / 2 - screen_h / 2) <= 1

    def test_idempotent(self, abc_metrics):
        """Identical inputs give identical geometry"""
        first = geometry_compute(abc_metrics, SCREEN, 10, 20, Placement.BOTTOM_RIGHT)
        second = geometry_compute(abc_metrics, SCREEN, 10, 20, Placement.BOTTOM_RIGHT)
        assert first == second


class TestNoClamping:
    """Test that oversized windows are positioned off screen rather than clamped"""

    def test_oversized_top_right_goes_negative(self):
        """Text wider than the screen pushes the origin left of the screen"""
        metrics = TextMetrics(width=1900, ascent=10, descent=4)
        geom = geometry_compute(metrics, SCREEN, 20, 20, Placement.TOP_RIGHT)
        assert geom.x == 1920 - 1940 - 20

    def test_oversized_center_truncates_toward_zero(self):
        """Negative free space is halved toward zero, not floored"""
        screen = ScreenGeometry(width=100, height=100)
        metrics = TextMetrics(width=151, ascent=10, descent=0)
        geom = geometry_compute(metrics, screen, 0, 0, Placement.CENTER)
        assert geom.x == -25
        assert geom.y == 45


class TestTextOrigin:
    """Test text draw origin inside the window"""

    def test_origin_is_margin_plus_ascent(self, abc_metrics):
        """Baseline sits one ascent below the top margin"""
        assert textOrigin_compute(abc_metrics, 10, 20) == Position(x=10, y=26)

    def test_origin_independent_of_placement(self, abc_metrics):
        """Placement moves the window, never the text inside it"""
        origin = textOrigin_compute(abc_metrics, 4, 6)
        for placement in Placement:
            geometry_compute(abc_metrics, SCREEN, 4, 6, placement)
            assert textOrigin_compute(abc_metrics, 4, 6) == origin
