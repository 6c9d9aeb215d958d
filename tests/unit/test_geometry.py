"""Unit tests for geometry helpers."""

import math

import pytest

from polyoutline.core.geometry import (
    TAU,
    angle_cos_sin,
    floor_mod,
    normalize_angle,
    signed_area,
)
from polyoutline.domain import Point


class TestFloorMod:
    """Tests for circular index reduction."""

    @pytest.mark.parametrize(
        ("i", "n", "expected"),
        [
            (0, 4, 0),
            (3, 4, 3),
            (4, 4, 0),
            (-1, 4, 3),
            (-3, 4, 1),
            (-19, 4, 1),
            (21, 4, 1),
        ],
    )
    def test_result_in_range(self, i, n, expected):
        assert floor_mod(i, n) == expected

    def test_zero_length_raises(self):
        with pytest.raises(ZeroDivisionError):
            floor_mod(1, 0)


class TestAngleCosSin:
    """Tests for neighbor vector cos/sin."""

    def test_right_angle(self):
        """to_next along +x, to_prev along +y: 90 degrees counter-clockwise."""
        cos, sin = angle_cos_sin(Point(0.0, 1.0), Point(1.0, 0.0))
        assert cos == pytest.approx(0.0)
        assert sin == pytest.approx(1.0)

    def test_scale_independent(self):
        """Vector lengths do not affect the result."""
        small = angle_cos_sin(Point(1.0, 1.0), Point(1.0, 0.0))
        large = angle_cos_sin(Point(50.0, 50.0), Point(7.0, 0.0))
        assert small == pytest.approx(large)
        assert small == pytest.approx((math.sqrt(0.5), math.sqrt(0.5)))

    def test_clockwise_turn_has_negative_sin(self):
        _, sin = angle_cos_sin(Point(0.0, -1.0), Point(1.0, 0.0))
        assert sin == pytest.approx(-1.0)

    def test_zero_vector_gives_nan(self):
        """A zero-length neighbor makes the result undefined."""
        cos, sin = angle_cos_sin(Point(0.0, 0.0), Point(1.0, 0.0))
        assert math.isnan(cos)
        assert math.isnan(sin)


class TestNormalizeAngle:
    """Tests for angle normalization."""

    def test_positive_unchanged(self):
        assert normalize_angle(math.pi / 4) == math.pi / 4

    def test_negative_shifted(self):
        assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)

    def test_pi_unchanged(self):
        assert normalize_angle(math.pi) == math.pi

    def test_tiny_negative_wraps_to_zero(self):
        """A shift that rounds up to exactly 2*pi stays below 2*pi."""
        assert normalize_angle(-1e-17) == 0.0
        assert normalize_angle(-1e-17) < TAU

    def test_small_negative_shifted_below_tau(self):
        angle = normalize_angle(-1e-9)
        assert 0.0 <= angle < TAU
        assert angle == pytest.approx(TAU - 1e-9)

    def test_nan_passes_through(self):
        assert math.isnan(normalize_angle(math.nan))

    def test_tau(self):
        assert TAU == pytest.approx(2 * math.pi)


class TestSignedArea:
    """Tests for the shoelace formula."""

    def test_counter_clockwise_square(self):
        square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        assert signed_area(square) == pytest.approx(1.0)

    def test_clockwise_square(self):
        square = [Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)]
        assert signed_area(square) == pytest.approx(-1.0)

    def test_degenerate(self):
        assert signed_area([]) == 0.0
        assert signed_area([Point(0, 0), Point(1, 1)]) == 0.0
