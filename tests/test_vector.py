"""
Test suite for Vec2 and the scalar helpers.
"""

import math

import pytest

from vector import Vec2, clamp, lerp


class TestVec2Arithmetic:
    """Test value-type arithmetic."""

    def test_coordinates_are_floats(self):
        v = Vec2(1, 2)
        assert isinstance(v.x, float)
        assert isinstance(v.y, float)

    def test_add_and_sub_return_new_values(self):
        a = Vec2(1.0, 2.0)
        b = Vec2(3.0, 5.0)
        assert a + b == Vec2(4.0, 7.0)
        assert b - a == Vec2(2.0, 3.0)
        assert a == Vec2(1.0, 2.0)
        assert b == Vec2(3.0, 5.0)

    def test_add_accepts_plain_tuples(self):
        assert Vec2(1.0, 1.0) + (2.0, 3.0) == Vec2(3.0, 4.0)

    def test_scalar_multiplication_both_sides(self):
        v = Vec2(1.5, -2.0)
        assert v * 2 == Vec2(3.0, -4.0)
        assert 2 * v == Vec2(3.0, -4.0)

    def test_division_and_negation(self):
        assert Vec2(4.0, -6.0) / 2 == Vec2(2.0, -3.0)
        assert -Vec2(1.0, -1.0) == Vec2(-1.0, 1.0)

    def test_immutable(self):
        v = Vec2(1.0, 2.0)
        with pytest.raises(AttributeError):
            v.x = 5.0


class TestVec2Geometry:
    """Test magnitude, normalisation and interpolation."""

    def test_mag_and_dist(self):
        assert Vec2(3.0, 4.0).mag() == pytest.approx(5.0)
        assert Vec2(1.0, 1.0).dist((4.0, 5.0)) == pytest.approx(5.0)

    def test_normalize(self):
        n = Vec2(0.0, -7.0).normalize()
        assert n == pytest.approx((0.0, -1.0))
        assert n.mag() == pytest.approx(1.0)

    def test_normalize_zero_vector(self):
        assert Vec2(0.0, 0.0).normalize() == Vec2(0.0, 0.0)

    def test_perpendicular_is_orthogonal(self):
        v = Vec2(2.0, 1.0)
        p = v.perpendicular()
        assert p == Vec2(-1.0, 2.0)
        assert v.x * p.x + v.y * p.y == pytest.approx(0.0)

    def test_lerp(self):
        a = Vec2(0.0, 10.0)
        b = Vec2(10.0, 20.0)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b
        assert a.lerp(b, 0.25) == pytest.approx((2.5, 12.5))


class TestScalarHelpers:
    """Test clamp and lerp."""

    @pytest.mark.parametrize("value, expected", [(-1.0, 0.0), (0.5, 0.5), (3.0, 1.0)])
    def test_clamp(self, value, expected):
        assert clamp(value, 0.0, 1.0) == expected

    def test_lerp_reversed_range(self):
        assert lerp(10.0, 2.0, 0.5) == pytest.approx(6.0)
        assert lerp(10.0, 2.0, 1.0) == pytest.approx(2.0)

    def test_lerp_with_sine_envelope(self):
        assert lerp(0.0, 1.0, math.sin(math.pi / 6)) == pytest.approx(0.5)
