"""Unit tests for Vector3 and vector utilities.

Tests cover:
- Arithmetic operators
- Dot and cross products
- Magnitude and normalization (including the zero vector)
- Linear interpolation and reflection
- Random unit vector sampling
"""

import math

import numpy as np
import pytest

from pathtracer.core.vector import (
    Vector3,
    cross,
    dot,
    lerp,
    normalize,
    random_unit_vector,
    reflect,
)


class TestVectorArithmetic:
    """Tests for Vector3 operators."""

    def test_negation(self):
        assert -Vector3(1.0, -2.0, 3.0) == Vector3(-1.0, 2.0, -3.0)

    def test_unary_plus_is_identity(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert +v == v

    def test_add_and_subtract(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        assert a + b == Vector3(5.0, 7.0, 9.0)
        assert b - a == Vector3(3.0, 3.0, 3.0)

    def test_component_wise_multiply(self):
        assert Vector3(1.0, 2.0, 3.0) * Vector3(2.0, 3.0, 4.0) == Vector3(2.0, 6.0, 12.0)

    def test_scalar_multiply_both_sides(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert v * 2.0 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * v == Vector3(2.0, 4.0, 6.0)

    def test_divide(self):
        assert Vector3(2.0, 4.0, 6.0) / 2.0 == Vector3(1.0, 2.0, 3.0)

    def test_immutable(self):
        """Vectors are value types and cannot be modified in place."""
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_named_constructors(self):
        """Test the axis and constant vectors."""
        assert Vector3.zero() == Vector3(0.0, 0.0, 0.0)
        assert Vector3.one() == Vector3(1.0, 1.0, 1.0)
        assert Vector3.forward() == Vector3(0.0, 0.0, 1.0)
        assert Vector3.up() == Vector3(0.0, 1.0, 0.0)
        assert Vector3.right() == Vector3(1.0, 0.0, 0.0)

    def test_indexing(self):
        v = Vector3(1.0, 2.0, 3.0)
        assert (v[0], v[1], v[2]) == (1.0, 2.0, 3.0)
        assert list(v) == [1.0, 2.0, 3.0]


class TestVectorProducts:
    """Tests for dot and cross products."""

    def test_dot(self):
        assert dot(Vector3(1.0, 2.0, 3.0), Vector3(4.0, -5.0, 6.0)) == 12.0

    def test_dot_orthogonal_is_zero(self):
        assert dot(Vector3.right(), Vector3.up()) == 0.0

    def test_cross_right_handed(self):
        assert cross(Vector3.right(), Vector3.up()) == Vector3.forward()

    def test_cross_anticommutative(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-2.0, 0.5, 4.0)
        assert cross(a, b) == -cross(b, a)

    def test_cross_is_perpendicular(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-2.0, 0.5, 4.0)
        c = cross(a, b)
        assert abs(dot(c, a)) < 1e-12
        assert abs(dot(c, b)) < 1e-12


class TestMagnitudeAndNormalize:
    """Tests for magnitude and normalization."""

    def test_magnitude(self):
        assert Vector3(3.0, 4.0, 0.0).magnitude == 5.0

    @pytest.mark.parametrize(
        "v",
        [
            Vector3(1.0, 0.0, 0.0),
            Vector3(3.0, 4.0, 12.0),
            Vector3(-1e-3, 2e-3, 5e-4),
            Vector3(1e6, -3e6, 2e5),
        ],
    )
    def test_normalize_unit_length(self, v):
        """Normalizing any non-zero vector yields magnitude 1."""
        assert abs(normalize(v).magnitude - 1.0) < 1e-4

    def test_normalize_preserves_direction(self):
        n = Vector3(0.0, 0.0, 7.0).normalized()
        assert n == Vector3(0.0, 0.0, 1.0)

    def test_normalize_zero_vector_is_nan(self):
        """The zero vector has no direction; the result is NaN, not an error."""
        n = Vector3.zero().normalized()
        assert all(math.isnan(c) for c in n)

    def test_largest_axis(self):
        assert Vector3(0.1, -0.9, 0.3).largest_axis() == 1
        assert Vector3(-2.0, 1.0, 1.5).largest_axis() == 0
        assert Vector3(0.0, 0.0, -1.0).largest_axis() == 2


class TestLerpAndReflect:
    """Tests for interpolation and reflection."""

    def test_lerp_endpoints(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-4.0, 0.0, 8.0)
        assert lerp(a, b, 0.0) == a
        assert lerp(a, b, 1.0) == b

    def test_lerp_is_affine(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-4.0, 0.0, 8.0)
        for t in (0.25, 0.5, 0.8):
            result = lerp(a, b, t)
            expected = a * (1.0 - t) + b * t
            assert result.x == pytest.approx(expected.x)
            assert result.y == pytest.approx(expected.y)
            assert result.z == pytest.approx(expected.z)

    def test_reflect_about_up(self):
        incident = Vector3(1.0, -1.0, 0.0)
        assert reflect(incident, Vector3.up()) == Vector3(1.0, 1.0, 0.0)

    def test_reflect_head_on(self):
        assert reflect(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, -1.0)) == Vector3(0.0, 0.0, -1.0)


class TestRandomUnitVector:
    """Tests for random direction sampling."""

    def test_unit_length(self):
        rng = np.random.default_rng(0)
        for _ in range(200):
            assert abs(random_unit_vector(rng).magnitude - 1.0) < 1e-9

    def test_covers_both_hemispheres(self):
        rng = np.random.default_rng(1)
        zs = [random_unit_vector(rng).z for _ in range(500)]
        assert min(zs) < -0.5
        assert max(zs) > 0.5

    def test_same_seed_same_sequence(self):
        a = np.random.default_rng(3)
        b = np.random.default_rng(3)
        assert [random_unit_vector(a) for _ in range(5)] == [random_unit_vector(b) for _ in range(5)]
