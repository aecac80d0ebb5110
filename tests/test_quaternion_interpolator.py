"""Tests for the quaternion and vector interpolation helpers."""

import math

import numpy as np
import pytest
import quaternion

from kfanim.interpolation import (
    hermite_interpolate,
    linear_interpolate,
    normalize_quaternion,
    quaternion_from_xyzw,
    quaternion_to_xyzw,
    slerp,
    slerp_xyzw,
)

IDENTITY_XYZW = [0.0, 0.0, 0.0, 1.0]
QUARTER_TURN_Z_XYZW = [0.0, 0.0, math.sin(math.pi / 4), math.cos(math.pi / 4)]


class TestConversions:
    def test_xyzw_order(self):
        q = quaternion_from_xyzw([0.1, 0.2, 0.3, 0.9])
        assert (q.w, q.x, q.y, q.z) == pytest.approx((0.9, 0.1, 0.2, 0.3))
        np.testing.assert_allclose(quaternion_to_xyzw(q), [0.1, 0.2, 0.3, 0.9])

    def test_normalize(self):
        q = normalize_quaternion(quaternion.quaternion(2.0, 0.0, 0.0, 0.0))
        assert q.abs() == pytest.approx(1.0)
        assert q.w == pytest.approx(1.0)

    def test_normalize_zero_raises(self):
        with pytest.raises(ValueError):
            normalize_quaternion(quaternion.quaternion(0.0, 0.0, 0.0, 0.0))


class TestSlerp:
    def test_endpoints(self):
        start = slerp_xyzw(IDENTITY_XYZW, QUARTER_TURN_Z_XYZW, 0.0)
        end = slerp_xyzw(IDENTITY_XYZW, QUARTER_TURN_Z_XYZW, 1.0)
        np.testing.assert_allclose(quaternion_to_xyzw(start), IDENTITY_XYZW, atol=1e-12)
        np.testing.assert_allclose(quaternion_to_xyzw(end), QUARTER_TURN_Z_XYZW, atol=1e-12)

    def test_midpoint_is_half_angle(self):
        mid = slerp_xyzw(IDENTITY_XYZW, QUARTER_TURN_Z_XYZW, 0.5)
        assert mid.z == pytest.approx(math.sin(math.pi / 8))
        assert mid.w == pytest.approx(math.cos(math.pi / 8))
        assert mid.abs() == pytest.approx(1.0)

    def test_takes_shortest_path(self):
        negated = [-c for c in QUARTER_TURN_Z_XYZW]
        mid = slerp_xyzw(IDENTITY_XYZW, negated, 0.5)
        expected = quaternion.quaternion(math.cos(math.pi / 8), 0.0, 0.0, math.sin(math.pi / 8))
        assert abs(np.dot(quaternion.as_float_array(mid), quaternion.as_float_array(expected))) == pytest.approx(1.0)

    def test_nearly_identical_inputs(self):
        q1 = np.array([1.0, 0.0, 0.0, 0.0])
        q2 = np.array([1.0, 0.0, 0.0, 1e-6])
        result = slerp(q1, q2, 0.5)
        assert np.linalg.norm(result) == pytest.approx(1.0)
        assert result[3] == pytest.approx(5e-7, rel=1e-3)


class TestVectorInterpolation:
    def test_linear(self):
        result = linear_interpolate(np.array([0.0, 0.0, 0.0]), np.array([10.0, -2.0, 4.0]), 0.25)
        np.testing.assert_allclose(result, [2.5, -0.5, 1.0])

    def test_hermite_endpoints(self):
        p0, m0 = np.array([1.0, 2.0]), np.array([5.0, -5.0])
        p1, m1 = np.array([3.0, 0.0]), np.array([-1.0, 7.0])
        np.testing.assert_allclose(hermite_interpolate(p0, m0, p1, m1, 0.0), p0)
        np.testing.assert_allclose(hermite_interpolate(p0, m0, p1, m1, 1.0), p1)

    def test_hermite_midpoint(self):
        # h00 = 0.5, h10 = 0.125, h01 = 0.5, h11 = -0.125 at t = 0.5
        result = hermite_interpolate(np.zeros(3), np.array([2.0, 0.0, 0.0]),
                                     np.array([4.0, 0.0, 0.0]), np.array([0.0, 2.0, 0.0]), 0.5)
        np.testing.assert_allclose(result, [2.25, -0.25, 0.0])
