import math

import pytest

from grill_pairing.domain.geometry import (
    ZERO,
    Vec3,
    angle_deg,
    clamp,
    distance,
    is_finite,
    is_near_zero,
    normalize_safe,
)


def test_normalize_safe_rescales_to_unit_length():
    n = normalize_safe(Vec3(3.0, 0.0, 4.0))
    assert n.x == pytest.approx(0.6)
    assert n.y == 0.0
    assert n.z == pytest.approx(0.8)


def test_normalize_safe_returns_zero_below_tolerance():
    assert normalize_safe(Vec3(1e-10, 0.0, 0.0)) == ZERO
    assert is_near_zero(Vec3(0.0, 5e-10, 0.0))
    assert not is_near_zero(Vec3(0.0, 2e-9, 0.0))


def test_angle_against_zero_vector_is_ninety_degrees():
    assert angle_deg(ZERO, Vec3(0.0, 0.0, 1.0)) == pytest.approx(90.0)


def test_angle_is_clamped_for_slightly_overlong_unit_vectors():
    # dot product just above 1.0 must not raise a math domain error
    v = Vec3(1.0 + 1e-15, 0.0, 0.0)
    assert angle_deg(v, Vec3(1.0, 0.0, 0.0)) == 0.0
    assert clamp(-3.0) == -1.0 and clamp(3.0) == 1.0 and clamp(0.25) == 0.25


def test_distance():
    assert distance(Vec3(1, 2, 3), Vec3(4, 6, 3)) == pytest.approx(5.0)


def test_vec3_of_accepts_any_iterable():
    assert Vec3.of([1, 2, 3]) == Vec3(1.0, 2.0, 3.0)
    assert math.isclose(angle_deg(Vec3(0, 0, -1), Vec3(0, 0, 1)), 180.0)


def test_is_finite():
    assert is_finite(Vec3(1.0, -2.0, 0.0))
    assert not is_finite(Vec3(float("nan"), 0.0, 0.0))
    assert not is_finite(Vec3(0.0, 0.0, float("-inf")))
