"""Plain 3D vector helpers used by the pairing engine.

Vectors are `Vec3` named tuples; every operation is a free function so the
domain stays free of any CAD or numeric library types.
"""
from __future__ import annotations

import math
from typing import Iterable, NamedTuple

EPSILON = 1e-9


class Vec3(NamedTuple):
    x: float
    y: float
    z: float

    @classmethod
    def of(cls, values: Iterable[float]) -> "Vec3":
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)


ZERO = Vec3(0.0, 0.0, 0.0)


def sub(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(a.x - b.x, a.y - b.y, a.z - b.z)


def dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def length(v: Vec3) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def distance(a: Vec3, b: Vec3) -> float:
    return length(sub(a, b))


def is_finite(v: Vec3) -> bool:
    return all(math.isfinite(c) for c in v)


def is_near_zero(v: Vec3, eps: float = EPSILON) -> bool:
    return length(v) < eps


def normalize_safe(v: Vec3, eps: float = EPSILON) -> Vec3:
    """Unit vector along `v`, or the zero vector when `v` is shorter than `eps`."""
    n = length(v)
    if n < eps:
        return ZERO
    return Vec3(v.x / n, v.y / n, v.z / n)


def clamp(value: float, lo: float = -1.0, hi: float = 1.0) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def angle_deg(direction: Vec3, axis: Vec3) -> float:
    """Angle in degrees between two unit vectors; 90 when either is zero."""
    return math.degrees(math.acos(clamp(dot(direction, axis))))
