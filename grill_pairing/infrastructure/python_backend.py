"""Pure-Python implementation of the GeometryBackend port."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from grill_pairing.domain.geometry import Vec3, angle_deg, dot, length, normalize_safe, sub


@dataclass(frozen=True)
class PythonGeometryBackend:
    """Scalar plane tests and angles, one connector at a time."""

    def signed_distances(
        self,
        *,
        positions: Sequence[Vec3],
        origin: Vec3,
        normal: Vec3,
    ) -> List[float]:
        return [dot(sub(p, origin), normal) for p in positions]

    def angles_and_distances(
        self,
        *,
        positions: Sequence[Vec3],
        origin: Vec3,
        axis: Vec3,
        eps: float,
    ) -> Tuple[List[float], List[float]]:
        angles: List[float] = []
        dists: List[float] = []
        for p in positions:
            v = sub(p, origin)
            angles.append(angle_deg(normalize_safe(v, eps), axis))
            dists.append(length(v))
        return angles, dists
