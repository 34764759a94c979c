"""NumPy implementation of the GeometryBackend port."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from grill_pairing.domain.geometry import Vec3


def _as_points(positions: Sequence[Vec3]) -> np.ndarray:
    return np.asarray(positions, dtype=np.float64).reshape(-1, 3)


@dataclass(frozen=True)
class NumpyGeometryBackend:
    """Vectorised plane tests and angles for whole connector sets."""

    def signed_distances(
        self,
        *,
        positions: Sequence[Vec3],
        origin: Vec3,
        normal: Vec3,
    ) -> np.ndarray:
        v = _as_points(positions) - np.asarray(origin, dtype=np.float64)
        return v @ np.asarray(normal, dtype=np.float64)

    def angles_and_distances(
        self,
        *,
        positions: Sequence[Vec3],
        origin: Vec3,
        axis: Vec3,
        eps: float,
    ) -> Tuple[np.ndarray, np.ndarray]:
        v = _as_points(positions) - np.asarray(origin, dtype=np.float64)
        dists = np.linalg.norm(v, axis=1)

        # Points at the origin keep a zero direction (angle 90 deg).
        safe = np.where(dists < eps, 1.0, dists)
        directions = np.where((dists < eps)[:, None], 0.0, v / safe[:, None])

        cos = np.clip(directions @ np.asarray(axis, dtype=np.float64), -1.0, 1.0)
        angles = np.degrees(np.arccos(cos))
        return angles, dists
