"""Ports (Protocol interfaces) for grill pairing.

These define the contracts that infrastructure adapters must implement.
The domain layer depends on these abstractions, not concrete implementations.
"""
from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from grill_pairing.domain.geometry import Vec3
from grill_pairing.domain.mep import MepModel
from grill_pairing.domain.routing import AutoRoutingSummary


# ---------------------------------------------------------------------------
# Geometry Backend Port
# ---------------------------------------------------------------------------


class GeometryBackend(Protocol):
    """Port: batched vector math over connector positions.

    Isolates the domain from the numeric library used to evaluate plane
    tests and angles for a whole connector set at once.
    """

    def signed_distances(
        self,
        *,
        positions: Sequence[Vec3],
        origin: Vec3,
        normal: Vec3,
    ) -> Sequence[float]:
        """Return dot(position - origin, normal) for every position."""
        ...

    def angles_and_distances(
        self,
        *,
        positions: Sequence[Vec3],
        origin: Vec3,
        axis: Vec3,
        eps: float,
    ) -> Tuple[Sequence[float], Sequence[float]]:
        """Return (angle to `axis` in degrees, distance from `origin`) per position.

        Positions closer than `eps` to the origin have a zero direction and
        therefore an angle of 90 degrees.
        """
        ...


# ---------------------------------------------------------------------------
# Model Source Port
# ---------------------------------------------------------------------------


class MepModelSource(Protocol):
    """Port: load the MEP elements and existing route names."""

    def load(self) -> MepModel: ...


# ---------------------------------------------------------------------------
# Report Port
# ---------------------------------------------------------------------------


class RoutingReportStore(Protocol):
    """Port: persist an auto-routing summary for review."""

    def save(self, *, summary: AutoRoutingSummary) -> None: ...
