"""Domain services: the connector pairing engine.

The engine pairs the outlets of a distribution box with target connectors
(grills) relative to the inlet's coordinate frame:

1. normalize the frame basis (degenerate basis -> InvalidFrame);
2. pick the splitting plane (Y- or X-basis normal) that lets the most
   outlets and targets fall on matching sides;
3. sort each side by angle to the Z basis, then by distance;
4. pair side-for-side, then pair whatever is left over.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence, Tuple

from exceptions.exceptions import InvalidFrame

from .geometry import EPSILON, Vec3, is_finite, is_near_zero, normalize_safe
from .model import (
    AxisScores,
    Connector,
    ConnectorPair,
    Frame,
    PairingResult,
    Partition,
    SplitAxis,
)

if TYPE_CHECKING:
    from grill_pairing.ports import GeometryBackend


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------


def normalize_frame(frame: Frame, eps: float = EPSILON) -> Frame:
    basis_x = normalize_safe(frame.basis_x, eps)
    basis_y = normalize_safe(frame.basis_y, eps)
    basis_z = normalize_safe(frame.basis_z, eps)

    degenerate = [
        name
        for name, v in (("X", basis_x), ("Y", basis_y), ("Z", basis_z))
        if not is_finite(v) or is_near_zero(v, eps)
    ]
    if degenerate:
        raise InvalidFrame(
            f"Inlet coordinate system is invalid: basis {', '.join(degenerate)} is zero-length or non-finite.",
            context="normalize_frame",
        )

    return Frame(origin=frame.origin, basis_x=basis_x, basis_y=basis_y, basis_z=basis_z)


# ---------------------------------------------------------------------------
# Partitioning
# ---------------------------------------------------------------------------


def partition_by_plane_normal(
    connectors: Sequence[Connector],
    origin: Vec3,
    normal: Vec3,
    *,
    backend: "GeometryBackend",
    eps: float = EPSILON,
) -> Partition:
    """Split connectors by the side of the plane (origin, normal) they lie on.

    Points on the plane (within eps) go to `upper`. Input order is kept.
    """
    if not connectors:
        return Partition()

    signed = backend.signed_distances(
        positions=[c.position for c in connectors], origin=origin, normal=normal
    )

    upper: List[Connector] = []
    lower: List[Connector] = []
    for connector, s in zip(connectors, signed):
        if s >= -eps:
            upper.append(connector)
        else:
            lower.append(connector)
    return Partition(upper=tuple(upper), lower=tuple(lower))


def _alignment_score(outlets: Partition, targets: Partition) -> int:
    return min(len(outlets.upper), len(targets.upper)) + min(len(outlets.lower), len(targets.lower))


def select_split_axis(
    outlets: Sequence[Connector],
    targets: Sequence[Connector],
    frame: Frame,
    *,
    backend: "GeometryBackend",
    eps: float = EPSILON,
) -> Tuple[SplitAxis, AxisScores, Partition, Partition]:
    """Choose the splitting plane whose partitions line up best.

    Returns (axis, scores, outlet partition, target partition) for the
    chosen axis. Equal scores keep the Y-basis (ZX) split.
    """
    out_zx = partition_by_plane_normal(outlets, frame.origin, frame.basis_y, backend=backend, eps=eps)
    tgt_zx = partition_by_plane_normal(targets, frame.origin, frame.basis_y, backend=backend, eps=eps)

    out_zy = partition_by_plane_normal(outlets, frame.origin, frame.basis_x, backend=backend, eps=eps)
    tgt_zy = partition_by_plane_normal(targets, frame.origin, frame.basis_x, backend=backend, eps=eps)

    scores = AxisScores(zx=_alignment_score(out_zx, tgt_zx), zy=_alignment_score(out_zy, tgt_zy))

    if scores.zx >= scores.zy:
        return SplitAxis.ZX, scores, out_zx, tgt_zx
    return SplitAxis.ZY, scores, out_zy, tgt_zy


# ---------------------------------------------------------------------------
# Angular sort
# ---------------------------------------------------------------------------


def sort_by_angle_with_z(
    connectors: Sequence[Connector],
    origin: Vec3,
    basis_z: Vec3,
    *,
    backend: "GeometryBackend",
    eps: float = EPSILON,
) -> List[Connector]:
    """Order connectors by angle to `basis_z` seen from `origin`, then by distance."""
    if not connectors:
        return []

    angles, dists = backend.angles_and_distances(
        positions=[c.position for c in connectors], origin=origin, axis=basis_z, eps=eps
    )
    order = sorted(range(len(connectors)), key=lambda i: (float(angles[i]), float(dists[i])))
    return [connectors[i] for i in order]


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def merge_pairings(
    upper_outlets: Sequence[Connector],
    lower_outlets: Sequence[Connector],
    upper_targets: Sequence[Connector],
    lower_targets: Sequence[Connector],
) -> Tuple[List[ConnectorPair], List[Connector], List[Connector]]:
    """Pair side-for-side, then pair the leftovers (upper first, then lower).

    Returns (pairs, unmatched outlets, unmatched targets).
    """
    pairs: List[ConnectorPair] = []

    n_upper = min(len(upper_outlets), len(upper_targets))
    pairs.extend(ConnectorPair(upper_outlets[i], upper_targets[i]) for i in range(n_upper))

    n_lower = min(len(lower_outlets), len(lower_targets))
    pairs.extend(ConnectorPair(lower_outlets[i], lower_targets[i]) for i in range(n_lower))

    remaining_out = list(upper_outlets[n_upper:]) + list(lower_outlets[n_lower:])
    remaining_tgt = list(upper_targets[n_upper:]) + list(lower_targets[n_lower:])

    n_rest = min(len(remaining_out), len(remaining_tgt))
    pairs.extend(ConnectorPair(remaining_out[i], remaining_tgt[i]) for i in range(n_rest))

    return pairs, remaining_out[n_rest:], remaining_tgt[n_rest:]


# ---------------------------------------------------------------------------
# Orchestration Service
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConnectorPairingService:
    """Domain service: pair distribution box outlets with grill connectors."""

    backend: "GeometryBackend"
    epsilon: float = EPSILON

    def create_pairings(
        self,
        frame: Frame,
        outlets: Sequence[Connector],
        targets: Sequence[Connector],
    ) -> PairingResult:
        eps = self.epsilon
        unit = normalize_frame(frame, eps)

        axis, scores, out_part, tgt_part = select_split_axis(
            outlets, targets, unit, backend=self.backend, eps=eps
        )
        logging.debug(
            "Split axis %s (scores zx=%d, zy=%d); outlets %d/%d, targets %d/%d (upper/lower)",
            axis.value, scores.zx, scores.zy,
            len(out_part.upper), len(out_part.lower),
            len(tgt_part.upper), len(tgt_part.lower),
        )

        def _sorted(side: Sequence[Connector]) -> List[Connector]:
            return sort_by_angle_with_z(side, unit.origin, unit.basis_z, backend=self.backend, eps=eps)

        pairs, rest_out, rest_tgt = merge_pairings(
            _sorted(out_part.upper),
            _sorted(out_part.lower),
            _sorted(tgt_part.upper),
            _sorted(tgt_part.lower),
        )
        logging.debug(
            "Paired %d connector(s); %d outlet(s) and %d target(s) left unpaired",
            len(pairs), len(rest_out), len(rest_tgt),
        )

        return PairingResult(
            pairs=tuple(pairs),
            split_axis=axis,
            scores=scores,
            unmatched_outlets=tuple(rest_out),
            unmatched_targets=tuple(rest_tgt),
        )
