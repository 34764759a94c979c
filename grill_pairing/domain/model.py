from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Tuple

from .geometry import Vec3


@dataclass(frozen=True)
class Frame:
    """Local coordinate system of the inlet connector.

    Basis vectors may be of any scale; orthogonality is assumed, not checked.
    """

    origin: Vec3
    basis_x: Vec3
    basis_y: Vec3
    basis_z: Vec3

    @classmethod
    def standard(cls, origin: Vec3 = Vec3(0.0, 0.0, 0.0)) -> "Frame":
        return cls(
            origin=origin,
            basis_x=Vec3(1.0, 0.0, 0.0),
            basis_y=Vec3(0.0, 1.0, 0.0),
            basis_z=Vec3(0.0, 0.0, 1.0),
        )


@dataclass(frozen=True)
class Connector:
    """Value object: opaque handle plus the connector position."""

    handle: Hashable
    position: Vec3


@dataclass(frozen=True)
class Partition:
    """Connectors split by a plane through the frame origin."""

    upper: Tuple[Connector, ...] = ()
    lower: Tuple[Connector, ...] = ()


@dataclass(frozen=True)
class ConnectorPair:
    outlet: Connector
    target: Connector


class SplitAxis(str, Enum):
    # Plane normal is the frame Y basis (splits along the Z/X plane).
    ZX = "zx"
    # Plane normal is the frame X basis (splits along the Z/Y plane).
    ZY = "zy"


@dataclass(frozen=True)
class AxisScores:
    zx: int
    zy: int


@dataclass(frozen=True)
class PairingResult:
    """Outcome of one pairing call.

    `pairs` is the ordered, injective outlet -> target pairing. Connectors
    left over after the final merge step are listed separately.
    """

    pairs: Tuple[ConnectorPair, ...]
    split_axis: SplitAxis
    scores: AxisScores
    unmatched_outlets: Tuple[Connector, ...] = field(default_factory=tuple)
    unmatched_targets: Tuple[Connector, ...] = field(default_factory=tuple)

    def handle_pairs(self) -> Tuple[Tuple[Hashable, Hashable], ...]:
        return tuple((p.outlet.handle, p.target.handle) for p in self.pairs)
