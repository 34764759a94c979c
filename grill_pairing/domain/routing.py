from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from .geometry import Vec3, distance
from .mep import DuctSystemType, MepConnector
from .model import Frame, PairingResult


class RoutingStatus(str, Enum):
    OK = "ok"
    DEVICE_NOT_FOUND = "device_not_found"
    MISSING_BOX_CONNECTORS = "missing_box_connectors"
    NO_MATCHING_GRILLS = "no_matching_grills"
    INVALID_DEVICE = "invalid_device"
    INVALID_FRAME = "invalid_frame"


@dataclass(frozen=True)
class RouteSegmentPlan:
    """One outlet -> grill segment handed to the router."""

    route_name: str
    system_type: DuctSystemType
    system_name: Optional[str]
    from_connector_id: str
    to_connector_id: str
    from_position: Vec3
    to_position: Vec3
    diameter: Optional[float]
    straight_length: float


@dataclass(frozen=True)
class AutoRoutingSummary:
    status: RoutingStatus
    device_id: str
    pairing: Optional[PairingResult] = None
    segments: Tuple[RouteSegmentPlan, ...] = field(default_factory=tuple)
    inlet_id: Optional[str] = None
    frame: Optional[Frame] = None


def next_route_name_index(existing_names: Iterable[str], base: str) -> int:
    pattern = re.compile(r"^" + re.escape(base or "") + r"_(\d+)$")
    last = 0
    for name in existing_names:
        m = pattern.match(name)
        if m:
            last = max(last, int(m.group(1)))
    return last + 1


def plan_route_segments(
    pairs: Sequence[Tuple[MepConnector, MepConnector]],
    existing_route_names: Iterable[str],
    default_base: str = "Duct",
) -> List[RouteSegmentPlan]:
    """Name a route per (outlet, grill) pair and describe its segment.

    Route names are `<system name>_<n>` with `n` continuing after the
    highest existing index for that base. Pairs whose outlet has no duct
    system classification are skipped.
    """
    names = list(existing_route_names)
    segments: List[RouteSegmentPlan] = []

    for outlet, grill in pairs:
        if outlet.system_type is DuctSystemType.UNDEFINED:
            logging.warning("Skipping %s -> %s: outlet has no duct system classification", outlet.id, grill.id)
            continue

        base = outlet.system_name or default_base
        route_name = f"{base}_{next_route_name_index(names, base)}"
        names.append(route_name)

        segments.append(
            RouteSegmentPlan(
                route_name=route_name,
                system_type=outlet.system_type,
                system_name=outlet.system_name,
                from_connector_id=outlet.id,
                to_connector_id=grill.id,
                from_position=outlet.origin,
                to_position=grill.origin,
                diameter=outlet.diameter,
                straight_length=distance(outlet.origin, grill.origin),
            )
        )

    return segments
