"""Domain layer: value objects, the pairing engine and connector discovery."""

from .geometry import EPSILON, Vec3
from .model import (
    AxisScores,
    Connector,
    ConnectorPair,
    Frame,
    PairingResult,
    Partition,
    SplitAxis,
)
from .mep import (
    ConnectorDomain,
    DuctSystemType,
    ElementCategory,
    FlowDirection,
    MepConnector,
    MepElement,
    MepModel,
)
from .routing import (
    AutoRoutingSummary,
    RouteSegmentPlan,
    RoutingStatus,
    next_route_name_index,
    plan_route_segments,
)
from .discovery import (
    find_supply_air_grills,
    get_distribution_box_connectors,
    is_distribution_box,
    is_supply_air_grill,
)
from .services import (
    ConnectorPairingService,
    merge_pairings,
    normalize_frame,
    partition_by_plane_normal,
    select_split_axis,
    sort_by_angle_with_z,
)

__all__ = [
    # Value Objects
    "EPSILON",
    "Vec3",
    "Frame",
    "Connector",
    "ConnectorPair",
    "Partition",
    "SplitAxis",
    "AxisScores",
    "PairingResult",
    # MEP model
    "ConnectorDomain",
    "FlowDirection",
    "DuctSystemType",
    "ElementCategory",
    "MepConnector",
    "MepElement",
    "MepModel",
    # Routing
    "RoutingStatus",
    "RouteSegmentPlan",
    "AutoRoutingSummary",
    "next_route_name_index",
    "plan_route_segments",
    # Discovery
    "is_distribution_box",
    "get_distribution_box_connectors",
    "is_supply_air_grill",
    "find_supply_air_grills",
    # Domain Services
    "normalize_frame",
    "partition_by_plane_normal",
    "select_split_axis",
    "sort_by_angle_with_z",
    "merge_pairings",
    "ConnectorPairingService",
]
