"""Filesystem adapters for grill pairing."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from exceptions.exceptions import StepPreconditionError
from grill_pairing.domain.geometry import Vec3
from grill_pairing.domain.mep import (
    ConnectorDomain,
    DuctSystemType,
    ElementCategory,
    FlowDirection,
    MepConnector,
    MepElement,
    MepModel,
)
from grill_pairing.domain.model import Connector, Frame, PairingResult
from grill_pairing.domain.routing import AutoRoutingSummary, RouteSegmentPlan


# ---------------------------------------------------------------------------
# MepModelSource Adapter
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class JsonMepModelSource:
    """Filesystem adapter: read elements, connectors and route names from JSON."""

    path: Path

    def load(self) -> MepModel:
        path = Path(self.path)
        if not path.is_file():
            raise StepPreconditionError(
                "MODEL_NOT_FOUND",
                f"Model file not found: {path}",
                context="JsonMepModelSource.load",
            )
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return model_from_dict(data)
        except (ValueError, KeyError, TypeError) as e:
            raise StepPreconditionError(
                "MODEL_PARSE_FAILED",
                f"Failed to parse model file {path}: {e}",
                context="JsonMepModelSource.load",
            ) from e


# ---------------------------------------------------------------------------
# RoutingReportStore Adapter
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class JsonRoutingReportStore:
    """Filesystem adapter: write the auto-routing summary as JSON."""

    path: Path

    def save(self, *, summary: AutoRoutingSummary) -> None:
        path = Path(self.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(summary_to_dict(summary), indent=2), encoding="utf-8")


# ---------------------------------------------------------------------------
# Parsing Helpers
# ---------------------------------------------------------------------------


def _vec(values: Any) -> Vec3:
    if values is None or len(values) != 3:
        raise ValueError(f"expected 3 coordinates, got {values!r}")
    return Vec3.of(values)


def _frame_from_dict(data: Optional[Dict[str, Any]]) -> Optional[Frame]:
    if not data:
        return None
    return Frame(
        origin=_vec(data["origin"]),
        basis_x=_vec(data["basis_x"]),
        basis_y=_vec(data["basis_y"]),
        basis_z=_vec(data["basis_z"]),
    )


def _connector_from_dict(data: Dict[str, Any], element_id: str) -> MepConnector:
    diameter = data.get("diameter")
    return MepConnector(
        id=str(data["id"]),
        element_id=element_id,
        origin=_vec(data["origin"]),
        domain=ConnectorDomain(data.get("domain", "hvac")),
        direction=FlowDirection(data.get("direction")),
        system_type=DuctSystemType(data.get("system_type")),
        system_name=data.get("system_name"),
        diameter=float(diameter) if diameter is not None else None,
        coordinate_system=_frame_from_dict(data.get("coordinate_system")),
    )


def model_from_dict(data: Dict[str, Any]) -> MepModel:
    elements: List[MepElement] = []
    for raw in data.get("elements", []) or []:
        element_id = str(raw["id"])
        elements.append(
            MepElement(
                id=element_id,
                category=ElementCategory(raw.get("category")),
                name=str(raw.get("name", "")),
                connectors=tuple(
                    _connector_from_dict(c, element_id) for c in raw.get("connectors", []) or []
                ),
            )
        )
    routes = tuple(str(r) for r in data.get("routes", []) or [])
    return MepModel(elements=tuple(elements), route_names=routes)


# ---------------------------------------------------------------------------
# Serialization Helpers
# ---------------------------------------------------------------------------


def _connector_to_dict(connector: Connector) -> Dict[str, Any]:
    return {"handle": connector.handle, "position": list(connector.position)}


def _pairing_to_dict(pairing: Optional[PairingResult]) -> Optional[Dict[str, Any]]:
    if pairing is None:
        return None
    return {
        "split_axis": pairing.split_axis.value,
        "scores": {"zx": pairing.scores.zx, "zy": pairing.scores.zy},
        "pairs": [
            {"outlet": _connector_to_dict(p.outlet), "target": _connector_to_dict(p.target)}
            for p in pairing.pairs
        ],
        "unmatched_outlets": [_connector_to_dict(c) for c in pairing.unmatched_outlets],
        "unmatched_targets": [_connector_to_dict(c) for c in pairing.unmatched_targets],
    }


def _segment_to_dict(segment: RouteSegmentPlan) -> Dict[str, Any]:
    return {
        "route_name": segment.route_name,
        "system_type": segment.system_type.value,
        "system_name": segment.system_name,
        "from_connector": segment.from_connector_id,
        "to_connector": segment.to_connector_id,
        "from_position": list(segment.from_position),
        "to_position": list(segment.to_position),
        "diameter": segment.diameter,
        "straight_length": segment.straight_length,
    }


def summary_to_dict(summary: AutoRoutingSummary) -> Dict[str, Any]:
    """Convert an AutoRoutingSummary to a JSON-serializable dictionary."""
    return {
        "status": summary.status.value,
        "device_id": summary.device_id,
        "inlet_id": summary.inlet_id,
        "pairing": _pairing_to_dict(summary.pairing),
        "segments": [_segment_to_dict(s) for s in summary.segments],
    }
