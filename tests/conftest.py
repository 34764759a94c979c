from __future__ import annotations

import json
from pathlib import Path

import pytest

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
from grill_pairing.domain.model import Frame
from grill_pairing.domain.services import ConnectorPairingService
from grill_pairing.infrastructure.numpy_backend import NumpyGeometryBackend
from grill_pairing.infrastructure.python_backend import PythonGeometryBackend


STANDARD_CS = {
    "origin": [0.0, 0.0, 0.0],
    "basis_x": [1.0, 0.0, 0.0],
    "basis_y": [0.0, 1.0, 0.0],
    "basis_z": [0.0, 0.0, 1.0],
}


def _connector(cid, direction, origin, system="supply_air", name="Supply Air", domain="hvac", **extra):
    data = {
        "id": cid,
        "domain": domain,
        "direction": direction,
        "system_type": system,
        "system_name": name,
        "diameter": 0.2,
        "origin": list(origin),
    }
    data.update(extra)
    return data


@pytest.fixture(params=[NumpyGeometryBackend, PythonGeometryBackend], ids=["numpy", "python"])
def backend(request):
    return request.param()


@pytest.fixture
def pairing_service(backend) -> ConnectorPairingService:
    return ConnectorPairingService(backend=backend)


@pytest.fixture
def model_dict() -> dict:
    """Distribution box at the origin with two outlets and two supply grills."""
    return {
        "elements": [
            {
                "id": "ADB-1",
                "category": "mechanical_equipment",
                "name": "Air distribution box",
                "connectors": [
                    _connector("ADB-1:in", "in", (0, 0, 0), coordinate_system=dict(STANDARD_CS)),
                    _connector("ADB-1:out1", "out", (1, 0, 1)),
                    _connector("ADB-1:out2", "out", (1, 0, -1)),
                ],
            },
            {
                "id": "G1",
                "category": "duct_terminal",
                "connectors": [_connector("G1:c", "in", (2, 0, 1))],
            },
            {
                "id": "G2",
                "category": "duct_terminal",
                "connectors": [_connector("G2:c", "in", (2, 0, -1))],
            },
            {
                "id": "R1",
                "category": "duct_terminal",
                "connectors": [_connector("R1:c", "out", (5, 5, 5), system="return_air", name="Return Air")],
            },
        ],
        "routes": ["Supply Air_1"],
    }


@pytest.fixture
def model_file(tmp_path: Path, model_dict: dict) -> Path:
    path = tmp_path / "model.json"
    path.write_text(json.dumps(model_dict), encoding="utf-8")
    return path


@pytest.fixture
def box_model() -> MepModel:
    """Same layout as `model_dict`, built directly from domain objects."""

    def hvac(cid, element_id, direction, origin, system=DuctSystemType.SUPPLY_AIR, name="Supply Air", frame=None):
        return MepConnector(
            id=cid,
            element_id=element_id,
            origin=Vec3(*origin),
            domain=ConnectorDomain.HVAC,
            direction=direction,
            system_type=system,
            system_name=name,
            diameter=0.2,
            coordinate_system=frame,
        )

    box = MepElement(
        id="ADB-1",
        category=ElementCategory.MECHANICAL_EQUIPMENT,
        connectors=(
            hvac("ADB-1:in", "ADB-1", FlowDirection.IN, (0, 0, 0), frame=Frame.standard()),
            hvac("ADB-1:out1", "ADB-1", FlowDirection.OUT, (1, 0, 1)),
            hvac("ADB-1:out2", "ADB-1", FlowDirection.OUT, (1, 0, -1)),
        ),
    )
    g1 = MepElement(
        id="G1",
        category=ElementCategory.DUCT_TERMINAL,
        connectors=(hvac("G1:c", "G1", FlowDirection.IN, (2, 0, 1)),),
    )
    g2 = MepElement(
        id="G2",
        category=ElementCategory.DUCT_TERMINAL,
        connectors=(hvac("G2:c", "G2", FlowDirection.IN, (2, 0, -1)),),
    )
    return MepModel(elements=(box, g1, g2), route_names=("Supply Air_1",))
