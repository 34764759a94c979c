"""Entrypoint: create_pairings function for callers that bring their own connectors."""
from __future__ import annotations

from typing import Dict, Sequence, Type

from exceptions.exceptions import StepPreconditionError
from grill_pairing.domain.geometry import EPSILON
from grill_pairing.domain.model import Connector, Frame, PairingResult
from grill_pairing.domain.services import ConnectorPairingService
from grill_pairing.infrastructure.numpy_backend import NumpyGeometryBackend
from grill_pairing.infrastructure.python_backend import PythonGeometryBackend
from grill_pairing.ports import GeometryBackend

GEOMETRY_BACKENDS: Dict[str, Type[GeometryBackend]] = {
    "numpy": NumpyGeometryBackend,
    "python": PythonGeometryBackend,
}


def geometry_backend(name: str) -> GeometryBackend:
    try:
        return GEOMETRY_BACKENDS[name]()
    except KeyError:
        raise StepPreconditionError(
            "UNKNOWN_BACKEND",
            f"Unknown geometry backend {name!r} (expected one of: {', '.join(GEOMETRY_BACKENDS)})",
            context="geometry_backend",
        ) from None


def create_pairings(
    frame: Frame,
    outlets: Sequence[Connector],
    targets: Sequence[Connector],
    *,
    epsilon: float = EPSILON,
    backend: str = "numpy",
) -> PairingResult:
    """Pair outlet connectors with target connectors around the inlet frame.

    Args:
        frame: Inlet coordinate system (basis vectors of any scale).
        outlets: Distribution box outlet connectors.
        targets: Candidate grill connectors.
        epsilon: Length / plane tolerance.
        backend: Geometry backend name, "numpy" or "python".

    Returns:
        PairingResult with the ordered pairs and the unpaired leftovers.

    Raises:
        InvalidFrame: if a basis vector of `frame` is (near-)zero or non-finite.
    """
    service = ConnectorPairingService(backend=geometry_backend(backend), epsilon=epsilon)
    return service.create_pairings(frame, outlets, targets)
