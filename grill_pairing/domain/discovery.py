"""Connector discovery on the MEP model (distribution box and grills)."""
from __future__ import annotations

from typing import List, Optional, Tuple

from .mep import DuctSystemType, ElementCategory, FlowDirection, MepConnector, MepElement, MepModel

DISTRIBUTION_BOX_CATEGORIES = frozenset({ElementCategory.DUCT_ACCESSORY, ElementCategory.MECHANICAL_EQUIPMENT})


def is_distribution_box(element: MepElement) -> bool:
    return element.category in DISTRIBUTION_BOX_CATEGORIES


def get_distribution_box_connectors(
    element: MepElement,
) -> Tuple[Optional[MepConnector], List[MepConnector]]:
    """Return (inlet, outlets) among the element's HVAC connectors.

    If several connectors flow in, the last one is the inlet.
    """
    inlet: Optional[MepConnector] = None
    outlets: List[MepConnector] = []

    for connector in element.connectors:
        if not connector.is_hvac:
            continue
        if connector.direction is FlowDirection.IN:
            inlet = connector
        elif connector.direction is FlowDirection.OUT:
            outlets.append(connector)

    return inlet, outlets


def is_supply_air_grill(element: MepElement) -> bool:
    return any(
        c.is_hvac and c.system_type is DuctSystemType.SUPPLY_AIR
        for c in element.connectors
    )


def find_supply_air_grills(
    model: MepModel,
    reference: MepConnector,
    *,
    require_supply_air: bool = True,
) -> List[MepConnector]:
    """Grill connectors sharing the reference connector's duct system type.

    At most one connector (the first match) is taken per terminal. The
    reference connector's own element is never a candidate.
    """
    system_type = reference.system_type
    grills: List[MepConnector] = []

    for element in model.elements:
        if element.category is not ElementCategory.DUCT_TERMINAL:
            continue
        if element.id == reference.element_id:
            continue
        if require_supply_air and not is_supply_air_grill(element):
            continue

        for connector in element.connectors:
            if connector.is_hvac and connector.system_type is system_type:
                grills.append(connector)
                break

    return grills
