"""MEP element/connector model consumed by connector discovery.

This is the host-side object model. The pairing engine never sees it: the
use case converts connectors into `Connector(handle, position)` values.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .geometry import Vec3
from .model import Frame


class _LenientEnum(str, Enum):
    """String enum: case-insensitive lookup, unknown values map to UNDEFINED/OTHER."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        for name in ("UNDEFINED", "OTHER"):
            if name in cls.__members__:
                return cls.__members__[name]
        return None


class ConnectorDomain(_LenientEnum):
    HVAC = "hvac"
    PIPING = "piping"
    ELECTRICAL = "electrical"
    UNDEFINED = "undefined"


class FlowDirection(_LenientEnum):
    IN = "in"
    OUT = "out"
    BIDIRECTIONAL = "bidirectional"
    UNDEFINED = "undefined"


class DuctSystemType(_LenientEnum):
    SUPPLY_AIR = "supply_air"
    RETURN_AIR = "return_air"
    EXHAUST_AIR = "exhaust_air"
    OTHER_AIR = "other_air"
    UNDEFINED = "undefined"


class ElementCategory(_LenientEnum):
    DUCT_TERMINAL = "duct_terminal"
    DUCT_ACCESSORY = "duct_accessory"
    MECHANICAL_EQUIPMENT = "mechanical_equipment"
    OTHER = "other"


@dataclass(frozen=True)
class MepConnector:
    id: str
    element_id: str
    origin: Vec3
    domain: ConnectorDomain = ConnectorDomain.HVAC
    direction: FlowDirection = FlowDirection.UNDEFINED
    system_type: DuctSystemType = DuctSystemType.UNDEFINED
    system_name: Optional[str] = None
    diameter: Optional[float] = None
    coordinate_system: Optional[Frame] = None

    @property
    def is_hvac(self) -> bool:
        return self.domain is ConnectorDomain.HVAC


@dataclass(frozen=True)
class MepElement:
    id: str
    category: ElementCategory
    connectors: Tuple[MepConnector, ...] = ()
    name: str = ""


@dataclass(frozen=True)
class MepModel:
    elements: Tuple[MepElement, ...] = ()
    route_names: Tuple[str, ...] = field(default_factory=tuple)

    def find_element(self, element_id: str) -> Optional[MepElement]:
        for element in self.elements:
            if element.id == element_id:
                return element
        return None
