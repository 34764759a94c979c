from collections import Counter
from typing import List, Optional

from grill_pairing.domain.discovery import is_distribution_box
from grill_pairing.domain.geometry import is_finite
from grill_pairing.domain.mep import FlowDirection, MepElement, MepModel
from grill_pairing.domain.model import Frame
from validation.validation_helpers import ValidationIssue


def _frame_is_finite(frame: Optional[Frame]) -> bool:
    if frame is None:
        return True
    return all(is_finite(v) for v in (frame.origin, frame.basis_x, frame.basis_y, frame.basis_z))

def _has_hvac_outlet(element: MepElement) -> bool:
    return any(c.is_hvac and c.direction is FlowDirection.OUT for c in element.connectors)

def validate_unique_ids(model: MepModel) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    element_counter = Counter(e.id for e in model.elements)
    connector_counter = Counter(c.id for e in model.elements for c in e.connectors)

    for element_id, n in element_counter.items():
        if n > 1:
            issues.append(ValidationIssue(element_id, "DUPLICATE_ELEMENT_ID", "error", f"Duplicate element id: {element_id} ({n}x)"))
    for connector_id, n in connector_counter.items():
        if n > 1:
            issues.append(ValidationIssue(connector_id, "DUPLICATE_CONNECTOR_ID", "error", f"Duplicate connector id: {connector_id} ({n}x)"))
    return issues

def validate_positions(model: MepModel) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []

    for element in model.elements:
        # Only distribution boxes need a frame on their inlet; grills flow in too.
        box_candidate = is_distribution_box(element) and _has_hvac_outlet(element)
        for c in element.connectors:
            path = f"{element.id}/{c.id}"
            if not is_finite(c.origin):
                issues.append(ValidationIssue(path, "NON_FINITE_POSITION", "error", f"Connector {c.id} has a non-finite origin: {tuple(c.origin)}"))
            if not _frame_is_finite(c.coordinate_system):
                issues.append(ValidationIssue(path, "NON_FINITE_FRAME", "error", f"Connector {c.id} has a coordinate system with non-finite values"))
            if box_candidate and c.direction is FlowDirection.IN and c.is_hvac and c.coordinate_system is None:
                issues.append(ValidationIssue(path, "MISSING_COORDINATE_SYSTEM", "warning", f"Inlet connector {c.id} has no coordinate system"))
    return issues

def validate_model(model: MepModel) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    issues.extend(validate_unique_ids(model))
    issues.extend(validate_positions(model))
    return issues
