"""Application layer: use cases for supply-air grill auto-routing."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from exceptions.exceptions import InvalidFrame
from grill_pairing.domain.discovery import (
    find_supply_air_grills,
    get_distribution_box_connectors,
    is_distribution_box,
)
from grill_pairing.domain.mep import MepConnector
from grill_pairing.domain.model import Connector
from grill_pairing.domain.routing import AutoRoutingSummary, RoutingStatus, plan_route_segments
from grill_pairing.domain.services import ConnectorPairingService
from grill_pairing.ports import MepModelSource, RoutingReportStore


def _as_connectors(connectors: List[MepConnector]) -> List[Connector]:
    return [Connector(handle=c.id, position=c.origin) for c in connectors]


class AutoRouteSupplyAirGrillsUseCase:
    """Use case: pair a distribution box's outlets with supply-air grills and plan routes.

    Orchestrates:
    - Model loading (via MepModelSource port)
    - Connector discovery and pairing (domain)
    - Route segment planning (domain)
    - Reporting (via optional RoutingReportStore port)
    """

    def __init__(
        self,
        *,
        model_source: MepModelSource,
        pairing_service: ConnectorPairingService,
        report_store: Optional[RoutingReportStore] = None,
        default_route_name_base: str = "Duct",
        require_supply_air: bool = True,
    ) -> None:
        self._model_source = model_source
        self._pairing_service = pairing_service
        self._report_store = report_store
        self._default_route_name_base = default_route_name_base
        self._require_supply_air = require_supply_air

    def run(self, *, device_id: str) -> AutoRoutingSummary:
        try:
            summary = self._route(device_id)
        except InvalidFrame:
            # Record the failure before the error propagates.
            self._save(AutoRoutingSummary(status=RoutingStatus.INVALID_FRAME, device_id=device_id))
            raise
        self._save(summary)
        return summary

    def _save(self, summary: AutoRoutingSummary) -> None:
        if self._report_store is not None:
            self._report_store.save(summary=summary)

    def _route(self, device_id: str) -> AutoRoutingSummary:
        model = self._model_source.load()

        # Step 1: Distribution box
        box = model.find_element(device_id)
        if box is None:
            logging.error("Device not found: %s", device_id)
            return AutoRoutingSummary(status=RoutingStatus.DEVICE_NOT_FOUND, device_id=device_id)
        if not is_distribution_box(box):
            logging.error("Element %s (%s) is not an air distribution box", device_id, box.category.value)
            return AutoRoutingSummary(status=RoutingStatus.INVALID_DEVICE, device_id=device_id)

        # Step 2: Inlet and outlets
        inlet, outlets = get_distribution_box_connectors(box)
        if inlet is None or not outlets:
            logging.error("Distribution box %s must have an inlet and at least one outlet connector", device_id)
            return AutoRoutingSummary(status=RoutingStatus.MISSING_BOX_CONNECTORS, device_id=device_id)

        # Step 3: Grills on the same duct system
        grills = find_supply_air_grills(model, inlet, require_supply_air=self._require_supply_air)
        if not grills:
            logging.info("No supply air grills found with duct system %s", inlet.system_type.value)
            return AutoRoutingSummary(
                status=RoutingStatus.NO_MATCHING_GRILLS, device_id=device_id, inlet_id=inlet.id
            )
        logging.info("Device %s: %d outlet(s), %d candidate grill(s)", device_id, len(outlets), len(grills))

        # Step 4: Pairing
        frame = inlet.coordinate_system
        if frame is None:
            raise InvalidFrame(
                f"Inlet connector {inlet.id} has no coordinate system.",
                code="MISSING_COORDINATE_SYSTEM",
                context="AutoRouteSupplyAirGrillsUseCase",
            )
        pairing = self._pairing_service.create_pairings(frame, _as_connectors(outlets), _as_connectors(grills))

        # Step 5: Route segments
        by_id: Dict[str, MepConnector] = {c.id: c for c in outlets + grills}
        pairs = [(by_id[p.outlet.handle], by_id[p.target.handle]) for p in pairing.pairs]
        segments = plan_route_segments(pairs, model.route_names, self._default_route_name_base)

        if pairing.unmatched_outlets:
            logging.warning("%d outlet(s) left without a grill", len(pairing.unmatched_outlets))
        logging.info("Planned %d route segment(s) for device %s", len(segments), device_id)

        return AutoRoutingSummary(
            status=RoutingStatus.OK,
            device_id=device_id,
            pairing=pairing,
            segments=tuple(segments),
            inlet_id=inlet.id,
            frame=frame,
        )
