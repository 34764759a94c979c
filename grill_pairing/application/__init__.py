"""Application layer: use-cases for the grill_pairing bounded context."""

from .use_case import AutoRouteSupplyAirGrillsUseCase

__all__ = ["AutoRouteSupplyAirGrillsUseCase"]
