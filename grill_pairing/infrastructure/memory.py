"""In-memory adapters for grill pairing."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from grill_pairing.domain.mep import MepModel
from grill_pairing.domain.routing import AutoRoutingSummary


@dataclass(frozen=True)
class StaticMepModelSource:
    """Serve an already loaded (and validated) model."""

    model: MepModel

    def load(self) -> MepModel:
        return self.model


@dataclass
class InMemoryRoutingReportStore:
    summaries: List[AutoRoutingSummary] = field(default_factory=list)

    def save(self, *, summary: AutoRoutingSummary) -> None:
        self.summaries.append(summary)
