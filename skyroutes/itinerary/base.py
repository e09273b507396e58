"""Mini README: Abstractions shared by waypoint sequencing strategies.

Structure:
    * ItineraryResult - stitched multi-leg path with per-leg breakdown.
    * SequencingStrategy - abstract interface implemented by strategies.

A strategy decides the order in which mandatory waypoints are visited and
asks the single-pair search for each leg. Joining legs into one path is
shared here so every strategy trims junction airports the same way: the
head of each leg after the first is dropped, final leg included.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from ..logging_utils import get_logger
from ..routing import AirportId, PathResult, RouteGraph

LOGGER = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ItineraryResult:
    """Complete itinerary from origin to destination."""

    path: Tuple[AirportId, ...]
    distance: float
    strategy: str
    legs: Tuple[PathResult, ...] = field(default_factory=tuple)
    visit_order: Tuple[AirportId, ...] = field(default_factory=tuple)

    @classmethod
    def unreachable(cls, strategy: str) -> "ItineraryResult":
        return cls(path=(), distance=math.inf, strategy=strategy)

    @property
    def reachable(self) -> bool:
        return bool(self.path) and math.isfinite(self.distance)

    def as_dict(self, graph: RouteGraph, *, decimals: int = 1) -> Dict[str, object]:
        """Expand identifiers into airport fields for presentation."""

        if not self.reachable:
            return {
                "strategy": self.strategy,
                "airport_ids": [],
                "path": [],
                "distance_km": None,
                "distance_label": None,
                "visit_order": [],
                "legs": [],
            }
        return {
            "strategy": self.strategy,
            "airport_ids": list(self.path),
            "path": [graph.airport(airport_id).as_dict() for airport_id in self.path],
            "distance_km": self.distance,
            "distance_label": f"{self.distance:.{decimals}f} km",
            "visit_order": list(self.visit_order),
            "legs": [
                {"airport_ids": list(leg.path), "distance_km": leg.distance}
                for leg in self.legs
            ],
        }


class SequencingStrategy(ABC):
    """Base interface for multi-stop itinerary strategies."""

    strategy_name: str = "generic"
    description: str = ""

    @abstractmethod
    def plan(
        self,
        graph: RouteGraph,
        origin: AirportId,
        destination: AirportId,
        waypoints: Sequence[AirportId],
        excluded: Iterable[AirportId],
    ) -> ItineraryResult:
        """Visit every waypoint between origin and destination."""

    def join_legs(self, legs: Sequence[PathResult], visit_order: Sequence[AirportId] = ()) -> ItineraryResult:
        """Stitch consecutive legs, dropping each repeated junction airport.

        A single unreachable leg makes the whole itinerary unreachable.
        """

        if not legs or any(not leg.reachable for leg in legs):
            return ItineraryResult.unreachable(self.strategy_name)

        path: List[AirportId] = []
        distance = 0.0
        for leg in legs:
            path.extend(leg.path[1:] if path else leg.path)
            distance += leg.distance
        LOGGER.debug(
            "Joined %s legs into %s airports (%.3f km) using %s",
            len(legs),
            len(path),
            distance,
            self.strategy_name,
        )
        return ItineraryResult(
            path=tuple(path),
            distance=distance,
            strategy=self.strategy_name,
            legs=tuple(legs),
            visit_order=tuple(visit_order),
        )

    def metadata(self) -> Dict[str, str]:
        """Return descriptive metadata for listings."""

        return {"strategy": self.strategy_name, "description": self.description}
