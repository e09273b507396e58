"""Mini README: Greedy nearest-unvisited-waypoint sequencing.

Structure:
    * NearestWaypointStrategy - always flies to the closest remaining waypoint.

From the current airport every remaining waypoint is searched; the one with
the shortest leg is visited next, ties going to the waypoint listed first.
Once no waypoints remain, a final leg reaches the destination. The order is
a greedy approximation and is not backtracked; an unreachable leg ends the
plan with an unreachable itinerary.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ...logging_utils import get_logger
from ...routing import AirportId, PathResult, RouteGraph, find_path
from ..base import ItineraryResult, SequencingStrategy
from ..registry import REGISTRY

LOGGER = get_logger(__name__)


class NearestWaypointStrategy(SequencingStrategy):
    """Visit waypoints in nearest-first order."""

    strategy_name = "nearest_waypoint"
    description = "Greedy: repeatedly fly to the closest unvisited waypoint."

    def plan(
        self,
        graph: RouteGraph,
        origin: AirportId,
        destination: AirportId,
        waypoints: Sequence[AirportId],
        excluded: Iterable[AirportId],
    ) -> ItineraryResult:
        excluded = frozenset(excluded)
        remaining: List[AirportId] = list(waypoints)
        current = origin
        legs: List[PathResult] = []
        visit_order: List[AirportId] = []

        while remaining:
            best_waypoint: Optional[AirportId] = None
            best_leg: Optional[PathResult] = None
            for waypoint in remaining:
                leg = find_path(graph, current, waypoint, excluded)
                if best_leg is None or leg.distance < best_leg.distance:
                    best_waypoint, best_leg = waypoint, leg

            if not best_leg.reachable:
                LOGGER.info(
                    "No remaining waypoint reachable from %s (%s left)", current, len(remaining)
                )
                return ItineraryResult.unreachable(self.strategy_name)

            LOGGER.debug("Next waypoint %s at %.3f km from %s", best_waypoint, best_leg.distance, current)
            legs.append(best_leg)
            visit_order.append(best_waypoint)
            remaining.remove(best_waypoint)
            current = best_waypoint

        final_leg = find_path(graph, current, destination, excluded)
        if not final_leg.reachable:
            LOGGER.info("Destination %s unreachable from %s", destination, current)
            return ItineraryResult.unreachable(self.strategy_name)
        legs.append(final_leg)
        return self.join_legs(legs, visit_order)


REGISTRY.register(NearestWaypointStrategy)
