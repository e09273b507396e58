"""Mini README: Entry point for multi-stop itinerary planning.

Structure:
    * DEFAULT_STRATEGY - identifier of the built-in greedy strategy.
    * plan_itinerary - resolve a strategy by name and plan one itinerary.

Waypoints are de-duplicated keeping their first position; that order is the
tie-break order for strategies that compare candidates. Pass a list or tuple
rather than a set when repeatable tie-breaking across processes matters.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..logging_utils import get_logger
from ..routing import AirportId, RouteGraph
from .base import ItineraryResult
from .registry import REGISTRY, StrategyRegistry

LOGGER = get_logger(__name__)

DEFAULT_STRATEGY = "nearest_waypoint"


def plan_itinerary(
    graph: RouteGraph,
    origin: AirportId,
    destination: AirportId,
    waypoints: Iterable[AirportId] = (),
    excluded: Iterable[AirportId] = (),
    *,
    strategy: Optional[str] = None,
    registry: StrategyRegistry = REGISTRY,
) -> ItineraryResult:
    """Plan origin -> every waypoint -> destination avoiding ``excluded``.

    Raises ``KeyError`` when ``strategy`` names no registered strategy. An
    itinerary that cannot be completed is returned with an empty path and an
    infinite distance.
    """

    sequencer = registry.create(strategy or DEFAULT_STRATEGY)
    ordered_waypoints = tuple(dict.fromkeys(waypoints))
    excluded_set = frozenset(excluded)
    LOGGER.info(
        "Planning %s -> %s with %s waypoint(s), %s excluded, strategy=%s",
        origin,
        destination,
        len(ordered_waypoints),
        len(excluded_set),
        sequencer.strategy_name,
    )
    result = sequencer.plan(graph, origin, destination, ordered_waypoints, excluded_set)
    if result.reachable:
        LOGGER.info("Itinerary found: %s airports, %.3f km", len(result.path), result.distance)
    else:
        LOGGER.info("No itinerary found for %s -> %s", origin, destination)
    return result
