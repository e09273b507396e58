"""Mini README: Route-graph primitives for itinerary planning.

Exports the flat records, the great-circle heuristic, the graph builder and
the single-pair A* search. The itinerary package composes these into
multi-stop plans.
"""

from .geodesy import EARTH_RADIUS_KM, airport_distance_km, haversine_km
from .graph import RouteGraph, build_graph
from .pathfinder import PathResult, find_path
from .records import Airport, AirportId, MissingAirport, Route

__all__ = [
    "Airport",
    "AirportId",
    "EARTH_RADIUS_KM",
    "MissingAirport",
    "PathResult",
    "Route",
    "RouteGraph",
    "airport_distance_km",
    "build_graph",
    "find_path",
    "haversine_km",
]
