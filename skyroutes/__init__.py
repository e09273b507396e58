"""Mini README: Core package initializer for the SkyRoutes planner.

Exposes the three planning operations (``build_graph``, ``find_path`` and
``plan_itinerary``) plus the logger factory so callers do not need to know
the module structure. The web interface is not imported here, keeping the
planning core free of FastAPI at import time.
"""

from .itinerary import ItineraryResult, plan_itinerary
from .logging_utils import get_logger
from .routing import Airport, PathResult, Route, RouteGraph, build_graph, find_path

__all__ = [
    "Airport",
    "ItineraryResult",
    "PathResult",
    "Route",
    "RouteGraph",
    "build_graph",
    "find_path",
    "get_logger",
    "plan_itinerary",
]
