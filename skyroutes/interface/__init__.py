"""Mini README: Outer interfaces (web/CLI helpers) for SkyRoutes.

Exports the FastAPI application factory together with the request models
and the payload builder the CLI reuses.
"""

from .schemas import AirportRecord, ItineraryRequest, RouteRecord
from .web_app import create_application, itinerary_payload, run_request

__all__ = [
    "AirportRecord",
    "ItineraryRequest",
    "RouteRecord",
    "create_application",
    "itinerary_payload",
    "run_request",
]
