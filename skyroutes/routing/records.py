"""Mini README: Flat airport and route records consumed by the graph builder.

Structure:
    * Airport - immutable airport description with coordinates in degrees.
    * Route - undirected weighted connection between two airports.
    * MissingAirport - report of a route dropped because an endpoint is unknown.

Records are plain frozen dataclasses so they can be shared freely between
planning requests. Validation of raw payloads happens at the interface
boundary, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

AirportId = str


@dataclass(slots=True, frozen=True)
class Airport:
    """Airport node with display fields and coordinates."""

    airport_id: AirportId
    name: str
    city: str
    country: str
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def as_dict(self) -> Dict[str, object]:
        """Export the airport using the field names of the source dataset."""

        return {
            "id": self.airport_id,
            "name": self.name,
            "city": self.city,
            "country": self.country,
            "lat": self.latitude,
            "lng": self.longitude,
        }


@dataclass(slots=True, frozen=True)
class Route:
    """Undirected route; distance is expected to be non-negative kilometres."""

    origin_id: AirportId
    destination_id: AirportId
    distance: float


@dataclass(slots=True, frozen=True)
class MissingAirport:
    """A route skipped during graph construction."""

    route_position: int
    route: Route
    missing_ids: Tuple[AirportId, ...]

    def describe(self) -> str:
        missing = ", ".join(self.missing_ids)
        return (
            f"Route #{self.route_position} {self.route.origin_id}->{self.route.destination_id}"
            f" references unknown airport(s): {missing}"
        )
