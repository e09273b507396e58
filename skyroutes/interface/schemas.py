"""Mini README: Pydantic models validating planning requests at the boundary.

Structure:
    * AirportRecord - airport payload using the dataset field names.
    * RouteRecord - route payload using the dataset field names.
    * ItineraryRequest - records plus origin, destination, stops and avoids.

The planning core trusts its inputs; these models are where coordinates,
distances and airport roles are checked. An airport may hold only one role
in a request (origin, destination, stop or avoid).
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from ..routing import Airport, Route


def _coerce_identifier(value: object) -> object:
    # Source datasets often store numeric identifiers.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value)) if float(value).is_integer() else str(value)
    return value


class AirportRecord(BaseModel):
    """Airport as stored by the surrounding application."""

    id: str = Field(..., min_length=1)
    name: str = ""
    city: str = ""
    country: str = ""
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    @field_validator("id", mode="before")
    def _stringify_id(cls, value: object) -> object:
        return _coerce_identifier(value)

    def to_airport(self) -> Airport:
        return Airport(
            airport_id=self.id,
            name=self.name,
            city=self.city,
            country=self.country,
            latitude=self.lat,
            longitude=self.lng,
        )


class RouteRecord(BaseModel):
    """Undirected route between two airports."""

    id_origin: str = Field(..., min_length=1)
    id_destination: str = Field(..., min_length=1)
    distance: float = Field(..., ge=0.0, allow_inf_nan=False)

    @field_validator("id_origin", "id_destination", mode="before")
    def _stringify_ids(cls, value: object) -> object:
        return _coerce_identifier(value)

    def to_route(self) -> Route:
        return Route(
            origin_id=self.id_origin,
            destination_id=self.id_destination,
            distance=self.distance,
        )


class ItineraryRequest(BaseModel):
    """Everything needed to plan one itinerary."""

    airports: List[AirportRecord] = Field(default_factory=list)
    routes: List[RouteRecord] = Field(default_factory=list)
    origin: str
    destination: str
    stops: List[str] = Field(default_factory=list)
    avoids: List[str] = Field(default_factory=list)
    strategy: Optional[str] = None

    @field_validator("origin", "destination", mode="before")
    def _stringify_endpoint(cls, value: object) -> object:
        return _coerce_identifier(value)

    @field_validator("stops", "avoids", mode="before")
    def _stringify_members(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return [_coerce_identifier(item) for item in value]
        return value

    @model_validator(mode="after")
    def _check_roles(self) -> "ItineraryRequest":
        known = {airport.id for airport in self.airports}
        for role, airport_id in (("origin", self.origin), ("destination", self.destination)):
            if airport_id not in known:
                raise ValueError(f"Unknown {role} airport '{airport_id}'")
        unknown_stops = [stop for stop in self.stops if stop not in known]
        if unknown_stops:
            raise ValueError(f"Unknown stop airport(s): {', '.join(unknown_stops)}")

        seen = {}
        assignments = [("origin", self.origin), ("destination", self.destination)]
        assignments += [("stop", stop) for stop in dict.fromkeys(self.stops)]
        assignments += [("avoid", avoid) for avoid in dict.fromkeys(self.avoids)]
        for role, airport_id in assignments:
            if airport_id in seen:
                raise ValueError(
                    f"Airport '{airport_id}' cannot be both {seen[airport_id]} and {role}"
                )
            seen[airport_id] = role
        return self

    def to_records(self) -> Tuple[List[Airport], List[Route]]:
        return (
            [airport.to_airport() for airport in self.airports],
            [route.to_route() for route in self.routes],
        )
