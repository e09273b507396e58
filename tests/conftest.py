"""Mini README: Shared fixtures for the planner tests.

Provides the four-airport network used across the suite:
A-B (100), B-C (50), A-C (200), C-D (30). Airports sit a few kilometres
apart on the equator so great-circle estimates stay below route distances.
"""

from __future__ import annotations

from typing import List

import pytest

from skyroutes.routing import Airport, Route, RouteGraph, build_graph


def make_airport(airport_id: str, latitude: float = 0.0, longitude: float = 0.0) -> Airport:
    return Airport(
        airport_id=airport_id,
        name=f"{airport_id} International",
        city=f"{airport_id} City",
        country="Testland",
        latitude=latitude,
        longitude=longitude,
    )


@pytest.fixture
def sample_airports() -> List[Airport]:
    return [
        make_airport("A", 0.0, 0.0),
        make_airport("B", 0.0, 0.1),
        make_airport("C", 0.0, 0.2),
        make_airport("D", 0.0, 0.3),
    ]


@pytest.fixture
def sample_routes() -> List[Route]:
    return [
        Route("A", "B", 100.0),
        Route("B", "C", 50.0),
        Route("A", "C", 200.0),
        Route("C", "D", 30.0),
    ]


@pytest.fixture
def sample_graph(sample_airports, sample_routes) -> RouteGraph:
    return build_graph(sample_airports, sample_routes)
