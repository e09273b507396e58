"""Mini README: Graph construction from flat airport and route records.

Structure:
    * RouteGraph - read-only adjacency table over densely indexed airports.
    * build_graph - converts record sequences into a ``RouteGraph``.

Every airport receives an integer index in input order. Search code works
on those indices; identifiers only reappear at the boundary helpers
(``neighbours``, ``airport``, ``identifier_at``). Routes are undirected and
expanded into two directed entries with the same weight. Parallel routes
are all kept.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..logging_utils import get_logger
from .records import Airport, AirportId, MissingAirport, Route

LOGGER = get_logger(__name__)

Edge = Tuple[int, float]


class RouteGraph:
    """Immutable airport graph shared by every planning call of a request."""

    __slots__ = ("_airports", "_index", "_adjacency", "_missing", "_route_count")

    def __init__(
        self,
        airports: Sequence[Airport],
        adjacency: Sequence[Sequence[Edge]],
        *,
        missing_airports: Sequence[MissingAirport] = (),
        route_count: int = 0,
    ) -> None:
        if len(airports) != len(adjacency):
            raise ValueError("Adjacency table must have one row per airport")
        self._airports: Tuple[Airport, ...] = tuple(airports)
        self._index: Dict[AirportId, int] = {
            airport.airport_id: position for position, airport in enumerate(self._airports)
        }
        self._adjacency: Tuple[Tuple[Edge, ...], ...] = tuple(tuple(row) for row in adjacency)
        self._missing: Tuple[MissingAirport, ...] = tuple(missing_airports)
        self._route_count = route_count

    def __len__(self) -> int:
        return len(self._airports)

    def __contains__(self, airport_id: object) -> bool:
        return airport_id in self._index

    def __repr__(self) -> str:
        return f"RouteGraph(airports={len(self)}, routes={self._route_count})"

    @property
    def route_count(self) -> int:
        """Number of routes that made it into the graph."""

        return self._route_count

    @property
    def missing_airports(self) -> Tuple[MissingAirport, ...]:
        """Routes dropped during construction because an endpoint was unknown."""

        return self._missing

    @property
    def airports(self) -> Tuple[Airport, ...]:
        """Airport records in index order."""

        return self._airports

    def index_of(self, airport_id: AirportId) -> Optional[int]:
        """Dense index of an airport, or ``None`` when unknown."""

        return self._index.get(airport_id)

    def identifier_at(self, index: int) -> AirportId:
        """Translate a dense index back to its airport identifier."""

        return self._airports[index].airport_id

    def airport_at(self, index: int) -> Airport:
        """Airport record stored at a dense index."""

        return self._airports[index]

    def edges_at(self, index: int) -> Tuple[Edge, ...]:
        """Outgoing ``(neighbour_index, weight)`` edges of an indexed airport."""

        return self._adjacency[index]

    def airport(self, airport_id: AirportId) -> Airport:
        """Return the airport record, raising ``KeyError`` for unknown ids."""

        index = self._index.get(airport_id)
        if index is None:
            raise KeyError(f"Airport {airport_id} is not part of the graph")
        return self._airports[index]

    def coordinates(self, airport_id: AirportId) -> Tuple[float, float]:
        return self.airport(airport_id).coordinates

    def neighbours(self, airport_id: AirportId) -> List[Tuple[AirportId, float]]:
        """Outgoing edges of an airport; unknown airports have none."""

        index = self._index.get(airport_id)
        if index is None:
            return []
        return [(self._airports[target].airport_id, weight) for target, weight in self._adjacency[index]]

    def edge_weight(self, origin_id: AirportId, destination_id: AirportId) -> Optional[float]:
        """Cheapest weight among the parallel edges between two airports."""

        weights = [weight for target, weight in self.neighbours(origin_id) if target == destination_id]
        return min(weights) if weights else None


def build_graph(airports: Iterable[Airport], routes: Iterable[Route]) -> RouteGraph:
    """Build the adjacency table and airport lookup for a planning request.

    Routes that reference an unknown airport are dropped and reported through
    ``RouteGraph.missing_airports`` instead of aborting construction. When the
    same identifier appears twice, the first airport record wins.
    """

    ordered: List[Airport] = []
    index: Dict[AirportId, int] = {}
    for airport in airports:
        if airport.airport_id in index:
            LOGGER.warning("Ignoring duplicate airport record for %s", airport.airport_id)
            continue
        index[airport.airport_id] = len(ordered)
        ordered.append(airport)

    adjacency: List[List[Edge]] = [[] for _ in ordered]
    missing: List[MissingAirport] = []
    kept = 0
    for position, route in enumerate(routes):
        origin = index.get(route.origin_id)
        destination = index.get(route.destination_id)
        if origin is None or destination is None:
            unknown = tuple(
                airport_id
                for airport_id, found in ((route.origin_id, origin), (route.destination_id, destination))
                if found is None
            )
            report = MissingAirport(route_position=position, route=route, missing_ids=unknown)
            LOGGER.warning("Dropping route: %s", report.describe())
            missing.append(report)
            continue
        weight = float(route.distance)
        adjacency[origin].append((destination, weight))
        adjacency[destination].append((origin, weight))
        kept += 1

    LOGGER.debug(
        "Built route graph with %s airports, %s routes (%s dropped)",
        len(ordered),
        kept,
        len(missing),
    )
    return RouteGraph(ordered, adjacency, missing_airports=missing, route_count=kept)
