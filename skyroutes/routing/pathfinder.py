"""Mini README: A* shortest-path search between two airports.

Structure:
    * PathResult - ordered airport identifiers plus total distance.
    * find_path - A* over a ``RouteGraph`` honouring an excluded set.

The open set is a binary heap with lazy invalidation: an improved node is
pushed again and outdated heap entries are skipped when popped. Heap entries
carry an insertion counter so equal ``f`` scores pop in a fixed order and
repeated searches return identical paths. The great-circle distance to the
goal is the heuristic.

"No path" is an ordinary outcome and is returned as
``PathResult.unreachable()`` rather than raised.
"""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from typing import Collection, Dict, Iterable, List, Tuple

from ..logging_utils import get_logger
from .geodesy import airport_distance_km
from .graph import RouteGraph
from .records import AirportId

LOGGER = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class PathResult:
    """Result of a single-pair search."""

    path: Tuple[AirportId, ...]
    distance: float

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls(path=(), distance=math.inf)

    @property
    def reachable(self) -> bool:
        return bool(self.path) and math.isfinite(self.distance)


def _excluded_indices(graph: RouteGraph, excluded: Iterable[AirportId]) -> Collection[int]:
    indices = set()
    for airport_id in excluded:
        index = graph.index_of(airport_id)
        if index is not None:
            indices.add(index)
    return indices


def find_path(
    graph: RouteGraph,
    start: AirportId,
    goal: AirportId,
    excluded: Iterable[AirportId] = (),
) -> PathResult:
    """Return the minimum-distance path from ``start`` to ``goal``.

    Airports in ``excluded`` are never entered. ``start`` and ``goal`` are not
    special-cased against it, so callers keep them out of the excluded set.
    """

    if start == goal:
        return PathResult(path=(start,), distance=0.0)

    start_index = graph.index_of(start)
    goal_index = graph.index_of(goal)
    if start_index is None or goal_index is None:
        LOGGER.debug("Search %s -> %s references an airport outside the graph", start, goal)
        return PathResult.unreachable()

    blocked = _excluded_indices(graph, excluded)
    goal_airport = graph.airport_at(goal_index)
    heuristic_cache: Dict[int, float] = {}

    def heuristic(index: int) -> float:
        estimate = heuristic_cache.get(index)
        if estimate is None:
            estimate = airport_distance_km(graph.airport_at(index), goal_airport)
            heuristic_cache[index] = estimate
        return estimate

    counter = itertools.count()
    g_score: Dict[int, float] = {start_index: 0.0}
    came_from: Dict[int, int] = {}
    open_heap: List[Tuple[float, int, int, float]] = [
        (heuristic(start_index), next(counter), start_index, 0.0)
    ]
    expanded = 0

    while open_heap:
        _, _, current, current_g = heapq.heappop(open_heap)
        if current_g > g_score[current]:
            continue
        expanded += 1

        if current == goal_index:
            indices = [current]
            while current in came_from:
                current = came_from[current]
                indices.append(current)
            indices.reverse()
            LOGGER.debug(
                "Found %s -> %s: %s hops, %.3f km after %s expansions",
                start,
                goal,
                len(indices) - 1,
                current_g,
                expanded,
            )
            return PathResult(
                path=tuple(graph.identifier_at(index) for index in indices),
                distance=current_g,
            )

        for neighbour, weight in graph.edges_at(current):
            if neighbour in blocked:
                continue
            tentative = current_g + weight
            if tentative < g_score.get(neighbour, math.inf):
                came_from[neighbour] = current
                g_score[neighbour] = tentative
                heapq.heappush(
                    open_heap,
                    (tentative + heuristic(neighbour), next(counter), neighbour, tentative),
                )

    LOGGER.debug("No path %s -> %s after %s expansions", start, goal, expanded)
    return PathResult.unreachable()
