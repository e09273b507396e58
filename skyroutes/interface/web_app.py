"""Mini README: FastAPI service exposing the itinerary planner.

Structure:
    * create_application - application factory wiring routes and settings.
    * itinerary_payload - shared response builder used by the API and CLI.

Each ``/plan-itinerary`` call builds its own graph from the records in the
request, so no graph state is shared between requests. "No route" is a
regular 200 response with ``status="no_route"``; the caller decides how to
present it.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import SkyroutesSettings, get_settings
from ..itinerary import REGISTRY, ItineraryResult, StrategyRegistry, plan_itinerary
from ..logging_utils import get_logger
from ..routing import RouteGraph, build_graph
from .schemas import ItineraryRequest

LOGGER = get_logger(__name__)

SUCCESS_MESSAGE = "Optimal route calculated successfully."
NO_ROUTE_MESSAGE = "No route found with the selected conditions."


def itinerary_payload(
    result: ItineraryResult, graph: RouteGraph, *, decimals: int = 1
) -> Dict[str, object]:
    """Combine the itinerary with a status and message for display."""

    payload = result.as_dict(graph, decimals=decimals)
    payload["status"] = "success" if result.reachable else "no_route"
    payload["message"] = SUCCESS_MESSAGE if result.reachable else NO_ROUTE_MESSAGE
    payload["dropped_routes"] = [report.describe() for report in graph.missing_airports]
    return payload


def run_request(
    request: ItineraryRequest,
    settings: SkyroutesSettings,
    registry: StrategyRegistry = REGISTRY,
) -> Dict[str, object]:
    """Build the request graph, plan, and return the response payload."""

    airports, routes = request.to_records()
    graph = build_graph(airports, routes)
    result = plan_itinerary(
        graph,
        request.origin,
        request.destination,
        request.stops,
        request.avoids,
        strategy=request.strategy or settings.default_strategy,
        registry=registry,
    )
    return itinerary_payload(result, graph, decimals=settings.distance_decimals)


def create_application(
    settings: Optional[SkyroutesSettings] = None,
    registry: StrategyRegistry = REGISTRY,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    app = FastAPI(title="SkyRoutes Planner", version="0.1.0")
    plugin_count = registry.load_plugins()
    LOGGER.debug("Loaded %s strategy plugin(s)", plugin_count)

    @app.get("/health")
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok", "environment": settings.environment})

    @app.get("/strategies")
    async def strategies() -> JSONResponse:
        """List sequencing strategies that requests may name."""

        available = [registry.create(name).metadata() for name in registry.available_strategies()]
        return JSONResponse({"default": settings.default_strategy, "strategies": available})

    @app.post("/plan-itinerary")
    def plan(request: ItineraryRequest) -> JSONResponse:
        """Plan an itinerary over the airports and routes supplied in the body."""

        try:
            payload = run_request(request, settings, registry)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        LOGGER.info(
            "Planned %s -> %s: %s", request.origin, request.destination, payload["status"]
        )
        return JSONResponse(payload)

    return app
