"""Mini README: Command line entry point for the SkyRoutes planner.

Commands:
    * serve - start the FastAPI planning service with uvicorn.
    * plan - plan one itinerary from a JSON request file and print it.

The request file uses the same body as ``POST /plan-itinerary``: airport and
route records plus origin, destination, stops and avoids.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
import uvicorn
from pydantic import ValidationError

from skyroutes.configuration import get_settings
from skyroutes.interface import ItineraryRequest, run_request
from skyroutes.logging_utils import configure_root_logger

cli = typer.Typer(help="Plan multi-stop flight itineraries and run the planning service.")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 sentinel address.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting SkyRoutes on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "skyroutes.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def plan(
    request_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    strategy: str = typer.Option(None, help="Sequencing strategy overriding the request."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw response payload."),
) -> None:
    """Plan the itinerary described in REQUEST_FILE."""

    settings = get_settings()
    configure_root_logger(settings.log_level)

    try:
        request = ItineraryRequest.model_validate_json(request_file.read_text(encoding="utf-8"))
    except ValidationError as error:
        typer.echo(f"Invalid request file: {error}", err=True)
        raise typer.Exit(code=2) from error
    if strategy:
        request.strategy = strategy

    try:
        payload = run_request(request, settings)
    except KeyError as error:
        typer.echo(f"Error: {error.args[0]}", err=True)
        raise typer.Exit(code=2) from error

    if as_json:
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(payload["message"])
        for position, airport in enumerate(payload["path"]):
            marker = "depart" if position == 0 else "arrive" if position == len(payload["path"]) - 1 else "via"
            typer.echo(f"  {marker:<6} {airport['id']:<8} {airport['city']}, {airport['country']} ({airport['name']})")
        if payload["distance_label"]:
            typer.echo(f"Total distance: {payload['distance_label']}")
    if payload["status"] != "success":
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()
