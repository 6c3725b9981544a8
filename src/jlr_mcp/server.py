import argparse
import asyncio
import json
import logging
import sys
from datetime import UTC, datetime

from pydantic import BaseModel

from jlr_mcp.app import mcp

# Register tools on the shared server instance
from jlr_mcp.tools import landmark_tools, schedule_tools, station_tools  # noqa: F401


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


@mcp.tool()
def health() -> HealthResponse:
    """Check if the light rail MCP server is running and healthy.

    Returns the server status, version, and current timestamp.
    """
    from jlr_mcp import __version__

    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(UTC).isoformat(),
    )


async def run_nearest(landmark: str, offline: bool) -> dict:
    """Resolve a landmark to its nearest station without calling the operator API."""
    from jlr_mcp.data.config import get_config
    from jlr_mcp.data.nominatim_client import NominatimClient
    from jlr_mcp.models.geo import NotFound
    from jlr_mcp.services.landmark_service import locate_nearest_station

    if offline:
        located = await locate_nearest_station(landmark, None)
    else:
        async with NominatimClient(get_config()) as geocoder:
            located = await locate_nearest_station(landmark, geocoder)

    if isinstance(located, NotFound):
        return {"found": False, "landmark": landmark, "reason": located.reason.value}

    location, nearest = located
    return {
        "found": True,
        "landmark": landmark,
        "source": location.source.value,
        "resolved_name": location.display_name,
        "location": {"lat": location.coordinate.lat, "lon": location.coordinate.lon},
        "station": nearest.station.name,
        "distance_meters": nearest.distance_meters,
        "walk_minutes": nearest.walk_minutes,
    }


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="jlr-mcp",
        description="Jerusalem Light Rail MCP Server",
    )
    subparsers = parser.add_subparsers(dest="command")

    # nearest command
    nearest_parser = subparsers.add_parser(
        "nearest",
        help="Find the nearest light rail station to a landmark",
    )
    nearest_parser.add_argument(
        "landmark",
        help="Place, address or landmark name (Hebrew or English)",
    )
    nearest_parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip the geocoder and use only the built-in landmark list",
    )
    nearest_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    if args.command == "nearest":
        # Configure logging
        log_level = logging.DEBUG if args.verbose else logging.INFO
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

        result = asyncio.run(run_nearest(args.landmark, args.offline))
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        # Default: run MCP server over stdio
        mcp.run()


if __name__ == "__main__":
    main()
