"""Station list lookups against the operator API."""

import logging
from collections.abc import Sequence

from jlr_mcp.data.cfir_client import CfirClient
from jlr_mcp.data.config import LightRailConfig, get_config
from jlr_mcp.matching.models import StationMatch
from jlr_mcp.matching.name_matcher import rank_stations
from jlr_mcp.models.cfir import StationRecord
from jlr_mcp.models.responses import FindStationResponse, GetStationsResponse, StationInfo

logger = logging.getLogger(__name__)

_config: LightRailConfig | None = None


def _get_config() -> LightRailConfig:
    """Get or create the config singleton."""
    global _config
    if _config is None:
        _config = get_config()
    return _config


def reset_service() -> None:
    """Reset module state (for testing)."""
    global _config
    _config = None


def to_station_info(station: StationRecord) -> StationInfo:
    return StationInfo(name=station.display_name, id=station.station_id)


async def fetch_stations() -> list[StationRecord]:
    """Fetch the current station list from the operator.

    Raises:
        OperatorAPIError: If the operator API is unavailable.
    """
    async with CfirClient(_get_config()) as client:
        return await client.fetch_stations()


def find_station_by_name(stations: Sequence[StationRecord], name: str) -> StationRecord | None:
    """Exact display-name lookup; the first record wins on duplicates."""
    for station in stations:
        if station.display_name == name:
            return station
    return None


def find_station_for_coordinate_name(
    stations: Sequence[StationRecord], name: str
) -> StationRecord | None:
    """Map a station-coordinate name to an operator record.

    Accepts an exact match or a record whose display name contains the name,
    whichever comes first in the list.
    """
    for station in stations:
        if station.display_name == name or name in station.display_name:
            return station
    return None


def suggest_stations(
    name: str, stations: Sequence[StationRecord], limit: int | None = None
) -> list[StationMatch]:
    """Closest station names to a name that had no exact match."""
    if limit is None:
        limit = _get_config().suggestion_limit
    return rank_stations(name, stations, limit)


async def get_stations() -> GetStationsResponse:
    """List every light rail station with its id."""
    stations = await fetch_stations()
    infos = [to_station_info(s) for s in stations]
    return GetStationsResponse(stations=infos, count=len(infos))


async def find_station(name: str) -> FindStationResponse:
    """Find a station id by its Hebrew name.

    Returns:
        FindStationResponse with the station, or with ranked suggestions and a
        Hebrew message when no station has that exact name.

    Raises:
        OperatorAPIError: If the operator API is unavailable.
    """
    stations = await fetch_stations()
    station = find_station_by_name(stations, name)
    if station is not None:
        return FindStationResponse(query=name, found=True, station=to_station_info(station))

    logger.debug(f"No exact station match for '{name}'")
    return FindStationResponse(
        query=name,
        found=False,
        message=f'לא נמצאה תחנה בשם "{name}"',
        suggestions=suggest_stations(name, stations),
    )
