"""Landmark to nearest station, with upcoming departures from that station.

Flow:
1. GeoResolver: landmark text -> coordinate (geocoder, then gazetteer)
2. find_nearest: coordinate -> closest station, distance, walk time
3. Station list: station name -> operator id
4. Schedule search from that station toward the default destination
"""

import logging

from jlr_mcp.data.config import LightRailConfig, get_config
from jlr_mcp.data.nominatim_client import NominatimClient
from jlr_mcp.errors import OperatorAPIError
from jlr_mcp.models.geo import (
    NearestStation,
    NotFound,
    NotFoundReason,
    ResolvedLocation,
)
from jlr_mcp.models.responses import (
    CoordinateInfo,
    LandmarkCoordinates,
    NearestStationResponse,
)
from jlr_mcp.services import schedule_service, station_service
from jlr_mcp.services.formatting import format_distance, format_walk_time
from jlr_mcp.services.geo_resolver import GeocodingPort, resolve_landmark
from jlr_mcp.services.nearest_station import find_nearest
from jlr_mcp.services.request_context import build_request_info

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


def not_found_message(landmark: str, reason: NotFoundReason) -> str:
    if reason == NotFoundReason.NO_STATIONS_AVAILABLE:
        return f'לא הצלחתי למצוא תחנת רכבת קלה קרובה ל"{landmark}"'
    return f'לא הצלחתי למצוא את המיקום "{landmark}" בירושלים. נסה לציין כתובת מדויקת יותר.'


async def locate_nearest_station(
    landmark: str, geocoder: GeocodingPort | None
) -> tuple[ResolvedLocation, NearestStation] | NotFound:
    """Resolve a landmark and find the closest station, without any operator calls."""
    location = await resolve_landmark(landmark, geocoder)
    if isinstance(location, NotFound):
        return location

    nearest = find_nearest(location.coordinate)
    if isinstance(nearest, NotFound):
        return NotFound(reason=nearest.reason, query=landmark)

    logger.info(
        f"Nearest station to '{landmark}': {nearest.station.name} "
        f"({nearest.distance_meters} m)"
    )
    return location, nearest


async def _locate_with_default_geocoder(
    landmark: str,
) -> tuple[ResolvedLocation, NearestStation] | NotFound:
    config = _get_config()
    if not config.geocoding_enabled:
        return await locate_nearest_station(landmark, None)
    async with NominatimClient(config) as geocoder:
        return await locate_nearest_station(landmark, geocoder)


async def find_nearest_station_to_landmark(
    landmark: str,
    date: str | None = None,
    time: str | None = None,
    client_time: str | None = None,
    geocoder: GeocodingPort | None = None,
) -> NearestStationResponse:
    """Find the nearest light rail station to a landmark and its next departures.

    Args:
        landmark: Place, address or landmark name (Hebrew or English).
        date: Date as YYYYMMDD (default: today).
        time: Time as HHMM (default: now).
        client_time: Client's current time in ISO format.
        geocoder: Geocoder to use; defaults to Nominatim unless disabled in config.

    Returns:
        NearestStationResponse. found=False when the landmark cannot be located.

    Raises:
        OperatorAPIError: If the station list cannot be fetched.
        ValueError: If client_time is not ISO 8601.
    """
    config = _get_config()
    logger.info(f"Searching for location: {landmark}")

    if geocoder is not None:
        located = await locate_nearest_station(landmark, geocoder)
    else:
        located = await _locate_with_default_geocoder(landmark)

    if isinstance(located, NotFound):
        return NearestStationResponse(
            found=False,
            location=landmark,
            message=not_found_message(landmark, located.reason),
        )

    location, nearest = located
    station = nearest.station
    response = NearestStationResponse(
        found=True,
        location=landmark,
        nearest_station=station.name,
        distance_meters=nearest.distance_meters,
        distance=format_distance(nearest.distance_meters),
        walk_minutes=nearest.walk_minutes,
        walk_time=format_walk_time(nearest.walk_minutes),
        location_source=location.source.value,
        resolved_name=location.display_name,
        outside_locality=location.outside_locality,
        coordinates=LandmarkCoordinates(
            location=CoordinateInfo(lat=location.coordinate.lat, lon=location.coordinate.lon),
            station=CoordinateInfo(lat=station.lat, lon=station.lon),
        ),
    )

    request_info, _ = build_request_info(date, time, client_time, config.timezone)
    stations = await station_service.fetch_stations()

    record = station_service.find_station_for_coordinate_name(stations, station.name)
    if record is None:
        logger.warning(f"Station '{station.name}' not in operator station list")
        response.error = "לא ניתן למצוא מידע על לוח הזמנים של התחנה"
        return response

    response.station_id = record.station_id
    response.request_info = request_info

    destination = station_service.find_station_for_coordinate_name(
        stations, config.default_destination
    )
    destination_id = destination.station_id if destination else ""

    try:
        result = await schedule_service.fetch_schedule(
            record.station_id, destination_id, request_info.date, request_info.time
        )
    except OperatorAPIError as e:
        logger.warning(f"Schedule lookup from '{station.name}' failed: {e}")
        return response

    if schedule_service.has_train_times(result):
        response.has_schedule = True
        response.schedule = schedule_service.to_schedule_response(
            result, config.landmark_schedule_limit
        )
    return response
