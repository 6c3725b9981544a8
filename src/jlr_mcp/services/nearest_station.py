"""Nearest light rail station to a point."""

import math
from collections.abc import Sequence

from jlr_mcp.data.stations import STATION_COORDINATES
from jlr_mcp.models.geo import (
    Coordinate,
    NearestStation,
    NotFound,
    NotFoundReason,
    StationCoordinate,
)

# Earth's radius in kilometers for haversine calculation
EARTH_RADIUS_KM = 6371.0

# Assumed walking speed; an estimate, not a measurement
WALKING_METERS_PER_MINUTE = 80


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Calculate the great-circle distance between two points in kilometers.

    Args:
        a, b: Point coordinates in degrees.

    Returns:
        Distance in kilometers.
    """
    lat1_rad = math.radians(a.lat)
    lat2_rad = math.radians(b.lat)
    delta_lat = math.radians(b.lat - a.lat)
    delta_lon = math.radians(b.lon - a.lon)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push h just past 1 for near-antipodal points
    h = min(1.0, h)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return math.floor(value + 0.5)


def find_nearest(
    point: Coordinate,
    table: Sequence[StationCoordinate] = STATION_COORDINATES,
) -> NearestStation | NotFound:
    """Find the station closest to a point.

    Scans every entry; on equal distances the earlier entry wins.

    Args:
        point: Location to search from.
        table: Stations to consider (defaults to the light rail stations).

    Returns:
        NearestStation with distance in meters and walking minutes, or
        NotFound(NO_STATIONS_AVAILABLE) if the table is empty.
    """
    nearest: StationCoordinate | None = None
    shortest_km = math.inf

    for station in table:
        distance_km = haversine_km(point, station.coordinate)
        if distance_km < shortest_km:
            shortest_km = distance_km
            nearest = station

    if nearest is None:
        return NotFound(reason=NotFoundReason.NO_STATIONS_AVAILABLE)

    distance_meters = round_half_up(shortest_km * 1000)
    return NearestStation(
        station=nearest,
        distance_meters=distance_meters,
        walk_minutes=round_half_up(distance_meters / WALKING_METERS_PER_MINUTE),
    )
