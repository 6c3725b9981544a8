"""Value types for landmark resolution and nearest-station search."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point in degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class StationCoordinate:
    """A light rail station with a known location."""

    name: str
    lat: float
    lon: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lon)


@dataclass(frozen=True)
class LandmarkCoordinate:
    """A gazetteer entry: a Hebrew landmark name or alias and its location."""

    key: str
    lat: float
    lon: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lon)


@dataclass(frozen=True)
class GeocodeHit:
    """Best match returned by a geocoding backend."""

    coordinate: Coordinate
    address: dict[str, str] | None = None  # None when no address details came back
    display_name: str | None = None


class LocationSource(str, Enum):
    """Which resolution stage produced a coordinate."""

    GEOCODER = "geocoder"
    GAZETTEER = "gazetteer"


@dataclass(frozen=True)
class ResolvedLocation:
    """A landmark resolved to a coordinate."""

    coordinate: Coordinate
    source: LocationSource
    matched_key: str | None = None  # gazetteer key, when source is GAZETTEER
    outside_locality: bool = False  # advisory, geocoder results only
    display_name: str | None = None  # geocoder's full place name


@dataclass(frozen=True)
class NearestStation:
    """Closest station to a point, with walking estimates."""

    station: StationCoordinate
    distance_meters: int
    walk_minutes: int


class NotFoundReason(str, Enum):
    LOCATION_NOT_FOUND = "location_not_found"
    NO_STATIONS_AVAILABLE = "no_stations_available"


@dataclass(frozen=True)
class NotFound:
    """Terminal miss of the geospatial path."""

    reason: NotFoundReason
    query: str | None = None
