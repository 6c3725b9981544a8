"""Error types raised by the light rail clients and services."""


class LightRailError(Exception):
    """Base class for light rail errors."""


class GeocodingUnavailable(LightRailError):
    """The geocoding backend failed or returned an unreadable response.

    Never surfaced to tool callers: the landmark resolver absorbs it and
    falls back to the static gazetteer.
    """


class OperatorAPIError(LightRailError):
    """The transit operator API failed or returned an unexpected payload."""
