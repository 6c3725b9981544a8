"""Resolve a free-text landmark to a coordinate.

Resolution runs an ordered list of strategies and stops at the first hit:
1. The external geocoder (authoritative, handles arbitrary addresses)
2. The static gazetteer (degraded-mode fallback for well-known names)

Geocoder failures are logged and treated as a miss; nothing here raises.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from jlr_mcp.data.landmarks import KNOWN_LANDMARKS
from jlr_mcp.matching.normalizers import LOCALITY_NAMES, fold_text, mentions_locality
from jlr_mcp.models.geo import (
    GeocodeHit,
    LandmarkCoordinate,
    LocationSource,
    NotFound,
    NotFoundReason,
    ResolvedLocation,
)

logger = logging.getLogger(__name__)

# Appended to geocoder queries that do not already name the city
LOCALITY_QUALIFIER = ", Jerusalem, Israel"

# Address components checked when deciding whether a hit is inside the city
LOCALITY_ADDRESS_FIELDS = ("city", "county")


class GeocodingPort(Protocol):
    """Port for geocoding free text to a single best match."""

    async def search(self, query: str) -> GeocodeHit | None:
        """Return the best match for the query, or None if nothing matched."""
        ...


class ResolutionStrategy(Protocol):
    """One stage of landmark resolution."""

    name: str

    async def resolve(self, text: str) -> ResolvedLocation | None:
        """Resolve trimmed landmark text, or return None to defer to the next stage."""
        ...


def build_geocoder_query(text: str) -> str:
    """Add the city and country to a query unless the city is already named.

    Examples:
        "שער יפו" -> "שער יפו, Jerusalem, Israel"
        "שער יפו ירושלים" -> "שער יפו ירושלים"
        "Jaffa Gate JERUSALEM" -> "Jaffa Gate JERUSALEM"
    """
    text = text.strip()
    if mentions_locality(text):
        return text
    return f"{text}{LOCALITY_QUALIFIER}"


def is_outside_locality(address: dict[str, str] | None) -> bool:
    """Check whether geocoder address components place a hit outside the city.

    Returns False when the geocoder sent no address at all. An address that
    names the city in neither script, even an empty one, is flagged.
    """
    if address is None:
        return False
    for field in LOCALITY_ADDRESS_FIELDS:
        value = fold_text(address.get(field) or "")
        if any(name in value for name in LOCALITY_NAMES):
            return False
    return True


class GeocoderStrategy:
    """Resolve via an injected geocoder."""

    name = "geocoder"

    def __init__(self, geocoder: GeocodingPort):
        self._geocoder = geocoder

    async def resolve(self, text: str) -> ResolvedLocation | None:
        query = build_geocoder_query(text)
        try:
            hit = await self._geocoder.search(query)
        except Exception as e:
            logger.warning(f"Geocoding failed for '{query}': {e}")
            return None

        if hit is None:
            logger.info(f"Geocoder found nothing for '{query}'")
            return None

        outside = is_outside_locality(hit.address)
        if outside:
            logger.warning(f"Geocoded location for '{text}' might not be in Jerusalem")

        logger.debug(
            f"Found coordinates via geocoder: {hit.coordinate.lat}, {hit.coordinate.lon}"
        )
        return ResolvedLocation(
            coordinate=hit.coordinate,
            source=LocationSource.GEOCODER,
            outside_locality=outside,
            display_name=hit.display_name,
        )


class GazetteerStrategy:
    """Resolve by substring containment against the static landmark table."""

    name = "gazetteer"

    def __init__(self, table: Sequence[LandmarkCoordinate] = KNOWN_LANDMARKS):
        self._table = table

    def lookup(self, text: str) -> LandmarkCoordinate | None:
        """Find the first landmark whose key contains, or is contained in, the text.

        Short keys can match unrelated longer queries; table order decides.
        """
        folded = fold_text(text)
        for landmark in self._table:
            key = fold_text(landmark.key)
            if key in folded or folded in key:
                return landmark
        return None

    async def resolve(self, text: str) -> ResolvedLocation | None:
        landmark = self.lookup(text)
        if landmark is None:
            return None

        logger.info(f"Using fallback coordinates for known landmark: {landmark.key}")
        return ResolvedLocation(
            coordinate=landmark.coordinate,
            source=LocationSource.GAZETTEER,
            matched_key=landmark.key,
        )


class GeoResolver:
    """Ordered resolution pipeline; the first strategy to produce a location wins."""

    def __init__(self, strategies: Sequence[ResolutionStrategy]):
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> tuple[ResolutionStrategy, ...]:
        return self._strategies

    async def resolve(self, landmark_text: str) -> ResolvedLocation | NotFound:
        """Resolve landmark text to a coordinate.

        Returns:
            ResolvedLocation from the first successful strategy, or
            NotFound(LOCATION_NOT_FOUND) echoing the query.
        """
        text = landmark_text.strip()
        if not text:
            return NotFound(reason=NotFoundReason.LOCATION_NOT_FOUND, query=landmark_text)

        for strategy in self._strategies:
            location = await strategy.resolve(text)
            if location is not None:
                return location

        logger.info(f"No coordinates found for '{text}'")
        return NotFound(reason=NotFoundReason.LOCATION_NOT_FOUND, query=landmark_text)


def default_resolver(
    geocoder: GeocodingPort | None,
    gazetteer: Sequence[LandmarkCoordinate] = KNOWN_LANDMARKS,
) -> GeoResolver:
    """Build the geocoder-then-gazetteer pipeline (gazetteer only without a geocoder)."""
    strategies: list[ResolutionStrategy] = []
    if geocoder is not None:
        strategies.append(GeocoderStrategy(geocoder))
    strategies.append(GazetteerStrategy(gazetteer))
    return GeoResolver(strategies)


async def resolve_landmark(
    landmark_text: str, geocoder: GeocodingPort | None
) -> ResolvedLocation | NotFound:
    """Resolve a landmark with the default pipeline."""
    return await default_resolver(geocoder).resolve(landmark_text)
