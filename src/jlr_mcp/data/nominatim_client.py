import logging

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from jlr_mcp.data.config import LightRailConfig
from jlr_mcp.errors import GeocodingUnavailable
from jlr_mcp.models.geo import Coordinate, GeocodeHit

logger = logging.getLogger(__name__)


class NominatimPlace(BaseModel):
    """One search result from Nominatim. Coordinates arrive as strings."""

    model_config = ConfigDict(extra="ignore")

    lat: float
    lon: float
    display_name: str | None = None
    address: dict[str, str] | None = None


class NominatimClient:
    """Async geocoder backed by OpenStreetMap Nominatim.

    Usage:
        async with NominatimClient(config) as geocoder:
            hit = await geocoder.search("שער יפו, Jerusalem, Israel")
    """

    def __init__(self, config: LightRailConfig):
        """Initialize the client.

        Args:
            config: Configuration with the search URL and User-Agent.
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "NominatimClient":
        """Enter async context - create HTTP client."""
        headers = {
            "User-Agent": self._config.geocoder_user_agent,
            "Accept-Language": "he,en",
        }
        self._client = httpx.AsyncClient(
            headers=headers, timeout=self._config.http_timeout_seconds
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def search(self, query: str) -> GeocodeHit | None:
        """Geocode free text to the best matching place.

        Returns:
            GeocodeHit for the first result, None if nothing matched.

        Raises:
            RuntimeError: If client not initialized.
            GeocodingUnavailable: If the request or response parsing fails.
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")

        params = {"q": query, "format": "json", "limit": "1", "addressdetails": "1"}
        logger.debug(f"Querying Nominatim: {query}")

        try:
            response = await self._client.get(self._config.nominatim_url, params=params)
            response.raise_for_status()
            results = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GeocodingUnavailable(f"Nominatim request failed: {e}") from e

        if not isinstance(results, list):
            raise GeocodingUnavailable("Unexpected Nominatim response shape")
        if not results:
            return None

        try:
            place = NominatimPlace.model_validate(results[0])
        except ValidationError as e:
            raise GeocodingUnavailable(f"Unreadable Nominatim result: {e}") from e

        return GeocodeHit(
            coordinate=Coordinate(place.lat, place.lon),
            address=place.address,
            display_name=place.display_name,
        )
