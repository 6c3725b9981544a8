import logging
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from jlr_mcp.data.config import LightRailConfig
from jlr_mcp.errors import OperatorAPIError
from jlr_mcp.models.cfir import (
    StationRecord,
    StationsEnvelope,
    TrainSearchEnvelope,
    TrainSearchResult,
)

logger = logging.getLogger(__name__)


class CfirClient:
    """Async HTTP client for the Cfir light rail web service.

    Usage:
        async with CfirClient(config) as client:
            stations = await client.fetch_stations()
            result = await client.search_trains("1", "6", "20250101", "0830")
    """

    def __init__(self, config: LightRailConfig):
        """Initialize the client.

        Args:
            config: Configuration with the operator endpoints.
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "CfirClient":
        """Enter async context - create HTTP client."""
        origin = self._config.operator_origin
        headers = {
            "Accept": "application/json, text/plain, */*",
            "Content-Type": "application/json",
            "Origin": origin,
            "Referer": f"{origin}/",
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

    def _result_page_url(self, from_id: str, to_id: str, date: str, time: str) -> str:
        """URL of the operator's own result page, sent as Referer on searches."""
        query = urlencode(
            {
                "FSID": from_id,
                "TSID": to_id,
                "Date": date,
                "Hour": time,
                "IDT": "true",
                "ILT": "false",
            }
        )
        return f"{self._config.operator_origin}/train-search-result/?{query}"

    async def _post(self, url: str, body: dict, headers: dict | None = None) -> object:
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")

        try:
            response = await self._client.post(url, json=body, headers=headers)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise OperatorAPIError(f"HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise OperatorAPIError(str(e)) from e

    async def fetch_stations(self) -> list[StationRecord]:
        """Fetch the operator's station list.

        Returns:
            StationRecords in the operator's order.

        Raises:
            RuntimeError: If client not initialized.
            OperatorAPIError: If the request fails or the payload is malformed.
        """
        data = await self._post(self._config.stations_url, {})
        try:
            envelope = StationsEnvelope.model_validate(data)
        except ValidationError as e:
            raise OperatorAPIError(f"Unexpected station list payload: {e}") from e

        logger.debug(f"Fetched {len(envelope.d)} stations")
        return envelope.d

    async def search_trains(
        self, from_id: str, to_id: str, date: str, time: str
    ) -> TrainSearchResult | None:
        """Search departures between two stations.

        Args:
            from_id: Departure station id.
            to_id: Arrival station id (may be empty for "any").
            date: Date as YYYYMMDD.
            time: Time as HHMM.

        Returns:
            TrainSearchResult, or None when the operator returned no result.

        Raises:
            RuntimeError: If client not initialized.
            OperatorAPIError: If the request fails or the payload is malformed.
        """
        body = {
            "fsid": str(from_id),
            "tsid": str(to_id),
            "date": str(date),
            "hour": str(time),
            "idt": "true",
            "ilt": "false",
        }
        headers = {"Referer": self._result_page_url(from_id, to_id, date, time)}
        data = await self._post(self._config.search_trains_url, body, headers=headers)
        try:
            envelope = TrainSearchEnvelope.model_validate(data)
        except ValidationError as e:
            raise OperatorAPIError(f"Unexpected schedule payload: {e}") from e

        return envelope.d
