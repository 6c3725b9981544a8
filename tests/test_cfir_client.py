"""Tests for the light rail operator API client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from jlr_mcp.data.cfir_client import CfirClient
from jlr_mcp.data.config import LightRailConfig
from jlr_mcp.errors import OperatorAPIError


def create_stations_response() -> dict:
    """Create a sample GetSearchStations response."""
    return {
        "d": [
            {"__type": "SV.Station", "Text": "נווה יעקב צפון", "Value": 1},
            {"__type": "SV.Station", "Text": "סיירת דוכיפת", "Value": "6"},
        ]
    }


def create_search_trains_response() -> dict:
    """Create a sample SearchTrains response."""
    return {
        "d": {
            "__type": "SV.SearchResult",
            "FromStationName": "נווה יעקב צפון",
            "ToStationName": "סיירת דוכיפת",
            "TravelTime": 9,
            "CountStations": 5,
            "LastTrainTime": "00:15",
            "TrainTimes": [
                {"DepartureTime": "08:31", "ArrivalTime": "08:40", "Omes": 1},
                {"DepartureTime": "08:38", "ArrivalTime": "08:47", "Omes": 3},
            ],
        }
    }


@pytest.fixture
def config() -> LightRailConfig:
    """Create a test config."""
    return LightRailConfig(
        stations_url="https://example.com/GetSearchStations",
        search_trains_url="https://example.com/SearchTrains",
        operator_origin="https://example.com",
    )


def _mock_client_class(mock_client_class: MagicMock, payload: object) -> AsyncMock:
    mock_response = MagicMock()
    mock_response.json.return_value = payload

    mock_client = AsyncMock()
    mock_client.post = AsyncMock(return_value=mock_response)
    mock_client_class.return_value = mock_client
    return mock_client


async def test_fetch_stations_parses_records(config: LightRailConfig):
    """Station records decode and numeric ids become strings."""
    with patch("httpx.AsyncClient") as mock_client_class:
        _mock_client_class(mock_client_class, create_stations_response())

        async with CfirClient(config) as client:
            stations = await client.fetch_stations()

    assert len(stations) == 2
    assert stations[0].display_name == "נווה יעקב צפון"
    assert stations[0].station_id == "1"
    assert stations[1].station_id == "6"


async def test_fetch_stations_posts_empty_body(config: LightRailConfig):
    """Stations are requested with an empty JSON object and operator headers."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = _mock_client_class(mock_client_class, create_stations_response())

        async with CfirClient(config) as client:
            await client.fetch_stations()

        call = mock_client.post.call_args
        assert call.args[0] == "https://example.com/GetSearchStations"
        assert call.kwargs["json"] == {}

        headers = mock_client_class.call_args.kwargs["headers"]
        assert headers["Origin"] == "https://example.com"
        assert headers["Referer"] == "https://example.com/"
        assert headers["Content-Type"] == "application/json"


async def test_fetch_stations_missing_field_is_error(config: LightRailConfig):
    """A station without a name is a parse error, not a silent gap."""
    with patch("httpx.AsyncClient") as mock_client_class:
        _mock_client_class(mock_client_class, {"d": [{"Value": 1}]})

        async with CfirClient(config) as client:
            with pytest.raises(OperatorAPIError, match="station list"):
                await client.fetch_stations()


async def test_search_trains_parses_result(config: LightRailConfig):
    """Schedule payload decodes into typed records."""
    with patch("httpx.AsyncClient") as mock_client_class:
        _mock_client_class(mock_client_class, create_search_trains_response())

        async with CfirClient(config) as client:
            result = await client.search_trains("1", "6", "20250105", "0830")

    assert result is not None
    assert result.from_station_name == "נווה יעקב צפון"
    assert result.travel_time == 9
    assert result.last_train_time == "00:15"
    assert len(result.train_times) == 2
    assert result.train_times[0].departure_time == "08:31"
    assert result.train_times[1].load == 3


async def test_search_trains_request_body(config: LightRailConfig):
    """Search posts the operator's body format with a result-page Referer."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = _mock_client_class(mock_client_class, create_search_trains_response())

        async with CfirClient(config) as client:
            await client.search_trains("1", "6", "20250105", "0830")

        call = mock_client.post.call_args
        assert call.args[0] == "https://example.com/SearchTrains"
        assert call.kwargs["json"] == {
            "fsid": "1",
            "tsid": "6",
            "date": "20250105",
            "hour": "0830",
            "idt": "true",
            "ilt": "false",
        }
        referer = call.kwargs["headers"]["Referer"]
        assert referer.startswith("https://example.com/train-search-result/?")
        assert "FSID=1" in referer
        assert "TSID=6" in referer
        assert "Hour=0830" in referer


async def test_search_trains_null_result(config: LightRailConfig):
    """A null payload means no result."""
    with patch("httpx.AsyncClient") as mock_client_class:
        _mock_client_class(mock_client_class, {"d": None})

        async with CfirClient(config) as client:
            result = await client.search_trains("1", "6", "20250105", "0830")

    assert result is None


async def test_http_status_error_wrapped(config: LightRailConfig):
    """HTTP errors surface as OperatorAPIError with the status code."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = _mock_client_class(mock_client_class, {})
        mock_response = mock_client.post.return_value
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "server error", request=MagicMock(), response=MagicMock(status_code=500)
        )

        async with CfirClient(config) as client:
            with pytest.raises(OperatorAPIError, match="HTTP 500"):
                await client.fetch_stations()


async def test_network_error_wrapped(config: LightRailConfig):
    """Transport errors surface as OperatorAPIError."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.post = AsyncMock(side_effect=httpx.ConnectError("unreachable"))
        mock_client_class.return_value = mock_client

        async with CfirClient(config) as client:
            with pytest.raises(OperatorAPIError, match="unreachable"):
                await client.fetch_stations()


async def test_client_requires_async_context(config: LightRailConfig):
    """Client methods fail without async context."""
    client = CfirClient(config)

    with pytest.raises(RuntimeError, match="Client not initialized"):
        await client.fetch_stations()
