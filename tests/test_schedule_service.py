"""Tests for the schedule service."""

from unittest.mock import AsyncMock, patch

import pytest

from jlr_mcp.data.config import LightRailConfig
from jlr_mcp.errors import OperatorAPIError
from jlr_mcp.models.cfir import StationRecord, TrainSearchResult, TrainTime
from jlr_mcp.services import schedule_service, station_service

CLIENT_TIME = "2025-01-05T08:30:00+02:00"  # a Sunday in Jerusalem


@pytest.fixture(autouse=True)
def reset_service():
    """Reset the service state before and after each test."""
    schedule_service.reset_service()
    station_service.reset_service()
    schedule_service._config = LightRailConfig(JLR_SCHEDULE_LIMIT=2)
    station_service._config = LightRailConfig(JLR_SUGGESTION_LIMIT=5)
    yield
    schedule_service.reset_service()
    station_service.reset_service()


def _stations() -> list[StationRecord]:
    return [
        StationRecord(Text="נווה יעקב צפון", Value="1"),
        StationRecord(Text="סיירת דוכיפת", Value="6"),
        StationRecord(Text="הר הרצל", Value="23"),
    ]


def _result(count: int = 3) -> TrainSearchResult:
    return TrainSearchResult(
        FromStationName="נווה יעקב צפון",
        ToStationName="סיירת דוכיפת",
        TravelTime=9,
        CountStations=5,
        LastTrainTime="00:15",
        TrainTimes=[
            TrainTime(DepartureTime=f"08:{30 + i}", ArrivalTime=f"08:{39 + i}", Omes=i + 1)
            for i in range(count)
        ],
    )


class TestToScheduleResponse:
    def test_limits_and_labels(self) -> None:
        response = schedule_service.to_schedule_response(_result(3), limit=2)

        assert len(response.train_times) == 2
        assert response.train_times[0].load_level == "נמוך"
        assert response.train_times[1].load_level == "בינוני"
        assert response.travel_time == 9
        assert response.last_train_time == "00:15"


class TestGetTrainSchedule:
    async def test_returns_limited_schedule(self) -> None:
        fetch = AsyncMock(return_value=_result(3))
        with patch.object(schedule_service, "fetch_schedule", fetch):
            response = await schedule_service.get_train_schedule("1", "6", "20250105", "0830")

        fetch.assert_awaited_once_with("1", "6", "20250105", "0830")
        assert len(response.train_times) == 2
        assert response.from_station == "נווה יעקב צפון"

    async def test_missing_train_times_is_error(self) -> None:
        result = TrainSearchResult(FromStationName="א", ToStationName="ב")
        with patch.object(schedule_service, "fetch_schedule", AsyncMock(return_value=result)):
            with pytest.raises(OperatorAPIError, match="No train times"):
                await schedule_service.get_train_schedule("1", "6", "20250105", "0830")

    async def test_null_result_is_error(self) -> None:
        with patch.object(schedule_service, "fetch_schedule", AsyncMock(return_value=None)):
            with pytest.raises(OperatorAPIError):
                await schedule_service.get_train_schedule("1", "6", "20250105", "0830")


class TestSearchTrainsByName:
    async def test_found(self) -> None:
        fetch = AsyncMock(return_value=_result(3))
        with (
            patch.object(station_service, "fetch_stations", AsyncMock(return_value=_stations())),
            patch.object(schedule_service, "fetch_schedule", fetch),
        ):
            response = await schedule_service.search_trains_by_name(
                "נווה יעקב צפון", "סיירת דוכיפת", client_time=CLIENT_TIME
            )

        assert response.found is True
        assert response.schedule is not None
        assert len(response.schedule.train_times) == 2
        assert response.request_info is not None
        assert response.request_info.date == "20250105"
        assert response.request_info.time == "0830"
        assert response.request_info.day_of_week == "יום ראשון"
        fetch.assert_awaited_once_with("1", "6", "20250105", "0830")

    async def test_explicit_date_and_time_win(self) -> None:
        fetch = AsyncMock(return_value=_result(1))
        with (
            patch.object(station_service, "fetch_stations", AsyncMock(return_value=_stations())),
            patch.object(schedule_service, "fetch_schedule", fetch),
        ):
            response = await schedule_service.search_trains_by_name(
                "הר הרצל",
                "סיירת דוכיפת",
                date="20250110",
                time="1745",
                client_time=CLIENT_TIME,
            )

        fetch.assert_awaited_once_with("23", "6", "20250110", "1745")
        assert response.request_info.date == "20250110"

    async def test_unknown_origin_returns_suggestions(self) -> None:
        fetch = AsyncMock()
        with (
            patch.object(station_service, "fetch_stations", AsyncMock(return_value=_stations())),
            patch.object(schedule_service, "fetch_schedule", fetch),
        ):
            response = await schedule_service.search_trains_by_name(
                "דוכיפת", "הר הרצל", client_time=CLIENT_TIME
            )

        assert response.found is False
        assert response.error == 'לא נמצאה תחנה בשם "דוכיפת"'
        assert response.suggestions[0].name == "סיירת דוכיפת"
        fetch.assert_not_awaited()

    async def test_unknown_destination_returns_suggestions(self) -> None:
        with (
            patch.object(station_service, "fetch_stations", AsyncMock(return_value=_stations())),
            patch.object(schedule_service, "fetch_schedule", AsyncMock()),
        ):
            response = await schedule_service.search_trains_by_name(
                "הר הרצל", "הרצל", client_time=CLIENT_TIME
            )

        assert response.found is False
        assert response.error == 'לא נמצאה תחנה בשם "הרצל"'
        assert response.suggestions[0].name == "הר הרצל"

    async def test_no_trains(self) -> None:
        empty = TrainSearchResult(TrainTimes=[])
        with (
            patch.object(station_service, "fetch_stations", AsyncMock(return_value=_stations())),
            patch.object(schedule_service, "fetch_schedule", AsyncMock(return_value=empty)),
        ):
            response = await schedule_service.search_trains_by_name(
                "הר הרצל", "סיירת דוכיפת", client_time=CLIENT_TIME
            )

        assert response.found is False
        assert response.error == "לא נמצאו רכבות זמינות במסלול זה בזמן שביקשת"
        assert response.schedule is None
