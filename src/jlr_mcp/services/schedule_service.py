"""Schedule searches between light rail stations."""

import logging

from jlr_mcp.data.cfir_client import CfirClient
from jlr_mcp.data.config import LightRailConfig, get_config
from jlr_mcp.errors import OperatorAPIError
from jlr_mcp.models.cfir import TrainSearchResult
from jlr_mcp.models.responses import (
    RequestInfo,
    SearchTrainsResponse,
    TrainScheduleResponse,
    TrainTimeResult,
)
from jlr_mcp.services import station_service
from jlr_mcp.services.formatting import load_level
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


def has_train_times(result: TrainSearchResult | None) -> bool:
    return result is not None and bool(result.train_times)


def to_schedule_response(
    result: TrainSearchResult,
    limit: int,
    request_info: RequestInfo | None = None,
) -> TrainScheduleResponse:
    """Convert an operator search result, keeping the first `limit` departures."""
    train_times = [
        TrainTimeResult(
            departure_time=t.departure_time,
            arrival_time=t.arrival_time,
            load=t.load,
            load_level=load_level(t.load),
        )
        for t in (result.train_times or [])[:limit]
    ]
    return TrainScheduleResponse(
        from_station=result.from_station_name,
        to_station=result.to_station_name,
        travel_time=result.travel_time,
        count_stations=result.count_stations,
        last_train_time=result.last_train_time,
        train_times=train_times,
        request_info=request_info,
    )


async def fetch_schedule(
    from_id: str, to_id: str, date: str, time: str
) -> TrainSearchResult | None:
    """Raw schedule search against the operator API.

    Raises:
        OperatorAPIError: If the operator API is unavailable.
    """
    async with CfirClient(_get_config()) as client:
        return await client.search_trains(from_id, to_id, date, time)


async def get_train_schedule(
    from_station_id: str,
    to_station_id: str,
    date: str,
    time: str,
) -> TrainScheduleResponse:
    """Get departures between two station ids.

    Args:
        from_station_id: Departure station id.
        to_station_id: Arrival station id.
        date: Date as YYYYMMDD.
        time: Time as HHMM.

    Returns:
        TrainScheduleResponse with the first `schedule_limit` departures.

    Raises:
        OperatorAPIError: If the API fails or returned no train times.
    """
    result = await fetch_schedule(from_station_id, to_station_id, date, time)
    if result is None or result.train_times is None:
        raise OperatorAPIError("No train times found in the response")

    return to_schedule_response(result, _get_config().schedule_limit)


async def search_trains_by_name(
    from_station_name: str,
    to_station_name: str,
    date: str | None = None,
    time: str | None = None,
    client_time: str | None = None,
) -> SearchTrainsResponse:
    """Search departures between two stations given by Hebrew name.

    Date and time default to the client's current time when supplied, else
    the server's current local time.

    Returns:
        SearchTrainsResponse. When a name has no exact match, found=False with
        suggestions for that name. When no trains run, found=False with a
        Hebrew explanation.

    Raises:
        OperatorAPIError: If the operator API is unavailable.
        ValueError: If client_time is not ISO 8601.
    """
    config = _get_config()
    request_info, _ = build_request_info(date, time, client_time, config.timezone)

    logger.info(
        f"Searching trains {from_station_name} -> {to_station_name} "
        f"at {request_info.date} {request_info.time}"
    )

    stations = await station_service.fetch_stations()

    def station_not_found(name: str) -> SearchTrainsResponse:
        return SearchTrainsResponse(
            found=False,
            from_station_name=from_station_name,
            to_station_name=to_station_name,
            error=f'לא נמצאה תחנה בשם "{name}"',
            suggestions=station_service.suggest_stations(name, stations),
            request_info=request_info,
        )

    from_station = station_service.find_station_by_name(stations, from_station_name)
    if from_station is None:
        return station_not_found(from_station_name)
    to_station = station_service.find_station_by_name(stations, to_station_name)
    if to_station is None:
        return station_not_found(to_station_name)

    logger.debug(
        f"Stations found - from: {from_station.station_id}, to: {to_station.station_id}"
    )

    result = await fetch_schedule(
        from_station.station_id, to_station.station_id, request_info.date, request_info.time
    )
    if not has_train_times(result):
        return SearchTrainsResponse(
            found=False,
            from_station_name=from_station_name,
            to_station_name=to_station_name,
            error="לא נמצאו רכבות זמינות במסלול זה בזמן שביקשת",
            request_info=request_info,
        )

    return SearchTrainsResponse(
        found=True,
        from_station_name=from_station_name,
        to_station_name=to_station_name,
        schedule=to_schedule_response(result, config.schedule_limit, request_info),
        request_info=request_info,
    )
