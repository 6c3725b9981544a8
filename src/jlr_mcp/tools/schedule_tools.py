"""MCP tools for light rail schedules."""

from mcp.server.fastmcp.exceptions import ToolError

from jlr_mcp.app import mcp
from jlr_mcp.errors import OperatorAPIError
from jlr_mcp.models.responses import SearchTrainsResponse, TrainScheduleResponse
from jlr_mcp.services import schedule_service


@mcp.tool()
async def get_train_schedule(
    from_station_id: str,
    to_station_id: str,
    date: str,
    time: str,
) -> TrainScheduleResponse:
    """Get the train schedule between two stations by station ID.

    Use get_stations or find_station to look up IDs first, or use
    search_trains_by_name to search by Hebrew names directly.

    Args:
        from_station_id: ID of the departure station.
        to_station_id: ID of the arrival station.
        date: Date in format YYYYMMDD.
        time: Time in format HHMM.

    Returns:
        TrainScheduleResponse with travel time, stop count, last train and
        the next departures (up to 10).
    """
    try:
        return await schedule_service.get_train_schedule(
            from_station_id=str(from_station_id),
            to_station_id=str(to_station_id),
            date=date,
            time=time,
        )
    except OperatorAPIError as e:
        raise ToolError(f"Failed to fetch schedule: {e}") from e


@mcp.tool()
async def search_trains_by_name(
    from_station_name: str,
    to_station_name: str,
    date: str | None = None,
    time: str | None = None,
    client_time: str | None = None,
) -> SearchTrainsResponse:
    """Search for trains between two stations using Hebrew station names.

    When asked about "הרכבות הקרובות" (the next trains), pass the user's
    current time as client_time so "now" is the user's now.

    Examples:
        search_trains_by_name("נווה יעקב צפון", "סיירת דוכיפת")
        search_trains_by_name("הר הרצל", "מרכז העיר", date="20250105", time="0830")

    Args:
        from_station_name: Hebrew name of the departure station.
        to_station_name: Hebrew name of the arrival station.
        date: Date in format YYYYMMDD (default: today).
        time: Time in format HHMM (default: current time).
        client_time: Client's current time in ISO format.

    Returns:
        SearchTrainsResponse. If a station name is not found, found=False and
        suggestions lists the closest station names.
    """
    try:
        return await schedule_service.search_trains_by_name(
            from_station_name=from_station_name.strip(),
            to_station_name=to_station_name.strip(),
            date=date,
            time=time,
            client_time=client_time,
        )
    except OperatorAPIError as e:
        raise ToolError(f"Failed to search trains: {e}") from e
    except ValueError as e:
        raise ToolError(f"Invalid client_time: {e}") from e
