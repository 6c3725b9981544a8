"""MCP tool for finding the nearest station to a landmark."""

from mcp.server.fastmcp.exceptions import ToolError

from jlr_mcp.app import mcp
from jlr_mcp.errors import OperatorAPIError
from jlr_mcp.models.responses import NearestStationResponse
from jlr_mcp.services import landmark_service


@mcp.tool()
async def find_nearest_station_to_landmark(
    landmark: str,
    time: str | None = None,
    date: str | None = None,
    client_time: str | None = None,
) -> NearestStationResponse:
    """Find the nearest light rail station to a place, address or landmark in Jerusalem.

    The landmark is geocoded with OpenStreetMap; if that fails, a built-in list
    of well-known places (הכותל, שוק מחנה יהודה, יד ושם, ...) is used.
    Returns the walking distance and time to the station and its next
    departures toward the central bus station.

    Examples:
        find_nearest_station_to_landmark("הכותל המערבי")
        find_nearest_station_to_landmark("רחוב יפו 97")

    Args:
        landmark: The place/address/landmark name in Hebrew.
        time: Time in format HHMM (default: current time).
        date: Date in format YYYYMMDD (default: today).
        client_time: Client's current time in ISO format.

    Returns:
        NearestStationResponse. found=False when the place cannot be located.
    """
    if not landmark.strip():
        raise ToolError("landmark must not be empty")

    try:
        return await landmark_service.find_nearest_station_to_landmark(
            landmark=landmark.strip(),
            date=date,
            time=time,
            client_time=client_time,
        )
    except OperatorAPIError as e:
        raise ToolError(f"Failed to find nearest station: {e}") from e
    except ValueError as e:
        raise ToolError(f"Invalid client_time: {e}") from e
