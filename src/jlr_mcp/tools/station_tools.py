"""MCP tools for listing and finding light rail stations."""

from mcp.server.fastmcp.exceptions import ToolError

from jlr_mcp.app import mcp
from jlr_mcp.errors import OperatorAPIError
from jlr_mcp.models.responses import FindStationResponse, GetStationsResponse
from jlr_mcp.services import station_service


@mcp.tool()
async def get_stations() -> GetStationsResponse:
    """Get all Jerusalem light rail stations and their IDs.

    Returns:
        GetStationsResponse with every station's Hebrew name and operator id.
    """
    try:
        return await station_service.get_stations()
    except OperatorAPIError as e:
        raise ToolError(f"Failed to fetch stations: {e}") from e


@mcp.tool()
async def find_station(station_name: str) -> FindStationResponse:
    """Find a light rail station ID by its Hebrew name.

    The name must match exactly. When it does not, the response lists the
    closest station names (typos, partial names) so the caller can retry.

    Examples:
        find_station("נווה יעקב צפון")  # found=True
        find_station("יעקב")  # found=False, suggestions start with "נווה יעקב צפון"

    Args:
        station_name: The Hebrew name of the station.

    Returns:
        FindStationResponse with the station or suggestions.
    """
    try:
        return await station_service.find_station(station_name.strip())
    except OperatorAPIError as e:
        raise ToolError(f"Failed to find station: {e}") from e
