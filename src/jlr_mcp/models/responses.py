from pydantic import BaseModel, Field

from jlr_mcp.matching.models import StationMatch


class StationInfo(BaseModel):
    name: str = Field(description="Hebrew display name")
    id: str = Field(description="Operator station id")


class GetStationsResponse(BaseModel):
    stations: list[StationInfo]
    count: int = Field(description="Number of stations returned")


class FindStationResponse(BaseModel):
    query: str = Field(description="Original station name")
    found: bool
    station: StationInfo | None = None
    message: str | None = Field(default=None, description="Hebrew message when not found")
    suggestions: list[StationMatch] = Field(
        default_factory=list, description="Closest station names, best first"
    )


class RequestInfo(BaseModel):
    """Date and time a schedule was requested for."""

    date: str = Field(description="YYYYMMDD")
    time: str = Field(description="HHMM")
    day_of_week: str = Field(description="Hebrew day name, e.g. 'יום ראשון'")
    current_time: str = Field(description="Local time HH:MM:SS at request")


class TrainTimeResult(BaseModel):
    departure_time: str
    arrival_time: str
    load: int | None = Field(default=None, description="1=low, 2=medium, 3=high")
    load_level: str | None = Field(default=None, description="Hebrew crowding level")


class TrainScheduleResponse(BaseModel):
    from_station: str | None = None
    to_station: str | None = None
    travel_time: int | str | None = Field(default=None, description="Travel time in minutes")
    count_stations: int | str | None = Field(default=None, description="Stations on the way")
    last_train_time: str | None = None
    train_times: list[TrainTimeResult]
    request_info: RequestInfo | None = None


class SearchTrainsResponse(BaseModel):
    found: bool = Field(description="True if both stations were found and trains exist")
    from_station_name: str
    to_station_name: str
    error: str | None = Field(default=None, description="Hebrew error message")
    suggestions: list[StationMatch] = Field(
        default_factory=list, description="Suggestions for the station that was not found"
    )
    schedule: TrainScheduleResponse | None = None
    request_info: RequestInfo | None = None


class CoordinateInfo(BaseModel):
    lat: float
    lon: float


class LandmarkCoordinates(BaseModel):
    location: CoordinateInfo
    station: CoordinateInfo


class NearestStationResponse(BaseModel):
    found: bool
    location: str = Field(description="Landmark as given")
    message: str | None = Field(default=None, description="Hebrew message when not found")
    nearest_station: str | None = None
    station_id: str | None = Field(default=None, description="Operator id of the station")
    distance_meters: int | None = None
    distance: str | None = Field(default=None, description="Hebrew display distance")
    walk_minutes: int | None = None
    walk_time: str | None = Field(default=None, description="Hebrew display walking time")
    location_source: str | None = Field(default=None, description="geocoder or gazetteer")
    resolved_name: str | None = Field(
        default=None, description="Full place name reported by the geocoder"
    )
    outside_locality: bool = Field(
        default=False, description="Geocoder placed the landmark outside Jerusalem"
    )
    coordinates: LandmarkCoordinates | None = None
    has_schedule: bool = False
    schedule: TrainScheduleResponse | None = None
    request_info: RequestInfo | None = None
    error: str | None = Field(default=None, description="Hebrew error when schedule lookup fails")
