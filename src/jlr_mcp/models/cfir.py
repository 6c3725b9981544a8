"""Typed records for the Cfir (light rail operator) API.

The API is an ASP.NET web service: every payload is wrapped in a ``d`` key and
objects may carry a ``__type`` marker. Unknown keys are ignored; missing
required keys fail validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StationRecord(BaseModel):
    """A station as listed by the operator."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    display_name: str = Field(alias="Text")
    station_id: str = Field(alias="Value")

    @field_validator("station_id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        # Ids arrive as numbers or strings depending on the endpoint version
        if isinstance(value, int | float):
            return str(int(value))
        return value


class StationsEnvelope(BaseModel):
    """Response body of GetSearchStations."""

    model_config = ConfigDict(extra="ignore")

    d: list[StationRecord]


class TrainTime(BaseModel):
    """A single departure in a schedule search.

    ``load`` is the operator's crowding indicator (Omes): 1=low, 2=medium, 3=high.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    departure_time: str = Field(alias="DepartureTime")
    arrival_time: str = Field(alias="ArrivalTime")
    load: int | None = Field(default=None, alias="Omes")


class TrainSearchResult(BaseModel):
    """Payload of SearchTrains."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    from_station_name: str | None = Field(default=None, alias="FromStationName")
    to_station_name: str | None = Field(default=None, alias="ToStationName")
    travel_time: int | str | None = Field(default=None, alias="TravelTime")
    count_stations: int | str | None = Field(default=None, alias="CountStations")
    last_train_time: str | None = Field(default=None, alias="LastTrainTime")
    train_times: list[TrainTime] | None = Field(default=None, alias="TrainTimes")


class TrainSearchEnvelope(BaseModel):
    """Response body of SearchTrains. ``d`` is null when the search has no result."""

    model_config = ConfigDict(extra="ignore")

    d: TrainSearchResult | None = None
