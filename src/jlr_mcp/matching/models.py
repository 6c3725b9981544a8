from pydantic import BaseModel, Field


class MatchResult(BaseModel):
    """A ranked candidate string."""

    candidate: str
    similarity: float = Field(ge=0.0, le=1.0, description="Similarity score (0-1)")


class StationMatch(BaseModel):
    """A ranked operator station, used as a suggestion when a name lookup fails."""

    name: str = Field(description="Station display name")
    station_id: str = Field(description="Operator station id")
    similarity: float = Field(ge=0.0, le=1.0, description="Similarity to the query (0-1)")
