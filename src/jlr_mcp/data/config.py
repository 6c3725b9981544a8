from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LightRailConfig(BaseSettings):
    """Configuration for the operator API, the geocoder and response shaping.

    Automatically loads from environment variables and .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # Transit operator (Cfir) API
    stations_url: str = "https://www.cfir.co.il/__svws__/SVService.asmx/GetSearchStations"
    search_trains_url: str = "https://www.cfir.co.il/__svws__/SVService.asmx/SearchTrains"
    operator_origin: str = "https://www.cfir.co.il"

    # Geocoding (OpenStreetMap Nominatim)
    nominatim_url: str = Field(
        default="https://nominatim.openstreetmap.org/search", alias="JLR_NOMINATIM_URL"
    )
    geocoder_user_agent: str = Field(
        default="JerusalemLightRailMCPServer/1.0", alias="JLR_GEOCODER_USER_AGENT"
    )
    geocoding_enabled: bool = Field(default=True, alias="JLR_GEOCODING_ENABLED")

    http_timeout_seconds: float = Field(default=30.0, alias="JLR_HTTP_TIMEOUT")
    timezone: str = Field(default="Asia/Jerusalem", alias="JLR_TIMEZONE")

    # Response shaping
    schedule_limit: int = Field(default=10, alias="JLR_SCHEDULE_LIMIT")
    landmark_schedule_limit: int = 5
    suggestion_limit: int = Field(default=5, alias="JLR_SUGGESTION_LIMIT")
    default_destination: str = Field(default="תחנה מרכזית", alias="JLR_DEFAULT_DESTINATION")


@lru_cache
def get_config() -> LightRailConfig:
    """Get light rail configuration (cached singleton).

    Returns:
        LightRailConfig with values from .env file or environment variables.
    """
    return LightRailConfig()
