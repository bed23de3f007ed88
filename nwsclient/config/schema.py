"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from nwsclient.ingest.nws_client import DEFAULT_USER_AGENT, NWS_BASE_URL


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NWS_BASE_URL
    # Identifies the application to the service; include contact details.
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=5.0, ge=0.0)
    forecast_max_age_minutes: int = Field(default=360, ge=1)
    location: LocationConfig | None = None
