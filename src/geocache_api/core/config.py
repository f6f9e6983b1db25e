"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocoding provider
    geocoding_url: str = Field(
        default="http://api.positionstack.com/v1/forward",
        description="Forward geocoding endpoint URL",
    )
    reverse_geocoding_url: str = Field(
        default="http://api.positionstack.com/v1/reverse",
        description="Reverse geocoding endpoint URL",
    )
    geocoding_api_key: str = Field(
        min_length=1,
        description="Access key sent to the geocoding provider",
    )
    geocoding_timeout: float = Field(
        default=10.0,
        description="Provider request timeout in seconds",
        gt=0,
    )

    @field_validator("geocoding_url", "reverse_geocoding_url")
    @classmethod
    def validate_provider_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "Provider URLs must start with http:// or https://"
            raise ValueError(msg)
        return v

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # API
    api_prefix: str = Field(
        default="",
        description="Path prefix for all routes (empty serves them at the root)",
    )

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        if v and (not v.startswith("/") or v.endswith("/")):
            msg = "api_prefix must be empty or start with '/' and not end with '/'"
            raise ValueError(msg)
        return v


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
