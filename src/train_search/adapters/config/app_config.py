"""12-factor configuration adapter using environment variables and a query file."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input files
    data_file: str = Field(
        default="data.json", description="Path to the JSON array of train records"
    )
    config_file: str = Field(
        default="config.json",
        description="Path to the query file (.json or .toml) with stations and criterion",
    )

    # Query overrides; when set they take precedence over the query file
    departure_station_id: str | None = Field(
        default=None, description="Departure station id, overrides the query file"
    )
    arrival_station_id: str | None = Field(
        default=None, description="Arrival station id, overrides the query file"
    )
    criterion: str | None = Field(
        default=None,
        description="Sort criterion: 'price', 'arrival-time' or 'departure-time'",
    )

    # Output
    output_format: str = Field(default="json", description="Output format: 'json' or 'table'")
    log_level: str = Field(default="WARNING", description="Logging level name")

    # Search tuning
    filter_before_sort: bool = Field(
        default=False,
        description="Sort only trains matching the station pair instead of the whole dataset",
    )

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format is either 'json' or 'table'."""
        if v.lower() not in ("json", "table"):
            raise ValueError("output_format must be either 'json' or 'table'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level
