"""Environment-driven settings for datekit."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DST_LABEL = "(DST)"

DEFAULT_DATE_FORMATS: dict[str, str] = {
    "default": "%F %T",
    "date": "%Y-%m-%d",
    "time": "%H:%M:%S",
    "date_time": "%F %T",
    "iso_8601": "%FT%T%z",
}


class DatekitSettings(BaseSettings):
    """Global datekit settings."""

    model_config = SettingsConfigDict(
        env_prefix="datekit_", env_file=".env", extra="ignore"
    )

    locale: str = Field("en", description="Locale used for day and month names.")
    dst_label: str = Field(
        DEFAULT_DST_LABEL, description="Suffix appended to zone names when DST is active."
    )
    time_zone: Optional[str] = Field(
        None, description="Zone identifier used by the local_* formatting helpers."
    )
    date_formats: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_DATE_FORMATS),
        description="Symbolic date format names.",
    )

    # Logging settings.
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Log level used for logging statements."
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
