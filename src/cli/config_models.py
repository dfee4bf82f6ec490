"""Pydantic configuration models for the social battery tracker."""

from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ViewsConfig(BaseModel):
    """Derived view parameters."""

    trend_window_days: float = 7.0
    top_moods_limit: int = 5
    display_date_format: str = "%Y-%m-%d"
    timestamp_format: str = "%Y-%m-%d %H:%M"

    @field_validator("trend_window_days")
    @classmethod
    def validate_window(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"trend_window_days must be positive, got {v}")
        return v

    @field_validator("top_moods_limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"top_moods_limit must be >= 0, got {v}")
        return v

    @property
    def trend_window(self) -> timedelta:
        return timedelta(days=self.trend_window_days)


class PathsConfig(BaseModel):
    """File paths configuration."""

    export_dir: Path = Path("~/battery/exports")

    @model_validator(mode="after")
    def expand_paths(self):
        self.export_dir = self.export_dir.expanduser()
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class TrackerConfig(BaseModel):
    """Main configuration model."""

    views: ViewsConfig = Field(default_factory=ViewsConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "TrackerConfig":
        """Create config from dict, accepting string paths."""
        if isinstance(data.get("paths"), dict):
            for key, value in data["paths"].items():
                if isinstance(value, str):
                    data["paths"][key] = Path(value)
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python", by_alias=True)
