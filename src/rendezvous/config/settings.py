"""Configuration settings for rendezvous."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class FairnessStrategy(str, Enum):
    """How candidate venues are ranked across travelers."""

    MIN_MAX = "min_max"
    MIN_TOTAL = "min_total"
    MIN_VARIANCE = "min_variance"


class GeometryConfig(BaseModel):
    """Geometry defaults for generated polygons."""

    default_circle_segments: int = Field(
        default=64,
        ge=3,
        le=1024,
        description="Number of segments used when sampling circles",
    )


class VenueSearchConfig(BaseModel):
    """Configuration for the Overpass venue search."""

    endpoints: list[str] = Field(
        default_factory=lambda: [
            "https://overpass-api.de/api/interpreter",
            "https://overpass.kumi.systems/api/interpreter",
        ],
        min_length=1,
        description="Overpass interpreter URLs, tried in order",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP timeout per endpoint",
    )
    query_timeout: int = Field(
        default=25,
        ge=1,
        description="Server-side Overpass query timeout in seconds",
    )


class RendezvousConfig(BaseModel):
    """Configuration for ranking meeting points."""

    fairness: FairnessStrategy = Field(
        default=FairnessStrategy.MIN_MAX,
        description="Fairness strategy used to rank venues",
    )
    limit: int = Field(
        default=5,
        ge=1,
        description="Maximum number of suggestions returned",
    )


class ProcessingConfig(BaseModel):
    """Configuration for concurrent isochrone fetching."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker threads (None = one per participant)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RendezvousSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    venues: VenueSearchConfig = Field(default_factory=VenueSearchConfig)
    rendezvous: RendezvousConfig = Field(default_factory=RendezvousConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RendezvousSettings:
    """Get default application settings."""
    return RendezvousSettings()
