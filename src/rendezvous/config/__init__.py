"""Configuration management for rendezvous.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Geometry defaults (circle sampling)
- VenueSearchConfig: Overpass endpoints and timeouts
- RendezvousConfig: Fairness strategy and result limit
- ProcessingConfig: Concurrency settings
- LoggingConfig: Logging settings
- RendezvousSettings: Main application settings
"""

from rendezvous.config.settings import (
    FairnessStrategy,
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    RendezvousConfig,
    RendezvousSettings,
    VenueSearchConfig,
    get_default_settings,
)

__all__ = [
    "FairnessStrategy",
    "GeometryConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "RendezvousConfig",
    "RendezvousSettings",
    "VenueSearchConfig",
    "get_default_settings",
]
