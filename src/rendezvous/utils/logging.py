"""Logging utilities for rendezvous."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class SearchStats:
    """Statistics from one rendezvous search."""

    participants: int = 0
    regions: int = 0
    venues_found: int = 0
    venues_discarded: int = 0
    suggestions: int = 0
    used_centroid_fallback: bool = False
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate search duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"rendezvous_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("rendezvous")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class SearchLogger:
    """Logger for tracking the stages of a rendezvous search."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SearchStats()

    def log_isochrones(self, participants: int, engine: str, duration_ms: float) -> None:
        """Log fetched isochrones."""
        self._logger.info(
            "Isochrones fetched",
            participants=participants,
            engine=engine,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.participants = participants

    def log_intersection(self, regions: int, total_area_m2: float) -> None:
        """Log the intersection result."""
        self._logger.info(
            "Isochrones intersected",
            regions=regions,
            total_area_km2=round(total_area_m2 / 1_000_000, 3),
        )
        self._stats.regions = regions

    def log_venues(self, found: int, fallback: bool) -> None:
        """Log venue search results."""
        self._logger.info("Venues found", venues=found, centroid_fallback=fallback)
        self._stats.venues_found = found
        self._stats.used_centroid_fallback = fallback

    def log_venue_discarded(self, venue: str, reason: str) -> None:
        """Log a venue dropped before ranking."""
        self._logger.debug("Venue discarded", venue=venue, reason=reason)
        self._stats.venues_discarded += 1

    def log_ranked(self, suggestions: int, strategy: str) -> None:
        """Log the final ranking."""
        self._logger.info("Venues ranked", suggestions=suggestions, strategy=strategy)
        self._stats.suggestions = suggestions

    @property
    def stats(self) -> SearchStats:
        """Get current search statistics."""
        return self._stats
