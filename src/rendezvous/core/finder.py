"""Rendezvous orchestration: from traveler positions to ranked meeting venues.

The workflow:
1. Fetch one isochrone per participant (concurrently)
2. Intersect the isochrones into every disjoint reachable region
3. Search venues inside the region (or the envelope of several regions)
4. Fall back to the region centroid when no venue is found
5. Score venues by travel time and rank them by a fairness strategy
"""

import math
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol

import structlog

from rendezvous.config import FairnessStrategy, RendezvousSettings
from rendezvous.core.geodesic import area, envelope, weighted_centroid
from rendezvous.core.intersection import intersect_all
from rendezvous.domain import (
    Isochrone,
    LatLon,
    Polygon,
    RendezvousOptions,
    RendezvousSuggestion,
    Venue,
)
from rendezvous.engines import RoutingEngine
from rendezvous.exceptions import RendezvousInputError
from rendezvous.utils import SearchLogger, SearchStats

MEETING_POINT_NAME = "Meeting point"
MEETING_POINT_TYPE = "centroid"


class VenueSearch(Protocol):
    """Anything that can list venues inside a polygon."""

    def search(self, polygon: Polygon, venue_types: list[str]) -> list[Venue]: ...


def fairness_score(times: list[float], strategy: FairnessStrategy | str) -> float:
    """Score a venue's travel times; lower is fairer.

    Args:
        times: Travel time for each participant in minutes
        strategy: min_max (longest trip), min_total (sum of trips) or
            min_variance (population standard deviation)

    Returns:
        Fairness score
    """
    if not times:
        return math.inf

    strategy = FairnessStrategy(strategy)
    if strategy is FairnessStrategy.MIN_TOTAL:
        return sum(times)
    if strategy is FairnessStrategy.MIN_VARIANCE:
        mean = sum(times) / len(times)
        return math.sqrt(sum((t - mean) ** 2 for t in times) / len(times))
    return max(times)


class RendezvousFinder:
    """Finds fair meeting venues for a group of travelers.

    Example:
        finder = RendezvousFinder(engine, OverpassVenueSearch())
        suggestions = finder.find(RendezvousOptions(
            participants=[LatLon(51.45, -2.59, "Bristol"), LatLon(51.38, -2.36, "Bath")],
            mode=TransportMode.DRIVE,
            max_time_minutes=30,
            venue_types=["cafe"],
        ))
    """

    def __init__(
        self,
        engine: RoutingEngine,
        venue_search: VenueSearch,
        settings: RendezvousSettings | None = None,
    ) -> None:
        """Initialize the finder.

        Args:
            engine: Routing backend producing isochrones and route matrices
            venue_search: Venue search backend
            settings: Application settings (defaults if None)
        """
        self.engine = engine
        self.venue_search = venue_search
        self.settings = settings or RendezvousSettings()
        self.logger = structlog.get_logger("rendezvous.finder")
        self.search_logger = SearchLogger(self.logger)

    @property
    def stats(self) -> SearchStats:
        """Statistics of the most recent search."""
        return self.search_logger.stats

    def fetch_isochrones(self, options: RendezvousOptions) -> list[Isochrone]:
        """Fetch every participant's isochrone concurrently, preserving order."""
        participants = options.participants
        max_workers = self.settings.processing.max_workers or len(participants)

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(
                executor.map(
                    lambda p: self.engine.compute_isochrone(
                        p, options.mode, options.max_time_minutes
                    ),
                    participants,
                )
            )

    def find(self, options: RendezvousOptions) -> list[RendezvousSuggestion]:
        """Rank meeting venues reachable by every participant.

        Args:
            options: Participants, transport mode, time budget and venue types

        Returns:
            Suggestions sorted by fairness score (best first). Empty when the
            isochrones do not overlap or no venue is reachable in time.

        Raises:
            RendezvousInputError: If fewer than 2 participants are given
            RoutingEngineError: If the routing backend fails
            VenueSearchError: If the venue backend fails
        """
        participants = options.participants
        if len(participants) < 2:
            raise RendezvousInputError("A rendezvous requires at least 2 participants")

        fairness = FairnessStrategy(options.fairness or self.settings.rendezvous.fairness)
        limit = options.limit or self.settings.rendezvous.limit

        self.search_logger = SearchLogger(self.logger)
        stats = self.search_logger.stats
        stats.start_time = time.time()

        started = time.time()
        isochrones = self.fetch_isochrones(options)
        self.search_logger.log_isochrones(
            len(isochrones), self.engine.name, (time.time() - started) * 1000
        )

        regions = intersect_all([iso.polygon for iso in isochrones])
        self.search_logger.log_intersection(len(regions), sum(area(r) for r in regions))
        if not regions:
            stats.end_time = time.time()
            return []

        search_area = regions[0] if len(regions) == 1 else envelope(regions)
        venues = self.venue_search.search(search_area, options.venue_types)

        fallback = not venues
        if fallback:
            c = weighted_centroid(regions)
            venues = [
                Venue(name=MEETING_POINT_NAME, lat=c.lat, lon=c.lon, venue_type=MEETING_POINT_TYPE)
            ]
        self.search_logger.log_venues(len(venues), fallback)

        destinations = [LatLon(lat=v.lat, lon=v.lon) for v in venues]
        matrix = self.engine.compute_route_matrix(participants, destinations, options.mode)

        suggestions: list[RendezvousSuggestion] = []
        for vi, venue in enumerate(venues):
            travel_times: dict[str, float] = {}
            times: list[float] = []
            reason = None

            for pi, participant in enumerate(participants):
                duration = matrix.duration(pi, vi)
                if duration is None:
                    reason = f"no route for participant {pi}"
                    break
                if duration < 0:
                    reason = f"unreachable for participant {pi}"
                    break
                if duration > options.max_time_minutes:
                    reason = f"participant {pi} needs {duration} min"
                    break

                label = participant.label or f"participant_{pi}"
                travel_times[label] = round(duration, 1)
                times.append(duration)

            if reason is not None:
                self.search_logger.log_venue_discarded(venue.name, reason)
                continue

            suggestions.append(
                RendezvousSuggestion(
                    venue=venue,
                    travel_times=travel_times,
                    fairness_score=fairness_score(times, fairness),
                )
            )

        suggestions.sort(key=lambda s: s.fairness_score)
        suggestions = suggestions[:limit]

        self.search_logger.log_ranked(len(suggestions), fairness.value)
        stats.end_time = time.time()
        return suggestions
