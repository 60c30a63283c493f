"""Travel and venue types exchanged with routing and venue collaborators."""

from dataclasses import dataclass, field
from enum import Enum

from rendezvous.config.settings import FairnessStrategy
from rendezvous.domain.geometry import Polygon


class TransportMode(str, Enum):
    """Transport mode for routing calculations."""

    DRIVE = "drive"
    CYCLE = "cycle"
    WALK = "walk"
    PUBLIC_TRANSIT = "public_transit"


@dataclass(frozen=True, slots=True)
class LatLon:
    """A traveler position with an optional display label."""

    lat: float
    lon: float
    label: str | None = None


@dataclass(frozen=True)
class Isochrone:
    """Area reachable from an origin within a travel-time budget."""

    origin: LatLon
    mode: TransportMode
    time_minutes: float
    polygon: Polygon


@dataclass(frozen=True, slots=True)
class MatrixEntry:
    """A single origin/destination cell of a route matrix.

    A negative duration marks an unreachable destination.
    """

    origin_index: int
    destination_index: int
    duration_minutes: float
    distance_km: float


@dataclass
class RouteMatrix:
    """Travel times between every origin and destination."""

    origins: list[LatLon]
    destinations: list[LatLon]
    entries: list[MatrixEntry] = field(default_factory=list)

    def duration(self, origin_index: int, destination_index: int) -> float | None:
        """Look up the travel time for one cell.

        Args:
            origin_index: Index into origins
            destination_index: Index into destinations

        Returns:
            Duration in minutes, or None when the matrix has no such cell
        """
        for entry in self.entries:
            if entry.origin_index == origin_index and entry.destination_index == destination_index:
                return entry.duration_minutes
        return None


@dataclass(frozen=True, slots=True)
class Venue:
    """A candidate meeting place."""

    name: str
    lat: float
    lon: float
    venue_type: str
    osm_id: str | None = None


@dataclass
class RendezvousOptions:
    """Options for a rendezvous search."""

    participants: list[LatLon]
    mode: TransportMode
    max_time_minutes: float
    venue_types: list[str]
    fairness: FairnessStrategy | None = None
    limit: int | None = None


@dataclass(frozen=True)
class RendezvousSuggestion:
    """A ranked meeting venue with per-traveler travel times."""

    venue: Venue
    travel_times: dict[str, float]
    fairness_score: float
