"""End-to-end rendezvous search with circular isochrones."""

import math

import pytest

from rendezvous.config import RendezvousSettings
from rendezvous.core import RendezvousFinder, area, circle_to_polygon, intersect_all
from rendezvous.domain import (
    Isochrone,
    LatLon,
    MatrixEntry,
    Polygon,
    RendezvousOptions,
    RouteMatrix,
    TransportMode,
    Venue,
)
from rendezvous.engines import RoutingEngine

SPEED_KM_PER_MIN = 0.5


def haversine_km(a: LatLon, b: LatLon) -> float:
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * 6371.0088 * math.asin(math.sqrt(h))


class CrowFliesEngine:
    """Routing engine travelling in straight lines at constant speed."""

    name = "crow-flies"

    def compute_isochrone(
        self,
        origin: LatLon,
        mode: TransportMode,
        time_minutes: float,
    ) -> Isochrone:
        radius_m = time_minutes * SPEED_KM_PER_MIN * 1000
        polygon = circle_to_polygon((origin.lon, origin.lat), radius_m, segments=48)
        return Isochrone(origin=origin, mode=mode, time_minutes=time_minutes, polygon=polygon)

    def compute_route_matrix(
        self,
        origins: list[LatLon],
        destinations: list[LatLon],
        mode: TransportMode,
    ) -> RouteMatrix:
        entries = []
        for oi, origin in enumerate(origins):
            for di, destination in enumerate(destinations):
                km = haversine_km(origin, destination)
                entries.append(MatrixEntry(oi, di, km / SPEED_KM_PER_MIN, km))
        return RouteMatrix(origins=origins, destinations=destinations, entries=entries)


class StaticVenueSearch:
    """Venue search returning a fixed list inside the search polygon's box.

    Venues in `unfiltered` are returned for every search.
    """

    def __init__(self, venues: list[Venue], unfiltered: list[Venue] | None = None) -> None:
        self.venues = venues
        self.unfiltered = unfiltered or []
        self.polygons: list[Polygon] = []

    def search(self, polygon: Polygon, venue_types: list[str]) -> list[Venue]:
        self.polygons.append(polygon)
        lons = [p[0] for p in polygon.ring]
        lats = [p[1] for p in polygon.ring]
        inside = [
            v
            for v in self.venues
            if min(lons) <= v.lon <= max(lons) and min(lats) <= v.lat <= max(lats)
        ]
        return inside + self.unfiltered


PARTICIPANTS = [
    LatLon(51.4545, -2.5879, "Bristol"),
    LatLon(51.3811, -2.3590, "Bath"),
    LatLon(51.3200, -2.6500, "Chew Magna"),
]


@pytest.fixture
def options() -> RendezvousOptions:
    """Three travelers with a 30 minute budget."""
    return RendezvousOptions(
        participants=PARTICIPANTS,
        mode=TransportMode.DRIVE,
        max_time_minutes=30,
        venue_types=["cafe", "park"],
    )


class TestRendezvousFlow:
    """Full searches through the intersection engine."""

    def test_engine_satisfies_protocol(self) -> None:
        assert isinstance(CrowFliesEngine(), RoutingEngine)

    def test_isochrones_share_one_region(self) -> None:
        engine = CrowFliesEngine()
        polygons = [
            engine.compute_isochrone(p, TransportMode.DRIVE, 30).polygon for p in PARTICIPANTS
        ]

        regions = intersect_all(polygons)

        assert len(regions) == 1
        assert 0 < area(regions[0]) < min(area(p) for p in polygons)

    def test_ranks_reachable_venues(self, options: RendezvousOptions) -> None:
        central = Venue(name="Keynsham Cafe", lat=51.39, lon=-2.52, venue_type="cafe")
        edge = Venue(name="Pensford Park", lat=51.37, lon=-2.55, venue_type="park")
        search = StaticVenueSearch([central, edge])
        finder = RendezvousFinder(CrowFliesEngine(), search)

        result = finder.find(options)

        assert {s.venue.name for s in result} == {"Keynsham Cafe", "Pensford Park"}
        assert result[0].fairness_score <= result[1].fairness_score
        for suggestion in result:
            assert set(suggestion.travel_times) == {"Bristol", "Bath", "Chew Magna"}
            assert max(suggestion.travel_times.values()) <= 30
        assert finder.stats.participants == 3
        assert finder.stats.regions == 1
        assert finder.stats.suggestions == 2

    def test_out_of_reach_venue_discarded(self, options: RendezvousOptions) -> None:
        """A venue returned by the search but beyond one traveler's budget is dropped."""
        central = Venue(name="Keynsham Cafe", lat=51.39, lon=-2.52, venue_type="cafe")
        far = Venue(name="Wells Cathedral Green", lat=51.21, lon=-2.64, venue_type="park")
        search = StaticVenueSearch([central], unfiltered=[far])
        finder = RendezvousFinder(CrowFliesEngine(), search)

        result = finder.find(options)

        assert [s.venue.name for s in result] == ["Keynsham Cafe"]
        assert finder.stats.venues_discarded == 1

    def test_meeting_point_when_no_venues(self, options: RendezvousOptions) -> None:
        search = StaticVenueSearch([])
        settings = RendezvousSettings(rendezvous={"fairness": "min_total", "limit": 3})

        result = RendezvousFinder(CrowFliesEngine(), search, settings).find(options)

        assert len(result) == 1
        meeting = result[0].venue
        assert meeting.name == "Meeting point"
        region = search.polygons[0]
        lons = [p[0] for p in region.ring]
        lats = [p[1] for p in region.ring]
        assert min(lons) <= meeting.lon <= max(lons)
        assert min(lats) <= meeting.lat <= max(lats)

    def test_too_tight_budget_returns_nothing(self) -> None:
        search = StaticVenueSearch([])
        options = RendezvousOptions(
            participants=PARTICIPANTS,
            mode=TransportMode.WALK,
            max_time_minutes=5,
            venue_types=["cafe"],
        )

        assert RendezvousFinder(CrowFliesEngine(), search).find(options) == []
        assert search.polygons == []
