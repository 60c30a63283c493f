"""Venue search against the OpenStreetMap Overpass API.

The search is scoped to a polygon's bounding box; candidate venues are named
OSM nodes carrying the tag mapped from each requested venue type.
"""

import logging

import requests

from rendezvous.config import VenueSearchConfig
from rendezvous.core.geodesic import bounding_box
from rendezvous.domain import BBox, Polygon, Venue
from rendezvous.exceptions import VenueSearchError

logger = logging.getLogger(__name__)

VENUE_TAG_MAP: dict[str, str] = {
    "park": "leisure=park",
    "cafe": "amenity=cafe",
    "restaurant": "amenity=restaurant",
    "service_station": "amenity=fuel",
    "library": "amenity=library",
    "pub": "amenity=pub",
    "playground": "leisure=playground",
    "community_centre": "amenity=community_centre",
    "bar": "amenity=bar",
    "fast_food": "amenity=fast_food",
    "garden": "leisure=garden",
    "theatre": "amenity=theatre",
    "arts_centre": "amenity=arts_centre",
    "fitness_centre": "leisure=fitness_centre",
    "sports_centre": "leisure=sports_centre",
    "escape_game": "leisure=escape_game",
    "swimming_pool": "leisure=swimming_pool",
}


def tag_for(venue_type: str) -> tuple[str, str]:
    """Map a venue type to its OSM (key, value) tag; unknown types are amenities."""
    key, _, value = VENUE_TAG_MAP.get(venue_type, f"amenity={venue_type}").partition("=")
    return key, value


def build_overpass_query(bbox: BBox, venue_types: list[str], query_timeout: int = 25) -> str:
    """Build an Overpass QL query for named nodes of the given types.

    Args:
        bbox: Search area
        venue_types: Requested venue types
        query_timeout: Server-side timeout in seconds

    Returns:
        Overpass QL query string
    """
    bbox_str = f"{bbox.min_lat},{bbox.min_lon},{bbox.max_lat},{bbox.max_lon}"
    lines = []
    for venue_type in venue_types:
        key, value = tag_for(venue_type)
        lines.append(f'node["{key}"="{value}"]["name"]({bbox_str});')

    body = "\n".join(lines)
    return f"[out:json][timeout:{query_timeout}];(\n{body}\n);out body;"


def infer_venue_type(tags: dict[str, str], requested: list[str]) -> str:
    """Pick the first requested venue type whose tag matches the element."""
    for venue_type in requested:
        if venue_type in VENUE_TAG_MAP:
            key, value = tag_for(venue_type)
            if tags.get(key) == value:
                return venue_type
    return requested[0] if requested else "unknown"


class OverpassVenueSearch:
    """Searches venues inside a polygon via Overpass, falling back across endpoints.

    Example:
        search = OverpassVenueSearch(VenueSearchConfig())
        venues = search.search(region, ["cafe", "park"])
    """

    def __init__(
        self,
        config: VenueSearchConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the venue search.

        Args:
            config: Endpoints and timeouts (defaults if None)
            session: HTTP session to use (a new one if None)
        """
        self.config = config or VenueSearchConfig()
        self._session = session or requests.Session()

    def search(self, polygon: Polygon, venue_types: list[str]) -> list[Venue]:
        """Find named venues of the requested types inside the polygon's bounding box.

        Args:
            polygon: Search region
            venue_types: Requested venue types

        Returns:
            Venues from the first endpoint that answers successfully

        Raises:
            VenueSearchError: If every endpoint fails
        """
        if not venue_types:
            return []

        query = build_overpass_query(
            bounding_box(polygon), venue_types, self.config.query_timeout
        )
        last_error: VenueSearchError | None = None

        for url in self.config.endpoints:
            try:
                response = self._session.post(
                    url,
                    data={"data": query},
                    timeout=self.config.timeout_seconds,
                )
            except requests.RequestException as e:
                logger.warning("Overpass endpoint %s failed: %s", url, e)
                last_error = VenueSearchError(str(e))
                continue

            if not response.ok:
                logger.warning("Overpass endpoint %s returned HTTP %d", url, response.status_code)
                last_error = VenueSearchError(
                    f"Overpass API error from {url}",
                    status_code=response.status_code,
                    body=response.text,
                )
                continue

            try:
                data = response.json()
            except ValueError as e:
                last_error = VenueSearchError(f"Invalid JSON from {url}: {e}")
                continue

            return self._parse_elements(data.get("elements") or [], venue_types)

        raise last_error or VenueSearchError("All Overpass endpoints failed")

    @staticmethod
    def _parse_elements(elements: list[dict], venue_types: list[str]) -> list[Venue]:
        venues: list[Venue] = []
        for element in elements:
            tags = element.get("tags") or {}
            name = tags.get("name")
            if not name or "lat" not in element or "lon" not in element:
                continue
            venues.append(
                Venue(
                    name=name,
                    lat=float(element["lat"]),
                    lon=float(element["lon"]),
                    venue_type=infer_venue_type(tags, venue_types),
                    osm_id=f"{element.get('type', 'node')}/{element.get('id')}",
                )
            )
        return venues
