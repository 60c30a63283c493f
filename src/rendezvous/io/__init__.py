"""I/O layer for rendezvous.

This module handles the boundaries of the package: GeoJSON files on disk and
the Overpass venue search service.

Key responsibilities:
- Parse GeoJSON Polygon / Feature / FeatureCollection input
- Serialize intersection results as GeoJSON
- Query Overpass for named venues inside a region

Key classes:
- OverpassVenueSearch: Venue search with endpoint fallback
"""

from rendezvous.io.geojson import (
    load_polygon,
    parse_polygon,
    polygon_to_feature_collection,
    write_polygons,
)
from rendezvous.io.venues import (
    VENUE_TAG_MAP,
    OverpassVenueSearch,
    build_overpass_query,
    infer_venue_type,
    tag_for,
)

__all__ = [
    "VENUE_TAG_MAP",
    "OverpassVenueSearch",
    "build_overpass_query",
    "infer_venue_type",
    "load_polygon",
    "parse_polygon",
    "polygon_to_feature_collection",
    "tag_for",
    "write_polygons",
]
