"""GeoJSON reading and writing for single-ring polygons.

Accepts a bare Polygon geometry, a Feature wrapping one, or a
FeatureCollection (first Polygon feature). Output is always the restricted
Polygon shape: one closed ring of [lon, lat] positions.
"""

import json
from pathlib import Path
from typing import Any

from rendezvous.domain import Polygon
from rendezvous.exceptions import GeoJSONError


def parse_polygon(data: dict[str, Any]) -> Polygon:
    """Extract a polygon from parsed GeoJSON.

    Args:
        data: Parsed GeoJSON object

    Returns:
        Polygon instance

    Raises:
        GeoJSONError: If no single-ring Polygon geometry can be found
    """
    if not isinstance(data, dict):
        raise GeoJSONError("top-level value must be an object")

    kind = data.get("type")
    if kind == "FeatureCollection":
        features = data.get("features") or []
        if not isinstance(features, list):
            raise GeoJSONError("feature collection features must be an array")
        for feature in features:
            if not isinstance(feature, dict):
                continue
            geometry = feature.get("geometry")
            if isinstance(geometry, dict) and geometry.get("type") == "Polygon":
                return Polygon.from_dict(geometry)
        raise GeoJSONError("feature collection has no Polygon feature")

    if kind == "Feature":
        geometry = data.get("geometry")
        if not isinstance(geometry, dict):
            raise GeoJSONError("feature has no geometry")
        return Polygon.from_dict(geometry)

    return Polygon.from_dict(data)


def polygon_to_feature_collection(
    polygons: list[Polygon],
    properties: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Wrap polygons as a GeoJSON FeatureCollection.

    Args:
        polygons: Polygons to serialize
        properties: Optional per-feature properties (same length as polygons)

    Returns:
        FeatureCollection dictionary
    """
    if properties is None:
        properties = [{} for _ in polygons]

    return {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": polygon.to_dict(), "properties": props}
            for polygon, props in zip(polygons, properties)
        ],
    }


def load_polygon(path: Path) -> Polygon:
    """Load one polygon from a GeoJSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        GeoJSONError: If the file is not valid JSON or holds no usable polygon
    """
    if not path.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GeoJSONError(f"{path} is not valid JSON: {e.msg}") from e

    return parse_polygon(data)


def write_polygons(path: Path, polygons: list[Polygon]) -> None:
    """Write polygons to a GeoJSON FeatureCollection file."""
    collection = polygon_to_feature_collection(polygons)
    path.write_text(json.dumps(collection, indent=2), encoding="utf-8")
