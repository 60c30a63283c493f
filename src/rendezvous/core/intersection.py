"""N-ary polygon intersection.

Folds a list of polygons into the set of regions covered by all of them.
Each pairwise clip picks the cheapest correct strategy:

- Clip operand convex: Sutherland-Hodgman directly
- Region convex, operand concave: swap roles so the convex ring is the window
- Both concave: triangulate the operand, clip against every triangle and
  merge the pieces back into one or more rings

Every ring is canonicalized to counter-clockwise before it is used as a clip
window, whatever winding the caller supplied. Empty results are ordinary
answers: non-overlapping input yields an empty list, never an exception.
"""

import logging

from rendezvous.core.clipper import sutherland_hodgman
from rendezvous.core.geodesic import area
from rendezvous.core.geometry import (
    ensure_ccw,
    is_convex,
    ring_bbox,
    ring_to_polygon,
    signed_area,
    to_open_ring,
)
from rendezvous.core.merger import merge_pieces
from rendezvous.core.triangulate import triangulate
from rendezvous.domain import Polygon, Ring

logger = logging.getLogger(__name__)

# Rings with less planar area than this (square degrees) are slivers.
AREA_EPSILON = 1e-18


def _is_degenerate(ring: Ring) -> bool:
    return len(ring) < 3 or abs(signed_area(ring)) <= AREA_EPSILON


def _canonical(ring: Ring) -> list[Ring]:
    """Resolve a raw clip result into zero or more clean CCW rings."""
    if _is_degenerate(ring):
        return []
    rings = merge_pieces([ensure_ccw(ring)])
    return [ensure_ccw(r) for r in rings if not _is_degenerate(r)]


def clip_pair(region: Ring, operand: Ring) -> list[Ring]:
    """Intersect one region with one operand.

    Args:
        region: Open CCW ring from the running result set
        operand: Open CCW ring of the next input polygon

    Returns:
        Open CCW rings covering region ∩ operand (possibly empty)
    """
    if is_convex(operand):
        return _canonical(sutherland_hodgman(region, operand))

    if is_convex(region):
        return _canonical(sutherland_hodgman(operand, region))

    pieces: list[Ring] = []
    for triangle in triangulate(operand):
        window = list(triangle)
        if _is_degenerate(window):
            continue
        piece = sutherland_hodgman(region, window)
        if not _is_degenerate(piece):
            pieces.append(ensure_ccw(piece))

    if not pieces:
        return []

    rings = merge_pieces(pieces)
    return [ensure_ccw(r) for r in rings if not _is_degenerate(r)]


def intersect_all(polygons: list[Polygon]) -> list[Polygon]:
    """Intersect any number of polygons into every disjoint overlap region.

    Args:
        polygons: Single-ring polygons in any winding

    Returns:
        Closed CCW polygons, one per disjoint region. Empty when the input is
        empty or the polygons share no area.
    """
    if not polygons:
        return []

    first = to_open_ring(polygons[0])
    if len(first) < 3:
        return []

    regions: list[Ring] = [ensure_ccw(first)]
    if len(polygons) == 1:
        return [ring_to_polygon(regions[0])]

    for index, polygon in enumerate(polygons[1:], start=1):
        operand = to_open_ring(polygon)
        if len(operand) < 3:
            logger.debug("Polygon %d has fewer than 3 vertices; intersection is empty", index)
            return []
        operand = ensure_ccw(operand)
        operand_bbox = ring_bbox(operand)

        next_regions: list[Ring] = []
        for region in regions:
            if not ring_bbox(region).overlaps(operand_bbox):
                continue
            next_regions.extend(clip_pair(region, operand))

        if not next_regions:
            logger.debug("No overlap after polygon %d of %d", index, len(polygons))
            return []

        regions = next_regions

    return [ring_to_polygon(ring) for ring in regions if len(ring) >= 3]


def intersect_one(polygons: list[Polygon]) -> Polygon | None:
    """Intersect polygons and return a single region.

    When the overlap splits into several regions the largest one by planar
    area is returned. Ties go to whichever region the fold produced first;
    that order is an implementation detail.

    Args:
        polygons: Single-ring polygons in any winding

    Returns:
        The sole or largest region, or None when there is no overlap
    """
    regions = intersect_all(polygons)
    if not regions:
        return None
    if len(regions) == 1:
        return regions[0]

    best = regions[0]
    best_area = area(best)
    for region in regions[1:]:
        region_area = area(region)
        if region_area > best_area:
            best = region
            best_area = region_area
    return best
