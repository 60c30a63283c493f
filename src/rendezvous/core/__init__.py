"""Core algorithms for rendezvous.

This module contains the core algorithms for:

- Ring primitives (orientation, area, convexity, winding)
- Polygon clipping (Sutherland-Hodgman against convex windows)
- Triangulation (ear clipping) and fragment merging
- N-ary polygon intersection
- Geodesic projection and planar measurement
- Rendezvous orchestration and fairness ranking

The geometry functions are:
- Stateless (safe to call concurrently from any thread)
- Pure (no side effects, no I/O)

Key functions:
- intersect_all: Every disjoint region shared by all polygons
- intersect_one: The single (largest) shared region
- sutherland_hodgman: Clip a ring against a convex ring
- triangulate: Ear-clip a simple ring into triangles
- merge_pieces: Reassemble clipped fragments into boundary rings
- destination_point / circle_to_polygon: Spherical projection helpers
- bounding_box / centroid / area: Planar measurements

Key classes:
- RendezvousFinder: Ranks meeting venues for a group of travelers
"""

from rendezvous.core.clipper import sutherland_hodgman
from rendezvous.core.finder import RendezvousFinder, fairness_score
from rendezvous.core.geodesic import (
    area,
    bounding_box,
    centroid,
    circle_to_polygon,
    destination_point,
    envelope,
    weighted_centroid,
)
from rendezvous.core.geometry import is_convex, signed_area
from rendezvous.core.intersection import intersect_all, intersect_one
from rendezvous.core.merger import merge_pieces
from rendezvous.core.triangulate import triangulate

__all__ = [
    # Orchestration
    "RendezvousFinder",
    "fairness_score",
    # Geodesic helpers
    "area",
    "bounding_box",
    "centroid",
    "circle_to_polygon",
    "destination_point",
    "envelope",
    "weighted_centroid",
    # Intersection engine
    "intersect_all",
    "intersect_one",
    "is_convex",
    "merge_pieces",
    "signed_area",
    "sutherland_hodgman",
    "triangulate",
]
