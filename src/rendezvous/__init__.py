"""Rendezvous - Find where travelers can meet.

Rendezvous intersects per-traveler reachability polygons (isochrones) into
every region all travelers can reach within a shared time budget, then ranks
venues inside those regions by how fairly they split the travel time.

The core is a planar polygon-intersection engine handling convex and
concave polygons and overlaps that split into several disjoint regions.

Example:
    $ rendezvous intersect alice.geojson bob.geojson -o meet.geojson
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
