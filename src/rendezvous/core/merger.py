"""Piece merger for reassembling clipped fragments into boundary rings.

When a concave clip operand is triangulated, every triangle yields its own
clipped fragment. Adjacent fragments share the triangulation diagonals in
opposite directions; those shared edges are internal and must disappear.
The remaining edges are the true boundary, which is chained back into one
or more closed rings.

Fragments are first split at T-junctions (a vertex of one fragment lying on
an edge of another) so that overlapping collinear edges line up exactly.
This also removes the zero-width bridges that Sutherland-Hodgman emits when
clipping a concave subject, since a bridge is traversed once in each
direction.

Edge cancellation compares every edge against every other edge, which is
quadratic in the number of edges. This is fine for tens of fragments; a
spatial index would be needed for much larger inputs.
"""

import logging

from rendezvous.core.geometry import dedupe_ring, point_on_segment, points_equal
from rendezvous.domain import Point, Ring

logger = logging.getLogger(__name__)

EDGE_MATCH_TOLERANCE = 1e-9

Edge = tuple[Point, Point]


def _split_edge(start: Point, end: Point, vertices: list[Point], tolerance: float) -> list[Edge]:
    """Split one edge at every vertex lying strictly inside it."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    min_x = min(start[0], end[0]) - tolerance
    max_x = max(start[0], end[0]) + tolerance
    min_y = min(start[1], end[1]) - tolerance
    max_y = max(start[1], end[1]) + tolerance

    inner: list[tuple[float, Point]] = []
    for v in vertices:
        if not (min_x <= v[0] <= max_x and min_y <= v[1] <= max_y):
            continue
        if point_on_segment(v, start, end, tolerance):
            t = (v[0] - start[0]) * dx + (v[1] - start[1]) * dy
            inner.append((t, v))

    if not inner:
        return [(start, end)]

    inner.sort(key=lambda item: item[0])

    edges: list[Edge] = []
    cursor = start
    for _, v in inner:
        if points_equal(cursor, v, tolerance):
            continue
        edges.append((cursor, v))
        cursor = v
    if not points_equal(cursor, end, tolerance):
        edges.append((cursor, end))
    return edges


def collect_edges(pieces: list[Ring], tolerance: float = EDGE_MATCH_TOLERANCE) -> list[Edge]:
    """Enumerate the directed edges of every fragment, split at T-junctions.

    Args:
        pieces: Open rings (fragments), each with at least 3 vertices
        tolerance: Coordinate tolerance for vertex-on-edge detection

    Returns:
        Directed (start, end) edges of all fragments
    """
    rings = [dedupe_ring(piece) for piece in pieces]
    rings = [ring for ring in rings if len(ring) >= 3]
    vertices = [v for ring in rings for v in ring]

    edges: list[Edge] = []
    for ring in rings:
        n = len(ring)
        for k in range(n):
            edges.extend(_split_edge(ring[k], ring[(k + 1) % n], vertices, tolerance))
    return edges


def cancel_shared_edges(edges: list[Edge], tolerance: float = EDGE_MATCH_TOLERANCE) -> list[Edge]:
    """Remove pairs of edges that run over the same segment in opposite directions.

    Pairs are formed by first match; an edge that has already been paired is
    skipped.

    Args:
        edges: Directed edges
        tolerance: Coordinate tolerance for endpoint matching

    Returns:
        Unpaired edges, in their original order
    """
    paired = [False] * len(edges)

    for i, (a, b) in enumerate(edges):
        if paired[i]:
            continue
        for j in range(i + 1, len(edges)):
            if paired[j]:
                continue
            c, d = edges[j]
            if points_equal(a, d, tolerance) and points_equal(b, c, tolerance):
                paired[i] = True
                paired[j] = True
                break

    return [edge for edge, is_paired in zip(edges, paired) if not is_paired]


def _split_pinches(ring: Ring, tolerance: float) -> list[Ring]:
    """Split a ring at every vertex it visits more than once.

    Two regions that touch at a single vertex are chained as one ring passing
    through that vertex twice. Each loop closed by a repeated vertex is cut
    out as its own ring; loops with fewer than 3 vertices (spikes) vanish.
    """
    loops: list[Ring] = []
    stack: Ring = []
    for v in ring:
        for idx, w in enumerate(stack):
            if points_equal(v, w, tolerance):
                loop = stack[idx:]
                del stack[idx + 1 :]
                if len(loop) >= 3:
                    loops.append(loop)
                break
        else:
            stack.append(v)
    if len(stack) >= 3:
        loops.append(stack)
    return loops


def chain_edges(edges: list[Edge], tolerance: float = EDGE_MATCH_TOLERANCE) -> list[Ring]:
    """Chain boundary edges into rings.

    Starting from any unused edge, follow the unused edge whose start matches
    the current end until the chain returns to its start or no continuation
    exists. Every step consumes an edge, so each chain ends. A chain that
    revisits a vertex is split there into separate rings.

    Args:
        edges: Boundary edges
        tolerance: Coordinate tolerance for endpoint matching

    Returns:
        Open rings with at least 3 vertices and no repeated vertex
    """
    used = [False] * len(edges)
    rings: list[Ring] = []

    for first in range(len(edges)):
        if used[first]:
            continue
        used[first] = True

        start, end = edges[first]
        ring: Ring = [start]

        while not points_equal(end, start, tolerance):
            nxt = None
            for k in range(len(edges)):
                if not used[k] and points_equal(edges[k][0], end, tolerance):
                    nxt = k
                    break
            if nxt is None:
                logger.debug("Boundary chain from %s dead-ends at %s", start, end)
                ring.append(end)
                break

            used[nxt] = True
            ring.append(end)
            end = edges[nxt][1]

        loops = _split_pinches(dedupe_ring(ring), tolerance)
        if len(loops) > 1:
            logger.debug("Split pinched boundary chain into %d rings", len(loops))
        rings.extend(loops)

    return rings


def merge_pieces(pieces: list[Ring], tolerance: float = EDGE_MATCH_TOLERANCE) -> list[Ring]:
    """Reconstruct the union boundary of clipped fragments.

    Args:
        pieces: Open rings, typically one per triangle clip, all wound the
            same way
        tolerance: Coordinate tolerance for matching edges

    Returns:
        Zero or more disjoint open rings. All loops are returned, not just
        the largest one.
    """
    edges = collect_edges(pieces, tolerance)
    boundary = cancel_shared_edges(edges, tolerance)
    rings = chain_edges(boundary, tolerance)

    logger.debug(
        "Merged %d pieces: %d edges, %d boundary edges, %d rings",
        len(pieces),
        len(edges),
        len(boundary),
        len(rings),
    )
    return rings
