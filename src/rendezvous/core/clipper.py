"""Sutherland-Hodgman clipping against a convex window.

The clip ring must be convex and wound counter-clockwise: a subject vertex
is inside a clip edge when it lies left of (or on) the directed edge.
"""

from rendezvous.core.geometry import (
    PARALLEL_EPSILON,
    dedupe_ring,
    is_left,
    line_intersection,
)
from rendezvous.domain import Ring


def sutherland_hodgman(
    subject: Ring,
    clip: Ring,
    epsilon: float = PARALLEL_EPSILON,
) -> Ring:
    """Clip a subject ring against a convex counter-clockwise clip ring.

    Each clip edge narrows the subject to its inner half-plane, keeping
    inside vertices and emitting the crossing point at every inside/outside
    transition. A concave subject may come back with zero-width bridges
    along clip edges; callers that care resolve them with the piece merger.

    Args:
        subject: Open ring to clip (any winding, may be concave)
        clip: Open convex ring, counter-clockwise
        epsilon: Parallel-line threshold for crossing computation

    Returns:
        Open clipped ring without duplicate consecutive vertices, possibly
        empty. Winding follows the subject.
    """
    output = list(subject)
    n = len(clip)

    for i in range(n):
        if not output:
            return []

        edge_start = clip[i]
        edge_end = clip[(i + 1) % n]
        candidates = output
        output = []

        previous = candidates[-1]
        prev_inside = is_left(edge_start, edge_end, previous)

        for current in candidates:
            curr_inside = is_left(edge_start, edge_end, current)

            if curr_inside:
                if not prev_inside:
                    crossing = line_intersection(previous, current, edge_start, edge_end, epsilon)
                    if crossing is not None:
                        output.append(crossing)
                output.append(current)
            elif prev_inside:
                crossing = line_intersection(previous, current, edge_start, edge_end, epsilon)
                if crossing is not None:
                    output.append(crossing)

            previous = current
            prev_inside = curr_inside

    return dedupe_ring(output)
