"""Tests for merging clipped fragments into boundary rings."""

import pytest

from rendezvous.core.geometry import signed_area
from rendezvous.core.merger import (
    cancel_shared_edges,
    chain_edges,
    collect_edges,
    merge_pieces,
)


class TestCollectEdges:
    """Tests for edge enumeration."""

    def test_edges_per_piece(self) -> None:
        edges = collect_edges([[(0, 0), (1, 0), (0, 1)]])
        assert edges == [((0, 0), (1, 0)), ((1, 0), (0, 1)), ((0, 1), (0, 0))]

    def test_split_at_t_junction(self) -> None:
        """A vertex on another piece's edge splits that edge."""
        big = [(0, 0), (2, 0), (2, 2), (0, 2)]
        small = [(2, 0), (3, 0), (3, 1), (2, 1)]
        edges = collect_edges([big, small])
        assert ((2, 0), (2, 1)) in edges
        assert ((2, 1), (2, 2)) in edges
        assert ((2, 0), (2, 2)) not in edges

    def test_degenerate_pieces_skipped(self) -> None:
        assert collect_edges([[(0, 0), (1, 0)]]) == []


class TestCancelSharedEdges:
    """Tests for removing internal edges."""

    def test_opposite_edges_cancel(self) -> None:
        edges = [((0, 0), (1, 0)), ((1, 0), (0, 0)), ((1, 0), (1, 1))]
        assert cancel_shared_edges(edges) == [((1, 0), (1, 1))]

    def test_same_direction_kept(self) -> None:
        edges = [((0, 0), (1, 0)), ((0, 0), (1, 0))]
        assert cancel_shared_edges(edges) == edges

    def test_tolerance(self) -> None:
        edges = [((0, 0), (1, 0)), ((1 + 1e-11, 0), (0, 1e-11))]
        assert cancel_shared_edges(edges) == []

    def test_each_edge_pairs_once(self) -> None:
        """Three copies of a segment leave one unpaired."""
        edges = [((0, 0), (1, 0)), ((1, 0), (0, 0)), ((0, 0), (1, 0))]
        assert cancel_shared_edges(edges) == [((0, 0), (1, 0))]


class TestChainEdges:
    """Tests for chaining boundary edges into rings."""

    def test_closed_loop(self) -> None:
        edges = [((0, 0), (1, 0)), ((1, 0), (1, 1)), ((1, 1), (0, 0))]
        assert chain_edges(edges) == [[(0, 0), (1, 0), (1, 1)]]

    def test_out_of_order_edges(self) -> None:
        edges = [((1, 1), (0, 1)), ((0, 0), (1, 0)), ((0, 1), (0, 0)), ((1, 0), (1, 1))]
        rings = chain_edges(edges)
        assert len(rings) == 1
        assert signed_area(rings[0]) == pytest.approx(1.0)

    def test_dead_end_with_too_few_vertices_dropped(self) -> None:
        assert chain_edges([((0, 0), (1, 0))]) == []

    def test_open_chain_using_every_edge_kept(self) -> None:
        edges = [((0, 0), (1, 0)), ((1, 0), (1, 1)), ((1, 1), (0, 1))]
        assert chain_edges(edges) == [[(0, 0), (1, 0), (1, 1), (0, 1)]]

    def test_pinched_loop_split_at_shared_vertex(self) -> None:
        """Two squares touching at (1, 1) chain into two rings, not one."""
        edges = [
            ((0, 0), (1, 0)),
            ((1, 0), (1, 1)),
            ((1, 1), (2, 1)),
            ((2, 1), (2, 2)),
            ((2, 2), (1, 2)),
            ((1, 2), (1, 1)),
            ((1, 1), (0, 1)),
            ((0, 1), (0, 0)),
        ]
        assert chain_edges(edges) == [
            [(1, 1), (2, 1), (2, 2), (1, 2)],
            [(0, 0), (1, 0), (1, 1), (0, 1)],
        ]

    def test_spike_removed(self) -> None:
        edges = [
            ((0, 0), (1, 0)),
            ((1, 0), (2, 0)),
            ((2, 0), (1, 0)),
            ((1, 0), (0, 1)),
            ((0, 1), (0, 0)),
        ]
        assert chain_edges(edges) == [[(0, 0), (1, 0), (0, 1)]]

    def test_empty(self) -> None:
        assert chain_edges([]) == []


class TestMergePieces:
    """Tests for merge_pieces()."""

    def test_two_triangles_form_square(self) -> None:
        """The shared diagonal disappears."""
        pieces = [
            [(0, 0), (1, 0), (1, 1)],
            [(0, 0), (1, 1), (0, 1)],
        ]
        assert merge_pieces(pieces) == [[(0, 0), (1, 0), (1, 1), (0, 1)]]

    def test_disjoint_pieces_stay_separate(self) -> None:
        pieces = [
            [(0, 0), (1, 0), (1, 1), (0, 1)],
            [(5, 5), (6, 5), (6, 6), (5, 6)],
        ]
        rings = merge_pieces(pieces)
        assert len(rings) == 2
        assert sorted(signed_area(r) for r in rings) == [1.0, 1.0]

    def test_t_junction_merge(self) -> None:
        """A small piece against half of a large piece's edge merges cleanly."""
        big = [(0, 0), (2, 0), (2, 2), (0, 2)]
        small = [(2, 0), (3, 0), (3, 1), (2, 1)]
        rings = merge_pieces([big, small])
        assert len(rings) == 1
        assert signed_area(rings[0]) == pytest.approx(5.0)
        assert len(rings[0]) == 7

    def test_zero_width_bridge_removed(self) -> None:
        """A ring whose arms are joined by a zero-width bridge splits in two."""
        bridged = [(0, 2), (3, 2), (3, 3), (2, 3), (2, 2), (1, 2), (1, 3), (0, 3)]
        rings = merge_pieces([bridged])
        assert len(rings) == 2
        assert sorted(rings) == [
            [(0, 2), (1, 2), (1, 3), (0, 3)],
            [(2, 2), (3, 2), (3, 3), (2, 3)],
        ]

    def test_fan_of_triangles(self) -> None:
        """A fan around a shared centre merges to the outer boundary."""
        centre = (0.5, 0.5)
        corners = [(0, 0), (1, 0), (1, 1), (0, 1)]
        pieces = [[centre, corners[i], corners[(i + 1) % 4]] for i in range(4)]
        rings = merge_pieces(pieces)
        assert len(rings) == 1
        assert signed_area(rings[0]) == pytest.approx(1.0)
        assert centre not in rings[0]

    def test_empty(self) -> None:
        assert merge_pieces([]) == []
