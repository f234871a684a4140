"""
Tests for canonical edge-list construction.
"""

import pytest
import numpy as np

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infomap_adapter.graphs.classifier import TriangularKind, classify_triangular
from infomap_adapter.graphs.edge_list import (
    CanonicalEdge,
    build_canonical_edges,
    count_edge_nodes,
    count_referenced_nodes,
)
from infomap_adapter.errors import InvalidMatrixError


class TestSymmetricEdges:
    """Tests for deduplication of reciprocal enumerations."""

    def test_reciprocal_triangle(self):
        """Test the fully reciprocal triangle keeps one edge per pair."""
        rows = np.array([
            [1, 2, 1.0],
            [2, 1, 1.0],
            [1, 3, 2.0],
            [3, 1, 2.0],
            [2, 3, 1.0],
            [3, 2, 1.0],
        ])
        kind = classify_triangular(rows)
        edges = build_canonical_edges(rows, kind)

        assert kind is TriangularKind.SYMMETRIC
        assert edges == [
            CanonicalEdge(0, 1, 1.0),
            CanonicalEdge(0, 2, 2.0),
            CanonicalEdge(1, 2, 1.0),
        ]

    def test_reciprocal_rows_any_order(self):
        """Test reciprocal rows may come in any order."""
        rows = np.array([
            [2, 1, 1.0],
            [3, 2, 4.0],
            [1, 2, 1.0],
            [2, 3, 4.0],
        ])
        edges = build_canonical_edges(rows, TriangularKind.SYMMETRIC)
        assert set(edges) == {CanonicalEdge(0, 1, 1.0), CanonicalEdge(1, 2, 4.0)}

    def test_diagonal_dropped(self):
        """Test diagonal rows are dropped in symmetric mode."""
        rows = np.array([[1, 2, 1.0], [2, 1, 1.0], [3, 3, 5.0], [1, 3, 2.0]])
        edges = build_canonical_edges(rows, TriangularKind.SYMMETRIC)

        assert edges == [CanonicalEdge(0, 1, 1.0), CanonicalEdge(0, 2, 2.0)]
        assert all(edge.u != edge.v for edge in edges)

    def test_one_entry_per_pair(self):
        """Test no pair appears in both orientations."""
        rng = np.random.default_rng(7)
        A = np.triu(rng.random((8, 8)) < 0.4, k=1).astype(float)
        A = A + A.T
        i, j = np.nonzero(A)
        rows = np.column_stack([i + 1, j + 1, A[i, j]])

        edges = build_canonical_edges(rows, classify_triangular(rows))
        pairs = [(edge.u, edge.v) for edge in edges]

        assert len(pairs) == len(set(pairs))
        assert len(edges) == rows.shape[0] // 2
        assert all(u < v for u, v in pairs)


class TestTriangularEdges:
    """Tests for upper and lower triangular enumerations."""

    def test_upper_keeps_every_row(self):
        """Test every upper row becomes one edge."""
        rows = np.array([
            [1, 2, 1.0],
            [1, 3, 0.5],
            [2, 3, 1.0],
            [3, 4, 2.0],
        ])
        edges = build_canonical_edges(rows, TriangularKind.UPPER_TRIANGULAR)

        assert len(edges) == rows.shape[0]
        assert all(edge.u != edge.v for edge in edges)
        assert edges[3] == CanonicalEdge(2, 3, 2.0)

    def test_lower_keeps_every_row(self):
        """Test every lower row becomes one edge with u < v."""
        rows = np.array([
            [2, 1, 0.5],
            [3, 1, 0.7],
            [3, 2, 0.2],
            [4, 3, 1.0],
        ])
        edges = build_canonical_edges(rows, TriangularKind.LOWER_TRIANGULAR)

        assert edges == [
            CanonicalEdge(0, 1, 0.5),
            CanonicalEdge(0, 2, 0.7),
            CanonicalEdge(1, 2, 0.2),
            CanonicalEdge(2, 3, 1.0),
        ]

    def test_upper_and_lower_agree(self):
        """Test transposed enumerations give the same edges."""
        upper = np.array([[1, 2, 1.0], [1, 4, 3.0], [2, 3, 2.0], [3, 4, 1.5]])
        lower = upper[:, [1, 0, 2]]

        assert build_canonical_edges(upper, TriangularKind.UPPER_TRIANGULAR) == \
            build_canonical_edges(lower, TriangularKind.LOWER_TRIANGULAR)

    def test_lower_self_loop_rejected(self):
        """Test a diagonal row in a triangular enumeration is rejected."""
        rows = np.array([[2, 1, 1.0], [3, 1, 1.0], [2, 2, 1.0], [4, 1, 1.0]])
        assert classify_triangular(rows) is TriangularKind.LOWER_TRIANGULAR
        with pytest.raises(InvalidMatrixError):
            build_canonical_edges(rows, TriangularKind.LOWER_TRIANGULAR)

    def test_duplicate_pair_rejected(self):
        """Test a pair listed twice is rejected."""
        rows = np.array([[1, 2, 1.0], [1, 2, 1.0], [1, 3, 1.0], [2, 3, 1.0]])
        with pytest.raises(InvalidMatrixError):
            build_canonical_edges(rows, TriangularKind.UPPER_TRIANGULAR)


class TestEdgeFailures:
    """Tests for malformed rows."""

    def test_nan_weight(self):
        """Test non-finite weights on kept rows are rejected."""
        rows = np.array([[1, 2, np.nan], [1, 3, 1.0], [2, 3, 1.0], [3, 4, 1.0]])
        with pytest.raises(InvalidMatrixError):
            build_canonical_edges(rows, TriangularKind.UPPER_TRIANGULAR)

    def test_invalid_kind(self):
        """Test INVALID enumerations cannot be built."""
        rows = np.array([[1, 2, 1.0], [2, 1, 1.0], [1, 3, 1.0], [1, 4, 1.0]])
        with pytest.raises(ValueError):
            build_canonical_edges(rows, TriangularKind.INVALID)

    def test_weights_copied_verbatim(self):
        """Test weights are not rescaled."""
        rows = np.array([[1, 2, 0.25], [1, 3, 1e-9], [2, 3, 7.5], [3, 4, 100.0]])
        edges = build_canonical_edges(rows, TriangularKind.UPPER_TRIANGULAR)
        assert [edge.weight for edge in edges] == [0.25, 1e-9, 7.5, 100.0]

    def test_negative_weight(self):
        """Test negative weights on kept rows are rejected."""
        rows = np.array([[1, 2, -0.25], [1, 3, 1.0], [2, 3, 1.0], [3, 4, 1.0]])
        with pytest.raises(InvalidMatrixError):
            build_canonical_edges(rows, TriangularKind.UPPER_TRIANGULAR)


class TestNodeCounts:
    """Tests for node counting."""

    def test_count_edge_nodes(self):
        """Test node count is one plus the largest endpoint."""
        edges = [CanonicalEdge(0, 1, 1.0), CanonicalEdge(2, 5, 1.0)]
        assert count_edge_nodes(edges) == 6

    def test_count_edge_nodes_empty(self):
        """Test an empty edge set has no nodes."""
        assert count_edge_nodes([]) == 0

    def test_count_edge_nodes_explicit(self):
        """Test an explicit node count is kept."""
        edges = [CanonicalEdge(0, 1, 1.0)]
        assert count_edge_nodes(edges, 10) == 10

    def test_count_edge_nodes_too_small(self):
        """Test an explicit node count below an endpoint is rejected."""
        edges = [CanonicalEdge(0, 4, 1.0)]
        with pytest.raises(InvalidMatrixError):
            count_edge_nodes(edges, 3)

    def test_referenced_nodes_include_dropped_rows(self):
        """Test nodes only seen on dropped diagonal rows are counted."""
        rows = np.array([[1, 2, 1.0], [2, 1, 1.0], [4, 4, 1.0], [1, 3, 1.0]])
        edges = build_canonical_edges(rows, TriangularKind.SYMMETRIC)

        assert count_edge_nodes(edges) == 3
        assert count_referenced_nodes(rows) == 4
