"""
Graphs Module
=============

This module reads input matrices and builds the weighted undirected
graphs handed to the community detection algorithm.

Submodules
----------
classifier
    Dense vs. edge-list detection and triangular classification
edge_list
    Canonical, deduplicated edge sets from edge lists
adapter
    NetworkX graph construction
"""

from .classifier import (
    TriangularKind,
    DenseInput,
    EdgeListInput,
    InputMode,
    classify_matrix,
    classify_triangular,
    classify_dense,
)
from .edge_list import (
    CanonicalEdge,
    build_canonical_edges,
)
from .adapter import (
    graph_from_dense,
    graph_from_edges,
    build_graph,
)

__all__ = [
    # Classification
    "TriangularKind",
    "DenseInput",
    "EdgeListInput",
    "InputMode",
    "classify_matrix",
    "classify_triangular",
    "classify_dense",
    # Edge lists
    "CanonicalEdge",
    "build_canonical_edges",
    # Graph construction
    "graph_from_dense",
    "graph_from_edges",
    "build_graph",
]
