"""
Graph Adapter Module
====================

This module wraps a dense adjacency matrix or a canonical edge set into
an undirected weighted NetworkX graph with nodes ``0 .. n-1``. Edge
weights are stored under the ``weight`` attribute.
"""

import logging
from typing import Iterable, Optional

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from .classifier import DenseInput, EdgeListInput, InputMode, TriangularKind
from .edge_list import (
    CanonicalEdge,
    build_canonical_edges,
    count_edge_nodes,
    count_referenced_nodes,
)

logger = logging.getLogger(__name__)


def graph_from_dense(
    matrix: NDArray,
    kind: TriangularKind = TriangularKind.SYMMETRIC,
) -> nx.Graph:
    """
    Build a graph from a square adjacency matrix.

    Parameters
    ----------
    matrix : NDArray
        n x n weighted adjacency matrix. Zero entries denote absent edges;
        the diagonal is ignored.
    kind : TriangularKind, optional
        Structure of the matrix. For SYMMETRIC the upper triangle is read;
        for UPPER/LOWER_TRIANGULAR the single filled triangle is read.

    Returns
    -------
    nx.Graph
        Graph with n nodes and one edge ``(i, j)``, ``i < j``, per non-zero
        off-diagonal pair

    Examples
    --------
    >>> A = np.zeros((4, 4)); A[0, 1] = A[1, 0] = 1.0
    >>> G = graph_from_dense(A)
    >>> G.number_of_nodes(), list(G.edges(data="weight"))
    (4, [(0, 1, 1.0)])
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    n = matrix.shape[0]

    if kind is TriangularKind.SYMMETRIC or kind is TriangularKind.UPPER_TRIANGULAR:
        upper = np.triu(matrix, k=1)
    elif kind is TriangularKind.LOWER_TRIANGULAR:
        upper = np.triu(matrix.T, k=1)
    else:
        raise ValueError(f"Cannot build a graph from a {kind.value} matrix")

    G = nx.Graph()
    G.add_nodes_from(range(n))
    sources, targets = np.nonzero(upper)
    G.add_weighted_edges_from(
        (int(i), int(j), float(upper[i, j])) for i, j in zip(sources, targets)
    )
    return G


def graph_from_edges(
    edges: Iterable[CanonicalEdge],
    n_nodes: Optional[int] = None,
) -> nx.Graph:
    """
    Build a graph from a canonical edge set.

    Parameters
    ----------
    edges : Iterable[CanonicalEdge]
        Canonical edges with 0-based endpoints
    n_nodes : int, optional
        Node count. If None, one plus the largest endpoint is used.

    Returns
    -------
    nx.Graph
        Graph with nodes ``0 .. n_nodes-1``
    """
    edges = list(edges)
    n = count_edge_nodes(edges, n_nodes)

    G = nx.Graph()
    G.add_nodes_from(range(n))
    G.add_weighted_edges_from((edge.u, edge.v, edge.weight) for edge in edges)
    return G


def build_graph(mode: InputMode) -> nx.Graph:
    """
    Build the graph for a classified input.

    For edge lists without a known node count, every node referenced by
    an input row is included, even when all of its rows were dropped as
    reciprocal or diagonal.

    Parameters
    ----------
    mode : InputMode
        Output of ``classify_matrix``

    Returns
    -------
    nx.Graph
        Weighted undirected graph
    """
    if isinstance(mode, DenseInput):
        G = graph_from_dense(mode.matrix, mode.kind)
    elif isinstance(mode, EdgeListInput):
        edges = build_canonical_edges(mode.rows, mode.kind)
        n_nodes = mode.n_nodes
        if n_nodes is None:
            n_nodes = count_referenced_nodes(mode.rows)
        G = graph_from_edges(edges, n_nodes)
    else:
        raise TypeError(f"Unknown input mode: {type(mode).__name__}")

    logger.info(
        f"Built graph with {G.number_of_nodes()} nodes and "
        f"{G.number_of_edges()} edges from {type(mode).__name__}"
    )
    return G
