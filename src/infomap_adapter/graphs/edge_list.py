"""
Edge List Builder Module
========================

This module turns a classified 1-based edge list into the canonical
undirected edge set handed to the graph adapter:

- 0-based endpoints, stored as ``(u, v)`` with ``u < v``;
- no self-loops;
- at most one edge per undirected pair.
"""

import logging
from typing import List, NamedTuple, Optional

import numpy as np
from numpy.typing import NDArray

from ..errors import InvalidMatrixError
from .classifier import TriangularKind

logger = logging.getLogger(__name__)


class CanonicalEdge(NamedTuple):
    """Undirected weighted edge between two distinct 0-based nodes."""

    u: int
    v: int
    weight: float


def build_canonical_edges(rows: NDArray, kind: TriangularKind) -> List[CanonicalEdge]:
    """
    Build the canonical edge set of an edge list.

    Parameters
    ----------
    rows : NDArray
        M x 3 array of ``[row, col, weight]`` with 1-based node indices
    kind : TriangularKind
        Triangular structure as returned by ``classify_triangular``

    Returns
    -------
    List[CanonicalEdge]
        One edge per undirected pair, in input row order

    Raises
    ------
    InvalidMatrixError
        If a weight is non-finite or negative, a triangular enumeration holds a
        diagonal row, or two kept rows name the same pair
    ValueError
        If ``kind`` is INVALID

    Examples
    --------
    >>> rows = np.array([[1, 2, 1.0], [2, 1, 1.0], [1, 3, 2.0], [3, 1, 2.0]])
    >>> build_canonical_edges(rows, TriangularKind.SYMMETRIC)
    [CanonicalEdge(u=0, v=1, weight=1.0), CanonicalEdge(u=0, v=2, weight=2.0)]
    """
    if kind is TriangularKind.INVALID:
        raise ValueError("Cannot build edges from an INVALID edge list")

    rows = np.asarray(rows, dtype=np.float64)
    triangular = kind in (TriangularKind.UPPER_TRIANGULAR, TriangularKind.LOWER_TRIANGULAR)

    edges = []
    seen = set()
    for row_node, col_node, weight in rows:
        if triangular:
            # Each row is already one undirected edge
            if row_node == col_node:
                raise InvalidMatrixError(
                    f"Triangular edge list has a self-loop on node {int(row_node)}.",
                    position=0,
                )
        elif not row_node < col_node:
            # Reciprocal or diagonal row
            continue

        if not np.isfinite(weight) or weight < 0:
            raise InvalidMatrixError(
                f"Edge ({int(row_node)}, {int(col_node)}) has weight {weight}; weights must be finite and non-negative.",
                position=0,
            )

        u, v = sorted((int(row_node) - 1, int(col_node) - 1))
        if (u, v) in seen:
            raise InvalidMatrixError(
                f"Edge ({u + 1}, {v + 1}) is listed more than once.", position=0
            )
        seen.add((u, v))
        edges.append(CanonicalEdge(u, v, float(weight)))

    logger.debug(f"Built {len(edges)} canonical edges from {rows.shape[0]} rows ({kind.value})")
    return edges


def count_referenced_nodes(rows: NDArray) -> int:
    """
    Number of nodes referenced by any row of a 1-based edge list.

    Unlike the canonical edges, this also counts nodes that only appear
    in rows dropped as reciprocal or diagonal.
    """
    rows = np.asarray(rows)
    if rows.shape[0] == 0:
        return 0
    return int(rows[:, :2].max())


def count_edge_nodes(edges: List[CanonicalEdge], n_nodes: Optional[int] = None) -> int:
    """
    Node count of a canonical edge set: one plus the largest endpoint.

    If ``n_nodes`` is given it is returned, after checking that every
    endpoint lies below it.
    """
    highest = max((edge.v for edge in edges), default=-1)
    if n_nodes is None:
        return highest + 1
    if highest >= n_nodes:
        raise InvalidMatrixError(
            f"Edge endpoint {highest} out of range for {n_nodes} nodes.", position=0
        )
    return n_nodes
