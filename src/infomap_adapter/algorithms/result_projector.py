"""
Result Projector Module
=======================

This module flattens the leaf assignments of a partition into a
membership vector indexed by original node.
"""

import logging
from typing import Iterable, NamedTuple, Tuple

import numpy as np
from numpy.typing import NDArray

from ..errors import IncompleteResultError

logger = logging.getLogger(__name__)


class PartitionResult(NamedTuple):
    """Membership per node and the codelength of the partition."""

    membership: NDArray[np.int64]
    codelength: float


def project_result(
    assignments: Iterable[Tuple[int, int]],
    n_nodes: int,
    codelength: float,
) -> PartitionResult:
    """
    Project leaf assignments onto a membership vector.

    Community ids are passed through unchanged: no renumbering or sorting.

    Parameters
    ----------
    assignments : Iterable[Tuple[int, int]]
        ``(original_index, community_id)`` pairs, one per node
    n_nodes : int
        Number of nodes in the graph
    codelength : float
        Description length reported for the partition

    Returns
    -------
    PartitionResult
        ``membership[i]`` is the community of node ``i``

    Raises
    ------
    IncompleteResultError
        If a node is missing, assigned twice or out of range

    Examples
    --------
    >>> result = project_result([(1, 2), (0, 1)], 2, 0.5)
    >>> result.membership.tolist(), result.codelength
    ([1, 2], 0.5)
    """
    membership = np.full(n_nodes, -1, dtype=np.int64)
    assigned = np.zeros(n_nodes, dtype=bool)

    for node, community in assignments:
        node = int(node)
        if not 0 <= node < n_nodes:
            raise IncompleteResultError(f"Node {node} out of range for {n_nodes} nodes.")
        if assigned[node]:
            raise IncompleteResultError(f"Node {node} assigned more than once.")
        if community < 0:
            raise IncompleteResultError(f"Node {node} has negative community id {community}.")
        membership[node] = int(community)
        assigned[node] = True

    if not assigned.all():
        missing = np.flatnonzero(~assigned)
        raise IncompleteResultError(
            f"{missing.size} node(s) missing from the partition, first: {missing[:10].tolist()}"
        )

    logger.debug(f"Projected {n_nodes} nodes onto {np.unique(membership).size} communities")
    return PartitionResult(membership=membership, codelength=float(codelength))
