"""
Infomap Partition API
=====================

Entry points running the full pipeline::

    matrix -> classify_matrix -> build_graph -> run_infomap -> project_result

``infomap_partition`` takes the matrix followed by option name/value
pairs and returns ``(membership, codelength)``. ``partition_matrix``
takes a structured :class:`~infomap_adapter.options.InfomapOptions`.

Each call works on its own data; nothing is shared between calls.
"""

import logging
from typing import Any, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .algorithms.partition_runner import run_infomap
from .algorithms.result_projector import PartitionResult, project_result
from .config import MAX_OUTPUTS
from .errors import NotEnoughInputsError, TooManyOutputsError
from .graphs.adapter import build_graph
from .graphs.classifier import InputMode, classify_matrix
from .options import InfomapOptions, parse_options

logger = logging.getLogger(__name__)


def _partition_mode(mode: InputMode, options: InfomapOptions) -> PartitionResult:
    logger.debug(f"Partitioning {type(mode).__name__} with options {options.to_dict()}")
    G = build_graph(mode)
    run = run_infomap(G, options)
    return project_result(run.assignments, G.number_of_nodes(), run.codelength)


def partition_matrix(matrix: Any, options: Optional[InfomapOptions] = None) -> PartitionResult:
    """
    Partition the network described by a matrix with Infomap.

    Parameters
    ----------
    matrix : array_like or scipy.sparse matrix
        Dense symmetric (or triangular) n x n adjacency matrix, M x 3
        edge list ``[row, col, weight]`` with 1-based indices and M > 3,
        or square sparse adjacency matrix
    options : InfomapOptions, optional
        Infomap configuration (default: all defaults)

    Returns
    -------
    PartitionResult
        ``membership`` of length n and ``codelength``

    Examples
    --------
    >>> import networkx as nx
    >>> A = nx.to_numpy_array(nx.karate_club_graph())
    >>> result = partition_matrix(A, InfomapOptions(seed=42))
    >>> len(result.membership)
    34
    """
    if options is None:
        options = InfomapOptions()

    return _partition_mode(classify_matrix(matrix), options)


def infomap_partition(*args: Any, nargout: int = MAX_OUTPUTS) -> Tuple[NDArray[np.int64], float]:
    """
    Partition a network given as a matrix followed by option pairs.

    Parameters
    ----------
    *args
        ``matrix, name1, value1, name2, value2, ...``. Recognized names:
        ``N`` (trials), ``p`` (teleportation probability), ``y``
        (self-teleportation probability), ``markov-time`` and ``seed``.
    nargout : int, optional
        Number of outputs the caller will use (at most 2)

    Returns
    -------
    Tuple[NDArray[np.int64], float]
        (membership, codelength)

    Raises
    ------
    NotEnoughInputsError
        If no matrix is given
    TooManyOutputsError
        If more than two outputs are requested
    InfomapAdapterError
        For any invalid matrix or option; raised before Infomap runs

    Examples
    --------
    >>> membership, codelength = infomap_partition(A, "N", 10, "seed", 1)
    """
    if len(args) < 1:
        raise NotEnoughInputsError(
            "Usage: infomap_partition(W, name, value, ...)", position=0
        )
    if nargout > MAX_OUTPUTS:
        raise TooManyOutputsError(
            f"Requested {nargout}, at most {MAX_OUTPUTS} available.", position=0
        )

    matrix, option_args = args[0], args[1:]
    mode = classify_matrix(matrix)
    options = parse_options(option_args, start_position=1)

    result = _partition_mode(mode, options)
    return result.membership, result.codelength
