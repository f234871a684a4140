"""
Infomap Matrix Adapter
======================

Community detection with Infomap on networks given as numeric matrices.

A network is passed either as a dense symmetric n x n adjacency matrix
or as an M x 3 edge list ``[row, col, weight]`` with 1-based node
indices (the output of ``[i, j, w] = find(A)``). The input is validated,
converted to a weighted undirected graph, partitioned with two-level
Infomap, and returned as a per-node membership vector plus the
codelength of the partition.

Modules
-------
graphs
    Matrix classification, canonical edge lists and graph construction
algorithms
    Infomap runner and membership projection
options
    Name/value option parsing
errors
    Error kinds and exceptions
api
    ``infomap_partition`` and ``partition_matrix`` entry points
"""

__version__ = "0.1.0"

from . import graphs
from . import algorithms
from .api import infomap_partition, partition_matrix
from .algorithms import PartitionResult
from .options import InfomapOptions, parse_options
from .errors import (
    ErrorKind,
    format_error,
    InfomapAdapterError,
    TooManyOutputsError,
    NotEnoughInputsError,
    InvalidMatrixError,
    MatrixShapeError,
    NonSymmetricMatrixError,
    NonSymmetricEdgeListError,
    ArgumentValueError,
    ArgumentTypeError,
    UnknownArgumentError,
    ArgumentEmptyError,
    IncompleteResultError,
)

__all__ = [
    "graphs",
    "algorithms",
    "infomap_partition",
    "partition_matrix",
    "PartitionResult",
    "InfomapOptions",
    "parse_options",
    "ErrorKind",
    "format_error",
    "InfomapAdapterError",
    "TooManyOutputsError",
    "NotEnoughInputsError",
    "InvalidMatrixError",
    "MatrixShapeError",
    "NonSymmetricMatrixError",
    "NonSymmetricEdgeListError",
    "ArgumentValueError",
    "ArgumentTypeError",
    "UnknownArgumentError",
    "ArgumentEmptyError",
    "IncompleteResultError",
    "__version__",
]
