"""
Matrix Classifier Module
========================

This module decides how a raw numeric matrix should be read:

- a square matrix is a dense weighted adjacency matrix;
- an M x 3 matrix with M > 3 is a sparse edge list ``[row, col, weight]``
  with 1-based node indices, as produced by ``[i, j, w] = find(A)``;
- a square ``scipy.sparse`` matrix is an adjacency matrix whose non-zero
  entries are read as an edge list.

For edge lists the triangular structure is classified so that each
undirected pair is emitted exactly once downstream.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray

from ..config import EDGE_LIST_COLUMNS, MIN_EDGE_LIST_ROWS, SYMMETRY_ATOL
from ..errors import (
    InvalidMatrixError,
    MatrixShapeError,
    NonSymmetricEdgeListError,
    NonSymmetricMatrixError,
)

logger = logging.getLogger(__name__)


class TriangularKind(Enum):
    """Triangular structure of an edge enumeration."""

    SYMMETRIC = "symmetric"
    UPPER_TRIANGULAR = "upper"
    LOWER_TRIANGULAR = "lower"
    INVALID = "invalid"


@dataclass(frozen=True)
class DenseInput:
    """Square adjacency matrix and its triangular structure."""

    matrix: NDArray[np.float64]
    kind: TriangularKind

    @property
    def n_nodes(self) -> int:
        return self.matrix.shape[0]


@dataclass(frozen=True)
class EdgeListInput:
    """
    1-based ``[row, col, weight]`` rows and their triangular structure.

    ``n_nodes`` is set when the node count is known independently of the
    rows (e.g. the dimension of a sparse adjacency matrix).
    """

    rows: NDArray[np.float64]
    kind: TriangularKind
    n_nodes: Optional[int] = None


InputMode = Union[DenseInput, EdgeListInput]


def is_edge_list_shape(n_rows: int, n_cols: int) -> bool:
    """Check whether an M x N shape is read as an edge list."""
    return n_cols == EDGE_LIST_COLUMNS and n_rows >= MIN_EDGE_LIST_ROWS


def classify_triangular(rows: NDArray) -> TriangularKind:
    """
    Classify the triangular structure of an edge list.

    Parameters
    ----------
    rows : NDArray
        M x 3 array of ``[row, col, weight]``

    Returns
    -------
    TriangularKind
        SYMMETRIC if as many rows have ``row >= col`` as ``row < col``,
        UPPER_TRIANGULAR if every row has ``row < col``,
        LOWER_TRIANGULAR if every row has ``row >= col``,
        INVALID otherwise.

    Examples
    --------
    >>> classify_triangular(np.array([[1, 2, 1.0], [2, 1, 1.0]]))
    <TriangularKind.SYMMETRIC: 'symmetric'>
    """
    m = rows.shape[0]
    sum1 = int(np.count_nonzero(rows[:, 0] >= rows[:, 1]))
    sum2 = int(np.count_nonzero(rows[:, 0] < rows[:, 1]))

    logger.debug(f"Edge list triangular counts: sum1={sum1}, sum2={sum2}, M={m}")

    if sum1 == sum2:
        return TriangularKind.SYMMETRIC
    if sum1 == 0 and sum2 == m:
        return TriangularKind.UPPER_TRIANGULAR
    if sum1 == m and sum2 == 0:
        return TriangularKind.LOWER_TRIANGULAR
    return TriangularKind.INVALID


def classify_dense(matrix: NDArray, atol: float = SYMMETRY_ATOL) -> TriangularKind:
    """
    Classify the off-diagonal structure of a square matrix.

    A symmetric matrix (within ``atol``) is SYMMETRIC; a matrix whose
    strictly lower (upper) part is zero is UPPER (LOWER) triangular;
    anything else is INVALID. The diagonal is ignored.
    """
    if np.allclose(matrix, matrix.T, rtol=0.0, atol=atol):
        return TriangularKind.SYMMETRIC
    if not np.any(np.tril(matrix, k=-1)):
        return TriangularKind.UPPER_TRIANGULAR
    if not np.any(np.triu(matrix, k=1)):
        return TriangularKind.LOWER_TRIANGULAR
    return TriangularKind.INVALID


def _as_numeric_matrix(matrix: Any) -> NDArray[np.float64]:
    """Convert input to a 2-D float array, rejecting what is not a real matrix."""
    if isinstance(matrix, (str, bytes)):
        raise InvalidMatrixError("Input is a string, not a numeric matrix.", position=0)

    try:
        array = np.asarray(matrix)
    except ValueError as e:
        # Ragged nested sequences
        raise InvalidMatrixError(f"Input is not a rectangular matrix: {e}", position=0) from e

    if array.dtype == object or array.dtype.kind in "USV":
        raise InvalidMatrixError("Input has non-numeric entries.", position=0)
    if array.dtype.kind == "b":
        raise InvalidMatrixError("Input is a logical matrix, not a numeric one.", position=0)
    if np.iscomplexobj(array):
        raise InvalidMatrixError("Input has complex entries.", position=0)
    if array.size == 0:
        raise InvalidMatrixError("Input is empty.", position=0)
    if array.ndim != 2:
        raise MatrixShapeError(
            f"Input must be 2-dimensional, got {array.ndim} dimensions.", position=0
        )

    return array.astype(np.float64, copy=False)


def _validate_edge_rows(rows: NDArray[np.float64]) -> None:
    """Check that edge-list endpoints are positive integers and weights finite and non-negative."""
    endpoints = rows[:, :2]
    if not np.all(np.isfinite(endpoints)):
        raise InvalidMatrixError("Edge list has non-finite node indices.", position=0)
    if np.any(endpoints != np.floor(endpoints)):
        raise InvalidMatrixError("Edge list node indices must be integers.", position=0)
    if np.any(endpoints < 1):
        raise InvalidMatrixError("Edge list node indices are 1-based and must be >= 1.", position=0)
    if not np.all(np.isfinite(rows[:, 2])):
        raise InvalidMatrixError("Edge list has non-finite weights.", position=0)
    if np.any(rows[:, 2] < 0):
        raise InvalidMatrixError("Edge list has negative weights.", position=0)


def classify_sparse_structure(matrix: Any, atol: float = SYMMETRY_ATOL) -> TriangularKind:
    """Sparse counterpart of :func:`classify_dense`."""
    difference = abs(matrix - matrix.T)
    if difference.nnz == 0 or difference.max() <= atol:
        return TriangularKind.SYMMETRIC
    if sp.tril(matrix, k=-1).count_nonzero() == 0:
        return TriangularKind.UPPER_TRIANGULAR
    if sp.triu(matrix, k=1).count_nonzero() == 0:
        return TriangularKind.LOWER_TRIANGULAR
    return TriangularKind.INVALID


def _classify_sparse(matrix: Any) -> EdgeListInput:
    """Read a square scipy.sparse matrix as the edge list of its off-diagonal non-zeros."""
    n_rows, n_cols = matrix.shape
    if n_rows != n_cols:
        raise MatrixShapeError(
            f"Sparse adjacency matrix must be square, got {n_rows}x{n_cols}.", position=0
        )
    if n_rows == 0:
        raise InvalidMatrixError("Input is empty.", position=0)
    if matrix.dtype == object or matrix.dtype.kind == "b":
        raise InvalidMatrixError("Input has non-numeric entries.", position=0)
    if np.iscomplexobj(matrix.data):
        raise InvalidMatrixError("Input has complex entries.", position=0)
    if not np.all(np.isfinite(matrix.data)):
        raise InvalidMatrixError("Adjacency matrix has non-finite entries.", position=0)
    i, j, w = sp.find(matrix)
    off_diagonal = i != j
    if np.any(w[off_diagonal] < 0):
        raise InvalidMatrixError("Adjacency matrix has negative off-diagonal entries.", position=0)

    kind = classify_sparse_structure(matrix)
    if kind is TriangularKind.INVALID:
        raise NonSymmetricMatrixError(
            "Sparse matrix is not symmetric, nor upper or lower triangular.",
            position=0,
        )

    rows = np.column_stack([i[off_diagonal] + 1, j[off_diagonal] + 1, w[off_diagonal]])

    logger.debug(f"Sparse {n_rows}x{n_cols} matrix read as {rows.shape[0]}-row edge list ({kind.value})")
    return EdgeListInput(rows=rows.astype(np.float64).reshape(-1, 3), kind=kind, n_nodes=n_rows)


def classify_matrix(matrix: Any) -> InputMode:
    """
    Decide how an input matrix is to be interpreted.

    Parameters
    ----------
    matrix : array_like or scipy.sparse matrix
        Dense square adjacency matrix, M x 3 edge list (M > 3) with
        1-based node indices, or square sparse adjacency matrix

    Returns
    -------
    InputMode
        DenseInput or EdgeListInput. The input is never modified.

    Raises
    ------
    InvalidMatrixError
        If the input is complex, empty, logical, non-numeric or malformed
    MatrixShapeError
        If the input is neither square nor an edge list
    NonSymmetricMatrixError
        If a dense matrix is neither symmetric nor triangular
    NonSymmetricEdgeListError
        If an edge list is neither symmetric nor triangular

    Examples
    --------
    >>> mode = classify_matrix(np.eye(4))
    >>> mode.kind
    <TriangularKind.SYMMETRIC: 'symmetric'>
    """
    if sp.issparse(matrix):
        return _classify_sparse(matrix)

    array = _as_numeric_matrix(matrix)
    n_rows, n_cols = array.shape

    if is_edge_list_shape(n_rows, n_cols):
        _validate_edge_rows(array)
        kind = classify_triangular(array)
        if kind is TriangularKind.INVALID:
            raise NonSymmetricEdgeListError(position=0)
        logger.debug(f"Input read as {n_rows}-row edge list ({kind.value})")
        return EdgeListInput(rows=array, kind=kind)

    if n_rows != n_cols:
        raise MatrixShapeError(
            f"Got a {n_rows}x{n_cols} matrix; expected n x n or M x 3 with M > 3.",
            position=0,
        )
    if not np.all(np.isfinite(array)):
        raise InvalidMatrixError("Adjacency matrix has non-finite entries.", position=0)
    if np.any(array[~np.eye(n_rows, dtype=bool)] < 0):
        raise InvalidMatrixError("Adjacency matrix has negative off-diagonal entries.", position=0)

    kind = classify_dense(array)
    if kind is TriangularKind.INVALID:
        raise NonSymmetricMatrixError(
            "Dense matrix is not symmetric, nor upper or lower triangular.",
            position=0,
        )

    logger.debug(f"Input read as {n_rows}x{n_cols} dense adjacency matrix ({kind.value})")
    return DenseInput(matrix=array, kind=kind)
