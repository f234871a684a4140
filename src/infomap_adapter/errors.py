"""
Error Taxonomy
==============

Every failure the adapter reports belongs to one :class:`ErrorKind`.
Messages are produced by :func:`format_error`, which combines the kind,
the offending argument position and an optional detail string.

Argument positions count the matrix as position 0 and the option
name/value pairs from position 1 onwards.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Categories of adapter failures."""

    TOO_MANY_OUTPUTS = "Too many output arguments."
    NOT_ENOUGH_INPUTS = "Not enough input arguments."
    ARGUMENT_VALUE = "Non valid argument value."
    ARGUMENT_TYPE = "Non valid argument type."
    INVALID_MATRIX = (
        "Non valid input adjacency matrix. Accepted inputs are symmetric real "
        "dense (n x n) matrices or a sparse edge-list representation "
        "[num_edges x 3] with 1-based edge endpoints and weight."
    )
    NON_SYMMETRIC_EDGE_LIST = (
        "Edge list is not symmetric, nor upper or lower triangular. "
        "Check diagonal and non symmetric values."
    )
    ARGUMENT_EMPTY = "Expected some argument value but empty found."
    UNKNOWN_ARGUMENT = "Unknown argument."
    INCOMPLETE_RESULT = "Partition result does not assign every node exactly once."


def format_error(kind: ErrorKind, position: Optional[int] = None, detail: Optional[str] = None) -> str:
    """
    Build the human-readable message for an error.

    Parameters
    ----------
    kind : ErrorKind
        Error category
    position : int, optional
        Offending argument position, omitted from the message if None
    detail : str, optional
        Extra information appended after the category message

    Returns
    -------
    str
        Formatted message

    Examples
    --------
    >>> format_error(ErrorKind.UNKNOWN_ARGUMENT, 3)
    'Error at argument: 3: Unknown argument.'
    """
    message = kind.value
    if detail:
        message = f"{message} {detail}"
    if position is None:
        return message
    return f"Error at argument: {position}: {message}"


class InfomapAdapterError(Exception):
    """Base class for all adapter errors."""

    kind = ErrorKind.INVALID_MATRIX

    def __init__(self, detail: Optional[str] = None, position: Optional[int] = None):
        self.detail = detail
        self.position = position
        super().__init__(format_error(self.kind, position, detail))


class TooManyOutputsError(InfomapAdapterError):
    """More than two outputs were requested."""

    kind = ErrorKind.TOO_MANY_OUTPUTS


class NotEnoughInputsError(InfomapAdapterError, TypeError):
    """No matrix argument was supplied."""

    kind = ErrorKind.NOT_ENOUGH_INPUTS


class InvalidMatrixError(InfomapAdapterError, ValueError):
    """The input matrix is complex, empty, non-numeric or malformed."""

    kind = ErrorKind.INVALID_MATRIX


class MatrixShapeError(InvalidMatrixError):
    """The input matrix is neither square nor an M x 3 edge list."""


class NonSymmetricMatrixError(InvalidMatrixError):
    """A dense matrix is neither symmetric nor triangular."""


class NonSymmetricEdgeListError(InfomapAdapterError, ValueError):
    """An edge list is neither symmetric nor upper/lower triangular."""

    kind = ErrorKind.NON_SYMMETRIC_EDGE_LIST


class ArgumentValueError(InfomapAdapterError, ValueError):
    """A recognized option has a value outside its valid range."""

    kind = ErrorKind.ARGUMENT_VALUE


class ArgumentTypeError(InfomapAdapterError, TypeError):
    """An option pair is not a name followed by a numeric value."""

    kind = ErrorKind.ARGUMENT_TYPE


class UnknownArgumentError(InfomapAdapterError, ValueError):
    """An option name is not recognized."""

    kind = ErrorKind.UNKNOWN_ARGUMENT


class ArgumentEmptyError(InfomapAdapterError, ValueError):
    """An option name is not followed by a value."""

    kind = ErrorKind.ARGUMENT_EMPTY


class IncompleteResultError(InfomapAdapterError, RuntimeError):
    """The partition tree omitted a node or assigned one twice."""

    kind = ErrorKind.INCOMPLETE_RESULT
