"""
Option Parsing Module
=====================

Infomap options are given as name/value pairs after the input matrix,
e.g. ``infomap_partition(W, "N", 10, "markov-time", 0.8)``. Each
recognized name is described once in :data:`OPTION_TABLE`, which pairs
the :class:`InfomapOptions` field it sets with the validator for its
value.

Recognized options (names are case-insensitive):

- ``N``: number of outer-most loops, the best solution is kept (>= 1)
- ``p``: probability of teleporting to a random node (0 to 1)
- ``y``: additional probability of teleporting to itself (0 to 1);
  validated but ignored by infomap 2.x, which has no such setting
- ``markov-time``: scales link flow; higher gives fewer modules (>= 0)
- ``seed``: random seed for Infomap (>= 0)
"""

import logging
import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, NamedTuple, Optional, Sequence

import numpy as np

from .config import (
    DEFAULT_MARKOV_TIME,
    DEFAULT_NUM_TRIALS,
    DEFAULT_TELEPORTATION_PROBABILITY,
    RANDOM_SEED,
)
from .errors import (
    ArgumentEmptyError,
    ArgumentTypeError,
    ArgumentValueError,
    UnknownArgumentError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InfomapOptions:
    """Infomap run configuration."""

    num_trials: int = DEFAULT_NUM_TRIALS
    teleportation_probability: float = DEFAULT_TELEPORTATION_PROBABILITY
    self_teleportation_probability: Optional[float] = None
    markov_time: float = DEFAULT_MARKOV_TIME
    seed: int = RANDOM_SEED

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _is_unit_interval(value: float) -> bool:
    return 0.0 <= value <= 1.0


def _is_non_negative(value: float) -> bool:
    return value >= 0.0


def _is_positive_integer(value: float) -> bool:
    return value >= 1 and float(value).is_integer()


def _is_non_negative_integer(value: float) -> bool:
    return value >= 0 and float(value).is_integer()


class OptionSpec(NamedTuple):
    """Field set by an option, the check its value must pass, and the cast applied."""

    field: str
    validator: Callable[[float], bool]
    cast: Callable[[float], Any]
    description: str


OPTION_TABLE: Dict[str, OptionSpec] = {
    "n": OptionSpec("num_trials", _is_positive_integer, int, "integer >= 1"),
    "p": OptionSpec("teleportation_probability", _is_unit_interval, float, "in [0, 1]"),
    "y": OptionSpec("self_teleportation_probability", _is_unit_interval, float, "in [0, 1]"),
    "markov-time": OptionSpec("markov_time", _is_non_negative, float, ">= 0"),
    "seed": OptionSpec("seed", _is_non_negative_integer, int, "integer >= 0"),
}


def _as_real_scalar(value: Any) -> Optional[float]:
    """Return ``value`` as a float if it is a real number, else None."""
    if isinstance(value, (str, bytes, bool, np.bool_)):
        return None
    if isinstance(value, np.ndarray):
        # Numeric values may arrive as 1-element arrays
        if value.size != 1 or value.dtype.kind not in "iuf":
            return None
        value = value.reshape(()).item()
    if not isinstance(value, numbers.Real):
        return None
    return float(value)


def apply_option(options: InfomapOptions, name: Any, value: Any, position: int) -> InfomapOptions:
    """
    Apply one name/value pair to an options object.

    Parameters
    ----------
    options : InfomapOptions
        Current options
    name : Any
        Option name, expected to be a string
    value : Any
        Option value, expected to be a real number
    position : int
        Argument position of ``name``; ``value`` sits at ``position + 1``

    Returns
    -------
    InfomapOptions
        New options object with the field updated
    """
    number = _as_real_scalar(value)
    if not isinstance(name, str) or number is None:
        raise ArgumentTypeError(
            "Options must be given as a name followed by a numeric value.",
            position=position,
        )

    spec = OPTION_TABLE.get(name.lower())
    if spec is None:
        raise UnknownArgumentError(f"'{name}'", position=position)

    if not np.isfinite(number) or not spec.validator(number):
        raise ArgumentValueError(
            f"'{name}' must be {spec.description}, got {value!r}.",
            position=position + 1,
        )

    logger.debug(f"Option {name} -> {spec.field}={number}")
    return replace(options, **{spec.field: spec.cast(number)})


def parse_options(
    args: Sequence[Any],
    start_position: int = 1,
    base: Optional[InfomapOptions] = None,
) -> InfomapOptions:
    """
    Parse name/value pairs into an options object.

    Parameters
    ----------
    args : Sequence[Any]
        Flat sequence ``[name1, value1, name2, value2, ...]``
    start_position : int, optional
        Argument position of ``args[0]`` in the caller's argument list
        (default: 1, the matrix being argument 0)
    base : InfomapOptions, optional
        Options to start from (default: all defaults)

    Returns
    -------
    InfomapOptions
        Parsed options

    Raises
    ------
    ArgumentEmptyError
        If the last name has no value
    ArgumentTypeError
        If a pair is not a string name and a numeric value
    UnknownArgumentError
        If a name is not recognized
    ArgumentValueError
        If a value is out of range

    Examples
    --------
    >>> parse_options(["N", 5, "p", 0.2]).num_trials
    5
    """
    options = base if base is not None else InfomapOptions()

    for offset in range(0, len(args), 2):
        position = start_position + offset
        if offset + 1 >= len(args):
            raise ArgumentEmptyError(f"'{args[offset]}'", position=position)
        options = apply_option(options, args[offset], args[offset + 1], position)

    return options


def options_from_mapping(
    mapping: Dict[str, Any],
    base: Optional[InfomapOptions] = None,
) -> InfomapOptions:
    """Parse an option-name -> value mapping, e.g. loaded from a YAML file."""
    flat = []
    for name, value in mapping.items():
        flat.extend([name, value])
    return parse_options(flat, base=base)
