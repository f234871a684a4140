"""
Configuration constants for the Infomap matrix adapter.
========================================================

This module contains the defaults used throughout the adapter.
Centralizing them keeps the option parser, the runner and the
command-line interface consistent.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)

# Random seed handed to Infomap when the caller does not give one
RANDOM_SEED = 123

# Infomap defaults
DEFAULT_NUM_TRIALS = 1
DEFAULT_TELEPORTATION_PROBABILITY = 0.15
DEFAULT_MARKOV_TIME = 1.0

# Infomap citation
# Rosvall, M. & Bergstrom, C.T.
# Maps of random walks on complex networks reveal community structure.
# PNAS 105, 1118-1123 (2008). https://doi.org/10.1073/pnas.0706851105

# Edge-list inputs need more rows than columns to be told apart
# from a 3x3 adjacency matrix
EDGE_LIST_COLUMNS = 3
MIN_EDGE_LIST_ROWS = 4

# Absolute tolerance when checking a dense matrix for symmetry
SYMMETRY_ATOL = 1e-12

# Maximum number of outputs a caller may request (membership, codelength)
MAX_OUTPUTS = 2


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file of Infomap option values.

    Parameters
    ----------
    config_path : str or Path
        Path to the YAML file. Keys are option names as accepted by
        :func:`infomap_adapter.options.parse_options` (``N``, ``p``,
        ``y``, ``markov-time``, ``seed``).

    Returns
    -------
    Dict[str, Any]
        Option name -> value. Empty if the file holds no mapping.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning(f"Configuration file {config_path} is empty")
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file {config_path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data
