#!/usr/bin/env python3
"""
Infomap Partition Runner
========================

Command-line interface partitioning a network stored as a numeric
matrix file.

Accepted matrix files:
- ``.npy``: a single array
- ``.npz``: the first array in the archive
- anything else: delimited text (whitespace or comma), one matrix row per line

Usage:
    infomap-partition MATRIX [--trials N] [--teleportation P]
                             [--self-teleportation Y] [--markov-time T]
                             [--seed S] [--config CONFIG] [--output OUTPUT]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import yaml

from .api import partition_matrix
from .config import load_config
from .errors import InfomapAdapterError
from .options import InfomapOptions, options_from_mapping, parse_options

logger = logging.getLogger(__name__)

# CLI flag -> option name
FLAG_OPTIONS = {
    "trials": "N",
    "teleportation": "p",
    "self_teleportation": "y",
    "markov_time": "markov-time",
    "seed": "seed",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Detect communities in a network matrix with Infomap"
    )
    parser.add_argument(
        "matrix",
        type=str,
        help="Matrix file: n x n adjacency matrix or M x 3 edge list (1-based)",
    )
    parser.add_argument(
        "--trials",
        type=float,
        default=None,
        help="Number of outer-most loops; the best solution is kept",
    )
    parser.add_argument(
        "--teleportation",
        type=float,
        default=None,
        help="Probability of teleporting to a random node (default: 0.15)",
    )
    parser.add_argument(
        "--self-teleportation",
        type=float,
        default=None,
        help="Additional probability of teleporting to itself (ignored by infomap 2.x)",
    )
    parser.add_argument(
        "--markov-time",
        type=float,
        default=None,
        help="Scale link flow; higher values give fewer modules (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=float,
        default=None,
        help="Random seed for Infomap",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file of option values; command-line flags take precedence",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write membership and codelength to this JSON file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def load_matrix(path: str) -> np.ndarray:
    """Load a numeric matrix from a .npy, .npz or delimited text file."""
    matrix_path = Path(path)
    if not matrix_path.exists():
        raise FileNotFoundError(f"Matrix file not found: {matrix_path}")

    suffix = matrix_path.suffix.lower()
    if suffix == ".npy":
        return np.load(matrix_path, allow_pickle=False)
    if suffix == ".npz":
        with np.load(matrix_path, allow_pickle=False) as archive:
            if not archive.files:
                raise ValueError(f"No arrays in {matrix_path}")
            return archive[archive.files[0]]

    with open(matrix_path, "r", encoding="utf-8") as f:
        first = f.readline()
    delimiter = "," if "," in first else None
    return np.loadtxt(matrix_path, delimiter=delimiter, ndmin=2)


def build_options(args: argparse.Namespace) -> InfomapOptions:
    """Combine the YAML config file and command-line flags into options."""
    options = InfomapOptions()
    if args.config is not None:
        options = options_from_mapping(load_config(args.config), base=options)
        logger.info(f"Loaded options from {args.config}")

    flat = []
    for flag, name in FLAG_OPTIONS.items():
        value = getattr(args, flag)
        if value is not None:
            flat.extend([name, value])
    return parse_options(flat, base=options)


def _make_serializable(obj: Any) -> Any:
    """Convert numpy arrays to lists for JSON serialization."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {k: _make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (np.integer,)):
        return int(obj)
    elif isinstance(obj, (np.floating,)):
        return float(obj)
    else:
        return obj


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        options = build_options(args)
        matrix = load_matrix(args.matrix)
        result = partition_matrix(matrix, options)
    except (InfomapAdapterError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(str(e))
        return 1

    n_modules = len(np.unique(result.membership))
    logger.info(f"Found {n_modules} modules, codelength={result.codelength:.6f}")

    print(" ".join(str(m) for m in result.membership))
    print(f"{result.codelength:.10g}")

    if args.output is not None:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        summary: Dict[str, Any] = {
            "matrix": str(args.matrix),
            "options": options.to_dict(),
            "membership": result.membership,
            "codelength": result.codelength,
            "n_modules": n_modules,
        }
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(_make_serializable(summary), f, indent=2)
        logger.info(f"Results saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
