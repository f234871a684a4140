"""
Algorithms Module
=================

This module runs Infomap community detection and turns its output
into per-node memberships.

Submodules
----------
partition_runner
    Two-level Infomap on a NetworkX graph
result_projector
    Membership vector and codelength from leaf assignments
"""

from .partition_runner import (
    InfomapRun,
    run_infomap,
    build_infomap_kwargs,
    iter_leaf_modules,
)
from .result_projector import (
    PartitionResult,
    project_result,
)

__all__ = [
    # Infomap
    "InfomapRun",
    "run_infomap",
    "build_infomap_kwargs",
    "iter_leaf_modules",
    # Results
    "PartitionResult",
    "project_result",
]
