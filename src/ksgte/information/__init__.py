"""
Information theory functions for ksgte.

This module provides the KSG nearest-neighbor estimator of transfer
entropy together with the neighbor search and counting primitives it is
built from.
"""

# Variable partition
from .te_vars import TEVars, as_row_indices

# Errors
from .errors import DimensionalityError, NeighborCountError, PartitionIndexError

# Neighbor search and counting
from .ksg import (
    DEFAULT_METRIC,
    build_tree,
    query_neighbors,
    kth_neighbor_distances,
    count_neighbors_within,
)

# Transfer entropy estimators
from .transfer_entropy import (
    transferentropy_kraskov,
    transferentropy_kraskov_k1k2,
    tekraskov,
    tekNN,
)

__all__ = [
    # Partition
    "TEVars",
    "as_row_indices",
    # Errors
    "DimensionalityError",
    "NeighborCountError",
    "PartitionIndexError",
    # KSG primitives
    "DEFAULT_METRIC",
    "build_tree",
    "query_neighbors",
    "kth_neighbor_distances",
    "count_neighbors_within",
    # Transfer entropy
    "transferentropy_kraskov",
    "transferentropy_kraskov_k1k2",
    "tekraskov",
    "tekNN",
]
