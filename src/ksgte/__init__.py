"""
ksgte - KSG nearest-neighbor transfer entropy

Estimates the directed information flow from a source to a target time
series, optionally conditioned on other variables, from a state-space
embedding of the data using the Kraskov-Stögbauer-Grassberger estimator.
"""

__version__ = "0.1.0"

# Core modules
from . import information
from . import utils

# Key classes
from .information import TEVars

# Estimators
from .information import (
    transferentropy_kraskov,
    transferentropy_kraskov_k1k2,
    tekraskov,
    tekNN,
)

# Errors
from .information import (
    DimensionalityError,
    NeighborCountError,
    PartitionIndexError,
)

__all__ = [
    # Modules
    "information",
    "utils",
    # Key classes
    "TEVars",
    # Estimators
    "transferentropy_kraskov",
    "transferentropy_kraskov_k1k2",
    "tekraskov",
    "tekNN",
    # Errors
    "DimensionalityError",
    "NeighborCountError",
    "PartitionIndexError",
]
