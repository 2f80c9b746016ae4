"""Variable partition of an embedding for transfer entropy estimation.

A transfer entropy estimate needs to know which rows of a ``dim x n`` point
matrix hold the target's future, the target's present/past, the source's
present/past and any conditioning variables. :class:`TEVars` stores exactly
that and nothing else.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Tuple

import numpy as np

from .errors import PartitionIndexError


def as_row_indices(group, name="indices"):
    """Normalise a collection of row indices to a tuple of ints.

    Parameters
    ----------
    group : int, range, list, tuple or 1-D integer ndarray
        Row indices. A single integer selects one row. ``None`` is treated
        as an empty group.
    name : str
        Name used in error messages.

    Returns
    -------
    tuple of int
        Indices in the order given. Duplicates are kept, since each entry
        selects a row of the embedding.

    Raises
    ------
    TypeError
        If ``group`` is not one of the accepted types or contains
        non-integer entries.
    """
    if group is None:
        return ()
    if isinstance(group, (bool, np.bool_)):
        raise TypeError(f"{name} must be an int or a collection of ints, got bool")
    if isinstance(group, Integral):
        return (int(group),)
    if isinstance(group, np.ndarray):
        if group.ndim != 1 or not np.issubdtype(group.dtype, np.integer):
            raise TypeError(
                f"{name} must be a 1-D integer array, got {group.ndim}-D {group.dtype}"
            )
        return tuple(int(i) for i in group)
    if not isinstance(group, (range, list, tuple)):
        raise TypeError(
            f"{name} must be an int, range, list, tuple or integer array, "
            f"got {type(group).__name__}"
        )

    out = []
    for i in group:
        if isinstance(i, (bool, np.bool_)) or not isinstance(i, Integral):
            raise TypeError(f"{name} must contain ints only, got {i!r}")
        out.append(int(i))
    return tuple(out)


@dataclass(frozen=True)
class TEVars:
    """Which embedding rows play which role in the transfer entropy.

    Parameters
    ----------
    target_future : int or collection of int
        Rows holding the future state(s) of the target (X).
    target_presentpast : int or collection of int
        Rows holding the present and past of the target (Y).
    source_presentpast : int or collection of int
        Rows holding the present and past of the source.
    conditioned_presentpast : int or collection of int, optional
        Rows holding the present and past of conditioning variables. Empty
        by default, meaning no conditioning.

    Notes
    -----
    Indices are zero-based row numbers of a ``dim x n`` point matrix. They
    are stored verbatim; whether they fit a particular matrix is checked
    by :meth:`validate` when the partition is used.
    """

    target_future: Tuple[int, ...]
    target_presentpast: Tuple[int, ...]
    source_presentpast: Tuple[int, ...]
    conditioned_presentpast: Tuple[int, ...] = ()

    def __post_init__(self):
        for field in (
            "target_future",
            "target_presentpast",
            "source_presentpast",
            "conditioned_presentpast",
        ):
            object.__setattr__(
                self, field, as_row_indices(getattr(self, field), name=field)
            )

    @property
    def X(self):
        return self.target_future

    @property
    def Y(self):
        return self.target_presentpast

    @property
    def Z(self):
        # source first, then conditioning variables
        return self.source_presentpast + self.conditioned_presentpast

    @property
    def XY(self):
        return self.X + self.Y

    @property
    def YZ(self):
        return self.Y + self.Z

    @property
    def XYZ(self):
        return self.XY + self.Z

    def validate(self, dim):
        """Check that the partition can be applied to a ``dim``-row matrix.

        Raises
        ------
        PartitionIndexError
            If target future, target present/past or source group is empty,
            or if any index lies outside ``[0, dim)``.
        """
        for field in ("target_future", "target_presentpast", "source_presentpast"):
            if not getattr(self, field):
                raise PartitionIndexError(f"{field} must contain at least one row index")

        bad = [i for i in self.XYZ if not 0 <= i < dim]
        if bad:
            raise PartitionIndexError(
                f"Row indices {sorted(set(bad))} are out of range for a point "
                f"matrix with {dim} rows"
            )
