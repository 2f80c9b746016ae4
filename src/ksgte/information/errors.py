"""Exceptions raised by the transfer entropy estimators."""


class DimensionalityError(ValueError):
    """Point matrix has more rows (dimensions) than columns (points).

    This almost always means the data was passed transposed: points are
    expected as columns of a ``dim x n`` array.
    """


class NeighborCountError(ValueError):
    """Requested neighbor count is not in ``[1, n - 1]``."""


class PartitionIndexError(IndexError):
    """A variable partition does not fit the point matrix it is applied to."""
