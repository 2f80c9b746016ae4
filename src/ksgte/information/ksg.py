"""K-nearest neighbor search and neighbor counting for KSG estimators.

This module holds the two metric-space primitives the Kraskov-Stögbauer-
Grassberger (KSG) transfer entropy estimator is built from:

- k-nearest-neighbor search over a point set with the query point itself
  excluded, giving per-point distances to the k-th neighbor;
- closed-ball neighbor counting in a marginal projection, with a radius
  per point.

All functions take points in scikit-learn layout, ``(n_samples,
n_features)``.

References:
    Kraskov, A., Stögbauer, H., & Grassberger, P. (2004).
    Estimating mutual information. Physical Review E, 69(6), 066138.
"""

import numpy as np
from sklearn.metrics import pairwise_distances_chunked
from sklearn.neighbors import BallTree, KDTree

from .errors import NeighborCountError

DEFAULT_METRIC = "chebyshev"
DEFAULT_LEAF_SIZE = 5
BALLTREE_MIN_DIM = 20

# metrics sklearn's KDTree accepts; anything else goes to a BallTree
KDTREE_METRICS = frozenset(
    [
        "euclidean",
        "l2",
        "minkowski",
        "manhattan",
        "cityblock",
        "l1",
        "chebyshev",
    ]
)


def build_tree(points, metric=DEFAULT_METRIC, metric_params=None, lf=DEFAULT_LEAF_SIZE):
    """Build an exact spatial index over a point set.

    Parameters
    ----------
    points : ndarray of shape (n_samples, n_features)
        Points to index.
    metric : str or callable, default="chebyshev"
        Metric name understood by scikit-learn, or a callable
        ``f(u, v) -> float``.
    metric_params : dict, optional
        Extra metric arguments, e.g. ``{"p": 3}`` for Minkowski.
    lf : int, default=5
        Leaf size.

    Returns
    -------
    KDTree or BallTree
        A KDTree for KD-compatible metrics in fewer than 20 dimensions,
        a BallTree otherwise.
    """
    params = metric_params or {}
    if (
        callable(metric)
        or metric not in KDTREE_METRICS
        or points.shape[1] >= BALLTREE_MIN_DIM
    ):
        return BallTree(points, leaf_size=lf, metric=metric, **params)

    return KDTree(points, leaf_size=lf, metric=metric, **params)


def query_neighbors(tree, x, k, sort_results=True):
    """Find the k nearest neighbors of every indexed point, excluding itself.

    Parameters
    ----------
    tree : KDTree or BallTree
        Index built with :func:`build_tree` over ``x``.
    x : ndarray of shape (n_samples, n_features)
        The indexed points. Row ``i`` is queried against the whole set and
        its own entry is removed from the result.
    k : int
        Number of neighbors, ``1 <= k < n_samples``.
    sort_results : bool, default=True
        Return neighbors sorted by increasing distance.

    Returns
    -------
    indices : ndarray of shape (n_samples, k)
        Neighbor indices.
    distances : ndarray of shape (n_samples, k)
        Neighbor distances.

    Raises
    ------
    NeighborCountError
        If ``k`` is not in ``[1, n_samples - 1]``.

    Notes
    -----
    ``k + 1`` candidates are requested. When a point's own index is among
    them it is dropped; otherwise (duplicates at distance zero pushed it
    out) the farthest candidate is dropped. Either way the result holds
    ``k`` points other than the query. Among equidistant candidates the
    tree decides which index is reported, so only the k-th *distance* is
    reproducible, not the k-th index.
    """
    n_indexed = tree.get_arrays()[0].shape[0]
    if not 1 <= k < n_indexed:
        raise NeighborCountError(
            f"Number of neighbors must satisfy 1 <= k < n_points, got k={k} "
            f"with n_points={n_indexed}"
        )

    dists, inds = tree.query(x, k=k + 1, sort_results=sort_results)

    n_query = inds.shape[0]
    self_mask = inds == np.arange(n_query)[:, None]
    drop = np.where(self_mask.any(axis=1), self_mask.argmax(axis=1), dists.argmax(axis=1))
    keep = np.ones_like(inds, dtype=bool)
    keep[np.arange(n_query), drop] = False

    return inds[keep].reshape(n_query, k), dists[keep].reshape(n_query, k)


def kth_neighbor_distances(tree, x, k):
    """Distance from every indexed point to its k-th nearest other point."""
    _, dists = query_neighbors(tree, x, k, sort_results=True)
    return dists[:, k - 1]


def count_neighbors_within(
    points, radii, metric=DEFAULT_METRIC, metric_params=None, working_memory=None
):
    """Count, for every point, the points lying in its closed ball.

    For point ``i`` this is the number of points ``j`` (``i`` included)
    with ``distance(i, j) <= radii[i]``, so every count is at least 1.

    Parameters
    ----------
    points : ndarray of shape (n_samples, n_features)
        Projection of the point set on a marginal sub-space.
    radii : ndarray of shape (n_samples,)
        Non-negative radius per point.
    metric : str or callable, default="chebyshev"
        Same metric as used for the neighbor search.
    metric_params : dict, optional
        Extra metric arguments.
    working_memory : int, optional
        Memory budget in MiB for one block of the pairwise distance
        matrix, see :func:`sklearn.metrics.pairwise_distances_chunked`.

    Returns
    -------
    ndarray of shape (n_samples,)
        Integer neighbor counts.

    Notes
    -----
    The inclusive comparison is required: points sitting exactly on the
    k-th neighbor shell, and coinciding points, must be counted.
    """
    radii = np.asarray(radii, dtype=float)
    if radii.shape != (points.shape[0],):
        raise ValueError(
            f"Expected one radius per point ({points.shape[0]}), got shape {radii.shape}"
        )

    params = dict(metric_params or {})
    if metric in ("euclidean", "l2"):
        # sklearn's euclidean uses the dot-product expansion, which is not exact
        metric = "minkowski"
        params.setdefault("p", 2)

    def _reduce(d_chunk, start):
        r = radii[start : start + d_chunk.shape[0], None]
        return np.count_nonzero(d_chunk <= r, axis=1)

    chunks = pairwise_distances_chunked(
        points,
        reduce_func=_reduce,
        metric=metric,
        working_memory=working_memory,
        **params,
    )
    return np.concatenate(list(chunks))
