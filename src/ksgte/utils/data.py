"""Parameter checks and synthetic point sets for the estimators."""

import numpy as np


def check_positive(**kwargs):
    """Check that all provided parameters are positive (> 0).

    Parameters
    ----------
    **kwargs : dict
        Parameter name to value mappings. All values should be numeric.

    Raises
    ------
    ValueError
        If any parameter value is not positive, NaN, or infinite.
    TypeError
        If any parameter value is not numeric.

    Examples
    --------
    >>> check_positive(k=4, base=2)  # No error

    >>> check_positive(base=-2)
    ValueError: base must be positive, got -2
    """
    for name, value in kwargs.items():
        if value is None:
            continue  # Skip None values
        try:
            val = float(value)
        except (TypeError, ValueError):
            raise TypeError(f"{name} must be numeric, got {type(value).__name__}")
        if np.isnan(val):
            raise ValueError(f"{name} cannot be NaN")
        if np.isinf(val):
            raise ValueError(f"{name} cannot be infinite")
        if val <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def gaussian_transfer_entropy(rho):
    """Exact transfer entropy (nats) of a coupled Gaussian triple.

    For the point sets produced by :func:`create_coupled_gaussian_points`
    the target future depends on the source only, so the transfer entropy
    equals the mutual information of a bivariate Gaussian with
    correlation ``rho``: ``-0.5 * ln(1 - rho**2)``.
    """
    return -0.5 * np.log(1.0 - rho**2)


def create_coupled_gaussian_points(n_points=1000, rho=0.3, seed=42):
    """Generate a trivially embedded source/target pair with known coupling.

    Parameters
    ----------
    n_points : int
        Number of points (columns).
    rho : float
        Correlation between the source and the target future, in (-1, 1).
        ``rho=0`` gives independent source and target.
    seed : int
        Random seed for reproducibility.

    Returns
    -------
    points : np.ndarray
        Array of shape (3, n_points). Row 0 is the target future, row 1 the
        target present and row 2 the source present.
    """
    check_positive(n_points=n_points)
    if not -1.0 < rho < 1.0:
        raise ValueError(f"rho must lie in (-1, 1), got {rho}")

    rng = np.random.default_rng(seed)
    source = rng.standard_normal(n_points)
    target_present = rng.standard_normal(n_points)
    noise = rng.standard_normal(n_points)
    target_future = rho * source + np.sqrt(1.0 - rho**2) * noise

    return np.vstack([target_future, target_present, source])
