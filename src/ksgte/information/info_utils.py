import numpy as np

from ..utils.jit import conditional_njit


@conditional_njit
def py_fast_digamma_arr(data):
    """Compute digamma function for an array of values using fast approximation.

    Uses a series expansion approximation that is accurate for x > 5.

    Parameters
    ----------
    data : ndarray
        Input array of positive values.

    Returns
    -------
    ndarray
        Array of digamma values corresponding to input data. Non-positive
        inputs give NaN.

    Notes
    -----
    The recurrence psi(x) = psi(x + 1) - 1/x shifts x above 5, where the
    asymptotic expansion with Bernoulli number corrections is applied.
    """
    res = np.zeros(len(data))
    for i in range(len(data)):
        x = float(data[i])
        if x <= 0:
            res[i] = np.nan
            continue
        r = 0.0
        while x <= 5:
            r -= 1 / x
            x += 1
        f = 1 / (x * x)
        t = f * (
            -1 / 12.0
            + f
            * (
                1 / 120.0
                + f
                * (
                    -1 / 252.0
                    + f
                    * (
                        1 / 240.0
                        + f
                        * (
                            -1 / 132.0
                            + f * (691 / 32760.0 + f * (-1 / 12.0 + f * 3617 / 8160.0))
                        )
                    )
                )
            )
        )

        res[i] = r + np.log(x) - 0.5 / x + t

    return res


def py_fast_digamma(x):
    """Digamma of a single positive value, see :func:`py_fast_digamma_arr`."""
    return py_fast_digamma_arr(np.array([x], dtype=np.float64))[0]
