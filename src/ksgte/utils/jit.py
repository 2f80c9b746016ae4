"""JIT compilation utilities for ksgte.

Provides conditional JIT compilation based on environment settings.
"""

import os

from numba import njit

# Check if Numba should be disabled
KSGTE_DISABLE_NUMBA = os.getenv("KSGTE_DISABLE_NUMBA", "False").lower() in (
    "true",
    "1",
    "yes",
)


def conditional_njit(*args, **kwargs):
    """Conditionally apply numba JIT compilation based on environment settings.

    If the KSGTE_DISABLE_NUMBA environment variable is set to 'true', '1' or
    'yes', this returns the original function without JIT compilation.
    Otherwise, applies numba.njit with the given parameters.

    Parameters
    ----------
    *args
        Positional arguments passed to numba.njit. If a single function is
        passed, it will be decorated directly.
    **kwargs
        Keyword arguments passed to numba.njit (e.g., cache=True).

    Returns
    -------
    decorator or function
        If called with arguments: returns a decorator function.
        If called on a function directly: returns the (possibly JIT-compiled) function.

    Examples
    --------
    >>> @conditional_njit
    ... def fast_computation(x):
    ...     return x ** 2

    With numba parameters::

        @conditional_njit(cache=True)
        def cached_computation(x):
            return x ** 2
    """
    if KSGTE_DISABLE_NUMBA:

        def decorator(func):
            return func

        return decorator if not args else args[0]

    return njit(*args, **kwargs)


def is_jit_enabled():
    """Check if JIT compilation is enabled.

    Returns
    -------
    bool
        False if the KSGTE_DISABLE_NUMBA environment variable is set to
        'true', '1' or 'yes', True otherwise.

    Notes
    -----
    The variable is read once at import time, so it has to be set before
    ``ksgte`` is imported.
    """
    return not KSGTE_DISABLE_NUMBA
