"""
Math Extensions (:mod:`findroot.numeric.math_ext`)
==================================================

.. currentmodule:: findroot.numeric.math_ext

Array handling shared by the iterative solvers.
"""
from __future__ import annotations

from typing import TypeVar

import numpy as np
import numpy.typing as npt

_T = TypeVar('_T')


# ======================================================================

def check_sclarray(x: npt.ArrayLike) -> tuple[npt.NDArray[float], bool]:
    """
    Copy parameter `x` into a new 1-D `float` array.  Whether `x` was
    a scalar or array is also returned for later use.

    Parameters
    ----------
    x : array_like or scalar
        Input argument as either a scalar or array-like sequence.

    Returns
    -------
    result, single : tuple[ndarray, bool]
        `result` is a 1-D float array.  `single` is:
            - `True` if `x` was a single value supplied as a scalar,
            - `False` in all other cases, even if `x` contained a single
              value contained in a sequence / array.

    Raises
    ------
    ValueError
        If `x` has more than one dimension.
    """
    single = np.ndim(x) == 0
    result = np.array(x, dtype=float, ndmin=1)
    if result.ndim != 1:
        raise ValueError(f"Result array dimensions ndim = "
                         f"{result.ndim} incorrect, expected ndim = 1.")
    return result, single


# ----------------------------------------------------------------------

def return_sclarray(x: npt.NDArray[_T], single: bool
                    ) -> npt.NDArray[_T] | _T:
    """
    Reformat the parameter `x` as a scalar or array, generally to
    match the form of a previously supplied input parameter (see
    `check_sclarray`).

    Raises
    ------
    ValueError
        If `single=True`` but ``x.size != 1``.
    """
    if single:
        if x.size != 1:
            raise ValueError(f"Single value expected, got {x.size}.")
        return x.item(0)

    else:
        return x


# ----------------------------------------------------------------------

def within_tol(a: npt.ArrayLike, b: npt.ArrayLike, atol: npt.ArrayLike,
               rtol: npt.ArrayLike) -> bool:
    r"""
    Elementwise tolerance test between two successive values, combining
    absolute and relative thresholds.  Returns ``True`` only if for
    every component `i`:

    .. math:: |a_i - b_i| < atol_i + rtol_i \max(|a_i|, |b_i|)

    `atol` and `rtol` must be broadcastable to the shape of `a` and
    `b`.  Any `NaN` component fails the test.

    Examples
    --------
    >>> within_tol([1.0, 2.0], [1.0 + 1e-12, 2.0], atol=0.0, rtol=1e-9)
    True
    >>> within_tol([1.0, 2.0], [1.1, 2.0], atol=[0.2, 1e-9], rtol=0.0)
    True
    >>> within_tol([1.0, 2.0], [1.1, 2.0], atol=0.05, rtol=1e-9)
    False
    """
    a, b = np.asarray(a), np.asarray(b)
    limit = atol + rtol * np.maximum(np.abs(a), np.abs(b))
    return bool(np.all(np.abs(a - b) < limit))
