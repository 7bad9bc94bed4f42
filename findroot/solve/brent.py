"""
Brent's method for a root of a scalar function bracketed by a sign
change, following the classic ``zeroin`` algorithm of Forsythe, Malcolm
and Moler [1]_.

References
----------
.. [1] G. E. Forsythe, M. A. Malcolm and C. B. Moler, "Computer Methods
   for Mathematical Computations", Prentice-Hall, 1977.
"""
from __future__ import annotations

import math
import sys
from collections.abc import Callable
from typing import Any

from findroot.solve.base import IterativeSolver
from findroot.solve.exception import NotConvergedError
from findroot.solve.result import SolveResult, CONVERGED
from findroot.util.print_styles import val2str

_EPS = sys.float_info.epsilon


# ======================================================================

class Brent(IterativeSolver):
    """
    Find a root of a continuous scalar function :math:`f(x) = 0` that
    changes sign over a given interval, using Brent's method.  Each step
    chooses between inverse quadratic interpolation, the secant method
    and bisection, so convergence is never slower than bisection.

    Parameters
    ----------
    maxiter : int, default = 100
        Maximum number of new function evaluations after the two
        endpoint evaluations.
    tol : float, default = 1e-8
        Absolute tolerance on the root.  The bracket is closed when its
        half-width is within ``2 * eps * |b| + tol / 2``.
    display_level : int, default = 0
        See `IterativeSolver`.

    Examples
    --------
    >>> root = Brent().solve(lambda x: x ** 2 - 2, 0.0, 2.0)
    >>> round(root, 6)
    1.414214
    """
    method = "Brent's Method"

    def __init__(self, *, maxiter: int = 100, tol: float = 1e-8,
                 display_level: int = 0):
        super().__init__(maxiter=maxiter, display_level=display_level)
        if not tol > 0:
            raise ValueError("tol too small (%g <= 0)" % tol)
        self._tol = float(tol)

    # -- Public Methods ------------------------------------------------

    def solve(self, func: Callable[[float], float], lower_bound: float,
              upper_bound: float, *, full_output: bool = False
              ) -> float | tuple[float, SolveResult]:
        """
        Find the root of `func` between `lower_bound` and
        `upper_bound`.

        Parameters
        ----------
        func : Callable[[float], float]
            Continuous scalar function.
        lower_bound, upper_bound : float
            Ends of the bracketing interval.  ``func(lower_bound)`` and
            ``func(upper_bound)`` must have opposite signs, or one of
            them must be exactly zero.
        full_output : bool, default = False
            If `True`, also return a `SolveResult`.

        Returns
        -------
        root : float
            Final estimate `b`.
        result : SolveResult
            Only if ``full_output=True``.

        Raises
        ------
        ValueError
            If the function does not change sign over the interval.
            Only the two endpoint evaluations are made in this case.
        NotConvergedError
            If `maxiter` function evaluations are exceeded before the
            bracket closes.  Attributes `a` and `b` hold the last two
            values of `x`.
        """
        a, b = float(lower_bound), float(upper_bound)
        fa, fb = func(a), func(b)
        fevals = 2
        if fa * fb > 0:
            raise ValueError("f(lower_bound) and f(upper_bound) must have "
                             "opposite signs.")

        self._print(f"{self.method}:")
        its = 0

        # Start a new bracket [b, c] with c on the opposite side of the
        # root to b.
        c, fc = a, fa
        d = e = b - a

        while True:
            # Keep b as the best estimate so far.
            if abs(fc) < abs(fb):
                a, b, c = b, c, b
                fa, fb, fc = fb, fc, fb

            tol1 = 2.0 * _EPS * abs(b) + 0.5 * self._tol
            xm = 0.5 * (c - b)

            if its > self._maxiter:
                self._print("-> Reached iteration limit.")
                raise NotConvergedError(a, b, fa=fa, fb=fb, iterations=its,
                                        fevals=fevals)

            if abs(xm) <= tol1 or fb == 0.0:
                self._print("-> Converged.")
                if full_output:
                    return b, SolveResult(converged=True, iterations=its,
                                          fevals=fevals, flag=CONVERGED,
                                          method=self.method)
                return b

            if abs(e) >= tol1 and abs(fa) > abs(fb):
                # Attempt interpolation.
                s = fb / fa
                if a == c:
                    # Linear (secant).
                    p = 2.0 * xm * s
                    q = 1.0 - s
                else:
                    # Inverse quadratic.
                    q = fa / fc
                    r = fb / fc
                    p = s * (2.0 * xm * q * (q - r) - (b - a) * (r - 1.0))
                    q = (q - 1.0) * (r - 1.0) * (s - 1.0)

                if p > 0.0:
                    q = -q
                else:
                    p = -p

                # Accept interpolation only if it falls well within the
                # bracket and is shrinking faster than bisection.
                s, e = e, d
                if (2.0 * p < 3.0 * xm * q - abs(tol1 * q) and
                        p < abs(0.5 * s * q)):
                    d = p / q
                else:
                    d = e = xm

            else:
                # Bisection.
                d = e = xm

            # Take the step, always moving at least tol1.
            a, fa = b, fb
            if abs(d) > tol1:
                b += d
            elif xm > 0.0:
                b += tol1
            else:
                b -= tol1

            fb = func(b)
            its += 1
            fevals += 1

            self._print_it(f"Iteration {its}: x = {val2str(b, dp=12)}, "
                           f"f(x) = {fb:+.5E}")

            if fb * math.copysign(1.0, fc) > 0.0:
                # Root is now between a and b, so restart the bracket.
                c, fc = a, fa
                d = e = b - a

    def with_tol(self, tol: float) -> Brent:
        """
        Returns a copy of this solver with the tolerance changed to
        `tol`.  The original solver is unchanged.
        """
        return self._replace(tol=tol)

    @property
    def tol(self) -> float:
        return self._tol

    # -- Protected Methods ---------------------------------------------

    def _config(self) -> dict[str, Any]:
        return super()._config() | {'tol': self._tol}
