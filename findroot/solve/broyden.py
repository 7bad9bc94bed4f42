from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt

from findroot.numeric.math_ext import within_tol
from findroot.solve.base import IterativeSolver
from findroot.solve.result import SolveResult
from findroot.util.print_styles import arr2str


# ======================================================================

class Broyden(IterativeSolver):
    r"""
    Solve the self-consistent system :math:`x = f(x)` using Broyden's
    ("good") quasi-Newton method.  No Jacobian is required; an estimate
    of the inverse Jacobian :math:`H` of the residual
    :math:`g(x) = x - f(x)` is built up by rank-1 updates:

    .. math::

        H' = H + \frac{(\Delta x - H \Delta g) \Delta g^T}
                      {\Delta g^T \Delta g}

    and the next point is :math:`x' = x + H (f(x) - x)`.

    Notes
    -----
    - The initial :math:`H` is diagonal, with each element estimated
      from the secant slope of two plain fixed-point steps
      :math:`x_1 = f(x_0)`, :math:`x_2 = f(x_1)` taken on each
      component independently.
    - Storage and work are O(N²) per iteration.

    Parameters
    ----------
    func : Callable[[ndarray], array_like]
        Function returning `f(x)` with the same shape as `x`.
    maxiter : int, default = 500
        Maximum number of iterations (including the initial step).
    display_level : int, default = 0
        See `IterativeSolver`.

    Examples
    --------
    >>> x = Broyden(lambda x: x ** 2 + x - 2).solve(2.0, 0.0, 1e-15)
    >>> round(x, 12)
    1.414213562373
    """
    method = "Broyden's Method"

    def __init__(self, func: Callable[[npt.NDArray[float]], npt.ArrayLike],
                 *, maxiter: int = 500, display_level: int = 0):
        super().__init__(maxiter=maxiter, display_level=display_level)
        self._func = func

    # -- Public Methods ------------------------------------------------

    def solve(self, x0: npt.ArrayLike, atol: npt.ArrayLike,
              rtol: npt.ArrayLike, *, full_output: bool = False,
              disp: bool = False
              ) -> npt.NDArray[float] | float | tuple[
                  npt.NDArray[float] | float, SolveResult]:
        """
        Iterate from `x0` until successive points `x'`, `x` satisfy
        ``|x' - x| < atol + rtol * max(|x'|, |x|)`` for every component.

        Parameters
        ----------
        x0 : array_like or float
            Starting point.  If given as a scalar the result is also a
            scalar.
        atol, rtol : array_like or float
            Absolute and relative tolerances, broadcastable to `x0`.
        full_output : bool, default = False
            If `True`, also return a `SolveResult`.
        disp : bool, default = False
            If `True`, raise `SolverError` when `maxiter` is reached
            without converging.  Otherwise the last iterate is returned.

        Returns
        -------
        x : ndarray or float
            The converged point, or the last iterate.
        result : SolveResult
            Only if ``full_output=True``.
        """
        x_prev, single, (atol, rtol) = self._prepare(x0, atol, rtol)
        finish = dict(single=single, full_output=full_output, disp=disp)

        self._print(f"{self.method} - Solving {x_prev.size} Equations:")

        # Two plain fixed-point steps give the initial diagonal inverse
        # Jacobian.  Stop early if these have already converged.
        y_prev = self._eval(self._func, x_prev)
        if within_tol(y_prev, x_prev, atol, rtol):
            return self._finish(x_prev, converged=True, iterations=0,
                                fevals=1, **finish)

        x = y_prev
        y = self._eval(self._func, x)
        fevals = 2
        if within_tol(y, x, atol, rtol):
            return self._finish(x, converged=True, iterations=0,
                                fevals=fevals, **finish)

        h = np.diag((x - x_prev) / (2 * x - x_prev - y))
        x_prev, y_prev = x, y
        x = h @ (y_prev - x_prev) + x_prev

        self._print_it(f"Iteration 1: x = {arr2str(x)}")

        for it in range(1, self._maxiter):
            y = self._eval(self._func, x)
            fevals += 1

            dx = x - x_prev
            dg = (x - y) - (x_prev - y_prev)
            h += np.outer(dx - h @ dg, dg) / (dg @ dg)

            x_prev, y_prev = x, y
            x = h @ (y_prev - x_prev) + x_prev

            self._print_it(f"Iteration {it + 1}: x = {arr2str(x)}")

            if within_tol(x, x_prev, atol, rtol):
                return self._finish(x, converged=True, iterations=it + 1,
                                    fevals=fevals, **finish)

        return self._finish(x, converged=False, iterations=self._maxiter,
                            fevals=fevals, **finish)

    # -- Protected Methods ---------------------------------------------

    def _config(self) -> dict[str, Any]:
        return {'func': self._func} | super()._config()
