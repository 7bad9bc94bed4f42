from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy.typing as npt

from findroot.numeric.math_ext import within_tol
from findroot.solve.base import IterativeSolver
from findroot.solve.result import SolveResult
from findroot.util.print_styles import arr2str


# ======================================================================

class Wegstein(IterativeSolver):
    r"""
    Solve the self-consistent equation :math:`x = f(x)` using
    Wegstein's method.  The slope of `f` is estimated elementwise from
    the last two points, :math:`s = (y - y_p) / (x - x_p)` with
    :math:`y = f(x)`, and the plain fixed-point step is relaxed by the
    factor :math:`t = 1 / (1 - s)`:

    .. math:: x' = t y + (1 - t) x

    Parameters
    ----------
    func : Callable[[ndarray], array_like]
        Function returning `f(x)` with the same shape as `x`.
    maxiter : int, default = 500
        Maximum number of iterations.
    display_level : int, default = 0
        See `IterativeSolver`.

    Examples
    --------
    >>> x = Wegstein(lambda x: x ** 2 + x - 2).solve(2.0, 0.0, 1e-15)
    >>> round(x, 12)
    1.414213562373
    """
    method = "Wegstein's Method"

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
        Iterate from `x0` until a fixed-point step `x' = f(x)`
        satisfies ``|x' - x| < atol + rtol * max(|x'|, |x|)`` for every
        component, returning the point that was passed to `f`.

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

        # First step is a plain fixed-point step.
        y_prev = self._eval(self._func, x_prev)
        fevals = 1
        if within_tol(y_prev, x_prev, atol, rtol):
            return self._finish(x_prev, converged=True, iterations=0,
                                fevals=fevals, **finish)
        x = y_prev

        for it in range(self._maxiter):
            self._print_it(f"Iteration {it + 1}: x = {arr2str(x)}")

            y = self._eval(self._func, x)
            fevals += 1
            if within_tol(y, x, atol, rtol):
                return self._finish(x, converged=True, iterations=it,
                                    fevals=fevals, **finish)

            t = (x - x_prev) / ((x - y) - (x_prev - y_prev))
            x_prev, y_prev = x, y
            x = t * (y_prev - x_prev) + x_prev

        return self._finish(x, converged=False, iterations=self._maxiter,
                            fevals=fevals, **finish)

    # -- Protected Methods ---------------------------------------------

    def _config(self) -> dict[str, Any]:
        return {'func': self._func} | super()._config()
