from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy.typing as npt

from findroot.numeric.math_ext import within_tol
from findroot.solve.base import IterativeSolver
from findroot.solve.result import SolveResult
from findroot.util.print_styles import arr2str


# ======================================================================

class Steffensen(IterativeSolver):
    r"""
    Solve the self-consistent equation :math:`x = f(x)` using
    Steffensen's method.  Two plain fixed-point steps :math:`y = f(x)`,
    :math:`z = f(y)` are extrapolated elementwise with Aitken's
    :math:`\Delta^2` process:

    .. math:: x' = x - \frac{(y - x)^2}{z - 2y + x}

    .. note:: The denominator is not guarded.  If the fixed-point steps
       stop changing before the tolerance is met the result may become
       `inf` or `NaN`, which is returned as-is.

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
    >>> x = Steffensen(lambda x: x ** 2 + x - 2).solve(2.0, 0.0, 1e-15)
    >>> round(x, 12)
    1.414213562373
    """
    method = "Steffensen's Method"

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
        component.  Convergence is checked after each application of
        `f` and the point that was passed to `f` is returned.

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
        x, single, (atol, rtol) = self._prepare(x0, atol, rtol)
        finish = dict(single=single, full_output=full_output, disp=disp)
        fevals = 0

        self._print(f"{self.method} - Solving {x.size} Equations:")

        for it in range(self._maxiter):
            self._print_it(f"Iteration {it + 1}: x = {arr2str(x)}")

            y = self._eval(self._func, x)
            fevals += 1
            if within_tol(y, x, atol, rtol):
                return self._finish(x, converged=True, iterations=it,
                                    fevals=fevals, **finish)

            z = self._eval(self._func, y)
            fevals += 1
            if within_tol(z, y, atol, rtol):
                return self._finish(y, converged=True, iterations=it,
                                    fevals=fevals, **finish)

            x = x - (y - x) ** 2 / (z - 2 * y + x)

        return self._finish(x, converged=False, iterations=self._maxiter,
                            fevals=fevals, **finish)

    # -- Protected Methods ---------------------------------------------

    def _config(self) -> dict[str, Any]:
        return {'func': self._func} | super()._config()
