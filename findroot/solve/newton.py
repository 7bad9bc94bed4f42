from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt
import scipy.linalg

from findroot.solve.base import IterativeSolver
from findroot.solve.result import SolveResult
from findroot.util.print_styles import arr2str


# ======================================================================

class NewtonRaphson(IterativeSolver):
    r"""
    Solve a system of nonlinear equations :math:`f(x) = 0` using the
    Newton-Raphson method with a user supplied Jacobian.  Each iteration
    solves the linear system :math:`J \delta = f(x)` and takes the full
    step :math:`x' = x - \delta`.  There is no damping, line search or
    fallback.

    Parameters
    ----------
    func : Callable[[ndarray], array_like]
        Residual function returning `f(x)` with the same shape as `x`.
    jac : Callable[[ndarray, ndarray], array_like]
        Jacobian function ``jac(x, fx)`` returning the square matrix
        :math:`J_{ij} = \partial f_i / \partial x_j`.  The residual `fx`
        at `x` is passed as well, as it is often useful when forming
        the Jacobian.
    maxiter : int, default = 20
        Maximum number of iterations.
    display_level : int, default = 0
        See `IterativeSolver`.

    Examples
    --------
    >>> def f(x):
    ...     return x ** 2 - 2
    >>> def jac(x, fx):
    ...     return [[2 * x[0]]]
    >>> x = NewtonRaphson(f, jac).solve(2.0, tol=1e-15)
    >>> round(x, 12)
    1.414213562373
    """
    method = "Newton-Raphson Method"

    def __init__(self, func: Callable[[npt.NDArray[float]], npt.ArrayLike],
                 jac: Callable[[npt.NDArray[float], npt.NDArray[float]],
                               npt.ArrayLike], *,
                 maxiter: int = 20, display_level: int = 0):
        super().__init__(maxiter=maxiter, display_level=display_level)
        self._func, self._jac = func, jac

    # -- Public Methods ------------------------------------------------

    def solve(self, x0: npt.ArrayLike, tol: npt.ArrayLike, *,
              full_output: bool = False, disp: bool = False
              ) -> npt.NDArray[float] | float | tuple[
                  npt.NDArray[float] | float, SolveResult]:
        """
        Iterate from `x0` until every component of the residual
        satisfies ``|f(x)| < tol``.

        Parameters
        ----------
        x0 : array_like or float
            Starting point.  If given as a scalar the result is also a
            scalar.
        tol : array_like or float
            Residual tolerance, broadcastable to `x0`.
        full_output : bool, default = False
            If `True`, also return a `SolveResult`.
        disp : bool, default = False
            If `True`, raise `SolverError` when `maxiter` is reached
            without converging.  Otherwise the last iterate is returned
            as-is and the caller should check the residual if a
            guarantee is required.

        Returns
        -------
        x : ndarray or float
            The converged point, or the last iterate.
        result : SolveResult
            Only if ``full_output=True``.

        Raises
        ------
        ValueError
            If the Jacobian is not square, or `func` returns the wrong
            shape.
        numpy.linalg.LinAlgError
            If the Jacobian is singular.
        SolverError
            Only if ``disp=True`` and `maxiter` is reached.
        """
        x, single, (tol,) = self._prepare(x0, tol)
        fevals, converged = 0, False

        self._print(f"{self.method} - Solving {x.size} Equations:")

        for it in range(self._maxiter):
            fx = self._eval(self._func, x)
            fevals += 1

            self._print_it(f"Iteration {it + 1}: "
                           f"||f(x)|| = {np.linalg.norm(fx):.5E}, "
                           f"x = {arr2str(x)}")

            if np.all(np.abs(fx) < tol):
                converged = True
                break

            jac = np.array(self._jac(x, fx), dtype=float, ndmin=2)
            if jac.ndim != 2 or jac.shape[0] != jac.shape[1]:
                raise ValueError(f"Jacobian should be a square matrix, but "
                                 f"found shape {jac.shape}.")

            x = x - scipy.linalg.solve(jac, fx)

        else:
            it = self._maxiter

        return self._finish(x, single, converged=converged, iterations=it,
                            fevals=fevals, full_output=full_output,
                            disp=disp)

    # -- Protected Methods ---------------------------------------------

    def _config(self) -> dict[str, Any]:
        return {'func': self._func, 'jac': self._jac} | super()._config()
