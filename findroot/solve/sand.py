from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt

from findroot.solve.base import IterativeSolver
from findroot.solve.jacobian import Jacobian
from findroot.solve.result import SolveResult
from findroot.util.print_styles import arr2str


# ======================================================================

class Sand(IterativeSolver):
    r"""
    Solve a system of nonlinear equations :math:`f(x) = 0` by treating
    the Newton correction as a flow and integrating it with a classical
    4-stage Runge-Kutta step.  At each iteration with residual
    :math:`r = f(x)`:

    .. math::

        k_1 &= J(x)^{-1} r \\
        k_2 &= J(x - k_1 / 2)^{-1} r \\
        k_3 &= J(x - k_2 / 2)^{-1} r \\
        k_4 &= J(x - k_3)^{-1} r \\
        x' &= x - (k_1 + 2 k_2 + 2 k_3 + k_4) / 6

    Parameters
    ----------
    func : Callable[[ndarray], array_like]
        Residual function returning `f(x)` with the same shape as `x`.
    jac : Callable[[ndarray], Jacobian]
        Returns the Jacobian at `x` as a `Jacobian` object (e.g.
        `FullJacobian` or `BandedJacobian`).  Called four times per
        iteration.
    maxiter : int, default = 500
        Maximum number of iterations.
    display_level : int, default = 0
        See `IterativeSolver`.

    Examples
    --------
    >>> from findroot.solve.jacobian import FullJacobian
    >>> sand = Sand(lambda x: x ** 2 - 2,
    ...             lambda x: FullJacobian([[2 * x[0]]]))
    >>> round(sand.solve(2.0, tol=1e-15), 12)
    1.414213562373
    """
    method = "SAND Method"

    def __init__(self, func: Callable[[npt.NDArray[float]], npt.ArrayLike],
                 jac: Callable[[npt.NDArray[float]], Jacobian], *,
                 maxiter: int = 500, display_level: int = 0):
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
            without converging.  Otherwise the last iterate is returned.

        Returns
        -------
        x : ndarray or float
            The converged point, or the last iterate.
        result : SolveResult
            Only if ``full_output=True``.

        Raises
        ------
        TypeError
            If `jac` does not return a `Jacobian`.
        NotImplementedError
            If `jac` returns a Jacobian layout that cannot yet be
            solved (see `BandedJacobian`).
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

            k1 = self._correction(x, fx)
            k2 = self._correction(x - 0.5 * k1, fx)
            k3 = self._correction(x - 0.5 * k2, fx)
            k4 = self._correction(x - k3, fx)
            x = x - (k1 + 2 * (k2 + k3) + k4) / 6

        else:
            it = self._maxiter

        return self._finish(x, single, converged=converged, iterations=it,
                            fevals=fevals, full_output=full_output,
                            disp=disp)

    # -- Protected Methods ---------------------------------------------

    def _config(self) -> dict[str, Any]:
        return {'func': self._func, 'jac': self._jac} | super()._config()

    def _correction(self, x: npt.NDArray[float],
                    fx: npt.NDArray[float]) -> npt.NDArray[float]:
        # Solve the Jacobian at `x` against the residual `fx`.
        jac = self._jac(x)
        if not isinstance(jac, Jacobian):
            raise TypeError(f"jac(x) must return a Jacobian, got "
                            f"{type(jac).__name__}.")
        return np.asarray(jac.solve_jacobian(fx), dtype=float)
