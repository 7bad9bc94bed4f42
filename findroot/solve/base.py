from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt

from findroot.numeric.math_ext import check_sclarray, return_sclarray
from findroot.solve.exception import SolverError
from findroot.solve.result import SolveResult, CONVERGED, MAXITER
from findroot.util.print_styles import (PrintStylesMixin, AddTabStyle,
                                        AddDotStyle)


# ======================================================================

class IterativeSolver(PrintStylesMixin):
    """
    Base class for solvers that loop over a user function until a
    stopping criterion is met or `maxiter` is reached.  Holds the
    configuration common to all solvers, which is fixed at
    construction.

    Parameters
    ----------
    maxiter : int
        Maximum number of iterations.  Must be at least 1.
    display_level : int, default = 0
        Amount of progress output printed by `solve`:

        - 0: None.
        - 1: Heading and final status.
        - 2: As above plus one line per iteration.

    Notes
    -----
    Solver instances hold no state between calls to `solve`, so they
    can be reused with different starting values.  Derived classes
    provide `_config()` so that the ``with_...`` methods can build
    reconfigured copies.
    """
    method: str = ''  # Display name, set by derived classes.

    def __init__(self, *, maxiter: int, display_level: int = 0):
        super().__init__(display_level=display_level)

        maxiter = operator.index(maxiter)
        if maxiter < 1:
            raise ValueError("maxiter must be greater than 0")
        self._maxiter = maxiter

        # Setup formatting for printed output.
        self.pstyles.add('solver', AddTabStyle())
        self.pstyles.add('iteration', AddDotStyle(), parent='solver')

    def __repr__(self):
        args = ', '.join(f"{k}={v!r}" for k, v in self._config().items()
                         if not callable(v))
        return f"{type(self).__name__}({args})"

    # -- Public Methods ------------------------------------------------

    @property
    def maxiter(self) -> int:
        return self._maxiter

    def with_maxiter(self, maxiter: int) -> IterativeSolver:
        """
        Returns a copy of this solver with the iteration limit changed
        to `maxiter`.  The original solver is unchanged.
        """
        return self._replace(maxiter=maxiter)

    # -- Protected Methods ---------------------------------------------

    def _config(self) -> dict[str, Any]:
        """
        Returns the keyword arguments required to construct an
        identical solver.  Derived classes extend this with their own
        arguments.
        """
        return {'maxiter': self._maxiter,
                'display_level': self.display_level}

    def _replace(self, **changes) -> IterativeSolver:
        return type(self)(**(self._config() | changes))

    def _print(self, s: str):
        self.pstyles.print('solver', s)

    def _print_it(self, s: str):
        self.pstyles.print('iteration', s)

    @staticmethod
    def _prepare(x0: npt.ArrayLike, *tols: npt.ArrayLike
                 ) -> tuple[npt.NDArray[float], bool,
                            list[npt.NDArray[float]]]:
        """
        Convert the starting point to a fresh 1-D float array and
        broadcast each tolerance to match it.  Also returns whether `x0`
        was given as a scalar.
        """
        x, single = check_sclarray(x0)
        try:
            tols = [np.broadcast_to(np.asarray(tol, dtype=float), x.shape)
                    for tol in tols]
        except ValueError:
            raise ValueError(f"Tolerances must be broadcastable to the "
                             f"shape of x0 {x.shape}.")
        return x, single, tols

    @staticmethod
    def _eval(func: Callable[[npt.NDArray[float]], npt.ArrayLike],
              x: npt.NDArray[float]) -> npt.NDArray[float]:
        """
        Call `func(x)` and return the result as a float array, checking
        that it has the same shape as `x`.
        """
        fx = np.asarray(func(x), dtype=float)
        if fx.shape != x.shape:
            raise ValueError(f"Wrong shape output from f(x): Expected "
                             f"{x.shape} got {fx.shape}.")
        return fx

    def _finish(self, x: npt.NDArray[float], single: bool, *,
                converged: bool, iterations: int, fevals: int,
                full_output: bool, disp: bool):
        """
        Common exit for `solve`.  Reports the final status, raises
        `SolverError` if not converged and ``disp=True``, then returns
        `x` in the same scalar / array form as the starting value
        (along with a `SolveResult` if ``full_output=True``).
        """
        if converged:
            self._print("-> Converged.")
        else:
            self._print("-> Reached iteration limit.")
            if disp:
                raise SolverError(f"{self.method} failed to converge:",
                                  flag=MAXITER,
                                  details=f"Reached maxiter = "
                                          f"{self._maxiter}.",
                                  x=x, iterations=iterations,
                                  fevals=fevals)

        x = return_sclarray(x, single)
        if full_output:
            return x, SolveResult(converged=converged,
                                  iterations=iterations, fevals=fevals,
                                  flag=CONVERGED if converged else MAXITER,
                                  method=self.method)
        return x
