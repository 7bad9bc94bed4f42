"""
Jacobian representations used by solvers that need to solve
:math:`J \\Delta x = r` against the current Jacobian `J` and residual
`r`.  Solvers only ever call `solve_jacobian`, so the storage layout is
private to each representation.
"""
from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt
import scipy.linalg


# ======================================================================

class Jacobian(ABC):
    """
    Abstract base class for a Jacobian matrix that can be solved
    against a residual vector.
    """

    @abstractmethod
    def solve_jacobian(self, b: npt.ArrayLike) -> npt.NDArray[float]:
        """
        Returns `x` solving ``J @ x = b``.

        Parameters
        ----------
        b : array_like, shape (n,)
            Right-hand side, typically the current residual.

        Returns
        -------
        ndarray, shape (n,)
        """
        raise NotImplementedError


# ----------------------------------------------------------------------

class FullJacobian(Jacobian):
    """
    Dense square Jacobian matrix.

    Parameters
    ----------
    matrix : array_like, shape (n, n)
        Jacobian matrix.

    Raises
    ------
    ValueError
        If `matrix` is not two dimensional and square.
    """

    def __init__(self, matrix: npt.ArrayLike):
        self._matrix = np.array(matrix, dtype=float, ndmin=2)
        if (self._matrix.ndim != 2 or
                self._matrix.shape[0] != self._matrix.shape[1]):
            raise ValueError(f"Jacobian should be a square matrix, but "
                             f"found shape {self._matrix.shape}.")

    def __repr__(self):
        return f"FullJacobian({self._matrix.tolist()!r})"

    @property
    def matrix(self) -> npt.NDArray[float]:
        return self._matrix

    def solve_jacobian(self, b: npt.ArrayLike) -> npt.NDArray[float]:
        """
        Solve against the dense matrix using `scipy.linalg.solve`.

        Raises
        ------
        numpy.linalg.LinAlgError
            If the matrix is singular.
        """
        b = np.asarray(b, dtype=float)
        if b.shape != (self._matrix.shape[0],):
            raise ValueError(f"Expected right-hand side of shape "
                             f"({self._matrix.shape[0]},), got {b.shape}.")

        return scipy.linalg.solve(self._matrix, b)


# ----------------------------------------------------------------------

class BandedJacobian(Jacobian):
    """
    Banded Jacobian matrix, stored as its diagonals.  Nonzero entries
    lie within `ml` diagonals below and `mu` diagonals above the main
    diagonal.

    Parameters
    ----------
    ml, mu : int
        Lower and upper bandwidth.
    diags : Sequence[array_like]
        The ``ml + mu + 1`` diagonals of the matrix.  With
        ``ml = mu = 0`` this is just ``[main_diagonal]``.

    Raises
    ------
    ValueError
        If `ml` or `mu` are negative, or the number of diagonals given
        is not ``ml + mu + 1``.

    Notes
    -----
    Only the diagonal case ``ml = mu = 0`` can presently be solved.
    Other bandwidths may be constructed but `solve_jacobian` raises
    `NotImplementedError` for them.
    """

    def __init__(self, ml: int, mu: int,
                 diags: Sequence[npt.ArrayLike]):
        ml, mu = operator.index(ml), operator.index(mu)
        if ml < 0 or mu < 0:
            raise ValueError(f"Bandwidths must be non-negative, got "
                             f"ml = {ml}, mu = {mu}.")
        if len(diags) != ml + mu + 1:
            raise ValueError(f"Expected ml + mu + 1 = {ml + mu + 1} "
                             f"diagonals, got {len(diags)}.")

        self._ml, self._mu = ml, mu
        self._diags = [np.array(d, dtype=float, ndmin=1) for d in diags]

    def __repr__(self):
        return (f"BandedJacobian(ml={self._ml}, mu={self._mu}, "
                f"diags={[d.tolist() for d in self._diags]!r})")

    @property
    def diags(self) -> list[npt.NDArray[float]]:
        return self._diags

    @property
    def ml(self) -> int:
        return self._ml

    @property
    def mu(self) -> int:
        return self._mu

    def solve_jacobian(self, b: npt.ArrayLike) -> npt.NDArray[float]:
        """
        Solve against the banded matrix.

        Raises
        ------
        NotImplementedError
            If the matrix has any off-diagonal bands (``ml > 0`` or
            ``mu > 0``).
        """
        b = np.asarray(b, dtype=float)

        if self._ml == 0 and self._mu == 0:
            return b / self._diags[0]

        elif self._ml < 2 and self._mu < 2:
            raise NotImplementedError(
                f"Tridiagonal Jacobian solve is not implemented "
                f"(ml = {self._ml}, mu = {self._mu}).")

        else:
            raise NotImplementedError(
                f"Banded Jacobian solve is not implemented for "
                f"ml = {self._ml}, mu = {self._mu}.")
