"""
===============================
Solvers (:mod:`findroot.solve`)
===============================

.. currentmodule:: findroot.solve

Iterative solvers for finding a root :math:`f(x) = 0` or a fixed point
:math:`x = f(x)` of a user supplied function.

Each solver is constructed once with its function and options, then
`solve` may be called any number of times with different starting
values.

Root Finding
------------

.. autosummary::
    :toctree:

    Brent
    NewtonRaphson
    Sand

Fixed Points
------------

.. autosummary::
    :toctree:

    Broyden
    Steffensen
    Wegstein

Jacobians
---------

.. autosummary::
    :toctree:

    Jacobian
    FullJacobian
    BandedJacobian

Results / Exceptions
--------------------

.. autosummary::
    :toctree:

    SolveResult
    SolverError
    NotConvergedError

"""

from .exception import SolverError, NotConvergedError
from .result import SolveResult
from .jacobian import Jacobian, FullJacobian, BandedJacobian
from .base import IterativeSolver
from .brent import Brent
from .broyden import Broyden
from .newton import NewtonRaphson
from .sand import Sand
from .steffensen import Steffensen
from .wegstein import Wegstein
