"""
.. This module acts as the top-level API documentation.

.. module: findroot

Iterative root-finding and fixed-point solvers for black-box functions.

.. autosummary::
    :toctree: generated/

    numeric
    solve
    util

"""

__version__ = "0.1.0"

from findroot.solve import (Brent, Broyden, NewtonRaphson, Sand, Steffensen,
                            Wegstein, Jacobian, FullJacobian, BandedJacobian,
                            SolveResult, SolverError, NotConvergedError)
