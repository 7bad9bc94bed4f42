from typing import NamedTuple


# ======================================================================

class SolveResult(NamedTuple):
    """
    Convergence information returned alongside the solution when a
    solver is called with ``full_output=True``.

    Attributes
    ----------
    converged : bool
        `True` if the stopping criterion was met.
    iterations : int
        Number of iterations (passes of the main loop) completed.
    fevals : int
        Number of calls made to the user function.
    flag : int
        - 0: Converged.
        - 1: Reached iteration limit.
    method : str
        Name of the solver that produced the result.
    """
    converged: bool
    iterations: int
    fevals: int
    flag: int
    method: str


CONVERGED = 0
MAXITER = 1
