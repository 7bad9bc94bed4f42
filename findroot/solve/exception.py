

# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a solver fails to converge or find a
    solution.  Additional information (optional) is included to allow
    the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result. `flag` != 0 as ``flag == 0`` is reserved for a
            successful solution (see `SolveResult`).
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class NotConvergedError(SolverError):
    """
    Raised by bracketing solvers when the iteration limit is reached
    before the bracket closes.  The last two bracket points `a` and `b`
    are kept as attributes so that the caller can decide whether the
    nearby answer is acceptable.
    """

    def __init__(self, a: float, b: float, **kwargs):
        kwargs.setdefault('flag', 1)
        kwargs.setdefault('details', "Reached maxiter.")
        super().__init__(f"The algorithm did not converge. The last two "
                         f"values of x are {a} and {b}.", a=a, b=b,
                         **kwargs)
