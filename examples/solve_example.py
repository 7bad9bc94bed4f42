#!usr/bin/env python3

# Examples of finding roots of single equations and systems of
# equations.

import numpy as np

from findroot.solve import (Brent, NewtonRaphson, Sand, FullJacobian,
                            BandedJacobian, Broyden, Steffensen, Wegstein)


def std_problem_1(x):
    """Standard start point x0 = (0.87, 0.87, ...)"""
    return np.cos(x) - 1


def circle_line(x):
    """Intersection of x0² + x1² = 4 and x0 = x1."""
    return np.array([x[0] ** 2 + x[1] ** 2 - 4, x[0] - x[1]])


def circle_line_jac(x, fx=None):
    return np.array([[2 * x[0], 2 * x[1]],
                     [1.0, -1.0]])


# Scalar root by bracketing.
print("\nBrent: x = ", Brent(tol=1e-12, display_level=2).solve(
    lambda x: x ** 3 - 2 * x - 5, 2.0, 3.0))

# Systems with a Jacobian.
x = NewtonRaphson(circle_line, circle_line_jac, display_level=2).solve(
    [1.0, 2.0], tol=1e-12)
print("\nNewton-Raphson: x = ", x)

x, res = Sand(circle_line, lambda x_: FullJacobian(circle_line_jac(x_)),
              display_level=1).solve([1.0, 2.0], tol=1e-12,
                                     full_output=True)
print(f"\nSAND: x = {x}, {res}")

# A decoupled system only needs a diagonal (banded) Jacobian.
ndim = 50
x = Sand(std_problem_1, lambda x_: BandedJacobian(0, 0, [-np.sin(x_)]),
         maxiter=100).solve([0.87] * ndim, tol=1e-10)
print(f"\nSAND ({ndim} equations): max |x| = {np.max(np.abs(x)):.3E}")

# Fixed point problems x = f(x).
for solver in (Broyden, Steffensen, Wegstein):
    x = solver(np.cos, display_level=1).solve(0.5, 0.0, 1e-12)
    print(f"\n{solver.__name__}: x = {x}")
