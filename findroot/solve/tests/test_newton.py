from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose

from .tst_functions import (f_sqrt2, jac_sqrt2, f_circle_line,
                            jac_circle_line, SQRT2)


# ======================================================================

class TestNewtonRaphson(TestCase):
    def test_newton_scalar(self):
        from findroot.solve import NewtonRaphson

        # Check normal operation.
        newton = NewtonRaphson(f_sqrt2, jac_sqrt2)
        x = newton.solve(2.0, tol=1e-15)
        self.assertIsInstance(x, float)
        assert_allclose(x, SQRT2, rtol=1e-15)

        # Check array input gives array output.
        x = newton.solve([2.0], tol=[1e-15])
        self.assertEqual(x.shape, (1,))
        assert_allclose(x, [SQRT2], rtol=1e-15)

        # Check restarting from the solution returns it at once.
        x2, res = newton.solve(x, tol=1e-15, full_output=True)
        assert_allclose(x2, x, rtol=1e-15)
        self.assertEqual(res.iterations, 0)
        self.assertEqual(res.fevals, 1)

    def test_newton_vector(self):
        from findroot.solve import NewtonRaphson

        x0 = np.array([1.0, 2.0])
        x, res = NewtonRaphson(f_circle_line, jac_circle_line).solve(
            x0, tol=1e-12, full_output=True)
        assert_allclose(x, [SQRT2, SQRT2], rtol=1e-12)
        self.assertTrue(res.converged)
        self.assertEqual(res.method, "Newton-Raphson Method")

        # Starting point is not modified.
        assert_allclose(x0, [1.0, 2.0])

    def test_newton_not_converged(self):
        from findroot.solve import NewtonRaphson, SolverError

        newton = NewtonRaphson(f_sqrt2, jac_sqrt2, maxiter=2)

        # Silently returns the last iterate.
        x = newton.solve(2.0, tol=1e-15)
        self.assertTrue(np.isfinite(x))
        self.assertGreater(abs(x - SQRT2), 1e-10)

        x, res = newton.solve(2.0, tol=1e-15, full_output=True)
        self.assertFalse(res.converged)
        self.assertEqual(res.flag, 1)
        self.assertEqual(res.iterations, 2)

        with self.assertRaises(SolverError):
            newton.solve(2.0, tol=1e-15, disp=True)

    def test_newton_bad_jacobian(self):
        from findroot.solve import NewtonRaphson

        # Non-square Jacobian.
        newton = NewtonRaphson(f_circle_line,
                               lambda x, fx: np.ones((2, 3)))
        with self.assertRaises(ValueError):
            newton.solve([1.0, 2.0], tol=1e-12)

        # Singular Jacobian.
        with self.assertRaises(np.linalg.LinAlgError):
            NewtonRaphson(f_sqrt2, jac_sqrt2).solve(0.0, tol=1e-12)

    def test_newton_bad_function(self):
        from findroot.solve import NewtonRaphson

        newton = NewtonRaphson(lambda x: [1.0, 2.0, 3.0], jac_circle_line)
        with self.assertRaises(ValueError):
            newton.solve([1.0, 2.0], tol=1e-12)

    def test_newton_config(self):
        from findroot.solve import NewtonRaphson

        newton = NewtonRaphson(f_sqrt2, jac_sqrt2)
        self.assertEqual(newton.maxiter, 20)

        newton_5 = newton.with_maxiter(5)
        self.assertEqual(newton_5.maxiter, 5)
        self.assertEqual(newton.maxiter, 20)
        assert_allclose(newton_5.solve(2.0, tol=1e-12), SQRT2, rtol=1e-12)

        with self.assertRaises(ValueError):
            NewtonRaphson(f_sqrt2, jac_sqrt2, maxiter=0)
