from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose

from .tst_functions import g_sqrt2, SQRT2


# ======================================================================

# Scaling by powers of two keeps the components in step, as elementwise
# extrapolation breaks down if one component converges before the others.
C_COS = np.array([1.0, 2.0, 4.0])
X_COS = C_COS * 0.7390851332151607


def g_cos(x):
    return C_COS * np.cos(x / C_COS)


# ----------------------------------------------------------------------

class TestSteffensen(TestCase):
    def test_steffensen(self):
        from findroot.numeric import within_tol
        from findroot.solve import Steffensen

        # Check scalar operation.
        x = Steffensen(g_sqrt2).solve(2.0, 0.0, 1e-15)
        self.assertIsInstance(x, float)
        assert_allclose(x, SQRT2, rtol=1e-14)
        self.assertTrue(within_tol(g_sqrt2(x), x, 0.0, 1e-15))

        # Check vector operation.
        x = Steffensen(g_cos).solve(0.5 * C_COS, 0.0, 1e-14)
        assert_allclose(x, X_COS, rtol=1e-12)

    def test_steffensen_restart(self):
        from findroot.solve import Steffensen

        steffensen = Steffensen(g_sqrt2)
        x = steffensen.solve(2.0, 0.0, 1e-15)
        x2, res = steffensen.solve(x, 0.0, 1e-15, full_output=True)
        self.assertEqual(x2, x)
        self.assertEqual(res.iterations, 0)
        self.assertEqual(res.fevals, 1)

    def test_steffensen_nonfinite(self):
        from findroot.solve import Steffensen

        # No fixed point: the Aitken denominator is exactly zero and the
        # non-finite result is returned as-is.
        with np.errstate(divide='ignore', invalid='ignore'):
            x, res = Steffensen(lambda x_: x_ + 1.0, maxiter=5).solve(
                0.0, 1e-12, 0.0, full_output=True)
        self.assertFalse(np.isfinite(x))
        self.assertFalse(res.converged)

    def test_steffensen_not_converged(self):
        from findroot.solve import Steffensen, SolverError

        with self.assertRaises(SolverError):
            Steffensen(g_sqrt2, maxiter=1).solve(2.0, 0.0, 1e-15,
                                                 disp=True)


# ----------------------------------------------------------------------

class TestWegstein(TestCase):
    def test_wegstein(self):
        from findroot.numeric import within_tol
        from findroot.solve import Wegstein

        # Check scalar operation.
        x = Wegstein(g_sqrt2).solve(2.0, 0.0, 1e-15)
        self.assertIsInstance(x, float)
        assert_allclose(x, SQRT2, rtol=1e-14)
        self.assertTrue(within_tol(g_sqrt2(x), x, 0.0, 1e-15))

        # Check vector operation.
        x = Wegstein(g_cos).solve(0.5 * C_COS, 0.0, 1e-14)
        assert_allclose(x, X_COS, rtol=1e-12)

    def test_wegstein_restart(self):
        from findroot.solve import Wegstein

        wegstein = Wegstein(g_sqrt2)
        x = wegstein.solve(2.0, 0.0, 1e-15)
        x2, res = wegstein.solve(x, 0.0, 1e-15, full_output=True)
        self.assertEqual(x2, x)
        self.assertEqual(res.iterations, 0)
        self.assertEqual(res.fevals, 1)

    def test_wegstein_not_converged(self):
        from findroot.solve import Wegstein, SolverError

        wegstein = Wegstein(g_sqrt2, maxiter=1)
        x, res = wegstein.solve(2.0, 0.0, 1e-15, full_output=True)
        self.assertFalse(res.converged)
        self.assertEqual(res.fevals, 2)

        with self.assertRaises(SolverError):
            wegstein.solve(2.0, 0.0, 1e-15, disp=True)
