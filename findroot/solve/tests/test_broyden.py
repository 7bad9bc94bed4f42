from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose

from .tst_functions import g_sqrt2, g_tan, g_lin, X_LIN, SQRT2


# ======================================================================

class TestBroyden(TestCase):
    def test_broyden_scalar(self):
        from findroot.solve import Broyden

        x = Broyden(g_sqrt2).solve(2.0, 0.0, 1e-15)
        self.assertIsInstance(x, float)
        assert_allclose(x, SQRT2, rtol=1e-14)

    def test_broyden_coupled(self):
        from findroot.solve import Broyden

        x, res = Broyden(g_tan).solve([4.0, 8.0], [0.0, 0.0],
                                      [1e-15, 1e-15], full_output=True)
        self.assertTrue(res.converged)
        assert_allclose(x[0], np.tan(x[0] + x[1]), rtol=1e-15)
        assert_allclose(x[1], np.tan(x[0] - x[1]), rtol=1e-15)

    def test_broyden_linear(self):
        from findroot.solve import Broyden

        x = Broyden(g_lin).solve([0.0, 0.0], 0.0, 1e-13)
        assert_allclose(x, X_LIN, rtol=1e-10)

    def test_broyden_restart(self):
        from findroot.solve import Broyden

        # Restarting from a converged point returns it without a
        # degenerate initial Jacobian estimate.
        broyden = Broyden(g_lin)
        x = broyden.solve([0.0, 0.0], 0.0, 1e-13)
        x2, res = broyden.solve(x, 1e-12, 1e-12, full_output=True)
        assert_allclose(x2, x, rtol=1e-12)
        self.assertTrue(res.converged)
        self.assertEqual(res.iterations, 0)
        self.assertTrue(np.all(np.isfinite(x2)))

    def test_broyden_not_converged(self):
        from findroot.solve import Broyden, SolverError

        broyden = Broyden(g_sqrt2, maxiter=2)
        x, res = broyden.solve(2.0, 0.0, 1e-15, full_output=True)
        self.assertFalse(res.converged)
        self.assertEqual(res.flag, 1)
        self.assertEqual(res.fevals, 3)

        with self.assertRaises(SolverError) as cm:
            broyden.solve(2.0, 0.0, 1e-15, disp=True)
        self.assertEqual(cm.exception.flag, 1)

    def test_broyden_bad_tol(self):
        from findroot.solve import Broyden

        with self.assertRaises(ValueError):
            Broyden(g_lin).solve([0.0, 0.0], [0.0, 0.0, 0.0], 1e-12)
