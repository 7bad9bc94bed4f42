from unittest import TestCase

import numpy as np
from numpy.testing import assert_array_equal


# ======================================================================

class TestSclArray(TestCase):
    def test_check_sclarray(self):
        from findroot.numeric import check_sclarray

        x, single = check_sclarray(2)
        self.assertTrue(single)
        self.assertEqual(x.shape, (1,))
        self.assertEqual(x.dtype, float)

        x, single = check_sclarray([2.0])
        self.assertFalse(single)
        assert_array_equal(x, [2.0])

        with self.assertRaises(ValueError):
            check_sclarray([[1.0, 2.0], [3.0, 4.0]])

    def test_check_sclarray_copy(self):
        from findroot.numeric import check_sclarray

        x0 = np.array([1.0, 2.0])
        x, _ = check_sclarray(x0)
        x[0] = 5.0
        self.assertEqual(x0[0], 1.0)

    def test_return_sclarray(self):
        from findroot.numeric import return_sclarray

        x = np.array([3.0])
        self.assertEqual(return_sclarray(x, True), 3.0)
        self.assertIsInstance(return_sclarray(x, True), float)
        self.assertIs(return_sclarray(x, False), x)

        with self.assertRaises(ValueError):
            return_sclarray(np.array([1.0, 2.0]), True)


# ----------------------------------------------------------------------

class TestWithinTol(TestCase):
    def test_within_tol(self):
        from findroot.numeric import within_tol

        # Absolute and relative parts.
        self.assertTrue(within_tol(1.0, 1.05, 0.1, 0.0))
        self.assertFalse(within_tol(1.0, 1.2, 0.1, 0.0))
        self.assertTrue(within_tol(100.0, 100.5, 0.0, 0.01))
        self.assertFalse(within_tol(1.0, 1.5, 0.0, 0.01))

        # Strict inequality.
        self.assertFalse(within_tol(1.0, 1.0, 0.0, 0.0))

        # Every component must pass.
        self.assertFalse(within_tol([1.0, 2.0], [1.0, 3.0], 0.1, 0.0))
        self.assertTrue(within_tol([1.0, 2.0], [1.0, 3.0], [0.1, 2.0],
                                   0.0))

    def test_within_tol_nan(self):
        from findroot.numeric import within_tol

        self.assertFalse(within_tol([1.0, np.nan], [1.0, 2.0], 1.0, 1.0))
