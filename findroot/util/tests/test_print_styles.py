import io
from contextlib import redirect_stdout
from unittest import TestCase


# ======================================================================

class TestPrintStyles(TestCase):
    def test_print_levels(self):
        from findroot.util import PrintStyles, AddTabStyle, AddDotStyle

        fmt = PrintStyles(display_level=2)
        fmt.add('top', AddTabStyle())
        fmt.add('tab', AddTabStyle(), parent='top')
        fmt.add('dot', AddDotStyle(), parent='tab')

        self.assertEqual(fmt.apply('tab', "x"), "    x")
        self.assertEqual(fmt.apply('dot', "x"), "    ... x")

        buf = io.StringIO()
        with redirect_stdout(buf):
            fmt.print('top', "A")
            fmt.print('tab', "B")
            fmt.print('dot', "C")  # Level 3, hidden.
            fmt.print('dot', "D", display_level=3)
        self.assertEqual(buf.getvalue(), "A\n    B\n    ... D\n")

        fmt.display_level = 0
        buf = io.StringIO()
        with redirect_stdout(buf):
            fmt.print('top', "A")
        self.assertEqual(buf.getvalue(), "")

    def test_styles_errors(self):
        from findroot.util import PrintStyles, AddTabStyle

        fmt = PrintStyles()
        fmt.add('top', AddTabStyle())
        with self.assertRaises(ValueError):
            fmt.add('top', AddTabStyle())
        with self.assertRaises(ValueError):
            fmt.add('child', AddTabStyle(), parent='missing')
        with self.assertRaises(ValueError):
            fmt.apply('missing', "x")

        buf = io.StringIO()
        with redirect_stdout(buf), self.assertWarns(UserWarning):
            fmt.print('missing', "x")
        self.assertEqual(buf.getvalue(), "x\n")


# ----------------------------------------------------------------------

class TestSolverOutput(TestCase):
    def test_silent_by_default(self):
        from findroot.solve import Brent

        buf = io.StringIO()
        with redirect_stdout(buf):
            Brent().solve(lambda x: x ** 2 - 2, 0.0, 2.0)
        self.assertEqual(buf.getvalue(), "")

    def test_display_levels(self):
        from findroot.solve import Brent

        buf = io.StringIO()
        with redirect_stdout(buf):
            Brent(display_level=1).solve(lambda x: x ** 2 - 2, 0.0, 2.0)
        lines = buf.getvalue().splitlines()
        self.assertTrue(lines[0].startswith("Brent's Method"))
        self.assertEqual(lines[-1], "-> Converged.")
        self.assertFalse(any("Iteration" in s for s in lines))

        buf = io.StringIO()
        with redirect_stdout(buf):
            Brent(display_level=2).solve(lambda x: x ** 2 - 2, 0.0, 2.0)
        self.assertIn("\n... Iteration 1:", buf.getvalue())

    def test_iteration_limit_message(self):
        from findroot.solve import Wegstein

        buf = io.StringIO()
        with redirect_stdout(buf):
            Wegstein(lambda x: x ** 2 + x - 2, maxiter=1,
                     display_level=1).solve(2.0, 0.0, 1e-15)
        self.assertEqual(buf.getvalue().splitlines()[-1],
                         "-> Reached iteration limit.")
