"""
================================
Utilities (:mod:`findroot.util`)
================================

.. currentmodule:: findroot.util

Support used by the solvers that is not numerical in nature.

Display
-------

.. autosummary::
    :toctree:

    FormatStyle
    PrintStyles
    PrintStylesMixin
    AddTabStyle
    AddDotStyle
    arr2str
    val2str

"""

from .print_styles import (FormatStyle, PrintStyles, PrintStylesMixin,
                           AddTabStyle, AddDotStyle, arr2str, val2str)
