"""
=================================
Numeric (:mod:`findroot.numeric`)
=================================

.. currentmodule:: findroot.numeric

Core numeric functions used throughout FindRoot.

.. autosummary::
    :toctree:

    check_sclarray
    return_sclarray
    within_tol

"""
from .math_ext import check_sclarray, return_sclarray, within_tol
