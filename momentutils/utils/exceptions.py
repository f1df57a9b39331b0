# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
This module provides custom exceptions and warnings.
"""

from astropy.utils.exceptions import AstropyUserWarning

__all__ = ['MomentError', 'MomentNotReadyError', 'MomentOrderError',
           'DegenerateNormalizationError', 'MomentOverflowError',
           'MomentNormalizationWarning']


class MomentError(Exception):
    """
    Base class for moment descriptor errors.
    """


class MomentNotReadyError(MomentError, RuntimeError):
    """
    Raised when a moment descriptor, or one of the descriptors it
    depends on, is missing or has not been computed.
    """


class MomentOrderError(MomentError, IndexError):
    """
    Raised when a moment index ``(i, j)`` falls outside the triangle
    ``i + j <= order``.
    """


class DegenerateNormalizationError(MomentError, ArithmeticError):
    """
    Raised when a scale normalization reference is zero, negative, or
    non-finite, or when the normalization produces non-finite values.
    """


class MomentOverflowError(MomentError, OverflowError):
    """
    Raised when centered moments overflow the floating-point range.
    """


class MomentNormalizationWarning(AstropyUserWarning):
    """
    A warning class to indicate a normalization was applied to moments
    that were already normalized.
    """
