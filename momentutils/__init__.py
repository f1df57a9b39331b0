# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Momentutils is a package to compute centered image moments of 2D shapes
and intensity distributions from their raw moments.

It provides moment descriptors for raw moments, the center of gravity
and the centered moments, with scale normalization of the latter.
"""

try:
    from .version import version as __version__
except ImportError:
    __version__ = ''
