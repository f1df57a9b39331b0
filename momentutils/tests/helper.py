# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define test helpers that build raw moments of simple objects.
"""

import numpy as np


def discrete_moments(points, order):
    """
    Raw moments of a set of ``(x, y)`` points as a 2D ``[j, i]`` array.
    """
    points = np.atleast_2d(np.asarray(points, dtype=float))
    powers = np.arange(order + 1)
    xpowers = points[:, 0][:, np.newaxis] ** powers
    ypowers = points[:, 1][:, np.newaxis] ** powers
    moments = np.dot(np.transpose(ypowers), xpowers)
    moments[np.add.outer(powers, powers) > order] = 0.0
    return moments


def rectangle_moments(xmin, ymin, xmax, ymax, order):
    """
    Raw moments of a dense, uniform, axis-aligned rectangle as a 2D
    ``[j, i]`` array.
    """
    powers = np.arange(order + 1) + 1
    xint = (xmax**powers - xmin**powers) / powers
    yint = (ymax**powers - ymin**powers) / powers
    moments = np.outer(yint, xint)
    moments[np.add.outer(powers, powers) - 2 > order] = 0.0
    return moments
