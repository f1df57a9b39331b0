# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define the center of gravity descriptor.
"""

import warnings

import numpy as np
from astropy.utils.exceptions import AstropyUserWarning

from momentutils.moments.core import MomentBase
from momentutils.utils._repr import make_repr
from momentutils.utils.exceptions import MomentNotReadyError

__all__ = ['MomentGravityCenter']


class MomentGravityCenter(MomentBase):
    """
    Descriptor for the center of gravity ``(x_g, y_g)`` of an object.

    The center of gravity is computed from the raw moments:

    .. math::

        x_g = \\frac{m_{10}}{m_{00}}, \\quad y_g = \\frac{m_{01}}{m_{00}}

    Parameters
    ----------
    moment_object : `~momentutils.moments.MomentObject` or `~momentutils.moments.MomentBasic`
        The source of the raw moments. It must be defined up to at
        least order 1.
    """

    def __init__(self, moment_object=None):
        self.moment_object = moment_object
        self._values = None

    def __repr__(self):
        return make_repr(self, ('is_computed',))

    def __str__(self):
        if not self.is_computed:
            return f'{self.name} (not computed)'
        return f'{self.name}\nxg = {self.xg:.6g}\nyg = {self.yg:.6g}'

    @property
    def is_computed(self):
        return self._values is not None

    def compute(self):
        """
        Compute the center of gravity.

        If the total mass ``m_00`` is zero, a warning is issued and the
        center is set to ``(nan, nan)``.
        """
        source = self.moment_object
        if source is None:
            msg = 'MomentGravityCenter is not linked to a moment object'
            raise MomentNotReadyError(msg)
        if not source.is_computed:
            msg = 'the moment source of MomentGravityCenter is not computed'
            raise MomentNotReadyError(msg)
        if source.order < 1:
            msg = ('the center of gravity requires moments up to at least '
                   'order 1')
            raise MomentNotReadyError(msg)

        m00 = source.get(0, 0)
        if m00 == 0:
            warnings.warn('The total mass m00 is zero; the center of '
                          'gravity is undefined.', AstropyUserWarning)
            self._values = np.array((np.nan, np.nan))
            return

        self._values = np.array((source.get(1, 0) / m00,
                                 source.get(0, 1) / m00))

    def get(self):
        """
        Return the center of gravity.

        Returns
        -------
        result : 1D `~numpy.ndarray`
            Read-only ``(x_g, y_g)`` array.
        """
        if not self.is_computed:
            msg = 'MomentGravityCenter has not been computed'
            raise MomentNotReadyError(msg)
        return self._readonly(self._values)

    @property
    def xg(self):
        """
        The ``x`` coordinate of the center of gravity.
        """
        return float(self.get()[0])

    @property
    def yg(self):
        """
        The ``y`` coordinate of the center of gravity.
        """
        return float(self.get()[1])
