# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define the raw moment descriptor.
"""

import numpy as np

from momentutils.moments.core import MomentBase, format_moments
from momentutils.utils._parameters import check_moment_index
from momentutils.utils._repr import make_repr
from momentutils.utils.exceptions import MomentNotReadyError

__all__ = ['MomentBasic']


class MomentBasic(MomentBase):
    """
    Descriptor for the raw moments ``m_ij`` of a
    `~momentutils.moments.MomentObject`.

    Parameters
    ----------
    moment_object : `~momentutils.moments.MomentObject`
        The object holding the raw moments.
    """

    def __init__(self, moment_object=None):
        self.moment_object = moment_object
        self._values = None

    def __repr__(self):
        return make_repr(self, ('order', 'is_computed'))

    def __str__(self):
        if not self.is_computed:
            return f'{self.name} (not computed)'
        return f'{self.name}\n{format_moments(self)}'

    @property
    def order(self):
        """
        The maximal order, inherited from the moment object.
        """
        if self.moment_object is None:
            return None
        return self.moment_object.order

    @property
    def is_computed(self):
        return self._values is not None

    def compute(self):
        """
        Copy the raw moments of the linked moment object.
        """
        if self.moment_object is None:
            msg = 'MomentBasic is not linked to a moment object'
            raise MomentNotReadyError(msg)
        if not self.moment_object.is_computed:
            msg = 'the moment object has no moments'
            raise MomentNotReadyError(msg)

        self._values = np.array(self.moment_object.get(), dtype=float)

    def get(self, i=None, j=None):
        """
        Return a raw moment or all of them.

        Parameters
        ----------
        i, j : int or `None`, optional
            The powers of ``x`` and ``y``. If both are `None`, a
            read-only view of the flat storage is returned.

        Returns
        -------
        result : float or 1D `~numpy.ndarray`
            The raw moment ``m_ij`` or the flat array of all moments.
        """
        if not self.is_computed:
            msg = 'MomentBasic has not been computed'
            raise MomentNotReadyError(msg)

        if i is None and j is None:
            return self._readonly(self._values)
        if i is None or j is None:
            msg = 'i and j must both be given or both be None'
            raise ValueError(msg)

        return float(self._values[check_moment_index(i, j, self.order)])
