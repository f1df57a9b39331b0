# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define a container for the raw moments of an object.
"""

import numpy as np

from momentutils.utils._parameters import (as_order, check_moment_index,
                                           triangle_mask)
from momentutils.utils._repr import make_repr
from momentutils.utils.exceptions import MomentNotReadyError

__all__ = ['MomentObject']


class MomentObject:
    """
    Container for the raw moments ``m_ij`` of an object up to a maximal
    order.

    The raw moments are provided by the caller (e.g., from a
    segmentation, a contour or a set of image points); this class only
    validates and stores them. ``m_ij`` is stored at index ``j * (order
    + 1) + i`` of a flat array.

    Parameters
    ----------
    order : int
        The maximal total order ``i + j`` of the moments.

    moments : array_like, optional
        The raw moments, either as a 2D ``(order + 1, order + 1)`` array
        where ``moments[j, i]`` is ``m_ij`` (the y power indexes the
        rows), or as a flat array of length ``(order + 1)**2``. Only the
        values with ``i + j <= order`` are used. If `None`, the moments
        must be set later with `update`.
    """

    def __init__(self, order, moments=None):
        self._order = as_order('order', order)
        self._values = None
        if moments is not None:
            self.update(moments)

    def __repr__(self):
        return make_repr(self, ('order', 'is_computed'))

    @property
    def order(self):
        """
        The maximal total order of the moments.
        """
        return self._order

    @property
    def is_computed(self):
        """
        Whether raw moments have been stored.
        """
        return self._values is not None

    def update(self, moments):
        """
        Replace the stored raw moments.

        Parameters
        ----------
        moments : array_like
            The raw moments (see the class docstring for the accepted
            layouts).

        Raises
        ------
        ValueError
            If ``moments`` has the wrong shape or contains non-finite
            values with ``i + j <= order``.
        """
        size = self._order + 1
        moments = np.array(moments, dtype=float)

        if moments.ndim == 2:
            if moments.shape != (size, size):
                msg = (f'2D moments must have shape ({size}, {size}) for '
                       f'order {self._order}, got {moments.shape}')
                raise ValueError(msg)
            moments = moments.ravel()
        elif moments.ndim != 1 or moments.size != size**2:
            msg = (f'moments must be a 2D ({size}, {size}) array or a 1D '
                   f'array of length {size**2}')
            raise ValueError(msg)

        valid = triangle_mask(self._order)
        if np.any(~np.isfinite(moments[valid])):
            msg = 'moments must be finite for all i + j <= order'
            raise ValueError(msg)

        # unused slots are never read
        moments[~valid] = np.nan
        self._values = moments

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
            msg = 'MomentObject has no moments; call update() first'
            raise MomentNotReadyError(msg)

        if i is None and j is None:
            view = self._values.view()
            view.flags.writeable = False
            return view

        if i is None or j is None:
            msg = 'i and j must both be given or both be None'
            raise ValueError(msg)

        return float(self._values[check_moment_index(i, j, self._order)])
