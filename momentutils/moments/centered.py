# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define the centered moment descriptor.
"""

import enum
import warnings

import numpy as np
from scipy.special import comb

from momentutils.moments.core import MomentBase, format_moments
from momentutils.utils._parameters import (check_moment_index,
                                           moment_degrees)
from momentutils.utils._repr import make_repr
from momentutils.utils.exceptions import (DegenerateNormalizationError,
                                          MomentNormalizationWarning,
                                          MomentNotReadyError,
                                          MomentOrderError,
                                          MomentOverflowError)

__all__ = ['MomentCentered', 'NormalizationMode']

DEFAULT_ATOL = 1.0e-12

# relative size of the rounding error left by the binomial expansion
DEFAULT_RTOL = 64 * np.finfo(float).eps


class NormalizationMode(enum.Enum):
    """
    The scale reference used by `MomentCentered.normalize_for_scale`.
    """

    #: normalize by the total mass ``mu_00``
    NORMALIZE_BY_MU00 = 'mu00'

    #: normalize by ``(mu_02 + mu_20) / 2``
    NORMALIZE_BY_MU02_PLUS_MU20_OVER_2 = 'mu02_plus_mu20_over_2'

    NORMALIZE_BY_MU02PMU20by2 = 'mu02_plus_mu20_over_2'


class MomentCentered(MomentBase):
    r"""
    Descriptor for the centered moments :math:`\mu_{ij}`.

    For a dense object :math:`O`, the centered moments are defined by:

    .. math::

        \mu_{ij} = \iint_O (x - x_g)^i (y - y_g)^j \, dx \, dy

    and for a discrete set of :math:`n` points by:

    .. math::

        \mu_{ij} = \sum_{k=1}^{n} (x_k - x_g)^i (y_k - y_g)^j

    where :math:`(x_g, y_g)` is the center of gravity. They are
    computed from the raw moments :math:`m_{pq}` with the binomial
    expansion:

    .. math::

        \mu_{ij} = \sum_{p=0}^{i} \sum_{q=0}^{j} \binom{i}{p}
                   \binom{j}{q} (-x_g)^{i-p} (-y_g)^{j-q} m_{pq}

    The centered moments are computed at the maximal order of the moment
    source. :math:`\mu_{ij}` is stored at index ``j * (order + 1) + i``
    of the array returned by `get`. For ``order = 3`` the storage can
    be pictured as the triangular matrix::

        u00 u10 u20 u30
        u01 u11 u21  x
        u02 u12  x   x
        u03  x   x   x

    where moments of the same order lie on the reverse diagonals. The
    ``x`` slots are unused and hold NaN.

    Parameters
    ----------
    moment_object : `~momentutils.moments.MomentObject` or `~momentutils.moments.MomentBasic`, optional
        The source of the raw moments.

    gravity_center : `~momentutils.moments.MomentGravityCenter`, optional
        The center of gravity descriptor.

    Notes
    -----
    Both dependencies may also be given later with `link`. They must be
    computed before `compute` is called.

    Examples
    --------
    >>> import numpy as np
    >>> from momentutils.moments import (MomentCentered,
    ...                                  MomentGravityCenter, MomentObject)
    >>> raw = np.array([[4.0, 2.0, 2.0], [2.0, 1.0, 0.0], [2.0, 0.0, 0.0]])
    >>> obj = MomentObject(2, raw)
    >>> center = MomentGravityCenter(obj)
    >>> center.compute()
    >>> mc = MomentCentered(obj, center)
    >>> mc.compute()
    >>> mc.get(2, 0), mc.get(1, 1)
    (1.0, 0.0)
    """

    def __init__(self, moment_object=None, gravity_center=None):
        self.moment_object = moment_object
        self.gravity_center = gravity_center
        self._values = None
        self._bounds = None
        self._normalized = False

    def __repr__(self):
        return make_repr(self, ('order', 'is_computed', 'is_normalized'))

    def __str__(self):
        if not self.is_computed:
            return f'{self.name} (not computed)'
        header = self.name
        if self.is_normalized:
            header += ' (normalized)'
        return f'{header}\n{format_moments(self)}'

    def link(self, moment_object, gravity_center):
        """
        Link the descriptor to its dependencies.

        Any previously computed values are discarded.

        Parameters
        ----------
        moment_object : `~momentutils.moments.MomentObject` or `~momentutils.moments.MomentBasic`
            The source of the raw moments.

        gravity_center : `~momentutils.moments.MomentGravityCenter`
            The center of gravity descriptor.
        """
        self.moment_object = moment_object
        self.gravity_center = gravity_center
        self._values = None
        self._bounds = None
        self._normalized = False

    @property
    def order(self):
        """
        The maximal order, inherited from the moment source (`None` if
        no source is linked).
        """
        if self.moment_object is None:
            return None
        return self.moment_object.order

    @property
    def is_computed(self):
        return self._values is not None

    @property
    def is_normalized(self):
        """
        Whether `normalize_for_scale` has been applied since the last
        `compute`.
        """
        return self._normalized

    @property
    def values(self):
        """
        Read-only view of the flat moment storage (same as ``get()``).
        """
        return self.get()

    def _check_dependencies(self):
        if self.moment_object is None:
            msg = 'MomentCentered is not linked to a moment object'
            raise MomentNotReadyError(msg)
        if self.gravity_center is None:
            msg = 'MomentCentered is not linked to a gravity center'
            raise MomentNotReadyError(msg)
        if not self.moment_object.is_computed:
            msg = 'the moment source of MomentCentered is not computed'
            raise MomentNotReadyError(msg)
        if not self.gravity_center.is_computed:
            msg = 'the gravity center of MomentCentered is not computed'
            raise MomentNotReadyError(msg)

        xg, yg = self.gravity_center.get()
        if not (np.isfinite(xg) and np.isfinite(yg)):
            msg = 'the center of gravity is not finite'
            raise MomentNotReadyError(msg)

        return float(xg), float(yg)

    def compute(self):
        """
        Compute the centered moments up to the order of the moment
        source.

        The previous values are replaced only if the computation
        succeeds. Any previous normalization is discarded.

        Raises
        ------
        MomentNotReadyError
            If a dependency is missing or has not been computed, or if
            the center of gravity is not finite.

        MomentOverflowError
            If the centered moments overflow the float range.
        """
        xg, yg = self._check_dependencies()
        order = self.order
        size = order + 1
        raw = np.asarray(self.moment_object.get())

        # bounds holds the sum of the absolute expansion terms, the
        # magnitude the rounding error of each moment is relative to
        values = np.full(size**2, np.nan)
        bounds = np.full(size**2, np.nan)
        with np.errstate(over='ignore', invalid='ignore'):
            xpowers = (-xg) ** np.arange(size)
            ypowers = (-yg) ** np.arange(size)

            for j in range(size):
                for i in range(size - j):
                    mu = 0.0
                    bound = 0.0
                    for p in range(i + 1):
                        xterm = comb(i, p, exact=True) * xpowers[i - p]
                        for q in range(j + 1):
                            yterm = comb(j, q, exact=True) * ypowers[j - q]
                            term = xterm * yterm * raw[q * size + p]
                            mu += term
                            bound += abs(term)
                    values[j * size + i] = mu
                    bounds[j * size + i] = bound

        valid = moment_degrees(order) <= order
        if (np.any(~np.isfinite(values[valid]))
                or np.any(~np.isfinite(bounds[valid]))):
            msg = ('the centered moments overflow; the center of gravity '
                   'or the order is too large')
            raise MomentOverflowError(msg)

        # moments lost in the rounding error are zero
        values[np.abs(values) <= DEFAULT_RTOL * bounds] = 0.0

        self._values = values
        self._bounds = bounds
        self._normalized = False

    def get(self, i=None, j=None):
        """
        Return a centered moment or all of them.

        Parameters
        ----------
        i, j : int or `None`, optional
            The powers of ``x - x_g`` and ``y - y_g``. If both are
            `None`, a read-only view of the flat storage is returned;
            :math:`\\mu_{ij}` is at index ``j * (order + 1) + i`` and the
            slots with ``i + j > order`` hold NaN.

        Returns
        -------
        result : float or 1D `~numpy.ndarray`
            The centered moment :math:`\\mu_{ij}` or the flat array of
            all centered moments.

        Raises
        ------
        MomentNotReadyError
            If the moments have not been computed.

        MomentOrderError
            If ``i`` or ``j`` is invalid or ``i + j > order``.
        """
        if not self.is_computed:
            msg = 'MomentCentered has not been computed'
            raise MomentNotReadyError(msg)

        if i is None and j is None:
            return self._readonly(self._values)
        if i is None or j is None:
            msg = 'i and j must both be given or both be None'
            raise ValueError(msg)

        return float(self._values[check_moment_index(i, j, self.order)])

    def to_array(self):
        """
        Return the centered moments as a 2D array.

        Returns
        -------
        result : 2D `~numpy.ndarray`
            A ``(order + 1, order + 1)`` array where ``result[j, i]`` is
            :math:`\\mu_{ij}`.
        """
        size = self.order + 1
        return np.array(self.get()).reshape(size, size)

    def normalize_for_scale(self, mode, *, atol=DEFAULT_ATOL,
                            rtol=DEFAULT_RTOL):
        """
        Normalize the centered moments for scale.

        Each moment with ``2 <= i + j <= order`` is divided by
        ``ref**((i + j) / 2 + 1)``, where ``ref`` is :math:`\\mu_{00}`
        or :math:`(\\mu_{02} + \\mu_{20}) / 2` depending on ``mode``.
        :math:`\\mu_{00}`, :math:`\\mu_{10}` and :math:`\\mu_{01}` are
        left unchanged.

        Parameters
        ----------
        mode : `NormalizationMode` or str
            The scale reference, ``'mu00'`` or
            ``'mu02_plus_mu20_over_2'``.

        atol, rtol : float, optional
            References smaller than or equal to ``atol + rtol * bound``
            are considered degenerate, where ``bound`` is the magnitude
            of the raw moment terms the reference was computed from.
            References of an object with no spread (e.g., a single
            point) are only zero within this rounding error.

        Raises
        ------
        MomentNotReadyError
            If the moments have not been computed.

        MomentOrderError
            If ``mode`` needs second-order moments and ``order < 2``.

        DegenerateNormalizationError
            If the reference is degenerate or the normalized moments are
            not finite. The moments are left unchanged.
        """
        try:
            mode = NormalizationMode(mode)
        except ValueError:
            valid = sorted({member.value for member in NormalizationMode})
            msg = f'mode must be one of {valid}, got {mode!r}'
            raise ValueError(msg) from None

        if not self.is_computed:
            msg = 'MomentCentered has not been computed'
            raise MomentNotReadyError(msg)

        if mode is NormalizationMode.NORMALIZE_BY_MU00:
            ref = self.get(0, 0)
            bound = self._bounds[0]
        else:
            if self.order < 2:
                msg = (f'{mode.name} requires moments up to at least order '
                       f'2, got order {self.order}')
                raise MomentOrderError(msg)
            ref = (self.get(0, 2) + self.get(2, 0)) / 2.0
            size = self.order + 1
            bound = (self._bounds[2 * size] + self._bounds[2]) / 2.0

        threshold = atol + rtol * bound
        if not np.isfinite(ref) or ref <= threshold:
            msg = (f'the normalization reference {ref!r} is degenerate '
                   f'(it must be finite and > {threshold!r})')
            raise DegenerateNormalizationError(msg)

        if self._normalized:
            warnings.warn('The centered moments are already normalized; '
                          'normalizing them again.',
                          MomentNormalizationWarning)

        degrees = moment_degrees(self.order)
        scaled = (degrees >= 2) & (degrees <= self.order)

        factors = ref ** (degrees[scaled] / 2.0 + 1.0)
        values = self._values.copy()
        values[scaled] /= factors
        if np.any(~np.isfinite(values[degrees <= self.order])):
            msg = 'the normalized centered moments are not finite'
            raise DegenerateNormalizationError(msg)

        bounds = self._bounds.copy()
        bounds[scaled] /= factors

        self._values = values
        self._bounds = bounds
        self._normalized = True
