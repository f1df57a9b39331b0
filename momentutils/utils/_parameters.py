# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define tools for parameter validation.
"""

import numpy as np

from momentutils.utils.exceptions import MomentOrderError


def as_order(name, value):
    """
    Validate a moment order.

    Parameters
    ----------
    name : str
        The name of the parameter, which is used in error messages.

    value : int
        The input value.

    Returns
    -------
    result : int
        The order as a Python int.

    Examples
    --------
    >>> from momentutils.utils._parameters import as_order

    >>> as_order('order', 3)
    3

    >>> as_order('order', np.int64(2))
    2
    """
    if isinstance(value, (bool, np.bool_)):
        msg = f'{name} must be an integer'
        raise TypeError(msg)

    if not isinstance(value, (int, np.integer)):
        msg = f'{name} must be an integer'
        raise TypeError(msg)

    if value < 0:
        msg = f'{name} must be >= 0'
        raise ValueError(msg)

    return int(value)


def check_moment_index(i, j, order):
    """
    Validate a moment index pair against the triangle ``i + j <=
    order``.

    Parameters
    ----------
    i, j : int
        The powers of ``x`` and ``y``.

    order : int
        The maximal order of the moments.

    Returns
    -------
    index : int
        The position ``j * (order + 1) + i`` of the moment in the flat
        storage.

    Raises
    ------
    MomentOrderError
        If ``i`` or ``j`` is not a non-negative integer or if ``i + j >
        order``.
    """
    for value in (i, j):
        if (isinstance(value, (bool, np.bool_))
                or not isinstance(value, (int, np.integer))):
            msg = f'moment indices must be integers, got {value!r}'
            raise MomentOrderError(msg)
        if value < 0:
            msg = f'moment indices must be >= 0, got {value!r}'
            raise MomentOrderError(msg)

    if i + j > order:
        msg = (f'moment ({i}, {j}) exceeds the maximal order {order} '
               '(i + j must be <= order)')
        raise MomentOrderError(msg)

    return int(j) * (order + 1) + int(i)


def triangle_mask(order):
    """
    Return a flat boolean mask of the slots with ``i + j <= order``.

    Parameters
    ----------
    order : int
        The maximal order of the moments.

    Returns
    -------
    mask : 1D bool `~numpy.ndarray`
        Array of length ``(order + 1)**2`` where `True` marks the valid
        moment slots.
    """
    total = moment_degrees(order)
    return total <= order


def moment_degrees(order):
    """
    Return the total degree ``i + j`` of each slot of the flat storage.
    """
    jj, ii = np.divmod(np.arange((order + 1) ** 2), order + 1)
    return ii + jj
