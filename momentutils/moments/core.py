# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Define the contract shared by the moment descriptors and a formatter
for triangular moment tables.
"""

import abc

import numpy as np

__all__ = ['MomentBase', 'format_moments']


class MomentBase(metaclass=abc.ABCMeta):
    """
    Abstract base class for moment descriptors.

    A descriptor is linked to the descriptors (or the moment object) it
    depends on when it is created, computes its values on demand with
    `compute`, and exposes them through `get`. The base class holds no
    data: each descriptor owns its own storage.
    """

    @property
    def name(self):
        """
        The descriptor name.
        """
        return self.__class__.__name__

    @property
    @abc.abstractmethod
    def is_computed(self):
        """
        Whether `compute` has successfully populated the descriptor.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def compute(self):
        """
        Compute the descriptor values from its dependencies.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, *args):
        """
        Return the computed values.
        """
        raise NotImplementedError

    @staticmethod
    def _readonly(values):
        view = values.view()
        view.flags.writeable = False
        return view


def format_moments(moment, fmt='{:.6g}'):
    """
    Format a triangular moment table as a human-readable grid.

    The grid has ``order + 1`` rows and columns. Row ``j`` holds the
    moments ``(0, j), (1, j), ...``, i.e., the layout of the flat
    storage, so moments of the same order lie on the reverse diagonals.
    Slots with ``i + j > order`` are shown as ``x``.

    Parameters
    ----------
    moment : object
        Any object with an ``order`` attribute and a ``get()`` method
        returning the flat moment storage (e.g.,
        `~momentutils.moments.MomentCentered`).

    fmt : str, optional
        The format string applied to each moment value.

    Returns
    -------
    result : str
        The formatted grid.

    Examples
    --------
    >>> import numpy as np
    >>> from momentutils.moments import MomentObject, format_moments
    >>> obj = MomentObject(1, np.array([[4.0, 2.0], [2.0, 0.0]]))
    >>> print(format_moments(obj))
    4 2
    2 x
    """
    order = moment.order
    values = np.asarray(moment.get())
    size = order + 1

    cells = []
    for j in range(size):
        row = []
        for i in range(size):
            if i + j <= order:
                row.append(fmt.format(values[j * size + i]))
            else:
                row.append('x')
        cells.append(row)

    width = max(len(cell) for row in cells for cell in row)
    lines = [' '.join(cell.rjust(width) for cell in row) for row in cells]

    return '\n'.join(lines)
