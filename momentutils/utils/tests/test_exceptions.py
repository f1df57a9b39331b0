# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Tests for the exceptions module.
"""

import pytest
from astropy.utils.exceptions import AstropyUserWarning

from momentutils.utils.exceptions import (DegenerateNormalizationError,
                                          MomentError,
                                          MomentNormalizationWarning,
                                          MomentNotReadyError,
                                          MomentOrderError,
                                          MomentOverflowError)


@pytest.mark.parametrize(('exc', 'builtin'),
                         [(MomentNotReadyError, RuntimeError),
                          (MomentOrderError, IndexError),
                          (DegenerateNormalizationError, ArithmeticError),
                          (MomentOverflowError, ArithmeticError)])
def test_exception_hierarchy(exc, builtin):
    assert issubclass(exc, MomentError)
    assert issubclass(exc, builtin)
    with pytest.raises(builtin):
        raise exc('message')


def test_normalization_warning():
    assert issubclass(MomentNormalizationWarning, AstropyUserWarning)
