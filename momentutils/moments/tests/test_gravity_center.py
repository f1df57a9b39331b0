# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Tests for the gravity_center module.
"""

import numpy as np
import pytest
from astropy.utils.exceptions import AstropyUserWarning
from numpy.testing import assert_allclose

from momentutils.moments.gravity_center import MomentGravityCenter
from momentutils.moments.object import MomentObject
from momentutils.tests.helper import discrete_moments, rectangle_moments
from momentutils.utils.exceptions import MomentNotReadyError


@pytest.mark.parametrize('order', [1, 2, 3])
def test_gravity_center_points(order):
    points = [(0, 0), (1, 0), (1, 1), (0, 1)]
    obj = MomentObject(order, discrete_moments(points, order))
    center = MomentGravityCenter(obj)
    center.compute()
    assert center.is_computed
    assert_allclose(center.get(), (0.5, 0.5))
    assert center.xg == 0.5
    assert center.yg == 0.5


def test_gravity_center_dense():
    obj = MomentObject(1, rectangle_moments(2, 1, 6, 4, 1))
    center = MomentGravityCenter(obj)
    center.compute()
    assert_allclose((center.xg, center.yg), (4.0, 2.5))


def test_gravity_center_readonly():
    obj = MomentObject(1, discrete_moments([(1, 2)], 1))
    center = MomentGravityCenter(obj)
    center.compute()
    with pytest.raises(ValueError):
        center.get()[0] = 0.0


def test_gravity_center_zero_mass():
    obj = MomentObject(1, np.zeros((2, 2)))
    center = MomentGravityCenter(obj)
    match = 'center of gravity is undefined'
    with pytest.warns(AstropyUserWarning, match=match):
        center.compute()
    assert np.all(np.isnan(center.get()))


def test_gravity_center_not_ready():
    center = MomentGravityCenter()
    with pytest.raises(MomentNotReadyError, match='not linked'):
        center.compute()
    with pytest.raises(MomentNotReadyError):
        center.get()
    with pytest.raises(MomentNotReadyError):
        _ = center.xg

    center = MomentGravityCenter(MomentObject(2))
    with pytest.raises(MomentNotReadyError, match='not computed'):
        center.compute()

    center = MomentGravityCenter(MomentObject(0, [5.0]))
    with pytest.raises(MomentNotReadyError, match='at least order 1'):
        center.compute()


def test_gravity_center_str():
    obj = MomentObject(1, discrete_moments([(1, 2), (3, 4)], 1))
    center = MomentGravityCenter(obj)
    assert str(center) == 'MomentGravityCenter (not computed)'
    center.compute()
    assert str(center) == 'MomentGravityCenter\nxg = 2\nyg = 3'
    assert repr(center) == 'MomentGravityCenter(is_computed=True)'
