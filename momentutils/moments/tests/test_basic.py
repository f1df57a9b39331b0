# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Tests for the basic module.
"""

import numpy as np
import pytest
from numpy.testing import assert_equal

from momentutils.moments.basic import MomentBasic
from momentutils.moments.object import MomentObject
from momentutils.tests.helper import rectangle_moments
from momentutils.utils.exceptions import MomentNotReadyError, MomentOrderError


def test_moment_basic():
    moments = rectangle_moments(0, 0, 2, 1, 2)
    obj = MomentObject(2, moments)
    basic = MomentBasic(obj)
    assert basic.order == 2
    assert not basic.is_computed

    basic.compute()
    assert basic.is_computed
    assert basic.name == 'MomentBasic'
    assert_equal(basic.get(), obj.get())
    assert basic.get(0, 0) == 2.0
    assert basic.get(2, 0) == 8.0 / 3.0

    with pytest.raises(MomentOrderError):
        basic.get(2, 1)
    with pytest.raises(ValueError):
        basic.get(i=2)


def test_moment_basic_storage_owned():
    obj = MomentObject(1, np.ones((2, 2)))
    basic = MomentBasic(obj)
    basic.compute()
    obj.update(2 * np.ones((2, 2)))
    assert basic.get(0, 0) == 1.0
    basic.compute()
    assert basic.get(0, 0) == 2.0


def test_moment_basic_not_ready():
    basic = MomentBasic()
    assert basic.order is None
    with pytest.raises(MomentNotReadyError, match='not linked'):
        basic.compute()
    with pytest.raises(MomentNotReadyError):
        basic.get()

    basic = MomentBasic(MomentObject(2))
    with pytest.raises(MomentNotReadyError, match='no moments'):
        basic.compute()


def test_moment_basic_str():
    basic = MomentBasic(MomentObject(1, [[4.0, 2.0], [2.0, 0.0]]))
    assert str(basic) == 'MomentBasic (not computed)'
    basic.compute()
    assert str(basic) == 'MomentBasic\n4 2\n2 x'
    assert repr(basic) == 'MomentBasic(order=1, is_computed=True)'
