# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
This subpackage contains the moment descriptors: raw moments, center of
gravity and centered moments.
"""

from .basic import *  # noqa: F401, F403
from .centered import *  # noqa: F401, F403
from .core import *  # noqa: F401, F403
from .gravity_center import *  # noqa: F401, F403
from .object import *  # noqa: F401, F403
