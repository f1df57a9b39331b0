# Licensed under a 3-clause BSD style license - see LICENSE.rst
"""
Subpackage providing general-purpose utilities and the exception
classes shared by the moment descriptors.
"""

from .exceptions import *  # noqa: F401, F403
