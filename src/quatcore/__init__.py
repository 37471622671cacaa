"""
===============================================================================
QUATCORE - Quaternion Rotation Library
===============================================================================
Generic-precision quaternions for 3-D rotations: arithmetic, normalization,
inversion, axis-angle and rotation-matrix conversion.

    >>> from quatcore import Quatd, extract_quat
    >>> q = Quatd.from_axis_angle((0, 0, 1), 0.5)
    >>> extract_quat(q.to_matrix44()).angle()
===============================================================================
"""

from .core import *  # noqa: F401,F403
from .core import __all__

__version__ = '0.1.0'
