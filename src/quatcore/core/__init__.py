"""
===============================================================================
QUATCORE - Core Module
===============================================================================
Quaternion value type and the numerical helpers it is built on.

Submodules:
    constants    -- Angular constants and per-dtype floating-point traits
    tolerance    -- Absolute / relative tolerance comparisons
    vector       -- 3-vector helpers with underflow-safe length
    quaternion   -- Quaternion, Quatf, Quatd
    matrix_algo  -- extract_quat, rotation_matrix, elementary rotations
===============================================================================
"""

from .constants import FloatTraits, float_traits
from .matrix_algo import Rx, Ry, Rz, extract_quat, rotation_matrix
from .quaternion import Quatd, Quaternion, Quatf
from .tolerance import equal, equal_with_abs_error, equal_with_rel_error
from .vector import cross, dot, length, normalized, vec3

__all__ = [
    'FloatTraits',
    'float_traits',
    'Quaternion',
    'Quatf',
    'Quatd',
    'extract_quat',
    'rotation_matrix',
    'Rx',
    'Ry',
    'Rz',
    'equal',
    'equal_with_abs_error',
    'equal_with_rel_error',
    'vec3',
    'dot',
    'cross',
    'length',
    'normalized',
]
