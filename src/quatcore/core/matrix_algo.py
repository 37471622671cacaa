"""
===============================================================================
QUATCORE - Rotation Matrix Algorithms
===============================================================================
Free functions that connect quaternions and rotation matrices:

    extract_quat(m)             -- best-fit quaternion of a 3x3 / 4x4 matrix
    rotation_matrix(from, to)   -- 4x4 matrix rotating one direction onto another
    Rx, Ry, Rz                  -- elementary rotations about the basis axes

All matrices use the row-vector convention: a vector p is rotated as
p @ M, so row i of M is the image of basis vector i. Composing rotations
therefore reads left to right: p @ (A @ B) applies A first, then B.
===============================================================================
"""

import numpy as np

from .constants import resolve_dtype
from .quaternion import _PINNED_CLASSES, Quaternion


def extract_quat(matrix, dtype=None) -> Quaternion:
    """
    Extract the quaternion of a rotation matrix.

    Trace-based branch selection keeps the computation stable for every
    rotation angle, and the input only needs to be approximately
    orthogonal. See Quaternion.from_matrix() for the formulas.

    Parameters
    ----------
    matrix : array_like
        3x3 or 4x4 matrix; only the upper-left 3x3 block is read.
    dtype : optional
        Result element type; defaults to the matrix dtype.

    Returns
    -------
    Quatf or Quatd
        q such that q.to_matrix44() reproduces the rotation part of
        ``matrix``.
    """
    m = np.asarray(matrix)
    if dtype is None and m.dtype.name in ('float32', 'float64'):
        dtype = m.dtype
    cls = _PINNED_CLASSES[resolve_dtype(dtype).name]
    return cls.from_matrix(m)


def rotation_matrix(from_dir, to_dir, dtype=None) -> np.ndarray:
    """
    4x4 matrix that rotates direction ``from_dir`` onto ``to_dir``.

    Neither direction needs to be unit length. The rotation axis is
    from_dir x to_dir (see Quaternion.set_rotation() for the antiparallel
    case).
    """
    if dtype is None:
        dtype = np.result_type(np.asarray(from_dir), np.asarray(to_dir))
        if dtype.name not in ('float32', 'float64'):
            dtype = None
    q = Quaternion.from_rotation(from_dir, to_dir, dtype=dtype)
    return q.to_matrix44()


# =============================================================================
# ELEMENTARY ROTATION MATRICES
# =============================================================================

def Rx(angle: float, dtype=None) -> np.ndarray:
    """
    Elementary rotation matrix about the X-axis.

    Rotates a row vector by *angle* radians about the X-axis using the
    right-hand rule (Y turns toward Z):

        Rx(a) = | 1    0       0     |
                | 0   cos(a)  sin(a)  |
                | 0  -sin(a)  cos(a)  |

    Parameters
    ----------
    angle : float
        Rotation angle in radians.
    dtype : optional
        Element type (float64 by default).

    Returns
    -------
    np.ndarray
        3x3 rotation matrix.
    """
    dtype = resolve_dtype(dtype)
    c = np.cos(dtype.type(angle))
    s = np.sin(dtype.type(angle))
    return np.array([
        [1.0,  0.0,  0.0],
        [0.0,    c,    s],
        [0.0,   -s,    c],
    ], dtype=dtype)


def Ry(angle: float, dtype=None) -> np.ndarray:
    """
    Elementary rotation matrix about the Y-axis (Z turns toward X).

        Ry(a) = | cos(a)  0  -sin(a) |
                |   0     1     0     |
                | sin(a)  0   cos(a)  |
    """
    dtype = resolve_dtype(dtype)
    c = np.cos(dtype.type(angle))
    s = np.sin(dtype.type(angle))
    return np.array([
        [  c,  0.0,   -s],
        [0.0,  1.0,  0.0],
        [  s,  0.0,    c],
    ], dtype=dtype)


def Rz(angle: float, dtype=None) -> np.ndarray:
    """
    Elementary rotation matrix about the Z-axis (X turns toward Y).

        Rz(a) = |  cos(a)  sin(a)  0 |
                | -sin(a)  cos(a)  0 |
                |    0       0     1 |
    """
    dtype = resolve_dtype(dtype)
    c = np.cos(dtype.type(angle))
    s = np.sin(dtype.type(angle))
    return np.array([
        [  c,    s,  0.0],
        [ -s,    c,  0.0],
        [0.0,  0.0,  1.0],
    ], dtype=dtype)
