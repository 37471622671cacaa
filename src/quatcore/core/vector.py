"""
===============================================================================
QUATCORE - Vector Helpers
===============================================================================
3-vectors are plain NumPy arrays of shape (3,). The helpers here keep the
element dtype of their input, so float32 vectors stay float32 throughout.

norm() and unit() protect against underflow and overflow: when the squared
length falls below twice the smallest normal value of the dtype (or
overflows to infinity), the array is first divided by its largest absolute
component. Squaring a component around 1e-160 (float64) or 1e-20 (float32)
would otherwise flush to zero or lose most of its significant bits in the
denormal range.
===============================================================================
"""

import numpy as np

from .constants import float_traits, resolve_dtype


def vec3(x, y, z, dtype=None) -> np.ndarray:
    """Build a 3-vector of the given dtype (float64 by default)."""
    return np.array([x, y, z], dtype=resolve_dtype(dtype))


def as_vec3(v, dtype=None) -> np.ndarray:
    """
    Coerce a 3-sequence to a float array of shape (3,).

    Args:
        v: Any 3-element sequence or array.
        dtype: Target dtype. None keeps a supported float dtype of ``v``
            and falls back to float64 otherwise.

    Raises:
        ValueError: If ``v`` does not hold exactly three elements.
    """
    if dtype is None:
        arr = np.asarray(v)
        dtype = arr.dtype if arr.dtype.name in ('float32', 'float64') else None
    arr = np.asarray(v, dtype=resolve_dtype(dtype))
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {arr.shape}")
    return arr


def dot(a, b):
    """Dot product a . b."""
    return np.dot(a, b)


def cross(a, b) -> np.ndarray:
    """Cross product a x b (right-handed)."""
    return np.cross(a, b)


def _needs_rescale(a: np.ndarray, sq) -> bool:
    return sq < 2 * float_traits(a.dtype).tiny or not np.isfinite(sq)


def squared_norm(a: np.ndarray):
    """a . a without floating-point warnings; may underflow to 0 or overflow to inf."""
    with np.errstate(over='ignore', under='ignore'):
        return dot(a, a)


def norm(a: np.ndarray):
    """
    Euclidean norm of a 1-D float array, accurate down to the denormal range.

    Returns:
        A NumPy scalar of the array's dtype.
    """
    sq = squared_norm(a)
    if not _needs_rescale(a, sq):
        return np.sqrt(sq)
    max_abs = np.max(np.abs(a))
    if max_abs == 0 or not np.isfinite(max_abs):
        return np.sqrt(sq)
    w = a / max_abs
    return max_abs * np.sqrt(dot(w, w))


def unit(a: np.ndarray) -> np.ndarray:
    """
    Scale a 1-D float array to unit norm.

    An all-zero array has no direction and is returned as a zero copy.
    """
    sq = squared_norm(a)
    if _needs_rescale(a, sq):
        max_abs = np.max(np.abs(a))
        if max_abs == 0:
            return np.zeros_like(a)
        a = a / max_abs
        sq = dot(a, a)
    return a / np.sqrt(sq)


def length(v):
    """Euclidean length of a 3-vector (see norm())."""
    return norm(as_vec3(v))


def normalized(v) -> np.ndarray:
    """Return the 3-vector ``v`` scaled to unit length; zero stays zero."""
    return unit(as_vec3(v))
