"""
===============================================================================
QUATCORE - Numerical Constants and Floating-Point Traits
===============================================================================
Central repository for the angular constants and the per-precision limits
(epsilon, smallest normal value, largest finite value) used throughout the
quaternion library.

Every quaternion carries a NumPy floating dtype. The accuracy guarantees of
the axis-angle and matrix codecs are stated in multiples of that dtype's
epsilon, so the traits below are the single place those limits come from.
===============================================================================
"""

from dataclasses import dataclass

import numpy as np


# =============================================================================
# MATHEMATICAL CONSTANTS
# =============================================================================
PI = np.pi
HALF_PI = 0.5 * np.pi
TWO_PI = 2.0 * np.pi
DEG2RAD = PI / 180.0
RAD2DEG = 180.0 / PI

# =============================================================================
# SUPPORTED ELEMENT TYPES
# =============================================================================
DEFAULT_DTYPE = np.dtype(np.float64)

SUPPORTED_DTYPES = {
    'float32': np.dtype(np.float32),
    'float64': np.dtype(np.float64),
}


@dataclass(frozen=True)
class FloatTraits:
    """
    Limits of a floating-point element type.

    Attributes
    ----------
    dtype : np.dtype
        The NumPy dtype these limits describe.
    epsilon : float
        Difference between 1.0 and the next representable value.
    tiny : float
        Smallest positive normal value. Squared lengths below ``2 * tiny``
        are computed on a rescaled vector to stay out of the denormal range.
    max : float
        Largest finite value.
    """

    dtype: np.dtype
    epsilon: float
    tiny: float
    max: float


def resolve_dtype(dtype=None) -> np.dtype:
    """
    Normalize a dtype specifier to one of the supported float dtypes.

    Args:
        dtype: None (float64), a dtype name such as 'float32', a NumPy
            scalar type, or a np.dtype.

    Returns:
        The matching np.dtype.

    Raises:
        TypeError: If the dtype is not float32 or float64.
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise TypeError(f"Unsupported quaternion dtype: {dtype!r}") from exc
    if resolved.name not in SUPPORTED_DTYPES:
        raise TypeError(
            f"Unsupported quaternion dtype: {resolved.name}. "
            f"Valid: {list(SUPPORTED_DTYPES.keys())}"
        )
    return resolved


def float_traits(dtype=None) -> FloatTraits:
    """
    Look up the floating-point limits for a dtype.

    Args:
        dtype: Any specifier accepted by resolve_dtype().

    Returns:
        FloatTraits for that dtype.
    """
    resolved = resolve_dtype(dtype)
    info = np.finfo(resolved)
    return FloatTraits(
        dtype=resolved,
        epsilon=float(info.eps),
        tiny=float(info.tiny),
        max=float(info.max),
    )
