"""
===============================================================================
QUATCORE - Tolerance-Based Comparisons
===============================================================================
Approximate equality for scalars, vectors, and matrices. All functions work
elementwise on NumPy arrays and require every element to satisfy the bound.

    equal_with_abs_error(a, b, e):  |a - b| <= e
    equal_with_rel_error(a, b, e):  |a - b| <= e * |a|
    equal(a, b, e):                 alias of the absolute form for scalars

Note that the relative form is not symmetric: the bound scales with the
first argument, which is taken to be the reference value.
===============================================================================
"""

import numpy as np


def equal_with_abs_error(a, b, e) -> bool:
    """
    Compare with an absolute tolerance.

    Args:
        a: Reference scalar or array.
        b: Scalar or array of the same shape.
        e: Non-negative absolute tolerance.

    Returns:
        True if every element of |a - b| is <= e.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")
    return bool(np.all(np.abs(a - b) <= e))


def equal_with_rel_error(a, b, e) -> bool:
    """
    Compare with a tolerance relative to the magnitude of ``a``.

    Args:
        a: Reference scalar or array.
        b: Scalar or array of the same shape.
        e: Non-negative relative tolerance.

    Returns:
        True if every element of |a - b| is <= e * |a|.
    """
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")
    return bool(np.all(np.abs(a - b) <= e * np.abs(a)))


def equal(a, b, e) -> bool:
    """Scalar comparison with an absolute tolerance: |a - b| <= e."""
    return equal_with_abs_error(a, b, e)
