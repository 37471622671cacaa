"""
===============================================================================
QUATCORE - Vector, Tolerance and Traits Test Suite
===============================================================================
Tests for the underflow-safe vector helpers, the tolerance comparisons and
the per-dtype floating-point traits.
===============================================================================
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from quatcore import (
    cross, dot, equal, equal_with_abs_error, equal_with_rel_error, float_traits, length,
    normalized, vec3,
)
from quatcore.core.constants import resolve_dtype
from quatcore.core.vector import as_vec3, norm, squared_norm, unit


class TestFloatTraits:
    """Tests for float_traits() and resolve_dtype()."""

    @pytest.mark.parametrize("dtype", ['float32', np.float32, np.dtype('float32')])
    def test_float32(self, dtype):
        traits = float_traits(dtype)
        assert traits.dtype == np.float32
        assert traits.epsilon == float(np.finfo(np.float32).eps)
        assert traits.tiny == float(np.finfo(np.float32).tiny)

    def test_default_is_float64(self):
        assert float_traits().dtype == np.float64
        assert float_traits().epsilon == 2.0 ** -52

    @pytest.mark.parametrize("dtype", ['int64', 'complex128', 'float16', 'nope'])
    def test_unsupported(self, dtype):
        with pytest.raises(TypeError):
            resolve_dtype(dtype)


class TestVector:
    """Tests for the 3-vector helpers."""

    def test_vec3_dtype(self):
        assert vec3(1, 2, 3).dtype == np.float64
        assert vec3(1, 2, 3, dtype='float32').dtype == np.float32

    def test_as_vec3_keeps_float_dtype(self):
        assert as_vec3(np.zeros(3, dtype=np.float32)).dtype == np.float32
        assert as_vec3([1, 2, 3]).dtype == np.float64

    def test_as_vec3_bad_shape(self):
        with pytest.raises(ValueError):
            as_vec3([1, 2])

    def test_dot_and_cross(self):
        assert dot(vec3(1, 2, 3), vec3(4, 5, 6)) == 32
        assert_allclose(cross(vec3(1, 0, 0), vec3(0, 1, 0)), [0, 0, 1], atol=0)

    def test_length(self):
        assert length(vec3(2, 3, 6)) == 7

    @pytest.mark.parametrize("dtype,scale", [('float64', 1e-160), ('float64', 1e-310),
                                             ('float32', 1e-22), ('float64', 1e200)])
    def test_length_extreme_magnitudes(self, dtype, scale):
        v = vec3(3 * scale, 0, 4 * scale, dtype=dtype)
        expected = v.dtype.type(5 * scale)
        assert_allclose(length(v), expected, rtol=1e-6 if scale == 1e-310 else 4e-7)

    @pytest.mark.filterwarnings("error")
    @pytest.mark.parametrize("dtype,scale", [('float64', 1e200), ('float32', 1e30)])
    def test_huge_vectors_do_not_warn(self, dtype, scale):
        v = vec3(3 * scale, 0, 4 * scale, dtype=dtype)
        assert np.isinf(squared_norm(v))
        assert_allclose(length(v), v.dtype.type(5 * scale), rtol=4e-7)
        assert_allclose(normalized(v), [0.6, 0, 0.8], rtol=4e-7)

    @pytest.mark.parametrize("dtype,scale", [('float64', 1e-160), ('float32', 1e-22)])
    def test_normalized_tiny(self, dtype, scale):
        v = vec3(0, 0, 7 * scale, dtype=dtype)
        assert np.array_equal(normalized(v), [0, 0, 1])

    def test_normalized_zero_stays_zero(self):
        assert np.array_equal(normalized(vec3(0, 0, 0)), [0, 0, 0])

    def test_norm_and_unit_work_on_4_vectors(self):
        a = np.array([1.0, 1.0, 1.0, 1.0])
        assert norm(a) == 2
        assert_allclose(unit(a), [0.5] * 4, atol=0)


class TestTolerance:
    """Tests for equal, equal_with_abs_error and equal_with_rel_error."""

    def test_equal(self):
        assert equal(1.0, 1.0 + 1e-10, 1e-9)
        assert not equal(1.0, 1.1, 1e-3)

    def test_abs_error_on_arrays(self):
        assert equal_with_abs_error(np.eye(3), np.eye(3) + 1e-12, 1e-11)
        assert not equal_with_abs_error(np.eye(3), np.eye(3) + 1e-10, 1e-11)

    def test_rel_error_scales_with_reference(self):
        assert equal_with_rel_error(1e6, 1e6 + 1, 1e-5)
        assert not equal_with_rel_error(1.0, 2.0, 1e-5)

    def test_shape_mismatch_raises(self):
        with pytest.raises(ValueError):
            equal_with_abs_error(np.zeros(3), np.zeros(4), 1.0)
