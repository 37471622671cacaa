"""
===============================================================================
QUATCORE - Quaternion Mathematics Library
===============================================================================

Quaternion value type for representing and manipulating 3-D rotations:
construction, arithmetic, normalization, inversion, axis-angle encoding and
decoding, and conversion to and from rotation matrices.

Convention
----------
A quaternion is a real scalar ``r`` and a 3-vector ``v``:

    q = r + v.x*i + v.y*j + v.z*k

Products follow Hamilton's rule, and rotation matrices use the row-vector
convention: a vector ``p`` is rotated as ``p @ q.to_matrix33()``, which gives
the same result as ``q.rotate_vector(p)``. The matrix is therefore the
transpose of the column-vector direction cosine matrix found in most
aerospace texts.

Precision
---------
Every quaternion carries a NumPy floating dtype (float32 or float64) and
keeps its components in that dtype. ``Quatf`` and ``Quatd`` are the two
pinned-precision variants; converting between them casts each component and
nothing else.

Magnitude
---------
Unit length is not enforced. Operations that assume a unit quaternion
(axis/angle extraction, matrix conversion) degrade gracefully for non-unit
input; degenerate input (zero length) maps to documented fallback values
rather than raising.

References
----------
    [1] Shoemake, "Animating Rotation with Quaternion Curves",
        SIGGRAPH, 1985.
    [2] Kuipers, "Quaternions and Rotation Sequences", Princeton, 1999.
    [3] Kahan, "How Futile are Mindless Assessments of Roundoff in
        Floating-Point Computation?", 2006 (atan2 angle formula).

===============================================================================
"""

import logging
import numbers
from typing import Tuple

import numpy as np

from .constants import RAD2DEG, float_traits, resolve_dtype
from .vector import as_vec3, cross, dot, norm, normalized, squared_norm, unit

logger = logging.getLogger(__name__)


def _check_index(index) -> int:
    # Single components only; slices and fancy indices are rejected
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise TypeError(f"Quaternion indices must be integers, not {type(index).__name__}")
    return int(index)


class Quaternion:
    """
    Quaternion for 3D rotation representation.

    A unit quaternion q = (r, v) parameterizes a rotation by angle theta
    about unit axis n as:

        q = (cos(theta/2), sin(theta/2) * n)

    Construction
    ------------
    >>> Quaternion()                     # identity (1, 0, 0, 0)
    >>> Quaternion(r, x, y, z)
    >>> Quaternion(r, (x, y, z))
    >>> Quaternion(other)                # copy, keeps other's dtype
    >>> Quaternion(other, dtype='float32')

    Attributes
    ----------
    r : numpy floating scalar
        Scalar (real) part.
    v : np.ndarray
        Vector (imaginary) part, shape (3,).
    dtype : np.dtype
        Element type of both parts.
    """

    # Pinned element type; None means "chosen per instance".
    _DTYPE = None

    # Mutable value type.
    __hash__ = None

    # Make NumPy scalars and arrays defer to our reflected operators,
    # so np.float32(2) * q calls Quaternion.__rmul__.
    __array_ufunc__ = None

    def __init__(self, *args, dtype=None) -> None:
        dtype = self._resolve_class_dtype(dtype)

        if len(args) == 0:
            r, v = 1, (0, 0, 0)
        elif len(args) == 1:
            src = args[0]
            if not isinstance(src, Quaternion):
                raise TypeError(
                    f"Cannot build a quaternion from {type(src).__name__}; "
                    "pass (r, v), (r, x, y, z) or another Quaternion."
                )
            r, v = src._r, src._v
            if dtype is None:
                dtype = src.dtype
        elif len(args) == 2:
            r, v = args
        elif len(args) == 4:
            r, v = args[0], args[1:]
        else:
            raise ValueError(
                f"Quaternion takes 0, 1, 2 or 4 positional arguments, "
                f"got {len(args)}"
            )

        self._dtype = resolve_dtype(dtype)
        self._r = self._dtype.type(r)
        self._v = np.array(as_vec3(v, self._dtype))

    @classmethod
    def _resolve_class_dtype(cls, dtype):
        if cls._DTYPE is None:
            return dtype
        if dtype is not None and resolve_dtype(dtype) != cls._DTYPE:
            raise TypeError(
                f"{cls.__name__} is pinned to {cls._DTYPE.name}, "
                f"got dtype={resolve_dtype(dtype).name}"
            )
        return cls._DTYPE

    def _make(self, r, v) -> 'Quaternion':
        """New quaternion of the same class and dtype; skips argument parsing."""
        q = object.__new__(type(self))
        q._dtype = self._dtype
        q._r = self._dtype.type(r)
        q._v = np.array(v, dtype=self._dtype)
        return q

    def _set(self, r, v) -> None:
        self._r = self._dtype.type(r)
        self._v = np.array(v, dtype=self._dtype)

    def _set_identity(self) -> None:
        self._set(1, (0, 0, 0))

    # =========================================================================
    # PROPERTIES - Component access
    # =========================================================================

    @property
    def r(self):
        """Scalar (real) part."""
        return self._r

    @r.setter
    def r(self, value) -> None:
        self._r = self._dtype.type(value)

    @property
    def v(self) -> np.ndarray:
        """Vector (imaginary) part; the array is owned by the quaternion."""
        return self._v

    @v.setter
    def v(self, value) -> None:
        self._v = np.array(as_vec3(value, self._dtype))

    @property
    def x(self):
        return self._v[0]

    @property
    def y(self):
        return self._v[1]

    @property
    def z(self):
        return self._v[2]

    @property
    def dtype(self) -> np.dtype:
        """Element type of the quaternion."""
        return self._dtype

    @property
    def components(self) -> np.ndarray:
        """Fresh array [r, x, y, z]."""
        return np.concatenate(([self._r], self._v)).astype(self._dtype)

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int):
        """q[0] is r; q[1], q[2], q[3] are v.x, v.y, v.z."""
        index = _check_index(index)
        if index == 0:
            return self._r
        if 1 <= index <= 3:
            return self._v[index - 1]
        raise IndexError(f"Quaternion index out of range: {index}")

    def __setitem__(self, index: int, value) -> None:
        index = _check_index(index)
        if index == 0:
            self._r = self._dtype.type(value)
        elif 1 <= index <= 3:
            self._v[index - 1] = value
        else:
            raise IndexError(f"Quaternion index out of range: {index}")

    def __iter__(self):
        yield self._r
        yield from self._v

    # =========================================================================
    # STATIC FACTORY METHODS
    # =========================================================================

    @classmethod
    def identity(cls, dtype=None) -> 'Quaternion':
        """
        Create the identity quaternion (1, 0, 0, 0).

        It is the multiplicative identity element: q * identity = q.
        """
        return cls(dtype=dtype)

    @classmethod
    def from_axis_angle(cls, axis, angle: float, dtype=None) -> 'Quaternion':
        """
        Create a quaternion rotating by ``angle`` radians about ``axis``.

        See set_axis_angle() for the zero-axis behaviour.
        """
        return cls(dtype=dtype).set_axis_angle(axis, angle)

    @classmethod
    def from_rotation(cls, from_dir, to_dir, dtype=None) -> 'Quaternion':
        """Create the quaternion that rotates ``from_dir`` onto ``to_dir``."""
        return cls(dtype=dtype).set_rotation(from_dir, to_dir)

    @classmethod
    def from_matrix(cls, matrix, dtype=None) -> 'Quaternion':
        """
        Extract the quaternion of a rotation matrix.

        Uses the trace to pick the numerically stable branch. When the trace
        is positive, r is the largest component and is computed first:

            s = sqrt(trace + 1),  r = s / 2,  v = (off-diagonal diffs) * 0.5/s

        Otherwise the largest diagonal element m[i][i] selects the vector
        component q_i to compute first, which keeps the divisor away from
        zero for rotations near 180 degrees:

            s   = sqrt(m[i][i] - (m[j][j] + m[k][k]) + 1)
            q_i = s / 2
            r   = (m[j][k] - m[k][j]) * 0.5/s
            q_j = (m[i][j] + m[j][i]) * 0.5/s
            q_k = (m[i][k] + m[k][i]) * 0.5/s

        where (i, j, k) is a cyclic permutation of (0, 1, 2). No
        orthogonality check is made: an approximately orthogonal matrix
        yields the best-fit quaternion of its rotation part.

        Parameters
        ----------
        matrix : array_like
            3x3 or 4x4 rotation matrix in row-vector convention. Only the
            upper-left 3x3 block of a 4x4 matrix is read.
        dtype : optional
            Element type of the result. Defaults to the matrix dtype when
            it is float32/float64, otherwise float64.

        Returns
        -------
        Quaternion
            Unit quaternion (up to the orthogonality of the input).

        Raises
        ------
        ValueError
            If the matrix is not 3x3 or 4x4.
        """
        m = np.asarray(matrix)
        if m.shape not in ((3, 3), (4, 4)):
            raise ValueError(f"Matrix must be 3x3 or 4x4, got shape {m.shape}")

        dtype = cls._resolve_class_dtype(dtype)
        if dtype is None and m.dtype.name in ('float32', 'float64'):
            dtype = m.dtype
        dtype = resolve_dtype(dtype)
        m = m[:3, :3].astype(dtype)

        t = dtype.type
        half = t(0.5)
        one = t(1)
        trace = m[0, 0] + m[1, 1] + m[2, 2]

        if trace > 0:
            s = np.sqrt(trace + one)
            r = s * half
            s = half / s
            v = np.array([
                (m[1, 2] - m[2, 1]) * s,
                (m[2, 0] - m[0, 2]) * s,
                (m[0, 1] - m[1, 0]) * s,
            ], dtype=dtype)
            return cls(r, v, dtype=dtype)

        # Largest diagonal element picks the leading vector component
        i = 0
        if m[1, 1] > m[0, 0]:
            i = 1
        if m[2, 2] > m[i, i]:
            i = 2
        j = (i + 1) % 3
        k = (j + 1) % 3

        s = np.sqrt((m[i, i] - (m[j, j] + m[k, k])) + one)
        v = np.zeros(3, dtype=dtype)
        v[i] = s * half
        if s != 0:
            s = half / s
        r = (m[j, k] - m[k, j]) * s
        v[j] = (m[i, j] + m[j, i]) * s
        v[k] = (m[i, k] + m[k, i]) * s
        return cls(r, v, dtype=dtype)

    # =========================================================================
    # PRECISION BRIDGE
    # =========================================================================

    def astype(self, dtype) -> 'Quaternion':
        """
        Convert to another element type.

        Each component is cast individually; there is no rescaling or
        renormalization. Exact when the target is at least as wide.

        Returns
        -------
        Quatf or Quatd
            The pinned-precision class matching ``dtype``.
        """
        return _PINNED_CLASSES[resolve_dtype(dtype).name](self)

    def copy(self) -> 'Quaternion':
        """Return an independent copy of this quaternion."""
        return self._make(self._r, self._v)

    __copy__ = copy

    def __deepcopy__(self, memo) -> 'Quaternion':
        return self.copy()

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def conjugate(self) -> 'Quaternion':
        """
        Return the conjugate (r, -v).

        For unit quaternions the conjugate equals the inverse and represents
        the reverse rotation.
        """
        return self._make(self._r, -self._v)

    def add(self, other: 'Quaternion') -> 'Quaternion':
        """Component-wise sum."""
        return self._make(self._r + other._r, self._v + other._v)

    def sub(self, other: 'Quaternion') -> 'Quaternion':
        """Component-wise difference."""
        return self._make(self._r - other._r, self._v - other._v)

    def scale(self, s) -> 'Quaternion':
        """Multiply every component by the scalar ``s``."""
        s = self._dtype.type(s)
        return self._make(self._r * s, self._v * s)

    def _div_scalar(self, s) -> 'Quaternion':
        s = self._dtype.type(s)
        return self._make(self._r / s, self._v / s)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other.

            (r1, v1) * (r2, v2) = (r1*r2 - v1.v2,  r1*v2 + r2*v1 + v1 x v2)

        Quaternion multiplication is NOT commutative: the cross product
        term changes sign when the operands are swapped.
        """
        r1, v1 = self._r, self._v
        r2, v2 = other._r, other._v
        return self._make(r1 * r2 - dot(v1, v2), r1 * v2 + r2 * v1 + cross(v1, v2))

    def divide(self, other: 'Quaternion') -> 'Quaternion':
        """Quaternion division self * other.inverse()."""
        return self.multiply(other.inverse())

    def dot(self, other: 'Quaternion'):
        """4-D dot product r1*r2 + v1.v2."""
        return self._dtype.type(self._r * other._r + dot(self._v, other._v))

    def length(self):
        """
        Euclidean norm of the four components.

        Returns
        -------
        numpy floating scalar
            sqrt(r^2 + x^2 + y^2 + z^2), computed on a rescaled copy when
            the squares would underflow or overflow.
        """
        return self._dtype.type(norm(self.components))

    def normalize(self) -> 'Quaternion':
        """
        Scale this quaternion in place to unit length and return it.

        A quaternion of exactly zero length has no direction; it becomes the
        identity (1, 0, 0, 0).
        """
        comps = self.components
        if not comps.any():
            logger.debug("normalize() on a zero-length quaternion; using identity")
            self._set_identity()
            return self
        comps = unit(comps)
        self._set(comps[0], comps[1:])
        return self

    def normalized(self) -> 'Quaternion':
        """Return a unit-length copy (see normalize())."""
        return self.copy().normalize()

    def invert(self) -> 'Quaternion':
        """
        Replace this quaternion by its multiplicative inverse and return it.

            q^-1 = conjugate(q) / (q ^ q)

        A quaternion of exactly zero length has no inverse; it becomes the
        identity (1, 0, 0, 0).
        """
        comps = self.components
        if not comps.any():
            logger.debug("invert() on a zero-length quaternion; using identity")
            self._set_identity()
            return self

        qdot = squared_norm(comps)
        if qdot < 2 * float_traits(self._dtype).tiny or not np.isfinite(qdot):
            # q^-1 = conjugate(u) / |q| with u = q / |q|, avoiding |q|^2
            n = norm(comps)
            u = unit(comps)
            self._set(u[0] / n, -u[1:] / n)
            return self

        self._set(self._r / qdot, -self._v / qdot)
        return self

    def inverse(self) -> 'Quaternion':
        """Return the multiplicative inverse (see invert())."""
        return self.copy().invert()

    # =========================================================================
    # AXIS-ANGLE CODEC
    # =========================================================================

    def set_axis_angle(self, axis, angle: float) -> 'Quaternion':
        """
        Set this quaternion to a rotation by ``angle`` radians about ``axis``.

            r = cos(angle/2),  v = sin(angle/2) * axis / |axis|

        The axis need not be unit length. A zero-length axis describes no
        rotation, so the quaternion becomes the identity.

        Returns
        -------
        Quaternion
            self, for chaining.
        """
        n = normalized(as_vec3(axis, self._dtype))
        if not n.any():
            logger.debug("set_axis_angle() with a zero-length axis; using identity")
            self._set_identity()
            return self

        half = self._dtype.type(angle) / self._dtype.type(2)
        self._set(np.cos(half), np.sin(half) * n)
        return self

    def axis(self) -> np.ndarray:
        """
        Unit rotation axis, v / |v|.

        |v| is computed on a rescaled copy when its square would fall into
        the denormal range, so the axis of a rotation by an angle as small
        as 1e-157 (float64) is still an exact unit vector.

        Returns
        -------
        np.ndarray
            Unit 3-vector. When v is exactly zero (no rotation) the axis is
            undefined and [0, 0, 1] is returned by convention.
        """
        n = normalized(self._v)
        if not n.any():
            logger.debug("axis() of a quaternion with zero vector part; using +Z")
            return np.array([0, 0, 1], dtype=self._dtype)
        return n

    def angle(self):
        """
        Rotation angle in radians.

            angle = 2 * atan2(|v|, r)

        Unlike 2*acos(r), this has no domain problem when rounding pushes r
        slightly past +/-1 and keeps full relative precision as |v| -> 0.
        It also does not require unit length: scaling r and v by the same
        factor leaves the angle unchanged. The sign of r is kept, so the
        result lies in [0, 2*pi].
        """
        t = self._dtype.type
        return t(t(2) * np.arctan2(norm(self._v), self._r))

    def to_axis_angle(self) -> Tuple[np.ndarray, float]:
        """Return (axis(), angle())."""
        return (self.axis(), self.angle())

    def set_rotation(self, from_dir, to_dir) -> 'Quaternion':
        """
        Set this quaternion to the rotation that carries ``from_dir`` onto
        ``to_dir`` about the axis from_dir x to_dir.

        Neither direction needs to be unit length. The half-vector
        construction below is only accurate for angles up to about pi/2,
        so larger angles are split in two steps through the bisector. For
        exactly opposite directions the rotation is by pi about an axis
        orthogonal to ``from_dir``.
        A zero-length direction defines no rotation, so the quaternion
        becomes the identity.

        Returns
        -------
        Quaternion
            self, for chaining.
        """
        f0 = normalized(as_vec3(from_dir, self._dtype))
        t0 = normalized(as_vec3(to_dir, self._dtype))
        if not f0.any() or not t0.any():
            logger.debug("set_rotation() with a zero-length direction; using identity")
            self._set_identity()
            return self

        if dot(f0, t0) >= 0:
            r, v = self._half_vector_rotation(f0, t0)
            self._set(r, v)
            return self

        h0 = normalized(f0 + t0)
        if h0.any():
            r1, v1 = self._half_vector_rotation(f0, h0)
            r2, v2 = self._half_vector_rotation(h0, t0)
            self._set(r1, v1)
            product = self.multiply(self._make(r2, v2))
            self._set(product._r, product._v)
            return self

        # Opposite directions: any axis orthogonal to f0 works. Cross with
        # the basis vector along f0's smallest component.
        f02 = f0 * f0
        if f02[0] <= f02[1] and f02[0] <= f02[2]:
            basis = (1, 0, 0)
        elif f02[1] <= f02[2]:
            basis = (0, 1, 0)
        else:
            basis = (0, 0, 1)
        self._set(0, normalized(cross(f0, np.array(basis, dtype=self._dtype))))
        return self

    @staticmethod
    def _half_vector_rotation(f0: np.ndarray, t0: np.ndarray):
        # With h0 halfway between f0 and t0 (angle phi to each):
        # f0 . h0 = cos(phi) and f0 x h0 = sin(phi) * n, i.e. a rotation
        # by 2*phi about n. Needs unit inputs at most ~pi/2 apart.
        h0 = normalized(f0 + t0)
        return dot(f0, h0), cross(f0, h0)

    # =========================================================================
    # ROTATION OPERATIONS
    # =========================================================================

    def rotate_vector(self, p) -> np.ndarray:
        """
        Rotate a 3D vector by this quaternion.

            p' = (q * (0, p) * q^-1).v

        Equivalent to p @ q.to_matrix33() for a unit quaternion.
        """
        pure = self._make(0, as_vec3(p, self._dtype))
        return self.multiply(pure).multiply(self.inverse())._v

    def log(self) -> 'Quaternion':
        """
        Logarithm of a unit quaternion.

        For q = (cos t, n sin t) this is the pure quaternion (0, n t).
        """
        t = self._dtype.type
        theta = np.arccos(np.clip(self._r, t(-1), t(1)))
        if theta == 0:
            return self._make(0, self._v)

        sintheta = np.sin(theta)
        # theta / sin(theta) would overflow
        if abs(sintheta) < 1 and abs(theta) >= float_traits(self._dtype).max * abs(sintheta):
            k = t(1)
        else:
            k = theta / sintheta
        return self._make(0, self._v * k)

    def exp(self) -> 'Quaternion':
        """
        Exponential of a pure quaternion (0, n t): (cos t, n sin t).

        The scalar part of the receiver is ignored.
        """
        t = self._dtype.type
        theta = norm(self._v)
        sintheta = np.sin(theta)
        # sin(theta) / theta would overflow
        if abs(theta) < 1 and abs(sintheta) >= float_traits(self._dtype).max * abs(theta):
            k = t(1)
        else:
            k = sintheta / theta
        return self._make(np.cos(theta), self._v * k)

    # =========================================================================
    # MATRIX CODEC
    # =========================================================================

    def to_matrix33(self) -> np.ndarray:
        """
        Convert to a 3x3 rotation matrix (row-vector convention).

            M = | 1-2(y^2+z^2)   2(xy+zr)      2(zx-yr)     |
                | 2(xy-zr)       1-2(z^2+x^2)  2(yz+xr)     |
                | 2(zx+yr)       2(yz-xr)      1-2(y^2+x^2) |

        Row i of M is the image of basis vector i, so p' = p @ M.

        Returns
        -------
        np.ndarray
            3x3 matrix with the quaternion's dtype.
        """
        r = self._r
        x, y, z = self._v
        one = self._dtype.type(1)
        two = self._dtype.type(2)

        # Pre-compute products that appear multiple times
        xx = x * x
        yy = y * y
        zz = z * z
        xy = x * y
        zx = z * x
        yz = y * z
        xr = x * r
        yr = y * r
        zr = z * r

        return np.array([
            [one - two * (yy + zz),  two * (xy + zr),        two * (zx - yr)],
            [two * (xy - zr),        one - two * (zz + xx),  two * (yz + xr)],
            [two * (zx + yr),        two * (yz - xr),        one - two * (yy + xx)]
        ], dtype=self._dtype)

    def to_matrix44(self) -> np.ndarray:
        """4x4 homogeneous rotation: to_matrix33() in the upper-left block."""
        m = np.eye(4, dtype=self._dtype)
        m[:3, :3] = self.to_matrix33()
        return m

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def equal_with_abs_error(self, other: 'Quaternion', e) -> bool:
        """True if every component differs from ``other`` by at most e."""
        return bool(np.all(np.abs(self.components - other.components) <= e))

    def equal_with_rel_error(self, other: 'Quaternion', e) -> bool:
        """True if every component differs by at most e * |own component|."""
        mine = self.components
        return bool(np.all(np.abs(mine - other.components) <= e * np.abs(mine)))

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return self.sub(other)
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        """
        Negate all components.

        -q represents the same rotation as q.
        """
        return self._make(-self._r, -self._v)

    def __invert__(self) -> 'Quaternion':
        """~q is the conjugate."""
        return self.conjugate()

    def __mul__(self, other) -> 'Quaternion':
        """
        - Quaternion * Quaternion -> Hamilton product
        - Quaternion * scalar -> component-wise scaling
        """
        if isinstance(other, Quaternion):
            return self.multiply(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other) -> 'Quaternion':
        """scalar * Quaternion."""
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other) -> 'Quaternion':
        """
        - Quaternion / Quaternion -> self * other.inverse()
        - Quaternion / scalar -> component-wise division
        """
        if isinstance(other, Quaternion):
            return self.divide(other)
        if isinstance(other, numbers.Real):
            return self._div_scalar(other)
        return NotImplemented

    def __xor__(self, other: 'Quaternion'):
        """q1 ^ q2 is the 4-D dot product."""
        if isinstance(other, Quaternion):
            return self.dot(other)
        return NotImplemented

    def _assign(self, result) -> 'Quaternion':
        if result is NotImplemented:
            return NotImplemented
        self._r, self._v = result._r, result._v
        return self

    def __iadd__(self, other):
        return self._assign(self.__add__(other))

    def __isub__(self, other):
        return self._assign(self.__sub__(other))

    def __imul__(self, other):
        return self._assign(self.__mul__(other))

    def __itruediv__(self, other):
        return self._assign(self.__truediv__(other))

    def __eq__(self, other: object) -> bool:
        """
        Exact component-wise equality.

        Use equal_with_abs_error() / equal_with_rel_error() for tolerance
        comparisons; q and -q compare unequal even though they describe
        the same rotation.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(self._r == other._r and np.array_equal(self._v, other._v))

    def __repr__(self) -> str:
        """
        Unambiguous string representation for debugging.

        Format: Quatd(r, x, y, z)
        """
        return (f"{type(self).__name__}({float(self._r)!r}, {float(self.x)!r}, "
                f"{float(self.y)!r}, {float(self.z)!r})")

    def __str__(self) -> str:
        """Components plus the equivalent rotation angle in degrees."""
        angle_deg = float(self.angle()) * RAD2DEG
        return (f"[{self._r:+.6f}, {self.x:+.6f}, {self.y:+.6f}, "
                f"{self.z:+.6f}] (rot={angle_deg:.2f} deg)")


class Quatf(Quaternion):
    """Single-precision (float32) quaternion."""

    _DTYPE = np.dtype(np.float32)


class Quatd(Quaternion):
    """Double-precision (float64) quaternion."""

    _DTYPE = np.dtype(np.float64)


_PINNED_CLASSES = {
    'float32': Quatf,
    'float64': Quatd,
}
