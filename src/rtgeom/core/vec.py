#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2024 Michael J. Hayford
""" Fixed size numeric vectors

    Vector
        Dimension generic displacement/direction. Supports in place and by
        value arithmetic, dot product, length and normalization.

    Vector2, Vector3
        2D and 3D vectors with named x, y (and z) accessors. Vector3 adds the
        cross product and permutation.

    Vector2i, Vector2f, Vector3i, Vector3f
        int32 and float64 instantiations.

    Other dimensions and component types are available through
    :func:`vector_type`.

.. Created on Mon Mar 11 13:48:05 2024

.. codeauthor: Michael J. Hayford
"""

import numbers
from math import sqrt

import numpy as np

from rtgeom.core import model_constants as mc
from rtgeom.core import numeric
from rtgeom.core.components import Components
from rtgeom.core.geomerror import DimensionMismatchError


class Vector(Components):
    """ Fixed size vector of numeric components. """

    def _same_kind(self, other):
        return isinstance(other, Vector)

    def _cast_type(self, dtype):
        return vector_type(self.dim, dtype)

    def _operand(self, other):
        if not isinstance(other, Vector):
            return False
        self._check_operand(other)
        return True

    def set(self, values):
        """ overwrite all components from the sequence `values` """
        self._v[:] = numeric.as_components(values, self.dim, self.dtype)

    def __add__(self, other):
        if not self._operand(other):
            return NotImplemented
        return type(self)._from_array(self._v + other._v)

    def __sub__(self, other):
        if not self._operand(other):
            return NotImplemented
        return type(self)._from_array(self._v - other._v)

    def __iadd__(self, other):
        if not self._operand(other):
            return NotImplemented
        self._v += other._v
        return self

    def __isub__(self, other):
        if not self._operand(other):
            return NotImplemented
        self._v -= other._v
        return self

    def __mul__(self, scalar):
        if not isinstance(scalar, (numbers.Real, np.generic)):
            return NotImplemented
        result = numeric.scale(self._v, scalar)
        return vector_type(self.dim, result.dtype)._from_array(result)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, (numbers.Real, np.generic)):
            return NotImplemented
        result = numeric.truncating_divide(self._v, scalar)
        return vector_type(self.dim, result.dtype)._from_array(result)

    def __imul__(self, scalar):
        if not isinstance(scalar, (numbers.Real, np.generic)):
            return NotImplemented
        numeric.check_same_kind(self.dtype, scalar)
        self._v[:] = numeric.scale(self._v, scalar)
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, (numbers.Real, np.generic)):
            return NotImplemented
        numeric.check_same_kind(self.dtype, scalar)
        self._v[:] = numeric.truncating_divide(self._v, scalar)
        return self

    def __neg__(self):
        return type(self)._from_array(-self._v)

    def dot(self, other):
        """ return the dot product in the component type of the vectors """
        if not self._operand(other):
            raise TypeError(f"can't take the dot product of "
                            f"{type(self).__name__} and "
                            f"{type(other).__name__}")
        return np.dot(self._v, other._v).item()

    def abs_dot(self, other):
        return abs(self.dot(other))

    def length_squared(self):
        """ return the squared length, always computed in float64 """
        v = self._v.astype(mc.FLOAT_DTYPE)
        return float(np.dot(v, v))

    def length(self):
        return sqrt(self.length_squared())

    def normalize(self):
        """ return a float64 vector of unit length in the same direction

        The vector must have non-zero length; a zero vector produces nan
        components.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            v = self._v.astype(mc.FLOAT_DTYPE) / self.length()
        return vector_type(self.dim, mc.FLOAT_DTYPE)._from_array(v)

    def min_component(self):
        return self._v.min().item()

    def max_component(self):
        return self._v.max().item()

    def max_dimension(self):
        """ return the index of the largest component, first one on ties """
        return int(np.argmax(self._v))


class Vector2(Vector):
    """ 2D vector """
    dim = mc.dim2

    @property
    def x(self):
        return self._v[mc.x].item()

    @property
    def y(self):
        return self._v[mc.y].item()


class Vector3(Vector):
    """ 3D vector """
    dim = mc.dim3

    @property
    def x(self):
        return self._v[mc.x].item()

    @property
    def y(self):
        return self._v[mc.y].item()

    @property
    def z(self):
        return self._v[mc.z].item()

    def cross(self, other):
        """ return the right handed cross product self x other """
        if not self._operand(other):
            raise TypeError(f"can't take the cross product of "
                            f"{type(self).__name__} and "
                            f"{type(other).__name__}")
        a, b = self._v, other._v
        return type(self)._from_array(np.array(
            [a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0]], dtype=self.dtype))

    def permute(self, i, j, k):
        """ return a vector of the components at indices i, j and k """
        for indx in (i, j, k):
            self._check_index(indx)
        return type(self)._from_array(self._v[[i, j, k]])


class Vector2i(Vector2):
    dtype = mc.INT_DTYPE


class Vector2f(Vector2):
    dtype = mc.FLOAT_DTYPE


class Vector3i(Vector3):
    dtype = mc.INT_DTYPE


class Vector3f(Vector3):
    dtype = mc.FLOAT_DTYPE


_vector_types = {
    (mc.dim2, mc.INT_DTYPE): Vector2i,
    (mc.dim2, mc.FLOAT_DTYPE): Vector2f,
    (mc.dim3, mc.INT_DTYPE): Vector3i,
    (mc.dim3, mc.FLOAT_DTYPE): Vector3f,
    }


def vector_type(dim, dtype):
    """ return the vector class with `dim` components of type `dtype`

    Classes for dimensions and component types other than the named ones are
    created on first use and reused afterwards.

    Args:
        dim: number of components, >= 1
        dtype: python int or float, or a numpy integer or float dtype
    """
    dtype = numeric.component_dtype(dtype)
    if dim < 1:
        raise DimensionMismatchError(1, dim,
                                     f"vector dimension must be >= 1, "
                                     f"got {dim}")
    key = dim, dtype
    vec_type = _vector_types.get(key)
    if vec_type is None:
        base = {mc.dim2: Vector2, mc.dim3: Vector3}.get(dim, Vector)
        name = f"Vector{dim}_{dtype.name}"
        vec_type = type(name, (base,), {'dim': dim, 'dtype': dtype})
        _vector_types[key] = vec_type
    return vec_type


def coordinate_system(v1):
    """ return v2, v3 completing a right handed orthonormal basis with v1

    Args:
        v1: unit length 3D vector. Integer vectors are converted to float64.
            The length is not checked; a non-unit v1 gives a skewed result.

    Returns:
        (v2, v3): :class:`Vector3f` instances with v3 = v1 x v2
    """
    if not isinstance(v1, Vector):
        v1 = Vector3f(v1)
    if v1.dim != mc.dim3:
        raise DimensionMismatchError(mc.dim3, v1.dim)
    if v1.dtype != mc.FLOAT_DTYPE:
        v1 = v1.to_float()

    x, y, z = v1
    # branch on the larger of x and y to keep the normalization away from 0
    if abs(x) > abs(y):
        v2 = Vector3f([-z, 0., x]) / sqrt(x*x + z*z)
    else:
        v2 = Vector3f([0., z, -y]) / sqrt(y*y + z*z)

    v3 = v1.cross(v2)
    return v2, v3
