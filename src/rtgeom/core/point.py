#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2024 Michael J. Hayford
""" Module for 2D and 3D points

    A point is a position. It has the same storage as a vector of the same
    dimension but a different set of operations:

        - point + vector -> point, point - vector -> point
        - point - point -> vector
        - point + point -> point, for accumulating and averaging positions
        - distance, lerp, component-wise min/max/abs, floor/ceil

    Points have no dot or cross product and no normalization. The only way to
    get a vector from points is subtraction.

.. Created on Tue Mar 12 08:55:31 2024

.. codeauthor: Michael J. Hayford
"""

import numbers

import numpy as np

from rtgeom.core import model_constants as mc
from rtgeom.core import numeric
from rtgeom.core.components import Components
from rtgeom.core.geomerror import DimensionMismatchError
from rtgeom.core.vec import Vector, vector_type


def _is_scalar(value):
    return isinstance(value, (numbers.Real, np.generic))


class Point(Components):
    """ Fixed size point of numeric components. """

    def _same_kind(self, other):
        return isinstance(other, Point)

    def _cast_type(self, dtype):
        return point_type(self.dim, dtype)

    def _operand(self, other, kinds):
        if not isinstance(other, kinds):
            return False
        self._check_operand(other)
        return True

    @classmethod
    def _build(cls, arr):
        """ wrap a copy of `arr`, cast to cls.dtype when cls has one """
        dim = arr.shape[0] if cls.dim is None else cls.dim
        if arr.shape[0] != dim:
            raise DimensionMismatchError(dim, arr.shape[0])
        dtype = arr.dtype if cls.dtype is None else cls.dtype
        p_type = point_type(dim, dtype)
        return p_type._from_array(numeric.cast_components(arr, p_type.dtype))

    @classmethod
    def from_vector(cls, vec):
        """ return the position reached by displacing the origin by `vec` """
        if not isinstance(vec, Vector):
            raise TypeError(f"expected a vector, got {type(vec).__name__}")
        return cls._build(vec._v)

    def set(self, other):
        """ copy the components of the point `other` into this point """
        if not self._operand(other, Point):
            raise TypeError(f"can't set {type(self).__name__} from "
                            f"{type(other).__name__}")
        self._v[:] = other._v

    def __add__(self, other):
        if not self._operand(other, (Point, Vector)):
            return NotImplemented
        return type(self)._from_array(self._v + other._v)

    def __iadd__(self, other):
        if not self._operand(other, (Point, Vector)):
            return NotImplemented
        self._v += other._v
        return self

    def __sub__(self, other):
        if isinstance(other, Point):
            self._check_operand(other)
            return vector_type(self.dim, self.dtype)._from_array(
                self._v - other._v)
        if not self._operand(other, Vector):
            return NotImplemented
        return type(self)._from_array(self._v - other._v)

    def __isub__(self, other):
        if isinstance(other, Point):
            raise TypeError("point - point is a vector; can't subtract a "
                            "point in place")
        if not self._operand(other, Vector):
            return NotImplemented
        self._v -= other._v
        return self

    def __neg__(self):
        return type(self)._from_array(-self._v)

    def __mul__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        result = numeric.scale(self._v, scalar)
        return point_type(self.dim, result.dtype)._from_array(result)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        result = numeric.truncating_divide(self._v, scalar)
        return point_type(self.dim, result.dtype)._from_array(result)

    def __imul__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        numeric.check_same_kind(self.dtype, scalar)
        self._v[:] = numeric.scale(self._v, scalar)
        return self

    def __itruediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        numeric.check_same_kind(self.dtype, scalar)
        self._v[:] = numeric.truncating_divide(self._v, scalar)
        return self

    def distance(self, other):
        """ return the euclidean distance to `other` as a float """
        return (self - other).length()

    def distance_squared(self, other):
        return (self - other).length_squared()

    @staticmethod
    def lerp(ratio, p1, p2):
        """ return p1*(1 - ratio) + p2*ratio as a float64 point

        `ratio` is not clamped; values outside [0, 1] extrapolate.
        """
        p1 = p1.to_float()
        p2 = p2.to_float()
        return p1*(1. - ratio) + p2*ratio

    def min(self, other):
        """ return the component-wise minimum of self and `other` """
        if not self._operand(other, Point):
            raise TypeError(f"expected a point, got {type(other).__name__}")
        return type(self)._from_array(np.minimum(self._v, other._v))

    def max(self, other):
        """ return the component-wise maximum of self and `other` """
        if not self._operand(other, Point):
            raise TypeError(f"expected a point, got {type(other).__name__}")
        return type(self)._from_array(np.maximum(self._v, other._v))

    def abs(self):
        return type(self)._from_array(np.abs(self._v))


class FloatPoint(Point):
    """ operations only defined for floating point components """

    def floor(self):
        return type(self)._from_array(np.floor(self._v))

    def ceil(self):
        return type(self)._from_array(np.ceil(self._v))


class Point2(Point):
    """ 2D point """
    dim = mc.dim2

    @property
    def x(self):
        return self._v[mc.x].item()

    @property
    def y(self):
        return self._v[mc.y].item()

    @classmethod
    def from_point3(cls, pt):
        """ return the 2D point made of the x and y components of `pt` """
        if not isinstance(pt, Point3):
            raise TypeError(f"expected a Point3, got {type(pt).__name__}")
        return cls._build(pt._v[:mc.dim2])


class Point3(Point):
    """ 3D point """
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

    def to_point2(self):
        """ return the 2D point made of the x and y components """
        return Point2.from_point3(self)

    def permute(self, x, y, z):
        """ return a point of the components at indices x, y and z """
        for indx in (x, y, z):
            self._check_index(indx)
        return type(self)._from_array(self._v[[x, y, z]])


class Point2i(Point2):
    dtype = mc.INT_DTYPE


class Point2f(Point2, FloatPoint):
    dtype = mc.FLOAT_DTYPE


class Point3i(Point3):
    dtype = mc.INT_DTYPE


class Point3f(Point3, FloatPoint):
    dtype = mc.FLOAT_DTYPE


_point_types = {
    (mc.dim2, mc.INT_DTYPE): Point2i,
    (mc.dim2, mc.FLOAT_DTYPE): Point2f,
    (mc.dim3, mc.INT_DTYPE): Point3i,
    (mc.dim3, mc.FLOAT_DTYPE): Point3f,
    }


def point_type(dim, dtype):
    """ return the point class with `dim` components of type `dtype`

    Only 2D and 3D points are defined. Float component types other than
    float64 get floor and ceil too.
    """
    dtype = numeric.component_dtype(dtype)
    key = dim, dtype
    pt_type = _point_types.get(key)
    if pt_type is None:
        bases = {mc.dim2: Point2, mc.dim3: Point3}
        if dim not in bases:
            raise DimensionMismatchError(
                mc.dim3, dim, f"points are 2D or 3D, not {dim}D")
        base = (bases[dim],)
        if not numeric.is_integer_dtype(dtype):
            base += (FloatPoint,)
        name = f"Point{dim}_{dtype.name}"
        pt_type = type(name, base, {'dim': dim, 'dtype': dtype})
        _point_types[key] = pt_type
    return pt_type
