#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2024 Michael J. Hayford
""" Fixed length component storage shared by vectors and points

    :class:`Components` holds exactly :attr:`~Components.dim` numbers of type
    :attr:`~Components.dtype` in a 1D numpy array. The dimension and
    component type are class attributes; concrete classes set them and the
    storage never changes length.

    Vectors and points share this storage but are distinct types: equality
    and arithmetic only combine values of the same kind.

.. Created on Mon Mar 11 11:25:37 2024

.. codeauthor: Michael J. Hayford
"""

import numpy as np

from rtgeom.core import model_constants as mc
from rtgeom.core import numeric
from rtgeom.core.geomerror import DimensionMismatchError, ComponentTypeError


class Components:
    """ Fixed length sequence of numeric components.

    Attributes:
        dim: number of components, fixed for the class
        dtype: numpy dtype of the components, fixed for the class
    """
    dim = None
    dtype = None

    # mutable values are not hashable
    __hash__ = None
    # numpy operands defer to the operators defined here
    __array_ufunc__ = None

    def __init__(self, values):
        self._check_concrete()
        if isinstance(values, Components) and not self._same_kind(values):
            raise TypeError(f"can't build {type(self).__name__} from "
                            f"{type(values).__name__}")
        self._v = numeric.as_components(values, self.dim, self.dtype)

    @classmethod
    def _from_array(cls, arr):
        """ wrap `arr` without copying; arr must already be dim x dtype """
        obj = cls.__new__(cls)
        obj._v = arr
        return obj

    @classmethod
    def _check_concrete(cls):
        if cls.dim is None or cls.dtype is None:
            raise TypeError(f"{cls.__name__} has no fixed dimension and "
                            "component type")

    @classmethod
    def zero(cls):
        """ return a value with every component set to 0 """
        cls._check_concrete()
        return cls._from_array(np.zeros(cls.dim, dtype=cls.dtype))

    @property
    def is_integer(self):
        return numeric.is_integer_dtype(self.dtype)

    def _check_index(self, i):
        if isinstance(i, (bool, np.bool_)) or not isinstance(
                i, (int, np.integer)):
            raise TypeError(f"{type(self).__name__} indices must be "
                            f"integers, not {type(i).__name__}")
        if not 0 <= i < self.dim:
            raise IndexError(f"{type(self).__name__} index {i} out of range "
                             f"[0, {self.dim})")

    def __getitem__(self, i):
        self._check_index(i)
        return self._v[i].item()

    def __setitem__(self, i, value):
        self._check_index(i)
        if self.is_integer and not isinstance(value, (int, np.integer)):
            raise ComponentTypeError(self.dtype, type(value))
        self._v[i] = value

    def __len__(self):
        return self.dim

    def __iter__(self):
        return iter(self._v.tolist())

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            dtype = self.dtype
        if copy is False:
            if np.dtype(dtype) != self.dtype:
                raise ValueError(f"can't convert {type(self).__name__} "
                                 f"to {dtype} without a copy")
            return self._v
        return self._v.astype(dtype)

    def to_array(self):
        """ return a copy of the components as a numpy array """
        return self._v.copy()

    def tolist(self):
        return self._v.tolist()

    def _same_kind(self, other):
        """ True if `other` is the same kind of value, i.e. vector or point """
        raise NotImplementedError

    def _check_operand(self, other):
        """ raise if `other` can't be combined component-wise with self """
        if other.dim != self.dim:
            raise DimensionMismatchError(self.dim, other.dim)
        if other.dtype != self.dtype:
            raise ComponentTypeError(self.dtype, other.dtype)

    def __eq__(self, other):
        if not isinstance(other, Components) or not self._same_kind(other):
            return NotImplemented
        if other.dim != self.dim:
            return False
        return bool(np.array_equal(self._v, other._v))

    def _cast_type(self, dtype):
        """ return the class with the same dimension and component `dtype` """
        raise NotImplementedError

    def astype(self, dtype):
        """ return a copy converted to component type `dtype`

        Conversion from float to integer truncates toward zero.
        """
        new_type = self._cast_type(numeric.component_dtype(dtype))
        return new_type._from_array(
            numeric.cast_components(self._v, new_type.dtype))

    def to_int(self):
        return self.astype(mc.INT_DTYPE)

    def to_float(self):
        return self.astype(mc.FLOAT_DTYPE)

    def __str__(self):
        return '[' + ', '.join(str(c) for c in self._v.tolist()) + ']'

    def __repr__(self):
        return "{!s}({!r})".format(type(self).__name__, self._v.tolist())
