#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2024 Michael J. Hayford
""" numeric cast layer for vector and point components

    Components are stored as 1D numpy arrays. The functions in this module
    decide which dtype a combination of components and scalars produces, and
    perform the conversions between the integer and floating point
    instantiations.

    The rules follow the default numeric cast behavior of compiled code:

        - scaling by a value of the same kind keeps the component type
        - scaling an integer by a float promotes to float64 when a new value
          is produced; in place, it is an error
        - integer division truncates toward zero
        - float to integer casts truncate toward zero, without overflow
          checks

.. Created on Mon Mar 11 10:02:18 2024

.. codeauthor: Michael J. Hayford
"""

import logging
import numbers

import numpy as np

from rtgeom.coord_geometry_types import (ComponentArray, ComponentValues,
                                         ComponentType, Scalar)
from rtgeom.core import model_constants as mc
from rtgeom.core.geomerror import DimensionMismatchError, ComponentTypeError

logger = logging.getLogger(__name__)


def component_dtype(t: ComponentType) -> np.dtype:
    """ return the component dtype for a python type, dtype or dtype name

    Python int maps to int32 and python float maps to float64, matching the
    integer and floating point instantiations of the vector and point types.
    """
    if t is int:
        return mc.INT_DTYPE
    if t is float:
        return mc.FLOAT_DTYPE
    try:
        dtype = np.dtype(t)
    except TypeError as err:
        raise ComponentTypeError(t, None,
                                 f"{t!r} is not a component type") from err
    if dtype.kind not in 'iuf':
        raise ComponentTypeError(dtype, None,
                                 f"{dtype} is not a numeric component type")
    return dtype


def is_integer_dtype(dtype) -> bool:
    return np.dtype(dtype).kind in 'iu'


def _scalar_dtype(dtype, scalar):
    if isinstance(scalar, np.generic):
        return scalar.dtype
    if isinstance(scalar, bool):
        raise ComponentTypeError(dtype, type(scalar))
    if isinstance(scalar, numbers.Integral):
        return dtype if is_integer_dtype(dtype) else mc.FLOAT_DTYPE
    if isinstance(scalar, numbers.Real):
        return mc.FLOAT_DTYPE
    raise ComponentTypeError(dtype, type(scalar))


def result_dtype(dtype: np.dtype, scalar: Scalar) -> np.dtype:
    """ return the dtype produced by scaling `dtype` components by `scalar`

    Python ints keep the component dtype, python floats promote integer
    components to float64. numpy scalars follow numpy's promotion rules.
    """
    dtype = np.dtype(dtype)
    return np.result_type(dtype, _scalar_dtype(dtype, scalar))


def check_same_kind(dtype, scalar):
    """ raise ComponentTypeError if an in place scale would narrow `dtype` """
    res_dtype = result_dtype(dtype, scalar)
    if not np.can_cast(res_dtype, dtype, casting='same_kind'):
        raise ComponentTypeError(
            dtype, res_dtype,
            f"can't scale {dtype} components in place by a {res_dtype} "
            "value")


def scale(array: ComponentArray, scalar: Scalar) -> ComponentArray:
    """ return a new array, `array` * `scalar`, in the result dtype """
    res_dtype = result_dtype(array.dtype, scalar)
    return np.multiply(array, scalar, dtype=res_dtype, casting='unsafe')


def truncating_divide(array: ComponentArray,
                      scalar: Scalar) -> ComponentArray:
    """ return a new array, `array` / `scalar`, in the result dtype

    Integer division truncates toward zero and raises ZeroDivisionError
    for a zero divisor. Floating point division follows IEEE semantics,
    i.e. division by zero produces inf or nan.
    """
    res_dtype = result_dtype(array.dtype, scalar)
    if is_integer_dtype(res_dtype):
        if scalar == 0:
            raise ZeroDivisionError("integer division by zero")
        # floor division, then step negative inexact quotients toward zero
        quotient = array // scalar
        inexact = (quotient < 0) & (quotient * scalar != array)
        return np.where(inexact, quotient + 1, quotient).astype(res_dtype)

    with np.errstate(divide='ignore', invalid='ignore'):
        return np.true_divide(array, scalar, dtype=res_dtype,
                              casting='unsafe')


def cast_components(array, dtype):
    """ return a copy of `array` converted to component type `dtype`

    A float to integer conversion truncates toward zero. There is no
    overflow check; out of range values are whatever numpy produces.
    """
    dtype = component_dtype(dtype)
    if not is_integer_dtype(array.dtype) and is_integer_dtype(dtype):
        logger.debug("narrowing cast %s -> %s of %s",
                     array.dtype, dtype, array)
        with np.errstate(invalid='ignore'):
            return np.trunc(array).astype(dtype)
    return array.astype(dtype)


def as_components(values: ComponentValues, dim: int,
                  dtype: np.dtype) -> ComponentArray:
    """ return a new 1D array of `dim` `dtype` components built from values

    Raises:
        DimensionMismatchError: if values doesn't have exactly `dim` entries
    """
    arr = np.array(values)
    if arr.ndim != 1 or arr.shape[0] != dim:
        actual = arr.shape[0] if arr.ndim == 1 else arr.shape
        raise DimensionMismatchError(dim, actual)
    if arr.dtype.kind not in 'iuf':
        raise ComponentTypeError(dtype, arr.dtype)
    return cast_components(arr, dtype)
