#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for vector and point components

These type hints are provided to ensure a consistent convention of
distinguishing between the numpy arrays used for storage and the array-like
sequences accepted as input.

ComponentArray is the 1D numpy array holding the components
ComponentValues is any sequence of numbers accepted by a constructor
ComponentType is a python type, numpy dtype or dtype name for the components
Scalar is a number used to scale components

.. Created on Mon Mar 11 10:48:54 2024

.. codeauthor: Michael J. Hayford
"""
import numbers

import numpy as np
import numpy.typing as npt

ComponentArray = npt.NDArray
ComponentValues = npt.ArrayLike
ComponentType = type | np.dtype | str
Scalar = numbers.Real | np.generic
