#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2024 Michael J. Hayford
""" Support for geometry exception handling

.. Created on Mon Mar 11 09:40:02 2024

.. codeauthor: Michael J. Hayford
"""


class GeometryError(Exception):
    """ Exception raised when combining vectors and points """


class DimensionMismatchError(GeometryError, ValueError):
    """ Exception raised when the number of components doesn't match """
    def __init__(self, expected, actual, msg=None):
        self.expected = expected
        self.actual = actual
        if msg is None:
            msg = f"expected {expected} components, got {actual}"
        super().__init__(msg)


class ComponentTypeError(GeometryError, TypeError):
    """ Exception raised when component types can't be combined """
    def __init__(self, dtype, other, msg=None):
        self.dtype = dtype
        self.other = other
        if msg is None:
            msg = f"can't combine {dtype} components with {other}"
        super().__init__(msg)
