#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2024 Michael J. Hayford
""" numeric model constants

.. Created on Mon Mar 11 09:12:40 2024

.. codeauthor: Michael J. Hayford
"""

import numpy as np

# component types for the integer and floating point instantiations
INT_DTYPE = np.dtype(np.int32)
FLOAT_DTYPE = np.dtype(np.float64)

# component indices
x, y, z = range(3)

# dimensions of the named vector and point types
dim2, dim3 = 2, 3
