# -*- coding: utf-8 -*-
""" The **rtgeom** geometric primitives package for ray tracing

    The vector and point types are contained in the :mod:`~.core`
    subpackage:

        - :mod:`~.core.vec`: fixed size vectors, the cross product and
          :func:`~.core.vec.coordinate_system`
        - :mod:`~.core.point`: 2D and 3D points
        - :mod:`~.core.numeric`: conversions between the integer and floating
          point instantiations
        - :mod:`~.core.geomerror`: exceptions raised when values can't be
          combined

    The :mod:`~.util` subpackage provides a shared, lock protected container
    for state used across threads, :mod:`~.util.shared`.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'
