""" package supplying the vector and point value types

    The :mod:`~rtgeom.core` subpackage provides fixed size vectors and
    points with integer (int32) and floating point (float64) components:

        - vectors, :mod:`~.vec`: :class:`~.vec.Vector2i`,
          :class:`~.vec.Vector2f`, :class:`~.vec.Vector3i`,
          :class:`~.vec.Vector3f`
        - points, :mod:`~.point`: :class:`~.point.Point2i`,
          :class:`~.point.Point2f`, :class:`~.point.Point3i`,
          :class:`~.point.Point3f`
        - orthonormal basis construction with
          :func:`~.vec.coordinate_system`
        - the numeric cast layer, :mod:`~.numeric`
"""

from rtgeom.core.geomerror import (GeometryError, DimensionMismatchError,
                                   ComponentTypeError)
from rtgeom.core.vec import (Vector, Vector2, Vector3,
                             Vector2i, Vector2f, Vector3i, Vector3f,
                             vector_type, coordinate_system)
from rtgeom.core.point import (Point, Point2, Point3,
                               Point2i, Point2f, Point3i, Point3f,
                               point_type)
