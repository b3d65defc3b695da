#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for 2D and 3D points

.. Created on Thu Mar 14 14:02:47 2024

.. codeauthor: Michael J. Hayford
"""

import unittest

import numpy as np
import pytest
from pytest import approx

from rtgeom.core.point import (Point, Point2, Point3, Point2i, Point2f,
                               Point3i, Point3f, point_type)
from rtgeom.core.vec import Vector2f, Vector3i, Vector3f
from rtgeom.core.geomerror import DimensionMismatchError, ComponentTypeError


class PointArithmeticTestCase(unittest.TestCase):
    def setUp(self):
        self.p = Point3i([5, -3, 2])
        self.q = Point3i([1, 1, 1])

    def test_point_minus_point_is_vector(self):
        v = self.p - self.q
        assert type(v) is Vector3i
        assert v == Vector3i([4, -4, 1])
        assert self.q + v == self.p

        rng = np.random.default_rng(5)
        for p, q in rng.uniform(-10., 10., size=(10, 2, 3)):
            pf, qf = Point3f(p), Point3f(q)
            np.testing.assert_allclose((qf + (pf - qf)).to_array(), p,
                                       rtol=1e-12, atol=1e-12)

    def test_point_and_vector(self):
        v = Vector3i([1, 2, 3])
        assert self.p + v == Point3i([6, -1, 5])
        assert type(self.p + v) is Point3i
        assert self.p - v == Point3i([4, -5, -1])
        assert type(self.p - v) is Point3i

    def test_point_plus_point(self):
        s = self.p + self.q
        assert type(s) is Point3i
        assert s == Point3i([6, -2, 3])

    def test_in_place(self):
        p = Point3i([0, 0, 0])
        alias = p
        p += Vector3i([1, 2, 3])
        p += Point3i([1, 1, 1])
        p -= Vector3i([0, 0, 4])
        assert alias is p
        assert p == Point3i([2, 3, 0])
        with pytest.raises(TypeError):
            p -= Point3i([1, 1, 1])
        assert p == Point3i([2, 3, 0])

    def test_operand_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            self.p + Vector2f([1., 2.]).to_int()
        with pytest.raises(ComponentTypeError):
            self.p - Point3f([1., 1., 1.])
        with pytest.raises(TypeError):
            Vector3i([1, 2, 3]) - self.p

    def test_neg(self):
        assert -Point2i([1, -2]) == Point2i([-1, 2])

    def test_scale_by_value(self):
        p = Point2i([1, 3])
        half = p * 0.5
        assert type(half) is Point2f
        assert half == Point2f([0.5, 1.5])
        assert 3 * p == Point2i([3, 9])
        assert Point2i([7, -7]) / 2 == Point2i([3, -3])
        assert Point2i([1, 2]) / 2.0 == Point2f([0.5, 1.0])

    def test_scale_in_place(self):
        p = Point2i([1, 3])
        p *= 2
        assert p == Point2i([2, 6])
        p /= 4
        assert p == Point2i([0, 1])
        with pytest.raises(ComponentTypeError):
            p *= 0.5
        pf = Point2f([1., 3.])
        pf /= 2
        assert pf == Point2f([0.5, 1.5])
        pm = Point2i([np.iinfo(np.int32).min, 4])
        pm /= 4
        assert pm == Point2i([-536870912, 1])


class PointGeometryTestCase(unittest.TestCase):
    def test_distance(self):
        p0 = Point3f([0., 0., 0.])
        p1 = Point3f([3., 4., 0.])
        assert p0.distance(p1) == 5.0
        assert p0.distance_squared(p1) == 25.0
        d = Point2i([0, 0]).distance(Point2i([3, 4]))
        assert d == 5.0
        assert isinstance(d, float)

    def test_lerp(self):
        p1 = Point3f([1.5, -2.25, 3.0])
        p2 = Point3f([-4.0, 0.5, 10.0])
        assert Point3.lerp(0., p1, p2) == p1
        assert Point3.lerp(1., p1, p2) == p2

        pi1 = Point3i([0, 0, 0])
        pi2 = Point3i([2, 4, 6])
        mid = Point.lerp(0.5, pi1, pi2)
        assert type(mid) is Point3f
        assert mid == Point3f([1., 2., 3.])
        assert Point.lerp(2., pi1, pi2) == Point3f([4., 8., 12.])
        assert Point2.lerp(0.25, Point2i([0, 0]), Point2i([4, 8])) == \
            Point2f([1., 2.])

    def test_min_max(self):
        a = Point3i([1, 5, -2])
        b = Point3i([3, -1, 0])
        assert a.min(b) == Point3i([1, -1, -2])
        assert a.max(b) == Point3i([3, 5, 0])
        with pytest.raises(TypeError):
            a.min(Vector3i([0, 0, 0]))

    def test_abs(self):
        assert Point3i([5, -3, 2]).abs() == Point3i([5, 3, 2])
        assert Point2f([-0.5, 1.5]).abs() == Point2f([0.5, 1.5])

    def test_floor_ceil(self):
        p = Point3f([1.5, -1.5, 2.0])
        assert p.floor() == Point3f([1., -2., 2.])
        assert p.ceil() == Point3f([2., -1., 2.])
        assert Point2f([0.1, -0.1]).floor() == Point2f([0., -1.])
        assert not hasattr(Point3i([1, 2, 3]), 'floor')
        assert not hasattr(Point2i([1, 2]), 'ceil')

    def test_permute(self):
        assert Point3i([1, 2, 3]).permute(1, 1, 0) == Point3i([2, 2, 1])
        with pytest.raises(IndexError):
            Point3i([1, 2, 3]).permute(-1, 0, 1)
        assert not hasattr(Point2i([1, 2]), 'permute')


class PointConversionTestCase(unittest.TestCase):
    def test_int_float_round_trip(self):
        pi = Point2i([1, 2])
        pf = pi.to_float()
        assert type(pf) is Point2f
        assert pf == Point2f([1.0, 2.0])
        assert pf.to_int() == Point2i([1, 2])
        assert type(pf.to_int()) is Point2i

    def test_narrowing_truncates(self):
        assert Point2f([-1.7, 2.9]).to_int() == Point2i([-1, 2])
        assert Point3f([0.5, -0.5, 7.99]).astype(int) == Point3i([0, 0, 7])

    def test_drop_z(self):
        p2 = Point2.from_point3(Point3f([1., 2., 3.]))
        assert type(p2) is Point2f
        assert p2 == Point2f([1., 2.])
        assert Point3i([1, 2, 3]).to_point2() == Point2i([1, 2])
        assert Point2i.from_point3(Point3f([1.9, 2.1, 3.])) == Point2i([1, 2])
        with pytest.raises(TypeError):
            Point2.from_point3(Point2f([1., 2.]))

    def test_from_vector(self):
        v = Vector2f([1., 2.])
        p = Point2f.from_vector(v)
        assert type(p) is Point2f
        assert p == Point2f([1., 2.])
        v[0] = 7.
        assert p == Point2f([1., 2.])
        assert type(Point.from_vector(Vector3i([1, 2, 3]))) is Point3i
        with pytest.raises(DimensionMismatchError):
            Point3.from_vector(v)
        with pytest.raises(TypeError):
            Point2f.from_vector(Point2f([1., 2.]))

    def test_no_point_to_vector_conversion(self):
        with pytest.raises(TypeError):
            Vector3f(Point3f([1., 2., 3.]))
        with pytest.raises(TypeError):
            Point3f(Vector3f([1., 2., 3.]))
        assert not hasattr(Point3f([1., 2., 3.]), 'dot')
        assert not hasattr(Point3f([1., 2., 3.]), 'normalize')


class PointStorageTestCase(unittest.TestCase):
    def test_zero_and_set(self):
        p = Point3f.zero()
        assert p == Point3f([0., 0., 0.])
        q = Point3f([1., 2., 3.])
        p.set(q)
        q[0] = 9.
        assert p == Point3f([1., 2., 3.])
        with pytest.raises(TypeError):
            p.set(Vector3f([1., 2., 3.]))

    def test_indexing(self):
        p = Point2i([1, 2])
        assert p.x == 1 and p.y == 2
        assert p[1] == 2
        with pytest.raises(IndexError):
            p[2]
        assert Point3f([1., 2., 3.]).z == 3.

    def test_display(self):
        assert str(Point3i([1, 2, 3])) == '[1, 2, 3]'
        assert repr(Point2f([0.5, 1.])) == 'Point2f([0.5, 1.0])'

    def test_point_is_not_a_vector(self):
        assert Point3f([1., 2., 3.]) != Vector3f([1., 2., 3.])


def test_point_type():
    assert point_type(2, int) is Point2i
    assert point_type(3, float) is Point3f
    Point3_f32 = point_type(3, np.float32)
    assert point_type(3, 'float32') is Point3_f32
    p = Point3_f32([1.5, 2.5, -0.5])
    assert p.floor() == Point3_f32([1., 2., -1.])
    assert p.distance(Point3_f32([1.5, 2.5, 0.5])) == approx(1.)
    assert not hasattr(point_type(2, np.int64)([1, 2]), 'floor')
    with pytest.raises(DimensionMismatchError):
        point_type(4, float)
