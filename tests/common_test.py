import sys
sys.path.append('..')

import unittest
import pickle
from copy import copy
from pyslice2d import *
from pyslice2d.common import (PI, min_vector, max_vector)

def almost_equal(v1, v2, tol=1e-9):
    if isinstance(v1, Vec2):
        return abs(v1[0] - v2[0]) < tol and abs(v1[1] - v2[1]) < tol
    else:
        return abs(v1 - v2) < tol

class common_test(unittest.TestCase):
    def test_vec2(self):
        v = Vec2(3.0, 4.0)
        assert((v + v).x == 6.0)
        assert((v + v).y == 8.0)
        assert((v + (3, 4)) == (6, 8))
        assert((v - (3, 4)) == Vec2(0, 0))
        assert((v * (3, 4)) == v.length_squared)
        assert((v * v) == v.length_squared)
        assert(v.length == 5.0)

        assert((1,1) + Vec2(1,1) == (2, 2))
        assert((1,1) - Vec2(1,1) == (0, 0))
        assert(2.0 * Vec2(1,1) == (2, 2))
        assert(Vec2(1,1) / 2.0 == (0.5,0.5))
        assert(-Vec2(1,1) == (-1,-1))
        assert(Vec2(1, 1) != Vec2(0, 0))
        assert(Vec2(1, 1) != 'not a vector')
        assert(not Vec2())
        assert(Vec2(0, 1))

        b = Vec2(2.5, 3.5)
        b += (1, 1)
        assert(b == (3.5, 4.5))
        b *= 2
        assert(b == (7, 9))
        b /= 2
        assert(b == (3.5, 4.5))
        b -= Vec2(3.5, 4.5)
        assert(b == (0, 0))

        a = Vec2(3, 3)
        assert(copy(a) == a == a.copy())
        assert(a[0] == 3 and a[1] == 3)
        a[0] = 2.0
        assert(a == (2, 3))
        self.assertRaises(IndexError, lambda: a[2])

        a = Vec2(1, 1)
        b = Vec2(3, 2)
        assert(a.cross(b) == (1*2 - 1*3))
        assert(scalar_cross(1, b) == (-1.0 * 2.0, 1.0 * 3.0))
        assert(scalar_cross(2, (10, 0)) == (0, 20))

    def test_normalize(self):
        a = Vec2(3, 4)
        assert(a.normalize() == 5.0)
        assert(almost_equal(a, Vec2(0.6, 0.8)))

        z = Vec2()
        assert(z.normalize() == 0.0)
        assert(z == (0, 0))
        assert(Vec2().normalized == (0, 0))

        b = Vec2(0, -7)
        assert(b.normalized == (0, -1))
        assert(b == (0, -7))

    def test_vec2_unhashable(self):
        self.assertRaises(TypeError, hash, Vec2(1, 2))

    def test_clamp_magnitude(self):
        assert(clamp_magnitude((3, 4), 10) == (3, 4))
        assert(almost_equal(clamp_magnitude((300, 400), 50), Vec2(30, 40)))
        assert(clamp_magnitude((0, 0), 0) == (0, 0))
        self.assertRaises(ValueError, clamp_magnitude, (1, 1), -1)

        v = Vec2(1, 2)
        c = clamp_magnitude(v, 10)
        c.x = 5
        assert(v == (1, 2))

    def test_clamp(self):
        assert(clamp(5, 0, 1) == 1)
        assert(clamp(-5, 0, 1) == 0)
        assert(clamp(0.5, 0, 1) == 0.5)
        assert(min_vector((1, 5), (2, 3)) == (1, 3))
        assert(max_vector((1, 5), (2, 3)) == (2, 5))

    def test_transform(self):
        xf = Transform((10, 0), angle=PI / 2)
        assert(almost_equal(xf * (1, 0), Vec2(10, 1)))
        assert(almost_equal(xf.mul_t(xf * (3, -2)), Vec2(3, -2)))
        assert(almost_equal(xf.rotate((1, 0)), Vec2(0, 1)))
        assert(copy(xf).position == (10, 0))

    def test_aabb(self):
        a = AABB((-1, -1), (1, 1))
        assert(a.valid)
        assert(a.contains_point((0, 0)))
        assert(a.contains_point((1, 1)))
        assert(not a.contains_point((1.5, 0)))

        assert(not AABB((1, 1), (0, 0)).valid)
        assert(a.lower_bound == (-1, -1) and a.upper_bound == (1, 1))

        c = AABB.from_points([(1, 2), (-3, 5), (0, -1)])
        assert(c == ((-3, -1), (1, 5)))
        self.assertRaises(ValueError, AABB.from_points, [])

    def test_pickle(self):
        for x in range(5):
            for y in range(2):
                assert(pickle.loads(pickle.dumps(Vec2(x, y))) == (x, y))
                assert(pickle.loads(pickle.dumps(AABB((x, y), (y, x)))) == AABB((x, y), (y, x)))

    def test_exceptions(self):
        assert(issubclass(DegenerateInputError, SliceError))
        assert(issubclass(LockedError, PhysicsError))

if __name__ ==  '__main__':
    unittest.main()
