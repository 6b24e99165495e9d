#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# C++ version Copyright (c) 2006-2011 Erin Catto http://www.box2d.org
# Python port by Ken Lauer / http://pybox2d.googlecode.com
# 
# This software is provided 'as-is', without any express or implied
# warranty.  In no event will the authors be held liable for any damages
# arising from the use of this software.
# Permission is granted to anyone to use this software for any purpose,
# including commercial applications, and to alter it and redistribute it
# freely, subject to the following restrictions:
# 1. The origin of this software must not be misrepresented; you must not
# claim that you wrote the original software. If you use this software
# in a product, an acknowledgment in the product documentation would be
# appreciated but is not required.
# 2. Altered source versions must be plainly marked as such, and must not be
# misrepresented as being the original software.
# 3. This notice may not be removed or altered from any source distribution.

__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

import math
from .settings import (FLOAT_EPSILON, PI)

__all__ = (# Exceptions
           'SliceError', 'DegenerateInputError', 'PhysicsError', 'LockedError',

           # Constants
           'PI', 'NUMBER_TYPES',

           # Classes
           'Vec2', 'Transform', 'AABB',

           # Functions
           'scalar_cross', 'min_vector', 'max_vector', 'clamp', 'clamp_magnitude',
           'is_valid_float', 'distance', 'distance_squared',
          )

NUMBER_TYPES = (float, int)

class SliceError(Exception): pass
class DegenerateInputError(SliceError): pass
class PhysicsError(Exception): pass
class LockedError(PhysicsError): pass

class Vec2(object):
    """A 2d column vector"""
    __slots__=['x', 'y']
    def __init__(self, x=0.0, y=0.0):
        self.x, self.y = float(x), float(y)

    __iter__ = lambda self: iter((self.x, self.y))
    def __repr__(self):
        return "Vec2(%g,%g)" % (self.x, self.y)
    def __len__(self):
        return 2
    def __neg__(self):
        return Vec2(-self.x, -self.y)
    def __copy__(self):
        return Vec2(self.x, self.y)
    copy = __copy__
    def __iadd__(self, other):
        ox, oy = other
        self.x += ox
        self.y += oy
        return self
    def __add__(self, other):
        return Vec2(self.x+other[0], self.y+other[1])
    def __sub__(self, other):
        return Vec2(self.x-other[0], self.y-other[1])
    def __rsub__(self, other):
        return Vec2(other[0]-self.x, other[1]-self.y)
    def __isub__(self, other):
        ox, oy = other
        self.x -= ox
        self.y -= oy
        return self
    def __imul__(self, value):
        self.x *= value
        self.y *= value
        return self
    def __itruediv__(self, value):
        self.x /= value
        self.y /= value
        return self
    def __mul__(self, value):
        if isinstance(value, NUMBER_TYPES):
            return Vec2(value*self.x, value*self.y)
        else:
            return self.dot(value)
    def __truediv__(self, value):
        if isinstance(value, NUMBER_TYPES):
            return Vec2(self.x/value, self.y/value)
        else:
            raise ValueError('Ambiguous operation')
    def __bool__(self):
        return self.x!=0.0 or self.y!=0.0
    def __eq__(self, other):
        try:
            return (self.x==other[0] and self.y==other[1])
        except (TypeError, IndexError):
            return False
    def __ne__(self, other):
        return not self.__eq__(other)
    __hash__ = None
    def __getitem__(self, i):
        if i==0:
            return self.x
        elif i==1:
            return self.y
        else:
            raise IndexError('Index must be in (0,1)')
    def __setitem__(self, i, value):
        if i==0:
            self.x=float(value)
        elif i==1:
            self.y=float(value)
        else:
            raise IndexError('Index must be in (0,1)')
    def __getstate__(self):
        return [self.x, self.y]
    def __setstate__(self, value):
        self.x, self.y = value
    __rmul__=__mul__
    __radd__=__add__

    @property
    def length(self):
        return math.sqrt(self.x**2 + self.y**2)
    @property
    def length_squared(self):
        return self.x**2 + self.y**2
    @property
    def valid(self):
        return is_valid_float(self.x) and is_valid_float(self.y)

    def set(self, x, y):
        """
        Set the vector, copying the elements passed in.
        """
        self.x, self.y=float(x), float(y)
    def zero(self):
        """Zero the vector"""
        self.x, self.y=0.0, 0.0
    def _scalar_cross(self, value):
        """
        scalar x vector

        Perform the cross product on a scalar and this vector. In 2D this produces
        a vector.
        """
        return Vec2(-float(value) * self.y, float(value) * self.x)

    def cross(self, value):
        if isinstance(value, NUMBER_TYPES):
            # Perform the cross product on a vector and a scalar. In 2D this produces
            # a vector.
            return Vec2(float(value)*self.y, -float(value)*self.x)
        else:
            # Perform the cross product on two vectors. In 2D this produces a scalar.
            vx, vy = value
            return self.x * float(vy) - self.y * float(vx)
    def dot(self, value):
        vx, vy = value
        return self.x * float(vx) + self.y * float(vy)
    def normalize(self):
        """
        Normalize in place. Returns the previous length, or 0.0 (leaving
        the vector untouched) when it is too short to have a direction.
        """
        length=self.length
        if length < FLOAT_EPSILON:
            return 0.0
        inv_length=1.0 / length
        self.x*=inv_length
        self.y*=inv_length
        return length
    @property
    def normalized(self):
        """A unit-length copy (zero stays zero)"""
        ret=Vec2(self.x, self.y)
        ret.normalize()
        return ret

class Transform(object):
    """
    A transform contains translation and rotation. It is used to represent
    the position and orientation of rigid frames.
    """
    __slots__=['_position', '_angle', '_c', '_s']
    def __init__(self, position=(0, 0), angle=0.0):
        self._position = Vec2(*position)
        self.angle = angle

    @property
    def position(self):
        return Vec2(*self._position)

    @position.setter
    def position(self, position):
        self._position = Vec2(*position)

    @property
    def angle(self):
        return self._angle

    @angle.setter
    def angle(self, angle):
        self._angle = float(angle)
        self._c = math.cos(self._angle)
        self._s = math.sin(self._angle)

    def __copy__(self):
        return Transform(self._position, self._angle)
    copy = __copy__

    def __repr__(self):
        return 'Transform(position=%s, angle=%g)' % (self._position, self._angle)

    def __mul__(self, v):
        """Transform a local point to world coordinates"""
        x, y = v
        return Vec2(self._c * x - self._s * y + self._position.x,
                    self._s * x + self._c * y + self._position.y)

    def mul_t(self, v):
        """Inverse transform: a world point to local coordinates"""
        x, y = v[0] - self._position.x, v[1] - self._position.y
        return Vec2(self._c * x + self._s * y, -self._s * x + self._c * y)

    def rotate(self, v):
        """Rotate a vector (no translation)"""
        x, y = v
        return Vec2(self._c * x - self._s * y, self._s * x + self._c * y)

class AABB(object):
    """An axis-aligned bounding box"""
    __slots__=['_upper_bound', '_lower_bound']
    def __init__(self, lower_bound=(0, 0), upper_bound=(0, 0)):
        self._lower_bound = Vec2(*lower_bound)
        self._upper_bound = Vec2(*upper_bound)

    @classmethod
    def from_points(cls, points):
        """The tightest box around a non-empty sequence of points"""
        points = iter(points)
        try:
            first = Vec2(*next(points))
        except StopIteration:
            raise ValueError('Need at least one point')
        lower, upper = first, Vec2(*first)
        for p in points:
            lower = min_vector(lower, p)
            upper = max_vector(upper, p)
        return cls(lower, upper)

    def __repr__(self):
        return 'AABB(lower_bound=%s, upper_bound=%s)' \
                % (self._lower_bound, self._upper_bound)

    @property
    def lower_bound(self):
        return Vec2(*self._lower_bound)
    @lower_bound.setter
    def lower_bound(self, value):
        self._lower_bound.set(*value)

    @property
    def upper_bound(self):
        return Vec2(*self._upper_bound)
    @upper_bound.setter
    def upper_bound(self, value):
        self._upper_bound.set(*value)

    @property
    def valid(self):
        d=self._upper_bound-self._lower_bound
        area_valid=(d.x >= 0.0 and d.y >= 0.0)
        return area_valid and self._lower_bound.valid and self._upper_bound.valid

    __iter__ = lambda self: iter((self._lower_bound, self._upper_bound))
    def __len__(self):
        return 2
    def __getitem__(self, i):
        if i==0:
            return self._lower_bound
        elif i==1:
            return self._upper_bound
        else:
            raise IndexError('Index must be in (0,1)')
    def __eq__(self, other):
        try:
            return (self._lower_bound == other[0] and self._upper_bound == other[1])
        except (TypeError, IndexError):
            return False
    def __ne__(self, other):
        return not self.__eq__(other)
    __hash__ = None

    def __copy__(self):
        return AABB(self._lower_bound, self._upper_bound)
    copy = __copy__

    def contains_point(self, p):
        """Is the point inside the box (boundary included)?"""
        x, y = p
        return (self._lower_bound.x <= x <= self._upper_bound.x and
                self._lower_bound.y <= y <= self._upper_bound.y)

def is_valid_float(x):
    return not (math.isnan(x) or math.isinf(x))

def distance(p1, p2):
    c = Vec2(*p1) - p2
    return c.length

def distance_squared(p1, p2):
    c = Vec2(*p1) - p2
    return c.dot(c)

def scalar_cross(scalar, vector):
    """
    The 2d cross product of a scalar (an angular velocity, say) and a vector:
    (-s * v.y, s * v.x)
    """
    return Vec2(*vector)._scalar_cross(scalar)

def min_vector(v1, v2):
    return Vec2(min(v1[0], v2[0]), min(v1[1], v2[1]))

def max_vector(v1, v2):
    return Vec2(max(v1[0], v2[0]), max(v1[1], v2[1]))

def clamp(value, low, high):
    return max(low, min(value, high))

def clamp_magnitude(vector, max_magnitude):
    """
    Clamp the length of a vector to max_magnitude. Shorter vectors (and the
    zero vector) are returned as copies.
    """
    if max_magnitude < 0.0:
        raise ValueError('max_magnitude must be greater than or equal to 0')

    v = Vec2(*vector)
    length = v.length
    if length > max_magnitude:
        return v * (max_magnitude / length)
    return v
