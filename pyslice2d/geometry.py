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

"""
Stateless geometry helpers shared by the partitioner, the kinematics and the
reference world: segment intersection, polygon validation and polygon mass
properties.
"""

__all__ = ('MassData', 'segment_intersection', 'distance_along',
           'is_simple_polygon', 'validate_polygon', 'signed_area',
           'polygon_area', 'compute_centroid', 'compute_mass', 'compute_aabb',
           'clean_ring', 'to_vertices', 'distance_to_segment', 'point_in_polygon')
__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

from .common import (Vec2, AABB, DegenerateInputError, clamp, distance,
                     is_valid_float)
from .settings import (EPSILON, FLOAT_EPSILON, MIN_POLYGON_VERTICES)

class MassData(object):
    """
    This holds the mass data computed for a polygon.

    mass: The mass of the polygon.
    center: The area centroid, in the polygon's own coordinates.
    I: The rotational inertia about the centroid.
    """
    __slots__ = ['mass', 'center', 'I']
    def __init__(self, mass=0.0, center=(0,0), I=0.0):
        self.mass=mass
        self.center=Vec2(*center)
        self.I=I

    def __repr__(self):
        return 'MassData(mass=%g, center=%s, I=%g)' % (self.mass, self.center, self.I)

def to_vertices(polygon):
    """Copy any sequence of (x, y) pairs into a list of Vec2"""
    return [Vec2(*v) for v in polygon]

def segment_intersection(p1, p2, q1, q2, epsilon=EPSILON):
    """
    Intersect the finite segments p1-p2 and q1-q2.

    Returns the crossing point, or None when the segments are parallel
    (collinear overlaps included) or do not meet. Touching at an endpoint
    counts as a crossing, within the parametric tolerance epsilon.
    """
    p1 = Vec2(*p1)
    q1 = Vec2(*q1)
    r = Vec2(*p2) - p1
    s = Vec2(*q2) - q1

    den = r.cross(s)
    if abs(den) <= FLOAT_EPSILON * r.length * s.length:
        return None

    qp = q1 - p1
    t = qp.cross(s) / den
    u = qp.cross(r) / den

    if -epsilon <= t <= 1.0 + epsilon and -epsilon <= u <= 1.0 + epsilon:
        return p1 + t * r
    return None

def distance_along(origin, point):
    """Sort key for points lying on a segment starting at origin"""
    return distance(origin, point)

def is_simple_polygon(polygon, epsilon=EPSILON):
    """
    A polygon is simple when it has at least 3 vertices and no two
    non-adjacent edges intersect.
    """
    count = len(polygon)
    if count < MIN_POLYGON_VERTICES:
        return False

    for i in range(count):
        a1 = polygon[i]
        a2 = polygon[(i + 1) % count]
        for j in range(i + 2, count):
            if i == 0 and j == count - 1:
                # Edges sharing the first vertex
                continue
            b1 = polygon[j]
            b2 = polygon[(j + 1) % count]
            if segment_intersection(a1, a2, b1, b2, epsilon) is not None:
                return False
    return True

def distance_to_segment(p, a, b):
    """Distance from p to the closest point of the finite segment a-b"""
    p = Vec2(*p)
    a = Vec2(*a)
    d = Vec2(*b) - a
    length_sqr = d.length_squared
    if length_sqr <= FLOAT_EPSILON:
        return distance(p, a)
    t = clamp((p - a).dot(d) / length_sqr, 0.0, 1.0)
    return distance(p, a + t * d)

def point_in_polygon(polygon, point, epsilon=EPSILON):
    """
    Is the point strictly inside the polygon (even-odd rule)? Points within
    epsilon of the boundary are not.
    """
    x, y = point
    inside = False
    v1 = polygon[-1]
    for v2 in polygon:
        if distance_to_segment(point, v1, v2) <= epsilon:
            return False
        if (v1[1] > y) != (v2[1] > y):
            cross_x = v1[0] + (y - v1[1]) * (v2[0] - v1[0]) / (v2[1] - v1[1])
            if x < cross_x:
                inside = not inside
        v1 = v2
    return inside

def signed_area(polygon):
    """Shoelace area: positive for counter-clockwise in a y-up frame"""
    count = len(polygon)
    area = 0.0
    for i in range(count):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % count]
        area += x1 * y2 - x2 * y1
    return 0.5 * area

def polygon_area(polygon):
    return abs(signed_area(polygon))

def validate_polygon(polygon, epsilon=EPSILON):
    """
    Raise DegenerateInputError unless the polygon can be partitioned: at
    least 3 finite vertices, a nonzero area and no self-intersection.
    """
    if len(polygon) < MIN_POLYGON_VERTICES:
        raise DegenerateInputError('Polygons are >= %d vertices' % MIN_POLYGON_VERTICES)

    for v in polygon:
        if not (is_valid_float(v[0]) and is_valid_float(v[1])):
            raise DegenerateInputError('Invalid vertex %s' % (tuple(v), ))

    if polygon_area(polygon) <= epsilon:
        raise DegenerateInputError('Area of the polygon is too small')

    if not is_simple_polygon(polygon, epsilon):
        raise DegenerateInputError('Polygon is self-intersecting')

def compute_centroid(polygon):
    """Area centroid of a polygon of either winding"""
    if len(polygon) < MIN_POLYGON_VERTICES:
        raise ValueError('Need >= 3 vertices to compute the centroid')

    vertices = to_vertices(polygon)

    # The reference point for forming triangles. Its location doesn't change
    # the result (except for rounding error), so keep it close to the polygon.
    p_ref = vertices[0]
    c = Vec2()
    area = 0.0
    inv3 = 1.0 / 3.0
    count = len(vertices)

    for i, v in enumerate(vertices):
        e1 = v - p_ref
        e2 = vertices[(i + 1) % count] - p_ref
        triangle_area = 0.5 * e1.cross(e2)
        area += triangle_area
        c += triangle_area * inv3 * (e1 + e2)

    if abs(area) <= FLOAT_EPSILON:
        raise ValueError('Area of the polygon is too small to get a centroid')

    c *= 1.0 / area
    return c + p_ref

def compute_mass(polygon, density=1.0):
    """
    Mass, centroid and rotational inertia (about the centroid) of a uniform
    polygon. Either winding is accepted.
    """
    # Polygon mass, centroid, and inertia.
    # Let rho be the polygon density in mass per unit area.
    # Then:
    # mass = rho * int(dA)
    # centroid.x = (1/mass) * rho * int(x * dA)
    # centroid.y = (1/mass) * rho * int(y * dA)
    # I = rho * int((x*x + y*y) * dA)
    #
    # These integrals are summed over the triangles fanning out of the
    # reference point s.
    if len(polygon) < MIN_POLYGON_VERTICES:
        raise ValueError('Polygons are >= 3 vertices')

    vertices = to_vertices(polygon)
    count = len(vertices)

    s = Vec2()
    for vertex in vertices:
        s += vertex
    s *= 1.0 / count

    center = Vec2()
    area = 0.0
    I = 0.0
    inv3 = 1.0 / 3.0

    for i, vertex in enumerate(vertices):
        e1 = vertex - s
        e2 = vertices[(i + 1) % count] - s

        D = e1.cross(e2)

        triangle_area = 0.5 * D
        area += triangle_area

        # Area weighted centroid
        center += triangle_area * inv3 * (e1 + e2)

        intx2 = e1.x*e1.x + e2.x*e1.x + e2.x*e2.x
        inty2 = e1.y*e1.y + e2.y*e1.y + e2.y*e2.y

        I += (0.25 * inv3 * D) * (intx2 + inty2)

    if abs(area) <= FLOAT_EPSILON:
        raise ValueError('Area of the polygon is too small to compute its mass')

    center *= 1.0 / area

    # Clockwise rings integrate to negative area and inertia
    if area < 0.0:
        area, I = -area, -I

    md = MassData()
    md.mass = density * area
    md.center = center + s

    # Shift the inertia from the reference point to the centroid
    md.I = density * I - md.mass * center.dot(center)
    return md

def compute_aabb(polygon):
    return AABB.from_points(polygon)

def clean_ring(points, epsilon=EPSILON):
    """
    Copy a closed ring, dropping vertices closer than epsilon to the
    previously kept one (the closing edge included).
    """
    ret = []
    for p in points:
        if not ret or distance(ret[-1], p) > epsilon:
            ret.append(Vec2(*p))

    while len(ret) > 1 and distance(ret[0], ret[-1]) <= epsilon:
        ret.pop()
    return ret
