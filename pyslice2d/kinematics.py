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
Initial state of the fragments of a cut body.

Fragments inherit the velocity of the original body at their own centroid
(linear velocity plus the rotational term w x r) and its angular velocity
unchanged. Angular momentum is not redistributed between fragments. On top of
that every fragment gets an outward kerf velocity and a pending force along
the cut, scaled by its mass and the clamped cut length.
"""

__all__ = ('SliceParams', 'OriginalBody', 'FragmentBody', 'tangential_velocity',
           'inherited_velocity', 'kerf_velocity', 'slice_force', 'cut_vector',
           'synthesize')
__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

from .common import (Vec2, scalar_cross, clamp_magnitude, is_valid_float)
from .geometry import compute_mass
from .partition import as_path
from . import settings

class SliceParams(object):
    """
    Tuning of a cut.

    split_force: outward kerf velocity given to each fragment
    slice_force_factor: scales the transferred force by mass and cut length
    max_slice_vector_magnitude: cut lengths are clamped to this
    epsilon: intersection merge tolerance of the partitioner
    upward_bias: attenuate forces not pointing along up
    up: the direction favoured by upward_bias
    """
    __slots__ = ['split_force', 'slice_force_factor', 'max_slice_vector_magnitude',
                 'epsilon', 'upward_bias', 'up']
    def __init__(self, split_force=settings.SPLIT_FORCE,
                 slice_force_factor=settings.SLICE_FORCE_FACTOR,
                 max_slice_vector_magnitude=settings.MAX_SLICE_VECTOR_MAGNITUDE,
                 epsilon=settings.EPSILON, upward_bias=settings.UPWARD_BIAS,
                 up=settings.UP_VECTOR):
        if not is_valid_float(max_slice_vector_magnitude) or max_slice_vector_magnitude < 0.0:
            raise ValueError('Invalid maximum slice vector magnitude')
        if not is_valid_float(epsilon) or epsilon <= 0.0:
            raise ValueError('Invalid epsilon')

        self.split_force = float(split_force)
        self.slice_force_factor = float(slice_force_factor)
        self.max_slice_vector_magnitude = float(max_slice_vector_magnitude)
        self.epsilon = float(epsilon)
        self.upward_bias = bool(upward_bias)
        self.up = Vec2(*up).normalized

    @classmethod
    def carve(cls, **kwargs):
        """The tuning of the freehand carve mode"""
        kwargs.setdefault('split_force', settings.CARVE_SPLIT_FORCE)
        kwargs.setdefault('slice_force_factor', settings.CARVE_SLICE_FORCE_FACTOR)
        kwargs.setdefault('upward_bias', False)
        return cls(**kwargs)

    def __repr__(self):
        return ('SliceParams(split_force=%g, slice_force_factor=%g, '
                'max_slice_vector_magnitude=%g, epsilon=%g, upward_bias=%s, up=%s)' % (
                self.split_force, self.slice_force_factor,
                self.max_slice_vector_magnitude, self.epsilon, self.upward_bias, self.up))

def _default_mass_of(polygon):
    return compute_mass(polygon, 1.0)

class OriginalBody(object):
    """
    A read-only snapshot of the body being cut.

    mass_of: callable returning the MassData of a fragment polygon. This is
    where the simulation's own mass-from-vertices routine plugs in.
    """
    __slots__ = ['centroid', 'velocity', 'angular_velocity', 'mass_of']
    def __init__(self, centroid, velocity=(0, 0), angular_velocity=0.0, mass_of=None):
        self.centroid = Vec2(*centroid)
        self.velocity = Vec2(*velocity)
        self.angular_velocity = float(angular_velocity)
        self.mass_of = mass_of or _default_mass_of

    def __repr__(self):
        return 'OriginalBody(centroid=%s, velocity=%s, angular_velocity=%g)' % (
                self.centroid, self.velocity, self.angular_velocity)

class FragmentBody(object):
    """
    A fragment polygon with the state it should start its life with.

    forces: (force, world point) pairs to apply once the body exists
    """
    __slots__ = ['polygon', 'centroid', 'mass', 'linear_velocity',
                 'angular_velocity', 'forces']
    def __init__(self, polygon, centroid, mass, linear_velocity=(0, 0),
                 angular_velocity=0.0, forces=None):
        self.polygon = polygon
        self.centroid = Vec2(*centroid)
        self.mass = mass
        self.linear_velocity = Vec2(*linear_velocity)
        self.angular_velocity = angular_velocity
        self.forces = forces if forces is not None else []

    def __repr__(self):
        return ('FragmentBody(vertices=%d, centroid=%s, mass=%g, linear_velocity=%s, '
                'angular_velocity=%g, forces=%s)' % (len(self.polygon), self.centroid,
                self.mass, self.linear_velocity, self.angular_velocity, self.forces))

def tangential_velocity(angular_velocity, r):
    """Velocity of a point at offset r from the rotation center: w x r"""
    return scalar_cross(angular_velocity, r)

def inherited_velocity(original, centroid):
    """Velocity of the original body at a fragment centroid"""
    r = Vec2(*centroid) - original.centroid
    return original.velocity + tangential_velocity(original.angular_velocity, r)

def kerf_velocity(r, split_force):
    """Outward nudge along r. A fragment sitting on the old centroid gets none."""
    return Vec2(*r).normalized * split_force

def cut_vector(cut):
    """The stroke direction of a segment, or the chord of a whole path"""
    path = as_path(cut)
    return path[-1].end - path[0].start

def slice_force(cut, mass, params):
    """Force transferred to a fragment of the given mass by the cut"""
    v = clamp_magnitude(cut_vector(cut), params.max_slice_vector_magnitude)
    magnitude = params.slice_force_factor * v.length * mass
    force = v.normalized * magnitude

    if params.upward_bias:
        alignment = max(force.normalized.dot(params.up), 0.0)
        force *= alignment
    return force

def synthesize(original, fragments, cut, params=None):
    """
    Compute the initial state of every fragment polygon.

    original: an OriginalBody
    fragments: polygons returned by the partitioner
    cut: the CutSegment (or path) that produced them
    """
    if params is None:
        params = SliceParams()

    bodies = []
    for polygon in fragments:
        md = original.mass_of(polygon)
        centroid = Vec2(*md.center)
        r = centroid - original.centroid

        velocity = inherited_velocity(original, centroid)
        velocity += kerf_velocity(r, params.split_force)

        force = slice_force(cut, md.mass, params)

        bodies.append(FragmentBody(polygon, centroid, md.mass,
                                   linear_velocity=velocity,
                                   angular_velocity=original.angular_velocity,
                                   forces=[(force, centroid)]))
    return bodies
