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

__all__ = ('Simulation', )
__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

from .kinematics import OriginalBody

class Simulation(object):
    """
    The rigid body simulation a slicer works against. Bodies are opaque
    references; everything the slicer needs goes through these methods.

    Note: This is an abstract base class. World is the bundled implementation.
    """
    def all_bodies(self):
        """A list of the bodies currently in the simulation, in a fixed order"""
        raise NotImplementedError

    def body_vertices(self, body):
        """The body outline as a list of world points"""
        raise NotImplementedError

    def body_mass(self, body):
        raise NotImplementedError

    def body_velocity(self, body):
        """Linear velocity of the center of mass"""
        raise NotImplementedError

    def body_angular_velocity(self, body):
        raise NotImplementedError

    def body_centroid(self, body):
        """World position of the center of mass"""
        raise NotImplementedError

    def remove_body(self, body):
        raise NotImplementedError

    def create_body_from_polygon(self, polygon):
        """
        Create a dynamic body from a world-space polygon. Mass and inertia are
        derived from the vertices. Returns the new body.
        """
        raise NotImplementedError

    def compute_mass(self, polygon):
        """The MassData a body created from polygon would get"""
        raise NotImplementedError

    def set_velocity(self, body, velocity):
        raise NotImplementedError

    def set_angular_velocity(self, body, angular_velocity):
        raise NotImplementedError

    def apply_force(self, body, force, point):
        """Apply a force at a world point during the next step"""
        raise NotImplementedError

    def bounds_contains(self, body, point):
        """Does the bounding box of body contain the world point?"""
        raise NotImplementedError

    def original_body(self, body):
        """Snapshot the state the slicer reads from a body"""
        return OriginalBody(self.body_centroid(body),
                            velocity=self.body_velocity(body),
                            angular_velocity=self.body_angular_velocity(body),
                            mass_of=self.compute_mass)
