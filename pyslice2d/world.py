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
A small in-memory rigid body world: polygon bodies, gravity, forces and a
soft drag constraint. There is no collision detection; bodies only move
under the forces applied to them.
"""

__all__ = ('Body', 'World', 'DragConstraint')
__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

import math
from copy import copy
from .common import (Vec2, Transform, AABB, LockedError, clamp, is_valid_float)
from .geometry import (compute_mass, to_vertices, validate_polygon)
from .simulation import Simulation
from . import settings

class Body(object):
    """
    A rigid polygon body.

    The outline is kept relative to the center of mass, so the body position
    is its center of mass.
    """
    def __init__(self, vertices, density=settings.DEFAULT_DENSITY, static=False,
                 linear_velocity=(0, 0), angular_velocity=0.0, linear_damping=0.0,
                 angular_damping=0.0, user_data=None):
        if not is_valid_float(density) or density <= 0.0:
            raise ValueError('Invalid density')
        if not Vec2(*linear_velocity).valid:
            raise ValueError('Invalid linear velocity')
        if not is_valid_float(angular_velocity):
            raise ValueError('Invalid angular velocity')

        validate_polygon(vertices)
        md = compute_mass(vertices, density)

        self._xf = Transform(position=md.center, angle=0.0)
        self._local_vertices = [v - md.center for v in to_vertices(vertices)]
        self._static = bool(static)
        self._density = float(density)
        self._force = Vec2()
        self._torque = 0.0
        self._world = None
        self.user_data = user_data
        self.linear_damping = float(linear_damping)
        self.angular_damping = float(angular_damping)

        if self._static:
            self._mass = self._inv_mass = 0.0
            self._I = self._invI = 0.0
            self._linear_velocity = Vec2()
            self._angular_velocity = 0.0
        else:
            self._mass = md.mass
            self._inv_mass = 1.0 / md.mass
            self._I = md.I
            self._invI = 1.0 / md.I if md.I > 0.0 else 0.0
            self._linear_velocity = Vec2(*linear_velocity)
            self._angular_velocity = float(angular_velocity)

    def __repr__(self):
        return 'Body(position=%s, angle=%g, linear_velocity=%s, angular_velocity=%g, static=%s)' % (
                self.position, self.angle, self._linear_velocity,
                self._angular_velocity, self._static)

    @property
    def static(self):
        return self._static

    @property
    def world(self):
        return self._world

    @property
    def position(self):
        """World position of the center of mass. (copied)"""
        return self._xf.position

    @position.setter
    def position(self, position):
        self._xf.position = position

    world_center = position

    @property
    def angle(self):
        return self._xf.angle

    @angle.setter
    def angle(self, angle):
        self._xf.angle = angle

    @property
    def vertices(self):
        """The outline in world coordinates"""
        xf = self._xf
        return [xf * v for v in self._local_vertices]

    @property
    def local_vertices(self):
        return [copy(v) for v in self._local_vertices]

    @property
    def aabb(self):
        return AABB.from_points(self.vertices)

    @property
    def linear_velocity(self):
        """ The linear velocity of the center of mass. (copied) """
        return copy(self._linear_velocity)

    @linear_velocity.setter
    def linear_velocity(self, v):
        if self._static:
            return
        self._linear_velocity = Vec2(*v)

    @property
    def angular_velocity(self):
        """ The angular velocity in rad/s  """
        return self._angular_velocity

    @angular_velocity.setter
    def angular_velocity(self, w):
        if self._static:
            return
        self._angular_velocity = float(w)

    @property
    def mass(self):
        return self._mass

    @property
    def inertia(self):
        """Rotational inertia about the center of mass"""
        return self._I

    @property
    def density(self):
        return self._density

    @property
    def force(self):
        """The force accumulated for the next step. (copied)"""
        return copy(self._force)

    @property
    def torque(self):
        return self._torque

    def apply_force(self, force, point):
        """
        Apply a force at a world point. If the force is not applied at the
        center of mass, it will generate a torque and affect the angular
        velocity.
        """
        if self._static:
            return
        self._force += force
        self._torque += (Vec2(*point) - self.position).cross(force)

    def get_world_point(self, local_point):
        return self._xf * local_point

    def get_local_point(self, world_point):
        return self._xf.mul_t(world_point)

    def get_linear_velocity_from_world_point(self, world_point):
        """The velocity of the body at a world point"""
        r = Vec2(*world_point) - self.position
        return self._linear_velocity + r._scalar_cross(self._angular_velocity)

    def _integrate(self, dt, gravity):
        """Advance velocity then position by dt (symplectic Euler)"""
        if self._static:
            return

        v = self._linear_velocity
        w = self._angular_velocity

        v += dt * (gravity + self._inv_mass * self._force)
        w += dt * self._invI * self._torque

        # Apply damping.
        # ODE: dv/dt + c * v = 0
        # Taylor expansion of the solution: v2 = (1.0 - c * dt) * v1
        v *= clamp(1.0 - dt * self.linear_damping, 0.0, 1.0)
        w *= clamp(1.0 - dt * self.angular_damping, 0.0, 1.0)

        # Check for large velocities.
        translation = dt * v
        if translation.dot(translation) > settings.MAX_TRANSLATION_SQR:
            v *= settings.MAX_TRANSLATION / translation.length

        rotation = dt * w
        if rotation**2 > settings.MAX_ROTATION_SQR:
            w *= settings.MAX_ROTATION / abs(rotation)

        self._linear_velocity = v
        self._angular_velocity = w
        self._xf.position = self._xf.position + dt * v
        self._xf.angle = self._xf.angle + dt * w

class World(Simulation):
    """A container of bodies and constraints that can be stepped."""
    def __init__(self, gravity=settings.GRAVITY, density=settings.DEFAULT_DENSITY,
                 linear_damping=0.0, angular_damping=0.0, auto_clear_forces=True):
        self._gravity = Vec2(*gravity)
        self.density = density
        self.linear_damping = linear_damping
        self.angular_damping = angular_damping
        self.bodies = []
        self.constraints = []
        self.auto_clear_forces = auto_clear_forces
        self._locked = False

    @property
    def gravity(self):
        return Vec2(*self._gravity)

    @gravity.setter
    def gravity(self, gravity):
        self._gravity = Vec2(*gravity)

    @property
    def locked(self):
        return self._locked

    def add_body(self, body):
        """
        Add a rigid body to the world. Warning: This function is locked
        during a step.
        """
        if self._locked:
            raise LockedError('Cannot create a body while simulating')
        if body._world is not None:
            body._world.destroy_body(body)

        self.bodies.append(body)
        body._world = self
        return body

    def create_body(self, vertices, **kwargs):
        """Create a body from a world-space outline; kwargs go to Body()"""
        kwargs.setdefault('density', self.density)
        kwargs.setdefault('linear_damping', self.linear_damping)
        kwargs.setdefault('angular_damping', self.angular_damping)
        return self.add_body(Body(vertices, **kwargs))

    def create_static_body(self, vertices, **kwargs):
        return self.create_body(vertices, static=True, **kwargs)

    def create_box(self, center, hx, hy, angle=0.0, **kwargs):
        """A box of half-widths (hx, hy) centered on center"""
        xf = Transform(center, angle=angle)
        box = [(-hx, -hy), (hx, -hy), (hx, hy), (-hx, hy)]
        return self.create_body([xf * v for v in box], **kwargs)

    def destroy_body(self, body):
        """
        Remove a body from the world. Constraints holding it let go.
        """
        if self._locked:
            raise LockedError('Cannot remove a body while simulating')
        if body not in self.bodies:
            raise ValueError('Body not in world')

        for constraint in self.constraints:
            constraint._body_destroyed(body)

        self.bodies.remove(body)
        body._world = None

    def add_constraint(self, constraint):
        if constraint not in self.constraints:
            self.constraints.append(constraint)
        return constraint

    def remove_constraint(self, constraint):
        self.constraints.remove(constraint)

    def step(self, dt):
        """
        Take a time step: constraint forces, then integration of velocities
        and positions.
        """
        self._locked = True
        try:
            if dt > 0.0:
                for constraint in self.constraints:
                    constraint.solve(dt)

                gravity = self._gravity
                for body in self.bodies:
                    body._integrate(dt, gravity)
        finally:
            self._locked = False

        if self.auto_clear_forces:
            self.clear_forces()

    def clear_forces(self):
        """
        Manually clear the force buffer on all bodies. By default, forces
        are cleared automatically after each call to step.
        """
        for body in self.bodies:
            body._force.zero()
            body._torque = 0.0

    # -- Simulation interface --
    def all_bodies(self):
        return list(self.bodies)

    def body_vertices(self, body):
        return body.vertices

    def body_mass(self, body):
        return body.mass

    def body_velocity(self, body):
        return body.linear_velocity

    def body_angular_velocity(self, body):
        return body.angular_velocity

    def body_centroid(self, body):
        return body.world_center

    def remove_body(self, body):
        self.destroy_body(body)

    def create_body_from_polygon(self, polygon):
        return self.create_body(polygon)

    def compute_mass(self, polygon):
        return compute_mass(polygon, self.density)

    def set_velocity(self, body, velocity):
        body.linear_velocity = velocity

    def set_angular_velocity(self, body, angular_velocity):
        body.angular_velocity = angular_velocity

    def apply_force(self, body, force, point):
        body.apply_force(force, point)

    def bounds_contains(self, body, point):
        return body.aabb.contains_point(point)

class DragConstraint(object):
    """
    A soft spring pulling a point of a grabbed body towards a target, like
    a mouse joint. Disabling it keeps the grab but exerts no force.

    frequency: response speed in Hz
    damping_ratio: 0 is undamped, 1 critically damped
    max_force_per_mass: force ceiling, scaled by the grabbed body's mass
    """
    def __init__(self, world, frequency=settings.DRAG_FREQUENCY,
                 damping_ratio=settings.DRAG_DAMPING_RATIO,
                 max_force_per_mass=settings.DRAG_MAX_FORCE_PER_MASS):
        if not is_valid_float(frequency) or frequency < 0.0:
            raise ValueError('Invalid frequency')
        if not is_valid_float(damping_ratio) or damping_ratio < 0.0:
            raise ValueError('Invalid damping ratio')
        if not is_valid_float(max_force_per_mass) or max_force_per_mass < 0.0:
            raise ValueError('Invalid maximum force')

        self.frequency = frequency
        self.damping_ratio = damping_ratio
        self.max_force_per_mass = max_force_per_mass
        self.enabled = True
        self.body = None
        self._local_anchor = Vec2()
        self._target = Vec2()
        world.add_constraint(self)

    @property
    def target(self):
        return Vec2(*self._target)

    @target.setter
    def target(self, target):
        self._target = Vec2(*target)

    @property
    def active(self):
        return self.body is not None

    def grab(self, body, point):
        """Attach to body at a world point. Static bodies can't be grabbed."""
        if body.static:
            return False
        self.body = body
        self._local_anchor = body.get_local_point(point)
        self._target = Vec2(*point)
        return True

    def move(self, point):
        self.target = point

    def release(self):
        self.body = None

    def _body_destroyed(self, body):
        if self.body is body:
            self.release()

    def solve(self, dt):
        body = self.body
        if body is None or not self.enabled:
            return

        mass = body.mass
        omega = 2.0 * math.pi * self.frequency
        k = mass * omega * omega
        c = 2.0 * mass * self.damping_ratio * omega

        anchor = body.get_world_point(self._local_anchor)
        v = body.get_linear_velocity_from_world_point(anchor)
        force = k * (self._target - anchor) - c * v

        max_force = self.max_force_per_mass * mass
        if force.length > max_force:
            force *= max_force / force.length

        body.apply_force(force, anchor)
