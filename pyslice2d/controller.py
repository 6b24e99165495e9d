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
Pointer-driven slicing.

A SliceController turns pointer down/move/up events into cutting paths and
applies the resulting cuts to a Simulation. Pressing over a body hands the
gesture to the drag constraint; pressing over empty space starts a stroke,
which is cut on release.
"""

__all__ = ('StrokePoint', 'StrokeEntry', 'StrokeHistory', 'SliceEvent',
           'SliceController')
__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

import logging
from .common import (Vec2, SliceError)
from .geometry import validate_polygon
from .kinematics import (SliceParams, synthesize)
from .partition import (CutSegment, as_path, slice_polygon)
from .settings import PATH_AGE_LIMIT

log = logging.getLogger(__name__)

class StrokePoint(object):
    """A pointer position and the time it was recorded at"""
    __slots__ = ['x', 'y', 'time']
    def __init__(self, point, time):
        self.x, self.y = float(point[0]), float(point[1])
        self.time = float(time)

    def __repr__(self):
        return 'StrokePoint(%g, %g, time=%g)' % (self.x, self.y, self.time)

    @property
    def point(self):
        return Vec2(self.x, self.y)

class StrokeEntry(object):
    """
    The points of one stroke, as kept for display. An entry stays in the
    history while it is open, even when all of its points have aged out.
    """
    __slots__ = ['points', 'closed']
    def __init__(self):
        self.points = []
        self.closed = False

    def append(self, point, time):
        self.points.append(StrokePoint(point, time))

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

class StrokeHistory(object):
    """Recent strokes, fading out over age_limit seconds"""
    def __init__(self, age_limit=PATH_AGE_LIMIT):
        if age_limit <= 0.0:
            raise ValueError('age_limit must be positive')
        self.age_limit = age_limit
        self.entries = []

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def begin(self, point, time):
        entry = StrokeEntry()
        entry.append(point, time)
        self.entries.append(entry)
        return entry

    def evict(self, now):
        """Forget points older than age_limit, then emptied closed entries"""
        oldest = now - self.age_limit
        kept = []
        for entry in self.entries:
            entry.points = [p for p in entry.points if p.time >= oldest]
            if entry.points or not entry.closed:
                kept.append(entry)
        self.entries = kept

    def segments(self, now):
        """
        Yields (p0, p1, alpha) for every drawable piece of every stroke; alpha
        fades from 1 for fresh points to 0 at the age limit.
        """
        oldest = now - self.age_limit
        for entry in self.entries:
            points = entry.points
            for p0, p1 in zip(points, points[1:]):
                alpha = (max(p0.time, p1.time) - oldest) / self.age_limit
                yield p0.point, p1.point, min(max(alpha, 0.0), 1.0)

class SliceEvent(object):
    """
    One body cut by a stroke.

    body: the removed original
    fragments: the FragmentBody states the new bodies were created with
    bodies: the new bodies, in the same order
    unresolved: path segments the partitioner could not pair (see SliceResult)
    """
    __slots__ = ['body', 'fragments', 'bodies', 'unresolved']
    def __init__(self, body, fragments, bodies, unresolved=()):
        self.body = body
        self.fragments = fragments
        self.bodies = bodies
        self.unresolved = list(unresolved)

    def __repr__(self):
        return 'SliceEvent(body=%r, %d fragments, unresolved=%s)' % (
                self.body, len(self.fragments), self.unresolved)

class SliceController(object):
    """
    State machine between the pointer and the simulation.

    simulation: a Simulation
    params: SliceParams for every cut
    mode: SEGMENT cuts along the straight line from the first to the last
          stroke point; PATH cuts along every consecutive pair of points
    commit_path: in PATH mode, whether releasing the pointer cuts at all
    drag: optional drag constraint (grab/move/release, enabled) that handles
          gestures starting over a body
    history: StrokeHistory used for display
    """
    IDLE = 'idle'
    DRAGGING = 'dragging'
    SLICING = 'slicing'

    SEGMENT = 'segment'
    PATH = 'path'

    def __init__(self, simulation, params=None, mode=SEGMENT, commit_path=True,
                 drag=None, history=None):
        if mode not in (SliceController.SEGMENT, SliceController.PATH):
            raise ValueError('Invalid mode: %r' % (mode, ))

        self.simulation = simulation
        self.params = params if params is not None else SliceParams()
        self.mode = mode
        self.commit_path = commit_path
        self.drag = drag
        self.history = history if history is not None else StrokeHistory()
        self._state = SliceController.IDLE
        self._stroke = []
        self._entry = None

    @property
    def state(self):
        return self._state

    @property
    def stroke(self):
        """The points of the stroke being drawn. (copied)"""
        return list(self._stroke)

    def pointer_down(self, point, time):
        if self._state != SliceController.IDLE:
            log.debug('Pointer down while %s; dropping the current gesture', self._state)
            self._finish()

        point = Vec2(*point)
        sim = self.simulation
        for body in sim.all_bodies():
            if sim.bounds_contains(body, point):
                self._state = SliceController.DRAGGING
                if self.drag is not None:
                    self.drag.grab(body, point)
                return self._state

        self._state = SliceController.SLICING
        if self.drag is not None:
            self.drag.enabled = False
        self._stroke = [StrokePoint(point, time)]
        self._entry = self.history.begin(point, time)
        return self._state

    def pointer_move(self, point, time):
        if self._state == SliceController.SLICING:
            self._add_point(point, time)
        elif self._state == SliceController.DRAGGING and self.drag is not None:
            self.drag.move(point)

    def pointer_up(self, point, time):
        """
        End the gesture. A stroke is cut here; returns the SliceEvents of
        the bodies it split.
        """
        events = []
        try:
            if self._state == SliceController.SLICING:
                self._add_point(point, time)
                path = self._committed_path()
                if path:
                    events = self.cut(path)
        finally:
            self._finish()
        return events

    def update(self, now):
        """Per-frame housekeeping: age the stroke history"""
        self.history.evict(now)

    def _add_point(self, point, time):
        self._stroke.append(StrokePoint(point, time))
        self._entry.append(point, time)

    def _finish(self):
        if self._state == SliceController.DRAGGING and self.drag is not None:
            self.drag.release()
        if self.drag is not None:
            self.drag.enabled = True
        if self._entry is not None:
            self._entry.closed = True
        self._entry = None
        self._stroke = []
        self._state = SliceController.IDLE

    def _committed_path(self):
        points = [p.point for p in self._stroke]
        if self.mode == SliceController.SEGMENT:
            if points[0] == points[-1]:
                return None
            return [CutSegment(points[0], points[-1])]

        if not self.commit_path:
            return None
        return [CutSegment(p0, p1) for p0, p1 in zip(points, points[1:]) if p0 != p1]

    def _plan(self, body, path):
        """The fragments body would break into, or None"""
        sim = self.simulation
        result = slice_polygon(sim.body_vertices(body), path, self.params.epsilon)
        if not result.split:
            return None

        for polygon in result.polygons:
            validate_polygon(polygon, self.params.epsilon)

        fragments = synthesize(sim.original_body(body), result.polygons, path, self.params)
        return fragments, result.unresolved

    def cut(self, path):
        """
        Cut every body of the simulation along path.

        All bodies are evaluated against the same path first, then the
        simulation is updated in one pass: each split body is removed and
        its fragments are created with their velocities and forces.
        """
        path = as_path(path)
        sim = self.simulation

        plans = []
        for body in sim.all_bodies():
            try:
                plan = self._plan(body, path)
            except SliceError as ex:
                log.debug('Not cutting %r: %s', body, ex)
                continue
            except ValueError as ex:
                log.warning('Not cutting %r: %s', body, ex)
                continue

            if plan is not None:
                plans.append((body, ) + plan)

        events = []
        for body, fragments, unresolved in plans:
            sim.remove_body(body)

            bodies = []
            for fragment in fragments:
                new_body = sim.create_body_from_polygon(fragment.polygon)
                sim.set_velocity(new_body, fragment.linear_velocity)
                sim.set_angular_velocity(new_body, fragment.angular_velocity)
                for force, point in fragment.forces:
                    sim.apply_force(new_body, force, point)
                bodies.append(new_body)

            log.info('Cut %r into %d fragments', body, len(bodies))
            events.append(SliceEvent(body, fragments, bodies, unresolved))
        return events
