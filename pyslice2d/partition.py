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
Partitioning of a simple polygon by a cutting path.

The polygon boundary is copied into a per-call vertex arena. Rings are lists
of arena indices and a parallel list of flags marks the crossings of the cut
segment currently being resolved, so nothing outside the call is mutated.

For every segment of the path the crossings are inserted into the working
ring, sorted along the segment and paired up. A pair whose points follow
each other on the ring (no other crossing in between) closes a loop; the
loop is split off and the rest of the ring carries on. Pairing is a bounded
heuristic: when neither the current nor the reversed pending order yields a
pair, the segment is abandoned and reported as unresolved.
"""

__all__ = ('CutSegment', 'Resolved', 'Unresolved', 'UNRESOLVED', 'SliceResult',
           'as_path', 'pair_crossings', 'conserves_area', 'slice_polygon',
           'partition')
__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

import logging
from .common import (Vec2, NUMBER_TYPES, DegenerateInputError, distance)
from .geometry import (segment_intersection, distance_along, validate_polygon,
                       polygon_area, point_in_polygon, clean_ring)
from .settings import (EPSILON, MIN_POLYGON_VERTICES, AREA_TOLERANCE)

log = logging.getLogger(__name__)

class CutSegment(object):
    """One straight stroke of a cutting path, from start to end."""
    __slots__ = ['start', 'end']
    def __init__(self, start, end):
        self.start = Vec2(*start)
        self.end = Vec2(*end)
        if self.start == self.end:
            raise ValueError('A cut segment needs two distinct points')

    __iter__ = lambda self: iter((self.start, self.end))
    def __len__(self):
        return 2
    def __getitem__(self, i):
        return (self.start, self.end)[i]
    def __repr__(self):
        return 'CutSegment(%s, %s)' % (self.start, self.end)

    @property
    def vector(self):
        return self.end - self.start

    @property
    def length(self):
        return self.vector.length

def _is_point(obj):
    return isinstance(obj[0], NUMBER_TYPES)

def as_path(path):
    """
    Normalize a cutting path to a list of CutSegments. A single segment,
    given as a CutSegment or an (a, b) pair of points, is a path of one.
    """
    if isinstance(path, CutSegment):
        return [path]
    path = list(path)
    if not path:
        raise ValueError('A cutting path needs at least one segment')
    if len(path) == 2 and _is_point(path[0]) and _is_point(path[1]):
        return [CutSegment(*path)]
    return [s if isinstance(s, CutSegment) else CutSegment(*s) for s in path]

class Resolved(object):
    """
    A pair of crossings bounding a loop.

    loop: ring indices from the first crossing to the second (inclusive)
    rest: the complement, from the second crossing back to the first
    pair: the two crossings, in the order that closed the loop
    """
    __slots__ = ['loop', 'rest', 'pair']
    def __init__(self, loop, rest, pair):
        self.loop = loop
        self.rest = rest
        self.pair = pair

    def __repr__(self):
        return 'Resolved(loop=%s, rest=%s)' % (self.loop, self.rest)

class Unresolved(object):
    """A pair of crossings that does not bound a loop in either direction"""
    __slots__ = []
    def __repr__(self):
        return 'Unresolved()'
    def __bool__(self):
        return False

UNRESOLVED = Unresolved()

class SliceResult(object):
    """
    The outcome of slice_polygon().

    polygons: the fragments, or [polygon] itself when nothing was split
    split: True when polygons holds two or more fragments
    unresolved: indices of path segments whose pairing was abandoned
    reason: why nothing was split (NO_CROSSING, DEGENERATE, DEGENERATE_FRAGMENT,
            AREA_MISMATCH)
    """
    NO_CROSSING = 'no-crossing'
    DEGENERATE = 'degenerate'
    DEGENERATE_FRAGMENT = 'degenerate-fragment'
    AREA_MISMATCH = 'area-mismatch'

    def __init__(self, polygons, split=False, unresolved=(), reason=None):
        self.polygons = polygons
        self.split = split
        self.unresolved = list(unresolved)
        self.reason = reason

    def __repr__(self):
        return 'SliceResult(%d polygons, split=%s, unresolved=%s, reason=%s)' % (
                len(self.polygons), self.split, self.unresolved, self.reason)

class _Arena(object):
    """The vertices touched by one partition call"""
    __slots__ = ['points', 'flags', 'origins']
    def __init__(self):
        self.points = []
        self.flags = []
        self.origins = [] # (segment index, edge start vertex) for crossings

    def add(self, point, flag=False, origin=None):
        self.points.append(Vec2(*point))
        self.flags.append(flag)
        self.origins.append(origin)
        return len(self.points) - 1

def _first_with_flag(ring, flags, position):
    """Ring position of the next flagged vertex after position"""
    count = len(ring)
    for step in range(1, count + 1):
        i = (position + step) % count
        if flags[ring[i]]:
            return i
    return None

def _get_points(ring, start, end):
    """The ring walked forward from position start to end, both included"""
    count = len(ring)
    if end < start:
        end += count
    return [ring[i % count] for i in range(start, end + 1)]

def pair_crossings(ring, flags, i0, i1):
    """
    Try to close a loop with the crossings i0 and i1 (arena indices).

    The pair bounds a loop if, walking the ring forward from one of them,
    the next flagged vertex is the other one.
    Returns a Resolved or UNRESOLVED.
    """
    for first, second in ((i0, i1), (i1, i0)):
        pos0 = ring.index(first)
        pos1 = ring.index(second)
        if _first_with_flag(ring, flags, pos0) == pos1:
            return Resolved(_get_points(ring, pos0, pos1),
                            _get_points(ring, pos1, pos0),
                            (first, second))
    return UNRESOLVED

def _side(a, b, p):
    return (b - a).cross(Vec2(*p) - a)

def _touches(arena, ring, position, segment, epsilon):
    """
    Does the line of segment only touch the ring at the vertex ring[position],
    both of its neighbours lying strictly on the same side?
    """
    a, b = segment
    points = arena.points
    vertex = points[ring[position]]
    count = len(ring)

    sides = []
    for step in (-1, 1):
        i = position
        for _ in range(count - 1):
            i = (i + step) % count
            if distance(points[ring[i]], vertex) > epsilon:
                break
        sides.append(_side(a, b, points[ring[i]]))
    return sides[0] * sides[1] > 0.0

def _insert_crossings(arena, ring, segment, segment_index, epsilon):
    """
    Insert the crossings of segment with the ring edges right after the
    edge start vertices. Returns the new arena indices.
    """
    a, b = segment
    crossings = []
    i = 0
    while i < len(ring):
        start = ring[i]
        end = ring[(i + 1) % len(ring)]
        point = segment_intersection(a, b, arena.points[start], arena.points[end], epsilon)
        if point is not None:
            if distance(point, arena.points[start]) <= epsilon:
                vertex = i
            elif distance(point, arena.points[end]) <= epsilon:
                vertex = (i + 1) % len(ring)
            else:
                vertex = None
            if vertex is not None and _touches(arena, ring, vertex, segment, epsilon):
                point = None

        if point is not None:
            if crossings:
                first = arena.points[crossings[0]]
                last = arena.points[crossings[-1]]
                if distance(point, first) <= epsilon or distance(point, last) <= epsilon:
                    point = None

        if point is not None:
            index = arena.add(point, flag=True, origin=(segment_index, start))
            ring.insert(i + 1, index)
            crossings.append(index)
            # Skip the half edge just created
            i += 1
        i += 1
    return crossings

def _resolve_segment(arena, ring, pending, loops):
    """
    Pair up the pending crossings of one segment, moving closed loops into
    loops. Returns the new working ring and whether pairing was abandoned.
    """
    flags = arena.flags
    retried = False
    unresolved = False
    while len(pending) >= 2:
        outcome = pair_crossings(ring, flags, pending[0], pending[1])
        if outcome is UNRESOLVED:
            if not retried:
                pending.reverse()
                retried = True
                continue
            unresolved = True
            break

        loops.append(outcome.loop)
        ring = outcome.rest
        for index in outcome.pair:
            flags[index] = False
        del pending[:2]
        retried = False

    # Leftovers stay on the ring as plain vertices
    for index in pending:
        flags[index] = False
    return ring, unresolved

def conserves_area(polygon, polygons, tolerance=AREA_TOLERANCE):
    """Do the areas of polygons add up to the area of polygon?"""
    area = polygon_area(polygon)
    total = sum(polygon_area(p) for p in polygons)
    return abs(total - area) <= tolerance * max(area, 1.0)

def slice_polygon(polygon, path, epsilon=EPSILON):
    """
    Partition a simple polygon along a cutting path.

    polygon: a sequence of (x, y) vertices, either winding
    path: a CutSegment, an (a, b) pair of points, or a sequence of those
    epsilon: crossings closer than this are merged

    A segment only cuts when both of its ends lie outside the polygon and it
    crosses the boundary an even number of times; other segments are
    skipped. Touching a vertex is not a crossing.

    Never raises for bad geometry: degenerate input, a path that does not
    pass through the polygon, a fragment collapsing to fewer than 3 vertices
    or fragments that do not add up to the original area all return
    [polygon] unchanged, with the reason recorded.
    """
    try:
        validate_polygon(polygon, epsilon)
    except DegenerateInputError as ex:
        log.debug('Not slicing degenerate polygon: %s', ex)
        return SliceResult([polygon], reason=SliceResult.DEGENERATE)

    segments = as_path(path)

    arena = _Arena()
    ring = [arena.add(v) for v in polygon]
    loops = []
    unresolved = []

    for segment_index, segment in enumerate(segments):
        outline = [arena.points[i] for i in ring]
        if (point_in_polygon(outline, segment.start, epsilon) or
                point_in_polygon(outline, segment.end, epsilon)):
            log.debug('Cut segment %d (%s) ends inside the polygon', segment_index, segment)
            continue

        pending = _insert_crossings(arena, ring, segment, segment_index, epsilon)
        if len(pending) < 2 or len(pending) % 2:
            # The segment doesn't pass through the polygon
            for index in pending:
                ring.remove(index)
            continue

        a = segment.start
        pending.sort(key=lambda index: distance_along(a, arena.points[index]))

        ring, aborted = _resolve_segment(arena, ring, pending, loops)
        if aborted:
            unresolved.append(segment_index)
            log.warning('Could not pair the crossings of cut segment %d (%s) on edges %s; '
                        'keeping %d resolved loop(s)', segment_index, segment,
                        [arena.origins[i][1] for i in pending], len(loops))

    if not loops:
        return SliceResult([polygon], unresolved=unresolved,
                           reason=SliceResult.NO_CROSSING)

    polygons = []
    for indices in loops + [ring]:
        fragment = clean_ring([arena.points[i] for i in indices], epsilon)
        if len(fragment) < MIN_POLYGON_VERTICES or polygon_area(fragment) <= epsilon:
            log.debug('Cut would leave a degenerate fragment %s', fragment)
            return SliceResult([polygon], unresolved=unresolved,
                               reason=SliceResult.DEGENERATE_FRAGMENT)
        polygons.append(fragment)

    if not conserves_area(polygon, polygons):
        log.warning('Fragments of %d-gon cut by %s do not add up to its area; not cutting',
                    len(polygon), segments)
        return SliceResult([polygon], unresolved=unresolved,
                           reason=SliceResult.AREA_MISMATCH)

    return SliceResult(polygons, split=True, unresolved=unresolved)

def partition(polygon, path, epsilon=EPSILON):
    """
    Split polygon along path. Returns the fragments, or [polygon] when the
    path leaves it whole.
    """
    return slice_polygon(polygon, path, epsilon).polygons
