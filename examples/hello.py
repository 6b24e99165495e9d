#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
This is a simple example of slicing with pyslice2d. Here we cut a spinning
box in two with a simulated pointer stroke and step the pieces.

NOTE:
There is no graphical output for this simple example, only text.
"""

__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

import sys
sys.path.extend(['..', '.'])

import pyslice2d as s2

# Create the world without gravity, so the pieces only move because of the
# cut. Units are pixels and seconds.
world = s2.World(gravity=(0, 0))

# An 80x80 box centered on (400, 250), spinning slowly
box = world.create_box((400, 250), 40, 40, angular_velocity=0.5)

# The controller turns pointer events into cuts. Press over empty space,
# move across the box and release: the straight line from the first to the
# last point is the cut.
controller = s2.SliceController(world, params=s2.SliceParams(upward_bias=False))
controller.pointer_down((340, 250), 0.0)
controller.pointer_move((400, 252), 0.05)
events = controller.pointer_up((460, 250), 0.1)

for event in events:
    print('Cut %s' % event.body)
    for fragment in event.fragments:
        print('  %d vertices, area %g, velocity %s' % (len(fragment.polygon),
              s2.polygon_area(fragment.polygon), fragment.linear_velocity))

# The partitioner can also be used on its own
square = [(0, 0), (10, 0), (10, 10), (0, 10)]
print(s2.partition(square, ((-1, 5), (11, 5))))

# This is our little game loop.
for i in range(10):
    world.step(1.0 / 60)
    for body in world.bodies:
        print(body.position, body.angle)
