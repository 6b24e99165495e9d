#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# C++ version Copyright (c) 2006-2007 Erin Catto http://www.box2d.org
# Python version Copyright (c) 2010 kne / sirkne at gmail dot com
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
A simple, minimal Pygame-based backend for pyslice2d.

It draws the world and the fading slice strokes, and feeds the mouse to a
SliceController: press over a body to drag it, press over empty space and
drag to slice. ESC quits.
"""

__version__ = "$Revision$"
__date__ = "$Date$"
# $Source$

import logging
import pygame
from pygame.locals import *
import sys
sys.path.extend(['..', '.'])

import pyslice2d as s2
from pyslice2d.common import *

TARGET_FPS=60
TIMESTEP=1.0/TARGET_FPS
SCREEN_WIDTH, SCREEN_HEIGHT=800, 600
STROKE_COLOR=(223, 47, 47)
STROKE_WIDTH=4
colors = {
    'static'  : (255,255,255,255),
    'dynamic' : (127,127,127,255),
}

def to_screen(vertices):
    return [(int(v[0]), int(v[1])) for v in vertices]

def draw_body(screen, body, color=None):
    if color is None:
        color = body.user_data or colors['static' if body.static else 'dynamic']
    vertices = to_screen(body.vertices)
    pygame.draw.polygon(screen, [c/2.0 for c in color], vertices, 0)
    pygame.draw.polygon(screen, color, vertices, 1)

def draw_line(screen, p1, p2, color=(255, 255, 255), width=1):
    p1, p2 = to_screen([p1, p2])
    pygame.draw.line(screen, color, p1, p2, width)

def draw_world(screen, world):
    """Draw the world"""
    for body in world.bodies:
        draw_body(screen, body)

def draw_strokes(screen, history, now, color=STROKE_COLOR):
    """Draw the stroke history, older pieces more transparent"""
    overlay = pygame.Surface(screen.get_size(), SRCALPHA)
    for p1, p2, alpha in history.segments(now):
        p1, p2 = to_screen([p1, p2])
        pygame.draw.line(overlay, color + (int(255 * alpha), ), p1, p2, STROKE_WIDTH)
    screen.blit(overlay, (0, 0))

class Framework(object):
    name='None'
    description=''
    mode=s2.SliceController.SEGMENT
    commit_path=True
    def __init__(self, params=None):
        # Nothing collides, so bodies float and slowly come to rest
        self.world=s2.World(gravity=(0, 0), linear_damping=0.8, angular_damping=0.8)
        self.drag=s2.DragConstraint(self.world)

        print('Initializing pygame framework...')
        # Pygame Initialization
        pygame.init()
        caption= "Pure Python Slicing Testbed - " + self.name
        pygame.display.set_caption(caption)

        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.font = pygame.font.Font(None, 15)

        self.controller = s2.SliceController(self.world, params=params,
                                             mode=self.mode,
                                             commit_path=self.commit_path,
                                             drag=self.drag)

    @property
    def now(self):
        return pygame.time.get_ticks() / 1000.0

    def run(self):
        """
        Main loop.

        Updates the world and then the screen.
        """

        running = True
        clock = pygame.time.Clock()
        while running:
            for event in pygame.event.get():
                if event.type == QUIT or (event.type == KEYDOWN and event.key == K_ESCAPE):
                    running=False
                elif event.type == MOUSEBUTTONDOWN and event.button == 1:
                    self.mouse_down(Vec2(*event.pos))
                elif event.type == MOUSEBUTTONUP and event.button == 1:
                    self.mouse_up(Vec2(*event.pos))
                elif event.type == MOUSEMOTION:
                    self.mouse_move(Vec2(*event.pos))

            self.screen.fill((0, 0, 0))

            self.text_line=15

            self.pre_step()

            # Step the world
            self.world.step(TIMESTEP)
            self.remove_lost_bodies()

            draw_world(self.screen, self.world)

            now = self.now
            self.controller.update(now)
            draw_strokes(self.screen, self.controller.history, now)

            self.post_step()

            # Draw the name of the test running
            self.print_(self.name, (127,127,255))

            if self.description:
                for s in self.description.split('\n'):
                    self.print_(s, (127,255,127))

            pygame.display.flip()
            clock.tick(TARGET_FPS)
            self.fps = clock.get_fps()

    def remove_lost_bodies(self):
        """Forget fragments that drifted far out of the window"""
        bounds = AABB((-SCREEN_WIDTH, -SCREEN_HEIGHT), (2 * SCREEN_WIDTH, 2 * SCREEN_HEIGHT))
        for body in self.world.all_bodies():
            if not body.static and not bounds.contains_point(body.position):
                self.world.destroy_body(body)

    def print_(self, str, color=(229,153,153,255)):
        """
        Draw some text at the top status lines
        and advance to the next line.
        """
        self.screen.blit(self.font.render(str, True, color), (5,self.text_line))
        self.text_line += 15

    def mouse_down(self, p):
        self.controller.pointer_down(p, self.now)

    def mouse_up(self, p):
        events = self.controller.pointer_up(p, self.now)
        for event in events:
            self.body_cut(event)

    def mouse_move(self, p):
        self.controller.pointer_move(p, self.now)

    # -- for the subclasses to implement --
    def pre_step(self):
        """Called before a physics step."""
        pass

    def post_step(self):
        """Called after a physics step."""
        pass

    def body_cut(self, event):
        """A body was cut; event is a SliceEvent"""
        for body in event.bodies:
            body.user_data = event.body.user_data

def main(test_class):
    """
    Loads the test class and executes it.
    """
    logging.basicConfig(level=logging.INFO, format='%(name)s: %(message)s')
    print("Loading %s..." % test_class.name)
    test = test_class()
    test.run()
