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

# Global tuning constants. Scene units are screen pixels with the y axis
# pointing down, time is in seconds.

import sys
import math

PI = math.pi
FLOAT_EPSILON = sys.float_info.epsilon
MAX_FLOAT = sys.float_info.max

del math
del sys

# Geometry

# Two intersection candidates closer than this are treated as the same
# point. Also used as the parametric tolerance of segment tests.
EPSILON = 1e-10

# Minimum number of distinct vertices a fragment needs to be kept.
MIN_POLYGON_VERTICES = 3

# The fragments of a cut must add up to the area of the original polygon,
# within this fraction of it.
AREA_TOLERANCE = 1e-6

# Slicing

# Outward velocity given to every fragment along the direction from the
# original centroid to its own centroid. Acts as the knife's bevel width.
SPLIT_FORCE = 2.0

# Scales the force transferred through the cut by the fragment mass and the
# (clamped) length of the cut.
SLICE_FORCE_FACTOR = 0.00015

# Longer strokes than this do not inject more energy.
MAX_SLICE_VECTOR_MAGNITUDE = 500.0

# Forces not pointing along UP_VECTOR are attenuated when UPWARD_BIAS is on.
UP_VECTOR = (0.0, -1.0)
UPWARD_BIAS = True

# Tuning used by the freehand carve mode.
CARVE_SPLIT_FORCE = 3.0
CARVE_SLICE_FORCE_FACTOR = 0.0003

# Strokes fade out and are forgotten after this many seconds.
PATH_AGE_LIMIT = 0.5

# Dynamics

GRAVITY = (0.0, 980.0)
DEFAULT_DENSITY = 0.001

# The maximum translation of a body per step. This limit is very large and
# is used to prevent numerical problems.
MAX_TRANSLATION = 200.0
MAX_TRANSLATION_SQR = MAX_TRANSLATION**2

# The maximum rotation of a body per step.
MAX_ROTATION = 0.5 * PI
MAX_ROTATION_SQR = MAX_ROTATION**2

# Drag constraint

# Soft spring pulling a grabbed body towards the pointer. Slicing switches
# it off so that a stroke never drags a body along.
DRAG_FREQUENCY = 5.0
DRAG_DAMPING_RATIO = 0.7
DRAG_MAX_FORCE_PER_MASS = 1000.0
