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

from . import settings
from . import geometry
from . import partition
from . import kinematics
from . import world
from . import controller

from .common import (
            # Exceptions
           SliceError, DegenerateInputError, PhysicsError, LockedError,

           # Classes
           Vec2, Transform, AABB,

           # Functions
           scalar_cross, clamp, clamp_magnitude, distance, distance_squared
          )
from .geometry import (MassData, segment_intersection, distance_along,
                       is_simple_polygon, validate_polygon, polygon_area,
                       signed_area, compute_centroid, compute_mass)
from .partition import (CutSegment, SliceResult, slice_polygon, partition)
from .kinematics import (SliceParams, OriginalBody, FragmentBody, synthesize)
from .simulation import Simulation
from .world import (Body, World, DragConstraint)
from .controller import (StrokeHistory, SliceEvent, SliceController)
