#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# C++ version Copyright (c) 2006-2007 Erin Catto http://www.box2d.org
# Python version Copyright (c) 2010 Ken Lauer / sirkne at gmail dot com
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

from framework import *

class Carve(Framework):
    name="Carve"
    description='Swipe quickly through a shape to carve it.\nEvery piece of the stroke cuts.'
    mode=s2.SliceController.PATH
    commit_path=True
    def __init__(self):
        params=s2.SliceParams.carve(split_force=180.0, slice_force_factor=120.0)
        super(Carve, self).__init__(params)

        self.world.create_box((400, 250), 40, 40)
        self.world.create_box((500, 150), 40, 40)

        # A concave L shape
        self.world.create_body([(200, 300), (320, 300), (320, 340),
                                (240, 340), (240, 420), (200, 420)],
                               user_data=(127, 230, 127, 255))

    def body_cut(self, event):
        super(Carve, self).body_cut(event)
        if event.unresolved:
            print('Unresolved stroke segments: %s' % event.unresolved)

if __name__=="__main__":
     main(Carve)
