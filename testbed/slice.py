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

class Slice(Framework):
    name="Slice"
    description='Drag across a box to cut it in two.\nDrag a box to move it.'
    mode=s2.SliceController.SEGMENT
    def __init__(self):
        # Tuned for pixels per second; fragments pop upwards
        params=s2.SliceParams(split_force=120.0, slice_force_factor=60.0)
        super(Slice, self).__init__(params)

        self.world.create_box((400, 250), 40, 40, user_data=(127, 127, 230, 255))
        self.world.create_box((500, 150), 40, 40, user_data=(230, 127, 127, 255))

    def body_cut(self, event):
        super(Slice, self).body_cut(event)
        print('Cut into %d pieces (mass %s)' % (len(event.bodies),
              ', '.join('%.2f' % f.mass for f in event.fragments)))

if __name__=="__main__":
     main(Slice)
