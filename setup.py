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

from setuptools import setup

__author__='pyslice2d developers'
__license__='zlib'
__date__="$Date$"
__version__="$Revision$"

package_name = 'pyslice2d'
version = '0.1.0'

pygame_url = "http://www.pygame.org"

LONG_DESCRIPTION = \
"""%s

   Runtime slicing of 2D rigid polygons in pure Python.

   A cut stroke partitions simple polygons into fragments and gives each
   fragment a velocity, angular velocity and force derived from the body
   it came from.

   After installing please be sure to try out the testbed demos.
   The demos require pygame: %s
    """ % (package_name, pygame_url)

CLASSIFIERS = [
    "Development Status :: 3 - Alpha",
    "Topic :: Software Development :: Libraries",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment :: Simulation",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: zlib/libpng License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    ]

setup(name=package_name,
      version=version,
      author=__author__,
      description='2D polygon slicing in Pure Python',
      license='zlib',
      long_description=LONG_DESCRIPTION,
      classifiers=CLASSIFIERS,
      test_suite='tests',
      platforms='any',
      packages=[package_name],
      package_dir={ package_name : package_name },
      python_requires='>=3.7',
      extras_require={
          'testbed': ['pygame>=2.1'],
          'test': ['pytest'],
      },
     )
