# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""2D geometry primitives

flatmath provides a planar angle, a 2D vector and an axis-aligned rectangle,
with their arithmetic, trigonometric and set-algebraic operations.
Interoperability with the popular pygame library (https://github.com/pygame/pygame/)
is provided for vectors and rects.

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.
This program is distributed in the hope that it will be useful, but WITHOUT
ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with
this program. If not, see <http://www.gnu.org/licenses/>.
"""

from __future__ import annotations

__all__ = ["Angle", "Rect", "Vector2"]

__author__ = "FrankySnow9"
__contact__ = "clairicia.rcj.francis@gmail.com"
__copyright__ = "Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine"
__credits__ = ["FrankySnow9"]
__deprecated__ = False
__email__ = "clairicia.rcj.francis@gmail.com"
__license__ = "GNU GPL v3.0"
__maintainer__ = "FrankySnow9"
__status__ = "Development"
__version__ = "1.0.0.dev1"

import os
import sys

############ Environment initialization ############
if sys.version_info < (3, 10):
    raise ImportError(
        "This library must be run with python >= 3.10 (actual={}.{}.{})".format(*sys.version_info[0:3]),
        name=__name__,
        path=__file__,
    )

from .environ import check_environment

check_environment()

del check_environment

############ Package initialization ############
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

try:
    import pygame
except ModuleNotFoundError as exc:
    raise ModuleNotFoundError(
        "'pygame' package must be installed in order to use flatmath",
        name=exc.name,
        path=exc.path,
    ) from exc

del pygame

from .math.angle import Angle
from .math.rect import Rect
from .math.vector2 import Vector2

############ Cleanup ############
del os, sys
