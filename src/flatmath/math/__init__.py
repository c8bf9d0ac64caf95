# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""flatmath's math module"""

from __future__ import annotations

__all__ = [
    "EPS",
    "HALF_PI",
    "TWO_PI",
    "Angle",
    "AngleLike",
    "Normalizable",
    "Rect",
    "Rotatable",
    "SupportsAlmostEqual",
    "Vector2",
    "almost_equal",
    "angle_interpolation",
    "compute_bounding_rect",
    "compute_vertices_from_rect",
    "get_vertices_center",
    "ieee_divide",
    "linear_interpolation",
    "resolve_angle",
    "resolve_epsilon",
    "rotate_points",
    "vector_interpolation",
]


############ Package initialization ############
from .angle import *
from .area import *
from .common import *
from .interpolation import *
from .rect import *
from .vector2 import *
