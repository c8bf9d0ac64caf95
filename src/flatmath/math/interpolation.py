# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Interpolation utils module"""

from __future__ import annotations

__all__ = ["angle_interpolation", "linear_interpolation", "vector_interpolation"]

import math

from .angle import Angle
from .common import TWO_PI
from .vector2 import Vector2


def _check_alpha(alpha: float) -> None:
    if not 0 <= alpha <= 1:
        raise ValueError(f"Invalid 'alpha' value range, expected 0 <= alpha <= 1, got {alpha}")


def linear_interpolation(start: float, end: float, alpha: float) -> float:
    _check_alpha(alpha)
    if start == end:
        return start
    return start * (1.0 - alpha) + end * alpha


def angle_interpolation(start: Angle, end: Angle, alpha: float) -> Angle:
    """
    Interpolate along the shortest arc between 'start' and 'end'.
    The returned angle is normalized.
    """
    _check_alpha(alpha)
    shortest_arc = math.fmod(end.radians() - start.radians() + math.pi, TWO_PI)
    if shortest_arc < 0:
        shortest_arc += TWO_PI
    shortest_arc -= math.pi
    return Angle(start.radians() + shortest_arc * alpha).normalized()


def vector_interpolation(start: Vector2, end: Vector2, alpha: float) -> Vector2:
    _check_alpha(alpha)
    return Vector2(
        start.x * (1.0 - alpha) + end.x * alpha,
        start.y * (1.0 - alpha) + end.y * alpha,
    )
