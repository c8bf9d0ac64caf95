# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Point set helpers module"""

from __future__ import annotations

__all__ = [
    "compute_bounding_rect",
    "compute_vertices_from_rect",
    "get_vertices_center",
    "rotate_points",
]

from collections.abc import Sequence
from typing import TypeAlias

from .common import AngleLike
from .rect import Rect
from .vector2 import Vector2

_FPoint: TypeAlias = tuple[float, float]


def compute_bounding_rect(vertices: Sequence[_FPoint] | Sequence[Vector2]) -> Rect:
    # Rect.null() for an empty sequence
    return Rect.from_points(vertices)


def get_vertices_center(vertices: Sequence[_FPoint] | Sequence[Vector2]) -> Vector2:
    if not vertices:
        return Vector2.zero()
    return compute_bounding_rect(vertices).center()


def rotate_points(
    points: Sequence[_FPoint] | Sequence[Vector2],
    angle: float | AngleLike,
    pivot: _FPoint | Vector2 | None = None,
) -> tuple[Vector2, ...]:
    if not points:
        return ()
    if pivot is None:
        pivot = get_vertices_center(points)
    elif not isinstance(pivot, Vector2):
        pivot = Vector2.from_pair(pivot)
    return tuple(pivot + (Vector2(*point) - pivot).rotated(angle) for point in points)


def compute_vertices_from_rect(rect: Rect, angle: float | AngleLike = 0) -> tuple[()] | tuple[Vector2, Vector2, Vector2, Vector2]:
    """
    Return the corners of 'rect' in the order top-left, top-right, bottom-right,
    bottom-left, rotated by 'angle' around the rect center.
    """
    if not rect.is_valid():
        return ()

    corners = (rect.top_left(), rect.top_right(), rect.bottom_right(), rect.bottom_left())

    return rotate_points(corners, angle, rect.center())  # type: ignore[return-value]
