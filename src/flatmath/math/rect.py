# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Rect module"""

from __future__ import annotations

__all__ = ["Rect"]

import math
import sys
from collections.abc import Iterable
from typing import Any, Final, SupportsIndex

from pygame.rect import Rect as _PygameRect
from typing_extensions import Self, final

from .common import resolve_epsilon
from .vector2 import Vector2

_MAX: Final[float] = sys.float_info.max


@final
class Rect:
    """
    An axis-aligned rectangle stored as (left, top, right, bottom) bounds.

    'top' is the larger y bound and 'bottom' the smaller one. A rect is valid
    when left <= right and bottom <= top; invalid rects are legal values
    (see null() and intersect()).
    """

    __slots__ = ("left", "top", "right", "bottom")

    left: float
    top: float
    right: float
    bottom: float

    def __init__(self, left: float = 0.0, top: float = 0.0, right: float = 0.0, bottom: float = 0.0) -> None:
        self.left = float(left)
        self.top = float(top)
        self.right = float(right)
        self.bottom = float(bottom)

    @classmethod
    def from_bounds(cls, left: float, top: float, right: float, bottom: float) -> Self:
        return cls(left, top, right, bottom)

    @classmethod
    def empty(cls) -> Self:
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def infinite(cls) -> Self:
        return cls(left=-_MAX, top=_MAX, right=_MAX, bottom=-_MAX)

    @classmethod
    def null(cls) -> Self:
        """
        An invalid rect which is the neutral element of combine():
        Rect.null() | r == r for any valid rect r.
        """
        return cls(left=_MAX, top=-_MAX, right=-_MAX, bottom=_MAX)

    @classmethod
    def from_points(cls, points: Iterable[Vector2 | tuple[float, float]], /) -> Self:
        rect = cls.null()
        for point in points:
            rect.combine(point if isinstance(point, Vector2) else Vector2.from_pair(point))
        return rect

    @classmethod
    def from_pygame(cls, rect: _PygameRect, /) -> Self:
        return cls(left=rect.left, top=rect.bottom, right=rect.right, bottom=rect.top)

    def to_pygame(self) -> _PygameRect:
        left = math.floor(self.left)
        bottom = math.floor(self.bottom)
        return _PygameRect(left, bottom, math.ceil(self.right) - left, math.ceil(self.top) - bottom)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(left={self.left!r}, top={self.top!r}, right={self.right!r}, bottom={self.bottom!r})"

    def __reduce_ex__(self, __protocol: SupportsIndex) -> str | tuple[Any, ...]:
        return type(self), (self.left, self.top, self.right, self.bottom)

    def __copy__(self) -> Self:
        return type(self)(self.left, self.top, self.right, self.bottom)

    def copy(self) -> Self:
        return self.__copy__()

    ############ Predicates ############

    def is_valid(self) -> bool:
        return self.left <= self.right and self.bottom <= self.top

    def is_finite(self) -> bool:
        return self.width() < _MAX and self.height() < _MAX

    def is_empty(self) -> bool:
        return self.width() == 0 and self.height() == 0

    def contains(self, point: Vector2 | tuple[float, float], /) -> bool:
        if not isinstance(point, Vector2):
            point = Vector2.from_pair(point)
        return self.left <= point.x <= self.right and self.bottom <= point.y <= self.top

    def __contains__(self, point: object, /) -> bool:
        if isinstance(point, Vector2):
            return self.contains(point)
        if isinstance(point, tuple) and len(point) == 2:
            return self.contains(point)
        return False

    def overlaps(self, other: Rect, /) -> bool:
        """
        Return True if the rects share any area or boundary, including when one
        of them fully contains the other.

        An invalid rect (such as Rect.null()) never overlaps anything.
        """
        if not (self.is_valid() and other.is_valid()):
            return False
        overlaps_horizontally = (self.left <= other.left <= self.right) or (self.left <= other.right <= self.right)
        overlaps_vertically = (self.bottom <= other.bottom <= self.top) or (self.bottom <= other.top <= self.top)
        inside_horizontally = (other.left >= self.left and other.right <= self.right) or (
            other.left <= self.left and other.right >= self.right
        )
        inside_vertically = (other.bottom >= self.bottom and other.top <= self.top) or (
            other.bottom <= self.bottom and other.top >= self.top
        )

        return (overlaps_horizontally or inside_horizontally) and (overlaps_vertically or inside_vertically)

    def approx_equal(self, other: Rect, /, epsilon: float | None = None) -> bool:
        epsilon = resolve_epsilon(epsilon)
        return (
            abs(self.left - other.left) < epsilon
            and abs(self.top - other.top) < epsilon
            and abs(self.right - other.right) < epsilon
            and abs(self.bottom - other.bottom) < epsilon
        )

    ############ Dimensions ############

    def width(self) -> float:
        return self.right - self.left

    def height(self) -> float:
        return self.top - self.bottom

    def area(self) -> float:
        return self.width() * self.height()

    def size(self) -> tuple[float, float]:
        return (self.width(), self.height())

    def center(self) -> Vector2:
        return Vector2((self.right + self.left) / 2, (self.top + self.bottom) / 2)

    def top_left(self) -> Vector2:
        return Vector2(self.left, self.top)

    def top_right(self) -> Vector2:
        return Vector2(self.right, self.top)

    def bottom_left(self) -> Vector2:
        return Vector2(self.left, self.bottom)

    def bottom_right(self) -> Vector2:
        return Vector2(self.right, self.bottom)

    ############ Transformations ############

    def inflate_x(self, dx: float, /) -> None:
        half_dx = dx / 2
        self.left -= half_dx
        self.right += half_dx

    def inflate_y(self, dy: float, /) -> None:
        half_dy = dy / 2
        self.bottom -= half_dy
        self.top += half_dy

    def inflate(self, dx: float, dy: float, /) -> None:
        self.inflate_x(dx)
        self.inflate_y(dy)

    def inflated(self, dx: float, dy: float, /) -> Self:
        rect = self.copy()
        rect.inflate(dx, dy)
        return rect

    def translate(self, translation: Vector2, /) -> None:
        self.left += translation.x
        self.right += translation.x
        self.top += translation.y
        self.bottom += translation.y

    def translated(self, translation: Vector2, /) -> Self:
        return type(self)(
            left=self.left + translation.x,
            top=self.top + translation.y,
            right=self.right + translation.x,
            bottom=self.bottom + translation.y,
        )

    ############ Combination ############

    def combine(self, other: Rect | Vector2, /) -> None:
        if isinstance(other, Vector2):
            self.left = min(self.left, other.x)
            self.top = max(self.top, other.y)
            self.right = max(self.right, other.x)
            self.bottom = min(self.bottom, other.y)
        else:
            self.left = min(self.left, other.left)
            self.top = max(self.top, other.top)
            self.right = max(self.right, other.right)
            self.bottom = min(self.bottom, other.bottom)

    def combined(self, other: Rect | Vector2, /) -> Self:
        rect = self.copy()
        rect.combine(other)
        return rect

    def intersect(self, other: Rect, /) -> None:
        """
        Shrink the rect to the region shared with 'other'.
        The result is invalid if the rects do not overlap.
        """
        self.left = max(self.left, other.left)
        self.top = min(self.top, other.top)
        self.right = min(self.right, other.right)
        self.bottom = max(self.bottom, other.bottom)

    def intersected(self, other: Rect, /) -> Self:
        rect = self.copy()
        rect.intersect(other)
        return rect

    def __or__(self, other: Rect | Vector2, /) -> Self:
        if not isinstance(other, (Rect, Vector2)):
            return NotImplemented
        return self.combined(other)

    def __ior__(self, other: Rect | Vector2, /) -> Self:
        if not isinstance(other, (Rect, Vector2)):
            return NotImplemented
        self.combine(other)
        return self

    def __and__(self, other: Rect, /) -> Self:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.intersected(other)

    def __iand__(self, other: Rect, /) -> Self:
        if not isinstance(other, Rect):
            return NotImplemented
        self.intersect(other)
        return self

    ############ Comparison ############

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (
            self.left == other.left
            and self.top == other.top
            and self.right == other.right
            and self.bottom == other.bottom
        )
