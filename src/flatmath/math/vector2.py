# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Vector2 module"""

from __future__ import annotations

__all__ = ["Vector2"]

import math
import warnings
from collections.abc import Iterator
from numbers import Real
from typing import Any, SupportsIndex, overload

from pygame.math import Vector2 as _PygameVector2
from typing_extensions import Self, final

from ..environ import degenerate_warnings_enabled
from ..warnings import DegenerateVectorWarning
from .angle import Angle
from .common import AngleLike, ieee_divide, resolve_angle, resolve_epsilon


@final
class Vector2:
    """
    A 2D vector with float components.

    cross() follows the x1*y2 - y1*x2 convention, so a positive cross product,
    a positive angle_between() and orthogonal() are all counterclockwise.
    """

    __slots__ = ("x", "y")

    x: float
    y: float

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def zero(cls) -> Self:
        return cls(0.0, 0.0)

    @classmethod
    def from_pair(cls, pair: tuple[float, float], /) -> Self:
        x, y = pair
        return cls(x, y)

    @classmethod
    def from_pygame(cls, vector: _PygameVector2, /) -> Self:
        return cls(vector.x, vector.y)

    def to_pygame(self) -> _PygameVector2:
        return _PygameVector2(self.x, self.y)

    def as_pair(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r})"

    def __reduce_ex__(self, __protocol: SupportsIndex) -> str | tuple[Any, ...]:
        return type(self), (self.x, self.y)

    def __copy__(self) -> Self:
        return type(self)(self.x, self.y)

    def copy(self) -> Self:
        return self.__copy__()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    @overload
    def __getitem__(self, index: int, /) -> float: ...

    @overload
    def __getitem__(self, index: slice, /) -> tuple[float, ...]: ...

    def __getitem__(self, index: int | slice, /) -> float | tuple[float, ...]:
        return self.as_pair()[index]

    ############ Magnitude ############

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def set_length(self, new_length: float, /) -> None:
        length = math.hypot(self.x, self.y)
        if length == 0:
            if degenerate_warnings_enabled():
                warnings.warn("Cannot set the length of a zero-length vector", category=DegenerateVectorWarning, stacklevel=2)
            return
        multiplier = new_length / length
        self.x *= multiplier
        self.y *= multiplier

    def normalize(self) -> None:
        length = math.hypot(self.x, self.y)
        if length != 0:
            self.x /= length
            self.y /= length

    def normalized(self) -> Self:
        length = math.hypot(self.x, self.y)
        if length == 0:
            return type(self).zero()
        return type(self)(self.x / length, self.y / length)

    ############ Products and distances ############

    def dot(self, other: Vector2, /) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2, /) -> float:
        return self.x * other.y - self.y * other.x

    def orthogonal(self) -> Self:
        return type(self)(-self.y, self.x)

    def distance_squared(self, other: Vector2, /) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: Vector2, /) -> float:
        return math.sqrt(self.distance_squared(other))

    ############ Angles ############

    def angle(self) -> Angle:
        return Angle.from_atan2(self.y, self.x).normalized()

    def angle_between(self, other: Vector2, /) -> Angle:
        return Angle.from_atan2(self.cross(other), self.dot(other))

    def rotate(self, angle: float | AngleLike, /) -> None:
        cos, sin = resolve_angle(angle)
        x, y = self.x, self.y
        self.x = x * cos - y * sin
        self.y = x * sin + y * cos

    def rotated(self, angle: float | AngleLike, /) -> Self:
        cos, sin = resolve_angle(angle)
        x, y = self.x, self.y
        return type(self)(x * cos - y * sin, x * sin + y * cos)

    def approx_equal(self, other: Vector2, /, epsilon: float | None = None) -> bool:
        epsilon = resolve_epsilon(epsilon)
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    ############ Comparison ############

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    ############ Arithmetic ############

    def __neg__(self) -> Self:
        return type(self)(-self.x, -self.y)

    def __pos__(self) -> Self:
        return type(self)(self.x, self.y)

    def __add__(self, other: Vector2 | float, /) -> Self:
        if isinstance(other, Vector2):
            return type(self)(self.x + other.x, self.y + other.y)
        if isinstance(other, Real):
            return type(self)(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: Vector2 | float, /) -> Self:
        if isinstance(other, Vector2):
            return type(self)(self.x - other.x, self.y - other.y)
        if isinstance(other, Real):
            return type(self)(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other: Vector2 | float, /) -> Self:
        if isinstance(other, Vector2):
            return type(self)(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return type(self)(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float, /) -> Self:
        if isinstance(other, Real):
            return type(self)(other * self.x, other * self.y)
        return NotImplemented

    def __truediv__(self, other: float, /) -> Self:
        if isinstance(other, Real):
            return type(self)(ieee_divide(self.x, other), ieee_divide(self.y, other))
        return NotImplemented

    def __iadd__(self, other: Vector2 | float, /) -> Self:
        if isinstance(other, Vector2):
            self.x += other.x
            self.y += other.y
        elif isinstance(other, Real):
            self.x += other
            self.y += other
        else:
            return NotImplemented
        return self

    def __isub__(self, other: Vector2 | float, /) -> Self:
        if isinstance(other, Vector2):
            self.x -= other.x
            self.y -= other.y
        elif isinstance(other, Real):
            self.x -= other
            self.y -= other
        else:
            return NotImplemented
        return self

    def __imul__(self, other: Vector2 | float, /) -> Self:
        if isinstance(other, Vector2):
            self.x *= other.x
            self.y *= other.y
        elif isinstance(other, Real):
            self.x *= other
            self.y *= other
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other: float, /) -> Self:
        if not isinstance(other, Real):
            return NotImplemented
        self.x = ieee_divide(self.x, other)
        self.y = ieee_divide(self.y, other)
        return self
