# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Angle module"""

from __future__ import annotations

__all__ = ["Angle"]

import math
from numbers import Real
from typing import Any, SupportsIndex

from typing_extensions import Self, final

from .common import TWO_PI, ieee_divide, resolve_epsilon


def _radians_of(value: Any) -> float | None:
    if isinstance(value, Angle):
        return value._radians
    if isinstance(value, Real):
        return float(value)
    return None


@final
class Angle:
    """
    A planar angle stored in radians.

    The stored value is never normalized implicitly: arithmetic works on the raw
    radian value, and normalize()/normalized() reduce it into [0, 2*pi).
    """

    __slots__ = ("_radians",)

    def __init__(self, radians: float = 0.0, /) -> None:
        self._radians: float = float(radians)

    @classmethod
    def from_degrees(cls, degrees: float, /) -> Self:
        return cls(math.radians(degrees))

    @classmethod
    def from_radians(cls, radians: float, /) -> Self:
        return cls(radians)

    @classmethod
    def from_atan2(cls, y: float, x: float, /) -> Self:
        return cls(math.atan2(y, x))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._radians!r})"

    def __float__(self) -> float:
        return self._radians

    def __reduce_ex__(self, __protocol: SupportsIndex) -> str | tuple[Any, ...]:
        return type(self), (self._radians,)

    def __copy__(self) -> Self:
        return type(self)(self._radians)

    def copy(self) -> Self:
        return self.__copy__()

    def degrees(self) -> float:
        return math.degrees(self._radians)

    def radians(self) -> float:
        return self._radians

    def cos(self) -> float:
        return math.cos(self._radians)

    def sin(self) -> float:
        return math.sin(self._radians)

    def tan(self) -> float:
        return math.tan(self._radians)

    def approx_equal(self, other: Angle, /, epsilon: float | None = None) -> bool:
        """
        Compare the raw radian values: two angles 2*pi apart are not equal unless
        both are normalized first.
        """
        return abs(self._radians - other._radians) < resolve_epsilon(epsilon)

    @staticmethod
    def _normalize_radians(radians: float) -> float:
        if not math.isfinite(radians):
            return math.nan
        radians = math.fmod(radians, TWO_PI)
        if radians < 0:
            radians += TWO_PI
        return radians

    def normalize(self) -> None:
        self._radians = self._normalize_radians(self._radians)

    def normalized(self) -> Self:
        return type(self)(self._normalize_radians(self._radians))

    ############ Comparison ############

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians == other._radians

    def __lt__(self, other: Angle, /) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians < other._radians

    def __le__(self, other: Angle, /) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians <= other._radians

    def __gt__(self, other: Angle, /) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians > other._radians

    def __ge__(self, other: Angle, /) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians >= other._radians

    ############ Arithmetic ############

    def __neg__(self) -> Self:
        return type(self)(-self._radians)

    def __pos__(self) -> Self:
        return type(self)(self._radians)

    def __abs__(self) -> Self:
        return type(self)(abs(self._radians))

    def __add__(self, other: Angle | float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        return type(self)(self._radians + radians)

    def __radd__(self, other: float, /) -> Self:
        return self.__add__(other)

    def __sub__(self, other: Angle | float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        return type(self)(self._radians - radians)

    def __rsub__(self, other: float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        return type(self)(radians - self._radians)

    def __mul__(self, other: Angle | float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        return type(self)(self._radians * radians)

    def __rmul__(self, other: float, /) -> Self:
        return self.__mul__(other)

    def __truediv__(self, other: Angle | float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        return type(self)(ieee_divide(self._radians, radians))

    def __iadd__(self, other: Angle | float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        self._radians += radians
        return self

    def __isub__(self, other: Angle | float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        self._radians -= radians
        return self

    def __imul__(self, other: Angle | float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        self._radians *= radians
        return self

    def __itruediv__(self, other: Angle | float, /) -> Self:
        radians = _radians_of(other)
        if radians is None:
            return NotImplemented
        self._radians = ieee_divide(self._radians, radians)
        return self
